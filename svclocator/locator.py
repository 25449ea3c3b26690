"""The locator maps type names to implementations and constructs their instances."""
import contextlib
import functools
import logging
import re
from threading import RLock
from typing import Any, Callable, Dict, Iterator, List, Optional, TypeVar

from typing_extensions import Concatenate, ParamSpec

from .config import LocatorConfigWrapper, LocatorInitConfig
from .errors import CyclicDependencyError, InvalidTypeNameError, NotRegisteredError
from .metadata import parameter_names_of
from .model import NO_VALUE, PrebuiltInstance, Registration, implementation_for
from .types import Kwargs, ParameterNames, ParameterNamesLike

LOG = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
P = ParamSpec("P")


def initialize(config: Optional[LocatorInitConfig] = None) -> "ServiceLocator":
    """Initialize a new service locator instance."""
    LOG.debug("initializing a new service locator instance")
    return ServiceLocator(config)


def _synchronized(
    func: Callable[Concatenate["ServiceLocator", P], R]
) -> Callable[Concatenate["ServiceLocator", P], R]:
    """Decorator to synchronize method access with a reentrant lock."""

    @functools.wraps(func)
    def wrapper(self: "ServiceLocator", *args: P.args, **kwargs: P.kwargs) -> R:
        with self._lock:
            return func(self, *args, **kwargs)

    return wrapper


def _check_type_name(type_name: Any) -> None:
    if not isinstance(type_name, str) or not type_name:
        raise InvalidTypeNameError(type_name)


class ServiceLocator:
    """Registers implementations by type name and resolves their instances.

    Every type name holds a list of registrations, most recent first. resolve()
    uses the most recent one, resolve_all() uses all of them. Parameters whose
    name starts with the dependency sigil (`$logger`) are resolved recursively
    by type name (`logger`); any other parameter is looked up in the literal
    values of the registration.
    """

    def __init__(self, config: Optional[LocatorInitConfig] = None):
        self._registrations: Dict[str, List[Registration]] = {}
        # type names being resolved by the active call chain
        self._resolving: List[str] = []
        self._config = LocatorConfigWrapper()

        self._lock = RLock()

        if config is not None:
            self._config._from_dict(config)

        self._dependency_pattern = re.compile(re.escape(self._config.sigil) + r"\w+")

        locator_type_name = self._config.locator_type_name
        if locator_type_name is not None:
            self.register_instance(locator_type_name, self)

    @property
    def config(self) -> LocatorConfigWrapper:
        return self._config

    @_synchronized
    def register(
        self,
        type_name: str,
        implementation: Callable[..., Any],
        parameters: Optional[Kwargs] = None,
        is_singleton: bool = False,
        parameter_names: Optional[ParameterNamesLike] = None,
    ) -> None:
        """Register a new implementation for a type name.

        Parameters:
            type_name: the name used to resolve instances of the implementation.
            implementation: the class or factory that creates instances.
            parameters: literal values for parameters that are not dependencies.
            is_singleton: if True only one instance is created, on first resolve,
                and returned by later calls.
            parameter_names: ordered parameter names of the implementation, when
                they should not be discovered from it.
        """
        _check_type_name(type_name)
        registration = Registration(
            implementation_for(type_name, implementation),
            self._parameter_names_of(implementation, parameter_names),
            parameters or {},
            is_singleton,
        )

        LOG.debug(
            "registering %s as %r (singleton=%s, parameters=%s)",
            implementation,
            type_name,
            registration.is_singleton,
            registration.parameter_names,
        )
        self._registrations.setdefault(type_name, []).insert(0, registration)

    @_synchronized
    def register_instance(self, type_name: str, instance: Any) -> None:
        """Register an already constructed instance for a type name.

        Parameters:
            type_name: the name used to resolve the instance.
            instance: the object returned by resolve until a newer registration
                shadows it.
        """
        _check_type_name(type_name)
        registration = Registration(
            PrebuiltInstance(instance),
            is_singleton=True,
            single_instance=instance,
        )

        LOG.debug("registering instance %r as %r", instance, type_name)
        self._registrations.setdefault(type_name, []).insert(0, registration)

    @_synchronized
    def resolve(self, type_name: str) -> Any:
        """Resolve an instance of the most recent registration of a type name.

        Raises:
            NotRegisteredError: the type name has no registrations.
            CyclicDependencyError: the type name depends on itself.
        """
        _check_type_name(type_name)
        registrations = self._registrations.get(type_name)
        if not registrations:
            raise NotRegisteredError(type_name)

        with self._resolution(type_name):
            return self._create_instance(registrations[0], type_name)

    @_synchronized
    def resolve_all(self, type_name: str, strict: Optional[bool] = None) -> List[Any]:
        """Resolve one instance per registration of a type name, most recent first.

        Parameters:
            type_name: the type name to resolve.
            strict: True to raise NotRegisteredError when the type name has no
                registrations, False to return an empty list instead. None uses
                the `strict_resolve_all` configuration (True by default).
        """
        _check_type_name(type_name)
        if strict is None:
            strict = self._config.strict_resolve_all

        registrations = self._registrations.get(type_name)
        if not registrations:
            if strict:
                raise NotRegisteredError(type_name)
            return []

        with self._resolution(type_name):
            return [
                self._create_instance(registration, type_name)
                for registration in list(registrations)
            ]

    @_synchronized
    def resolve_instance(
        self,
        implementation: Callable[..., Any],
        parameters: Optional[Kwargs] = None,
        parameter_names: Optional[ParameterNamesLike] = None,
    ) -> Any:
        """Construct an implementation once, resolving its dependencies.

        Nothing is registered or cached: every call constructs a new instance.
        """
        registration = Registration(
            implementation_for(None, implementation),
            self._parameter_names_of(implementation, parameter_names),
            parameters or {},
        )
        return self._create_instance(registration, None)

    @_synchronized
    def unregister(self, type_name: str, strict: bool = False) -> None:
        """Remove all registrations of a type name.

        Parameters:
            type_name: the type name to remove.
            strict: True to raise NotRegisteredError if there is nothing to remove.
        """
        _check_type_name(type_name)
        if strict and not self._registrations.get(type_name):
            raise NotRegisteredError(type_name)

        LOG.debug("unregistering %r", type_name)
        self._registrations[type_name] = []

    def _parameter_names_of(
        self, implementation: Any, parameter_names: Optional[ParameterNamesLike]
    ) -> ParameterNames:
        return parameter_names_of(
            implementation,
            parameter_names,
            keyword=self._config.keyword,
            sigil=self._config.sigil,
        )

    @contextlib.contextmanager
    def _resolution(self, type_name: str) -> Iterator[None]:
        """Track a type name on the resolution stack while it is being resolved."""
        if type_name in self._resolving:
            raise CyclicDependencyError(self._resolving + [type_name])

        self._resolving.append(type_name)
        try:
            yield
        finally:
            self._resolving.pop()

    def _create_instance(self, registration: Registration, type_name: Optional[str]) -> Any:
        if registration.is_singleton and registration.has_instance:
            return registration.single_instance

        args = [
            self._resolve_parameter(registration, name_, type_name)
            for name_ in registration.parameter_names
        ]

        LOG.debug("constructing %s for %r", registration.implementation.target, type_name)
        instance = registration.implementation.construct(args)

        if registration.is_singleton:
            registration._cache(instance)

        return instance

    def _resolve_parameter(
        self, registration: Registration, name_: str, type_name: Optional[str]
    ) -> Any:
        if self._dependency_pattern.match(name_):
            return self.resolve(name_[1:])
        if name_ in registration.parameters:
            return registration.parameters[name_]
        return self._config.get_parameters(type_name).get(name_, NO_VALUE)

    @_synchronized
    def __len__(self) -> int:
        return sum(1 for registrations in self._registrations.values() if registrations)

    @_synchronized
    def __contains__(self, type_name: Any) -> bool:
        """Check if a type name has at least one registration."""
        return isinstance(type_name, str) and bool(self._registrations.get(type_name))

    def __getitem__(self, type_name: str) -> Any:
        return self.resolve(type_name)

    @_synchronized
    def get(self, type_name: str, default: Optional[T] = None) -> Any:
        """Resolve a type name, or return default if it has no registrations.

        Errors raised while resolving a registered type name still propagate.
        """
        if type_name not in self:
            return default
        return self.resolve(type_name)
