import abc
import inspect
from typing import Any, Callable, List, Optional, Sequence, Type

from attr import define, field

from .errors import InvalidImplementationError
from .types import Arg, Kwargs, ParameterNames


class _NoValue:
    """
    Placeholder for a literal parameter that has no configured value.
    DO NOT instantiate this class directly, instead use the `NO_VALUE` singleton.
    """

    def __bool__(self):
        return False

    def __repr__(self):
        return "NO_VALUE"


# Placeholder for a literal parameter that has no configured value, and for a
# singleton registration that has not been constructed yet.
NO_VALUE = _NoValue()


_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _positional_defaults(target: Any) -> List[Arg]:
    """Defaults of the positional parameters of target, NO_VALUE where there is none."""
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return []
    return [
        NO_VALUE if parameter.default is inspect.Parameter.empty else parameter.default
        for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL_KINDS
    ]


def _positional_args(target: Any, args: Sequence[Arg]) -> List[Arg]:
    """Replace NO_VALUE markers so the target's own defaults apply.

    Trailing markers are dropped. A marker before a supplied argument takes the
    default of the positional parameter at the same index, or None if that
    parameter has no default.
    """
    last = len(args)
    while last and args[last - 1] is NO_VALUE:
        last -= 1
    args = list(args[:last])
    if not any(arg is NO_VALUE for arg in args):
        return args

    defaults = _positional_defaults(target)
    for index, arg in enumerate(args):
        if arg is not NO_VALUE:
            continue
        default = defaults[index] if index < len(defaults) else NO_VALUE
        args[index] = None if default is NO_VALUE else default
    return args


class Implementation(abc.ABC):
    """How a registration produces its instances."""

    @property
    @abc.abstractmethod
    def target(self) -> Any:
        """The object that was registered."""

    @abc.abstractmethod
    def construct(self, args: Sequence[Arg]) -> Any:
        """Produce an instance from positional arguments in declared order."""


@define(frozen=True)
class ClassImplementation(Implementation):
    cls: Type[Any]

    @property
    def target(self) -> Any:
        return self.cls

    def construct(self, args: Sequence[Arg]) -> Any:
        return self.cls(*_positional_args(self.cls, args))


@define(frozen=True)
class FactoryImplementation(Implementation):
    func: Callable[..., Any]

    @property
    def target(self) -> Any:
        return self.func

    def construct(self, args: Sequence[Arg]) -> Any:
        return self.func(*_positional_args(self.func, args))


@define(frozen=True)
class PrebuiltInstance(Implementation):
    instance: Any

    @property
    def target(self) -> Any:
        return self.instance

    def construct(self, args: Sequence[Arg]) -> Any:
        return self.instance


def implementation_for(type_name: Optional[str], implementation: Any) -> Implementation:
    """Choose the implementation variant for a registered callable.

    Raises:
        InvalidImplementationError: the implementation is not callable.
    """
    if inspect.isclass(implementation):
        return ClassImplementation(implementation)
    if callable(implementation):
        return FactoryImplementation(implementation)
    raise InvalidImplementationError(type_name, implementation)


def _set_once(registration: "Registration", attribute: Any, value: Any) -> Any:
    if registration.single_instance is not NO_VALUE:
        raise AttributeError(f"{attribute.name} is already set for {registration!r}")
    return value


@define(eq=False)
class Registration:
    """Binds an implementation to its parameter names, literal values and singleton state."""

    implementation: Implementation
    parameter_names: ParameterNames = field(factory=tuple, converter=tuple)
    parameters: Kwargs = field(factory=dict, converter=dict)
    is_singleton: bool = field(default=False, converter=bool)
    single_instance: Any = field(default=NO_VALUE, on_setattr=_set_once)

    @property
    def has_instance(self) -> bool:
        return self.single_instance is not NO_VALUE

    def _cache(self, instance: Any) -> None:
        if not self.has_instance:
            self.single_instance = instance
