import re
from typing import Any, Callable, Optional
from unittest.mock import MagicMock

from typing_extensions import TypeAlias

from .config import DEFAULT_KEYWORD, DEFAULT_SIGIL, check_sigil
from .metadata import parameter_names_of
from .model import NO_VALUE, implementation_for
from .types import Kwargs, ParameterNamesLike

MockingFunction: TypeAlias = Callable[[str], Any]

DEFAULT_MOCKING_FUNCTION: MockingFunction = lambda type_name: MagicMock(name=type_name)


def mock(
    implementation: Callable[..., Any],
    parameters: Optional[Kwargs] = None,
    mocking_function: Optional[MockingFunction] = None,
    parameter_names: Optional[ParameterNamesLike] = None,
    sigil: str = DEFAULT_SIGIL,
    keyword: str = DEFAULT_KEYWORD,
) -> Any:
    """
    Construct an implementation without a locator, passing a mock for every
    dependency parameter and the given literal values for the other parameters.

    The mocking function receives the type name of the dependency (the parameter
    name without its sigil) and returns the object to pass.

    Raises:
        ValueError: the sigil is not a single non-word character.
    """
    check_sigil(sigil)
    mocking_f = mocking_function or DEFAULT_MOCKING_FUNCTION
    literals = parameters or {}
    dependency_pattern = re.compile(re.escape(sigil) + r"\w+")

    variant = implementation_for(None, implementation)
    names = parameter_names_of(implementation, parameter_names, keyword, sigil)

    args = []
    for name_ in names:
        if dependency_pattern.match(name_):
            args.append(mocking_f(name_[1:]))
        else:
            args.append(literals.get(name_, NO_VALUE))

    try:
        return variant.construct(args)
    except TypeError as error:
        raise TypeError(
            f"Unable to instantiate {implementation!r} with mocks. "
            "Provided arguments do not match its signature.\n"
            f"parameters: {list(names)}\n"
            f"arguments: {args}"
        ) from error
