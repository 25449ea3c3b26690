"""Collection of annotations to declare how the locator should call an implementation."""

from typing import Callable, TypeVar

from .config import DEFAULT_SIGIL
from .metadata import _gen_meta

T = TypeVar("T")


def params(*names: str) -> Callable[[T], T]:
    """Decorator to declare the ordered parameter names of a class or factory.

    Names starting with the locator's sigil are dependencies, resolved by the
    type name that follows the sigil; any other name is looked up in the
    literal parameters of the registration.

    @inject.params("$logger", "level")
    class Handler:
        def __init__(self, logger, level): ...
    """
    for name_ in names:
        if not isinstance(name_, str) or not name_:
            raise TypeError(f"parameter names must be non-empty strings, got {name_!r}")

    def wrap(implementation: T) -> T:
        """Decorate an implementation with parameter names."""
        _gen_meta(implementation).update(parameter_names=names)
        return implementation

    return wrap


def source(text: str) -> Callable[[T], T]:
    """Decorator to attach a textual constructor declaration to a class or factory.

    The declaration is scanned when the implementation is registered, for example
    "function Handler($logger, level) {}" declares the parameters `$logger` and
    `level`. Names declared with params() take precedence over the declaration.
    """
    if not isinstance(text, str):
        raise TypeError(f"constructor source must be a string, got {text!r}")

    def wrap(implementation: T) -> T:
        """Decorate an implementation with a constructor declaration."""
        _gen_meta(implementation).update(source=text)
        return implementation

    return wrap


def dependency(type_name: str, sigil: str = DEFAULT_SIGIL) -> str:
    """Return the parameter name that requests the given type name."""
    return f"{sigil}{type_name}"
