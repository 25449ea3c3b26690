"""Exceptions raised by the service locator."""

from typing import Sequence


class LocatorError(Exception):
    """Base class for all service locator errors."""


class InvalidTypeNameError(LocatorError, TypeError):
    """The type name is not a non-empty string."""

    def __init__(self, type_name: object) -> None:
        self.type_name = type_name
        super().__init__(f"Type name {type_name!r} should be a non-empty string")


class InvalidImplementationError(LocatorError, TypeError):
    """The implementation cannot be called to construct an instance."""

    def __init__(self, type_name: object, implementation: object) -> None:
        self.type_name = type_name
        self.implementation = implementation
        if type_name is None:
            message = f"Implementation {implementation!r} should be callable"
        else:
            message = f"Implementation {implementation!r} for type {type_name!r} should be callable"
        super().__init__(message)


class NotRegisteredError(LocatorError, KeyError):
    """No registrations exist for the type name."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f'Type "{type_name}" not registered')

    def __str__(self) -> str:
        # KeyError.__str__ would quote the message
        return str(self.args[0])


class CyclicDependencyError(LocatorError):
    """A type name depends on itself through its dependency parameters."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = list(chain)
        super().__init__("Circular dependency detected: " + " -> ".join(self.chain))
