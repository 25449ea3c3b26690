"""
The service locator maps type names to implementations and resolves their instances.

Instead of hardcoding how objects reference each other, register each
implementation under a type name and let the locator construct it, resolving
the dependencies declared by its parameters:

from svclocator import initialize, inject

@inject.params("$config", "level")
class Logger:
    def __init__(self, config, level): ...

locator = initialize()
locator.register_instance("config", {"debug": True})
locator.register("logger", Logger, parameters={"level": "info"}, is_singleton=True)
logger = locator.resolve("logger")

Parameter names starting with the dependency sigil (`$` unless configured
otherwise) are resolved by the type name that follows it; every other parameter
takes its value from the literal parameters of the registration.

When no names are declared, the locator scans a textual constructor declaration
attached with inject.source, and falls back to the positional parameters of the
implementation's signature:

@inject.source("function Handler($logger, path) {}")
def make_handler(logger, path): ...

A type name can hold several registrations. resolve() uses the most recent one,
resolve_all() returns an instance of each, most recent first:

locator.register("plugin", FirstPlugin)
locator.register("plugin", SecondPlugin)
second, first = locator.resolve_all("plugin")
"""

__version__ = "1.0.0"

from . import inject
from .errors import (
    CyclicDependencyError,
    InvalidImplementationError,
    InvalidTypeNameError,
    LocatorError,
    NotRegisteredError,
)
from .locator import ServiceLocator, initialize
from .scanner import ConstructorScanner, State, Token, extract_parameter_names

__all__ = [
    "ConstructorScanner",
    "CyclicDependencyError",
    "extract_parameter_names",
    "inject",
    "initialize",
    "InvalidImplementationError",
    "InvalidTypeNameError",
    "LocatorError",
    "NotRegisteredError",
    "ServiceLocator",
    "State",
    "Token",
]
