import re
from typing import Any, Mapping, Optional, TypeVar, Union

from typing_extensions import TypedDict

from .types import Kwargs

# Unbound, invariant type variable
T = TypeVar("T")

DEFAULT_SIGIL = "$"
DEFAULT_KEYWORD = "function"
DEFAULT_LOCATOR_TYPE_NAME = "serviceLocator"

_WORD_CHAR = re.compile(r"\w")


def check_sigil(sigil: Any) -> str:
    """Return sigil if it is a single non-word character, else raise ValueError."""
    if not isinstance(sigil, str) or len(sigil) != 1 or _WORD_CHAR.match(sigil):
        raise ValueError(f"sigil must be a single non-word character, got {sigil!r}")
    return sigil


class LocatorConfig(TypedDict, total=False):
    """Configuration entries understood by the service locator."""

    # Leading character marking a parameter name as a dependency to resolve.
    sigil: str
    # Keyword that opens a textual constructor declaration.
    keyword: str
    # Whether resolve_all raises for unregistered types when no strict flag is passed.
    strict_resolve_all: bool
    # Type name the locator registers itself under, None to skip.
    locator_type_name: Optional[str]
    # Type names mapped to literal parameter values used when a registration
    # does not provide its own value for a parameter.
    parameters: Mapping[str, Kwargs]


LocatorInitConfig = Union[Mapping[str, Any], LocatorConfig]


class LocatorConfigWrapper:
    """Manages the configuration of a service locator."""

    def __init__(self):
        self._impl = {}

    def _from_dict(self, config_dict: LocatorInitConfig):
        """Configure the locator from a dictionary-like mapping.

        Parameters:
            config_dict: the configuration data to apply.
        Raises:
            ValueError: the sigil or keyword cannot be used by the scanner.
        """
        check_sigil(config_dict.get("sigil", DEFAULT_SIGIL))

        keyword = config_dict.get("keyword", DEFAULT_KEYWORD)
        if not isinstance(keyword, str) or not keyword:
            raise ValueError(f"keyword must be a non-empty string, got {keyword!r}")

        self._impl = config_dict

    def __contains__(self, key: str):
        return key in self._impl

    def get(self, key: str, default: Optional[T] = None) -> T:
        return self._impl.get(key, default)

    def __getitem__(self, key: str) -> Any:
        item: Optional[Any] = self.get(key)
        if item is None:
            raise KeyError(key)
        return item

    @property
    def sigil(self) -> str:
        return self.get("sigil", DEFAULT_SIGIL)

    @property
    def keyword(self) -> str:
        return self.get("keyword", DEFAULT_KEYWORD)

    @property
    def strict_resolve_all(self) -> bool:
        return bool(self.get("strict_resolve_all", True))

    @property
    def locator_type_name(self) -> Optional[str]:
        return self.get("locator_type_name", DEFAULT_LOCATOR_TYPE_NAME)

    def get_parameters(self, type_name: Optional[str]) -> Kwargs:
        """Get the literal parameter values configured for a type name."""
        if type_name is None:
            return {}
        by_type = self._impl.get("parameters")
        if not by_type:
            return {}
        return dict(by_type.get(type_name) or {})
