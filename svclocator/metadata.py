"""Metadata describes how the locator discovers the parameters of an implementation."""

import inspect
from typing import Any, Optional

from .config import DEFAULT_KEYWORD, DEFAULT_SIGIL
from .model import _POSITIONAL_KINDS
from .scanner import extract_parameter_names
from .types import ParameterNames, ParameterNamesLike

_LOCATOR_METADATA_ATTR = "_locator_meta"


class ImplementationMetadata:
    """Parameter declarations attached to an implementation."""

    def __init__(
        self,
        parameter_names: Optional[ParameterNamesLike] = None,
        source: Optional[str] = None,
    ):
        self._parameter_names = None if parameter_names is None else tuple(parameter_names)
        self._source = source

    @property
    def parameter_names(self) -> Optional[ParameterNames]:
        """Parameter names declared with inject.params, if any."""
        return self._parameter_names

    @property
    def source(self) -> Optional[str]:
        """Textual constructor declaration attached with inject.source, if any."""
        return self._source

    def update(
        self,
        parameter_names: Optional[ParameterNamesLike] = None,
        source: Optional[str] = None,
    ) -> None:
        if parameter_names is not None:
            self._parameter_names = tuple(parameter_names)
        if source is not None:
            self._source = source

    def copy(self) -> "ImplementationMetadata":
        return ImplementationMetadata(self._parameter_names, self._source)

    def __repr__(self) -> str:
        return (
            f"<ImplementationMetadata parameter_names={self._parameter_names!r}"
            f" source={self._source!r}>"
        )


def _get_meta(implementation: Any, include_bases: bool = True) -> Optional[ImplementationMetadata]:
    """
    Get the metadata from an implementation and possibly its base classes.
    Parameters:
        implementation: the class or factory for which to get metadata.
        include_bases: True to return any base class metadata, False to only check
            the implementation itself.
    Returns:
        Metadata describing the implementation if found, otherwise None
    """
    if include_bases:
        return getattr(implementation, _LOCATOR_METADATA_ATTR, None)
    else:
        return getattr(implementation, "__dict__", {}).get(_LOCATOR_METADATA_ATTR)


def _gen_meta(implementation: Any) -> ImplementationMetadata:
    """
    Get the metadata from an implementation, generating it if missing.
    A class without metadata of its own starts from a copy of its base class
    metadata, so declarations on the subclass never leak into the base.
    """
    meta = _get_meta(implementation, include_bases=False)
    if meta is None:
        base = _get_meta(implementation, include_bases=True)
        meta = base.copy() if base is not None else ImplementationMetadata()
        setattr(implementation, _LOCATOR_METADATA_ATTR, meta)
    return meta


def _signature_parameter_names(target: Any) -> ParameterNames:
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # builtins and some extension types have no introspectable signature
        return ()
    return tuple(
        parameter.name
        for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL_KINDS
    )


def parameter_names_of(
    implementation: Any,
    parameter_names: Optional[ParameterNamesLike] = None,
    keyword: str = DEFAULT_KEYWORD,
    sigil: str = DEFAULT_SIGIL,
) -> ParameterNames:
    """Discover the ordered constructor parameter names of an implementation.

    The first source that applies wins:
        1. the explicit `parameter_names` sequence;
        2. names declared with the inject.params decorator;
        3. a textual declaration attached with inject.source, scanned with
           `keyword` and `sigil` (best effort: malformed text yields the names
           found before the scan failed);
        4. the positional parameters of the implementation's signature.
    """
    if parameter_names is not None:
        return tuple(parameter_names)

    meta = _get_meta(implementation)
    if meta is not None:
        if meta.parameter_names is not None:
            return meta.parameter_names
        if meta.source is not None:
            return tuple(extract_parameter_names(meta.source, keyword, sigil))

    return _signature_parameter_names(implementation)
