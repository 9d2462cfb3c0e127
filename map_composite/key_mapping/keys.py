"""Conversion between map keys and the text fragments of a property name."""

from __future__ import annotations

import enum
from typing import Any

from ..errors import UnknownEnumLabelError, UnsupportedKeyTypeError


def key_fragment(key: object) -> str:
    """Return the text a map key contributes to a property name."""
    if isinstance(key, enum.Enum):
        return key.name
    return str(key)


def resolve_key(fragment: str, key_type: Any = None) -> Any:
    """Turn a property name fragment back into a key of ``key_type``.

    ``None`` and ``str`` keep the fragment as text. An ``Enum`` subclass looks
    the fragment up by member name.
    """
    if key_type is None or key_type is str:
        return fragment
    if isinstance(key_type, type) and issubclass(key_type, enum.Enum):
        try:
            return key_type[fragment]
        except KeyError:
            raise UnknownEnumLabelError(fragment, key_type) from None
    raise UnsupportedKeyTypeError(key_type)
