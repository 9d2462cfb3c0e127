"""Type descriptors for the nested map shape being reconstructed."""

from __future__ import annotations

import collections.abc
import types
import typing
from dataclasses import dataclass
from typing import Any


_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


@dataclass(frozen=True, slots=True)
class MapType:
    """Declared key type and value type of one nesting level.

    ``value_type`` is either another ``MapType`` describing the next level, a
    leaf type that reconstructed values are coerced to, or ``None`` when leaves
    are kept as stored.
    """

    key_type: Any = str
    value_type: MapType | type | None = None

    @property
    def nested(self) -> MapType | None:
        """Descriptor of the next level, or None when values are leaves."""
        if isinstance(self.value_type, MapType):
            return self.value_type
        return None

    @property
    def leaf_type(self) -> type | None:
        """Type leaves at this level are coerced to, if one is declared."""
        if isinstance(self.value_type, MapType):
            return None
        return self.value_type

    @classmethod
    def from_annotation(cls, annotation: Any) -> MapType:
        """Build a descriptor from a mapping annotation such as ``dict[Color, dict[str, int]]``."""
        origin = typing.get_origin(annotation)
        if origin not in _MAPPING_ORIGINS:
            msg = f"expected a mapping annotation, got {annotation!r}"
            raise TypeError(msg)

        args = typing.get_args(annotation)
        if len(args) != 2:  # noqa: PLR2004
            msg = f"mapping annotation must declare key and value types: {annotation!r}"
            raise TypeError(msg)

        key_type, value_type = args
        return cls(key_type=key_type, value_type=_value_descriptor(value_type))


def _value_descriptor(annotation: Any) -> MapType | type | None:
    if annotation is Any:
        return None
    origin = typing.get_origin(annotation)
    if origin in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        return _value_descriptor(members[0]) if len(members) == 1 else None
    if origin in _MAPPING_ORIGINS:
        return MapType.from_annotation(annotation)
    if origin is not None:
        return origin
    return annotation
