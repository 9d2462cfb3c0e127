"""Errors raised while converting between nested maps and flat properties."""

from __future__ import annotations

from typing import Any


class MappingError(Exception):
    """Base class for all conversion failures."""


class UnsupportedLeafTypeError(MappingError):
    """A leaf value has a type that cannot be stored as a property."""

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value = value
        self.value_type = type(value)
        msg = (
            f"Could not map key={key}, value={value!r} (type = {self.value_type.__qualname__}) "
            "because it is not a supported type."
        )
        super().__init__(msg)


class DelimiterInKeyError(MappingError):
    """A map key contains or overlaps the delimiter, so the flat key could not be split back."""

    def __init__(self, key: str, delimiter: str) -> None:
        self.key = key
        self.delimiter = delimiter
        msg = f"key {key!r} must not contain or overlap delimiter {delimiter!r}"
        super().__init__(msg)


class UnsupportedKeyTypeError(MappingError):
    """Only ``str`` and ``Enum`` subclasses can be reconstructed as map keys."""

    def __init__(self, key_type: Any) -> None:
        self.key_type = key_type
        msg = f"Only str and Enum allowed to be keys, got {key_type!r}"
        super().__init__(msg)


class UnknownEnumLabelError(MappingError, LookupError):
    """A key fragment names no member of the declared Enum key type."""

    def __init__(self, label: str, enum_type: type) -> None:
        self.label = label
        self.enum_type = enum_type
        msg = f"{enum_type.__qualname__} has no member named {label!r}"
        super().__init__(msg)


class KeyConflictError(MappingError):
    """A flat key is claimed twice, by two map keys or by a leaf and nested keys."""

    def __init__(self, key: str, reason: str = "holds both a value and nested properties") -> None:
        self.key = key
        msg = f"key {key!r} {reason}"
        super().__init__(msg)


class CoercionError(MappingError, TypeError):
    """A stored value cannot be converted to the declared leaf type."""

    def __init__(self, target: Any, value: Any, reason: str | None = None) -> None:
        self.target = target
        self.value = value
        msg = f"cannot coerce {value!r} (type = {type(value).__qualname__}) to {target!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
