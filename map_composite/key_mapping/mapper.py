"""Key mapping between flat property names and nested map paths."""

from __future__ import annotations

from ..errors import DelimiterInKeyError
from .keys import key_fragment


class PropertyKeyMapper:
    """Map between prefixed property names and nested key paths."""

    def __init__(self, prefix: str, delimiter: str = ".") -> None:
        super().__init__()
        if not delimiter:
            msg = "delimiter must not be empty"
            raise ValueError(msg)

        self.prefix = prefix
        self.delimiter = delimiter
        self.first_part = f"{prefix}{delimiter}"

    def is_ambiguous(self, fragment: str) -> bool:
        """Return True when splitting on the delimiter would not give ``fragment`` back.

        Besides containing the delimiter, a fragment may start or end with part
        of a multi-character delimiter, which then overlaps its neighbours.
        """
        framed = f"{self.delimiter}{fragment}{self.delimiter}"
        return framed.find(self.delimiter, 1) != len(self.delimiter) + len(fragment)

    def child_path(self, path: str, key: object) -> str:
        """Extend a property name built so far with one more map key."""
        fragment = key_fragment(key)
        if self.is_ambiguous(fragment):
            raise DelimiterInKeyError(fragment, self.delimiter)
        return f"{path}{self.delimiter}{fragment}"

    def full_key(self, *keys: object) -> str:
        """Build the property name for a path of map keys."""
        if not keys:
            msg = "at least one key is required"
            raise ValueError(msg)
        path = self.prefix
        for key in keys:
            path = self.child_path(path, key)
        return path

    def matches(self, property_key: str) -> bool:
        """Return True when a property name belongs to this prefix."""
        return property_key.startswith(self.first_part)

    def relative_parts(self, property_key: str) -> tuple[str, ...]:
        """Split a property name into the key fragments after the prefix."""
        if not self.matches(property_key):
            msg = f"key does not match property prefix: {property_key}"
            raise ValueError(msg)
        return tuple(property_key.removeprefix(self.first_part).split(self.delimiter))
