"""Rules deciding which leaf values may be written as graph properties."""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import UnsupportedLeafTypeError


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_native(value: Any) -> bool:
    """Return True for values a graph property holds without any cast."""
    match value:
        case bool() | str() | float() | list() | tuple():
            return True
        case int():
            return INT64_MIN <= value <= INT64_MAX
        case np.bool_() | np.int64() | np.float64():
            return True
        case _:
            return False


def is_castable(value: Any) -> bool:
    """Return True for narrower numbers that are storable once casting is allowed."""
    match value:
        case np.int16() | np.int32() | np.float32():
            return True
        case _:
            return False


class AdmissionPolicy:
    """Admit native leaf types, plus castable ones when ``allow_cast`` is set."""

    def __init__(self, allow_cast: bool = False) -> None:
        super().__init__()
        self.allow_cast = allow_cast

    def admits(self, value: Any) -> bool:
        return is_native(value) or (self.allow_cast and is_castable(value))

    def check(self, key: str, value: Any) -> None:
        """Raise ``UnsupportedLeafTypeError`` unless value may be stored at key."""
        if not self.admits(value):
            raise UnsupportedLeafTypeError(key, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(allow_cast={self.allow_cast!r})"
