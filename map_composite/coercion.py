"""Coerce raw property values to the leaf type declared for a map."""

from __future__ import annotations

import enum
import math
import numbers
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from .admission import INT64_MAX, INT64_MIN
from .errors import CoercionError


def _to_int(value: Any) -> int:
    match value:
        case bool():
            msg = "booleans are not integers"
            raise TypeError(msg)
        case numbers.Integral():
            result = int(value)
        case numbers.Real():
            if not math.isfinite(value) or not float(value).is_integer():
                msg = "value is not integral"
                raise ValueError(msg)
            result = int(value)
        case str():
            result = int(value.strip())
        case _:
            msg = "unsupported source type"
            raise TypeError(msg)
    if not INT64_MIN <= result <= INT64_MAX:
        msg = "value out of 64-bit integer range"
        raise OverflowError(msg)
    return result


def _to_float(value: Any) -> float:
    match value:
        case bool():
            msg = "booleans are not floats"
            raise TypeError(msg)
        case numbers.Real():
            return float(value)
        case str():
            return float(value.strip())
        case _:
            msg = "unsupported source type"
            raise TypeError(msg)


def _to_bool(value: Any) -> bool:
    match value:
        case bool() | np.bool_():
            return bool(value)
        case str() if value.lower() in {"true", "false"}:
            return value.lower() == "true"
        case _:
            msg = "only booleans and 'true'/'false' text convert to bool"
            raise TypeError(msg)


def _to_str(value: Any) -> str:
    if isinstance(value, Sequence) and not isinstance(value, str):
        msg = "sequences do not convert to str"
        raise TypeError(msg)
    return str(value)


def _sequence_to(container: type) -> Callable[[Any], Any]:
    def convert(value: Any) -> Any:
        if isinstance(value, str) or not isinstance(value, Sequence | np.ndarray):
            msg = "value is not a sequence"
            raise TypeError(msg)
        return container(value)

    return convert


def _numpy_int(target: type[np.integer[Any]]) -> Callable[[Any], Any]:
    info = np.iinfo(target)

    def convert(value: Any) -> Any:
        result = _to_int(value)
        if not info.min <= result <= info.max:
            msg = f"value out of {info.dtype} range"
            raise OverflowError(msg)
        return target(result)

    return convert


def _numpy_float(target: type[np.floating[Any]]) -> Callable[[Any], Any]:
    def convert(value: Any) -> Any:
        return target(_to_float(value))

    return convert


_CONVERTERS: dict[type, Callable[[Any], Any]] = {
    bool: _to_bool,
    int: _to_int,
    float: _to_float,
    str: _to_str,
    list: _sequence_to(list),
    tuple: _sequence_to(tuple),
    np.int16: _numpy_int(np.int16),
    np.int32: _numpy_int(np.int32),
    np.int64: _numpy_int(np.int64),
    np.float32: _numpy_float(np.float32),
    np.float64: _numpy_float(np.float64),
}


def coerce_types(target: Any, value: Any) -> Any:
    """Convert a raw property value to ``target``.

    ``None`` and values already of exactly the target type are returned as is,
    except Python ints, which are still checked against the 64-bit range.
    Raises ``CoercionError`` when no conversion exists or the conversion fails.
    """
    if value is None or (type(value) is target and target is not int):
        return value

    if isinstance(target, type) and issubclass(target, enum.Enum):
        if isinstance(value, str) and value in target.__members__:
            return target[value]
        raise CoercionError(target, value, "no member with that name")

    converter = _CONVERTERS.get(target)
    if converter is None:
        raise CoercionError(target, value, "unsupported target type")
    try:
        return converter(value)
    except (TypeError, ValueError, OverflowError) as error:
        raise CoercionError(target, value, str(error)) from error
