"""map-composite - store nested maps as prefixed flat graph properties"""

from ._version import version as __version__
from .admission import AdmissionPolicy
from .coercion import coerce_types
from .converters import CompositeAttributeConverter, MapCompositeConverter
from .descriptors import MapType
from .errors import (
    CoercionError,
    DelimiterInKeyError,
    KeyConflictError,
    MappingError,
    UnknownEnumLabelError,
    UnsupportedKeyTypeError,
    UnsupportedLeafTypeError,
)
from .key_mapping import PropertyKeyMapper


__all__ = [
    "AdmissionPolicy",
    "CoercionError",
    "CompositeAttributeConverter",
    "DelimiterInKeyError",
    "KeyConflictError",
    "MapCompositeConverter",
    "MapType",
    "MappingError",
    "PropertyKeyMapper",
    "UnknownEnumLabelError",
    "UnsupportedKeyTypeError",
    "UnsupportedLeafTypeError",
    "__version__",
    "coerce_types",
]
