"""Converter storing a nested map as prefixed graph properties."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, override

from ..admission import AdmissionPolicy
from ..errors import KeyConflictError
from ..key_mapping import PropertyKeyMapper, build_fragment_tree, materialize
from .protocol import CompositeAttributeConverter


if TYPE_CHECKING:
    from ..descriptors import MapType


logger = logging.getLogger(__name__)


class MapCompositeConverter(CompositeAttributeConverter[dict[Any, Any]]):
    """Store a map field as ``prefix + delimiter + key`` properties.

    Nested maps extend the property name with one more ``delimiter + key``
    per level, so ``{"geo": {"lat": 1.0}}`` under prefix ``addr`` becomes
    ``{"addr.geo.lat": 1.0}``.
    """

    def __init__(
        self,
        prefix: str,
        delimiter: str = ".",
        allow_cast: bool = False,
        map_type: MapType | None = None,
    ) -> None:
        """Create a converter.

        Parameters
        ----------
        prefix
            Prefix used for all properties of the field.
        delimiter
            Separator between prefix, keys and nested keys. Must not be empty.
        allow_cast
            Whether narrower numeric types (``int16``, ``int32``, ``float32``)
            may be stored.
        map_type
            Declared shape of the map, used to type keys and coerce leaves when
            reading properties back. Without it keys stay text and leaves are
            returned as stored.
        """
        super().__init__()
        self._mapper = PropertyKeyMapper(prefix=prefix, delimiter=delimiter)
        self._policy = AdmissionPolicy(allow_cast=allow_cast)
        self.map_type = map_type

    @property
    def prefix(self) -> str:
        return self._mapper.prefix

    @property
    def delimiter(self) -> str:
        return self._mapper.delimiter

    @property
    def allow_cast(self) -> bool:
        return self._policy.allow_cast

    @override
    def to_graph_properties(self, value: Mapping[Any, Any] | None) -> dict[str, Any]:
        """Flatten ``value`` into properties; ``None`` gives no properties."""
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            msg = f"expected a mapping, got {type(value).__qualname__}"
            raise TypeError(msg)

        properties: dict[str, Any] = {}
        self._add_map_to_properties(value, properties, self.prefix)
        logger.debug("flattened map under prefix %r into %d properties", self.prefix, len(properties))
        return properties

    def _add_map_to_properties(self, value: Mapping[Any, Any], properties: dict[str, Any], path: str) -> None:
        seen: set[str] = set()
        for key, entry_value in value.items():
            entry_path = self._mapper.child_path(path, key)
            # distinct keys such as Color.RED and "RED" share one fragment
            if entry_path in seen:
                raise KeyConflictError(entry_path, "is produced by more than one map key")
            seen.add(entry_path)
            if isinstance(entry_value, Mapping):
                self._add_map_to_properties(entry_value, properties, entry_path)
            else:
                self._policy.check(entry_path, entry_value)
                properties[entry_path] = entry_value

    @override
    def to_entity_attribute(self, properties: Mapping[str, Any]) -> dict[Any, Any]:
        """Rebuild the map from the properties carrying this converter's prefix."""
        items = [
            (property_key, self._mapper.relative_parts(property_key), value)
            for property_key, value in sorted(properties.items())
            if self._mapper.matches(property_key)
        ]
        result = materialize(build_fragment_tree(items), self.map_type)
        logger.debug("rebuilt map under prefix %r from %d of %d properties", self.prefix, len(items), len(properties))
        return result

    flatten = to_graph_properties
    unflatten = to_entity_attribute

    @override
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self.prefix!r}, delimiter={self.delimiter!r}, "
            f"allow_cast={self.allow_cast!r}, map_type={self.map_type!r})"
        )
