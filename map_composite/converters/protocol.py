"""Converter interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar


if TYPE_CHECKING:
    from collections.abc import Mapping


_A = TypeVar("_A")


class CompositeAttributeConverter(ABC, Generic[_A]):
    """Converts one entity attribute to and from several graph properties."""

    @abstractmethod
    def to_graph_properties(self, value: _A | None) -> dict[str, Any]:
        """Return the properties that store ``value``."""

    @abstractmethod
    def to_entity_attribute(self, properties: Mapping[str, Any]) -> _A:
        """Rebuild the attribute from a record's properties."""
