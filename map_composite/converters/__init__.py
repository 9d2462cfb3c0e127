"""Composite attribute converter contracts and implementations."""

from .map_composite import MapCompositeConverter
from .protocol import CompositeAttributeConverter


__all__ = ["CompositeAttributeConverter", "MapCompositeConverter"]
