"""Minimal example for MapCompositeConverter with a typed, nested map."""

from enum import Enum

from map_composite import MapCompositeConverter, MapType


class Axis(Enum):
    LAT = "lat"
    LON = "lon"


def main() -> None:
    """Flatten a map of locations into properties and read it back."""
    converter = MapCompositeConverter(
        prefix="loc",
        delimiter=".",
        map_type=MapType.from_annotation(dict[str, dict[Axis, float]]),
    )
    locations = {
        "home": {Axis.LAT: 52.13, Axis.LON: -106.67},
        "work": {Axis.LAT: 52.14, Axis.LON: -106.63},
    }

    properties = converter.to_graph_properties(locations)
    print("properties:", properties)

    restored = converter.to_entity_attribute({**properties, "name": "beamline"})
    print("restored:", restored)
    print("equal:", restored == locations)


if __name__ == "__main__":
    main()
