"""Read EAGLE library, board and schematic XML files into immutable objects."""

__version__ = "0.3.1"

__all__ = [
    "board",
    "deviceset",
    "dom",
    "enums",
    "footprint",
    "geometry",
    "library",
    "primitives",
    "schematic",
    "symbol",
]