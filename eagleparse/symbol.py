"""Schematic symbols and their pins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .dom import DomElement
from .enums import PinDirection, PinFunction, PinLength, PinVisibility
from .geometry import Point, Rotation
from .primitives import Circle, Dimension, Frame, Polygon, Rectangle, Text, Wire

Errors = Optional[List[str]]

_PIN_LENGTHS_MM = {
    PinLength.POINT: 0.0,
    PinLength.SHORT: 2.54,
    PinLength.MIDDLE: 5.08,
    PinLength.LONG: 7.62,
}


@dataclass(frozen=True)
class Pin:
    """A connection point of a symbol."""

    name: str
    position: Point
    visibility: PinVisibility = PinVisibility.BOTH
    length: PinLength = PinLength.LONG
    direction: PinDirection = PinDirection.IO
    function: PinFunction = PinFunction.NONE
    swap_level: int = 0
    rotation: Rotation = Rotation()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Pin":
        name = root.get_string("name")
        x = root.get_float("x")
        y = root.get_float("y")
        visibility = (
            PinVisibility.parse(root.get_string("visible"), errors)
            if root.has_attribute("visible")
            else PinVisibility.BOTH
        )
        length = (
            PinLength.parse(root.get_string("length"), errors)
            if root.has_attribute("length")
            else PinLength.LONG
        )
        direction = (
            PinDirection.parse(root.get_string("direction"), errors)
            if root.has_attribute("direction")
            else PinDirection.IO
        )
        function = (
            PinFunction.parse(root.get_string("function"), errors)
            if root.has_attribute("function")
            else PinFunction.NONE
        )
        swap_level = (
            root.get_int("swaplevel") if root.has_attribute("swaplevel") else 0
        )
        rotation = (
            Rotation.parse(root.get_string("rot"))
            if root.has_attribute("rot")
            else Rotation()
        )
        return cls(
            name=name,
            position=Point(x, y),
            visibility=visibility,
            length=length,
            direction=direction,
            function=function,
            swap_level=swap_level,
            rotation=rotation,
        )

    def length_in_millimeters(self) -> float:
        """Drawn length of the pin in millimeters; zero when unknown."""
        return _PIN_LENGTHS_MM.get(self.length, 0.0)


@dataclass(frozen=True)
class Symbol:
    """A schematic symbol: its drawing and pins."""

    name: str
    description: str = ""
    wires: Tuple[Wire, ...] = ()
    rectangles: Tuple[Rectangle, ...] = ()
    circles: Tuple[Circle, ...] = ()
    polygons: Tuple[Polygon, ...] = ()
    texts: Tuple[Text, ...] = ()
    pins: Tuple[Pin, ...] = ()
    frames: Tuple[Frame, ...] = ()
    dimensions: Tuple[Dimension, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Symbol":
        name = root.get_string("name")
        builders: Dict[str, Tuple[str, Callable[[DomElement], object]]] = {
            "wire": ("wires", lambda c: Wire.from_element(c, errors)),
            "rectangle": ("rectangles", Rectangle.from_element),
            "circle": ("circles", Circle.from_element),
            "polygon": ("polygons", lambda c: Polygon.from_element(c, errors)),
            "text": ("texts", lambda c: Text.from_element(c, errors)),
            "pin": ("pins", lambda c: Pin.from_element(c, errors)),
            "frame": ("frames", Frame.from_element),
            "dimension": ("dimensions", Dimension.from_element),
        }
        items: Dict[str, List[object]] = {key: [] for key, _ in builders.values()}
        description = ""
        for child in root.children:
            tag = child.tag_name
            if tag == "description":
                description = child.text
            elif tag in builders:
                key, build = builders[tag]
                items[key].append(build(child))
            elif errors is not None:
                errors.append(f"Unknown symbol child: {tag}")
        return cls(
            name=name,
            description=description,
            **{key: tuple(values) for key, values in items.items()},
        )