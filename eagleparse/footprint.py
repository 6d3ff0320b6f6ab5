"""Packages (footprints) and their pads and holes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .dom import DomElement
from .enums import PadShape
from .geometry import Point, Rotation
from .primitives import Circle, Dimension, Polygon, Rectangle, Text, Wire

Errors = Optional[List[str]]


def _position(root: DomElement) -> Point:
    x = root.get_float("x")
    y = root.get_float("y")
    return Point(x, y)


def _rotation(root: DomElement) -> Rotation:
    if root.has_attribute("rot"):
        return Rotation.parse(root.get_string("rot"))
    return Rotation()


@dataclass(frozen=True)
class Hole:
    """A non-plated drill hole."""

    position: Point
    diameter: float

    @classmethod
    def from_element(cls, root: DomElement) -> "Hole":
        position = _position(root)
        diameter = root.get_float("drill")
        return cls(position=position, diameter=diameter)


@dataclass(frozen=True)
class SmtPad:
    """A surface mount pad."""

    name: str
    layer: int
    position: Point
    width: float
    height: float
    rotation: Rotation = Rotation()
    roundness: int = 0
    stop: bool = True
    cream: bool = True

    @classmethod
    def from_element(cls, root: DomElement) -> "SmtPad":
        name = root.get_string("name")
        layer = root.get_int("layer")
        position = _position(root)
        rotation = _rotation(root)
        width = root.get_float("dx")
        height = root.get_float("dy")
        roundness = (
            root.get_int("roundness") if root.has_attribute("roundness") else 0
        )
        stop = root.get_bool("stop") if root.has_attribute("stop") else True
        cream = root.get_bool("cream") if root.has_attribute("cream") else True
        return cls(
            name=name,
            layer=layer,
            position=position,
            width=width,
            height=height,
            rotation=rotation,
            roundness=roundness,
            stop=stop,
            cream=cream,
        )


@dataclass(frozen=True)
class ThtPad:
    """A plated through-hole pad."""

    name: str
    position: Point
    drill_diameter: float
    outer_diameter: float = 0.0
    shape: PadShape = PadShape.ROUND
    rotation: Rotation = Rotation()
    stop: bool = True

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "ThtPad":
        name = root.get_string("name")
        position = _position(root)
        drill = root.get_float("drill")
        outer = (
            root.get_float("diameter") if root.has_attribute("diameter") else 0.0
        )
        shape = (
            PadShape.parse(root.get_string("shape"), errors)
            if root.has_attribute("shape")
            else PadShape.ROUND
        )
        rotation = _rotation(root)
        stop = root.get_bool("stop") if root.has_attribute("stop") else True
        return cls(
            name=name,
            position=position,
            drill_diameter=drill,
            outer_diameter=outer,
            shape=shape,
            rotation=rotation,
            stop=stop,
        )


@dataclass(frozen=True)
class Package:
    """A footprint: its drawing, pads and holes."""

    name: str
    description: str = ""
    wires: Tuple[Wire, ...] = ()
    rectangles: Tuple[Rectangle, ...] = ()
    circles: Tuple[Circle, ...] = ()
    polygons: Tuple[Polygon, ...] = ()
    texts: Tuple[Text, ...] = ()
    holes: Tuple[Hole, ...] = ()
    tht_pads: Tuple[ThtPad, ...] = ()
    smt_pads: Tuple[SmtPad, ...] = ()
    dimensions: Tuple[Dimension, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Package":
        name = root.get_string("name")
        builders: Dict[str, Tuple[str, Callable[[DomElement], object]]] = {
            "wire": ("wires", lambda c: Wire.from_element(c, errors)),
            "rectangle": ("rectangles", Rectangle.from_element),
            "circle": ("circles", Circle.from_element),
            "polygon": ("polygons", lambda c: Polygon.from_element(c, errors)),
            "text": ("texts", lambda c: Text.from_element(c, errors)),
            "hole": ("holes", Hole.from_element),
            "pad": ("tht_pads", lambda c: ThtPad.from_element(c, errors)),
            "smd": ("smt_pads", SmtPad.from_element),
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
                errors.append(f"Unknown package child: {tag}")
        return cls(
            name=name,
            description=description,
            **{key: tuple(values) for key, values in items.items()},
        )