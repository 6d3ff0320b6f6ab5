"""Drawing primitives shared by symbols, packages, boards and schematics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .dom import DomElement
from .enums import (
    Alignment,
    AttributeDisplay,
    Font,
    GridStyle,
    GridUnit,
    PolygonPour,
    WireCap,
    WireStyle,
)
from .geometry import Point, Rotation

Errors = Optional[List[str]]


def _point(root: DomElement, x_name: str = "x", y_name: str = "y") -> Point:
    x = root.get_float(x_name)
    y = root.get_float(y_name)
    return Point(x, y)


@dataclass(frozen=True)
class Attribute:
    """A named attribute, optionally placed as visible text."""

    name: str
    value: str = ""
    position: Point = Point()
    size: float = 0.0
    layer: int = 0
    font: Font = Font.UNKNOWN
    ratio: int = 0
    rotation: Rotation = Rotation()
    display: AttributeDisplay = AttributeDisplay.VALUE
    constant: bool = False
    alignment: Alignment = Alignment.BOTTOM_LEFT

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Attribute":
        name = root.get_string("name")
        value = root.get_string("value") if root.has_attribute("value") else ""
        x = root.get_float("x") if root.has_attribute("x") else 0.0
        y = root.get_float("y") if root.has_attribute("y") else 0.0
        size = root.get_float("size") if root.has_attribute("size") else 0.0
        layer = root.get_int("layer") if root.has_attribute("layer") else 0
        font = (
            Font.parse(root.get_string("font"), errors)
            if root.has_attribute("font")
            else Font.UNKNOWN
        )
        ratio = root.get_int("ratio") if root.has_attribute("ratio") else 0
        rotation = (
            Rotation.parse(root.get_string("rot"))
            if root.has_attribute("rot")
            else Rotation()
        )
        display = (
            AttributeDisplay.parse(root.get_string("display"), errors)
            if root.has_attribute("display")
            else AttributeDisplay.VALUE
        )
        constant = (
            root.get_bool("constant") if root.has_attribute("constant") else False
        )
        alignment = (
            Alignment.parse(root.get_string("align"), errors)
            if root.has_attribute("align")
            else Alignment.BOTTOM_LEFT
        )
        return cls(
            name=name,
            value=value,
            position=Point(x, y),
            size=size,
            layer=layer,
            font=font,
            ratio=ratio,
            rotation=rotation,
            display=display,
            constant=constant,
            alignment=alignment,
        )


@dataclass(frozen=True)
class Circle:
    """A circle outline on a layer."""

    layer: int
    width: float
    radius: float
    position: Point

    @classmethod
    def from_element(cls, root: DomElement) -> "Circle":
        layer = root.get_int("layer")
        width = root.get_float("width")
        radius = root.get_float("radius")
        return cls(layer=layer, width=width, radius=radius, position=_point(root))


@dataclass(frozen=True)
class Dimension:
    """A dimension annotation; its attributes are not read."""

    @classmethod
    def from_element(cls, root: DomElement) -> "Dimension":
        return cls()


@dataclass(frozen=True)
class Frame:
    """A drawing frame with its column and row count."""

    layer: int
    p1: Point
    p2: Point
    columns: int
    rows: int

    @classmethod
    def from_element(cls, root: DomElement) -> "Frame":
        layer = root.get_int("layer")
        p1 = _point(root, "x1", "y1")
        p2 = _point(root, "x2", "y2")
        columns = root.get_int("columns")
        rows = root.get_int("rows")
        return cls(layer=layer, p1=p1, p2=p2, columns=columns, rows=rows)


@dataclass(frozen=True)
class Grid:
    """Grid settings of a drawing."""

    distance: float = 0.0
    unit_distance: GridUnit = GridUnit.UNKNOWN
    unit: GridUnit = GridUnit.UNKNOWN
    style: GridStyle = GridStyle.LINES
    multiple: int = 1
    display: bool = False
    alt_distance: float = 0.0
    alt_unit_distance: GridUnit = GridUnit.UNKNOWN
    alt_unit: GridUnit = GridUnit.UNKNOWN

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Grid":
        def unit(name: str) -> GridUnit:
            if root.has_attribute(name):
                return GridUnit.parse(root.get_string(name), errors)
            return GridUnit.UNKNOWN

        distance = root.get_float("distance") if root.has_attribute("distance") else 0.0
        unit_distance = unit("unitdist")
        grid_unit = unit("unit")
        style = (
            GridStyle.parse(root.get_string("style"), errors)
            if root.has_attribute("style")
            else GridStyle.LINES
        )
        multiple = root.get_int("multiple") if root.has_attribute("multiple") else 1
        display = root.get_bool("display") if root.has_attribute("display") else False
        alt_distance = (
            root.get_float("altdistance") if root.has_attribute("altdistance") else 0.0
        )
        alt_unit_distance = unit("altunitdist")
        alt_unit = unit("altunit")
        return cls(
            distance=distance,
            unit_distance=unit_distance,
            unit=grid_unit,
            style=style,
            multiple=multiple,
            display=display,
            alt_distance=alt_distance,
            alt_unit_distance=alt_unit_distance,
            alt_unit=alt_unit,
        )


@dataclass(frozen=True)
class Vertex:
    """A polygon corner, with the curve of the edge that follows it."""

    position: Point
    curve: float = 0.0

    @classmethod
    def from_element(cls, root: DomElement) -> "Vertex":
        position = _point(root)
        curve = root.get_float("curve") if root.has_attribute("curve") else 0.0
        return cls(position=position, curve=curve)


@dataclass(frozen=True)
class Polygon:
    """A filled polygon on a layer."""

    layer: int
    width: float
    spacing: float = 0.0
    pour: PolygonPour = PolygonPour.SOLID
    isolate: float = 0.0
    orphans: bool = False
    thermals: bool = True
    rank: int = 0
    vertices: Tuple[Vertex, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Polygon":
        layer = root.get_int("layer")
        width = root.get_float("width")
        spacing = root.get_float("spacing") if root.has_attribute("spacing") else 0.0
        pour = (
            PolygonPour.parse(root.get_string("pour"), errors)
            if root.has_attribute("pour")
            else PolygonPour.SOLID
        )
        isolate = root.get_float("isolate") if root.has_attribute("isolate") else 0.0
        orphans = root.get_bool("orphans") if root.has_attribute("orphans") else False
        thermals = root.get_bool("thermals") if root.has_attribute("thermals") else True
        rank = root.get_int("rank") if root.has_attribute("rank") else 0
        vertices = tuple(Vertex.from_element(child) for child in root.children)
        return cls(
            layer=layer,
            width=width,
            spacing=spacing,
            pour=pour,
            isolate=isolate,
            orphans=orphans,
            thermals=thermals,
            rank=rank,
            vertices=vertices,
        )


@dataclass(frozen=True)
class Rectangle:
    """A filled rectangle on a layer."""

    layer: int
    p1: Point
    p2: Point
    rotation: Rotation = Rotation()

    @classmethod
    def from_element(cls, root: DomElement) -> "Rectangle":
        layer = root.get_int("layer")
        p1 = _point(root, "x1", "y1")
        p2 = _point(root, "x2", "y2")
        rotation = (
            Rotation.parse(root.get_string("rot"))
            if root.has_attribute("rot")
            else Rotation()
        )
        return cls(layer=layer, p1=p1, p2=p2, rotation=rotation)


@dataclass(frozen=True)
class Text:
    """A piece of text placed on a layer."""

    layer: int
    size: float
    position: Point
    font: Font = Font.PROPORTIONAL
    ratio: int = 8
    rotation: Rotation = Rotation()
    alignment: Alignment = Alignment.BOTTOM_LEFT
    value: str = ""

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Text":
        layer = root.get_int("layer")
        font = (
            Font.parse(root.get_string("font"), errors)
            if root.has_attribute("font")
            else Font.PROPORTIONAL
        )
        size = root.get_float("size")
        ratio = root.get_int("ratio") if root.has_attribute("ratio") else 8
        position = _point(root)
        rotation = (
            Rotation.parse(root.get_string("rot"))
            if root.has_attribute("rot")
            else Rotation()
        )
        alignment = (
            Alignment.parse(root.get_string("align"), errors)
            if root.has_attribute("align")
            else Alignment.BOTTOM_LEFT
        )
        return cls(
            layer=layer,
            size=size,
            position=position,
            font=font,
            ratio=ratio,
            rotation=rotation,
            alignment=alignment,
            value=root.text,
        )


@dataclass(frozen=True)
class Wire:
    """A straight or curved line segment on a layer."""

    layer: int
    width: float
    p1: Point
    p2: Point
    wire_style: WireStyle = WireStyle.CONTINUOUS
    curve: float = 0.0
    wire_cap: WireCap = WireCap.ROUND

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Wire":
        layer = root.get_int("layer")
        width = root.get_float("width")
        p1 = _point(root, "x1", "y1")
        p2 = _point(root, "x2", "y2")
        style = (
            WireStyle.parse(root.get_string("style"), errors)
            if root.has_attribute("style")
            else WireStyle.CONTINUOUS
        )
        curve = root.get_float("curve") if root.has_attribute("curve") else 0.0
        cap = (
            WireCap.parse(root.get_string("cap"), errors)
            if root.has_attribute("cap")
            else WireCap.ROUND
        )
        return cls(
            layer=layer,
            width=width,
            p1=p1,
            p2=p2,
            wire_style=style,
            curve=curve,
            wire_cap=cap,
        )