"""EAGLE boards: design rules, placed elements and routed signals."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Callable, Dict, List, Optional, Tuple, Union

from .dom import DomElement, _to_float, _to_int, parse_document, read_file
from .enums import ViaShape
from .footprint import Hole
from .geometry import Point, Rotation
from .library import Library
from .primitives import (
    Attribute,
    Circle,
    Dimension,
    Grid,
    Polygon,
    Rectangle,
    Text,
    Wire,
)

Errors = Optional[List[str]]


def _position(root: DomElement) -> Point:
    x = root.get_float("x")
    y = root.get_float("y")
    return Point(x, y)


@dataclass(frozen=True)
class ContactRef:
    """Reference from a signal to a pad of a placed element."""

    element: str
    pad: str

    @classmethod
    def from_element(cls, root: DomElement) -> "ContactRef":
        element = root.get_string("element")
        pad = root.get_string("pad")
        return cls(element=element, pad=pad)


@dataclass(frozen=True)
class Param:
    """A named design rule parameter with its raw value."""

    name: str
    value: str

    @classmethod
    def from_element(cls, root: DomElement) -> "Param":
        name = root.get_string("name")
        value = root.get_string("value")
        return cls(name=name, value=value)

    def value_as_int(self) -> Optional[int]:
        """The value as an integer, or None if it is not one."""
        return _to_int(self.value)

    def value_as_float(self) -> Optional[float]:
        """The value as a number, or None if it is not one."""
        return _to_float(self.value)

    def value_with_unit(self) -> Optional[Tuple[float, str]]:
        """Split a value such as ``0.2mm`` into number and trailing unit.

        Returns None if the part before the unit is not a number.
        """
        stripped = self.value.rstrip()
        end = len(self.value)
        start = end
        while start > 0 and self.value[start - 1].isalpha():
            start -= 1
        del stripped
        number = _to_float(self.value[:start])
        if number is None:
            return None
        return number, self.value[start:end]


@dataclass(frozen=True)
class DesignRules:
    """The design rules of a board."""

    name: str = ""
    description: str = ""
    params: Tuple[Param, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "DesignRules":
        # The name is required by the format but missing in some real files.
        name = root.get_string("name") if root.has_attribute("name") else ""
        description = ""
        params = []
        for child in root.children:
            if child.tag_name == "description":
                description = child.text
            elif child.tag_name == "param":
                params.append(Param.from_element(child))
            elif errors is not None:
                errors.append(f"Unknown design rules child: {child.tag_name}")
        return cls(name=name, description=description, params=tuple(params))

    def find_param(self, name: str) -> Optional[Param]:
        """Return the first parameter with this name, or None."""
        return next((p for p in self.params if p.name == name), None)


@dataclass(frozen=True)
class Element:
    """A package placed on a board."""

    name: str
    library: str
    package: str
    value: str
    position: Point
    library_urn: str = ""
    rotation: Rotation = Rotation()
    locked: bool = False
    populate: bool = True
    smashed: bool = False
    attributes: Tuple[Attribute, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Element":
        name = root.get_string("name")
        library = root.get_string("library")
        library_urn = (
            root.get_string("library_urn") if root.has_attribute("library_urn") else ""
        )
        package = root.get_string("package")
        value = root.get_string("value")
        position = _position(root)
        rotation = (
            Rotation.parse(root.get_string("rot"))
            if root.has_attribute("rot")
            else Rotation()
        )
        locked = root.get_bool("locked") if root.has_attribute("locked") else False
        populate = (
            root.get_bool("populate") if root.has_attribute("populate") else True
        )
        smashed = root.get_bool("smashed") if root.has_attribute("smashed") else False
        attributes = []
        for child in root.children:
            if child.tag_name == "attribute":
                attributes.append(Attribute.from_element(child, errors))
            elif errors is not None:
                errors.append(f"Unknown element child: {child.tag_name}")
        return cls(
            name=name,
            library=library,
            package=package,
            value=value,
            position=position,
            library_urn=library_urn,
            rotation=rotation,
            locked=locked,
            populate=populate,
            smashed=smashed,
            attributes=tuple(attributes),
        )


@dataclass(frozen=True)
class Via:
    """A plated hole connecting copper layers."""

    position: Point
    extent: str
    drill: float
    diameter: float = 0.0
    shape: ViaShape = ViaShape.ROUND
    always_stop: bool = False

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Via":
        position = _position(root)
        extent = root.get_string("extent")
        drill = root.get_float("drill")
        diameter = (
            root.get_float("diameter") if root.has_attribute("diameter") else 0.0
        )
        shape = (
            ViaShape.parse(root.get_string("shape"), errors)
            if root.has_attribute("shape")
            else ViaShape.ROUND
        )
        always_stop = (
            root.get_bool("alwaysstop") if root.has_attribute("alwaysstop") else False
        )
        return cls(
            position=position,
            extent=extent,
            drill=drill,
            diameter=diameter,
            shape=shape,
            always_stop=always_stop,
        )

    def _extent_layer(self, index: int) -> Optional[int]:
        sections = self.extent.split("-")
        return _to_int(sections[index]) if index < len(sections) else None

    def start_layer(self) -> Optional[int]:
        """First layer of the extent, or None if it cannot be read."""
        return self._extent_layer(0)

    def end_layer(self) -> Optional[int]:
        """Last layer of the extent, or None if it cannot be read."""
        return self._extent_layer(1)


@dataclass(frozen=True)
class Signal:
    """A routed net of a board."""

    name: str
    signal_class: int = 0
    contact_refs: Tuple[ContactRef, ...] = ()
    polygons: Tuple[Polygon, ...] = ()
    wires: Tuple[Wire, ...] = ()
    vias: Tuple[Via, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Signal":
        name = root.get_string("name")
        signal_class = root.get_int("class") if root.has_attribute("class") else 0
        builders: Dict[str, Tuple[str, Callable[[DomElement], object]]] = {
            "contactref": ("contact_refs", ContactRef.from_element),
            "polygon": ("polygons", lambda c: Polygon.from_element(c, errors)),
            "wire": ("wires", lambda c: Wire.from_element(c, errors)),
            "via": ("vias", lambda c: Via.from_element(c)),
        }
        items: Dict[str, List[object]] = {key: [] for key, _ in builders.values()}
        for child in root.children:
            tag = child.tag_name
            if tag in builders:
                key, build = builders[tag]
                items[key].append(build(child))
            elif errors is not None:
                errors.append(f"Unknown signal child: {tag}")
        return cls(
            name=name,
            signal_class=signal_class,
            **{key: tuple(values) for key, values in items.items()},
        )


@dataclass(frozen=True)
class Board:
    """A board file: its libraries, drawing, placed elements and signals."""

    grid: Grid = Grid()
    design_rules: DesignRules = DesignRules()
    libraries: Tuple[Library, ...] = ()
    wires: Tuple[Wire, ...] = ()
    rectangles: Tuple[Rectangle, ...] = ()
    circles: Tuple[Circle, ...] = ()
    polygons: Tuple[Polygon, ...] = ()
    texts: Tuple[Text, ...] = ()
    holes: Tuple[Hole, ...] = ()
    dimensions: Tuple[Dimension, ...] = ()
    elements: Tuple[Element, ...] = ()
    signals: Tuple[Signal, ...] = ()

    @classmethod
    def from_bytes(cls, content: Union[bytes, str], errors: Errors = None) -> "Board":
        """Parse the XML content of a board file."""
        root = parse_document(content, "board")
        drawing = root.first_child("drawing")
        grid = (
            Grid.from_element(drawing.first_child("grid"))
            if drawing.has_child("grid")
            else Grid()
        )
        board = drawing.first_child("board")

        design_rules = (
            DesignRules.from_element(board.first_child("designrules"), errors)
            if board.has_child("designrules")
            else DesignRules()
        )

        def children(tag: str) -> Tuple[DomElement, ...]:
            return board.first_child(tag).children if board.has_child(tag) else ()

        libraries = tuple(Library.from_element(c) for c in children("libraries"))

        builders: Dict[str, Tuple[str, Callable[[DomElement], object]]] = {
            "wire": ("wires", lambda c: Wire.from_element(c, errors)),
            "rectangle": ("rectangles", Rectangle.from_element),
            "circle": ("circles", Circle.from_element),
            "polygon": ("polygons", lambda c: Polygon.from_element(c, errors)),
            "text": ("texts", lambda c: Text.from_element(c, errors)),
            "hole": ("holes", Hole.from_element),
            "dimension": ("dimensions", Dimension.from_element),
        }
        items: Dict[str, List[object]] = {key: [] for key, _ in builders.values()}
        for child in children("plain"):
            tag = child.tag_name
            if tag in builders:
                key, build = builders[tag]
                items[key].append(build(child))
            elif errors is not None:
                errors.append(f"Unknown board child: {tag}")

        elements = tuple(Element.from_element(c, errors) for c in children("elements"))
        signals = tuple(Signal.from_element(c, errors) for c in children("signals"))
        return cls(
            grid=grid,
            design_rules=design_rules,
            libraries=libraries,
            elements=elements,
            signals=signals,
            **{key: tuple(values) for key, values in items.items()},
        )

    @classmethod
    def from_file(cls, path: Union[str, PathLike], errors: Errors = None) -> "Board":
        """Read and parse a board file."""
        return cls.from_bytes(read_file(path), errors)