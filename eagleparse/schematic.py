"""EAGLE schematics: parts, sheets, instances and nets."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Callable, Dict, List, Optional, Tuple, Union

from .dom import DomElement, parse_document, read_file
from .enums import Alignment
from .geometry import Point, Rotation
from .library import Library
from .primitives import (
    Attribute,
    Circle,
    Dimension,
    Frame,
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


def _rotation(root: DomElement) -> Rotation:
    if root.has_attribute("rot"):
        return Rotation.parse(root.get_string("rot"))
    return Rotation()


def _attributes(root: DomElement, label: str, errors: Errors) -> Tuple[Attribute, ...]:
    """Read the ``<attribute>`` children, reporting any other child."""
    attributes = []
    for child in root.children:
        if child.tag_name == "attribute":
            attributes.append(Attribute.from_element(child, errors))
        elif errors is not None:
            errors.append(f"Unknown {label} child: {child.tag_name}")
    return tuple(attributes)


@dataclass(frozen=True)
class Bus:
    """A named bus on a sheet."""

    name: str

    @classmethod
    def from_element(cls, root: DomElement) -> "Bus":
        return cls(name=root.get_string("name"))


@dataclass(frozen=True)
class Instance:
    """A gate of a part placed on a sheet."""

    part: str
    gate: str
    position: Point
    rotation: Rotation = Rotation()
    smashed: bool = False
    attributes: Tuple[Attribute, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Instance":
        part = root.get_string("part")
        gate = root.get_string("gate")
        position = _position(root)
        rotation = _rotation(root)
        smashed = root.get_bool("smashed") if root.has_attribute("smashed") else False
        attributes = _attributes(root, "instance", errors)
        return cls(
            part=part,
            gate=gate,
            position=position,
            rotation=rotation,
            smashed=smashed,
            attributes=attributes,
        )


@dataclass(frozen=True)
class Label:
    """A net label on a sheet."""

    position: Point
    size: float
    layer: int
    ratio: int = 8
    rotation: Rotation = Rotation()
    alignment: Alignment = Alignment.BOTTOM_LEFT
    xref: bool = False

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Label":
        position = _position(root)
        size = root.get_float("size")
        layer = root.get_int("layer")
        ratio = root.get_int("ratio") if root.has_attribute("ratio") else 8
        rotation = _rotation(root)
        alignment = (
            Alignment.parse(root.get_string("align"), errors)
            if root.has_attribute("align")
            else Alignment.BOTTOM_LEFT
        )
        xref = root.get_bool("xref") if root.has_attribute("xref") else False
        return cls(
            position=position,
            size=size,
            layer=layer,
            ratio=ratio,
            rotation=rotation,
            alignment=alignment,
            xref=xref,
        )


@dataclass(frozen=True)
class Module:
    """A hierarchical module; only its name is read."""

    name: str

    @classmethod
    def from_element(cls, root: DomElement) -> "Module":
        return cls(name=root.get_string("name"))


@dataclass(frozen=True)
class PinRef:
    """Reference from a net segment to a pin of a placed gate."""

    part: str
    gate: str
    pin: str

    @classmethod
    def from_element(cls, root: DomElement) -> "PinRef":
        part = root.get_string("part")
        gate = root.get_string("gate")
        pin = root.get_string("pin")
        return cls(part=part, gate=gate, pin=pin)


@dataclass(frozen=True)
class Segment:
    """A connected piece of a net: pin references, wires, junctions and labels."""

    pin_refs: Tuple[PinRef, ...] = ()
    wires: Tuple[Wire, ...] = ()
    junctions: Tuple[Point, ...] = ()
    labels: Tuple[Label, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Segment":
        builders: Dict[str, Tuple[str, Callable[[DomElement], object]]] = {
            "pinref": ("pin_refs", PinRef.from_element),
            "wire": ("wires", lambda c: Wire.from_element(c, errors)),
            "junction": ("junctions", _position),
            # Label problems inside segments are not reported.
            "label": ("labels", lambda c: Label.from_element(c)),
        }
        items: Dict[str, List[object]] = {key: [] for key, _ in builders.values()}
        for child in root.children:
            tag = child.tag_name
            if tag in builders:
                key, build = builders[tag]
                items[key].append(build(child))
            elif errors is not None:
                errors.append(f"Unknown net segment child: {tag}")
        return cls(**{key: tuple(values) for key, values in items.items()})


@dataclass(frozen=True)
class Net:
    """A net of a sheet with its segments."""

    name: str
    net_class: int = 0
    segments: Tuple[Segment, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Net":
        name = root.get_string("name")
        net_class = root.get_int("class") if root.has_attribute("class") else 0
        segments = []
        for child in root.children:
            if child.tag_name == "segment":
                segments.append(Segment.from_element(child, errors))
            elif errors is not None:
                errors.append(f"Unknown net child: {child.tag_name}")
        return cls(name=name, net_class=net_class, segments=tuple(segments))


@dataclass(frozen=True)
class Part:
    """A component used in a schematic."""

    name: str
    library: str
    device_set: str
    device: str
    library_urn: str = ""
    technology: str = ""
    value: str = ""
    attributes: Tuple[Attribute, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Part":
        name = root.get_string("name")
        library = root.get_string("library")
        library_urn = (
            root.get_string("library_urn") if root.has_attribute("library_urn") else ""
        )
        device_set = root.get_string("deviceset")
        device = root.get_string("device")
        technology = (
            root.get_string("technology") if root.has_attribute("technology") else ""
        )
        value = root.get_string("value") if root.has_attribute("value") else ""
        attributes = _attributes(root, "part", errors)
        return cls(
            name=name,
            library=library,
            device_set=device_set,
            device=device,
            library_urn=library_urn,
            technology=technology,
            value=value,
            attributes=attributes,
        )


@dataclass(frozen=True)
class Sheet:
    """A schematic sheet: its drawing, instances, busses and nets."""

    description: str = ""
    wires: Tuple[Wire, ...] = ()
    rectangles: Tuple[Rectangle, ...] = ()
    circles: Tuple[Circle, ...] = ()
    polygons: Tuple[Polygon, ...] = ()
    texts: Tuple[Text, ...] = ()
    frames: Tuple[Frame, ...] = ()
    dimensions: Tuple[Dimension, ...] = ()
    instances: Tuple[Instance, ...] = ()
    buses: Tuple[Bus, ...] = ()
    nets: Tuple[Net, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Sheet":
        builders: Dict[str, Tuple[str, Callable[[DomElement], object]]] = {
            "wire": ("wires", lambda c: Wire.from_element(c, errors)),
            "rectangle": ("rectangles", Rectangle.from_element),
            "circle": ("circles", Circle.from_element),
            "polygon": ("polygons", lambda c: Polygon.from_element(c, errors)),
            "text": ("texts", lambda c: Text.from_element(c, errors)),
            "frame": ("frames", Frame.from_element),
            "dimension": ("dimensions", Dimension.from_element),
        }
        items: Dict[str, List[object]] = {key: [] for key, _ in builders.values()}
        description = ""
        instances: List[Instance] = []
        buses: List[Bus] = []
        nets: List[Net] = []
        for child in root.children:
            tag = child.tag_name
            if tag == "description":
                description = child.text
            elif tag == "plain":
                for plain_child in child.children:
                    plain_tag = plain_child.tag_name
                    if plain_tag in builders:
                        key, build = builders[plain_tag]
                        items[key].append(build(plain_child))
                    elif errors is not None:
                        errors.append(f"Unknown sheet plain child: {plain_tag}")
            elif tag == "instances":
                instances.extend(Instance.from_element(c, errors) for c in child.children)
            elif tag == "busses":
                buses.extend(Bus.from_element(c) for c in child.children)
            elif tag == "nets":
                nets.extend(Net.from_element(c, errors) for c in child.children)
            elif errors is not None:
                errors.append(f"Unknown sheet child: {tag}")
        return cls(
            description=description,
            instances=tuple(instances),
            buses=tuple(buses),
            nets=tuple(nets),
            **{key: tuple(values) for key, values in items.items()},
        )


@dataclass(frozen=True)
class Schematic:
    """A schematic file: its libraries, parts and sheets."""

    description: str = ""
    grid: Grid = Grid()
    libraries: Tuple[Library, ...] = ()
    modules: Tuple[Module, ...] = ()
    parts: Tuple[Part, ...] = ()
    sheets: Tuple[Sheet, ...] = ()

    @classmethod
    def from_bytes(
        cls, content: Union[bytes, str], errors: Errors = None
    ) -> "Schematic":
        """Parse the XML content of a schematic file."""
        root = parse_document(content, "schematic")
        drawing = root.first_child("drawing")
        grid = (
            Grid.from_element(drawing.first_child("grid"))
            if drawing.has_child("grid")
            else Grid()
        )
        schematic = drawing.first_child("schematic")
        description = (
            schematic.first_child("description").text
            if schematic.has_child("description")
            else ""
        )

        def children(tag: str) -> Tuple[DomElement, ...]:
            if schematic.has_child(tag):
                return schematic.first_child(tag).children
            return ()

        libraries = tuple(
            Library.from_element(c, errors) for c in children("libraries")
        )
        modules = tuple(Module.from_element(c) for c in children("modules"))
        parts = tuple(Part.from_element(c, errors) for c in children("parts"))
        sheets = tuple(Sheet.from_element(c, errors) for c in children("sheets"))
        return cls(
            description=description,
            grid=grid,
            libraries=libraries,
            modules=modules,
            parts=parts,
            sheets=sheets,
        )

    @classmethod
    def from_file(
        cls, path: Union[str, PathLike], errors: Errors = None
    ) -> "Schematic":
        """Read and parse a schematic file."""
        return cls.from_bytes(read_file(path), errors)