"""Device sets: gates, devices, pin-to-pad connections and technologies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .dom import DomElement
from .enums import GateAddLevel
from .geometry import Point
from .primitives import Attribute

Errors = Optional[List[str]]


@dataclass(frozen=True)
class Connection:
    """Connects a pin of a gate to one or more pads of a package."""

    gate: str
    pin: str
    pads: Tuple[str, ...]

    @classmethod
    def from_element(cls, root: DomElement) -> "Connection":
        gate = root.get_string("gate")
        pin = root.get_string("pin")
        pads = tuple(root.get_string("pad").split(" "))
        return cls(gate=gate, pin=pin, pads=pads)


@dataclass(frozen=True)
class Technology:
    """A named technology variant with its attributes."""

    name: str
    attributes: Tuple[Attribute, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Technology":
        name = root.get_string("name")
        attributes = []
        for child in root.children:
            if child.tag_name == "attribute":
                attributes.append(Attribute.from_element(child, errors))
            elif errors is not None:
                errors.append(f"Unknown technology child: {child.tag_name}")
        return cls(name=name, attributes=tuple(attributes))


@dataclass(frozen=True)
class Device:
    """A device variant: the package it uses and how its pins connect."""

    name: str = ""
    package: str = ""
    connections: Tuple[Connection, ...] = ()
    technologies: Tuple[Technology, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Device":
        name = root.get_string("name") if root.has_attribute("name") else ""
        package = root.get_string("package") if root.has_attribute("package") else ""
        connections: Tuple[Connection, ...] = ()
        if root.has_child("connects"):
            connections = tuple(
                Connection.from_element(child)
                for child in root.first_child("connects").children
            )
        technologies: Tuple[Technology, ...] = ()
        if root.has_child("technologies"):
            technologies = tuple(
                Technology.from_element(child, errors)
                for child in root.first_child("technologies").children
            )
        return cls(
            name=name,
            package=package,
            connections=connections,
            technologies=technologies,
        )


@dataclass(frozen=True)
class Gate:
    """A placement of a symbol within a device set."""

    name: str
    symbol: str
    position: Point
    add_level: GateAddLevel = GateAddLevel.NEXT

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Gate":
        name = root.get_string("name")
        symbol = root.get_string("symbol")
        x = root.get_float("x")
        y = root.get_float("y")
        add_level = (
            GateAddLevel.parse(root.get_string("addlevel"), errors)
            if root.has_attribute("addlevel")
            else GateAddLevel.NEXT
        )
        return cls(name=name, symbol=symbol, position=Point(x, y), add_level=add_level)


@dataclass(frozen=True)
class DeviceSet:
    """A component: its gates and the devices that implement it."""

    name: str
    description: str = ""
    prefix: str = ""
    user_value: bool = False
    gates: Tuple[Gate, ...] = ()
    devices: Tuple[Device, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "DeviceSet":
        name = root.get_string("name")
        prefix = root.get_string("prefix") if root.has_attribute("prefix") else ""
        user_value = (
            root.get_bool("uservalue") if root.has_attribute("uservalue") else False
        )
        description = (
            root.first_child("description").text
            if root.has_child("description")
            else ""
        )
        gates: Tuple[Gate, ...] = ()
        if root.has_child("gates"):
            gates = tuple(
                Gate.from_element(child, errors)
                for child in root.first_child("gates").children
            )
        devices: Tuple[Device, ...] = ()
        if root.has_child("devices"):
            devices = tuple(
                Device.from_element(child, errors)
                for child in root.first_child("devices").children
            )
        return cls(
            name=name,
            description=description,
            prefix=prefix,
            user_value=user_value,
            gates=gates,
            devices=devices,
        )