"""Enumerations of EAGLE XML attribute values."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional


class XmlEnum(Enum):
    """Enumeration whose members are spelled by their XML attribute value."""

    @classmethod
    def parse(cls, text: str, errors: Optional[List[str]] = None):
        """Return the member for ``text``, or UNKNOWN, noting it in ``errors``."""
        unknown = cls["UNKNOWN"]
        for member in cls:
            if member is not unknown and member.value == text:
                return member
        if errors is not None:
            errors.append(f"Unknown {_LABELS[cls]}: {text}")
        return unknown


class Alignment(XmlEnum):
    UNKNOWN = ""
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"
    CENTER_LEFT = "center-left"
    CENTER = "center"
    CENTER_RIGHT = "center-right"
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"


class AttributeDisplay(XmlEnum):
    UNKNOWN = ""
    OFF = "off"
    VALUE = "value"
    NAME = "name"
    BOTH = "both"


class Font(XmlEnum):
    UNKNOWN = ""
    FIXED = "fixed"
    PROPORTIONAL = "proportional"
    VECTOR = "vector"


class GateAddLevel(XmlEnum):
    UNKNOWN = ""
    MUST = "must"
    CAN = "can"
    NEXT = "next"
    REQUEST = "request"
    ALWAYS = "always"


class GridStyle(XmlEnum):
    UNKNOWN = ""
    LINES = "lines"
    DOTS = "dots"


class GridUnit(XmlEnum):
    UNKNOWN = ""
    MICROMETERS = "mic"
    MILLIMETERS = "mm"
    MILS = "mil"
    INCHES = "inch"


class PadShape(XmlEnum):
    UNKNOWN = ""
    SQUARE = "square"
    ROUND = "round"
    OCTAGON = "octagon"
    LONG = "long"
    OFFSET = "offset"


class PinDirection(XmlEnum):
    UNKNOWN = ""
    NOT_CONNECTED = "nc"
    INPUT = "in"
    OUTPUT = "out"
    IO = "io"
    OPEN_COLLECTOR = "oc"
    POWER = "pwr"
    PASSIVE = "pas"
    HIGH_Z = "hiz"
    SUPPLY = "sup"


class PinFunction(XmlEnum):
    UNKNOWN = ""
    NONE = "none"
    DOT = "dot"
    CLOCK = "clk"
    DOT_CLOCK = "dotclk"


class PinLength(XmlEnum):
    UNKNOWN = ""
    POINT = "point"
    SHORT = "short"
    MIDDLE = "middle"
    LONG = "long"


class PinVisibility(XmlEnum):
    UNKNOWN = ""
    OFF = "off"
    PAD = "pad"
    PIN = "pin"
    BOTH = "both"


class PolygonPour(XmlEnum):
    UNKNOWN = ""
    SOLID = "solid"
    HATCH = "hatch"
    CUTOUT = "cutout"


class ViaShape(XmlEnum):
    UNKNOWN = ""
    SQUARE = "square"
    ROUND = "round"
    OCTAGON = "octagon"


class WireCap(XmlEnum):
    UNKNOWN = ""
    FLAT = "flat"
    ROUND = "round"


class WireStyle(XmlEnum):
    UNKNOWN = ""
    CONTINUOUS = "continuous"
    LONG_DASH = "longdash"
    SHORT_DASH = "shortdash"
    DASH_DOT = "dashdot"


_LABELS = {
    Alignment: "alignment",
    AttributeDisplay: "attribute display",
    Font: "font",
    GateAddLevel: "gate add level",
    GridStyle: "grid style",
    GridUnit: "grid unit",
    PadShape: "pad shape",
    PinDirection: "pin direction",
    PinFunction: "pin function",
    PinLength: "pin length",
    PinVisibility: "pin visibility",
    PolygonPour: "polygon pour",
    ViaShape: "via shape",
    WireCap: "wire cap",
    WireStyle: "wire style",
}