"""Read-only XML element tree used by the EAGLE file parsers."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

_INT_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_FLOAT_RE = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|nan)\s*",
    re.ASCII | re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class EagleError(RuntimeError):
    """Raised when an EAGLE file cannot be read or is malformed."""


def _to_int(text: str) -> Optional[int]:
    """Parse a 32-bit decimal integer, or return None if it is not one."""
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _to_float(text: str) -> Optional[float]:
    """Parse a decimal floating point number, or return None if it is not one."""
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        return None
    return value


@dataclass(frozen=True)
class DomElement:
    """An XML element with its attributes, full text and child elements."""

    tag_name: str
    text: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["DomElement", ...] = ()

    @classmethod
    def from_etree(cls, node: Optional[ET.Element]) -> "DomElement":
        """Build a tree from an ElementTree element."""
        if node is None:
            raise EagleError("Invalid XML node!")
        children = tuple(
            cls.from_etree(child) for child in node if isinstance(child.tag, str)
        )
        return cls(
            tag_name=node.tag,
            text="".join(node.itertext()),
            attributes=dict(node.attrib),
            children=children,
        )

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_string(self, name: str) -> str:
        try:
            return self.attributes[name]
        except KeyError:
            raise EagleError(
                f"Attribute '{name}' not found in XML element '{self.tag_name}'."
            ) from None

    def get_bool(self, name: str) -> bool:
        value = self.get_string(name)
        if value == "yes":
            return True
        if value == "no":
            return False
        raise EagleError(f"Invalid bool in attribute {name}")

    def get_int(self, name: str) -> int:
        value = _to_int(self.get_string(name))
        if value is None:
            raise EagleError(f"Invalid integer in attribute {name}")
        return value

    def get_float(self, name: str) -> float:
        value = _to_float(self.get_string(name))
        if value is None:
            raise EagleError(f"Invalid double in attribute {name}")
        return value

    def has_child(self, tag_name: str = "") -> bool:
        """Tell whether a child with this tag exists; an empty tag matches any."""
        return any(not tag_name or c.tag_name == tag_name for c in self.children)

    def first_child(self, tag_name: str = "") -> "DomElement":
        """Return the first child with this tag; an empty tag matches any."""
        for child in self.children:
            if not tag_name or child.tag_name == tag_name:
                return child
        raise EagleError(f"Child not found: {tag_name}")


def parse_document(content: Union[bytes, str], kind: str) -> DomElement:
    """Parse XML content and return its document element."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise EagleError(f"Error while parsing EAGLE {kind}: {exc}") from exc
    return DomElement.from_etree(root)


def read_file(path: Union[str, PathLike]) -> bytes:
    """Read the whole content of a file."""
    file_path = Path(path)
    if not file_path.exists():
        raise EagleError(f"File does not exist: {path}")
    try:
        return file_path.read_bytes()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise EagleError(f"Cannot open file {path}: {reason}") from exc