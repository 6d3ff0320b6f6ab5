"""EAGLE libraries: symbols, packages and device sets."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Callable, List, Optional, Tuple, TypeVar, Union

from .deviceset import DeviceSet
from .dom import DomElement, EagleError, parse_document, read_file
from .footprint import Package
from .symbol import Symbol

Errors = Optional[List[str]]
_T = TypeVar("_T")


def _collect(
    root: DomElement,
    container: str,
    label: str,
    build: Callable[[DomElement], _T],
    errors: Errors,
) -> Tuple[_T, ...]:
    """Build every child of ``container``, skipping and reporting failures."""
    if not root.has_child(container):
        return ()
    items = []
    for child in root.first_child(container).children:
        try:
            items.append(build(child))
        except EagleError as exc:
            if errors is not None:
                errors.append(f"Failed to parse {label}: {exc}")
    return tuple(items)


@dataclass(frozen=True)
class Library:
    """A library, either a standalone file or embedded in a design."""

    embedded_name: str = ""
    embedded_urn: str = ""
    description: str = ""
    symbols: Tuple[Symbol, ...] = ()
    packages: Tuple[Package, ...] = ()
    device_sets: Tuple[DeviceSet, ...] = ()

    @classmethod
    def from_element(cls, root: DomElement, errors: Errors = None) -> "Library":
        """Read a ``<library>`` element; broken entries are skipped."""
        embedded_name = root.get_string("name") if root.has_attribute("name") else ""
        embedded_urn = root.get_string("urn") if root.has_attribute("urn") else ""
        description = (
            root.first_child("description").text
            if root.has_child("description")
            else ""
        )
        symbols = _collect(
            root, "symbols", "symbol", lambda c: Symbol.from_element(c, errors), errors
        )
        packages = _collect(
            root, "packages", "package", lambda c: Package.from_element(c, errors), errors
        )
        device_sets = _collect(
            root,
            "devicesets",
            "deviceset",
            lambda c: DeviceSet.from_element(c, errors),
            errors,
        )
        return cls(
            embedded_name=embedded_name,
            embedded_urn=embedded_urn,
            description=description,
            symbols=symbols,
            packages=packages,
            device_sets=device_sets,
        )

    @classmethod
    def from_bytes(
        cls, content: Union[bytes, str], errors: Errors = None
    ) -> "Library":
        """Parse the XML content of a library file."""
        root = parse_document(content, "library")
        library = root.first_child("drawing").first_child("library")
        return cls.from_element(library, errors)

    @classmethod
    def from_file(cls, path: Union[str, PathLike], errors: Errors = None) -> "Library":
        """Read and parse a library file."""
        return cls.from_bytes(read_file(path), errors)