# eagleparse

Reads EAGLE XML files into plain, immutable Python objects. It handles libraries
(`.lbr`), boards (`.brd`) and schematics (`.sch`). The objects cover symbols,
packages, device sets, placed elements, signals, parts, sheets, nets and the
drawing primitives they are made of.

It uses only the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Loading files

```python
from eagleparse.library import Library
from eagleparse.board import Board
from eagleparse.schematic import Schematic

lib = Library.from_file("resistors.lbr")
board = Board.from_file("amplifier.brd")
sch = Schematic.from_file("amplifier.sch")
```

Each document class also has `from_bytes(content)`. It accepts XML that is
already in memory, as `bytes` or `str`. `Library.from_element(root)` builds a
library from a `eagleparse.dom.DomElement`, such as the `<library>` elements
embedded in boards and schematics.

The lower-level pieces are also available:

- `eagleparse.dom.parse_document(content, kind)` returns the document element
  as a `DomElement`.
- `eagleparse.dom.read_file(path)` returns the bytes of a file.

Every other class has a `from_element(root, ...)` class method that reads one
XML element.

## Errors and warnings

`eagleparse.dom.EagleError` is raised in these cases:

- a file is missing or cannot be read;
- the content is not well-formed XML;
- an expected child such as `<drawing>`, `<board>` or `<schematic>` is absent;
- a required XML attribute is absent;
- an attribute holds a bad integer, a bad number, or a boolean other than
  `yes`/`no`.

Other problems do not stop the parse, for example unknown child elements or
unknown enum values. Pass a list to collect them as messages:

```python
warnings: list[str] = []
lib = Library.from_file("resistors.lbr", warnings)
for message in warnings:
    print(message)
```

Inside a library, a symbol, package or device set that raises `EagleError`
is skipped. A `Failed to parse ...` message is added to the list, so the rest
of the library still loads.

Some messages are never collected:

- messages from libraries embedded in a board;
- messages from a board's or schematic's grid settings;
- messages from vias inside board signals;
- messages from labels inside schematic net segments.

## Walking the data

```python
for symbol in lib.symbols:
    for pin in symbol.pins:
        print(symbol.name, pin.name, pin.direction, pin.length_in_millimeters())

for package in lib.packages:
    print(package.name, len(package.smt_pads), len(package.tht_pads))

for signal in board.signals:
    for via in signal.vias:
        print(signal.name, via.position, via.start_layer(), via.end_layer())

clearance = board.design_rules.find_param("mdWireWire")
if clearance is not None:
    print(clearance.value, clearance.value_with_unit())

for sheet in sch.sheets:
    for net in sheet.nets:
        print(net.name, [ref.pin for seg in net.segments for ref in seg.pin_refs])
```

Some helpers return `None` when a value cannot be read:

- `Param.value_as_int()`, `Param.value_as_float()` and
  `Param.value_with_unit()`;
- `Via.start_layer()` and `Via.end_layer()`.

`value_with_unit()` splits a value such as `0.2mm` into `(0.2, "mm")`.

## Enums, points and rotations

Enumerated attributes are members of enums in `eagleparse.enums`, for example
`PinDirection`, `PadShape`, `WireStyle` and `GridUnit`. Each enum has an
`UNKNOWN` member for a value that was not recognised. `XmlEnum.parse(text, errors)`
maps an attribute value to its member.

Positions are `eagleparse.geometry.Point` values. Rotations such as `"MR90"`
are parsed by `eagleparse.geometry.Rotation.parse` into `angle`, `mirror` and
`spin`.

## What it does not do

- It only reads files. It has no way to write or change EAGLE files.
- It has no command-line tool.
- `Dimension` objects are counted, but their attributes are not read.
- `Module` objects carry only their name.

## Running the tests

```
pip install -e ".[test]"
pytest
```