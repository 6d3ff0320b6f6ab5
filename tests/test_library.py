import pytest

from eagleparse.dom import EagleError, parse_document
from eagleparse.library import Library

LIBRARY_XML = """<?xml version="1.0" encoding="utf-8"?>
<eagle version="9.6.2">
<drawing>
<library>
<description>Test parts</description>
<packages>
<package name="0603"><smd name="1" x="-0.8" y="0" dx="0.8" dy="0.9" layer="1"/></package>
<package><smd name="1" x="0" y="0" dx="1" dy="1" layer="1"/></package>
</packages>
<symbols>
<symbol name="R"><pin name="1" x="0" y="0"/><pin name="2" x="5" y="0"/></symbol>
</symbols>
<devicesets>
<deviceset name="RES" prefix="R">
<gates><gate name="G$1" symbol="R" x="0" y="0"/></gates>
</deviceset>
<deviceset name="BAD" uservalue="maybe"/>
</devicesets>
</library>
</drawing>
</eagle>
"""


def test_from_bytes_reads_content():
    errors = []
    lib = Library.from_bytes(LIBRARY_XML.encode(), errors)
    assert lib.description == "Test parts"
    assert [p.name for p in lib.packages] == ["0603"]
    assert [s.name for s in lib.symbols] == ["R"]
    assert [len(s.pins) for s in lib.symbols] == [2]
    assert [d.name for d in lib.device_sets] == ["RES"]
    assert lib.embedded_name == ""


def test_broken_entries_are_reported():
    errors = []
    Library.from_bytes(LIBRARY_XML, errors)
    assert errors == [
        "Failed to parse package: Attribute 'name' not found in XML element 'package'.",
        "Failed to parse deviceset: Invalid bool in attribute uservalue",
    ]


def test_broken_entries_skipped_without_error_list():
    lib = Library.from_bytes(LIBRARY_XML)
    assert len(lib.packages) == 1
    assert len(lib.device_sets) == 1


def test_embedded_library_element():
    root = parse_document(
        '<library name="rcl" urn="urn:adsk.eagle:library:334"><symbols/></library>',
        "test",
    )
    lib = Library.from_element(root)
    assert lib.embedded_name == "rcl"
    assert lib.embedded_urn == "urn:adsk.eagle:library:334"
    assert lib.symbols == ()


def test_empty_library_element():
    lib = Library.from_element(parse_document("<library/>", "test"))
    assert lib == Library()


def test_invalid_xml_raises():
    with pytest.raises(EagleError, match="Error while parsing EAGLE library"):
        Library.from_bytes(b"<eagle><drawing>")


def test_missing_library_element_raises():
    with pytest.raises(EagleError, match="Child not found: library"):
        Library.from_bytes(b"<eagle><drawing/></eagle>")


def test_from_file(tmp_path):
    path = tmp_path / "parts.lbr"
    path.write_text(LIBRARY_XML, encoding="utf-8")
    lib = Library.from_file(path)
    assert lib == Library.from_bytes(LIBRARY_XML.encode())


def test_from_file_missing(tmp_path):
    with pytest.raises(EagleError, match="File does not exist"):
        Library.from_file(tmp_path / "missing.lbr")