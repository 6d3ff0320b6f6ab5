import pytest

from eagleparse.dom import EagleError, parse_document
from eagleparse.enums import PadShape
from eagleparse.footprint import Hole, Package, SmtPad, ThtPad
from eagleparse.geometry import Point


def element(xml):
    return parse_document(xml, "test")


def test_hole_reads_position_and_drill():
    hole = Hole.from_element(element('<hole x="1.5" y="-2" drill="3.2"/>'))
    assert hole.position == Point(1.5, -2.0)
    assert hole.diameter == 3.2


def test_hole_without_drill_raises():
    with pytest.raises(EagleError, match="drill"):
        Hole.from_element(element('<hole x="1" y="2"/>'))


def test_smt_pad_defaults():
    pad = SmtPad.from_element(
        element('<smd name="1" x="0.5" y="0.25" dx="1.2" dy="0.6" layer="1"/>')
    )
    assert pad.name == "1"
    assert pad.layer == 1
    assert pad.position == Point(0.5, 0.25)
    assert pad.width == 1.2
    assert pad.height == 0.6
    assert pad.roundness == 0
    assert pad.stop is True
    assert pad.cream is True
    assert pad.rotation.angle == 0.0


def test_smt_pad_optional_attributes():
    pad = SmtPad.from_element(
        element(
            '<smd name="A" x="0" y="0" dx="1" dy="2" layer="16" rot="R90" '
            'roundness="50" stop="no" cream="no"/>'
        )
    )
    assert pad.roundness == 50
    assert pad.stop is False
    assert pad.cream is False
    assert pad.rotation.angle == 90.0


def test_smt_pad_invalid_bool_raises():
    with pytest.raises(EagleError, match="Invalid bool"):
        SmtPad.from_element(
            element('<smd name="1" x="0" y="0" dx="1" dy="1" layer="1" stop="maybe"/>')
        )


def test_tht_pad_defaults():
    pad = ThtPad.from_element(element('<pad name="P" x="1" y="2" drill="0.8"/>'))
    assert pad.drill_diameter == 0.8
    assert pad.outer_diameter == 0.0
    assert pad.shape is PadShape.ROUND
    assert pad.stop is True


def test_tht_pad_shape_and_diameter():
    pad = ThtPad.from_element(
        element(
            '<pad name="P" x="1" y="2" drill="0.8" diameter="1.6" '
            'shape="octagon" rot="MR180" stop="no"/>'
        )
    )
    assert pad.outer_diameter == 1.6
    assert pad.shape is PadShape.OCTAGON
    assert pad.rotation.mirror is True
    assert pad.rotation.angle == 180.0
    assert pad.stop is False


def test_tht_pad_unknown_shape_is_reported():
    errors = []
    pad = ThtPad.from_element(
        element('<pad name="P" x="0" y="0" drill="1" shape="blob"/>'), errors
    )
    assert pad.shape is PadShape.UNKNOWN
    assert errors == ["Unknown pad shape: blob"]


PACKAGE_XML = """
<package name="SOT23">
  <description>Small <b>outline</b></description>
  <wire x1="0" y1="0" x2="1" y2="0" width="0.1" layer="21"/>
  <rectangle x1="0" y1="0" x2="1" y2="1" layer="51"/>
  <circle x="0" y="0" radius="1" width="0.1" layer="21"/>
  <polygon width="0.1" layer="1">
    <vertex x="0" y="0"/>
    <vertex x="1" y="0"/>
    <vertex x="1" y="1"/>
  </polygon>
  <text x="0" y="0" size="1" layer="25">&gt;NAME</text>
  <hole x="0" y="0" drill="2"/>
  <pad name="1" x="0" y="0" drill="0.8"/>
  <smd name="2" x="1" y="0" dx="1" dy="1" layer="1"/>
  <smd name="3" x="2" y="0" dx="1" dy="1" layer="1"/>
  <dimension/>
  <mystery/>
</package>
"""


def test_package_collects_children():
    errors = []
    package = Package.from_element(element(PACKAGE_XML), errors)
    assert package.name == "SOT23"
    assert package.description == "Small outline"
    assert len(package.wires) == 1
    assert len(package.rectangles) == 1
    assert len(package.circles) == 1
    assert len(package.polygons) == 1
    assert len(package.polygons[0].vertices) == 3
    assert package.texts[0].value == ">NAME"
    assert len(package.holes) == 1
    assert [p.name for p in package.tht_pads] == ["1"]
    assert [p.name for p in package.smt_pads] == ["2", "3"]
    assert len(package.dimensions) == 1
    assert errors == ["Unknown package child: mystery"]


def test_package_without_error_list_ignores_unknown_children():
    package = Package.from_element(element('<package name="X"><mystery/></package>'))
    assert package.name == "X"
    assert package.wires == ()
    assert package.description == ""


def test_package_requires_name():
    with pytest.raises(EagleError, match="name"):
        Package.from_element(element("<package/>"))


def test_package_invalid_child_raises():
    with pytest.raises(EagleError, match="layer"):
        Package.from_element(
            element('<package name="X"><wire x1="0" y1="0" x2="1" y2="1" width="1"/></package>')
        )