import pytest

from eagleparse.enums import (
    Alignment,
    AttributeDisplay,
    Font,
    GateAddLevel,
    GridStyle,
    GridUnit,
    PadShape,
    PinDirection,
    PinFunction,
    PinLength,
    PinVisibility,
    PolygonPour,
    ViaShape,
    WireCap,
    WireStyle,
)


@pytest.mark.parametrize(
    "cls,text,member",
    [
        (Alignment, "bottom-left", Alignment.BOTTOM_LEFT),
        (Alignment, "center", Alignment.CENTER),
        (Alignment, "top-right", Alignment.TOP_RIGHT),
        (AttributeDisplay, "both", AttributeDisplay.BOTH),
        (Font, "vector", Font.VECTOR),
        (GateAddLevel, "request", GateAddLevel.REQUEST),
        (GridStyle, "dots", GridStyle.DOTS),
        (GridUnit, "mic", GridUnit.MICROMETERS),
        (GridUnit, "inch", GridUnit.INCHES),
        (PadShape, "offset", PadShape.OFFSET),
        (PinDirection, "nc", PinDirection.NOT_CONNECTED),
        (PinDirection, "hiz", PinDirection.HIGH_Z),
        (PinFunction, "dotclk", PinFunction.DOT_CLOCK),
        (PinLength, "middle", PinLength.MIDDLE),
        (PinVisibility, "pad", PinVisibility.PAD),
        (PolygonPour, "cutout", PolygonPour.CUTOUT),
        (ViaShape, "octagon", ViaShape.OCTAGON),
        (WireCap, "flat", WireCap.FLAT),
        (WireStyle, "shortdash", WireStyle.SHORT_DASH),
    ],
)
def test_known_values(cls, text, member):
    errors = []
    assert cls.parse(text, errors) is member
    assert errors == []


def test_every_member_round_trips():
    errors = []
    for member in Alignment:
        if member is not Alignment.UNKNOWN:
            assert Alignment.parse(member.value, errors) is member
    for member in AttributeDisplay:
        if member is not AttributeDisplay.UNKNOWN:
            assert AttributeDisplay.parse(member.value, errors) is member
    for member in Font:
        if member is not Font.UNKNOWN:
            assert Font.parse(member.value, errors) is member
    for member in GateAddLevel:
        if member is not GateAddLevel.UNKNOWN:
            assert GateAddLevel.parse(member.value, errors) is member
    for member in GridStyle:
        if member is not GridStyle.UNKNOWN:
            assert GridStyle.parse(member.value, errors) is member
    for member in GridUnit:
        if member is not GridUnit.UNKNOWN:
            assert GridUnit.parse(member.value, errors) is member
    for member in PadShape:
        if member is not PadShape.UNKNOWN:
            assert PadShape.parse(member.value, errors) is member
    for member in PinDirection:
        if member is not PinDirection.UNKNOWN:
            assert PinDirection.parse(member.value, errors) is member
    for member in PinFunction:
        if member is not PinFunction.UNKNOWN:
            assert PinFunction.parse(member.value, errors) is member
    for member in PinLength:
        if member is not PinLength.UNKNOWN:
            assert PinLength.parse(member.value, errors) is member
    for member in PinVisibility:
        if member is not PinVisibility.UNKNOWN:
            assert PinVisibility.parse(member.value, errors) is member
    for member in PolygonPour:
        if member is not PolygonPour.UNKNOWN:
            assert PolygonPour.parse(member.value, errors) is member
    for member in ViaShape:
        if member is not ViaShape.UNKNOWN:
            assert ViaShape.parse(member.value, errors) is member
    for member in WireCap:
        if member is not WireCap.UNKNOWN:
            assert WireCap.parse(member.value, errors) is member
    for member in WireStyle:
        if member is not WireStyle.UNKNOWN:
            assert WireStyle.parse(member.value, errors) is member
    assert errors == []


@pytest.mark.parametrize(
    "cls,label",
    [
        (Alignment, "alignment"),
        (AttributeDisplay, "attribute display"),
        (Font, "font"),
        (GateAddLevel, "gate add level"),
        (GridStyle, "grid style"),
        (GridUnit, "grid unit"),
        (PadShape, "pad shape"),
        (PinDirection, "pin direction"),
        (PinFunction, "pin function"),
        (PinLength, "pin length"),
        (PinVisibility, "pin visibility"),
        (PolygonPour, "polygon pour"),
        (ViaShape, "via shape"),
        (WireCap, "wire cap"),
        (WireStyle, "wire style"),
    ],
)
def test_unknown_value_reported(cls, label):
    errors = ["earlier"]
    assert cls.parse("bogus", errors) is cls.UNKNOWN
    assert errors == ["earlier", f"Unknown {label}: bogus"]


def test_unknown_without_error_list():
    assert Alignment.parse("bogus") is Alignment.UNKNOWN
    assert AttributeDisplay.parse("bogus") is AttributeDisplay.UNKNOWN
    assert Font.parse("bogus") is Font.UNKNOWN
    assert GateAddLevel.parse("bogus") is GateAddLevel.UNKNOWN
    assert GridStyle.parse("bogus") is GridStyle.UNKNOWN
    assert GridUnit.parse("bogus") is GridUnit.UNKNOWN
    assert PadShape.parse("bogus") is PadShape.UNKNOWN
    assert PinDirection.parse("bogus") is PinDirection.UNKNOWN
    assert PinFunction.parse("bogus") is PinFunction.UNKNOWN
    assert PinLength.parse("bogus") is PinLength.UNKNOWN
    assert PinVisibility.parse("bogus") is PinVisibility.UNKNOWN
    assert PolygonPour.parse("bogus") is PolygonPour.UNKNOWN
    assert ViaShape.parse("bogus") is ViaShape.UNKNOWN
    assert WireCap.parse("bogus") is WireCap.UNKNOWN
    assert WireStyle.parse("bogus") is WireStyle.UNKNOWN


def test_empty_string_is_unknown():
    errors = []
    assert Font.parse("", errors) is Font.UNKNOWN
    assert errors == ["Unknown font: "]


def test_parse_is_case_sensitive():
    errors = []
    assert WireCap.parse("Round", errors) is WireCap.UNKNOWN
    assert errors == ["Unknown wire cap: Round"]