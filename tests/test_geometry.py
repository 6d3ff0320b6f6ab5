import pytest

from eagleparse.geometry import Point, Rotation


def test_point_equality():
    assert Point(1.5, -2.0) == Point(1.5, -2.0)
    assert not (Point(1.5, -2.0) == Point(-2.0, 1.5))


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 3.0
    assert p == Point(1.0, 2.0)
    assert p.x == 1.0


def test_point_defaults_to_origin():
    assert Point() == Point(0.0, 0.0)


def test_default_rotation():
    rot = Rotation()
    assert (rot.spin, rot.mirror, rot.angle) == (False, False, 0.0)


def test_plain_rotation():
    rot = Rotation.parse("R90")
    assert rot == Rotation(spin=False, mirror=False, angle=90.0)


def test_mirrored_rotation():
    rot = Rotation.parse("MR180")
    assert rot.mirror is True
    assert rot.spin is False
    assert rot.angle == 180.0


def test_spin_rotation():
    rot = Rotation.parse("SR45.5")
    assert rot.spin is True
    assert rot.mirror is False
    assert rot.angle == 45.5


def test_spin_and_mirror():
    rot = Rotation.parse("SMR270")
    assert rot == Rotation(spin=True, mirror=True, angle=270.0)


def test_unreadable_angle_is_zero():
    assert Rotation.parse("Rxyz").angle == 0.0
    assert Rotation.parse("").angle == 0.0


def test_parse_round_trip_equals_constructed():
    assert Rotation.parse("R0") == Rotation()