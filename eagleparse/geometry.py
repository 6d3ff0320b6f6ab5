"""Points and rotations as written in EAGLE files."""

from __future__ import annotations

from dataclasses import dataclass

from .dom import _to_float


@dataclass(frozen=True)
class Point:
    """A position in the drawing plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rotation:
    """Rotation angle with spin and mirror flags."""

    spin: bool = False
    mirror: bool = False
    angle: float = 0.0

    @classmethod
    def parse(cls, text: str) -> "Rotation":
        """Parse a rotation such as ``R90``, ``MR180`` or ``SR45``.

        An angle that cannot be read is taken as zero.
        """
        number = text.replace("M", "").replace("S", "").replace("R", "")
        angle = _to_float(number)
        return cls(
            spin="S" in text,
            mirror="M" in text,
            angle=0.0 if angle is None else angle,
        )