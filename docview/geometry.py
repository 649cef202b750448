"""
Geometry primitives shared by every document variant.

Rotations are clockwise in screen space (y grows downwards), matching the
SVG convention used by :class:`AffineTransform`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .utils import normalize_degrees

__all__ = [
    "Rotation",
    "Standard",
    "Fine",
    "RotationMode",
    "FlipAxis",
    "TransformState",
    "AffineTransform",
    "nearest_quarter_turn",
]


class Rotation(Enum):
    """One of the four quarter-turn angles."""

    NONE = 0
    CW90 = 90
    CW180 = 180
    CW270 = 270

    @property
    def degrees(self) -> int:
        return self.value

    @property
    def swaps_dimensions(self) -> bool:
        return self in (Rotation.CW90, Rotation.CW270)

    def rotate_cw(self) -> "Rotation":
        return Rotation((self.value + 90) % 360)

    def rotate_ccw(self) -> "Rotation":
        return Rotation((self.value + 270) % 360)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Rotation":
        """Return the quarter turn for an exact multiple of 90 degrees."""

        folded = normalize_degrees(degrees)
        if folded % 90 != 0:
            raise ValueError(f"{degrees} is not a multiple of 90 degrees")
        return cls(int(folded))


def nearest_quarter_turn(degrees: float) -> Rotation:
    """Round *degrees* to the closest quarter turn (ties round up)."""

    steps = math.floor(normalize_degrees(degrees) / 90.0 + 0.5)
    return Rotation((steps * 90) % 360)


@dataclass(frozen=True, slots=True)
class Standard:
    """A quarter-turn rotation."""

    rotation: Rotation = Rotation.NONE

    @property
    def degrees(self) -> float:
        return float(self.rotation.degrees)

    def is_multiple_of_90(self) -> bool:
        return True

    def is_none(self) -> bool:
        return self.rotation is Rotation.NONE

    def nearest(self) -> Rotation:
        return self.rotation

    def rotate_cw(self) -> "Standard":
        return Standard(self.rotation.rotate_cw())

    def rotate_ccw(self) -> "Standard":
        return Standard(self.rotation.rotate_ccw())

    def __add__(self, other: "RotationMode") -> "RotationMode":
        if isinstance(other, Standard):
            return Standard(nearest_quarter_turn(self.degrees + other.degrees))
        if isinstance(other, Fine):
            return Fine(normalize_degrees(self.degrees + other.degrees))
        return NotImplemented


@dataclass(frozen=True, slots=True)
class Fine:
    """An arbitrary rotation angle in degrees."""

    degrees: float

    def is_multiple_of_90(self) -> bool:
        return abs(math.remainder(self.degrees, 90.0)) < 0.01

    def is_none(self) -> bool:
        return abs(math.remainder(self.degrees, 360.0)) < 0.01

    def nearest(self) -> Rotation:
        return nearest_quarter_turn(self.degrees)

    def rotate_cw(self) -> "Fine":
        return Fine(normalize_degrees(self.degrees + 90.0))

    def rotate_ccw(self) -> "Fine":
        return Fine(normalize_degrees(self.degrees - 90.0))

    def __add__(self, other: "RotationMode") -> "RotationMode":
        if isinstance(other, (Standard, Fine)):
            return Fine(normalize_degrees(self.degrees + other.degrees))
        return NotImplemented


RotationMode = Union[Standard, Fine]


class FlipAxis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True, slots=True)
class TransformState:
    """Accumulated rotation and flips, applied rotate-then-flip."""

    rotation: RotationMode = Standard()
    flip_horizontal: bool = False
    flip_vertical: bool = False

    @property
    def is_identity(self) -> bool:
        return self.rotation.is_none() and not self.flip_horizontal and not self.flip_vertical

    @property
    def mirrored(self) -> bool:
        """True when exactly one flip is active, which reverses rotation direction."""

        return self.flip_horizontal != self.flip_vertical

    def with_rotation(self, rotation: RotationMode) -> "TransformState":
        return replace(self, rotation=rotation)

    def toggled(self, axis: FlipAxis) -> "TransformState":
        if axis is FlipAxis.HORIZONTAL:
            return replace(self, flip_horizontal=not self.flip_horizontal)
        return replace(self, flip_vertical=not self.flip_vertical)


_QUARTER_TURNS = {0: (1.0, 0.0), 90: (0.0, 1.0), 180: (-1.0, 0.0), 270: (0.0, -1.0)}


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """
    2x3 affine matrix in SVG order.

    Maps ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``. ``m1 @ m2``
    applies ``m2`` first, then ``m1``.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, degrees: float) -> "AffineTransform":
        folded = normalize_degrees(degrees)
        if folded in _QUARTER_TURNS:
            cos, sin = _QUARTER_TURNS[int(folded)]
        else:
            radians = math.radians(folded)
            cos, sin = math.cos(radians), math.sin(radians)
        return cls(a=cos, b=sin, c=-sin, d=cos)

    def __matmul__(self, other: "AffineTransform") -> "AffineTransform":
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return AffineTransform(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def then(self, other: "AffineTransform") -> "AffineTransform":
        """Return the transform applying ``self`` first and ``other`` second."""

        return other @ self

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def transform_rect(self, x: float, y: float, width: float, height: float) -> tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)`` of the transformed rectangle."""

        corners = [
            self.apply(x, y),
            self.apply(x + width, y),
            self.apply(x, y + height),
            self.apply(x + width, y + height),
        ]
        xs = [point[0] for point in corners]
        ys = [point[1] for point in corners]
        return (min(xs), min(ys), max(xs), max(ys))

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def inverse(self) -> "AffineTransform":
        det = self.determinant
        if abs(det) < 1e-12:
            raise ValueError("Matrix is not invertible")
        a = self.d / det
        b = -self.b / det
        c = -self.c / det
        d = self.a / det
        return AffineTransform(
            a=a,
            b=b,
            c=c,
            d=d,
            e=-(a * self.e + c * self.f),
            f=-(b * self.e + d * self.f),
        )

    def is_close(self, other: "AffineTransform", tolerance: float = 1e-9) -> bool:
        return all(
            math.isclose(mine, theirs, abs_tol=tolerance)
            for mine, theirs in zip(self.as_tuple(), other.as_tuple())
        )

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def to_svg(self) -> str:
        values = " ".join(f"{value:.10g}" for value in self.as_tuple())
        return f"matrix({values})"
