"""Axis-aligned rectangles used by the viewport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Bounds:
    """Rectangle with its origin at the top-left corner."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_corners(cls, x1: float, y1: float, x2: float, y2: float) -> "Bounds":
        left, right = min(x1, x2), max(x1, x2)
        top, bottom = min(y1, y2), max(y1, y2)
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def centered(cls, center_x: float, center_y: float, width: float, height: float) -> "Bounds":
        return cls(center_x - width / 2.0, center_y - height / 2.0, width, height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def top_left(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def top_right(self) -> tuple[float, float]:
        return (self.right, self.y)

    @property
    def bottom_left(self) -> tuple[float, float]:
        return (self.x, self.bottom)

    @property
    def bottom_right(self) -> tuple[float, float]:
        return (self.right, self.bottom)

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains_point(self, x: float, y: float) -> bool:
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    def contains_bounds(self, other: "Bounds") -> bool:
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: "Bounds") -> bool:
        """True when the rectangles share a region of positive area."""

        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    def intersection(self, other: "Bounds") -> Optional["Bounds"]:
        if not self.intersects(other):
            return None
        return Bounds.from_corners(
            max(self.x, other.x),
            max(self.y, other.y),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )

    def union(self, other: "Bounds") -> "Bounds":
        return Bounds.from_corners(
            min(self.x, other.x),
            min(self.y, other.y),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def expand(self, margin: float) -> "Bounds":
        return Bounds(
            self.x - margin,
            self.y - margin,
            self.width + 2.0 * margin,
            self.height + 2.0 * margin,
        )

    def shrink(self, margin: float) -> Optional["Bounds"]:
        """Shrink on every side, or return None if nothing would be left."""

        width = self.width - 2.0 * margin
        height = self.height - 2.0 * margin
        if width <= 0 or height <= 0:
            return None
        return Bounds(self.x + margin, self.y + margin, width, height)

    def scale(self, factor: float) -> "Bounds":
        """Scale about the centre."""

        center_x, center_y = self.center
        return Bounds.centered(center_x, center_y, self.width * factor, self.height * factor)

    def translate(self, dx: float, dy: float) -> "Bounds":
        return Bounds(self.x + dx, self.y + dy, self.width, self.height)

    def clamp_to(self, container: "Bounds") -> "Bounds":
        """Move (without resizing) so this rectangle lies inside *container*.

        A rectangle larger than the container is pinned to its top-left edge.
        """

        x = max(min(self.x, container.right - self.width), container.x)
        y = max(min(self.y, container.bottom - self.height), container.y)
        return Bounds(x, y, self.width, self.height)
