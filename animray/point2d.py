"""Two dimensional points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Point2D:
    """A location on a plane with ``x`` and ``y`` co-ordinates."""

    x: Any = 0
    y: Any = 0

    def __add__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Any) -> Point2D:
        if isinstance(scalar, Point2D):
            return NotImplemented
        return Point2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: Any) -> Point2D:
        if isinstance(scalar, Point2D):
            return NotImplemented
        return Point2D(scalar * self.x, scalar * self.y)

    def __truediv__(self, scalar: Any) -> Point2D:
        if isinstance(scalar, Point2D):
            return NotImplemented
        return Point2D(self.x / scalar, self.y / scalar)

    def __rtruediv__(self, scalar: Any) -> Point2D:
        if isinstance(scalar, Point2D):
            return NotImplemented
        return Point2D(scalar / self.x, scalar / self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"