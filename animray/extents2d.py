"""Rectangular extents describing part of the area of a film."""

from __future__ import annotations

from numbers import Integral
from typing import Any

from animray.point2d import Point2D


def size(low: Any, high: Any) -> Any:
    """Return the span from ``low`` to ``high``.

    Integral ranges include both ends; continuous ranges do not.
    """
    if isinstance(low, Integral) and isinstance(high, Integral):
        return high - low + 1
    return high - low


class Extents2D:
    """An axis aligned rectangle given by its lower left and top right corners."""

    __slots__ = ("lower_left", "top_right")

    def __init__(self, sx: Any = 0, sy: Any = 0, ex: Any = 0, ey: Any = 0) -> None:
        self.lower_left = Point2D(sx, sy)
        self.top_right = Point2D(ex, ey)
        if self.lower_left.x > self.top_right.x:
            raise OverflowError(
                "Top right for x is less than lower left for x",
                self.lower_left.x,
                self.top_right.x,
            )
        if self.lower_left.y > self.top_right.y:
            raise OverflowError(
                "Top right for y is less than lower left for y",
                self.lower_left.y,
                self.top_right.y,
            )

    def width(self) -> Any:
        """The horizontal size of the extents."""
        return size(self.lower_left.x, self.top_right.x)

    def height(self) -> Any:
        """The vertical size of the extents."""
        return size(self.lower_left.y, self.top_right.y)

    def area(self) -> Any:
        """The area covered by the extents."""
        return self.width() * self.height()

    def intersection(self, other: Extents2D) -> Extents2D | None:
        """Return the overlap with ``other``, or ``None`` if they are disjoint."""
        lx = max(self.lower_left.x, other.lower_left.x)
        ly = max(self.lower_left.y, other.lower_left.y)
        ux = min(self.top_right.x, other.top_right.x)
        uy = min(self.top_right.y, other.top_right.y)
        if lx > ux or ly > uy:
            return None
        return Extents2D(lx, ly, ux, uy)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extents2D):
            return NotImplemented
        return self.lower_left == other.lower_left and self.top_right == other.top_right

    def __hash__(self) -> int:
        return hash((self.lower_left, self.top_right))

    def __repr__(self) -> str:
        return (
            f"Extents2D({self.lower_left.x!r}, {self.lower_left.y!r}, "
            f"{self.top_right.x!r}, {self.top_right.y!r})"
        )

    def __str__(self) -> str:
        return f"[ {self.lower_left} -> {self.top_right} ]"