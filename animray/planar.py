"""Flat geometry: infinite planes and triangles.

Vectors have ``x``, ``y`` and ``z`` attributes, support ``+``, ``-``,
unary ``-`` and multiplication by a scalar, and can be built from three
co-ordinates by calling their type. Rays carry ``from_`` and ``direction``.
Hits are built by calling ``intersection_type(point, normal)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _dot(a: Any, b: Any) -> Any:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _cross(a: Any, b: Any) -> Any:
    return type(a)(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


@dataclass
class Plane:
    """An infinite plane through ``center`` with surface ``normal``."""

    center: Any
    normal: Any
    intersection_type: Any

    def intersects(self, by: Any, epsilon: Any) -> Any:
        """Return the hit, facing the ray, or ``None``."""
        dot_normal = _dot(by.direction, self.normal)
        if dot_normal == 0:
            return None
        numerator = _dot(self.normal, self.center - by.from_)
        t = numerator / dot_normal
        if t > epsilon:
            facing = self.normal if dot_normal < 0 else -self.normal
            return self.intersection_type(by.from_ + by.direction * t, facing)
        return None

    def occludes(self, by: Any, epsilon: Any) -> bool:
        """Return whether the ray hits the plane."""
        return self.intersects(by, epsilon) is not None


class Triangle:
    """A triangle given by its three corners."""

    __slots__ = ("corners", "intersection_type")

    def __init__(self, one: Any, two: Any, three: Any, intersection_type: Any) -> None:
        self.corners = (one, two, three)
        self.intersection_type = intersection_type

    def intersects(self, by: Any, epsilon: Any) -> Any:
        """Return the hit, with its normal facing the ray, or ``None``.

        Uses the Möller–Trumbore algorithm.
        """
        a, b, c = self.corners
        e1 = b - a
        e2 = c - a

        p = _cross(by.direction, e2)
        determinant = _dot(e1, p)
        if -epsilon < determinant < epsilon or determinant == 0:
            return None
        inv_determinant = 1 / determinant

        t_vec = by.from_ - a
        u = _dot(t_vec, p) * inv_determinant
        if u < 0 or u > 1:
            return None

        q = _cross(t_vec, e1)
        v = _dot(by.direction, q) * inv_determinant
        if v < 0 or u + v > 1:
            return None

        t = _dot(e2, q) * inv_determinant
        if not t > epsilon:
            return None
        normal = _cross(e2, e1)
        point = by.from_ + by.direction * t
        if _dot(normal, by.direction) < 0:
            return self.intersection_type(point, normal)
        return self.intersection_type(point, -normal)

    def occludes(self, by: Any, epsilon: Any) -> bool:
        """Return whether the ray hits the triangle."""
        return self.intersects(by, epsilon) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return (
            self.corners == other.corners
            and self.intersection_type == other.intersection_type
        )

    def __hash__(self) -> int:
        return hash(self.corners)

    def __repr__(self) -> str:
        return "Triangle({!r}, {!r}, {!r})".format(*self.corners)