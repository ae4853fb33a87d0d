"""Geometry made of one each of several different geometries."""

from __future__ import annotations

from functools import reduce
from typing import Any

from animray.emission import emission


class CompoundIntersection:
    """A hit on one part of a compound, wrapping that part's intersection."""

    __slots__ = ("from_", "direction", "wrapped_intersection")

    def __init__(self, wrapped_intersection: Any) -> None:
        self.from_ = wrapped_intersection.from_
        self.direction = wrapped_intersection.direction
        self.wrapped_intersection = wrapped_intersection

    def shade(self, observer: Any, light: Any, incident: Any, scene: Any) -> Any:
        """Work out the light/surface interaction on the part that was hit."""
        return self.wrapped_intersection.shade(observer, light, incident, scene)

    def emission(self, colour_type: Any, observer: Any, scene: Any) -> Any:
        """Return the light emitted by the part that was hit."""
        return emission(colour_type, observer, self.wrapped_intersection, scene)

    def __repr__(self) -> str:
        return f"CompoundIntersection({self.wrapped_intersection!r})"


class Compound:
    """Stores a fixed set of geometries, possibly all of different kinds."""

    def __init__(self, *args: Any) -> None:
        if not args:
            raise ValueError("A compound needs at least one geometry")
        self.instances = tuple(args)

    @property
    def local_coord_type(self) -> Any:
        """The co-ordinate type of the first geometry."""
        return getattr(self.instances[0], "local_coord_type", float)

    def intersects(self, by: Any, epsilon: Any) -> CompoundIntersection | None:
        """Return the hit nearest the ray's start, or ``None``.

        When two hits are equally near, the later geometry wins.
        """

        def measured(hit: Any) -> tuple[Any, Any]:
            if hit is None:
                return None, None
            return (hit.from_ - by.from_).dot(), hit

        def nearer(first: tuple[Any, Any], second: tuple[Any, Any]) -> tuple[Any, Any]:
            if first[0] is None:
                return second
            if second[0] is None:
                return first
            return first if first[0] < second[0] else second

        _, hit = reduce(
            nearer,
            (measured(geometry.intersects(by, epsilon)) for geometry in self.instances),
        )
        return None if hit is None else CompoundIntersection(hit)

    def occludes(self, by: Any, epsilon: Any) -> bool:
        """Return whether any of the geometries blocks the ray."""
        return any(geometry.occludes(by, epsilon) for geometry in self.instances)