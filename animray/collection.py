"""A simple collection of geometry objects of one kind."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class Collection:
    """Holds geometry and reports the hit closest to a ray's start."""

    def __init__(self, instances: Iterable[Any] | None = None) -> None:
        self.instances = list(instances) if instances is not None else []

    @property
    def local_coord_type(self) -> Any:
        """The co-ordinate type of the instances, ``float`` when unknown."""
        if self.instances:
            return getattr(self.instances[0], "local_coord_type", float)
        return float

    def insert(self, instance: Any) -> Collection:
        """Append ``instance`` and return the collection."""
        self.instances.append(instance)
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(self.instances)

    def __len__(self) -> int:
        return len(self.instances)

    def intersects(self, by: Any, epsilon: Any) -> Any:
        """Return the intersection nearest the ray's start, or ``None``.

        When two hits are equally near, the one found first is kept.
        """
        result = None
        result_dot = None
        for instance in self.instances:
            hit = instance.intersects(by, epsilon)
            if hit is None:
                continue
            distance = (hit.from_ - by.from_).dot()
            if result is None or distance < result_dot:
                result, result_dot = hit, distance
        return result

    def occludes(self, by: Any, epsilon: Any) -> bool:
        """Return whether any instance blocks the ray."""
        return any(instance.occludes(by, epsilon) for instance in self.instances)