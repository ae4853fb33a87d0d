"""A scene made of geometry, a light and a background colour."""

from __future__ import annotations

from typing import Any

from animray.emission import emission
from animray.epsilon import epsilon


class Scene:
    """Geometry lit by a light, seen against a background colour.

    ``colour_type`` converts the light's result into a colour; it defaults
    to the type of ``background``.
    """

    def __init__(
        self,
        geometry: Any = None,
        light: Any = None,
        background: Any = None,
        colour_type: Any = None,
    ) -> None:
        if colour_type is None:
            colour_type = float if background is None else type(background)
        self.geometry = geometry
        self.light = light
        self.colour_type = colour_type
        self.background = colour_type() if background is None else background

    def render(self, camera: Any, x: Any, y: Any) -> Any:
        """Return the colour for position ``(x, y)`` on the camera's film."""
        return self(camera(x, y))

    def __call__(self, observer: Any) -> Any:
        """Return how much light comes back along the ray ``observer``."""
        tolerance = epsilon(getattr(self.geometry, "local_coord_type", float))
        intersection = self.geometry.intersects(observer, tolerance)
        if intersection is None:
            return self.background
        lit = self.colour_type(self.light(observer, intersection, self))
        return lit + emission(self.colour_type, observer, intersection, self)