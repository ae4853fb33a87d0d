"""Surface materials describing how light interacts with geometry.

Vectors handed to these materials have ``x``, ``y`` and ``z`` attributes,
support ``+``, ``-``, unary ``-`` and multiplication by a scalar, and can
be built from three co-ordinates by calling their type. Rays carry
``from_`` and ``direction`` vectors.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Any, ClassVar

from animray.mixins import DepthCounted, with_depth_count


def _dot(a: Any, b: Any) -> Any:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _normalised(v: Any) -> Any:
    length = math.sqrt(_dot(v, v))
    return type(v)(v.x / length, v.y / length, v.z / length)


def _reflection(observer: Any, intersection: Any) -> Any:
    """The direction of ``observer`` mirrored about the surface normal."""
    ci = -_dot(observer.direction, intersection.direction)
    return observer.direction + intersection.direction * 2 * ci


def _deeper_ray(observer: Any) -> Any:
    """A copy of ``observer`` that counts one more level of depth."""
    if isinstance(observer, DepthCounted):
        ray = copy.copy(observer)
    else:
        ray = with_depth_count(type(observer))(observer)
    ray.add_count(observer)
    return ray


def _zero(incident: Any) -> Any:
    return type(incident)()


@dataclass
class Matte:
    """A diffuse surface that scatters light equally in all directions."""

    attenuation: Any
    can_occlude: ClassVar[bool] = True

    def illuminate(
        self, observer: Any, light: Any, intersection: Any, incident: Any, scene: Any
    ) -> Any:
        """Light reflected towards the observer from ``light``."""
        costheta = _dot(light.direction, intersection.direction)
        return incident * self.attenuation * costheta

    def emit(self, incident: Any, observer: Any, intersection: Any, scene: Any) -> Any:
        """A matte surface emits no light."""
        return _zero(incident)


@dataclass
class Gloss:
    """A specular highlight whose sharpness is set by ``width``."""

    width: Any
    can_occlude: ClassVar[bool] = True

    def illuminate(
        self, observer: Any, light: Any, intersection: Any, incident: Any, scene: Any
    ) -> Any:
        """The highlight seen when the light lines up with the reflection."""
        ri = _reflection(observer, intersection)
        costheta = _dot(ri, light.direction)
        if costheta > 0:
            return incident * costheta**self.width
        return _zero(incident)

    def emit(self, incident: Any, observer: Any, intersection: Any, scene: Any) -> Any:
        """A glossy surface emits no light."""
        return _zero(incident)


@dataclass
class Reflective:
    """A mirror surface that reflects what it sees, scaled by ``albedo``."""

    albedo: Any
    max_depth: int = 5
    can_occlude: ClassVar[bool] = True

    def reflected(
        self, incident: Any, observer: Any, intersection: Any, scene: Any
    ) -> Any:
        """The light arriving along the reflected ray.

        Once the ray has been reflected more than ``max_depth`` times the
        scene's background is used instead.
        """
        ri = _normalised(_reflection(observer, intersection))
        refray = _deeper_ray(observer)
        if refray.depth_count > self.max_depth:
            return scene.background
        refray.from_ = intersection.from_
        refray.direction = ri
        return scene(refray)

    def illuminate(
        self, observer: Any, light: Any, intersection: Any, incident: Any, scene: Any
    ) -> Any:
        """A mirror gets no light directly from illumination."""
        return _zero(incident)

    def emit(self, incident: Any, observer: Any, intersection: Any, scene: Any) -> Any:
        """The reflected light, treated as emitted by the surface."""
        return self.reflected(incident, observer, intersection, scene) * self.albedo


@dataclass
class Transparent:
    """A surface the ray passes straight through, scaled by ``transparency``.

    The ray keeps its direction; this is not refraction.
    """

    transparency: Any
    max_depth: int = 5
    can_occlude: ClassVar[bool] = False

    def illuminate(
        self, observer: Any, light: Any, intersection: Any, incident: Any, scene: Any
    ) -> Any:
        """A transparent surface gets no light directly from illumination."""
        return _zero(incident)

    def emit(self, incident: Any, observer: Any, intersection: Any, scene: Any) -> Any:
        """The light coming through the surface, treated as emitted."""
        transray = _deeper_ray(observer)
        if transray.depth_count > self.max_depth:
            return scene.background
        transray.from_ = intersection.from_
        transray.direction = observer.direction
        return scene(transray) * self.transparency