import math
from dataclasses import dataclass

import pytest

from animray.mixins import DepthCounted, with_depth_count
from animray.surfaces import Gloss, Matte, Reflective, Transparent


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, o):
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, o):
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, s):
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other=None):
        o = self if other is None else other
        return self.x * o.x + self.y * o.y + self.z * o.z


def unit(x, y, z):
    length = math.sqrt(x * x + y * y + z * z)
    return Vec3(x / length, y / length, z / length)


class Ray:
    def __init__(self, from_=None, direction=None):
        self.from_ = from_ if from_ is not None else Vec3()
        d = direction if direction is not None else Vec3(0, 0, 1)
        self.direction = unit(d.x, d.y, d.z)


class RecordingScene:
    def __init__(self, background=1.0, colour=7.0):
        self.background = background
        self.colour = colour
        self.rays = []

    def __call__(self, ray):
        self.rays.append(ray)
        return self.colour


def head_on():
    observer = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    hit = Ray(Vec3(0, 0, -1), Vec3(0, 0, -1))
    return observer, hit


def test_matte_light_along_normal_gives_attenuated_incident():
    observer, hit = head_on()
    light = Ray(hit.from_, hit.direction)
    assert Matte(0.5).illuminate(observer, light, hit, 10.0, None) == pytest.approx(
        10.0 * 0.5
    )


def test_matte_scales_with_cosine():
    observer, hit = head_on()
    straight = Ray(hit.from_, hit.direction)
    slanted = Ray(hit.from_, Vec3(1, 0, -1))
    matte = Matte(1.0)
    assert matte.illuminate(observer, slanted, hit, 10.0, None) < matte.illuminate(
        observer, straight, hit, 10.0, None
    )


def test_matte_emits_nothing():
    observer, hit = head_on()
    assert Matte(0.5).emit(3.0, observer, hit, None) == 0.0


def test_gloss_highlight_when_light_along_reflection():
    observer, hit = head_on()
    light = Ray(hit.from_, Vec3(0, 0, -1))
    assert Gloss(20.0).illuminate(observer, light, hit, 4.0, None) == pytest.approx(4.0)


def test_gloss_no_highlight_when_light_behind():
    observer, hit = head_on()
    light = Ray(hit.from_, Vec3(0, 0, 1))
    assert Gloss(20.0).illuminate(observer, light, hit, 4.0, None) == 0.0


def test_gloss_emits_nothing():
    observer, hit = head_on()
    assert Gloss(10.0).emit(2.5, observer, hit, None) == 0.0


def test_reflective_sends_reflected_ray_into_scene():
    observer, hit = head_on()
    scene = RecordingScene()
    result = Reflective(0.5).emit(0.0, observer, hit, scene)
    assert result == pytest.approx(scene.colour * 0.5)
    (ray,) = scene.rays
    assert ray.from_ == hit.from_
    assert ray.direction == -observer.direction
    assert ray.depth_count == 1
    assert observer.direction == Vec3(0, 0, 1)


def test_reflective_depth_doubles_from_counted_ray():
    _, hit = head_on()
    observer = with_depth_count(Ray)(Ray(Vec3(0, 0, -5), Vec3(0, 0, 1)))
    observer.depth_count = 1
    scene = RecordingScene()
    Reflective(1.0).reflected(0.0, observer, hit, scene)
    assert scene.rays[0].depth_count == 3
    assert observer.depth_count == 1


def test_reflective_beyond_max_depth_gives_background():
    _, hit = head_on()
    observer = with_depth_count(Ray)(Ray(Vec3(0, 0, -5), Vec3(0, 0, 1)))
    observer.depth_count = 3
    scene = RecordingScene(background=42.0)
    assert Reflective(1.0).reflected(0.0, observer, hit, scene) == 42.0
    assert scene.rays == []


def test_reflective_illumination_is_zero():
    observer, hit = head_on()
    assert Reflective(1.0).illuminate(observer, hit, hit, 9.0, None) == 0.0


def test_transparent_passes_ray_through():
    observer, hit = head_on()
    scene = RecordingScene()
    result = Transparent(0.25).emit(0.0, observer, hit, scene)
    assert result == pytest.approx(scene.colour * 0.25)
    (ray,) = scene.rays
    assert ray.direction == observer.direction
    assert ray.from_ == hit.from_
    assert isinstance(ray, DepthCounted) and ray.depth_count == 1


def test_transparent_max_depth_zero_gives_background():
    observer, hit = head_on()
    scene = RecordingScene(background=5.0)
    assert Transparent(0.5, 0).emit(0.0, observer, hit, scene) == 5.0


def test_occlusion_flags():
    assert Matte(0.5).can_occlude is True
    assert Gloss(10.0).can_occlude is True
    assert Reflective(1.0).can_occlude is True
    assert Transparent(0.5).can_occlude is False