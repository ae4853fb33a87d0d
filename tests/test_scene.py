from dataclasses import dataclass, field

from animray.epsilon import epsilon
from animray.scene import Scene


@dataclass
class Hit:
    glow: float | None = None

    def emission(self, colour_type, observer, scene):
        return colour_type(self.glow or 0)


@dataclass
class FakeGeometry:
    hit: object = None
    seen: list = field(default_factory=list)

    def intersects(self, by, eps):
        self.seen.append((by, eps))
        return self.hit


class ConstantLight:
    def __init__(self, amount):
        self.amount = amount
        self.calls = []

    def __call__(self, observer, intersection, scene):
        self.calls.append((observer, intersection, scene))
        return self.amount


def test_miss_returns_background():
    scene = Scene(FakeGeometry(None), ConstantLight(5.0), 20.0)
    assert scene("ray") == 20.0


def test_hit_returns_light():
    scene = Scene(FakeGeometry(Hit()), ConstantLight(5.0), 20.0)
    assert scene("ray") == 5.0


def test_hit_adds_emission():
    scene = Scene(FakeGeometry(Hit(glow=2.0)), ConstantLight(5.0), 20.0)
    assert scene("ray") == 7.0


def test_light_receives_observer_intersection_and_scene():
    hit = Hit()
    light = ConstantLight(1.0)
    scene = Scene(FakeGeometry(hit), light, 0.0)
    scene("ray")
    assert light.calls == [("ray", hit, scene)]


def test_default_epsilon_is_double_precision():
    geometry = FakeGeometry(None)
    Scene(geometry, ConstantLight(0.0), 0.0)("ray")
    assert geometry.seen == [("ray", epsilon("double"))]


def test_epsilon_follows_geometry_coordinate_type():
    geometry = FakeGeometry(None)
    geometry.local_coord_type = int
    Scene(geometry, ConstantLight(0.0), 0.0)("ray")
    assert geometry.seen[0][1] == 0


def test_colour_type_converts_light():
    scene = Scene(FakeGeometry(Hit()), ConstantLight(3), 0.0, colour_type=float)
    result = scene("ray")
    assert result == 3.0 and isinstance(result, float)


def test_default_background_is_zero_colour():
    scene = Scene(FakeGeometry(None), ConstantLight(0.0), colour_type=int)
    assert scene("ray") == 0


def test_render_asks_camera_for_ray():
    asked = []

    def camera(x, y):
        asked.append((x, y))
        return ("ray", x, y)

    geometry = FakeGeometry(None)
    scene = Scene(geometry, ConstantLight(0.0), 9.0)
    assert scene.render(camera, 170, 95) == 9.0
    assert asked == [(170, 95)]
    assert geometry.seen[0][0] == ("ray", 170, 95)