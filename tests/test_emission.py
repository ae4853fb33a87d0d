from dataclasses import dataclass

from animray.emission import emission


@dataclass
class PlainHit:
    name: str = "plain"


@dataclass
class GlowingHit:
    glow: float

    def emission(self, colour_type, observer, scene):
        return colour_type(self.glow) + observer + scene


def test_non_emissive_surface_gives_zero_colour():
    assert emission(float, 1.0, PlainHit(), 2.0) == 0.0


def test_non_emissive_surface_uses_colour_type():
    assert emission(list, None, PlainHit(), None) == []


def test_emissive_surface_is_asked():
    assert emission(float, 1.0, GlowingHit(3.0), 2.0) == 6.0


def test_non_callable_emission_attribute_is_ignored():
    @dataclass
    class Odd:
        emission: int = 7

    assert emission(int, None, Odd(), None) == 0