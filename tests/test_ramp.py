import pytest

from arscrew.objects import Vector
from arscrew.ramp import Ramp, RampType
from arscrew.tiles import tile_source_rect


def make_ramp(ramp_type, position=Vector(0, 0)):
    return Ramp(position, Vector(32, 32), "tiles", 89, ramp_type)


def test_sprite_comes_from_tileset():
    ramp = make_ramp(RampType.BOTTOM_LEFT)
    assert ramp.sprite.src_rect == tile_source_rect(89, 32, 32)
    assert ramp.sprite.texture == "tiles"
    assert ramp.ramp_type is RampType.BOTTOM_LEFT


def test_bottom_left_contains():
    ramp = make_ramp(RampType.BOTTOM_LEFT)
    assert ramp.contains_point(Vector(0, 0))
    assert ramp.contains_point(Vector(16, 16))
    assert not ramp.contains_point(Vector(31, 31))
    assert not ramp.contains_point(Vector(-1, 5))


def test_bottom_right_contains():
    ramp = make_ramp(RampType.BOTTOM_RIGHT)
    assert ramp.contains_point(Vector(32, 0))
    assert not ramp.contains_point(Vector(0, 31))
    assert not ramp.contains_point(Vector(33, 0))


def test_top_left_contains():
    ramp = make_ramp(RampType.TOP_LEFT)
    assert ramp.contains_point(Vector(0, 32))
    assert not ramp.contains_point(Vector(32, 0))
    assert not ramp.contains_point(Vector(0, 33))


def test_top_right_contains():
    ramp = make_ramp(RampType.TOP_RIGHT)
    assert ramp.contains_point(Vector(32, 32))
    assert not ramp.contains_point(Vector(0, 0))


def test_contains_respects_position():
    ramp = make_ramp(RampType.BOTTOM_LEFT, Vector(100, 200))
    assert ramp.contains_point(Vector(100, 200))
    assert not ramp.contains_point(Vector(0, 0))


@pytest.mark.parametrize("ramp_type", [RampType.BOTTOM_LEFT, RampType.TOP_RIGHT])
def test_descending_surface(ramp_type):
    ramp = make_ramp(ramp_type, Vector(64, 96))
    assert ramp.surface_y(64) == 96 + 32
    assert ramp.surface_y(96) == 96
    assert ramp.surface_y(80) == pytest.approx(96 + 16)


@pytest.mark.parametrize("ramp_type", [RampType.BOTTOM_RIGHT, RampType.TOP_LEFT])
def test_ascending_surface(ramp_type):
    ramp = make_ramp(ramp_type, Vector(64, 96))
    assert ramp.surface_y(64) == 96
    assert ramp.surface_y(96) == 96 + 32


def test_visibility_inherited():
    ramp = make_ramp(RampType.BOTTOM_LEFT, Vector(10, 10))
    assert ramp.is_visible(Vector(0, 0), Vector(100, 100))
    assert not ramp.is_visible(Vector(500, 500), Vector(100, 100))