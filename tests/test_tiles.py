from arscrew.objects import GameObject, Rect, Vector
from arscrew.tiles import (
    TILE_HEIGHT,
    TILE_WIDTH,
    TILESET_COLUMNS,
    Decoration,
    Platform,
    SolidPlatform,
    Sprite,
    Tile,
    tile_source_rect,
)


def test_first_tile_is_origin():
    assert tile_source_rect(1, 32, 32) == Rect(0, 0, 32, 32)


def test_neighbouring_tiles_step_one_column():
    a = tile_source_rect(3, 32, 32)
    b = tile_source_rect(4, 32, 32)
    assert b.x - a.x == TILE_WIDTH
    assert b.y == a.y


def test_tiles_wrap_to_next_row():
    first = tile_source_rect(1, 32, 32)
    below = tile_source_rect(1 + TILESET_COLUMNS, 32, 32)
    assert below.x == first.x
    assert below.y - first.y == TILE_HEIGHT


def test_rect_size_comes_from_arguments():
    r = tile_source_rect(18, 16, 8)
    assert (r.w, r.h) == (16, 8)


def test_sprite_size():
    sprite = Sprite("sheet", Rect(4, 5, 35, 37))
    assert sprite.size == (35, 37)


def test_tile_sprite_matches_source_rect():
    tile = Tile(Vector(64.0, 96.0), Vector(32.0, 32.0), "tileset", 18)
    assert tile.sprite.src_rect == tile_source_rect(18, 32, 32)
    assert tile.sprite.texture == "tileset"
    assert tile.tile_id == 18
    assert tile.position == Vector(64.0, 96.0)


def test_tile_kinds_are_game_objects():
    for kind in (Platform, SolidPlatform, Decoration):
        tile = kind(Vector(0.0, 0.0), Vector(32.0, 32.0), None, 5)
        assert isinstance(tile, GameObject)
        assert tile.is_visible(Vector(0.0, 0.0), Vector(100.0, 100.0))
        assert not tile.is_visible(Vector(32.0, 0.0), Vector(100.0, 100.0))