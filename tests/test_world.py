import pytest

from arscrew.objects import MOVE_SPEED, Vector
from arscrew.player import AttackType
from arscrew.ramp import RampType
from arscrew.screw import Screw, ScrewType
from arscrew.world import AIR_STRIKE_BOOST, GameWorld, Key, LevelError

TILE = 32

LEVEL = f"""<?xml version="1.0" encoding="UTF-8"?>
<map width="4" height="3" tilewidth="{TILE}" tileheight="{TILE}">
 <layer name="blocks" width="4" height="3">
  <data encoding="csv">
18,5,0,65,
89,0,0,0,
0,0,0,7
</data>
 </layer>
 <layer name="decorations" width="4" height="3">
  <data encoding="csv">0,0,3,0,0,0,0,0,0,0,0,0</data>
 </layer>
 <layer name="background" width="4" height="3">
  <data encoding="csv">1,1,1,1,1,1,1,1,1,1,1,1</data>
 </layer>
 <objectgroup name="objects">
  <object id="1" type="player_spawn" x="40" y="50"/>
  <object id="2" type="screw_flathead" x="10" y="20"/>
  <object id="3" type="screw_phillips" x="70" y="20"/>
  <object id="4" type="enemy_spawn" x="90" y="30"/>
  <object id="5" x="1" y="1"/>
  <object id="6" type="door" x="96" y="64">
   <properties>
    <property name="target" value="level2.tmx"/>
    <property name="spawn_x" value="2"/>
    <property name="spawn_y" value="3"/>
   </properties>
  </object>
  <object id="7" type="door" x="0" y="0"/>
 </objectgroup>
</map>
"""


@pytest.fixture
def world():
    w = GameWorld()
    w.load_level_from_string(LEVEL)
    return w


def test_map_size(world):
    assert world.map_width == 4 * TILE
    assert world.map_height == 3 * TILE


def test_block_tiles_are_sorted_by_kind(world):
    assert [p.position for p in world.platforms] == [Vector(0, 0)]
    assert [p.position for p in world.solid_platforms] == [Vector(TILE, 0)]
    assert world.solid_platforms[0].tile_id == 5
    assert world.crates == [Vector(3 * TILE, 0)]
    assert [r.position for r in world.ramps] == [Vector(0, TILE)]
    assert world.ramps[0].ramp_type is RampType.BOTTOM_LEFT


def test_unknown_block_tile_and_other_layers_are_ignored(world):
    total = len(world.platforms) + len(world.solid_platforms) + len(world.ramps) + len(world.crates)
    assert total == 4


def test_decorations(world):
    assert [(d.position, d.tile_id) for d in world.decorations] == [(Vector(2 * TILE, 0), 3)]


def test_player_and_chicken_spawn(world):
    assert world.player.position == Vector(40, 50)
    assert world.chicken_position == Vector(40 - 30, 50)


def test_screws_and_enemies(world):
    assert [(s.position, s.screw_type) for s in world.screws] == [
        (Vector(10, 20), ScrewType.FLATHEAD),
        (Vector(70, 20), ScrewType.PHILLIPS),
    ]
    assert all(s.respawn_enabled for s in world.screws)
    assert all(s.respawn_time == world.screw_respawn_time for s in world.screws)
    assert world.enemy_spawns == [Vector(90, 30)]


def test_door_with_properties(world):
    assert len(world.doors) == 1
    door = world.doors[0]
    assert door.target == "level2.tmx"
    assert door.position == Vector(96, 64)
    assert door.size == Vector(TILE, TILE)
    assert door.spawn_position == Vector(2 * TILE, 3 * TILE)
    assert door.has_valid_spawn


def test_reload_replaces_objects(world):
    world.load_level_from_string(LEVEL)
    assert len(world.screws) == 2
    assert len(world.decorations) == 1


def test_clear_level(world):
    world.clear_level()
    assert world.platforms == [] and world.screws == [] and world.doors == []
    assert world.enemy_spawns == [] and world.crates == []


def test_load_level_from_file(tmp_path):
    path = tmp_path / "level.tmx"
    path.write_text(LEVEL, encoding="utf-8")
    w = GameWorld()
    w.load_level(path)
    assert len(w.screws) == 2
    assert w.player.position == Vector(40, 50)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        GameWorld().load_level(tmp_path / "missing.tmx")


def test_malformed_xml_raises():
    with pytest.raises(LevelError):
        GameWorld().load_level_from_string("<map><layer></map>")


def test_missing_map_element_raises():
    with pytest.raises(LevelError):
        GameWorld().load_level_from_string("<tileset/>")


def test_bad_tile_id_raises():
    text = '<map width="1" height="1" tilewidth="32"><layer name="blocks" width="1"><data>x</data></layer></map>'
    with pytest.raises(LevelError):
        GameWorld().load_level_from_string(text)


def test_respawn_settings_propagate(world):
    world.set_screw_respawn_enabled(False)
    world.set_screw_respawn_time(3.5)
    assert all(not s.respawn_enabled for s in world.screws)
    assert all(s.respawn_time == 3.5 for s in world.screws)
    world.load_level_from_string(LEVEL)
    assert all(not s.respawn_enabled and s.respawn_time == 3.5 for s in world.screws)


def test_movement_keys():
    w = GameWorld()
    w.handle_key_down(Key.D)
    assert w.player.velocity.x == MOVE_SPEED
    w.handle_key_up(Key.D)
    assert w.player.velocity.x == 0.0
    w.handle_key_down(Key.A)
    assert w.player.velocity.x == -MOVE_SPEED
    assert w.player.facing_direction == -1


def test_pass_through_needs_ground():
    w = GameWorld()
    w.handle_key_down(Key.S)
    assert w.player.passing_through_platform is False
    w.player.on_ground = True
    w.handle_key_down(Key.S)
    assert w.player.passing_through_platform is True
    w.handle_key_up(Key.S)
    assert w.player.passing_through_platform is False


def test_tool_attack_and_debug_keys():
    w = GameWorld()
    w.handle_key_down(Key.Q)
    assert w.player.attack_type is AttackType.PIERCING
    w.handle_key_down(Key.J)
    assert w.player.attacking is True
    debug = w.player.show_debug_rects
    w.handle_key_down(Key.LCTRL)
    assert w.player.show_debug_rects is (not debug)


def test_strike_needs_attack():
    w = GameWorld()
    screw = Screw(Vector(0, 0), ScrewType.FLATHEAD)
    assert w.strike_screw(screw) is False
    assert screw.destroyed is False


def test_wrong_tool_does_not_destroy():
    w = GameWorld()
    w.player.on_ground = True
    w.player.start_attack()
    screw = Screw(Vector(0, 0), ScrewType.PHILLIPS)
    assert w.strike_screw(screw) is False
    assert screw.destroyed is False


def test_right_tool_on_ground_destroys_without_boost():
    w = GameWorld()
    w.player.on_ground = True
    w.player.start_attack()
    before = w.player.velocity
    screw = Screw(Vector(0, 0), ScrewType.FLATHEAD)
    screw.respawn_time = 4.0
    assert w.strike_screw(screw) is True
    assert screw.destroyed is True
    assert screw.respawn_timer == 4.0
    assert w.player.velocity == before
    assert w.strike_screw(screw) is False


def test_air_strike_boosts_player():
    w = GameWorld()
    w.player.switch_attack_type()
    w.player.start_attack()
    screw = Screw(Vector(0, 0), ScrewType.PHILLIPS)
    assert w.strike_screw(screw) is True
    assert w.player.velocity.y == AIR_STRIKE_BOOST
    assert AIR_STRIKE_BOOST == -300.0