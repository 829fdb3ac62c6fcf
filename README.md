# arscrew

Game state and rules for a small side-scrolling platformer. The hero carries
a screwdriver with two tools: a cutting attack knocks out flathead screws and
a piercing attack knocks out Phillips screws.

The package draws nothing itself. It keeps the state, applies the rules and
describes the HUD and overlay as lists of draw commands, so any front end or
test can drive it.

## Modules

- `arscrew.world` – `GameWorld` loads a TMX map with `load_level(path)` or
  `load_level_from_string(text)` (a malformed map raises `LevelError`). Tiles
  of the `blocks` layer become `platforms`, `solid_platforms`, `ramps` and
  `crates` (crate positions); the `decorations` layer becomes `decorations`.
  Objects give the player's spawn, `doors` (`DoorSpawn` records with a target
  level and spawn point), `screws` and `enemy_spawns` (positions).
  `handle_key_down(key)` and `handle_key_up(key)` take a `Key` and move the
  player, jump, dash, attack, switch tool or toggle the debug display.
  `strike_screw(screw)` applies the player's current attack to a screw and
  returns whether it was knocked out; a hit in mid-air boosts the player
  upward. `set_screw_respawn_enabled` and `set_screw_respawn_time` change the
  respawn settings of every screw.
- `arscrew.player` – `Player` with movement, ground and wall jumps, dashing,
  attacks with a hitbox, a hurtbox, health, `take_damage` with knockback and
  invulnerability, `heal`, and `update(delta_time, horizontal_keys_held)`.
  The tool is an `AttackType`.
- `arscrew.screw` – `Screw`, `ScrewType` and `can_destroy(attack_type,
  screw_type)`.
- `arscrew.ramp` – `Ramp` and `RampType`, with `contains_point` and
  `surface_y`.
- `arscrew.tiles` – `Platform`, `SolidPlatform`, `Decoration`, `Sprite` and
  `tile_source_rect`, which finds a tile's region in the tileset.
- `arscrew.objects` – the `Vector` and `Rect` types, `GameObject`,
  `DynamicObject` and the game constants (gravity, jump force, move speed,
  screen size).
- `arscrew.hud` – `HUD.draw_commands(attack_type)` returns `DrawCommand`
  items for the tool box and the controls help.
- `arscrew.crt` – `crt_overlay(width, height)` returns the scanline and
  vignette rectangles.
- `arscrew.timer` – `Timer` fires callbacks once a clock reaches their time;
  `schedule_event` returns a `Descriptor` that `unschedule_event` cancels.
- `arscrew.matrix`, `arscrew.geometry`, `arscrew.mathutils` – matrices
  (`Matrix`, `Grid`, `rotate`), line/plane intersection and small numeric
  helpers.

## Example

```python
from arscrew.player import AttackType
from arscrew.screw import ScrewType, can_destroy
from arscrew.world import GameWorld, Key

world = GameWorld()
world.load_level("levels/level1.tmx")
world.handle_key_down(Key.D)

assert can_destroy(AttackType.CUTTING, ScrewType.FLATHEAD)
assert not can_destroy(AttackType.CUTTING, ScrewType.PHILLIPS)
```

```python
from arscrew.timer import Timer

now = 0.0
timer = Timer(lambda: now)
fired = []
timer.schedule_event(1.0, fired.append)

now = 1.5
timer.trigger_events()
assert fired[0].time == 1.0
```

## What it does not do

There is no window, rendering, sound or game loop, and no command to start a
game. The world does not resolve collisions between objects and tiles, and
it does not check whether an attack reaches a screw: `strike_screw` assumes
it does. Enemies and crates are kept only as positions, with no behaviour.
A destroyed screw records its respawn time but nothing counts it down or
brings it back.

The package needs only the Python standard library and runs on Python 3.10
or later.