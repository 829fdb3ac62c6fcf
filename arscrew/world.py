"""The game world: level loading from TMX maps, input handling and screw strikes."""

from __future__ import annotations

import enum
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .objects import Vector
from .player import Player
from .ramp import Ramp, RampType
from .screw import Screw, ScrewType, can_destroy
from .tiles import Decoration, Platform, SolidPlatform

__all__ = [
    "PLATFORMS_TEXTURE_PATH",
    "SCREWS_TEXTURE_PATH",
    "TILE_TYPES",
    "AIR_STRIKE_BOOST",
    "CHICKEN_SPAWN_OFFSET",
    "LevelError",
    "Key",
    "TileKind",
    "DoorSpawn",
    "GameWorld",
]

logger = logging.getLogger(__name__)

PLATFORMS_TEXTURE_PATH = "../assets/fulltile.png"
SCREWS_TEXTURE_PATH = "../assets/screw.png"
AIR_STRIKE_BOOST = -300.0
CHICKEN_SPAWN_OFFSET = 30.0


class LevelError(ValueError):
    """Raised when a level file cannot be understood."""


class Key(enum.Enum):
    """Keys the world reacts to."""

    A = "a"
    D = "d"
    S = "s"
    J = "j"
    Q = "q"
    E = "e"
    SPACE = "space"
    LCTRL = "lctrl"


class TileKind(enum.Enum):
    PLATFORM = 1
    SOLID_PLATFORM = 2
    CRATE = 3
    RAMP = 4


# Tile ids of the "blocks" layer and what each one becomes.
TILE_TYPES: dict[int, TileKind] = {
    18: TileKind.PLATFORM,
    **{
        tile_id: TileKind.SOLID_PLATFORM
        for tile_id in (5, 9, 16, 31, 78, 64, 15, 41, 87)
    },
    65: TileKind.CRATE,
    89: TileKind.RAMP,
}

_SCREW_OBJECTS = {
    "screw_flathead": ScrewType.FLATHEAD,
    "screw_phillips": ScrewType.PHILLIPS,
}


@dataclass(frozen=True)
class DoorSpawn:
    """A door leading to ``target`` and where the player appears there."""

    position: Vector
    size: Vector
    target: str
    spawn_position: Vector

    @property
    def has_valid_spawn(self) -> bool:
        return self.spawn_position.x >= 0 and self.spawn_position.y >= 0


def _int_attr(element: ET.Element, name: str) -> int:
    try:
        return int(element.get(name, "0"))
    except ValueError:
        return 0


def _float_attr(element: ET.Element, name: str) -> float:
    try:
        return float(element.get(name, "0"))
    except ValueError:
        return 0.0


class GameWorld:
    """Holds the level's objects and the player, and applies player input."""

    def __init__(self) -> None:
        self.platforms_texture: Any = PLATFORMS_TEXTURE_PATH
        self.screws_texture: Any = SCREWS_TEXTURE_PATH
        self.map_width = 0
        self.map_height = 0
        self.player = Player(Vector(0, 0))
        self.chicken_position = Vector(0, 0)
        self.screw_respawn_enabled = True
        self.screw_respawn_time = 10.0
        # Kept between doors and levels: a door without spawn properties
        # reuses the spawn of the previous one.
        self._door_spawn = Vector(0, 0)
        self.platforms: list[Platform] = []
        self.solid_platforms: list[SolidPlatform] = []
        self.ramps: list[Ramp] = []
        self.crates: list[Vector] = []
        self.doors: list[DoorSpawn] = []
        self.decorations: list[Decoration] = []
        self.screws: list[Screw] = []
        self.enemy_spawns: list[Vector] = []

    # ----- level loading -------------------------------------------------

    def load_level(self, path: str | Path) -> None:
        """Clear the world and load the TMX map at ``path``."""
        logger.info("Loading TMX file: %s", path)
        self.clear_level()
        text = Path(path).read_text(encoding="utf-8")
        self._load(text)

    def load_level_from_string(self, text: str) -> None:
        """Clear the world and load a TMX map given as text."""
        self.clear_level()
        self._load(text)

    def clear_level(self) -> None:
        for objects in (
            self.platforms,
            self.solid_platforms,
            self.ramps,
            self.crates,
            self.doors,
            self.decorations,
            self.screws,
            self.enemy_spawns,
        ):
            objects.clear()

    def _load(self, text: str) -> None:
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise LevelError(f"failed to parse TMX map: {exc}") from exc
        if root.tag != "map":
            raise LevelError("TMX document has no map element")

        tile_size = _int_attr(root, "tilewidth")
        self.map_width = _int_attr(root, "width") * tile_size
        self.map_height = _int_attr(root, "height") * tile_size

        for layer in root.iter("layer"):
            self._process_layer(layer, tile_size)
        for group in root.iter("objectgroup"):
            for obj in group.iter("object"):
                self._process_object(obj, tile_size)

    def _process_layer(self, layer: ET.Element, tile_size: int) -> None:
        name = layer.get("name")
        data = layer.find("data")
        if data is None or name not in ("blocks", "decorations"):
            return

        layer_width = _int_attr(layer, "width")
        csv = data.text or ""
        tokens = csv.split(",")
        if tokens and not tokens[-1].strip():
            tokens.pop()
        if tokens and layer_width <= 0:
            raise LevelError(f"layer {name!r} has no usable width")

        for index, token in enumerate(tokens):
            try:
                tile_id = int(token.strip())
            except ValueError as exc:
                raise LevelError(f"invalid tile id {token.strip()!r} in layer {name!r}") from exc
            if tile_id == 0:
                continue
            row, column = divmod(index, layer_width)
            position = Vector(column * tile_size, row * tile_size)
            if name == "blocks":
                self._process_block_tile(tile_id, position, tile_size)
            else:
                size = Vector(tile_size, tile_size)
                self.decorations.append(
                    Decoration(position, size, self.platforms_texture, tile_id)
                )

    def _process_block_tile(self, tile_id: int, position: Vector, tile_size: int) -> None:
        kind = TILE_TYPES.get(tile_id)
        size = Vector(tile_size, tile_size)
        if kind is TileKind.PLATFORM:
            self.platforms.append(Platform(position, size, self.platforms_texture, tile_id))
        elif kind is TileKind.SOLID_PLATFORM:
            self.solid_platforms.append(
                SolidPlatform(position, size, self.platforms_texture, tile_id)
            )
        elif kind is TileKind.CRATE:
            self.crates.append(position)
        elif kind is TileKind.RAMP:
            self.ramps.append(
                Ramp(position, size, self.platforms_texture, tile_id, RampType.BOTTOM_LEFT)
            )

    def _process_object(self, obj: ET.Element, tile_size: int) -> None:
        object_type = obj.get("type")
        spawn = Vector(_float_attr(obj, "x"), _float_attr(obj, "y"))
        if object_type is None:
            return

        if object_type == "player_spawn":
            self.player.position = spawn
            self.chicken_position = Vector(spawn.x - CHICKEN_SPAWN_OFFSET, spawn.y)
        elif object_type == "door":
            self._process_door(obj, spawn, tile_size)
        elif object_type in _SCREW_OBJECTS:
            screw = Screw(spawn, _SCREW_OBJECTS[object_type])
            screw.respawn_enabled = self.screw_respawn_enabled
            screw.respawn_time = self.screw_respawn_time
            self.screws.append(screw)
        elif object_type == "enemy_spawn":
            self.enemy_spawns.append(spawn)
            logger.info("Enemy spawned at: %s, %s", spawn.x, spawn.y)

    def _process_door(self, obj: ET.Element, position: Vector, tile_size: int) -> None:
        properties = obj.find("properties")
        if properties is None:
            return
        target = ""
        for prop in properties.iter("property"):
            name = prop.get("name")
            if name == "target":
                target = prop.get("value", "")
            elif name == "spawn_x":
                self._door_spawn = replace(
                    self._door_spawn, x=_float_attr(prop, "value") * tile_size
                )
            elif name == "spawn_y":
                self._door_spawn = replace(
                    self._door_spawn, y=_float_attr(prop, "value") * tile_size
                )
        self.doors.append(
            DoorSpawn(position, Vector(tile_size, tile_size), target, self._door_spawn)
        )

    # ----- input ---------------------------------------------------------

    def handle_key_down(self, key: Key) -> None:
        """React to a fresh key press."""
        player = self.player
        if key is Key.D:
            player.move_right()
        elif key is Key.A:
            player.move_left()
        elif key is Key.SPACE:
            player.jump()
        elif key is Key.S:
            if player.on_ground:
                player.pass_through_platform(True)
        elif key is Key.J:
            player.start_attack()
        elif key is Key.Q:
            player.switch_attack_type()
        elif key is Key.E:
            player.start_dash()
        elif key is Key.LCTRL:
            player.toggle_debug_display()

    def handle_key_up(self, key: Key) -> None:
        """React to a key release."""
        if key in (Key.A, Key.D):
            self.player.stop_horizontal_movement()
        elif key is Key.S:
            self.player.pass_through_platform(False)

    # ----- screws --------------------------------------------------------

    def strike_screw(self, screw: Screw) -> bool:
        """Apply the player's current attack to a screw it reaches.

        Returns True when the screw was knocked out. A hit in mid-air
        boosts the player upward.
        """
        if not self.player.attacking or screw.destroyed:
            return False
        if not can_destroy(self.player.attack_type, screw.screw_type):
            logger.info("Wrong tool! Can't destroy this screw type.")
            return False

        logger.info(
            "%s screw destroyed with %s attack!",
            screw.screw_type.value.capitalize(),
            self.player.attack_type.value,
        )
        if not self.player.on_ground:
            self.player.velocity = replace(self.player.velocity, y=AIR_STRIKE_BOOST)
            logger.info("Air screw hit! Player boosted upward!")
        screw.destroy()
        return True

    def set_screw_respawn_enabled(self, enabled: bool) -> None:
        self.screw_respawn_enabled = enabled
        for screw in self.screws:
            screw.respawn_enabled = enabled

    def set_screw_respawn_time(self, time: float) -> None:
        self.screw_respawn_time = time
        for screw in self.screws:
            screw.respawn_time = time