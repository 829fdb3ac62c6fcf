"""Sprites cut from a tileset and the static tiles built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .objects import GameObject, Rect, Vector

__all__ = [
    "TILESET_COLUMNS",
    "TILE_WIDTH",
    "TILE_HEIGHT",
    "Sprite",
    "tile_source_rect",
    "Tile",
    "Platform",
    "SolidPlatform",
    "Decoration",
]

TILESET_COLUMNS = 15
TILE_WIDTH = 32
TILE_HEIGHT = 32


@dataclass(frozen=True)
class Sprite:
    """A region ``src_rect`` of a texture."""

    texture: Any
    src_rect: Rect

    @property
    def size(self) -> tuple[int, int]:
        return (self.src_rect.w, self.src_rect.h)


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // b * (1 if a >= 0 else -1)
    return quotient, a - quotient * b


def tile_source_rect(tile_id: int, width: int, height: int) -> Rect:
    """Return the tileset region for a one-based ``tile_id``."""
    row, column = _trunc_divmod(tile_id - 1, TILESET_COLUMNS)
    return Rect(column * TILE_WIDTH, row * TILE_HEIGHT, int(width), int(height))


class Tile(GameObject):
    """A static object drawn with a single tileset sprite."""

    def __init__(self, position: Vector, size: Vector, texture: Any, tile_id: int):
        super().__init__(position, size)
        self.tile_id = tile_id
        self.sprite = Sprite(texture, tile_source_rect(tile_id, int(size.x), int(size.y)))


class Platform(Tile):
    """A platform that can be passed through from below."""


class SolidPlatform(Tile):
    """A platform or wall that blocks movement from every side."""


class Decoration(Tile):
    """A tile drawn for looks only."""