"""Sloped tiles that objects can stand on and walk up."""

from __future__ import annotations

import enum
from typing import Any

from .objects import Vector
from .tiles import Tile

__all__ = ["RampType", "Ramp"]


class RampType(enum.Enum):
    """Which corner of the tile the solid right angle sits in."""

    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"


class Ramp(Tile):
    """A triangular tile whose hypotenuse forms a slope."""

    def __init__(
        self,
        position: Vector,
        size: Vector,
        texture: Any,
        tile_id: int,
        ramp_type: RampType,
    ):
        super().__init__(position, size, texture, tile_id)
        self.ramp_type = ramp_type

    def contains_point(self, point: Vector) -> bool:
        """True when ``point`` lies inside the solid triangle of the ramp."""
        rel_x = point.x - self.position.x
        rel_y = point.y - self.position.y
        fx = rel_x / self.size.x
        fy = rel_y / self.size.y

        if self.ramp_type is RampType.BOTTOM_LEFT:
            return rel_x >= 0 and rel_y >= 0 and fy <= 1 - fx
        if self.ramp_type is RampType.BOTTOM_RIGHT:
            return rel_x <= self.size.x and rel_y >= 0 and fy <= fx
        if self.ramp_type is RampType.TOP_LEFT:
            return rel_x >= 0 and rel_y <= self.size.y and fy >= fx
        if self.ramp_type is RampType.TOP_RIGHT:
            return rel_x <= self.size.x and rel_y <= self.size.y and fy >= 1 - fx
        return False

    def surface_y(self, x: float) -> float:
        """Height of the sloped surface at world coordinate ``x``."""
        rel_x = x - self.position.x
        slope = rel_x * self.size.y / self.size.x
        if self.ramp_type in (RampType.BOTTOM_LEFT, RampType.TOP_RIGHT):
            return self.position.y + self.size.y - slope
        if self.ramp_type in (RampType.BOTTOM_RIGHT, RampType.TOP_LEFT):
            return self.position.y + slope
        return self.position.y