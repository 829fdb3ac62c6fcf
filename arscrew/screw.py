"""Screws placed in a level and the tool each one yields to."""

from __future__ import annotations

import enum

from .objects import Vector
from .player import AttackType

__all__ = ["ScrewType", "Screw", "can_destroy"]


class ScrewType(enum.Enum):
    FLATHEAD = "flathead"
    PHILLIPS = "phillips"


_MATCHING_TOOL = {
    ScrewType.FLATHEAD: AttackType.CUTTING,
    ScrewType.PHILLIPS: AttackType.PIERCING,
}


def can_destroy(attack_type: AttackType, screw_type: ScrewType) -> bool:
    """True when the attack's tool fits the screw's head."""
    return _MATCHING_TOOL[screw_type] is attack_type


class Screw:
    """A screw that can be knocked out and may come back after a while."""

    def __init__(self, position: Vector, screw_type: ScrewType):
        self.position = position
        self.screw_type = screw_type
        self.destroyed = False
        self.respawn_enabled = True
        self.respawn_time = 10.0
        self.respawn_timer = 0.0

    def destroy(self) -> None:
        """Mark the screw destroyed and start its respawn countdown."""
        self.destroyed = True
        self.respawn_timer = self.respawn_time