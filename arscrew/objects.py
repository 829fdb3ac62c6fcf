"""Game-wide constants and the base types for objects placed in the world."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

__all__ = [
    "GRAVITY",
    "FRICTION",
    "JUMP_FORCE",
    "MOVE_SPEED",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "Vector",
    "Rect",
    "GameObject",
    "DynamicObject",
]

GRAVITY = 580.0
FRICTION = 0.85
JUMP_FORCE = -250.0
MOVE_SPEED = 200.0
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720


@dataclass(frozen=True)
class Vector:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its top-left corner and size."""

    x: int
    y: int
    w: int
    h: int

    def overlaps(self, other: Rect) -> bool:
        """True when the two rectangles share interior area; touching edges do not count."""
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.h
            and self.y + self.h > other.y
        )


class GameObject:
    """Anything with a position and a size in the world."""

    def __init__(self, position: Vector, size: Vector):
        self.position = position
        self.size = size

    def is_visible(self, camera_position: Vector, screen_size: Vector) -> bool:
        """True when the object overlaps the view starting at ``camera_position``."""
        return (
            self.position.x < camera_position.x + screen_size.x
            and self.position.x + self.size.x > camera_position.x
            and self.position.y < camera_position.y + screen_size.y
            and self.position.y + self.size.y > camera_position.y
        )


class DynamicObject(GameObject):
    """A world object that moves and takes part in collisions."""

    def __init__(self, position: Vector, size: Vector):
        super().__init__(position, size)
        self.velocity = Vector()
        self.passing_through_platform = False
        self.above_crate = False
        self.on_ground = False
        self.falling = False
        self.colliding_with_wall = False