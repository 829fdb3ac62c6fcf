"""Game state and rules for a side-scrolling screwdriver platformer."""

__version__ = "0.1.0"

__all__ = [
    "crt",
    "geometry",
    "hud",
    "mathutils",
    "matrix",
    "objects",
    "player",
    "ramp",
    "screw",
    "tiles",
    "timer",
    "world",
]