"""Small numeric helpers: bit logarithms, angle conversion and rounding."""

from __future__ import annotations

import math

__all__ = [
    "base2_log_of_integer",
    "radians_to_degrees",
    "degrees_to_radians",
    "round_to_nearest",
]


def base2_log_of_integer(value: int) -> int:
    """Return the position of the lowest set bit of ``value``.

    For a power of two this is its base-2 logarithm.
    Raises ValueError when ``value`` is zero.
    """
    if value == 0:
        raise ValueError(f"number {value} can't be zero")
    return (value & -value).bit_length() - 1


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return (radians * 180.0) / math.pi


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return (degrees / 180.0) * math.pi


def round_to_nearest(value: float) -> int:
    """Add one half and truncate toward zero, as an integer cast does."""
    return int(value + 0.5)