"""Lines, planes and their intersection in three dimensions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["Line", "Plane", "dot_product", "intersection"]


@dataclass(frozen=True)
class Line:
    """A line through ``point`` running along ``vector``."""

    point: tuple[float, ...]
    vector: tuple[float, ...]


@dataclass(frozen=True)
class Plane:
    """A plane through ``point`` with the given ``normal``."""

    point: tuple[float, float, float]
    normal: tuple[float, float, float]


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError("vectors differ in length")
    return sum(x * y for x, y in zip(a, b))


def intersection(first: Line | Plane, second: Line | Plane) -> tuple[float, float, float]:
    """Return the point where a line meets a plane, given in either order.

    Raises ValueError when the line runs parallel to the plane.
    """
    if isinstance(first, Plane) and isinstance(second, Line):
        plane, line = first, second
    elif isinstance(first, Line) and isinstance(second, Plane):
        line, plane = first, second
    else:
        raise TypeError("intersection needs one Line and one Plane")

    if len(line.point) != 3 or len(line.vector) != 3:
        raise ValueError("line must be three-dimensional")

    denominator = dot_product(line.vector, plane.normal)
    if denominator == 0:
        raise ValueError("line is parallel to the plane")

    offset = [p - q for p, q in zip(plane.point, line.point)]
    t = dot_product(offset, plane.normal) / denominator
    return tuple(p + d * t for p, d in zip(line.point, line.vector))  # type: ignore[return-value]