"""A CRT-style overlay: faint scanlines and a darkened border."""

from __future__ import annotations

from .hud import DrawCommand, DrawKind
from .objects import Rect

__all__ = ["SCANLINE_ALPHA", "VIGNETTE_ALPHA", "crt_overlay"]

SCANLINE_ALPHA = 15
VIGNETTE_ALPHA = 30


def _fill(x: int, y: int, w: int, h: int, alpha: int) -> DrawCommand:
    return DrawCommand(DrawKind.FILL_RECT, Rect(x, y, w, h), (0, 0, 0, alpha))


def crt_overlay(width: int, height: int) -> list[DrawCommand]:
    """Black translucent rectangles to blend over a frame of the given size."""
    if width < 0 or height < 0:
        raise ValueError("overlay size must not be negative")

    commands = [_fill(0, y, width, 1, SCANLINE_ALPHA) for y in range(0, height, 2)]

    border = height // 6
    for i in range(border):
        alpha = int(VIGNETTE_ALPHA * (1.0 - i / border))
        commands += [
            _fill(0, i, width, 1, alpha),
            _fill(0, height - i - 1, width, 1, alpha),
            _fill(i, 0, 1, height, alpha),
            _fill(width - i - 1, 0, 1, height, alpha),
        ]
    return commands