"""On-screen display of the current tool and the control help."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .objects import SCREEN_WIDTH, Rect
from .player import AttackType

__all__ = [
    "DrawKind",
    "DrawCommand",
    "HUD",
    "TEXT_COLOR",
    "BACKGROUND_COLOR",
    "CUTTING_COLOR",
    "PIERCING_COLOR",
    "BORDER_COLOR",
    "INSTRUCTIONS",
]

Color = tuple[int, int, int, int]

TEXT_COLOR: Color = (255, 255, 255, 255)
BACKGROUND_COLOR: Color = (0, 0, 0, 180)
CUTTING_COLOR: Color = (0, 255, 0, 255)
PIERCING_COLOR: Color = (0, 100, 255, 255)
BORDER_COLOR: Color = (255, 255, 255, 100)
INSTRUCTIONS = "Q - Switch Tool\nJ - Attack\nE - Dash\nCtrl - Debug"

FONT_SIZE = 16
SMALL_FONT_SIZE = 12
WRAP_WIDTH = 300

_ATTACK_LABELS = {
    AttackType.CUTTING: ("CUTTING TOOL", CUTTING_COLOR),
    AttackType.PIERCING: ("PIERCING TOOL", PIERCING_COLOR),
}


class DrawKind(enum.Enum):
    FILL_RECT = "fill_rect"
    OUTLINE_RECT = "outline_rect"
    TEXT = "text"


@dataclass(frozen=True)
class DrawCommand:
    """One primitive to draw: a filled or outlined rectangle, or text.

    For text, ``rect`` holds the top-left corner with zero size.
    """

    kind: DrawKind
    rect: Rect
    color: Color
    text: str | None = None
    font_size: int | None = None
    wrap_width: int | None = None


class HUD:
    """Lays out the heads-up display as a list of draw commands."""

    def __init__(self, screen_width: int = SCREEN_WIDTH):
        self.visible = True
        self.elapsed = 0.0
        self.attack_type_box = Rect(10, 10, 200, 40)
        self.attack_type_text = (20, 20)
        self.instructions_box = Rect(screen_width - 220, 10, 210, 80)
        self.instructions_text = (screen_width - 210, 15)

    def update(self, delta_time: float) -> None:
        """Advance the display clock."""
        self.elapsed += delta_time

    def draw_commands(self, attack_type: AttackType) -> list[DrawCommand]:
        """Everything to draw for the given tool; empty when hidden."""
        if not self.visible:
            return []
        label, color = _ATTACK_LABELS[attack_type]
        commands = self._background(self.attack_type_box)
        commands.append(self._text(self.attack_type_text, label, color, FONT_SIZE))
        commands += self._background(self.instructions_box)
        commands.append(
            self._text(self.instructions_text, INSTRUCTIONS, TEXT_COLOR, SMALL_FONT_SIZE)
        )
        return commands

    @staticmethod
    def _background(rect: Rect, alpha: int = 180) -> list[DrawCommand]:
        r, g, b, _ = BACKGROUND_COLOR
        return [
            DrawCommand(DrawKind.FILL_RECT, rect, (r, g, b, alpha)),
            DrawCommand(DrawKind.OUTLINE_RECT, rect, BORDER_COLOR),
        ]

    @staticmethod
    def _text(position: tuple[int, int], text: str, color: Color, size: int) -> DrawCommand:
        x, y = position
        return DrawCommand(
            DrawKind.TEXT, Rect(x, y, 0, 0), color, text, size, WRAP_WIDTH
        )