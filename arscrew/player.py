"""The player character: movement, dashing, attacks and health."""

from __future__ import annotations

import enum
import logging
from dataclasses import replace

from .objects import GRAVITY, JUMP_FORCE, MOVE_SPEED, DynamicObject, Rect, Vector

__all__ = [
    "AttackType",
    "Player",
    "PLAYER_SIZE",
    "DASH_DURATION",
    "DASH_SPEED",
    "ATTACK_DURATION",
    "INVULNERABILITY_DURATION",
    "FLASH_INTERVAL",
    "MAX_HEALTH",
    "DAMAGE_KNOCKBACK_X",
    "DAMAGE_KNOCKBACK_Y",
]

logger = logging.getLogger(__name__)

PLAYER_SIZE = Vector(20, 37)
DASH_DURATION = 0.2
DASH_SPEED = 500.0
ATTACK_DURATION = 0.2
INVULNERABILITY_DURATION = 1.0
FLASH_INTERVAL = 0.1
MAX_HEALTH = 100
DAMAGE_KNOCKBACK_X = 150.0
DAMAGE_KNOCKBACK_Y = -100.0


class AttackType(enum.Enum):
    """The tool the player attacks with."""

    CUTTING = "cutting"  # opens flathead screws
    PIERCING = "piercing"  # opens phillips screws


# (x offset from the player's edge, y offset, width, height) of each attack box.
_ATTACK_BOXES = {
    AttackType.CUTTING: (5, 30, 25),
    AttackType.PIERCING: (8, 40, 15),
}


class Player(DynamicObject):
    """The controllable character."""

    def __init__(self, position: Vector):
        super().__init__(position, PLAYER_SIZE)
        self.facing_direction = 1
        self.jumping = False
        self.attacking = False
        self.dashing = False
        self.dash_timer = 0.0
        self.attack_type = AttackType.CUTTING
        self.attack_time_left = 0.0
        self.max_health = MAX_HEALTH
        self.health = MAX_HEALTH
        self.invulnerability_timer = 0.0
        self.flashing = False
        self.flash_timer = 0.0
        self.show_debug_rects = True
        self.show_attack_hitbox = True
        self.show_hurtbox = True
        self.current_animation = "idle"
        self.attack_hitbox = Rect(0, 0, 0, 0)
        self.hurtbox = Rect(0, 0, 0, 0)
        self._update_hurtbox()

    # ----- state queries -------------------------------------------------

    @property
    def facing_right(self) -> bool:
        return self.facing_direction == 1

    @property
    def width(self) -> int:
        return int(self.size.x)

    @property
    def height(self) -> int:
        return int(self.size.y)

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    @property
    def is_invulnerable(self) -> bool:
        return self.invulnerability_timer > 0.0

    @property
    def sprite_visible(self) -> bool:
        """False during the hidden half of each flash while hurt."""
        return not self.flashing or self.flash_timer < FLASH_INTERVAL / 2

    @property
    def color_mod(self) -> tuple[int, int, int]:
        """Tint applied to the sprite: reddish while invulnerable."""
        return (255, 100, 100) if self.is_invulnerable else (255, 255, 255)

    # ----- controls ------------------------------------------------------

    def move_left(self) -> None:
        if not self.dashing:
            self.velocity = replace(self.velocity, x=-MOVE_SPEED)
            self.facing_direction = -1

    def move_right(self) -> None:
        if not self.dashing:
            self.velocity = replace(self.velocity, x=MOVE_SPEED)
            self.facing_direction = 1

    def stop_horizontal_movement(self) -> None:
        if not self.dashing:
            self.velocity = replace(self.velocity, x=0.0)

    def jump(self) -> None:
        """Jump from the ground, or kick off a wall the player is touching."""
        velocity = self.velocity
        if self.on_ground:
            velocity = replace(velocity, y=JUMP_FORCE)
            self.jumping = True
        self.velocity = self._wall_jump(velocity)

    def _wall_jump(self, velocity: Vector) -> Vector:
        if self.colliding_with_wall and self.facing_direction in (1, -1):
            self.facing_direction = -self.facing_direction
            velocity = Vector(MOVE_SPEED * self.facing_direction, JUMP_FORCE)
            self.colliding_with_wall = False
        return velocity

    def start_attack(self) -> None:
        if not self.attacking:
            self.attacking = True
            self.attack_time_left = ATTACK_DURATION
            self._update_attack_hitbox()

    def start_dash(self) -> None:
        """Dash forward; only from the ground and away from walls."""
        if not self.dashing and self.on_ground and not self.colliding_with_wall:
            self.dashing = True
            self.dash_timer = DASH_DURATION
            logger.info("Dash initiated! Direction: %d", self.facing_direction)

    def switch_attack_type(self) -> None:
        if self.attack_type is AttackType.CUTTING:
            self.attack_type = AttackType.PIERCING
            logger.info("Switched to PIERCING attack (for Phillips screws)")
        else:
            self.attack_type = AttackType.CUTTING
            logger.info("Switched to CUTTING attack (for Flathead screws)")

    def toggle_debug_display(self) -> None:
        self.show_debug_rects = not self.show_debug_rects

    def pass_through_platform(self, enable: bool) -> None:
        self.passing_through_platform = enable

    # ----- simulation ----------------------------------------------------

    def update(self, delta_time: float, horizontal_keys_held: bool = False) -> None:
        """Advance the player by ``delta_time`` seconds.

        ``horizontal_keys_held`` tells whether a left or right key is down;
        without one, a grounded player stops moving sideways.
        """
        velocity = self.velocity
        position = self.position

        self._update_invulnerability(delta_time)

        if self.dashing:
            self.dash_timer -= delta_time
            if self.facing_direction in (1, -1):
                velocity = replace(velocity, x=DASH_SPEED * self.facing_direction)
                position = position + velocity * delta_time
            if self.dash_timer <= 0.0:
                self.dashing = False
                velocity = replace(velocity, x=0.0)

        velocity = replace(velocity, y=velocity.y + GRAVITY * delta_time)
        position = position + velocity * delta_time

        if self.on_ground:
            self.colliding_with_wall = False
            self.jumping = False
            if not horizontal_keys_held:
                velocity = replace(velocity, x=0.0)
        else:
            self.jumping = True

        self.current_animation = self._choose_animation(velocity)

        self.velocity = velocity
        self.position = position
        self._update_hurtbox()

        if self.attacking:
            self.attack_time_left -= delta_time
            if self.attack_time_left <= 0.0:
                self.attacking = False

    def _choose_animation(self, velocity: Vector) -> str:
        if not self.on_ground:
            return "jump"
        if self.attacking:
            if self.attack_type is AttackType.CUTTING:
                return "cuttingAttack"
            return "piercingAttack"
        if velocity.x != 0.0 or self.dashing:
            return "run"
        return "idle"

    def _update_invulnerability(self, delta_time: float) -> None:
        if self.invulnerability_timer <= 0.0:
            return
        self.invulnerability_timer -= delta_time
        if self.flashing:
            self.flash_timer += delta_time
            if self.flash_timer >= FLASH_INTERVAL:
                self.flash_timer = 0.0
        if self.invulnerability_timer <= 0.0:
            self.flashing = False
            self.flash_timer = 0.0

    def _update_hurtbox(self) -> None:
        pos = self.position
        self.hurtbox = Rect(
            int(pos.x + 2),
            int(pos.y + 2),
            int(self.size.x - 4),
            int(self.size.y - 4),
        )
        if self.attacking:
            self._update_attack_hitbox()

    def _update_attack_hitbox(self) -> None:
        pos = self.position
        dy, w, h = _ATTACK_BOXES[self.attack_type]
        if self.facing_direction == 1:
            x = int(pos.x + self.size.x)
        else:
            x = int(pos.x - w)
        self.attack_hitbox = Rect(x, int(pos.y + dy), w, h)

    # ----- health --------------------------------------------------------

    def take_damage(self, damage: int) -> None:
        """Lose health and get knocked back, unless invulnerable or dead."""
        if self.invulnerability_timer > 0.0 or self.is_dead:
            return
        self.health = max(self.health - damage, 0)
        self.invulnerability_timer = INVULNERABILITY_DURATION
        self.flashing = True
        self.flash_timer = 0.0
        logger.info(
            "Player took %d damage! Health: %d/%d", damage, self.health, self.max_health
        )
        if self.is_dead:
            logger.info("Player died!")

        knockback_x = -DAMAGE_KNOCKBACK_X if self.facing_direction == 1 else DAMAGE_KNOCKBACK_X
        velocity = replace(self.velocity, x=knockback_x)
        if self.on_ground:
            velocity = replace(velocity, y=DAMAGE_KNOCKBACK_Y)
        self.velocity = velocity

    def heal(self, amount: int) -> None:
        """Regain health up to the maximum; the dead cannot heal."""
        if self.is_dead:
            return
        self.health = min(self.health + amount, self.max_health)
        logger.info(
            "Player healed %d HP! Health: %d/%d", amount, self.health, self.max_health
        )