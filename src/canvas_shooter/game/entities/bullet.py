"""Projectiles fired by the ship and by enemies."""

from dataclasses import dataclass

from ...constants import (
    BULLET_HEIGHT,
    BULLET_SPEED,
    BULLET_WIDTH,
    ENEMY_BULLET_HEIGHT,
    ENEMY_BULLET_SPEED,
    ENEMY_BULLET_WIDTH,
)
from .entity import Entity


@dataclass(eq=False)
class Bullet(Entity):
    """A projectile travelling vertically. Negative speed moves up."""

    speed: float = BULLET_SPEED

    @classmethod
    def player_shot(cls, x: float, y: float) -> "Bullet":
        return cls(x=x, y=y, width=BULLET_WIDTH, height=BULLET_HEIGHT, speed=BULLET_SPEED)

    @classmethod
    def enemy_shot(cls, x: float, y: float) -> "Bullet":
        return cls(
            x=x,
            y=y,
            width=ENEMY_BULLET_WIDTH,
            height=ENEMY_BULLET_HEIGHT,
            speed=ENEMY_BULLET_SPEED,
        )

    def animate(self, delta_time: float) -> None:
        self.y += self.speed * delta_time

    def is_offscreen(self, arena_height: float) -> bool:
        """Upward bullets leave once fully above the top, downward ones past the bottom."""
        if self.speed < 0:
            return self.y + self.height < 0
        return self.y > arena_height
