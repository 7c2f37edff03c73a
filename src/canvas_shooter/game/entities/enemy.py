"""Descending enemy ships."""

import math
from dataclasses import dataclass

from ...constants import ENEMY_WEAVE_FREQUENCY
from .entity import Entity


@dataclass(eq=False)
class Enemy(Entity):
    """
    An enemy that falls, weaves sideways and fires at a fixed rate.

    Weak and tough enemies differ only by data: health, fire rate and points.
    """

    speed: float = 0.0
    phase_offset: float = 0.0
    amplitude: float = 0.0
    health: int = 1
    fire_cooldown: float = 0.0  # Milliseconds until next shot
    fire_rate: float = 0.0  # Milliseconds between shots
    points: int = 0

    def animate(self, delta_time: float, elapsed_ms: float = 0.0) -> None:
        """Fall, weave around the spawn column and count down the fire timer.

        Args:
            delta_time: Time elapsed since last frame in seconds.
            elapsed_ms: Simulated session time driving the weave phase.
        """
        self.y += self.speed * delta_time
        weave = math.sin(elapsed_ms * ENEMY_WEAVE_FREQUENCY + self.phase_offset)
        self.x += weave * self.amplitude * delta_time
        self.fire_cooldown -= delta_time * 1000

    def ready_to_fire(self) -> bool:
        return self.fire_cooldown <= 0

    def reload(self) -> None:
        self.fire_cooldown = self.fire_rate

    def take_damage(self) -> bool:
        """Enemy takes 1 damage. Returns True when this hit destroyed it."""
        self.health -= 1
        return self.health <= 0

    def has_left_arena(self, arena_height: float) -> bool:
        return self.y > arena_height + self.height
