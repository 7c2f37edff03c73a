"""Player ship object."""

from dataclasses import dataclass

from ...config import GameConfig
from ...constants import (
    PLAYER_EDGE_MARGIN,
    PLAYER_FIRE_COOLDOWN,
    PLAYER_HEIGHT,
    PLAYER_MAX_LIVES,
    PLAYER_MIN_Y_RATIO,
    PLAYER_SPAWN_BOTTOM_OFFSET,
    PLAYER_SPEED,
    PLAYER_WIDTH,
)
from ..geometry import clamp
from .entity import Entity


@dataclass(eq=False)
class Ship(Entity):
    """Represents the player's ship, its lives, score and gun cooldown."""

    lives: int = PLAYER_MAX_LIVES
    score: int = 0
    cooldown: float = 0.0  # Milliseconds until the guns can fire again

    @classmethod
    def spawn(cls, config: GameConfig) -> "Ship":
        """Create a ship at the default spawn position."""
        ship = cls(x=0, y=0, width=PLAYER_WIDTH, height=PLAYER_HEIGHT)
        ship.recenter(config)
        return ship

    def recenter(self, config: GameConfig) -> None:
        """Move the ship back to the spawn position, bottom center."""
        self.x = config.width / 2 - self.width / 2
        self.y = config.height - self.height - PLAYER_SPAWN_BOTTOM_OFFSET

    def steer(self, dx: float, dy: float, delta_time: float) -> None:
        """Move along a unit (or zero) direction vector at ship speed."""
        self.x += dx * PLAYER_SPEED * delta_time
        self.y += dy * PLAYER_SPEED * delta_time

    def place_at(self, x: float, y: float) -> None:
        """Center the ship on an absolute point, as a pointer does."""
        self.x = x - self.width / 2
        self.y = y - self.height / 2

    def clamp_to(self, config: GameConfig) -> None:
        """Confine the ship to the lower part of the arena."""
        self.x = clamp(self.x, PLAYER_EDGE_MARGIN, config.width - self.width - PLAYER_EDGE_MARGIN)
        self.y = clamp(
            self.y,
            config.height * PLAYER_MIN_Y_RATIO,
            config.height - self.height - PLAYER_EDGE_MARGIN,
        )

    def animate(self, delta_time: float) -> None:
        """Count down the gun cooldown.

        Args:
            delta_time: Time elapsed since last frame in seconds.
        """
        if self.cooldown > 0:
            self.cooldown -= delta_time * 1000

    def can_shoot(self) -> bool:
        return self.cooldown <= 0

    def gun_positions(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Muzzle points of the two staggered guns near the ship's nose."""
        nose_x = self.x + self.width / 2
        return (nose_x - 4, self.y - 10), (nose_x + 8, self.y - 16)

    def reload(self) -> None:
        self.cooldown = PLAYER_FIRE_COOLDOWN

    def is_destroyed(self) -> bool:
        return self.lives <= 0
