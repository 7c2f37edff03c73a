"""Scrolling starfield background."""

import random
from dataclasses import dataclass

from ...config import GameConfig
from ...constants import (
    STAR_COUNT,
    STAR_RADIUS_JITTER,
    STAR_RADIUS_MIN,
    STAR_SPEED_JITTER,
    STAR_SPEED_MIN,
    STAR_WRAP_RADIUS_JITTER,
)


@dataclass
class Star:
    x: float
    y: float
    radius: float
    speed: float


class Starfield:
    """Background stars falling at individual speeds and wrapping forever."""

    def __init__(self, config: GameConfig, rng: random.Random | None = None) -> None:
        """Scatter STAR_COUNT stars across the whole arena."""
        self.config = config
        self.rng = rng or random.Random()
        self.stars: list[Star] = [
            Star(
                x=self.rng.random() * config.width,
                y=self.rng.random() * config.height,
                radius=self.rng.random() * STAR_RADIUS_JITTER + STAR_RADIUS_MIN,
                speed=self.rng.random() * STAR_SPEED_JITTER + STAR_SPEED_MIN,
            )
            for _ in range(STAR_COUNT)
        ]

    def animate(self, delta_time: float) -> None:
        """Move stars downward, wrapping around when they go off screen.

        Args:
            delta_time: Time elapsed since last frame in seconds.
        """
        for star in self.stars:
            star.y += star.speed * delta_time
            if star.y > self.config.height:
                star.y = 0
                star.x = self.rng.random() * self.config.width
                star.radius = self.rng.random() * STAR_WRAP_RADIUS_JITTER + STAR_RADIUS_MIN
