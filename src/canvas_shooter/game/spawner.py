"""Randomized construction of enemies and particle bursts."""

import math
import random

from ..config import GameConfig
from ..constants import (
    ENEMY_AMPLITUDE_JITTER,
    ENEMY_AMPLITUDE_MIN,
    ENEMY_BASE_SPEED,
    ENEMY_MIN_SIZE,
    ENEMY_SIZE_JITTER,
    ENEMY_SPEED_JITTER,
    ENEMY_TOUGH_CHANCE,
    ENEMY_TOUGH_FIRE_RATE,
    ENEMY_TOUGH_HEALTH,
    ENEMY_TOUGH_POINTS,
    ENEMY_WEAK_FIRE_RATE,
    ENEMY_WEAK_HEALTH,
    ENEMY_WEAK_POINTS,
    PARTICLE_LIFE_JITTER,
    PARTICLE_LIFE_MIN,
    PARTICLE_RADIUS_JITTER,
    PARTICLE_RADIUS_MIN,
    PARTICLE_SPEED_JITTER,
    PARTICLE_SPEED_MIN,
)
from .entities import Enemy, Particle


class EnemySpawner:
    """Draws every random spawn parameter from one injected RNG stream."""

    def __init__(self, config: GameConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng or random.Random()

    def spawn_enemy(self, speed_multiplier: float) -> Enemy:
        """
        Build a new enemy just above the top edge.

        One in five enemies is tough: three hits, faster fire, more points.

        Args:
            speed_multiplier: Current difficulty multiplier, baked into the speed

        Returns:
            The enemy, not yet registered with any game state
        """
        rng = self.rng
        width = ENEMY_MIN_SIZE + rng.random() * ENEMY_SIZE_JITTER
        height = ENEMY_MIN_SIZE + rng.random() * ENEMY_SIZE_JITTER
        tough = rng.random() < ENEMY_TOUGH_CHANCE
        fire_rate = ENEMY_TOUGH_FIRE_RATE if tough else ENEMY_WEAK_FIRE_RATE
        return Enemy(
            x=rng.random() * (self.config.width - width),
            y=-height,
            width=width,
            height=height,
            speed=(ENEMY_BASE_SPEED + rng.random() * ENEMY_SPEED_JITTER) * speed_multiplier,
            phase_offset=rng.random() * math.pi * 2,
            amplitude=rng.random() * ENEMY_AMPLITUDE_JITTER + ENEMY_AMPLITUDE_MIN,
            health=ENEMY_TOUGH_HEALTH if tough else ENEMY_WEAK_HEALTH,
            fire_cooldown=rng.random() * fire_rate,
            fire_rate=fire_rate,
            points=ENEMY_TOUGH_POINTS if tough else ENEMY_WEAK_POINTS,
        )

    def burst(self, x: float, y: float, count: int, color: str) -> list[Particle]:
        """Build `count` particles flying out of (x, y) in random directions."""
        particles = []
        for _ in range(count):
            angle = self.rng.random() * math.pi * 2
            speed = self.rng.random() * PARTICLE_SPEED_JITTER + PARTICLE_SPEED_MIN
            particles.append(
                Particle(
                    x=x,
                    y=y,
                    vx=math.cos(angle) * speed,
                    vy=math.sin(angle) * speed,
                    life=self.rng.random() * PARTICLE_LIFE_JITTER + PARTICLE_LIFE_MIN,
                    radius=self.rng.random() * PARTICLE_RADIUS_JITTER + PARTICLE_RADIUS_MIN,
                    color=color,
                )
            )
        return particles
