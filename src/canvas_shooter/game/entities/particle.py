"""Cosmetic particles emitted by shots, hits and explosions."""

from dataclasses import dataclass

from ...constants import PARTICLE_SHRINK


@dataclass(eq=False)
class Particle:
    """A fading dot. Has no collision box."""

    x: float
    y: float
    vx: float
    vy: float
    life: float  # Seconds remaining
    radius: float
    color: str

    def animate(self, delta_time: float) -> None:
        """Drift along the velocity, age and shrink.

        Args:
            delta_time: Time elapsed since last frame in seconds.
        """
        self.x += self.vx * delta_time
        self.y += self.vy * delta_time
        self.life -= delta_time
        self.radius *= PARTICLE_SHRINK

    def is_expired(self) -> bool:
        return self.life <= 0
