"""Score-driven difficulty curve with smoothed approach."""

from dataclasses import dataclass

from ..constants import (
    ENEMY_SPAWN_BASE,
    ENEMY_SPAWN_FLOOR,
    ENEMY_SPAWN_SCORE_FACTOR,
    SPAWN_SMOOTHING,
    SPEED_SCORE_DIVISOR,
    SPEED_SMOOTHING,
)


def speed_target(score: int) -> float:
    return 1 + score / SPEED_SCORE_DIVISOR


def spawn_interval_target(score: int) -> float:
    return max(ENEMY_SPAWN_FLOOR, ENEMY_SPAWN_BASE - score * ENEMY_SPAWN_SCORE_FACTOR)


@dataclass
class Difficulty:
    """
    Enemy speed multiplier and spawn interval, eased toward score targets.

    Neither value snaps: each frame closes a dt-proportional share of the gap.
    """

    speed_multiplier: float = 1.0
    spawn_interval: float = ENEMY_SPAWN_BASE  # Milliseconds

    def advance(self, score: int, delta_time: float) -> None:
        """Move both values toward the targets for the current score.

        Args:
            score: Current player score.
            delta_time: Time elapsed since last frame in seconds.
        """
        self.speed_multiplier += (speed_target(score) - self.speed_multiplier) * delta_time * SPEED_SMOOTHING
        self.spawn_interval += (spawn_interval_target(score) - self.spawn_interval) * delta_time * SPAWN_SMOOTHING
