"""Arena configuration loaded from defaults or environment variables."""

import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_ARENA_HEIGHT,
    DEFAULT_ARENA_WIDTH,
    PLAYER_EDGE_MARGIN,
    PLAYER_HEIGHT,
    PLAYER_SPAWN_BOTTOM_OFFSET,
    PLAYER_WIDTH,
)

WIDTH_ENV_VAR = "CANVAS_SHOOTER_WIDTH"
HEIGHT_ENV_VAR = "CANVAS_SHOOTER_HEIGHT"


@dataclass(frozen=True)
class GameConfig:
    """Fixed arena dimensions for a game session."""

    width: int = DEFAULT_ARENA_WIDTH
    height: int = DEFAULT_ARENA_HEIGHT

    def __post_init__(self) -> None:
        # Ship must fit between the edge margins, and its spawn point inside its zone.
        min_width = PLAYER_WIDTH + 2 * PLAYER_EDGE_MARGIN
        min_height = 2 * (PLAYER_HEIGHT + PLAYER_SPAWN_BOTTOM_OFFSET)
        if self.width < min_width:
            raise ValueError(f"Arena width must be at least {min_width}, got {self.width}")
        if self.height < min_height:
            raise ValueError(f"Arena height must be at least {min_height}, got {self.height}")

    @classmethod
    def from_env(cls, width: int | None = None, height: int | None = None) -> "GameConfig":
        """
        Build a config, preferring explicit values over environment variables.

        Args:
            width: Explicit arena width, overrides CANVAS_SHOOTER_WIDTH
            height: Explicit arena height, overrides CANVAS_SHOOTER_HEIGHT

        Raises:
            ValueError: If an environment value is not an integer or the arena is too small
        """
        return cls(
            width=width if width is not None else _env_int(WIDTH_ENV_VAR, DEFAULT_ARENA_WIDTH),
            height=height if height is not None else _env_int(HEIGHT_ENV_VAR, DEFAULT_ARENA_HEIGHT),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
