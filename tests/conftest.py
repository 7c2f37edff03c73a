"""Shared fixtures for game simulation tests."""

import random

import pytest

from canvas_shooter.config import GameConfig
from canvas_shooter.constants import DEFAULT_FPS
from canvas_shooter.game.entities import Bullet, Enemy
from canvas_shooter.game.game_state import GameState

# Delta time for tests (1/fps seconds per frame)
TEST_DELTA_TIME = 1.0 / DEFAULT_FPS


class RecordingHud:
    """Remembers every (score, lives) update."""

    def __init__(self) -> None:
        self.updates: list[tuple[int, int]] = []

    def update(self, score: int, lives: int) -> None:
        self.updates.append((score, lives))


class RecordingOverlay:
    """Remembers show/hide calls in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def show(self, title: str, message: str) -> None:
        self.calls.append(("show", title, message))

    def hide(self) -> None:
        self.calls.append(("hide",))

    @property
    def shows(self) -> list[tuple[str, ...]]:
        return [call for call in self.calls if call[0] == "show"]


def make_enemy(**overrides) -> Enemy:
    """A stationary, non-firing weak enemy unless overridden."""
    fields = {
        "x": 100.0,
        "y": 100.0,
        "width": 40.0,
        "height": 40.0,
        "speed": 0.0,
        "phase_offset": 0.0,
        "amplitude": 0.0,
        "health": 1,
        "fire_cooldown": 60_000.0,
        "fire_rate": 60_000.0,
        "points": 60,
    }
    fields.update(overrides)
    return Enemy(**fields)


def enemy_bullet_on_ship(game_state: GameState) -> Bullet:
    """An enemy bullet already overlapping the ship's hull."""
    ship = game_state.ship
    return Bullet.enemy_shot(ship.x + ship.width / 2 - 4, ship.y + 10)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def hud() -> RecordingHud:
    return RecordingHud()


@pytest.fixture
def overlay() -> RecordingOverlay:
    return RecordingOverlay()


@pytest.fixture
def default_game_state(config: GameConfig, hud: RecordingHud, overlay: RecordingOverlay) -> GameState:
    """Seeded game state wired to recording collaborators."""
    return GameState(config, rng=random.Random(1234), hud=hud, overlay=overlay)


@pytest.fixture
def quiet_game_state(default_game_state: GameState) -> GameState:
    """Seeded game state whose spawner never fires."""
    default_game_state.spawn_timer = float("-inf")
    return default_game_state
