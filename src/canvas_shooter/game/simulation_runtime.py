"""Simulation runtime helpers used by Animator."""

import hashlib
import json
import random

from ..config import GameConfig
from .collaborators import Hud, Overlay
from .game_state import GameState
from .strategies.base_strategy import BaseStrategy


def derive_simulation_seed(
    config: GameConfig,
    strategy: BaseStrategy,
    fps: int,
) -> int:
    """Create a stable seed based on simulation inputs."""
    payload = {
        "fps": fps,
        "strategy": strategy.__class__.__name__,
        "arena": [config.width, config.height],
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    digest = hashlib.sha256(encoded).digest()
    return int.from_bytes(digest[:8], "big")


def create_seeded_game_state(
    config: GameConfig,
    strategy: BaseStrategy,
    seed: int,
    hud: Hud | None = None,
    overlay: Overlay | None = None,
) -> GameState:
    """Create a game state with deterministic RNG streams for strategy and world state."""
    master_rng = random.Random(seed)
    strategy_rng = random.Random(master_rng.getrandbits(64))
    game_rng = random.Random(master_rng.getrandbits(64))
    strategy.set_rng(strategy_rng)
    return GameState(config, rng=game_rng, hud=hud, overlay=overlay)
