"""Random strategy: wander in random directions while firing."""

import random
from typing import TYPE_CHECKING, Iterator

from ...constants import DEFAULT_FPS
from .base_strategy import Action, BaseStrategy

if TYPE_CHECKING:
    from ..game_state import GameState


class RandomStrategy(BaseStrategy):
    """Holds a random direction for a while, then picks another. Always fires."""

    _HOLD_FRAMES = DEFAULT_FPS // 2

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def set_rng(self, rng: random.Random) -> None:
        self._rng = rng

    def generate_actions(self, game_state: "GameState") -> Iterator[Action]:
        while True:
            action = Action(
                dx=self._rng.choice((-1, 0, 1)),
                dy=self._rng.choice((-1, 0, 1)),
                fire=True,
            )
            for _ in range(self._HOLD_FRAMES):
                yield action
