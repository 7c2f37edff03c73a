"""Base interface for autopilot strategies that play the game."""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from ...constants import DOWN_KEYS, FIRE_KEY, LEFT_KEYS, RIGHT_KEYS, UP_KEYS

if TYPE_CHECKING:
    from ..game_state import GameState
    from ..input_state import InputState


@dataclass(frozen=True, slots=True)
class Action:
    """Input held during one frame: a direction per axis and the trigger."""
    dx: int = 0
    dy: int = 0
    fire: bool = False

    def __repr__(self) -> str:
        trigger = " FIRE" if self.fire else ""
        return f"Action(dx={self.dx} dy={self.dy}{trigger})"

    def apply(self, input_state: "InputState") -> None:
        """Translate the action into key presses and releases."""
        _hold(input_state, LEFT_KEYS[0], self.dx < 0)
        _hold(input_state, RIGHT_KEYS[0], self.dx > 0)
        _hold(input_state, UP_KEYS[0], self.dy < 0)
        _hold(input_state, DOWN_KEYS[0], self.dy > 0)
        _hold(input_state, FIRE_KEY, self.fire)


def _hold(input_state: "InputState", symbol: str, held: bool) -> None:
    if held:
        input_state.press(symbol)
    else:
        input_state.release(symbol)


class BaseStrategy(ABC):
    """Abstract base class for autopilot strategies."""

    def set_rng(self, rng: random.Random) -> None:
        """Inject RNG source for deterministic simulations."""
        del rng

    @abstractmethod
    def generate_actions(self, game_state: "GameState") -> Iterator[Action]:
        """
        Generate one action per frame for as long as the caller keeps pulling.

        Args:
            game_state: The live game state, re-read before every action

        Yields:
            Action objects describing the input held for the next frame
        """
        raise NotImplementedError
