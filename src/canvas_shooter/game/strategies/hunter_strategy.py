"""Hunter strategy: line up under nearby enemies and dodge incoming fire."""

import random
from typing import TYPE_CHECKING, Iterator

from .base_strategy import Action, BaseStrategy

if TYPE_CHECKING:
    from ..entities import Enemy
    from ..game_state import GameState


class HunterStrategy(BaseStrategy):
    """
    Ship picks a target among the closest enemies using distance weights.

    Takes the 4 closest enemies by horizontal distance and prefers the nearest
    one, while still switching targets now and then. An enemy bullet about to
    reach the ship overrides the chase with a sidestep.
    """
    _MAX_CANDIDATES = 4
    _DODGE_LOOKAHEAD = 140  # Pixels above the ship where bullets are a threat
    _ALIGN_TOLERANCE = 6

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._target: "Enemy | None" = None

    def set_rng(self, rng: random.Random) -> None:
        self._rng = rng

    def generate_actions(self, game_state: "GameState") -> Iterator[Action]:
        while True:
            dodge = self._dodge_direction(game_state)
            if dodge:
                yield Action(dx=dodge, dy=1, fire=True)
                continue

            if self._target not in game_state.enemies:
                self._target = self._choose_target(game_state)
            yield Action(dx=self._chase_direction(game_state), fire=True)

    def _choose_target(self, game_state: "GameState") -> "Enemy | None":
        if not game_state.enemies:
            return None
        ship_x = game_state.ship.center[0]
        candidates = sorted(game_state.enemies, key=lambda enemy: abs(enemy.center[0] - ship_x))
        candidates = candidates[: self._MAX_CANDIDATES]
        weights = [len(candidates) - rank for rank in range(len(candidates))]
        return self._rng.choices(candidates, weights=weights, k=1)[0]

    def _chase_direction(self, game_state: "GameState") -> int:
        if self._target is None:
            return 0
        offset = self._target.center[0] - game_state.ship.center[0]
        if abs(offset) <= self._ALIGN_TOLERANCE:
            return 0
        return 1 if offset > 0 else -1

    def _dodge_direction(self, game_state: "GameState") -> int:
        ship = game_state.ship
        for bullet in game_state.enemy_bullets:
            above = ship.y - (bullet.y + bullet.height)
            overlaps_x = bullet.x < ship.x + ship.width and bullet.x + bullet.width > ship.x
            if overlaps_x and 0 <= above <= self._DODGE_LOOKAHEAD:
                return -1 if bullet.x + bullet.width / 2 > ship.center[0] else 1
        return 0
