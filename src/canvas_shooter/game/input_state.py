"""Held input symbols fed by key and pointer events."""

from ..constants import DOWN_KEYS, FIRE_KEY, LEFT_KEYS, RIGHT_KEYS, UP_KEYS


class InputState:
    """Set of currently held symbols. Last writer wins per symbol."""

    def __init__(self) -> None:
        self._held: set[str] = set()

    def press(self, symbol: str) -> None:
        self._held.add(symbol)

    def release(self, symbol: str) -> None:
        self._held.discard(symbol)

    def is_held(self, symbol: str) -> bool:
        return symbol in self._held

    def any_held(self, symbols: tuple[str, ...]) -> bool:
        return any(symbol in self._held for symbol in symbols)

    def pointer_down(self) -> None:
        """A pointer press holds the fire symbol."""
        self.press(FIRE_KEY)

    def pointer_up(self) -> None:
        self.release(FIRE_KEY)

    def direction(self) -> tuple[float, float]:
        """
        Movement direction from held arrow/WASD symbols.

        Returns:
            A (dx, dy) pair of unit length, or (0, 0) when idle or when
            opposite keys cancel out. Screen y grows downward.
        """
        dx = 0
        dy = 0
        if self.any_held(LEFT_KEYS):
            dx -= 1
        if self.any_held(RIGHT_KEYS):
            dx += 1
        if self.any_held(UP_KEYS):
            dy -= 1
        if self.any_held(DOWN_KEYS):
            dy += 1
        return dx, dy

    @property
    def firing(self) -> bool:
        return self.is_held(FIRE_KEY)

    @property
    def held(self) -> frozenset[str]:
        return frozenset(self._held)
