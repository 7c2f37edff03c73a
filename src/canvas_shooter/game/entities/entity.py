"""Base class for rectangular game entities."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..geometry import Rect, rects_overlap


@dataclass(eq=False)
class Entity(ABC):
    """An axis-aligned box that advances itself each frame."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def overlaps(self, other: Rect) -> bool:
        return rects_overlap(self, other)

    @abstractmethod
    def animate(self, delta_time: float) -> None:
        """Advance the entity by delta_time seconds."""
        raise NotImplementedError
