"""Small geometry helpers shared by the simulation."""

from typing import Protocol


class Rect(Protocol):
    x: float
    y: float
    width: float
    height: float


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Axis-aligned overlap test. Touching edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
