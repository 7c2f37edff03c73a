"""Game entities owned by the game state."""

from .bullet import Bullet
from .enemy import Enemy
from .entity import Entity
from .particle import Particle
from .ship import Ship
from .starfield import Star, Starfield

__all__ = [
    "Bullet",
    "Enemy",
    "Entity",
    "Particle",
    "Ship",
    "Star",
    "Starfield",
]
