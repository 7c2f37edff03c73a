"""Game simulation, frame loop and rendering."""

from .animator import Animator
from .collaborators import ConsoleHud, ConsoleOverlay, Hud, NullHud, NullOverlay, Overlay
from .difficulty import Difficulty
from .entities import Bullet, Enemy, Entity, Particle, Ship, Star, Starfield
from .game_state import GameState
from .input_state import InputState
from .loop import LoopDriver, ManualFrameScheduler
from .raster_animation import generate_raster_frames
from .renderer import Renderer
from .snapshot import FrameSnapshot, snapshot_frame
from .spawner import EnemySpawner
from .strategies.base_strategy import Action, BaseStrategy
from .strategies.hunter_strategy import HunterStrategy
from .strategies.random_strategy import RandomStrategy

__all__ = [
    "Action",
    "Animator",
    "BaseStrategy",
    "Bullet",
    "ConsoleHud",
    "ConsoleOverlay",
    "Difficulty",
    "Enemy",
    "EnemySpawner",
    "Entity",
    "FrameSnapshot",
    "GameState",
    "generate_raster_frames",
    "Hud",
    "HunterStrategy",
    "InputState",
    "LoopDriver",
    "ManualFrameScheduler",
    "NullHud",
    "NullOverlay",
    "Overlay",
    "Particle",
    "RandomStrategy",
    "Renderer",
    "Ship",
    "snapshot_frame",
    "Star",
    "Starfield",
]
