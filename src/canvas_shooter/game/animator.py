"""Animator for running autopilot sessions through the frame loop."""

from typing import Callable, Iterator

from ..config import GameConfig
from ..constants import DEFAULT_DURATION, GAME_OVER_TRAILING_FRAMES
from .collaborators import Hud, Overlay
from .game_state import GameState
from .loop import LoopDriver, ManualFrameScheduler
from .simulation_runtime import create_seeded_game_state, derive_simulation_seed
from .strategies.base_strategy import BaseStrategy


class Animator:
    """Plays a seeded session with a strategy and exposes it frame by frame."""

    def __init__(
        self,
        config: GameConfig,
        strategy: BaseStrategy,
        fps: int,
        watermark: bool = False,
        seed: int | None = None,
        duration: float = DEFAULT_DURATION,
        hud: Hud | None = None,
        overlay: Overlay | None = None,
        seed_factory: Callable[[GameConfig, BaseStrategy, int], int] = derive_simulation_seed,
    ):
        """
        Initialize animator.

        Args:
            config: Arena dimensions
            strategy: The autopilot generating input every frame
            fps: Frames per second for the animation
            watermark: Whether to add watermark to output frames
            seed: Optional deterministic seed for random-driven behavior
            duration: Seconds of play before the timeline ends
            hud: Collaborator receiving score/lives updates
            overlay: Collaborator receiving the game-over message
            seed_factory: Seed policy callable used when seed is not provided
        """
        if fps <= 0:
            raise ValueError(f"FPS must be positive, got {fps}")
        if duration <= 0:
            raise ValueError(f"Duration must be positive, got {duration}")
        self.config = config
        self.strategy = strategy
        self.fps = fps
        self.watermark = watermark
        self.duration = duration
        self.hud = hud
        self.overlay = overlay
        self.seed = seed if seed is not None else seed_factory(config, strategy, fps)
        self.frame_duration = 1000 // fps

    def _create_game_state(self) -> GameState:
        return create_seeded_game_state(
            self.config, self.strategy, self.seed, hud=self.hud, overlay=self.overlay
        )

    def iter_state_timeline(
        self, max_frames: int | None = None
    ) -> Iterator[tuple[GameState, int]]:
        """Yield mutable game-state frames with elapsed time in milliseconds."""
        game_state = self._create_game_state()
        yield from self._iter_state_timeline(game_state, max_frames=max_frames)

    def _iter_state_timeline(
        self, game_state: GameState, max_frames: int | None = None
    ) -> Iterator[tuple[GameState, int]]:
        """
        Drive the loop with synthetic timestamps, one frame per yield.

        The strategy's action for a frame is applied to the input state
        before that frame's tick, as a real input source would between frames.
        """
        scheduler = ManualFrameScheduler()
        driver = LoopDriver(game_state.animate, lambda: None, scheduler)
        actions = self.strategy.generate_actions(game_state)
        total_frames = int(self.duration * self.fps)
        trailing = GAME_OVER_TRAILING_FRAMES

        driver.start()
        for frame in range(total_frames):
            if max_frames is not None and frame >= max_frames:
                break
            if game_state.playing:
                next(actions).apply(game_state.input)
            else:
                trailing -= 1
                if trailing < 0:
                    break
            timestamp = frame * 1000 / self.fps
            scheduler.run_frame(timestamp)
            yield game_state, round(timestamp)
        driver.stop()
