"""Shared replay orchestration used by the CLI."""

from .config import GameConfig
from .constants import DEFAULT_DURATION
from .game.animator import Animator
from .game.collaborators import Hud, Overlay
from .game.raster_animation import generate_raster_frames
from .game.strategies.base_strategy import BaseStrategy
from .output import resolve_output_provider
from .output.base import OutputProvider


def encode_animation(
    config: GameConfig,
    strategy: BaseStrategy,
    output_path: str,
    *,
    fps: int,
    watermark: bool = False,
    seed: int | None = None,
    duration: float = DEFAULT_DURATION,
    max_frames: int | None = None,
    hud: Hud | None = None,
    overlay: Overlay | None = None,
    provider: OutputProvider | None = None,
) -> bytes:
    """Play a session with the strategy and encode it for the given output path."""
    target_provider = provider or resolve_output_provider(output_path)
    animator = Animator(
        config,
        strategy,
        fps=fps,
        watermark=watermark,
        seed=seed,
        duration=duration,
        hud=hud,
        overlay=overlay,
    )
    frames = generate_raster_frames(animator, max_frames)
    return target_provider.encode(frames, frame_duration=animator.frame_duration)
