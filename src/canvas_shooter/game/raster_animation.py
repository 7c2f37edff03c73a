"""Raster (Pillow) animation frame generators built on top of Animator timelines."""

from typing import Iterator

from PIL import Image

from .animator import Animator
from .render_context import RenderContext
from .renderer import Renderer
from .snapshot import snapshot_frame


def generate_raster_frames(
    animator: Animator, max_frames: int | None = None
) -> Iterator[Image.Image]:
    """Render raster frame payloads from an animator timeline."""
    renderer = Renderer(RenderContext.darkmode(), watermark=animator.watermark)
    for game_state, elapsed_ms in animator.iter_state_timeline(max_frames=max_frames):
        yield renderer.render_frame(snapshot_frame(game_state, time_ms=elapsed_ms))
