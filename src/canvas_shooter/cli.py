"""CLI interface for canvas-shooter."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .animation_pipeline import encode_animation
from .config import GameConfig
from .constants import DEFAULT_DURATION, DEFAULT_FPS
from .game.collaborators import ConsoleHud, ConsoleOverlay
from .game.strategies import (
    DEFAULT_STRATEGY_NAME,
    create_strategy,
    supported_strategy_names,
)
from .game.strategies.base_strategy import BaseStrategy
from .output import resolve_output_provider, supported_output_formats

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()
DEFAULT_OUTPUT = "canvas-shooter.gif"


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    out: str = typer.Option(
        DEFAULT_OUTPUT,
        "--output",
        "-out",
        "-o",
        help=f"Where to write the replay animation ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    strategy: str = typer.Option(
        DEFAULT_STRATEGY_NAME,
        "--strategy",
        "-s",
        help=f"Autopilot that plays the session ({', '.join(supported_strategy_names())})",
    ),
    fps: int = typer.Option(
        DEFAULT_FPS,
        "--fps",
        help="Frames per second for the animation",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for spawns, particles and the autopilot (derived from inputs if omitted)",
    ),
    duration: float = typer.Option(
        DEFAULT_DURATION,
        "--duration",
        help="Seconds of play to simulate",
    ),
    max_frames: int | None = typer.Option(
        None,
        "--max-frame",
        help="Maximum number of frames to generate",
    ),
    width: int | None = typer.Option(
        None,
        "--width",
        help="Arena width in pixels (default: CANVAS_SHOOTER_WIDTH or 540)",
    ),
    height: int | None = typer.Option(
        None,
        "--height",
        help="Arena height in pixels (default: CANVAS_SHOOTER_HEIGHT or 720)",
    ),
    watermark: bool = typer.Option(
        False,
        "--watermark",
        help="Add watermark to the output animation",
    ),
) -> None:
    """
    Play a seeded arcade shooter session with an autopilot and save the replay.

    Examples:
      # Default hunter autopilot, GIF output
      canvas-shooter

      # Reproducible WebP replay of the random autopilot
      canvas-shooter -s random --seed 7 -o replay.webp
    """
    try:
        config = _load_config(width, height)
        resolved_strategy = _resolve_strategy(strategy)
        _validate_output(out)
        if fps <= 0:
            raise CLIError(f"FPS must be positive, got {fps}")
        if duration <= 0:
            raise CLIError(f"Duration must be positive, got {duration}")

        _generate_output(config, out, resolved_strategy, fps, seed, duration, max_frames, watermark)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _load_config(width: int | None, height: int | None) -> GameConfig:
    try:
        return GameConfig.from_env(width=width, height=height)
    except ValueError as exc:
        raise CLIError(str(exc))


def _resolve_strategy(strategy_name: str) -> BaseStrategy:
    try:
        return create_strategy(strategy_name)
    except ValueError as exc:
        raise CLIError(str(exc))


def _validate_output(output_path: str) -> None:
    try:
        resolve_output_provider(output_path)
    except ValueError as exc:
        raise CLIError(str(exc))


def _generate_output(
    config: GameConfig,
    output_path: str,
    strategy: BaseStrategy,
    fps: int,
    seed: int | None,
    duration: float,
    max_frames: int | None,
    watermark: bool,
) -> None:
    """Play the session and write the encoded animation."""
    # Warn about GIF FPS limitation
    if output_path.lower().endswith(".gif") and fps > 50:
        console.print(
            f"[yellow]Warning:[/yellow] FPS > 50 may not display correctly in browsers "
            f"(GIF delay will be {1000 // fps}ms, but browsers clamp delays < 20ms to ~100ms)"
        )

    ext = Path(output_path).suffix[1:].upper()
    console.print(
        f"\n[bold blue]Playing {config.width}x{config.height} session "
        f"with {strategy.__class__.__name__}...[/bold blue]"
    )
    provider = resolve_output_provider(output_path)
    hud = ConsoleHud(console)
    try:
        encoded = encode_animation(
            config,
            strategy,
            output_path,
            fps=fps,
            watermark=watermark,
            seed=seed,
            duration=duration,
            max_frames=max_frames,
            hud=hud,
            overlay=ConsoleOverlay(console),
            provider=provider,
        )
    except Exception as e:
        raise CLIError(f"Failed to generate output: {e}")

    console.print(f"Score: [bold]{hud.score}[/bold]  Lives left: [bold]{hud.lives}[/bold]")
    console.print(f"[bold blue]Saving {ext} to {output_path}...[/bold blue]")
    try:
        provider.write(encoded)
    except IOError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
