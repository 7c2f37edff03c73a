"""HUD and overlay collaborators notified by the game session."""

from typing import Protocol

from rich.console import Console


class Hud(Protocol):
    def update(self, score: int, lives: int) -> None: ...


class Overlay(Protocol):
    def show(self, title: str, message: str) -> None: ...

    def hide(self) -> None: ...


class NullHud:
    """Discards score/lives updates."""

    def update(self, score: int, lives: int) -> None:
        del score, lives


class NullOverlay:
    """Remembers the last message so renderers can draw it."""

    def __init__(self) -> None:
        self.visible = False
        self.title = ""
        self.message = ""

    def show(self, title: str, message: str) -> None:
        self.visible = True
        self.title = title
        self.message = message

    def hide(self) -> None:
        self.visible = False


class ConsoleHud:
    """Prints score and lives to a rich console whenever they change."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.score: int | None = None
        self.lives: int | None = None

    def update(self, score: int, lives: int) -> None:
        if self.lives is not None and lives < self.lives:
            self.console.print(f"[yellow]Hit![/yellow] Score: {score} Lives: {lives}")
        self.score = score
        self.lives = lives


class ConsoleOverlay(NullOverlay):
    """Overlay that also announces itself on a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console()

    def show(self, title: str, message: str) -> None:
        super().show(title, message)
        self.console.print(f"[bold red]{title}[/bold red] {message}")
