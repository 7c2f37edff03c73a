"""Immutable per-frame snapshots handed to render collaborators."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Bullet, Enemy
    from .game_state import GameState


@dataclass(frozen=True)
class BoxFrameState:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class EnemyFrameState(BoxFrameState):
    health: int


@dataclass(frozen=True)
class ParticleFrameState:
    x: float
    y: float
    radius: float
    life: float
    color: str


@dataclass(frozen=True)
class StarFrameState:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class FrameSnapshot:
    """A full game-state snapshot at a specific animation time."""

    width: int
    height: int
    time_ms: int
    score: int
    lives: int
    game_over: bool
    overlay_title: str
    overlay_message: str
    player: BoxFrameState
    stars: tuple[StarFrameState, ...]
    bullets: tuple[BoxFrameState, ...]
    enemy_bullets: tuple[BoxFrameState, ...]
    enemies: tuple[EnemyFrameState, ...]
    particles: tuple[ParticleFrameState, ...]


def snapshot_frame(game_state: "GameState", *, time_ms: int) -> FrameSnapshot:
    """Build an immutable snapshot from the current game state."""
    ship = game_state.ship
    overlay = game_state.overlay
    return FrameSnapshot(
        width=game_state.config.width,
        height=game_state.config.height,
        time_ms=time_ms,
        score=game_state.score,
        lives=game_state.lives,
        game_over=game_state.is_game_over(),
        overlay_title=getattr(overlay, "title", ""),
        overlay_message=getattr(overlay, "message", ""),
        player=BoxFrameState(x=ship.x, y=ship.y, width=ship.width, height=ship.height),
        stars=tuple(
            StarFrameState(x=star.x, y=star.y, radius=star.radius)
            for star in game_state.starfield.stars
        ),
        bullets=_box_states(game_state.bullets),
        enemy_bullets=_box_states(game_state.enemy_bullets),
        enemies=_enemy_states(game_state.enemies),
        particles=tuple(
            ParticleFrameState(
                x=particle.x,
                y=particle.y,
                radius=particle.radius,
                life=particle.life,
                color=particle.color,
            )
            for particle in game_state.particles
        ),
    )


def _box_states(bullets: "list[Bullet]") -> tuple[BoxFrameState, ...]:
    return tuple(
        BoxFrameState(x=bullet.x, y=bullet.y, width=bullet.width, height=bullet.height)
        for bullet in bullets
    )


def _enemy_states(enemies: "list[Enemy]") -> tuple[EnemyFrameState, ...]:
    return tuple(
        EnemyFrameState(
            x=enemy.x,
            y=enemy.y,
            width=enemy.width,
            height=enemy.height,
            health=enemy.health,
        )
        for enemy in enemies
    )
