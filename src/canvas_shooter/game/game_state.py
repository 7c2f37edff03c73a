"""Game session state: entity stores, scoring, lives and the simulation step."""

import random
from typing import Sequence, TypeVar

from ..config import GameConfig
from ..constants import (
    BULLET_HIT_COLOR,
    DIAGONAL_FACTOR,
    ENEMY_EXPLOSION_COLOR,
    MUZZLE_COLOR,
    PARTICLES_BULLET_HIT,
    PARTICLES_ENEMY_DESTROYED,
    PARTICLES_ENEMY_RAMMED,
    PARTICLES_MUZZLE,
    PARTICLES_PLAYER_HIT,
    PLAYER_HIT_COLOR,
    PLAYER_MAX_LIVES,
)
from .collaborators import Hud, NullHud, NullOverlay, Overlay
from .difficulty import Difficulty
from .entities import Bullet, Enemy, Entity, Particle, Ship, Starfield
from .input_state import InputState
from .spawner import EnemySpawner

GAME_OVER_TITLE = "Game Over"

EntityT = TypeVar("EntityT", bound=Entity)


class GameState:
    """Owns every entity store and advances them one frame at a time."""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        input_state: InputState | None = None,
        hud: Hud | None = None,
        overlay: Overlay | None = None,
    ):
        """
        Initialize a fresh session in the playing state.

        Args:
            config: Arena dimensions
            rng: Random source for stars, spawns and particles
            input_state: Held symbols read by the player update
            hud: Receives (score, lives) after every step
            overlay: Shown on game over, hidden on reset
        """
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.input = input_state or InputState()
        self.hud: Hud = hud or NullHud()
        self.overlay: Overlay = overlay or NullOverlay()
        self.spawner = EnemySpawner(self.config, rng=self.rng)
        self.starfield = Starfield(self.config, rng=self.rng)
        self.ship = Ship.spawn(self.config)
        self.bullets: list[Bullet] = []
        self.enemy_bullets: list[Bullet] = []
        self.enemies: list[Enemy] = []
        self.particles: list[Particle] = []
        self.difficulty = Difficulty()
        self.spawn_timer = 0.0  # Milliseconds since last spawn
        self.elapsed_ms = 0.0
        self.playing = True
        self.hud.update(self.score, self.lives)

    @property
    def score(self) -> int:
        return self.ship.score

    @property
    def lives(self) -> int:
        return self.ship.lives

    def is_game_over(self) -> bool:
        return not self.playing

    def reset(self) -> None:
        """Restart the session: full lives, zero score, empty arena."""
        self.ship.recenter(self.config)
        self.ship.lives = PLAYER_MAX_LIVES
        self.ship.score = 0
        self.ship.cooldown = 0.0
        self.bullets.clear()
        self.enemy_bullets.clear()
        self.enemies.clear()
        self.particles.clear()
        self.difficulty = Difficulty()
        self.spawn_timer = 0.0
        self.elapsed_ms = 0.0
        self.playing = True
        self.hud.update(self.score, self.lives)
        self.overlay.hide()

    def handle_pointer_move(self, x: float, y: float) -> None:
        """Center the ship on the pointer, kept inside its allowed zone."""
        self.ship.place_at(x, y)
        self.ship.clamp_to(self.config)

    def emit_particles(self, x: float, y: float, count: int, color: str) -> None:
        self.particles.extend(self.spawner.burst(x, y, count, color))

    def spawn_enemy(self) -> Enemy:
        enemy = self.spawner.spawn_enemy(self.difficulty.speed_multiplier)
        self.enemies.append(enemy)
        return enemy

    def shoot(self) -> None:
        """Fire both guns and start the cooldown."""
        for x, y in self.ship.gun_positions():
            self.bullets.append(Bullet.player_shot(x, y))
        self.emit_particles(
            self.ship.x + self.ship.width / 2,
            self.ship.y + self.ship.height,
            PARTICLES_MUZZLE,
            MUZZLE_COLOR,
        )
        self.ship.reload()

    def animate(self, delta_time: float) -> None:
        """Update all game objects for next frame.

        Sub-steps run in a fixed order since later ones see earlier
        mutations, e.g. enemies collide with bullets fired this frame.

        Args:
            delta_time: Time elapsed since last frame in seconds.
        """
        if not self.playing:
            return
        self.elapsed_ms += delta_time * 1000
        self.starfield.animate(delta_time)
        self._update_ship(delta_time)
        self.bullets[:] = self._advance_bullets(self.bullets, delta_time)
        self.enemy_bullets[:] = self._advance_bullets(self.enemy_bullets, delta_time)
        self._update_enemies(delta_time)
        self._update_particles(delta_time)
        self._check_player_collisions()
        if self.playing:
            self.difficulty.advance(self.score, delta_time)
            self._advance_spawn_timer(delta_time)
        self.hud.update(self.score, self.lives)

    def _update_ship(self, delta_time: float) -> None:
        dx, dy = self.input.direction()
        if dx and dy:
            dx *= DIAGONAL_FACTOR
            dy *= DIAGONAL_FACTOR
        self.ship.steer(dx, dy, delta_time)
        self.ship.clamp_to(self.config)
        self.ship.animate(delta_time)
        if self.input.firing and self.ship.can_shoot():
            self.shoot()

    def _advance_bullets(self, bullets: Sequence[Bullet], delta_time: float) -> list[Bullet]:
        survivors = []
        for bullet in bullets:
            bullet.animate(delta_time)
            if not bullet.is_offscreen(self.config.height):
                survivors.append(bullet)
        return survivors

    def _update_enemies(self, delta_time: float) -> None:
        survivors = []
        for enemy in self.enemies:
            enemy.animate(delta_time, self.elapsed_ms)
            if enemy.ready_to_fire():
                self.enemy_bullets.append(
                    Bullet.enemy_shot(enemy.x + enemy.width / 2 - 4, enemy.y + enemy.height)
                )
                enemy.reload()

            if enemy.has_left_arena(self.config.height):
                continue

            bullet = _first_overlapping(self.bullets, enemy)
            if bullet is not None:
                self.bullets.remove(bullet)
                self.emit_particles(bullet.x, bullet.y, PARTICLES_BULLET_HIT, BULLET_HIT_COLOR)
                if enemy.take_damage():
                    self.ship.score += enemy.points
                    center_x, center_y = enemy.center
                    self.emit_particles(
                        center_x, center_y, PARTICLES_ENEMY_DESTROYED, ENEMY_EXPLOSION_COLOR
                    )
                    continue
            survivors.append(enemy)
        self.enemies[:] = survivors

    def _update_particles(self, delta_time: float) -> None:
        survivors = []
        for particle in self.particles:
            particle.animate(delta_time)
            if not particle.is_expired():
                survivors.append(particle)
        self.particles[:] = survivors

    def _check_player_collisions(self) -> None:
        """Apply at most one damage event: enemy bullets first, then rams."""
        bullet = _first_overlapping(self.enemy_bullets, self.ship)
        if bullet is not None:
            self.enemy_bullets.remove(bullet)
            self.damage_player()
            return

        enemy = _first_overlapping(self.enemies, self.ship)
        if enemy is not None:
            self.enemies.remove(enemy)
            center_x, center_y = enemy.center
            self.emit_particles(center_x, center_y, PARTICLES_ENEMY_RAMMED, ENEMY_EXPLOSION_COLOR)
            self.damage_player()

    def damage_player(self) -> None:
        """Ship loses a life and returns to spawn, or the game ends."""
        center_x, center_y = self.ship.center
        self.emit_particles(center_x, center_y, PARTICLES_PLAYER_HIT, PLAYER_HIT_COLOR)
        self.ship.lives = max(0, self.ship.lives - 1)
        self.hud.update(self.score, self.lives)
        if self.ship.is_destroyed():
            self.playing = False
            self.overlay.show(GAME_OVER_TITLE, f"Final score: {self.score}")
        else:
            self.ship.recenter(self.config)

    def _advance_spawn_timer(self, delta_time: float) -> None:
        self.spawn_timer += delta_time * 1000
        if self.spawn_timer >= self.difficulty.spawn_interval:
            self.spawn_enemy()
            self.spawn_timer = 0.0


def _first_overlapping(candidates: Sequence[EntityT], target: Entity) -> EntityT | None:
    """First candidate in collection order whose box overlaps target."""
    for candidate in candidates:
        if candidate.overlaps(target):
            return candidate
    return None
