"""Tests for player damage, game over and reset."""

from canvas_shooter.constants import (
    DEFAULT_FPS,
    ENEMY_EXPLOSION_COLOR,
    ENEMY_SPAWN_BASE,
    PARTICLES_ENEMY_RAMMED,
    PARTICLES_PLAYER_HIT,
    PLAYER_HIT_COLOR,
)
from canvas_shooter.game.entities import Bullet
from canvas_shooter.game.game_state import GameState
from conftest import enemy_bullet_on_ship, make_enemy

TEST_DELTA_TIME = 1.0 / DEFAULT_FPS


class TestPlayerDamage:

    def test_enemy_bullet_costs_one_life_and_recenters(self, quiet_game_state: GameState, hud) -> None:
        ship = quiet_game_state.ship
        quiet_game_state.handle_pointer_move(100, 500)
        bullet = enemy_bullet_on_ship(quiet_game_state)
        quiet_game_state.enemy_bullets.append(bullet)

        quiet_game_state.animate(TEST_DELTA_TIME)

        assert quiet_game_state.lives == 2
        assert bullet not in quiet_game_state.enemy_bullets
        assert (ship.x, ship.y) == (540 / 2 - 21, 720 - 54 - 30)
        assert quiet_game_state.playing
        flash = [p for p in quiet_game_state.particles if p.color == PLAYER_HIT_COLOR]
        assert len(flash) == PARTICLES_PLAYER_HIT
        assert (0, 2) in hud.updates

    def test_enemy_ram_removes_enemy(self, quiet_game_state: GameState) -> None:
        ship = quiet_game_state.ship
        enemy = make_enemy(x=ship.x, y=ship.y)
        quiet_game_state.enemies.append(enemy)

        quiet_game_state.animate(TEST_DELTA_TIME)

        assert quiet_game_state.lives == 2
        assert quiet_game_state.enemies == []
        # Rammed enemies award nothing.
        assert quiet_game_state.score == 0
        debris = [p for p in quiet_game_state.particles if p.color == ENEMY_EXPLOSION_COLOR]
        assert len(debris) == PARTICLES_ENEMY_RAMMED

    def test_at_most_one_damage_event_per_frame(self, quiet_game_state: GameState) -> None:
        """Bullets are checked first; the first hit ends the pass for this frame."""
        ship = quiet_game_state.ship
        first = enemy_bullet_on_ship(quiet_game_state)
        second = enemy_bullet_on_ship(quiet_game_state)
        rammer = make_enemy(x=ship.x, y=ship.y)
        quiet_game_state.enemy_bullets.extend([first, second])
        quiet_game_state.enemies.append(rammer)

        quiet_game_state.animate(TEST_DELTA_TIME)

        assert quiet_game_state.lives == 2
        assert quiet_game_state.enemy_bullets == [second]
        assert quiet_game_state.enemies == [rammer]

    def test_lives_never_drop_by_more_than_one_per_frame(self, default_game_state: GameState) -> None:
        default_game_state.input.press(" ")
        lives = default_game_state.lives
        for _ in range(DEFAULT_FPS * 60):
            default_game_state.animate(TEST_DELTA_TIME)
            assert lives - default_game_state.lives in (0, 1)
            assert default_game_state.lives >= 0
            lives = default_game_state.lives


class TestGameOver:

    def test_last_life_ends_the_game(self, quiet_game_state: GameState, overlay) -> None:
        quiet_game_state.ship.lives = 1
        quiet_game_state.ship.score = 420
        quiet_game_state.enemy_bullets.append(enemy_bullet_on_ship(quiet_game_state))

        quiet_game_state.animate(TEST_DELTA_TIME)

        assert quiet_game_state.lives == 0
        assert quiet_game_state.is_game_over()
        assert overlay.shows == [("show", "Game Over", "Final score: 420")]

    def test_simulation_frozen_after_game_over(self, quiet_game_state: GameState, overlay) -> None:
        quiet_game_state.ship.lives = 1
        quiet_game_state.enemy_bullets.append(enemy_bullet_on_ship(quiet_game_state))
        quiet_game_state.animate(TEST_DELTA_TIME)

        enemy = make_enemy(x=10, y=10, speed=100)
        quiet_game_state.enemies.append(enemy)
        quiet_game_state.bullets.append(Bullet.player_shot(300, 300))
        quiet_game_state.input.press("ArrowLeft")
        particle_positions = [(p.x, p.y) for p in quiet_game_state.particles]
        star_positions = [(s.x, s.y) for s in quiet_game_state.starfield.stars]
        ship_position = (quiet_game_state.ship.x, quiet_game_state.ship.y)

        for _ in range(10):
            quiet_game_state.animate(TEST_DELTA_TIME)

        assert (enemy.x, enemy.y) == (10, 10)
        assert quiet_game_state.bullets[0].y == 300
        assert [(p.x, p.y) for p in quiet_game_state.particles] == particle_positions
        assert [(s.x, s.y) for s in quiet_game_state.starfield.stars] == star_positions
        assert (quiet_game_state.ship.x, quiet_game_state.ship.y) == ship_position
        assert quiet_game_state.lives == 0
        assert len(overlay.shows) == 1


class TestReset:

    def test_reset_restores_initial_state(self, default_game_state: GameState, hud, overlay) -> None:
        default_game_state.ship.lives = 1
        default_game_state.ship.score = 900
        default_game_state.enemies.append(make_enemy())
        default_game_state.bullets.append(Bullet.player_shot(200, 200))
        default_game_state.enemy_bullets.append(enemy_bullet_on_ship(default_game_state))
        default_game_state.animate(TEST_DELTA_TIME)
        assert default_game_state.is_game_over()

        default_game_state.reset()

        assert default_game_state.playing
        assert default_game_state.score == 0
        assert default_game_state.lives == 3
        assert default_game_state.bullets == []
        assert default_game_state.enemy_bullets == []
        assert default_game_state.enemies == []
        assert default_game_state.particles == []
        assert (default_game_state.ship.x, default_game_state.ship.y) == (249, 636)
        assert default_game_state.ship.cooldown == 0
        assert default_game_state.spawn_timer == 0
        assert default_game_state.difficulty.speed_multiplier == 1
        assert default_game_state.difficulty.spawn_interval == ENEMY_SPAWN_BASE
        assert overlay.calls[-1] == ("hide",)
        assert hud.updates[-1] == (0, 3)

    def test_simulation_resumes_after_reset(self, quiet_game_state: GameState) -> None:
        quiet_game_state.ship.lives = 1
        quiet_game_state.enemy_bullets.append(enemy_bullet_on_ship(quiet_game_state))
        quiet_game_state.animate(TEST_DELTA_TIME)

        quiet_game_state.reset()
        quiet_game_state.input.press("ArrowRight")
        quiet_game_state.animate(TEST_DELTA_TIME)

        assert quiet_game_state.ship.x > 249
