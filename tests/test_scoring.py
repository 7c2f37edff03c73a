"""Tests for the scoring system and enemy damage."""

import math

import pytest

from canvas_shooter.game.entities import Bullet
from canvas_shooter.game.game_state import GameState
from canvas_shooter.constants import (
    BULLET_HIT_COLOR,
    DEFAULT_FPS,
    ENEMY_EXPLOSION_COLOR,
    PARTICLES_BULLET_HIT,
    PARTICLES_ENEMY_DESTROYED,
)
from conftest import make_enemy

TEST_DELTA_TIME = 1.0 / DEFAULT_FPS


class TestScoring:
    """Tests for score initialization and incrementation."""

    def test_score_initialization(self, default_game_state: GameState) -> None:
        """Test that the score is initialized to 0."""
        assert default_game_state.score == 0

    def test_bullet_destroys_weak_enemy(self, default_game_state: GameState) -> None:
        """A single overlapping bullet removes a 1-health enemy and awards 60 points."""
        enemy = make_enemy(x=100, y=-40, width=40, height=40, health=1, points=60)
        default_game_state.enemies.append(enemy)
        # After this frame's 13px climb the bullet sits at y=-5, inside the enemy.
        default_game_state.bullets.append(Bullet.player_shot(110, 8))

        default_game_state.animate(TEST_DELTA_TIME)

        assert enemy not in default_game_state.enemies
        assert default_game_state.bullets == []
        assert default_game_state.score == 60

        hit_sparks = [p for p in default_game_state.particles if p.color == BULLET_HIT_COLOR]
        explosion = [p for p in default_game_state.particles if p.color == ENEMY_EXPLOSION_COLOR]
        assert len(hit_sparks) == PARTICLES_BULLET_HIT
        assert len(explosion) == PARTICLES_ENEMY_DESTROYED
        # Particles drift for one frame, so they stay within a few pixels of the center.
        for particle in explosion:
            assert math.hypot(particle.x - 120, particle.y + 20) < 5

    def test_tough_enemy_takes_three_hits(self, default_game_state: GameState) -> None:
        """Each hit removes exactly one health; the kill happens on the third."""
        enemy = make_enemy(x=100, y=100, health=3, points=150)
        default_game_state.enemies.append(enemy)

        for expected_health in (2, 1):
            default_game_state.bullets.append(Bullet.player_shot(110, 120))
            default_game_state.animate(TEST_DELTA_TIME)
            assert enemy.health == expected_health
            assert enemy in default_game_state.enemies
            assert default_game_state.score == 0

        default_game_state.bullets.append(Bullet.player_shot(110, 120))
        default_game_state.animate(TEST_DELTA_TIME)

        assert enemy not in default_game_state.enemies
        assert default_game_state.score == 150

    def test_one_bullet_consumed_per_enemy_per_frame(self, default_game_state: GameState) -> None:
        """Two bullets overlapping the same enemy only cost it one health this frame."""
        enemy = make_enemy(x=100, y=100, health=3, points=150)
        first = Bullet.player_shot(105, 120)
        second = Bullet.player_shot(120, 120)
        default_game_state.enemies.append(enemy)
        default_game_state.bullets.extend([first, second])

        default_game_state.animate(TEST_DELTA_TIME)

        assert enemy.health == 2
        assert default_game_state.bullets == [second]

    def test_bullet_hits_only_one_of_two_enemies(self, default_game_state: GameState) -> None:
        """A bullet overlapping two enemies is consumed by the first in collection order."""
        front = make_enemy(x=100, y=100)
        behind = make_enemy(x=104, y=100)
        default_game_state.enemies.extend([front, behind])
        default_game_state.bullets.append(Bullet.player_shot(110, 120))

        default_game_state.animate(TEST_DELTA_TIME)

        assert default_game_state.enemies == [behind]
        assert default_game_state.score == 60

    def test_score_not_incremented_if_enemy_not_destroyed(self, default_game_state: GameState) -> None:
        enemy = make_enemy(health=2)
        default_game_state.enemies.append(enemy)

        assert enemy.take_damage() is False
        assert enemy.health == 1
        assert default_game_state.score == 0

    def test_touching_edges_do_not_hit(self, default_game_state: GameState) -> None:
        """A bullet whose top edge ends exactly at the enemy's bottom edge misses."""
        enemy = make_enemy(x=100, y=100, width=40, height=40)
        default_game_state.enemies.append(enemy)
        # Ends the frame at y=140, touching the enemy's bottom edge.
        default_game_state.bullets.append(Bullet.player_shot(110, 153))

        default_game_state.animate(TEST_DELTA_TIME)

        assert default_game_state.bullets[0].y == pytest.approx(140)
        assert enemy in default_game_state.enemies
        assert default_game_state.score == 0

    def test_hud_receives_score_after_step(self, default_game_state: GameState, hud) -> None:
        default_game_state.enemies.append(make_enemy(x=100, y=100))
        default_game_state.bullets.append(Bullet.player_shot(110, 120))

        default_game_state.animate(TEST_DELTA_TIME)

        assert hud.updates[-1] == (60, 3)
