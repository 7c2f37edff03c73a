"""Tests for randomized enemy and particle construction."""

import math
import random

import pytest

from canvas_shooter.config import GameConfig
from canvas_shooter.game.spawner import EnemySpawner


@pytest.fixture
def spawner() -> EnemySpawner:
    return EnemySpawner(GameConfig(), rng=random.Random(42))


def test_enemy_parameters_stay_in_bounds(spawner: EnemySpawner):
    for _ in range(500):
        enemy = spawner.spawn_enemy(speed_multiplier=1.5)
        assert 36 <= enemy.width < 56
        assert 36 <= enemy.height < 56
        assert enemy.y == -enemy.height
        assert 0 <= enemy.x < 540 - enemy.width
        assert 120 * 1.5 <= enemy.speed < 180 * 1.5
        assert 0 <= enemy.phase_offset < 2 * math.pi
        assert 20 <= enemy.amplitude < 60
        assert 0 <= enemy.fire_cooldown < enemy.fire_rate
        assert enemy.health > 0


def test_enemy_variants_are_consistent(spawner: EnemySpawner):
    variants = set()
    for _ in range(500):
        enemy = spawner.spawn_enemy(speed_multiplier=1.0)
        variants.add((enemy.health, enemy.fire_rate, enemy.points))
    assert variants == {(1, 2600, 60), (3, 1800, 150)}


def test_tough_enemies_are_about_one_in_five(spawner: EnemySpawner):
    tough = sum(spawner.spawn_enemy(1.0).health == 3 for _ in range(2000))
    assert 300 <= tough <= 500


def test_same_seed_same_enemies():
    first = EnemySpawner(GameConfig(), rng=random.Random(7)).spawn_enemy(1.0)
    second = EnemySpawner(GameConfig(), rng=random.Random(7)).spawn_enemy(1.0)
    assert (first.x, first.width, first.speed, first.health) == (
        second.x,
        second.width,
        second.speed,
        second.health,
    )


def test_particle_burst(spawner: EnemySpawner):
    particles = spawner.burst(10, 20, count=25, color="#ff5f64")

    assert len(particles) == 25
    for particle in particles:
        assert (particle.x, particle.y) == (10, 20)
        assert 40 <= math.hypot(particle.vx, particle.vy) < 180 + 1e-9
        assert 0.4 <= particle.life < 0.8
        assert 1 <= particle.radius < 4
        assert particle.color == "#ff5f64"


def test_particles_shrink_and_expire(spawner: EnemySpawner):
    particle = spawner.burst(0, 0, count=1, color="#ffffff")[0]
    radius = particle.radius

    particle.animate(0.01)
    assert particle.radius == pytest.approx(radius * 0.96)

    while not particle.is_expired():
        particle.animate(1 / 30)
    assert particle.life <= 0
