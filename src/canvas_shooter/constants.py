"""Global constants for the application."""

import math

# Animation settings
DEFAULT_FPS = 40  # Default frames per second for animation
DEFAULT_DURATION = 30.0  # Seconds of simulated play per animation
GAME_OVER_TRAILING_FRAMES = 20  # Frames kept after game over so the overlay shows

# Arena dimensions in pixels
DEFAULT_ARENA_WIDTH = 540
DEFAULT_ARENA_HEIGHT = 720

# Frame delta ceiling in seconds, guards against stalls
MAX_FRAME_DELTA = 1 / 30

# Player
PLAYER_WIDTH = 42
PLAYER_HEIGHT = 54
PLAYER_SPEED = 320  # Pixels per second
PLAYER_MAX_LIVES = 3
PLAYER_EDGE_MARGIN = 12  # Pixels kept free at the arena edges
PLAYER_SPAWN_BOTTOM_OFFSET = 30  # Pixels between ship bottom and arena bottom at spawn
PLAYER_MIN_Y_RATIO = 0.45  # Ship stays in the lower part of the arena
PLAYER_FIRE_COOLDOWN = 160  # Milliseconds between volleys
DIAGONAL_FACTOR = 1 / math.sqrt(2)

# Bullets (speeds in pixels per second, negative moves up)
BULLET_WIDTH = 6
BULLET_HEIGHT = 16
BULLET_SPEED = -520
ENEMY_BULLET_WIDTH = 8
ENEMY_BULLET_HEIGHT = 18
ENEMY_BULLET_SPEED = 180

# Enemies
ENEMY_BASE_SPEED = 120
ENEMY_SPEED_JITTER = 60
ENEMY_MIN_SIZE = 36
ENEMY_SIZE_JITTER = 20
ENEMY_TOUGH_CHANCE = 0.2
ENEMY_WEAK_HEALTH = 1
ENEMY_TOUGH_HEALTH = 3
ENEMY_WEAK_FIRE_RATE = 2600  # Milliseconds between shots
ENEMY_TOUGH_FIRE_RATE = 1800
ENEMY_WEAK_POINTS = 60
ENEMY_TOUGH_POINTS = 150
ENEMY_AMPLITUDE_MIN = 20
ENEMY_AMPLITUDE_JITTER = 40
ENEMY_WEAVE_FREQUENCY = 0.002  # Radians per elapsed millisecond

# Difficulty curve
ENEMY_SPAWN_BASE = 950  # Milliseconds between spawns at score 0
ENEMY_SPAWN_FLOOR = 380
ENEMY_SPAWN_SCORE_FACTOR = 0.5
SPEED_SCORE_DIVISOR = 4000
SPEED_SMOOTHING = 0.7
SPAWN_SMOOTHING = 2.0

# Particles
PARTICLE_SPEED_MIN = 40
PARTICLE_SPEED_JITTER = 140
PARTICLE_LIFE_MIN = 0.4  # Seconds
PARTICLE_LIFE_JITTER = 0.4
PARTICLE_RADIUS_MIN = 1
PARTICLE_RADIUS_JITTER = 3
PARTICLE_SHRINK = 0.96  # Radius factor applied every frame

PARTICLES_MUZZLE = 6
PARTICLES_BULLET_HIT = 4
PARTICLES_ENEMY_DESTROYED = 25
PARTICLES_ENEMY_RAMMED = 20
PARTICLES_PLAYER_HIT = 40

# Starfield
STAR_COUNT = 70
STAR_RADIUS_MIN = 0.2
STAR_RADIUS_JITTER = 1.8
STAR_WRAP_RADIUS_JITTER = 2.0
STAR_SPEED_MIN = 15
STAR_SPEED_JITTER = 35

# Input symbols
LEFT_KEYS = ("ArrowLeft", "a")
RIGHT_KEYS = ("ArrowRight", "d")
UP_KEYS = ("ArrowUp", "w")
DOWN_KEYS = ("ArrowDown", "s")
FIRE_KEY = " "

# Colors
MUZZLE_COLOR = "#7bf9ff"
BULLET_HIT_COLOR = "#ffd66b"
ENEMY_EXPLOSION_COLOR = "#ff5f64"
PLAYER_HIT_COLOR = "#6be0ff"
