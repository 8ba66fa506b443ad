"""
constants.py: Centralized configuration for world, physics and obstacle settings.
"""

import enum
from dataclasses import dataclass

# -------- Frame Config --------
RENDER_FPS = 60                 # Host frame cap; one physics step per frame

# -------- Game World Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
GROUND_HEIGHT = 350             # Resting y of the player's top edge
STAR_COUNT = 100

# -------- Player Config --------
PLAYER_X = 150                  # Fixed player X position
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 40
JUMP_TILT_DEGREES = 45          # Cosmetic rotation while airborne

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.7                   # Added to vertical velocity every tick
JUMP_FORCE = -12.0              # Instantaneous velocity on jump

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 40
OBSTACLE_SPEED = 6.0            # Horizontal scroll (pixels/tick)
OBSTACLE_MIN_DISTANCE = 300
OBSTACLE_MAX_DISTANCE = 500
OBSTACLE_MIN_HEIGHT = 20
OBSTACLE_MAX_HEIGHT = 80
OBSTACLE_SPAWN_INTERVAL_TICKS = 60  # Only used by the periodic policy


class ConfigError(ValueError):
    """Raised when a GameConfig is built from inconsistent values."""


class SpawnPolicy(enum.Enum):
    DISTANCE = "distance"
    PERIODIC = "periodic"


@dataclass(frozen=True)
class GameConfig:
    """Tuning values fixed for the lifetime of an engine."""
    world_width: int = SCREEN_WIDTH
    world_height: int = SCREEN_HEIGHT
    ground_height: float = GROUND_HEIGHT
    gravity: float = GRAVITY
    jump_force: float = JUMP_FORCE
    clamp_ceiling: bool = False

    player_x: float = PLAYER_X
    player_width: float = PLAYER_WIDTH
    player_height: float = PLAYER_HEIGHT

    obstacle_width: float = OBSTACLE_WIDTH
    obstacle_speed: float = OBSTACLE_SPEED
    min_distance: float = OBSTACLE_MIN_DISTANCE
    max_distance: float = OBSTACLE_MAX_DISTANCE
    min_height: float = OBSTACLE_MIN_HEIGHT
    max_height: float = OBSTACLE_MAX_HEIGHT
    spawn_policy: SpawnPolicy = SpawnPolicy.DISTANCE
    spawn_interval: int = OBSTACLE_SPAWN_INTERVAL_TICKS

    star_count: int = STAR_COUNT

    def __post_init__(self):
        if self.world_width <= 0 or self.world_height <= 0:
            raise ConfigError("world dimensions must be positive")
        if self.player_width <= 0 or self.player_height <= 0:
            raise ConfigError("player size must be positive")
        if self.obstacle_width <= 0 or self.obstacle_speed <= 0:
            raise ConfigError("obstacle width and speed must be positive")
        if not 0 < self.min_distance <= self.max_distance:
            raise ConfigError(
                f"invalid spawn distance range [{self.min_distance}, {self.max_distance}]")
        if not 0 < self.min_height <= self.max_height:
            raise ConfigError(
                f"invalid obstacle height range [{self.min_height}, {self.max_height}]")
        if self.jump_force >= 0:
            raise ConfigError("jump_force must be negative (upwards)")
        if self.spawn_interval <= 0:
            raise ConfigError("spawn_interval must be positive")
        if self.star_count < 0:
            raise ConfigError("star_count cannot be negative")

    @property
    def ground_line(self) -> float:
        """Y of the floor surface; obstacle bases sit here."""
        return self.ground_height + self.player_height
