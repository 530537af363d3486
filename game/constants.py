"""Game constants and configuration settings."""

from dataclasses import dataclass
from typing import Tuple

# Window settings
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 400
FPS = 60
GAME_TITLE = "Missile Defense"

# Play field
FIELD_WIDTH = 800
GROUND_Y = 330
NUKE_LAUNCH_Y = 0

# Default layout (left to right)
BASE_POSITIONS = ((40.0, 330.0), (400.0, 330.0), (760.0, 330.0))
CITY_POSITIONS = (
    (130.0, 335.0), (220.0, 335.0), (310.0, 335.0),
    (490.0, 335.0), (580.0, 335.0), (670.0, 335.0),
)

# Nine target slots for enemy missiles, one per base and city
TARGET_SLOTS = (40.0, 130.0, 220.0, 310.0, 400.0, 490.0, 580.0, 670.0, 760.0)

# Missile settings
MISSILES_PER_BASE = 10
PLAYER_MISSILE_SPEED = 8.0
NUKE_BASE_SPEED = 0.4
NUKE_SPEED_PER_LEVEL = 0.05
DETONATION_DISTANCE = 4.0

# Nukes launched per level: NUKES_BASE_COUNT + level
NUKES_BASE_COUNT = 9

# Launch pacing (ticks)
LAUNCH_DELAY_MIN = 10
LAUNCH_DELAY_MAX = 100

# Explosion settings
EXPLOSION_AGE_STEP = 0.01  # 100-frame lifetime
EXPLOSION_MAX_RADIUS = 30.0

# Scoring
POINTS_NUKE_DESTROYED = 25
POINTS_MISSILE_BONUS = 5
POINTS_CITY_BONUS = 100

# Bonus sequencing timer (ms)
BONUS_TICK_MS = 100
BONUS_TICK_SLOW_MS = 500

# Input
KEY_CONFIRM = 13

# Base captions
LOW_MISSILE_THRESHOLD = 3


@dataclass(frozen=True)
class GameConfig:
    """Immutable tunables handed to the engine at construction."""
    field_width: int = FIELD_WIDTH
    ground_y: float = GROUND_Y
    nuke_launch_y: float = NUKE_LAUNCH_Y
    base_positions: Tuple[Tuple[float, float], ...] = BASE_POSITIONS
    city_positions: Tuple[Tuple[float, float], ...] = CITY_POSITIONS
    target_slots: Tuple[float, ...] = TARGET_SLOTS
    missiles_per_base: int = MISSILES_PER_BASE
    player_missile_speed: float = PLAYER_MISSILE_SPEED
    nuke_base_speed: float = NUKE_BASE_SPEED
    nuke_speed_per_level: float = NUKE_SPEED_PER_LEVEL
    detonation_distance: float = DETONATION_DISTANCE
    nukes_base_count: int = NUKES_BASE_COUNT
    launch_delay_min: int = LAUNCH_DELAY_MIN
    launch_delay_max: int = LAUNCH_DELAY_MAX
    explosion_age_step: float = EXPLOSION_AGE_STEP
    explosion_max_radius: float = EXPLOSION_MAX_RADIUS
    points_nuke_destroyed: int = POINTS_NUKE_DESTROYED
    points_missile_bonus: int = POINTS_MISSILE_BONUS
    points_city_bonus: int = POINTS_CITY_BONUS
    bonus_tick_ms: int = BONUS_TICK_MS
    bonus_tick_slow_ms: int = BONUS_TICK_SLOW_MS

    def nuke_speed(self, level: int) -> float:
        """Enemy missile speed for the given level (level 1 is the slowest)."""
        return self.nuke_base_speed + self.nuke_speed_per_level * (level - 1)

    def nukes_for_level(self, level: int) -> int:
        """Number of enemy missiles launched during a level."""
        return self.nukes_base_count + level


DEFAULT_CONFIG = GameConfig()
