"""Game state aggregate owned by the engine."""

import copy
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import GameConfig
from .explosion import Explosion
from .geometry import Position
from .missile import Missile
from .structures import Base, City


class GamePhase:
    """Enumeration of game phases."""
    START_SCREEN = 'start_screen'
    PLAYING = 'playing'
    BONUS_POINTS = 'bonus_points'
    LEVEL_END = 'level_end'
    GAME_OVER = 'game_over'


@dataclass
class Model:
    """Everything the simulation knows about the current game."""
    missiles: List[Missile] = field(default_factory=list)
    nukes: List[Missile] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)
    bases: List[Base] = field(default_factory=list)
    cities: List[City] = field(default_factory=list)
    scored_cities: List[City] = field(default_factory=list)
    nukes_left_to_launch: int = 0
    launch_countdown: int = 0
    level: int = 0
    phase: str = GamePhase.START_SCREEN
    score: int = 0
    missiles_scored: int = 0

    def snapshot(self) -> 'Model':
        """Detached copy handed to renderers; mutating it never affects the game."""
        return copy.deepcopy(self)

    def base_with_missiles(self) -> Optional[Base]:
        """The lowest-id base that still holds missiles."""
        stocked = [base for base in self.bases if base.has_missiles]
        if not stocked:
            return None
        return min(stocked, key=lambda base: base.id)

    @property
    def missiles_in_bases(self) -> int:
        return sum(base.missiles_remaining for base in self.bases)

    @property
    def cities_scored(self) -> int:
        return len(self.scored_cities)


@dataclass
class UpdateReport:
    """What happened during one `update` call, for sound and UI feedback."""
    explosions_created: int = 0
    nukes_destroyed: int = 0
    cities_lost: int = 0
    bases_lost: int = 0
    missiles_launched: int = 0
    nukes_launched: int = 0
    points_awarded: int = 0
    phase_changed: bool = False


def default_bases(config: GameConfig) -> List[Base]:
    """Fresh bases at the configured layout with a full stock."""
    return [
        Base(id=index, position=Position(x, y), missiles_remaining=config.missiles_per_base)
        for index, (x, y) in enumerate(config.base_positions)
    ]


def default_cities(config: GameConfig) -> List[City]:
    """The full city roster used on the first level."""
    return [City(Position(x, y)) for x, y in config.city_positions]


def column_to_x(column: int, config: GameConfig) -> float:
    """
    Map a 1-based target column to a horizontal position.

    Columns inside the configured slot table use the table. Columns past the
    table fall back to evenly spacing slots across the field
    (`column * field_width / (slots + 1)`), the same formula the slot table
    approximates.
    """
    slots = config.target_slots
    if 1 <= column <= len(slots):
        return slots[column - 1]
    return column * config.field_width / (len(slots) + 1)
