"""Bonus sequencing between levels."""

from typing import Optional

from .constants import GameConfig
from .model import Model


def award_bonus_tick(model: Model, config: GameConfig) -> int:
    """
    Convert one unit of leftover resources into score.

    Missiles are converted first, one per tick from the lowest-id base that
    still holds any. Once every base is empty, one surviving city is moved
    to the scored list per tick.

    Returns:
        Points awarded this tick (0 when nothing was left)
    """
    base = model.base_with_missiles()
    if base is not None:
        base.take_missile()
        model.missiles_scored += 1
        model.score += config.points_missile_bonus
        return config.points_missile_bonus

    if model.cities:
        model.scored_cities.append(model.cities.pop(0))
        model.score += config.points_city_bonus
        return config.points_city_bonus

    return 0


def next_bonus_delay(model: Model, config: GameConfig) -> Optional[int]:
    """
    Delay before the next bonus tick, or None when bonus sequencing is done.

    Missile awards tick quickly; city awards tick slowly.
    """
    if model.missiles_in_bases > 0:
        return config.bonus_tick_ms
    if model.cities:
        return config.bonus_tick_slow_ms
    return None
