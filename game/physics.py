"""Per-frame physics step: explosions, movement, collisions, and launch pacing.

The sub-steps run in a fixed order, each seeing the state left by the one
before it. Explosions created during a frame start at radius 0 and only grow
when the next frame ages them, so a chain reaction advances one explosion
generation per frame.
"""

import logging
from typing import List, Tuple

from .constants import GameConfig
from .explosion import Explosion, inside_any
from .missile import Missile
from .model import Model, UpdateReport

logger = logging.getLogger(__name__)


def age_explosions(model: Model, config: GameConfig):
    """Step 1: grow/shrink every explosion and drop the expired ones."""
    for explosion in model.explosions:
        explosion.update(config.explosion_age_step)
    model.explosions = [e for e in model.explosions if not e.expired]


def move_missiles(model: Model):
    """Step 2: advance player missiles and nukes by their fixed velocity."""
    for missile in model.missiles:
        missile.update()
    for nuke in model.nukes:
        nuke.update()


def destroy_nukes_on_contact(model: Model, config: GameConfig, report: UpdateReport):
    """Step 3: nukes caught by an existing explosion explode themselves."""
    existing = list(model.explosions)
    surviving = []
    for nuke in model.nukes:
        if inside_any(nuke.position, existing):
            model.explosions.append(Explosion(nuke.position, config.explosion_max_radius))
            model.score += config.points_nuke_destroyed
            report.explosions_created += 1
            report.nukes_destroyed += 1
            report.points_awarded += config.points_nuke_destroyed
        else:
            surviving.append(nuke)
    model.nukes = surviving


def _partition(missiles: List[Missile], detonation_distance: float) -> Tuple[List[Missile], List[Missile]]:
    detonate, keep = [], []
    for missile in missiles:
        if missile.should_detonate(detonation_distance):
            detonate.append(missile)
        else:
            keep.append(missile)
    return detonate, keep


def detonate_missiles(model: Model, config: GameConfig, report: UpdateReport):
    """Step 4: missiles that reached their target turn into explosions."""
    detonated_nukes, model.nukes = _partition(model.nukes, config.detonation_distance)
    detonated_missiles, model.missiles = _partition(model.missiles, config.detonation_distance)

    for missile in detonated_nukes + detonated_missiles:
        model.explosions.append(Explosion(missile.position, config.explosion_max_radius))
        report.explosions_created += 1

    # Any enemy missile leaving play counts toward the score
    points = len(detonated_nukes) * config.points_nuke_destroyed
    model.score += points
    report.nukes_destroyed += len(detonated_nukes)
    report.points_awarded += points


def destroy_cities(model: Model, report: UpdateReport):
    """Step 5: remove cities caught inside any explosion."""
    surviving = [city for city in model.cities if not inside_any(city.position, model.explosions)]
    lost = len(model.cities) - len(surviving)
    if lost:
        logger.debug("%d city(ies) destroyed, %d left", lost, len(surviving))
    model.cities = surviving
    report.cities_lost += lost


def destroy_bases(model: Model, report: UpdateReport):
    """Step 6: bases caught inside an explosion lose their whole stock."""
    for base in model.bases:
        if base.has_missiles and inside_any(base.position, model.explosions):
            base.destroy()
            report.bases_lost += 1
            logger.debug("Base %d destroyed", base.id)


def advance_countdown(model: Model) -> bool:
    """
    Step 7: tick the inter-launch countdown.

    Returns:
        True on the frame the countdown reaches zero and more nukes remain
        to be launched this level.
    """
    if model.launch_countdown <= 0:
        return False
    model.launch_countdown -= 1
    return model.launch_countdown == 0 and model.nukes_left_to_launch > 0


def step(model: Model, config: GameConfig, report: UpdateReport) -> bool:
    """
    Run one physics frame.

    Args:
        model: Game state, mutated in place
        config: Engine tunables
        report: Counters for this update, mutated in place

    Returns:
        True when the countdown expired and a new launch should be requested
    """
    age_explosions(model, config)
    move_missiles(model)
    destroy_nukes_on_contact(model, config, report)
    detonate_missiles(model, config, report)
    destroy_cities(model, report)
    destroy_bases(model, report)
    return advance_countdown(model)


def is_game_over(model: Model) -> bool:
    return len(model.cities) == 0 and len(model.explosions) == 0


def is_level_over(model: Model) -> bool:
    # Player missiles still in flight do not hold up the level
    return (len(model.nukes) == 0 and len(model.explosions) == 0
            and model.nukes_left_to_launch == 0)
