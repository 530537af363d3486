"""Main game engine managing game phase and simulation updates."""

import logging
from typing import List, Optional

import numpy as np

from . import physics
from .constants import DEFAULT_CONFIG, KEY_CONFIRM, GameConfig
from .events import (
    Command, Event, FrameTick, KeyPress, PointerClick, ScheduleBonusTick,
    ScheduleLaunch, ScheduleRandomDelay, TimerFired, TimerKind
)
from .geometry import Position, distance
from .missile import launch_nuke, launch_player_missile
from .model import (
    GamePhase, Model, UpdateReport, column_to_x, default_bases, default_cities
)
from .scoring import award_bonus_tick, next_bonus_delay
from .structures import City

logger = logging.getLogger(__name__)


class GameEngine:
    """Core game engine: one model, one update entry point."""

    def __init__(self, config: GameConfig = DEFAULT_CONFIG,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the game engine.

        Args:
            config: Immutable game tunables and layout
            rng: Random source for enemy launch selection. Share it with the
                host scheduler and seed it for deterministic replays.
        """
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.model = Model()
        self.last_report = UpdateReport()

    def reset(self):
        """Discard the current game and return to the start screen."""
        self.model = Model()
        self.last_report = UpdateReport()

    @property
    def phase(self) -> str:
        return self.model.phase

    def snapshot(self) -> Model:
        """Detached copy of the current state for rendering."""
        return self.model.snapshot()

    def update(self, event: Event) -> List[Command]:
        """
        Apply one event to the model.

        Args:
            event: FrameTick, TimerFired, PointerClick or KeyPress

        Returns:
            Follow-up commands for the host to schedule
        """
        self.last_report = UpdateReport()
        phase_before = self.model.phase

        if isinstance(event, FrameTick):
            commands = self._on_frame()
        elif isinstance(event, TimerFired):
            commands = self._on_timer(event)
        elif isinstance(event, PointerClick):
            commands = self._on_click(event)
        elif isinstance(event, KeyPress):
            commands = self._on_key(event)
        else:
            raise TypeError(f"unsupported event {event!r}")

        if self.model.phase != phase_before:
            self.last_report.phase_changed = True
            logger.info("Phase %s -> %s (level %d, score %d)",
                        phase_before, self.model.phase, self.model.level, self.model.score)
        return commands

    # Event handlers

    def _on_frame(self) -> List[Command]:
        if self.model.phase != GamePhase.PLAYING:
            return []

        # End conditions use the state left by the previous frame
        if physics.is_game_over(self.model):
            self.model.phase = GamePhase.GAME_OVER
            logger.info("Game over at level %d with score %d", self.model.level, self.model.score)
            return []
        if physics.is_level_over(self.model):
            return self._enter_bonus_points()

        if physics.step(self.model, self.config, self.last_report):
            return [self._choose_launch(), self._launch_delay()]
        return []

    def _on_timer(self, event: TimerFired) -> List[Command]:
        phase = self.model.phase

        if event.kind == TimerKind.NEXT_LAUNCH_COUNTDOWN and phase == GamePhase.PLAYING:
            # A zero countdown would never expire, so it fires on the next frame
            self.model.launch_countdown = max(1, event.payload)
            return []

        if event.kind == TimerKind.LAUNCH_NUKE and phase == GamePhase.PLAYING:
            from_x, column = event.payload
            self.launch_nuke(from_x, column)
            return []

        if event.kind == TimerKind.BONUS_TICK and phase == GamePhase.BONUS_POINTS:
            return self._on_bonus_tick()

        logger.debug("Ignoring %s timer in phase %s", event.kind, phase)
        return []

    def _on_click(self, event: PointerClick) -> List[Command]:
        if self.model.phase != GamePhase.PLAYING:
            return []
        self.launch_player_missile(Position(float(event.x), float(event.y)))
        return []

    def _on_key(self, event: KeyPress) -> List[Command]:
        if event.code != KEY_CONFIRM:
            return []
        if self.model.phase == GamePhase.START_SCREEN:
            return self.start_level(default_cities(self.config))
        if self.model.phase == GamePhase.LEVEL_END:
            return self.start_level(self.model.scored_cities)
        return []

    def _enter_bonus_points(self) -> List[Command]:
        # Player missiles still in flight are abandoned with the level
        self.model.missiles = []
        self.model.phase = GamePhase.BONUS_POINTS
        delay = next_bonus_delay(self.model, self.config)
        return [ScheduleBonusTick(delay if delay is not None else self.config.bonus_tick_ms)]

    def _on_bonus_tick(self) -> List[Command]:
        self.last_report.points_awarded += award_bonus_tick(self.model, self.config)

        delay = next_bonus_delay(self.model, self.config)
        if delay is None:
            self.model.phase = GamePhase.LEVEL_END
            logger.info("Level %d complete: %d missiles, %d cities scored",
                        self.model.level, self.model.missiles_scored, self.model.cities_scored)
            return []
        return [ScheduleBonusTick(delay)]

    # Level lifecycle

    def start_level(self, cities: List[City]) -> List[Command]:
        """
        Enter the next level, keeping the given cities.

        Missiles, nukes and explosions are cleared and every base is
        restocked. The launch countdown is armed at one frame, so the first
        frame of the level requests the first launch along with the delay
        before the next one. An empty city list is allowed; the first frame
        of such a level ends the game.

        Returns:
            Follow-up commands (none; the first frame issues them)
        """
        model = self.model
        model.level += 1
        model.missiles = []
        model.nukes = []
        model.explosions = []
        model.bases = default_bases(self.config)
        model.cities = list(cities)
        model.scored_cities = []
        model.missiles_scored = 0
        model.launch_countdown = 1
        model.nukes_left_to_launch = self.config.nukes_for_level(model.level)
        model.phase = GamePhase.PLAYING

        logger.info("Level %d started: %d cities, %d nukes incoming",
                    model.level, len(model.cities), model.nukes_left_to_launch)
        return []

    # Launches

    def launch_player_missile(self, target: Position) -> bool:
        """
        Fire from the nearest base that still has missiles.

        Returns:
            False when every base is empty (the click is ignored)
        """
        stocked = [base for base in self.model.bases if base.has_missiles]
        if not stocked:
            logger.debug("Click at (%.0f, %.0f) ignored: no missiles left", target.x, target.y)
            return False

        base = min(stocked, key=lambda b: distance(b.position, target))
        base.take_missile()
        self.model.missiles.append(
            launch_player_missile(base.position, target, self.config.player_missile_speed)
        )
        self.last_report.missiles_launched += 1
        return True

    def launch_nuke(self, from_x: int, column: int) -> bool:
        """
        Launch one enemy missile from the top edge toward a target column.

        Returns:
            False when this level's nukes are all launched (no-op)

        Raises:
            ValueError: if the origin or column falls outside this engine's layout
        """
        if not 0 <= from_x <= self.config.field_width:
            raise ValueError(f"launch x {from_x} outside 0..{self.config.field_width}")
        if not 1 <= column <= len(self.config.target_slots):
            raise ValueError(f"target column {column} outside 1..{len(self.config.target_slots)}")

        model = self.model
        if model.nukes_left_to_launch <= 0:
            logger.debug("Launch from x=%d ignored: no nukes left this level", from_x)
            return False

        target_x = column_to_x(column, self.config)
        model.nukes.append(launch_nuke(
            from_x, self.config.nuke_launch_y, target_x, self.config.ground_y,
            self.config.nuke_speed(model.level)
        ))
        model.nukes_left_to_launch -= 1
        self.last_report.nukes_launched += 1
        return True

    def _choose_launch(self) -> ScheduleLaunch:
        from_x = int(self.rng.integers(0, self.config.field_width + 1))
        column = int(self.rng.integers(1, len(self.config.target_slots) + 1))
        return ScheduleLaunch(from_x, column)

    def _launch_delay(self) -> ScheduleRandomDelay:
        return ScheduleRandomDelay(self.config.launch_delay_min, self.config.launch_delay_max)
