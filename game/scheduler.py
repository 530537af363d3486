"""Host-side scheduling of engine commands."""

import heapq
import itertools
import logging
from typing import List, Optional, Tuple

import numpy as np

from .events import (
    Command, ScheduleBonusTick, ScheduleLaunch, ScheduleRandomDelay, TimerFired, TimerKind
)

logger = logging.getLogger(__name__)


class CommandScheduler:
    """Turns engine commands into the timer events they ask for.

    Random delays and launches resolve immediately: the drawn countdown or
    the launch is delivered on the next `poll`. Bonus ticks wait until the
    host clock reaches their due time.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Args:
            rng: Random source for launch delays (share the engine's)
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self._pending: List[Tuple[int, int, TimerFired]] = []
        self._sequence = itertools.count()

    def submit(self, commands: List[Command], now_ms: int):
        """Queue the events requested by `commands`."""
        for command in commands:
            if isinstance(command, ScheduleRandomDelay):
                value = int(self.rng.integers(command.range_min, command.range_max + 1))
                self._push(now_ms, TimerFired(TimerKind.NEXT_LAUNCH_COUNTDOWN, value))
            elif isinstance(command, ScheduleLaunch):
                self._push(now_ms, TimerFired(TimerKind.LAUNCH_NUKE,
                                              (command.from_x, command.to_column)))
            elif isinstance(command, ScheduleBonusTick):
                self._push(now_ms + command.delay_ms, TimerFired(TimerKind.BONUS_TICK))
            else:
                raise TypeError(f"unsupported command {command!r}")

    def poll(self, now_ms: int) -> List[TimerFired]:
        """Remove and return every event due at or before `now_ms`, oldest first."""
        due = []
        while self._pending and self._pending[0][0] <= now_ms:
            _, _, event = heapq.heappop(self._pending)
            due.append(event)
        return due

    def clear(self):
        """Drop all pending events (used when a game is abandoned)."""
        self._pending.clear()

    def __len__(self):
        return len(self._pending)

    def _push(self, due_ms: int, event: TimerFired):
        logger.debug("Scheduled %s at %d ms", event.kind, due_ms)
        heapq.heappush(self._pending, (due_ms, next(self._sequence), event))
