"""Inbound events delivered to the engine and outbound commands it requests.

Events are produced by the host (clock, timers, input) and fed to
`GameEngine.update`. Commands are returned by `update` and must be scheduled
by the host; the engine never performs I/O itself. Every payload is checked
when the dataclass is constructed so a malformed event never reaches the
simulation. Bounds that depend on the play-field layout (field width, number
of target slots) are checked by `GameEngine.launch_nuke` against the
engine's own `GameConfig`.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


class TimerKind:
    """Enumeration of host timer kinds."""
    NEXT_LAUNCH_COUNTDOWN = 'next_launch_countdown'
    LAUNCH_NUKE = 'launch_nuke'
    BONUS_TICK = 'bonus_tick'


def _check_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")


def _check_column(column: int) -> None:
    _check_int("column", column)
    if column < 1:
        raise ValueError(f"target column must be at least 1, got {column}")


# Inbound events

@dataclass(frozen=True)
class FrameTick:
    """Per-frame clock tick. The delta is accepted but unused."""
    delta: float = 0.0


@dataclass(frozen=True)
class TimerFired:
    """A host timer scheduled by a previous command has expired."""
    kind: str
    payload: Optional[Union[int, Tuple[int, int]]] = None

    def __post_init__(self):
        if self.kind == TimerKind.NEXT_LAUNCH_COUNTDOWN:
            _check_int("countdown", self.payload)
            if self.payload < 0:
                raise ValueError(f"countdown must be non-negative, got {self.payload}")
        elif self.kind == TimerKind.LAUNCH_NUKE:
            if not isinstance(self.payload, tuple) or len(self.payload) != 2:
                raise ValueError(f"launch payload must be (from_x, column), got {self.payload!r}")
            from_x, column = self.payload
            _check_int("from_x", from_x)
            if from_x < 0:
                raise ValueError(f"launch x must be non-negative, got {from_x}")
            _check_column(column)
        elif self.kind != TimerKind.BONUS_TICK:
            raise ValueError(f"unknown timer kind {self.kind!r}")


@dataclass(frozen=True)
class PointerClick:
    """Pointer click at play-field coordinates."""
    x: int
    y: int

    def __post_init__(self):
        _check_int("x", self.x)
        _check_int("y", self.y)


@dataclass(frozen=True)
class KeyPress:
    """Key press identified by its key code (13 confirms)."""
    code: int

    def __post_init__(self):
        _check_int("code", self.code)


Event = Union[FrameTick, TimerFired, PointerClick, KeyPress]


# Outbound commands

@dataclass(frozen=True)
class ScheduleRandomDelay:
    """Draw a value in [range_min, range_max] and fire NEXT_LAUNCH_COUNTDOWN with it."""
    range_min: int
    range_max: int

    def __post_init__(self):
        _check_int("range_min", self.range_min)
        _check_int("range_max", self.range_max)
        if self.range_min > self.range_max:
            raise ValueError(f"empty delay range {self.range_min}..{self.range_max}")


@dataclass(frozen=True)
class ScheduleLaunch:
    """Fire LAUNCH_NUKE with the chosen origin and target column."""
    from_x: int
    to_column: int

    def __post_init__(self):
        _check_int("from_x", self.from_x)
        _check_column(self.to_column)


@dataclass(frozen=True)
class ScheduleBonusTick:
    """Fire BONUS_TICK after `delay_ms` milliseconds."""
    delay_ms: int

    def __post_init__(self):
        _check_int("delay_ms", self.delay_ms)


Command = Union[ScheduleRandomDelay, ScheduleLaunch, ScheduleBonusTick]
