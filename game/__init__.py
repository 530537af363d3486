"""Game module containing the simulation core."""

from .constants import *
from .events import FrameTick, KeyPress, PointerClick, TimerFired, TimerKind
from .game_engine import GameEngine
from .model import GamePhase, Model
from .scheduler import CommandScheduler
from .high_scores import HighScoreManager
