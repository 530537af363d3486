"""UI module containing visualization components."""

from .colors import *
from .game_ui import GameUI
