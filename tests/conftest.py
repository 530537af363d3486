import numpy as np
import pytest

from game.constants import DEFAULT_CONFIG, KEY_CONFIRM
from game.events import KeyPress
from game.game_engine import GameEngine


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def engine(rng):
    return GameEngine(DEFAULT_CONFIG, rng)


@pytest.fixture
def playing_engine(engine):
    """Engine on the first frame of level 1."""
    engine.update(KeyPress(KEY_CONFIRM))
    return engine
