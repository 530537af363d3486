#!/usr/bin/env python3
"""
Missile Defense - a Missile Command style arcade game.

Enemy missiles fall toward your cities. Click to fire a defensive missile
from the nearest base; its explosion destroys any enemy missile that flies
into it. Survive the level to score the missiles and cities you saved.
"""

import logging
import sys

import numpy as np
import pygame

from game.constants import (
    FPS, GAME_TITLE, KEY_CONFIRM, POINTS_CITY_BONUS, WINDOW_HEIGHT, WINDOW_WIDTH
)
from game.events import FrameTick, KeyPress, PointerClick, TimerFired
from game.game_engine import GameEngine
from game.high_scores import HighScoreManager
from game.model import GamePhase
from game.scheduler import CommandScheduler
from game.sound_manager import SoundManager
from ui.game_ui import GameUI

logger = logging.getLogger(__name__)


class MissileDefense:
    """Main game application class: feeds pygame input to the engine and draws it."""

    def __init__(self, seed=None):
        """
        Initialize the game application.

        Args:
            seed: Optional seed for the shared random source
        """
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        self.clock = pygame.time.Clock()

        # Engine and scheduler draw from the same generator so a seed replays a game
        self.rng = np.random.default_rng(seed)
        self.engine = GameEngine(rng=self.rng)
        self.scheduler = CommandScheduler(self.rng)

        self.high_score_manager = HighScoreManager()
        self.sound_manager = SoundManager()
        self.game_ui = GameUI(self.screen)

        # Per-game tallies for the high score table
        self.nukes_destroyed = 0
        self.score_recorded = False

        self.running = True

    def run(self):
        """Main game loop."""
        while self.running:
            self.clock.tick(FPS)

            self._handle_events()
            self._dispatch(FrameTick())
            self._pump_timers()
            self._check_game_over()

            self.game_ui.draw(self.engine.snapshot(),
                              self.high_score_manager.get_high_scores(),
                              self.high_score_manager.get_top_score())
            pygame.display.flip()

        self._cleanup()

    def _dispatch(self, event):
        """Send one event to the engine and schedule whatever it asks for."""
        commands = self.engine.update(event)
        report = self.engine.last_report
        self.nukes_destroyed += report.nukes_destroyed
        self.sound_manager.play_report(report)
        if report.points_awarded and isinstance(event, TimerFired):
            self.sound_manager.play('bonus_city' if report.points_awarded >= POINTS_CITY_BONUS else 'bonus_missile')
        self.scheduler.submit(commands, pygame.time.get_ticks())

    def _pump_timers(self):
        """Deliver due timer events, including ones they schedule immediately."""
        due = self.scheduler.poll(pygame.time.get_ticks())
        while due:
            for event in due:
                self._dispatch(event)
            due = self.scheduler.poll(pygame.time.get_ticks())

    def _handle_events(self):
        """Handle pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                x, y = event.pos
                self._dispatch(PointerClick(int(x), int(y)))

    def _handle_keydown(self, event):
        """Handle key press events."""
        if event.key == pygame.K_ESCAPE:
            self.running = False

        elif event.key == pygame.K_m:
            enabled = self.sound_manager.toggle_sound()
            logger.info("Sound %s", 'enabled' if enabled else 'disabled')

        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self.engine.phase == GamePhase.GAME_OVER:
                self._new_game()
            else:
                self._dispatch(KeyPress(KEY_CONFIRM))

    def _check_game_over(self):
        """Record the final score once per finished game."""
        if self.engine.phase != GamePhase.GAME_OVER or self.score_recorded:
            return
        self.score_recorded = True
        self.sound_manager.play('game_over')
        model = self.engine.model
        if not self.high_score_manager.is_high_score(model.score):
            return
        rank = self.high_score_manager.add_score(model.score, model.level, self.nukes_destroyed)
        if rank:
            logger.info("New high score #%d: %d", rank, model.score)

    def _new_game(self):
        """Return to the title screen after a game over."""
        self.scheduler.clear()
        self.engine.reset()
        self.nukes_destroyed = 0
        self.score_recorded = False

    def _cleanup(self):
        """Clean up resources."""
        pygame.quit()


def main():
    """Entry point for the game."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    print("=" * 50)
    print("  MISSILE DEFENSE")
    print("=" * 50)
    print()
    print("Controls:")
    print("  - Left click: Fire from the nearest base")
    print("  - Enter: Start / next level / back to title")
    print("  - M: Toggle sound on/off")
    print("  - Escape: Quit")
    print()

    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    pygame.init()
    game = MissileDefense(seed)
    game.run()


if __name__ == "__main__":
    main()
