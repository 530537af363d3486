"""Game UI: draws an engine snapshot onto a pygame surface."""

import pygame
from typing import List, Optional

from game.constants import (
    GROUND_Y, POINTS_CITY_BONUS, POINTS_MISSILE_BONUS, WINDOW_HEIGHT, WINDOW_WIDTH
)
from game.high_scores import HighScoreEntry
from game.model import GamePhase, Model
from .colors import (
    BACKGROUND, BASE_COLOR, BASE_EMPTY, CAPTION_LOW, CAPTION_OUT, CITY_COLOR,
    EXPLOSION_COLORS, GROUND, HUD_TEXT, MISSILE_HEAD, MISSILE_TRAIL, NUKE_HEAD,
    NUKE_TRAIL, OVERLAY, SCORE_COLOR, WHITE, YELLOW
)


class GameUI:
    """Projects the simulation state; holds no game state of its own."""

    def __init__(self, surface: pygame.Surface):
        """
        Initialize the game UI.

        Args:
            surface: Main pygame surface to draw on
        """
        self.surface = surface
        self.fonts = {
            'small': pygame.font.Font(None, 20),
            'medium': pygame.font.Font(None, 32),
            'large': pygame.font.Font(None, 48),
            'title': pygame.font.Font(None, 72),
        }
        self.frame = 0

    def draw(self, model: Model, high_scores: List[HighScoreEntry] = None,
             top_score: Optional[int] = None):
        """Draw the whole frame for the model's current phase."""
        self.frame += 1
        self.surface.fill(BACKGROUND)

        if model.phase == GamePhase.START_SCREEN:
            self.draw_start_screen(high_scores or [])
            return

        self.draw_field(model)
        self.draw_hud(model, top_score)

        if model.phase == GamePhase.BONUS_POINTS:
            self.draw_bonus_tally(model)
        elif model.phase == GamePhase.LEVEL_END:
            self.draw_level_summary(model)
        elif model.phase == GamePhase.GAME_OVER:
            self.draw_game_over(model)

    def draw_field(self, model: Model):
        pygame.draw.rect(self.surface, GROUND, (0, GROUND_Y, WINDOW_WIDTH, WINDOW_HEIGHT - GROUND_Y))

        for city in model.cities:
            x, y = int(city.position.x), int(city.position.y)
            pygame.draw.rect(self.surface, CITY_COLOR, (x - 15, y - 12, 30, 12))
            pygame.draw.rect(self.surface, CITY_COLOR, (x - 6, y - 20, 12, 8))

        for base in model.bases:
            x, y = int(base.position.x), int(base.position.y)
            color = BASE_COLOR if base.has_missiles else BASE_EMPTY
            pygame.draw.polygon(self.surface, color, [(x - 20, y + 10), (x, y - 12), (x + 20, y + 10)])
            count = self.fonts['small'].render(str(base.missiles_remaining), True, WHITE)
            self.surface.blit(count, count.get_rect(center=(x, y + 20)))

            caption = base.caption
            if caption:
                caption_color = CAPTION_OUT if caption == "OUT" else CAPTION_LOW
                text = self.fonts['small'].render(caption, True, caption_color)
                self.surface.blit(text, text.get_rect(center=(x, y + 36)))

        for missile in model.missiles:
            self._draw_missile(missile, MISSILE_TRAIL, MISSILE_HEAD)
            # Crosshair on the target point
            tx, ty = int(missile.target_point.x), int(missile.target_point.y)
            pygame.draw.line(self.surface, WHITE, (tx - 4, ty - 4), (tx + 4, ty + 4))
            pygame.draw.line(self.surface, WHITE, (tx - 4, ty + 4), (tx + 4, ty - 4))

        for nuke in model.nukes:
            self._draw_missile(nuke, NUKE_TRAIL, NUKE_HEAD)

        for explosion in model.explosions:
            radius = int(explosion.radius)
            if radius <= 0:
                continue
            color = EXPLOSION_COLORS[(self.frame // 3) % len(EXPLOSION_COLORS)]
            center = (int(explosion.position.x), int(explosion.position.y))
            pygame.draw.circle(self.surface, color, center, radius)

    def _draw_missile(self, missile, trail_color, head_color):
        start = (int(missile.launch_point.x), int(missile.launch_point.y))
        head = (int(missile.position.x), int(missile.position.y))
        pygame.draw.line(self.surface, trail_color, start, head, 2)
        pygame.draw.circle(self.surface, head_color, head, 2)

    def draw_hud(self, model: Model, top_score: Optional[int] = None):
        score = self.fonts['medium'].render(f"SCORE {model.score}", True, SCORE_COLOR)
        self.surface.blit(score, (10, 8))

        # Best of the saved table and the game in progress
        best = max(model.score, top_score or 0)
        high = self.fonts['small'].render(f"HI {best}", True, HUD_TEXT)
        self.surface.blit(high, (10, 34))

        level = self.fonts['medium'].render(f"LEVEL {model.level}", True, HUD_TEXT)
        self.surface.blit(level, level.get_rect(midtop=(WINDOW_WIDTH // 2, 8)))

        incoming = model.nukes_left_to_launch + len(model.nukes)
        nukes = self.fonts['medium'].render(f"INCOMING {incoming}", True, HUD_TEXT)
        self.surface.blit(nukes, nukes.get_rect(topright=(WINDOW_WIDTH - 10, 8)))

    def draw_start_screen(self, high_scores: List[HighScoreEntry]):
        self._centered("MISSILE DEFENSE", 'title', YELLOW, 90)
        self._centered("Click to fire from the nearest base", 'medium', HUD_TEXT, 170)
        self._centered("Press ENTER to start", 'medium', WHITE, 210)

        for i, entry in enumerate(high_scores[:5]):
            line = f"{i + 1}. {entry.score:>6}  level {entry.level_reached}  {entry.date}"
            self._centered(line, 'small', HUD_TEXT, 260 + i * 20)

    def draw_bonus_tally(self, model: Model):
        self._centered("BONUS POINTS", 'large', YELLOW, 110)
        self._tally_lines(model, 160)

    def draw_level_summary(self, model: Model):
        self._centered(f"LEVEL {model.level} COMPLETE", 'large', YELLOW, 110)
        self._tally_lines(model, 160)
        self._centered("Press ENTER for the next level", 'medium', WHITE, 250)

    def _tally_lines(self, model: Model, top: int):
        missiles = model.missiles_scored
        cities = model.cities_scored
        self._centered(f"MISSILES  {missiles} x {POINTS_MISSILE_BONUS} = {missiles * POINTS_MISSILE_BONUS}",
                       'medium', HUD_TEXT, top)
        self._centered(f"CITIES  {cities} x {POINTS_CITY_BONUS} = {cities * POINTS_CITY_BONUS}",
                       'medium', HUD_TEXT, top + 35)

    def draw_game_over(self, model: Model):
        overlay = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        self.surface.blit(overlay, (0, 0))
        self._centered("THE END", 'title', (255, 80, 80), 120)
        self._centered(f"Final score {model.score}", 'medium', WHITE, 190)
        self._centered("Press ENTER to return to the title", 'medium', HUD_TEXT, 230)

    def _centered(self, text: str, font: str, color, y: int):
        rendered = self.fonts[font].render(text, True, color)
        self.surface.blit(rendered, rendered.get_rect(midtop=(WINDOW_WIDTH // 2, y)))
