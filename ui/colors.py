"""Color definitions for the game UI."""

# Basic colors
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)

# Game-specific colors
BACKGROUND = (10, 10, 30)
GROUND = (120, 90, 40)
NUKE_TRAIL = (255, 50, 50)
NUKE_HEAD = (255, 200, 200)
MISSILE_TRAIL = (50, 255, 50)
MISSILE_HEAD = (200, 255, 200)
CITY_COLOR = (80, 160, 255)
BASE_COLOR = (200, 200, 80)
BASE_EMPTY = (90, 90, 60)
CAPTION_LOW = (255, 200, 0)
CAPTION_OUT = (255, 80, 80)
HUD_TEXT = (200, 200, 200)
SCORE_COLOR = (100, 255, 100)
OVERLAY = (0, 0, 0, 180)
EXPLOSION_COLORS = [(255, 255, 0), (255, 200, 0), (255, 150, 0), (255, 100, 0), (255, 50, 0)]
