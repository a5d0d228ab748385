"""
Bug Crossing - Configuration.

Runtime settings are read from the environment, with a .env file in the
game directory loaded first. Board geometry lives in the level YAML files
(see models.bugcrossing.LevelConfig); this module only holds display,
asset and rendering constants.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from crossing.resources import SpriteSpec

GAME_DIR = Path(__file__).parent

# Load .env from game directory
_env_path = GAME_DIR / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_str(key: str, default: str) -> str:
    """Get string from environment."""
    return os.getenv(key, default)


# Display
FPS = _get_int('BUG_CROSSING_FPS', 60)
WINDOW_CAPTION = _get_str('BUG_CROSSING_CAPTION', 'Bug Crossing')

# Assets and levels
ASSET_DIR = Path(_get_str('BUG_CROSSING_ASSETS', str(GAME_DIR / 'images')))
LEVELS_DIR = Path(_get_str('BUG_CROSSING_LEVELS', str(GAME_DIR / 'levels')))
DEFAULT_LEVEL = _get_str('BUG_CROSSING_LEVEL', 'classic')

# Win screen
WIN_BACKGROUND_COLOR = '#5068d3'
WIN_TEXT_COLOR = 'white'
WIN_TITLE = 'You Win!'
WIN_TITLE_FONT_SIZE = 40
WIN_SUBTITLE = 'Press ENTER to play again'
WIN_SUBTITLE_FONT_SIZE = 20
WIN_SUBTITLE_OFFSET_Y = 40

# Background
CLEAR_COLOR = 'white'
BOARD_TOP = 50  # First row starts this far below the canvas top
GRASS_ROWS = 2  # Safe rows below the lanes
ROW_COLORS = {
    'water': '#3d7fd6',
    'stone': '#8f8f8f',
    'grass': '#4caf50',
}

# Sprites (images are 101x171 with transparent padding above the body)
SPRITES = {
    'enemy-bug': SpriteSpec(
        filename='enemy-bug.png',
        size=(101, 171),
        hitbox=(0, 70, 101, 73),
        color=(200, 40, 40),
    ),
    'char-boy': SpriteSpec(
        filename='char-boy.png',
        size=(101, 171),
        hitbox=(15, 70, 71, 73),
        color=(240, 200, 60),
    ),
}
