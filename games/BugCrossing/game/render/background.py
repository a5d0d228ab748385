"""Board background: water at the top, stone lanes, grass at the bottom."""

from typing import List, TYPE_CHECKING

from games.BugCrossing import config
from models import PlayfieldConfig

if TYPE_CHECKING:
    from .canvas import Canvas


def board_rows(playfield: PlayfieldConfig) -> List[str]:
    """Row kinds from top to bottom.

    One water row (the goal), one stone row per obstacle lane, then the
    grass rows the avatar starts on.
    """
    return ['water'] + ['stone'] * playfield.lane_count + ['grass'] * config.GRASS_ROWS


def render_background(canvas: 'Canvas', playfield: PlayfieldConfig) -> None:
    """Clear the canvas and draw the board rows."""
    canvas.save()

    canvas.fill_style = config.CLEAR_COLOR
    canvas.fill_rect(0, 0, canvas.width, canvas.height)

    for row, kind in enumerate(board_rows(playfield)):
        canvas.fill_style = config.ROW_COLORS[kind]
        canvas.fill_rect(
            0,
            config.BOARD_TOP + row * playfield.row_height,
            canvas.width,
            playfield.row_height,
        )

    canvas.restore()
