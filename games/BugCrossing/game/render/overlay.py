"""Full-screen overlays drawn over the board."""

from typing import TYPE_CHECKING

from games.BugCrossing import config

if TYPE_CHECKING:
    from .canvas import Canvas


def render_win_overlay(canvas: 'Canvas') -> None:
    """Cover the canvas with the win screen.

    Blue background, "You Win!" centered on the canvas and the restart
    hint 40px below it. Drawing state is restored afterwards.
    """
    center_x = canvas.width / 2
    center_y = canvas.height / 2

    canvas.save()

    canvas.fill_style = config.WIN_BACKGROUND_COLOR
    canvas.fill_rect(0, 0, canvas.width, canvas.height)

    canvas.fill_style = config.WIN_TEXT_COLOR
    canvas.text_align = 'center'
    canvas.font_size = config.WIN_TITLE_FONT_SIZE
    canvas.fill_text(config.WIN_TITLE, center_x, center_y)

    canvas.font_size = config.WIN_SUBTITLE_FONT_SIZE
    canvas.fill_text(config.WIN_SUBTITLE, center_x, center_y + config.WIN_SUBTITLE_OFFSET_Y)

    canvas.restore()
