"""Bug Crossing drawing: canvas abstraction, background and overlays."""

from .canvas import Canvas, DrawState, PygameCanvas
from .overlay import render_win_overlay
from .background import render_background, board_rows

__all__ = [
    'Canvas', 'DrawState', 'PygameCanvas',
    'render_win_overlay',
    'render_background', 'board_rows',
]
