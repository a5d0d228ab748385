"""Fixtures for Bug Crossing tests."""
import random

import pytest

from games.BugCrossing.game.controller import GameLoopController
from games.BugCrossing.game.entities import Avatar, Obstacle
from games.BugCrossing.game.render.canvas import Canvas
from models import LevelConfig


class RecordingCanvas(Canvas):
    """Canvas that records every draw call instead of drawing.

    Fill and text calls capture the drawing state in effect at the time.
    """

    def __init__(self, width: int = 505, height: int = 606):
        super().__init__(width, height)
        self.calls = []

    def save(self) -> None:
        self.calls.append(('save',))
        super().save()

    def restore(self) -> None:
        self.calls.append(('restore',))
        super().restore()

    def draw_image(self, sprite, x, y):
        self.calls.append(('draw_image', sprite, x, y))

    def fill_rect(self, x, y, width, height):
        self.calls.append(('fill_rect', x, y, width, height, self.fill_style))

    def fill_text(self, text, x, y):
        self.calls.append(('fill_text', text, x, y, self.fill_style, self.font_size, self.text_align))

    def images(self):
        """Only the draw_image calls."""
        return [call for call in self.calls if call[0] == 'draw_image']


@pytest.fixture
def canvas():
    """A fresh recording canvas the size of the classic board."""
    return RecordingCanvas()


@pytest.fixture
def rng():
    """Seeded random source for reproducible spawns."""
    return random.Random(1234)


@pytest.fixture
def level():
    """The classic level."""
    return LevelConfig()


@pytest.fixture
def obstacle(level, rng):
    return Obstacle(level.obstacles, level.playfield, rng)


@pytest.fixture
def avatar(level):
    return Avatar(level.avatar, level.playfield)


@pytest.fixture
def controller(level, rng):
    return GameLoopController(level, rng=rng)


def park_obstacles(controller, x=-101.0):
    """Stop every obstacle off the board so it can't collide."""
    for obstacle in controller.obstacles:
        obstacle.x = x
        obstacle.speed = 0


@pytest.fixture
def park():
    """Function that stops every obstacle of a controller off the board."""
    return park_obstacles


@pytest.fixture
def canvas_factory():
    """The RecordingCanvas class, for canvases of other sizes."""
    return RecordingCanvas
