"""Drawing surface used by the game.

The game never talks to pygame directly; it draws through a Canvas.
``Canvas`` keeps the drawing state (fill style, font size, text
alignment) with a save/restore stack; subclasses provide the primitives.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import List

import pygame

from crossing.resources import SpriteResources


@dataclass
class DrawState:
    """Current drawing state.

    Defaults match a freshly created 2D canvas context.
    """
    fill_style: str = '#000000'
    font_size: int = 10
    text_align: str = 'start'


class Canvas(ABC):
    """Abstract drawing surface.

    Subclasses must implement:
        - draw_image(sprite, x, y)
        - fill_rect(x, y, width, height)
        - fill_text(text, x, y)

    ``fill_text`` treats ``y`` as the text baseline and honours
    ``text_align`` ('start', 'left', 'center', 'right', 'end').
    """

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height
        self._state = DrawState()
        self._saved: List[DrawState] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def fill_style(self) -> str:
        return self._state.fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self._state.fill_style = value

    @property
    def font_size(self) -> int:
        return self._state.font_size

    @font_size.setter
    def font_size(self, value: int) -> None:
        self._state.font_size = value

    @property
    def text_align(self) -> str:
        return self._state.text_align

    @text_align.setter
    def text_align(self, value: str) -> None:
        self._state.text_align = value

    def save(self) -> None:
        """Push the current drawing state."""
        self._saved.append(replace(self._state))

    def restore(self) -> None:
        """Pop the last saved drawing state (no-op if nothing was saved)."""
        if self._saved:
            self._state = self._saved.pop()

    @abstractmethod
    def draw_image(self, sprite: str, x: float, y: float) -> None:
        """Draw a sprite with its top-left corner at (x, y)."""
        pass

    @abstractmethod
    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Fill a rectangle with the current fill style."""
        pass

    @abstractmethod
    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw text with the current fill style, font size and alignment."""
        pass


class PygameCanvas(Canvas):
    """Canvas drawing onto a pygame surface.

    Sprites are looked up in a SpriteResources cache; colors accept
    anything ``pygame.Color`` understands (names, ``#rrggbb``).
    """

    def __init__(self, surface: pygame.Surface, resources: SpriteResources):
        """
        Args:
            surface: Target surface (usually the display surface)
            resources: Loaded sprite cache
        """
        super().__init__(surface.get_width(), surface.get_height())
        self._surface = surface
        self._resources = resources
        self._fonts = {}

        if not pygame.font.get_init():
            pygame.font.init()

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def draw_image(self, sprite: str, x: float, y: float) -> None:
        self._surface.blit(self._resources.get(sprite), (round(x), round(y)))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        self._surface.fill(pygame.Color(self.fill_style), rect)

    def fill_text(self, text: str, x: float, y: float) -> None:
        font = self._font(self.font_size)
        rendered = font.render(text, True, pygame.Color(self.fill_style))

        if self.text_align == 'center':
            left = x - rendered.get_width() / 2
        elif self.text_align in ('right', 'end'):
            left = x - rendered.get_width()
        else:
            left = x

        top = y - font.get_ascent()
        self._surface.blit(rendered, (round(left), round(top)))
