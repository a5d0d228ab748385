"""Base contract shared by every entity on the board.

An entity has a fixed hitbox size and a sprite name. Concrete entities
decide where they spawn and where their sprite is drawn relative to the
hitbox; the default render simply draws the sprite there.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from models import Rectangle

if TYPE_CHECKING:
    from ..render.canvas import Canvas


def render_sprite(entity: 'Entity', canvas: 'Canvas') -> None:
    """Draw an entity's sprite at its render position.

    This is the default ``Entity.render``. It is a plain function so that
    entities overriding ``render`` can still reach it directly.
    """
    canvas.draw_image(
        entity.sprite,
        entity.render_position_x(),
        entity.render_position_y(),
    )


class Entity(ABC):
    """Abstract base class for board entities.

    Subclasses must implement:
        - reset_state(): Put the entity in its spawn state
        - render_position_x(): Sprite x for drawing
        - render_position_y(): Sprite y for drawing

    ``reset_state`` runs at the end of ``__init__``, so subclasses must set
    up whatever it needs before calling ``super().__init__``.

    Attributes:
        x: Hitbox left edge
        y: Hitbox top edge
    """

    def __init__(self, width: float, height: float, sprite: str):
        """Initialize entity and put it in its spawn state.

        Args:
            width: Hitbox width in pixels
            height: Hitbox height in pixels
            sprite: Name of the sprite in the resource cache
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Entity size must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._sprite = sprite
        self.x: float = 0.0
        self.y: float = 0.0
        self.reset_state()

    @property
    def width(self) -> float:
        """Hitbox width (fixed at construction)."""
        return self._width

    @property
    def height(self) -> float:
        """Hitbox height (fixed at construction)."""
        return self._height

    @property
    def sprite(self) -> str:
        """Sprite name."""
        return self._sprite

    @property
    def bounds(self) -> Rectangle:
        """Hitbox used for collision tests."""
        return Rectangle(x=self.x, y=self.y, width=self._width, height=self._height)

    @abstractmethod
    def reset_state(self) -> None:
        """Put the entity back in its spawn state."""
        pass

    @abstractmethod
    def render_position_x(self) -> float:
        """Get the x where the sprite is drawn."""
        pass

    @abstractmethod
    def render_position_y(self) -> float:
        """Get the y where the sprite is drawn."""
        pass

    def render(self, canvas: 'Canvas') -> None:
        """Render the entity on the canvas."""
        render_sprite(self, canvas)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x:.2f}, y={self.y:.2f})"
