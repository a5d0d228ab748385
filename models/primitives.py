"""
Shared primitive data types for the game.

This module provides the basic geometric types used by the level
configuration, the entities and the renderer.
"""

from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point for positions and offsets.

    Attributes:
        x: X coordinate (horizontal, grows to the right)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> spawn = Point2D(x=217.0, y=466.0)
        >>> spawn.as_tuple
        (217.0, 466.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    @property
    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as an (x, y) tuple."""
        return (self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Canvas size in pixels.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> canvas = Resolution(width=505, height=606)
        >>> str(canvas)
        'Resolution(505x606)'
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle defined by position and dimensions.

    Used for entity hitboxes. Position is the top-left corner (pygame
    convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.right
        150.0
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def overlaps(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps another one.

        Edges are half-open: rectangles that only touch along an edge
        or at a corner do not overlap.

        Examples:
            >>> a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
            >>> a.overlaps(Rectangle(x=10.0, y=0.0, width=10.0, height=10.0))
            False
            >>> a.overlaps(Rectangle(x=9.0, y=9.0, width=10.0, height=10.0))
            True
        """
        return (self.left < other.right and
                self.right > other.left and
                self.top < other.bottom and
                self.bottom > other.top)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
