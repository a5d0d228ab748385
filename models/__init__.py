"""
Models library for the Bug Crossing project.

This package provides the Pydantic data models used across the game:
- Primitives: Basic geometric types (Point2D, Rectangle, Resolution)
- Bug Crossing: Enums and level configuration

Usage:
    >>> from models import Rectangle, LevelConfig
    >>> from models.bugcrossing import Key, GameState
"""

from .primitives import (
    Point2D,
    Resolution,
    Rectangle,
)

from .bugcrossing import (
    Key,
    GameState,
    TickOutcome,
    PlayfieldConfig,
    ObstacleConfig,
    AvatarConfig,
    LevelConfig,
)

__all__ = [
    # Primitives
    "Point2D",
    "Resolution",
    "Rectangle",
    # Bug Crossing
    "Key",
    "GameState",
    "TickOutcome",
    "PlayfieldConfig",
    "ObstacleConfig",
    "AvatarConfig",
    "LevelConfig",
]
