"""
Bug Crossing models package.

Contains the enums shared by game and host, and the level configuration
models loaded from YAML.
"""

from .enums import (
    Key,
    GameState,
    TickOutcome,
)

from .level_config import (
    PlayfieldConfig,
    ObstacleConfig,
    AvatarConfig,
    LevelConfig,
)

__all__ = [
    # Enums
    "Key",
    "GameState",
    "TickOutcome",
    # Configuration models
    "PlayfieldConfig",
    "ObstacleConfig",
    "AvatarConfig",
    "LevelConfig",
]
