"""
Pydantic v2 models for level YAML configuration.

A level describes the playfield grid, the obstacle pool and the avatar
bounds. Every field has a default matching the classic board, so
``LevelConfig()`` is a complete, playable level.
"""

from pydantic import BaseModel, Field, model_validator

from ..primitives import Point2D, Resolution


class PlayfieldConfig(BaseModel):
    """
    Playfield geometry.

    The board is a grid of columns and rows. Obstacles travel along
    ``lane_count`` lanes starting at ``lane_y_offset``; the avatar wins
    once its y drops below ``goal_y``.
    """
    model_config = {"frozen": True}

    canvas: Resolution = Field(
        default=Resolution(width=505, height=606),
        description="Canvas size in pixels"
    )
    column_width: float = Field(
        default=101.0,
        description="Width of one column; horizontal step of the avatar",
        gt=0.0
    )
    row_height: float = Field(
        default=83.0,
        description="Height of one row; vertical step of the avatar and lane spacing",
        gt=0.0
    )
    lane_y_offset: float = Field(
        default=134.0,
        description="Hitbox y of the topmost obstacle lane"
    )
    lane_count: int = Field(
        default=3,
        description="Number of obstacle lanes",
        ge=1
    )
    goal_y: float = Field(
        default=134.0,
        description="Avatar y below which the crossing counts as won"
    )

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    def lane_y(self, lane_index: int) -> float:
        """Hitbox y of the given lane (0 = topmost)."""
        return lane_index * self.row_height + self.lane_y_offset


class ObstacleConfig(BaseModel):
    """
    Obstacle pool configuration.

    Speeds are drawn as integers from [speed_min, speed_max).
    """
    model_config = {"frozen": True}

    count: int = Field(
        default=3,
        description="Number of pooled obstacles",
        ge=1
    )
    width: float = Field(default=101.0, gt=0.0)
    height: float = Field(default=73.0, gt=0.0)
    speed_min: int = Field(
        default=100,
        description="Lowest speed in pixels per second (inclusive)",
        ge=0
    )
    speed_max: int = Field(
        default=300,
        description="Highest speed in pixels per second (exclusive)",
        gt=0
    )
    sprite: str = Field(default="enemy-bug")
    sprite_offset: Point2D = Field(
        default=Point2D(x=0.0, y=70.0),
        description="Subtracted from the hitbox position to get the sprite position"
    )

    @model_validator(mode='after')
    def validate_speed_range(self) -> 'ObstacleConfig':
        """Ensure the speed range is not empty."""
        if self.speed_min >= self.speed_max:
            raise ValueError(
                f"speed_min ({self.speed_min}) must be less than speed_max ({self.speed_max})"
            )
        return self


class AvatarConfig(BaseModel):
    """
    Avatar size, spawn point and movement bounds.
    """
    model_config = {"frozen": True}

    width: float = Field(default=71.0, gt=0.0)
    height: float = Field(default=73.0, gt=0.0)
    spawn: Point2D = Field(
        default=Point2D(x=217.0, y=466.0),
        description="Hitbox position after reset"
    )
    min_x: float = Field(default=15.0, description="Leftmost allowed x")
    max_x: float = Field(default=419.0, description="Rightmost allowed x")
    max_y: float = Field(default=466.0, description="Lowest allowed y")
    sprite: str = Field(default="char-boy")
    sprite_offset: Point2D = Field(
        default=Point2D(x=15.0, y=70.0),
        description="Subtracted from the hitbox position to get the sprite position"
    )

    @model_validator(mode='after')
    def validate_bounds(self) -> 'AvatarConfig':
        """Ensure the bounds are ordered and contain the spawn point."""
        if self.min_x > self.max_x:
            raise ValueError(f"min_x ({self.min_x}) must not exceed max_x ({self.max_x})")
        if not self.min_x <= self.spawn.x <= self.max_x:
            raise ValueError(f"spawn x {self.spawn.x} is outside [{self.min_x}, {self.max_x}]")
        if self.spawn.y > self.max_y:
            raise ValueError(f"spawn y {self.spawn.y} is below max_y {self.max_y}")
        return self


class LevelConfig(BaseModel):
    """
    Complete level configuration from YAML.

    Examples:
        >>> level = LevelConfig()
        >>> level.playfield.lane_y(2)
        300.0
        >>> level.obstacles.count
        3
    """
    model_config = {"frozen": True}

    name: str = Field(
        default="Classic",
        description="Human-readable name of the level"
    )
    description: str = Field(default="")
    playfield: PlayfieldConfig = Field(default_factory=PlayfieldConfig)
    obstacles: ObstacleConfig = Field(default_factory=ObstacleConfig)
    avatar: AvatarConfig = Field(default_factory=AvatarConfig)

    @model_validator(mode='after')
    def validate_spawn_not_won(self) -> 'LevelConfig':
        """A level whose spawn row is already the goal row is unplayable."""
        if self.avatar.spawn.y < self.playfield.goal_y:
            raise ValueError(
                f"avatar spawn y {self.avatar.spawn.y} is above goal_y {self.playfield.goal_y}"
            )
        return self
