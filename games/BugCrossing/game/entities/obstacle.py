"""Obstacle entity: a bug running along one of the lanes.

Obstacles enter from one column left of the board, run right at a
constant speed and are recycled as soon as they leave the right edge.
"""

import random
from typing import Optional

from crossing.logging import get_logger
from models import ObstacleConfig, PlayfieldConfig

from .entity import Entity

log = get_logger('obstacle')


class Obstacle(Entity):
    """Moving hazard with a random lane and speed.

    Lane and speed are re-drawn only when the obstacle is reset. The
    random source is shared with the other obstacles of a controller; pass
    a seeded ``random.Random`` for reproducible spawns.

    Attributes:
        x: Hitbox left edge
        y: Hitbox top edge, one of the lane values
        speed: Horizontal speed in pixels per second
    """

    def __init__(
        self,
        config: Optional[ObstacleConfig] = None,
        playfield: Optional[PlayfieldConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize obstacle in a random lane, off the left edge.

        Args:
            config: Obstacle size, speed range and sprite
            playfield: Board geometry (lanes, width)
            rng: Random source; defaults to the process-wide ``random`` module
        """
        self._config = config or ObstacleConfig()
        self._playfield = playfield or PlayfieldConfig()
        self._rng = rng if rng is not None else random
        self.speed: float = 0.0
        super().__init__(self._config.width, self._config.height, self._config.sprite)

    @property
    def spawn_x(self) -> float:
        """Start x, one column before the left edge."""
        return -self._playfield.column_width

    def reset_state(self) -> None:
        """Move back off the left edge with a new lane and speed."""
        self.x = self.spawn_x
        lane = self._rng.randrange(self._playfield.lane_count)
        self.y = self._playfield.lane_y(lane)
        self.speed = self._rng.randrange(self._config.speed_min, self._config.speed_max)

    def update(self, dt: float) -> None:
        """Advance along the lane.

        Args:
            dt: Time delta in seconds
        """
        self.x += self.speed * dt

        if self.x > self._playfield.width:
            log.trace("Obstacle left the board at x=%.1f, recycling", self.x)
            self.reset_state()

    def render_position_x(self) -> float:
        return self.x - self._config.sprite_offset.x

    def render_position_y(self) -> float:
        return self.y - self._config.sprite_offset.y
