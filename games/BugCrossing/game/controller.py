"""Game loop controller for Bug Crossing.

The controller owns the obstacle pool and the avatar. The host calls
``update(dt)`` once per frame, ``handle_input(key)`` for every key press
and ``render(canvas)`` after each update.
"""

import random
from typing import Optional, Tuple, TYPE_CHECKING

from crossing.logging import get_logger
from models import GameState, Key, LevelConfig, TickOutcome

from .entities.avatar import Avatar
from .entities.obstacle import Obstacle

if TYPE_CHECKING:
    from .render.canvas import Canvas

log = get_logger('controller')


class GameLoopController:
    """Orchestrates one board: obstacles, avatar, resets.

    Entities are created once and only ever reset in place.

    Attributes:
        level: Level configuration the board was built from

    Examples:
        >>> controller = GameLoopController(rng=random.Random(7))
        >>> controller.update(0.016)
        >>> controller.state
        <GameState.PLAYING: 'playing'>
    """

    def __init__(
        self,
        level: Optional[LevelConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Build the board for a level.

        Args:
            level: Level configuration (defaults to the classic board)
            rng: Random source shared by all obstacles
        """
        self.level = level or LevelConfig()
        self._rng = rng if rng is not None else random

        self._obstacles: Tuple[Obstacle, ...] = tuple(
            Obstacle(self.level.obstacles, self.level.playfield, self._rng)
            for _ in range(self.level.obstacles.count)
        )
        self._avatar = Avatar(self.level.avatar, self.level.playfield)

        log.debug("Board '%s' ready with %d obstacles", self.level.name, len(self._obstacles))

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return self._obstacles

    @property
    def avatar(self) -> Avatar:
        return self._avatar

    @property
    def state(self) -> GameState:
        """Current state of the crossing."""
        return self._avatar.state

    @property
    def ended(self) -> bool:
        """True while the win screen is shown."""
        return self._avatar.won

    def update(self, dt: float) -> None:
        """Advance the board by one tick.

        Args:
            dt: Time delta in seconds since the previous tick
        """
        was_won = self._avatar.won

        for obstacle in self._obstacles:
            obstacle.update(dt)

        outcome = self._avatar.update(self._obstacles)

        if outcome == TickOutcome.COLLIDED:
            log.debug("Avatar hit an obstacle at (%.1f, %.1f), resetting",
                      self._avatar.x, self._avatar.y)
            self.reset()
        elif outcome == TickOutcome.WON and not was_won:
            log.info("Avatar reached the goal row")

    def reset(self) -> None:
        """Put every obstacle and the avatar back in their spawn state."""
        for obstacle in self._obstacles:
            obstacle.reset_state()
        self._avatar.reset_state()

    def handle_input(self, key: Optional[Key]) -> None:
        """Forward a key press to the avatar.

        A restart after a win resets the whole board.

        Args:
            key: Symbolic key, or None for an unmapped key
        """
        if self._avatar.handle_input(key):
            log.info("Restarting after win")
            self.reset()

    def render(self, canvas: 'Canvas') -> None:
        """Draw obstacles, then the avatar on top."""
        for obstacle in self._obstacles:
            obstacle.render(canvas)
        self._avatar.render(canvas)
