"""Avatar entity: the player crossing the board.

The avatar owns the whole crossing state machine:

    PLAYING --reach goal row--> WON
    PLAYING --hit obstacle----> PLAYING (level reset by the controller)
    WON     --CONFIRM key-----> PLAYING (level reset by the controller)

While WON the avatar ignores movement keys and stays where it is.
"""

from typing import Optional, Sequence, TYPE_CHECKING

from models import AvatarConfig, GameState, Key, PlayfieldConfig, TickOutcome

from ..physics.collision import find_collision
from ..render.overlay import render_win_overlay
from .entity import Entity, render_sprite

if TYPE_CHECKING:
    from ..render.canvas import Canvas
    from .obstacle import Obstacle


class Avatar(Entity):
    """Player-controlled entity.

    Attributes:
        x: Hitbox left edge
        y: Hitbox top edge
        won: True once the goal row is reached, until the next reset
    """

    def __init__(
        self,
        config: Optional[AvatarConfig] = None,
        playfield: Optional[PlayfieldConfig] = None,
    ):
        """Initialize avatar at its spawn point.

        Args:
            config: Avatar size, spawn point, bounds and sprite
            playfield: Board geometry (step sizes, goal row)
        """
        self._config = config or AvatarConfig()
        self._playfield = playfield or PlayfieldConfig()
        self.won: bool = False

        step_x = self._playfield.column_width
        step_y = self._playfield.row_height
        self._moves = {
            Key.LEFT: (-step_x, 0.0),
            Key.UP: (0.0, -step_y),
            Key.RIGHT: (step_x, 0.0),
            Key.DOWN: (0.0, step_y),
        }

        super().__init__(self._config.width, self._config.height, self._config.sprite)

    @property
    def state(self) -> GameState:
        return GameState.WON if self.won else GameState.PLAYING

    def reset_state(self) -> None:
        """Move back to the spawn point and clear the win."""
        self.x, self.y = self._config.spawn.as_tuple
        self.won = False

    def update(self, obstacles: Sequence['Obstacle']) -> TickOutcome:
        """Resolve this tick's win, collision or bounds.

        Checks run in order and the first match wins: reaching the goal
        row beats a simultaneous collision, and clamping only applies
        when neither happened.

        Args:
            obstacles: Obstacles to test for collision

        Returns:
            TickOutcome.WON, TickOutcome.COLLIDED or TickOutcome.MOVED.
            On COLLIDED the caller is expected to reset the level.
        """
        if self.y < self._playfield.goal_y:
            self.won = True
            return TickOutcome.WON

        if find_collision(self, obstacles) is not None:
            return TickOutcome.COLLIDED

        self.x = min(max(self.x, self._config.min_x), self._config.max_x)
        self.y = min(self.y, self._config.max_y)
        return TickOutcome.MOVED

    def handle_input(self, key: Optional[Key]) -> bool:
        """Apply one key press.

        Movement is not bounds-checked here; the next update clamps it.

        Args:
            key: Symbolic key, or None for an unmapped key

        Returns:
            True if the key restarted the crossing after a win. The caller
            is expected to reset the level.
        """
        if self.won:
            if key == Key.CONFIRM:
                self.reset_state()
                return True
            return False

        move = self._moves.get(key)
        if move is not None:
            self.x += move[0]
            self.y += move[1]
        return False

    def render_position_x(self) -> float:
        return self.x - self._config.sprite_offset.x

    def render_position_y(self) -> float:
        return self.y - self._config.sprite_offset.y

    def render(self, canvas: 'Canvas') -> None:
        """Draw the win screen when won, the sprite otherwise."""
        if self.won:
            render_win_overlay(canvas)
        else:
            render_sprite(self, canvas)
