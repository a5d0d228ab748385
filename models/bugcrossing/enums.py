"""
Bug Crossing enumerations.

These enums define the symbolic keys, game states and per-tick outcomes
shared by the game logic and the host.
"""

from enum import Enum


class Key(str, Enum):
    """Symbolic keys understood by the game.

    Attributes:
        LEFT: Move one column left
        UP: Move one row up
        RIGHT: Move one column right
        DOWN: Move one row down
        CONFIRM: Restart after a win (ENTER)
    """
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    CONFIRM = "confirm"


class GameState(str, Enum):
    """States of a crossing attempt.

    Attributes:
        PLAYING: The avatar is crossing and reacts to movement keys
        WON: The avatar reached the goal row; only CONFIRM is accepted
    """
    PLAYING = "playing"
    WON = "won"


class TickOutcome(str, Enum):
    """What happened to the avatar during one update.

    Attributes:
        WON: The avatar is on the goal row
        COLLIDED: The avatar overlaps an obstacle; the level must reset
        MOVED: Nothing special, the avatar was kept inside the playfield
    """
    WON = "won"
    COLLIDED = "collided"
    MOVED = "moved"
