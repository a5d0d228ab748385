"""
Keyboard mapping for Bug Crossing.

Translates pygame key codes into the symbolic keys the game understands.
"""

from typing import Dict, Optional

import pygame

from models import Key

KEY_MAP: Dict[int, Key] = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.CONFIRM,
    pygame.K_KP_ENTER: Key.CONFIRM,
}


def map_key(code: int) -> Optional[Key]:
    """Map a pygame key code to a game key.

    Args:
        code: pygame key code (``event.key``)

    Returns:
        The matching Key, or None for keys the game ignores

    Examples:
        >>> map_key(pygame.K_UP)
        <Key.UP: 'up'>
        >>> map_key(pygame.K_a) is None
        True
    """
    return KEY_MAP.get(code)
