"""Bug Crossing input: keyboard to game key mapping."""

from .keyboard import KEY_MAP, map_key

__all__ = [
    'KEY_MAP',
    'map_key',
]
