"""Bug Crossing collision detection."""

from .collision import check_collision, find_collision

__all__ = [
    'check_collision',
    'find_collision',
]
