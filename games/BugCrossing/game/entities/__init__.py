"""Bug Crossing game entities."""

from .entity import Entity, render_sprite
from .obstacle import Obstacle
from .avatar import Avatar

__all__ = [
    'Entity', 'render_sprite',
    'Obstacle',
    'Avatar',
]
