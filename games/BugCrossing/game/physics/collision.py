"""Collision detection for Bug Crossing.

Entities collide when their hitboxes overlap. Overlap is strict on every
side, so hitboxes that are exactly flush do not collide.
"""

from typing import Iterable, Optional, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.entity import Entity

E = TypeVar('E', bound='Entity')


def check_collision(entity: 'Entity', other: 'Entity') -> bool:
    """Check if two entities' hitboxes overlap.

    Args:
        entity: First entity
        other: Second entity

    Returns:
        True if the hitboxes overlap by more than an edge
    """
    return entity.bounds.overlaps(other.bounds)


def find_collision(entity: 'Entity', others: Iterable[E]) -> Optional[E]:
    """Find the first entity in ``others`` that collides with ``entity``.

    Args:
        entity: Entity to test (usually the avatar)
        others: Candidates, checked in order

    Returns:
        The first colliding entity, or None
    """
    for other in others:
        if check_collision(entity, other):
            return other
    return None
