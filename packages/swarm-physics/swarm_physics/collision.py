"""Pure overlap tests between circles. N-dimensional."""
from __future__ import annotations

from swarm_physics import vec
from swarm_physics.vec import Vec


def circles_overlap(
    pos_a: Vec,
    radius_a: float,
    pos_b: Vec,
    radius_b: float,
) -> bool:
    """True when the circles overlap or touch.

    The boundary is closed: exact tangency counts as a collision.
    """
    r_sum = radius_a + radius_b
    return vec.distance_sq(pos_a, pos_b) <= r_sum * r_sum


def contact_normal(pos_a: Vec, pos_b: Vec) -> Vec | None:
    """Unit normal pointing from A's center to B's. None for coincident centers."""
    dist = vec.distance(pos_a, pos_b)
    if dist == 0.0:
        return None
    return vec.scale(vec.sub(pos_b, pos_a), 1.0 / dist)
