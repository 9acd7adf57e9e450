"""Velocity-only separation response for a colliding pair."""
from __future__ import annotations

from swarm_physics import vec
from swarm_physics.collision import contact_normal
from swarm_physics.vec import Vec

RESTITUTION = 0.9


def separation_impulse(
    pos_a: Vec,
    vel_a: Vec,
    pos_b: Vec,
    vel_b: Vec,
    restitution: float = RESTITUTION,
) -> tuple[Vec, Vec]:
    """Return the new ``(vel_a, vel_b)`` after pushing A and B apart.

    The impulse acts along the A→B normal with magnitude
    ``-rel * restitution``, where ``rel`` is the relative velocity of B with
    respect to A along that normal. A pair that is already separating
    (``rel > 0``) is returned unchanged. Positions are never corrected, so
    circles may overlap for a tick or two while they drift apart.

    Coincident centers have no normal; both velocities are negated instead.
    That does not guarantee the pair separates on the next tick.
    """
    normal = contact_normal(pos_a, pos_b)
    if normal is None:
        return vec.negate(vel_a), vec.negate(vel_b)

    rel = vec.dot(vec.sub(vel_b, vel_a), normal)
    if rel > 0:
        return vel_a, vel_b

    impulse = vec.scale(normal, -rel * restitution)
    return vec.sub(vel_a, impulse), vec.add(vel_b, impulse)
