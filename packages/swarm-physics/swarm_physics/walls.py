"""Clamp-and-reflect against the walls of an axis-aligned arena."""
from __future__ import annotations

from swarm_physics.vec import Vec


def reflect_off_walls(
    position: Vec,
    velocity: Vec,
    radius: float,
    extents: Vec,
) -> tuple[Vec, Vec]:
    """Keep a circle inside ``[0, extent]`` on every axis.

    Each axis is handled on its own: a circle poking out of the low wall is
    clamped to ``radius``, one poking out of the high wall to
    ``extent - radius``, and the velocity component on that axis is negated.
    A corner hit reflects both axes in the same call.

    This is a discrete correction, not a swept test. A circle moving more
    than the arena's width in one tick can skip past a wall.
    """
    pos = list(position)
    vel = list(velocity)
    for i, extent in enumerate(extents):
        if pos[i] < radius:
            pos[i] = radius
            vel[i] = -vel[i]
        if pos[i] > extent - radius:
            pos[i] = extent - radius
            vel[i] = -vel[i]
    return tuple(pos), tuple(vel)
