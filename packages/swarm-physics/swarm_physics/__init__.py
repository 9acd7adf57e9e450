"""swarm-physics - Circle kinematics helpers for the swarm engine."""
from __future__ import annotations

from swarm_physics import vec
from swarm_physics.collision import circles_overlap, contact_normal
from swarm_physics.impulse import separation_impulse
from swarm_physics.walls import reflect_off_walls

__all__ = [
    "circles_overlap",
    "contact_normal",
    "reflect_off_walls",
    "separation_impulse",
    "vec",
]
