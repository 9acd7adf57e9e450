"""N-dimensional vector math helpers operating on tuple[float, ...]."""
from __future__ import annotations

import math

Vec = tuple[float, ...]


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def sub(a: Vec, b: Vec) -> Vec:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def negate(v: Vec) -> Vec:
    return tuple(-vi for vi in v)


def dot(a: Vec, b: Vec) -> float:
    return sum(ai * bi for ai, bi in zip(a, b, strict=True))


def magnitude_sq(v: Vec) -> float:
    return sum(vi * vi for vi in v)


def distance_sq(a: Vec, b: Vec) -> float:
    return magnitude_sq(sub(a, b))


def distance(a: Vec, b: Vec) -> float:
    return math.sqrt(distance_sq(a, b))


def from_polar(angle: float, length: float) -> Vec:
    """2D vector of *length* pointing at *angle* radians."""
    return (math.cos(angle) * length, math.sin(angle) * length)
