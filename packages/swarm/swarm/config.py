"""Swarm configuration dataclass and the default starting population."""

from __future__ import annotations

import math
from dataclasses import dataclass

from swarm.types import InvalidArgumentError, Kind

# Starting population used by Arena.reset() when no distribution is given.
DEFAULT_DISTRIBUTION: dict[Kind, int] = {
    Kind.PAPER: 18,
    Kind.SCISSORS: 15,
    Kind.ROCK: 2,
}


@dataclass(frozen=True)
class SwarmConfig:
    """Immutable configuration for an arena.

    Attributes:
        width: Arena extent along x.
        height: Arena extent along y.
        min_radius: Smallest radius drawn at spawn (inclusive).
        max_radius: Upper bound of the spawn radius draw.
        min_speed: Smallest speed, in units per tick, drawn at spawn or conversion.
        max_speed: Upper bound of the speed draw.
        restitution: Fraction of the approach speed returned by the separation impulse.
        cascade: When True, a conversion is visible to the pairs scanned after it
            in the same tick. When False, every pair of a tick is judged on the
            kinds the tick started with and conversions land after the scan.
    """

    width: float = 900.0
    height: float = 720.0
    min_radius: float = 14.0
    max_radius: float = 22.0
    min_speed: float = 0.6
    max_speed: float = 2.2
    restitution: float = 0.9
    cascade: bool = True

    def __post_init__(self) -> None:
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidArgumentError(f"{name} must be finite, got {value}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgumentError(
                f"Arena bounds must be positive, got {self.width}x{self.height}"
            )
        if not 0 < self.min_radius <= self.max_radius:
            raise InvalidArgumentError(
                f"Invalid radius range [{self.min_radius}, {self.max_radius}]"
            )
        if not 0 <= self.min_speed <= self.max_speed:
            raise InvalidArgumentError(
                f"Invalid speed range [{self.min_speed}, {self.max_speed}]"
            )
        if not 0.0 <= self.restitution <= 1.0:
            raise InvalidArgumentError(
                f"restitution must be within [0, 1], got {self.restitution}"
            )
        if min(self.width, self.height) < 2 * self.max_radius:
            raise InvalidArgumentError(
                f"Arena {self.width}x{self.height} cannot hold an entity of "
                f"radius {self.max_radius}"
            )


_NUMERIC_FIELDS = (
    "width",
    "height",
    "min_radius",
    "max_radius",
    "min_speed",
    "max_speed",
    "restitution",
)
