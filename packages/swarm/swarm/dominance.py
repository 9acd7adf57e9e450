"""The cyclic dominance rule deciding who wins a collision."""

from __future__ import annotations

from swarm.types import InvariantError, Kind

# Each kind maps to the one kind it beats.
BEATS: dict[Kind, Kind] = {
    Kind.ROCK: Kind.SCISSORS,
    Kind.SCISSORS: Kind.PAPER,
    Kind.PAPER: Kind.ROCK,
}


def beats(a: Kind, b: Kind) -> bool:
    return BEATS[a] is b


def winner(a: Kind, b: Kind) -> Kind | None:
    """Return the winning kind of an ``a`` vs ``b`` encounter, or None on a tie."""
    if a is b:
        return None
    if beats(a, b):
        return a
    if beats(b, a):
        return b
    raise InvariantError(f"No dominance outcome for {a!r} vs {b!r}")
