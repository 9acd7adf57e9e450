"""Shared type aliases, kinds and errors for the swarm engine."""

from __future__ import annotations

import enum
import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


class Kind(enum.Enum):
    """The three cyclic categories. Rock beats scissors, scissors beat paper, paper beats rock."""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    request_stop: Callable[[], None]
    random: _random.Random


class SwarmError(Exception):
    """Base class for errors raised by the swarm engine."""


class InvalidArgumentError(SwarmError, ValueError):
    """Raised for an unknown kind, bad bounds, bad counts or bad configuration."""


class UnknownEntityError(SwarmError, KeyError):
    """Raised when looking up an entity that is not in the arena."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class InvariantError(AssertionError):
    """An internal invariant broke. Always a bug in the engine, never recoverable."""


if TYPE_CHECKING:
    from swarm.arena import Arena

System = Callable[["Arena", TickContext], None]
