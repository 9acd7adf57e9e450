"""swarm - A rock-paper-scissors swarm simulation engine."""

from swarm.arena import Arena
from swarm.commands import ClearAll, CommandQueue, Reset, SpawnAt, SpawnRandom, make_command_system
from swarm.config import DEFAULT_DISTRIBUTION, SwarmConfig
from swarm.dominance import beats, winner
from swarm.engine import Engine
from swarm.entity import Entity, EntityView
from swarm.types import (
    EntityId,
    InvalidArgumentError,
    InvariantError,
    Kind,
    SwarmError,
    TickContext,
    UnknownEntityError,
)

__all__ = [
    "Arena",
    "ClearAll",
    "CommandQueue",
    "DEFAULT_DISTRIBUTION",
    "Engine",
    "Entity",
    "EntityId",
    "EntityView",
    "InvalidArgumentError",
    "InvariantError",
    "Kind",
    "Reset",
    "SpawnAt",
    "SpawnRandom",
    "SwarmConfig",
    "SwarmError",
    "TickContext",
    "UnknownEntityError",
    "beats",
    "make_command_system",
    "winner",
]
