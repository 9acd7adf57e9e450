"""Command queue - external spawn/clear requests applied inside the engine step."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping

from swarm.types import InvalidArgumentError, Kind

if TYPE_CHECKING:
    from swarm.arena import Arena
    from swarm.types import System, TickContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpawnRandom:
    """Spawn *count* entities at random spots. ``kind=None`` picks a kind per entity."""

    kind: Kind | None = None
    count: int = 1


@dataclass(frozen=True)
class SpawnAt:
    """Spawn one entity at a point. ``kind=None`` picks a random kind."""

    x: float
    y: float
    kind: Kind | None = None


@dataclass(frozen=True)
class ClearAll:
    pass


@dataclass(frozen=True)
class Reset:
    distribution: Mapping[Kind, int] | None = None


def _spawn_random(cmd: SpawnRandom, arena: Arena, ctx: TickContext) -> bool:
    if cmd.count < 1:
        logger.warning("Rejected %r: count must be >= 1", cmd)
        return False
    try:
        for _ in range(cmd.count):
            kind = cmd.kind if cmd.kind is not None else ctx.random.choice(list(Kind))
            arena.spawn_random(kind)
    except InvalidArgumentError as exc:
        logger.warning("Rejected %r: %s", cmd, exc)
        return False
    return True


def _spawn_at(cmd: SpawnAt, arena: Arena, ctx: TickContext) -> bool:
    kind = cmd.kind if cmd.kind is not None else ctx.random.choice(list(Kind))
    try:
        arena.spawn_at(cmd.x, cmd.y, kind)
    except InvalidArgumentError as exc:
        logger.warning("Rejected %r: %s", cmd, exc)
        return False
    return True


def _clear_all(cmd: ClearAll, arena: Arena, ctx: TickContext) -> bool:
    arena.clear()
    return True


def _reset(cmd: Reset, arena: Arena, ctx: TickContext) -> bool:
    try:
        arena.reset(cmd.distribution)
    except InvalidArgumentError as exc:
        logger.warning("Rejected %r: %s", cmd, exc)
        return False
    return True


Handler = Callable[[Any, "Arena", "TickContext"], bool]

_BUILTIN_HANDLERS: dict[type[Any], Handler] = {
    SpawnRandom: _spawn_random,
    SpawnAt: _spawn_at,
    ClearAll: _clear_all,
    Reset: _reset,
}


class CommandQueue:
    """FIFO of commands applied by the engine thread right before the arena ticks.

    SpawnRandom, SpawnAt, ClearAll and Reset are understood out of the box;
    *handlers* adds or replaces entries keyed by command class. A handler
    returns True to accept a command and False to reject it. ``enqueue`` is
    safe from any thread, so input handlers never mutate the arena mid-tick.
    """

    def __init__(self, handlers: Mapping[type[Any], Handler] | None = None) -> None:
        self._handlers = {**_BUILTIN_HANDLERS, **(handlers or {})}
        self._pending: deque[Any] = deque()

    def enqueue(self, cmd: Any) -> None:
        self._pending.append(cmd)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self, arena: Arena, ctx: TickContext) -> list[tuple[Any, bool]]:
        """Apply every pending command in order. Returns ``[(cmd, accepted), ...]``.

        Raises ``TypeError`` for a command class with no handler.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            handler = self._handlers.get(type(cmd))
            if handler is None:
                raise TypeError(f"No handler registered for {type(cmd).__qualname__}")
            results.append((cmd, handler(cmd, arena, ctx)))
        return results


def make_command_system(
    queue: CommandQueue,
    on_accept: Callable[[Any], None] | None = None,
    on_reject: Callable[[Any], None] | None = None,
) -> System:
    """Return a system that drains the command queue each step.

    ``on_accept(cmd)`` fires after a handler returns True.
    ``on_reject(cmd)`` fires after a handler returns False.
    """

    def command_system(arena: Arena, ctx: TickContext) -> None:
        results = queue.drain(arena, ctx)
        for cmd, accepted in results:
            if accepted:
                if on_accept is not None:
                    on_accept(cmd)
            else:
                if on_reject is not None:
                    on_reject(cmd)

    return command_system
