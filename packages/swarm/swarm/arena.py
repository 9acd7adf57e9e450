"""Arena - the bounded entity collection and the per-tick simulation step."""

from __future__ import annotations

import logging
import math
import random
import threading
from typing import Mapping

from swarm.config import DEFAULT_DISTRIBUTION, SwarmConfig
from swarm.dominance import winner
from swarm.entity import Entity, EntityView
from swarm.types import EntityId, InvalidArgumentError, InvariantError, Kind, UnknownEntityError
from swarm_physics import circles_overlap, reflect_off_walls, separation_impulse, vec

logger = logging.getLogger(__name__)


class Arena:
    """Owns the entities of one simulation and advances them a tick at a time.

    Every public method holds the arena lock for its whole duration, so a
    reader on another thread only ever sees the state between two ticks.
    Entities are checked pairwise every tick with no spatial index, which is
    fine for a few hundred of them.
    """

    def __init__(
        self,
        config: SwarmConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config if config is not None else SwarmConfig()
        self._rng = rng if rng is not None else random.Random()
        self._extents = (float(self._config.width), float(self._config.height))
        self._entities: list[Entity] = []
        self._next_id: int = 0
        self._tick_number: int = 0
        self._lock = threading.RLock()

    @property
    def config(self) -> SwarmConfig:
        return self._config

    @property
    def width(self) -> float:
        return self._extents[0]

    @property
    def height(self) -> float:
        return self._extents[1]

    @property
    def lock(self) -> threading.RLock:
        """The mutual-exclusion scope shared by ticks, commands and readers."""
        return self._lock

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    # -- Spawning --

    def spawn_random(self, kind: Kind) -> EntityId:
        """Spawn *kind* at a uniformly random spot fully inside the arena."""
        _check_kind(kind)
        with self._lock:
            radius = self._random_radius()
            x = self._rng.uniform(radius, self.width - radius)
            y = self._rng.uniform(radius, self.height - radius)
            return self._add((x, y), self._random_velocity(), radius, kind)

    def spawn_at(self, x: float, y: float, kind: Kind) -> EntityId:
        """Spawn *kind* at ``(x, y)``, pulled inward if the circle would poke out."""
        _check_kind(kind)
        with self._lock:
            radius = self._random_radius()
            return self._add((x, y), self._random_velocity(), radius, kind)

    def insert(
        self,
        position: tuple[float, float],
        velocity: tuple[float, float],
        radius: float,
        kind: Kind,
    ) -> EntityId:
        """Add a fully specified entity. The position is clamped into bounds."""
        _check_kind(kind)
        if not 0 < radius <= min(self._extents) / 2:
            raise InvalidArgumentError(
                f"Radius {radius} does not fit a {self.width}x{self.height} arena"
            )
        with self._lock:
            return self._add(position, velocity, radius, kind)

    def add_random(self, count: int) -> list[EntityId]:
        """Spawn *count* entities, each with a uniformly random kind."""
        if count < 0:
            raise InvalidArgumentError(f"count must be >= 0, got {count}")
        kinds = list(Kind)
        with self._lock:
            return [self.spawn_random(self._rng.choice(kinds)) for _ in range(count)]

    def populate(self, distribution: Mapping[Kind, int]) -> list[EntityId]:
        """Spawn ``distribution[kind]`` random entities of each kind, in mapping order."""
        _check_distribution(distribution)
        with self._lock:
            ids: list[EntityId] = []
            for kind, count in distribution.items():
                ids.extend(self.spawn_random(kind) for _ in range(count))
            return ids

    def clear(self) -> None:
        with self._lock:
            removed = len(self._entities)
            self._entities.clear()
        logger.debug("Cleared %d entities", removed)

    def reset(self, distribution: Mapping[Kind, int] | None = None) -> list[EntityId]:
        """Clear the arena and repopulate it, by default with DEFAULT_DISTRIBUTION."""
        if distribution is None:
            distribution = DEFAULT_DISTRIBUTION
        _check_distribution(distribution)
        with self._lock:
            self.clear()
            ids = self.populate(distribution)
        logger.info("Arena reset with %d entities", len(ids))
        return ids

    # -- Reading --

    def entity(self, entity_id: EntityId) -> Entity:
        """Return the live record for *entity_id*. Mutating it bypasses the lock."""
        with self._lock:
            for en in self._entities:
                if en.id == entity_id:
                    return en
        raise UnknownEntityError(entity_id, f"Entity {entity_id} is not in the arena")

    def snapshot(self) -> tuple[EntityView, ...]:
        with self._lock:
            return tuple(en.view() for en in self._entities)

    def counts(self) -> dict[Kind, int]:
        result = {kind: 0 for kind in Kind}
        for view in self.snapshot():
            result[view.kind] += 1
        return result

    # -- Simulation --

    def tick(self) -> None:
        """Advance one step: move, bounce off walls, then resolve every overlapping pair."""
        with self._lock:
            self._move()
            self._resolve_contacts()
            self._tick_number += 1
            if __debug__:
                self._check_bounds()

    def _move(self) -> None:
        for en in self._entities:
            en.position, en.velocity = reflect_off_walls(
                vec.add(en.position, en.velocity), en.velocity, en.radius, self._extents
            )

    def _resolve_contacts(self) -> None:
        entities = self._entities
        cascade = self._config.cascade
        # Kinds as of the start of the scan, and conversions waiting to land.
        kinds = [en.kind for en in entities]
        pending: dict[int, Kind] = {}

        n = len(entities)
        for i in range(n):
            a = entities[i]
            for j in range(i + 1, n):
                b = entities[j]
                if not circles_overlap(a.position, a.radius, b.position, b.radius):
                    continue

                if cascade:
                    won = winner(a.kind, b.kind)
                    if won is not None:
                        self._convert(b if won is a.kind else a, won)
                else:
                    won = winner(kinds[i], kinds[j])
                    if won is not None:
                        loser = j if won is kinds[i] else i
                        if loser not in pending:
                            pending[loser] = won
                            entities[loser].velocity = self._random_velocity()

                a.velocity, b.velocity = separation_impulse(
                    a.position, a.velocity, b.position, b.velocity,
                    self._config.restitution,
                )

        for index, kind in pending.items():
            self._convert_kind(entities[index], kind)

    def _convert(self, en: Entity, kind: Kind) -> None:
        self._convert_kind(en, kind)
        en.velocity = self._random_velocity()

    def _convert_kind(self, en: Entity, kind: Kind) -> None:
        logger.debug("Entity %d converted %s -> %s", en.id, en.kind.name, kind.name)
        en.kind = kind

    def _check_bounds(self) -> None:
        for en in self._entities:
            for coord, extent in zip(en.position, self._extents):
                if not en.radius <= coord <= extent - en.radius:
                    raise InvariantError(
                        f"Entity {en.id} left the arena after tick {self._tick_number}: {en!r}"
                    )

    # -- Helpers --

    def _add(
        self,
        position: tuple[float, float],
        velocity: tuple[float, float],
        radius: float,
        kind: Kind,
    ) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        x, y = position
        position = (
            _clamp(float(x), radius, self.width - radius),
            _clamp(float(y), radius, self.height - radius),
        )
        self._entities.append(Entity(eid, position, velocity, radius, kind))
        logger.debug("Spawned %s entity %d at (%.1f, %.1f)", kind.name, eid, *position)
        return eid

    def _random_radius(self) -> float:
        return self._rng.uniform(self._config.min_radius, self._config.max_radius)

    def _random_velocity(self) -> tuple[float, float]:
        speed = self._rng.uniform(self._config.min_speed, self._config.max_speed)
        angle = self._rng.uniform(0.0, 2 * math.pi)
        return vec.from_polar(angle, speed)


def _check_kind(kind: object) -> None:
    if not isinstance(kind, Kind):
        raise InvalidArgumentError(f"Unknown kind {kind!r}")


def _check_distribution(distribution: Mapping[Kind, int]) -> None:
    for kind, count in distribution.items():
        _check_kind(kind)
        if count < 0:
            raise InvalidArgumentError(f"Count for {kind.name} must be >= 0, got {count}")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))
