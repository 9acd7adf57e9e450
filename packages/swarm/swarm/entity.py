"""Entity record and its read-only snapshot row."""

from __future__ import annotations

from dataclasses import dataclass

from swarm.types import EntityId, Kind


class Entity:
    """One circular particle.

    Position and velocity are replaced wholesale each tick and ``kind`` changes
    only through a conversion. The radius is fixed at creation. Two entities
    are equal only if they are the same object.
    """

    __slots__ = ("id", "position", "velocity", "kind", "_radius")

    def __init__(
        self,
        id: EntityId,
        position: tuple[float, float],
        velocity: tuple[float, float],
        radius: float,
        kind: Kind,
    ) -> None:
        self.id = id
        self.position = position
        self.velocity = velocity
        self.kind = kind
        self._radius = radius

    @property
    def radius(self) -> float:
        return self._radius

    def view(self) -> EntityView:
        return EntityView(self.id, self.position, self._radius, self.kind)

    def __repr__(self) -> str:
        return (
            f"Entity(id={self.id}, kind={self.kind.name}, position={self.position}, "
            f"velocity={self.velocity}, radius={self._radius})"
        )


@dataclass(frozen=True, slots=True)
class EntityView:
    """Immutable copy of what a renderer needs from one entity."""

    id: EntityId
    position: tuple[float, float]
    radius: float
    kind: Kind
