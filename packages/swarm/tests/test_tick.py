"""Tests for one arena tick: motion, walls, conversions and separation."""

import math
import random

import pytest
from swarm.arena import Arena
from swarm.config import SwarmConfig
from swarm.types import InvariantError, Kind


class ScriptedRandom(random.Random):
    """Random source whose uniform draws come from ``draws``, then 0.5."""

    def __init__(self) -> None:
        super().__init__(0)
        self.draws: list[float] = []

    def random(self) -> float:
        return self.draws.pop(0) if self.draws else 0.5


def _config(**kwargs) -> SwarmConfig:
    base = dict(width=100.0, height=100.0, min_radius=10.0, max_radius=10.0)
    base.update(kwargs)
    return SwarmConfig(**base)


# --- Motion and walls ---

def test_position_advances_by_velocity():
    arena = Arena(_config())
    eid = arena.insert((50.0, 50.0), (1.5, -0.5), 10.0, Kind.ROCK)
    arena.tick()
    assert arena.entity(eid).position == (51.5, 49.5)
    assert arena.tick_number == 1


def test_wall_bounce_example():
    arena = Arena(_config())
    eid = arena.insert((10.0, 50.0), (-1.0, 0.0), 10.0, Kind.ROCK)
    arena.tick()
    en = arena.entity(eid)
    assert en.position == (10.0, 50.0)
    assert en.velocity == (1.0, 0.0)


def test_corner_bounce_reflects_both_axes():
    arena = Arena(_config())
    eid = arena.insert((89.5, 89.5), (1.0, 2.0), 10.0, Kind.PAPER)
    arena.tick()
    en = arena.entity(eid)
    assert en.position == (90.0, 90.0)
    assert en.velocity == (-1.0, -2.0)


def test_wall_containment_over_many_ticks():
    arena = Arena(SwarmConfig(width=300.0, height=200.0), rng=random.Random(21))
    arena.add_random(40)
    for _ in range(500):
        arena.tick()
        for v in arena.snapshot():
            assert v.radius <= v.position[0] <= arena.width - v.radius
            assert v.radius <= v.position[1] <= arena.height - v.radius


def test_escaping_entity_is_a_fatal_invariant_failure():
    arena = Arena(_config())
    arena.insert((50.0, 50.0), (math.nan, 0.0), 10.0, Kind.ROCK)
    with pytest.raises(InvariantError, match="left the arena"):
        arena.tick()


# --- Conversion ---

def test_conversion_example():
    rng = ScriptedRandom()
    arena = Arena(_config(), rng=rng)
    a = arena.insert((50.0, 50.0), (1.0, 0.0), 10.0, Kind.ROCK)
    b = arena.insert((68.0, 50.0), (-1.0, 0.0), 10.0, Kind.SCISSORS)
    # New velocity for b: speed near the top of the range, heading almost +x,
    # so b already moves away from a and the impulse leaves it alone.
    rng.draws = [0.99, 0.99]
    arena.tick()

    en_a, en_b = arena.entity(a), arena.entity(b)
    assert en_a.kind is Kind.ROCK
    assert en_b.kind is Kind.ROCK
    assert en_a.velocity == (1.0, 0.0)
    speed = math.hypot(*en_b.velocity)
    assert math.isclose(speed, 0.6 + 1.6 * 0.99)
    assert arena.config.min_speed <= speed <= arena.config.max_speed


def test_loser_converts_whichever_side_it_is_on():
    arena = Arena(_config(), rng=random.Random(22))
    a = arena.insert((50.0, 50.0), (0.0, 0.0), 10.0, Kind.SCISSORS)
    b = arena.insert((65.0, 50.0), (0.0, 0.0), 10.0, Kind.ROCK)
    arena.tick()
    assert arena.entity(a).kind is Kind.ROCK
    assert arena.entity(b).kind is Kind.ROCK
    assert arena.entity(a).velocity != (0.0, 0.0)


def test_exact_tangency_converts():
    arena = Arena(_config(), rng=random.Random(23))
    arena.insert((30.0, 50.0), (0.0, 0.0), 10.0, Kind.PAPER)
    arena.insert((50.0, 50.0), (0.0, 0.0), 10.0, Kind.ROCK)
    arena.tick()
    assert arena.counts()[Kind.PAPER] == 2


def test_apart_entities_do_not_interact():
    arena = Arena(_config(), rng=random.Random(24))
    a = arena.insert((20.0, 50.0), (0.0, 0.0), 10.0, Kind.PAPER)
    b = arena.insert((41.0, 50.0), (0.0, 0.0), 10.0, Kind.ROCK)
    arena.tick()
    assert arena.entity(a).kind is Kind.PAPER
    assert arena.entity(b).kind is Kind.ROCK


def test_conversions_keep_population_size():
    arena = Arena(SwarmConfig(width=300.0, height=300.0), rng=random.Random(25))
    arena.reset()
    total = len(arena)
    for _ in range(300):
        arena.tick()
    assert sum(arena.counts().values()) == total


# --- Ties and separation ---

def test_tie_keeps_kinds_and_separates():
    arena = Arena(_config())
    a = arena.insert((50.0, 50.0), (1.0, 0.0), 10.0, Kind.ROCK)
    b = arena.insert((68.0, 50.0), (-1.0, 0.0), 10.0, Kind.ROCK)
    arena.tick()
    en_a, en_b = arena.entity(a), arena.entity(b)
    assert en_a.kind is Kind.ROCK and en_b.kind is Kind.ROCK
    assert math.isclose(en_a.velocity[0], -0.8)
    assert math.isclose(en_b.velocity[0], 0.8)


def test_separating_pair_is_left_alone():
    arena = Arena(_config())
    a = arena.insert((50.0, 50.0), (-1.0, 0.0), 10.0, Kind.PAPER)
    b = arena.insert((60.0, 50.0), (1.0, 0.0), 10.0, Kind.PAPER)
    arena.tick()
    assert arena.entity(a).velocity == (-1.0, 0.0)
    assert arena.entity(b).velocity == (1.0, 0.0)


def test_coincident_centers_negate_velocities():
    arena = Arena(_config())
    a = arena.insert((50.0, 50.0), (1.0, 0.0), 10.0, Kind.SCISSORS)
    b = arena.insert((50.0, 50.0), (1.0, 0.0), 10.0, Kind.SCISSORS)
    arena.tick()
    assert arena.entity(a).velocity == (-1.0, -0.0)
    assert arena.entity(b).velocity == (-1.0, -0.0)


def test_restitution_comes_from_config():
    arena = Arena(_config(restitution=0.5))
    a = arena.insert((50.0, 50.0), (1.0, 0.0), 10.0, Kind.ROCK)
    b = arena.insert((68.0, 50.0), (-1.0, 0.0), 10.0, Kind.ROCK)
    arena.tick()
    assert math.isclose(arena.entity(a).velocity[0], 0.0, abs_tol=1e-12)
    assert math.isclose(arena.entity(b).velocity[0], 0.0, abs_tol=1e-12)


# --- Scan order ---

def _chain(arena: Arena) -> list[int]:
    # 0-1 and 1-2 touch, 0-2 do not.
    return [
        arena.insert((50.0, 50.0), (0.0, 0.0), 10.0, Kind.SCISSORS),
        arena.insert((68.0, 50.0), (0.0, 0.0), 10.0, Kind.PAPER),
        arena.insert((86.0, 50.0), (0.0, 0.0), 10.0, Kind.ROCK),
    ]


def test_cascade_conversions_are_visible_within_the_tick():
    arena = Arena(_config(width=200.0), rng=random.Random(26))
    ids = _chain(arena)
    arena.tick()
    # Paper becomes scissors, then loses to rock in the same tick.
    assert [arena.entity(i).kind for i in ids] == [Kind.SCISSORS, Kind.ROCK, Kind.ROCK]


def test_snapshot_mode_judges_on_start_of_tick_kinds():
    arena = Arena(_config(width=200.0, cascade=False), rng=random.Random(26))
    ids = _chain(arena)
    arena.tick()
    assert [arena.entity(i).kind for i in ids] == [
        Kind.SCISSORS, Kind.SCISSORS, Kind.PAPER
    ]


def test_snapshot_mode_randomizes_converted_velocity():
    arena = Arena(_config(width=200.0, cascade=False), rng=random.Random(27))
    ids = _chain(arena)
    arena.tick()
    assert arena.entity(ids[1]).velocity != (0.0, 0.0)
    assert arena.entity(ids[2]).velocity != (0.0, 0.0)


# --- Determinism ---

def test_same_seed_same_trajectory():
    def build() -> Arena:
        arena = Arena(SwarmConfig(width=400.0, height=300.0), rng=random.Random(99))
        arena.reset()
        return arena

    first, second = build(), build()
    for _ in range(200):
        first.tick()
        second.tick()
        assert first.snapshot() == second.snapshot()


def test_different_seeds_diverge():
    a = Arena(rng=random.Random(1))
    b = Arena(rng=random.Random(2))
    a.reset()
    b.reset()
    assert a.snapshot() != b.snapshot()
