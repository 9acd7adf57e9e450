"""Tests for the cyclic dominance rule."""

import itertools

from swarm.dominance import BEATS, beats, winner
from swarm.types import Kind


# --- Cycle ---

def test_rock_beats_scissors():
    assert winner(Kind.ROCK, Kind.SCISSORS) is Kind.ROCK


def test_scissors_beat_paper():
    assert winner(Kind.SCISSORS, Kind.PAPER) is Kind.SCISSORS


def test_paper_beats_rock():
    assert winner(Kind.PAPER, Kind.ROCK) is Kind.PAPER


def test_no_other_directed_relation_holds():
    expected = {
        (Kind.ROCK, Kind.SCISSORS),
        (Kind.SCISSORS, Kind.PAPER),
        (Kind.PAPER, Kind.ROCK),
    }
    actual = {(a, b) for a, b in itertools.product(Kind, Kind) if beats(a, b)}
    assert actual == expected


def test_table_is_a_single_cycle():
    kind = Kind.ROCK
    seen = []
    for _ in range(3):
        seen.append(kind)
        kind = BEATS[kind]
    assert kind is Kind.ROCK
    assert set(seen) == set(Kind)


# --- Totality and symmetry ---

def test_same_kind_is_a_tie():
    for kind in Kind:
        assert winner(kind, kind) is None


def test_order_does_not_change_the_winner():
    for a, b in itertools.permutations(Kind, 2):
        assert winner(a, b) == winner(b, a)


def test_every_distinct_pair_has_exactly_one_winner():
    for a, b in itertools.combinations(Kind, 2):
        won = winner(a, b)
        assert won in (a, b)
        assert beats(a, b) != beats(b, a)
