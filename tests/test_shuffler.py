"""Unit tests for the Fisher-Yates shuffle."""

from __future__ import annotations

import random
import sys
from collections import Counter
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from shuffler import shuffle


class ScriptedRng:
    """Returns a fixed choice for every ``randint`` call and records the ranges."""

    def __init__(self, pick: str) -> None:
        self.pick = pick
        self.calls = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return low if self.pick == "low" else high


@pytest.mark.parametrize("items", [[], ["solo"], ["a", "b"], list("abcdefgh"), [1, 1, 2, 2, 3]])
def test_shuffle_preserves_elements(items):
    result = shuffle(items, rng=random.Random(42))
    assert len(result) == len(items)
    assert Counter(result) == Counter(items)


def test_shuffle_does_not_mutate_input():
    names = ("Alice", "Bob", "Carol", "Dave")
    original = list(names)
    listed = list(names)
    result = shuffle(listed, rng=random.Random(1))
    assert listed == original
    assert result is not listed


def test_shuffle_is_deterministic_for_a_seed():
    names = [f"Person {i}" for i in range(20)]
    assert shuffle(names, rng=random.Random(99)) == shuffle(names, rng=random.Random(99))


def test_shuffle_draws_from_descending_ranges():
    rng = ScriptedRng("low")
    result = shuffle(["a", "b", "c", "d"], rng=rng)
    assert rng.calls == [(0, 3), (0, 2), (0, 1)]
    assert result == ["b", "c", "d", "a"]


def test_shuffle_keeps_order_when_every_draw_is_the_current_index():
    rng = ScriptedRng("high")
    assert shuffle(["a", "b", "c", "d"], rng=rng) == ["a", "b", "c", "d"]


def test_shuffle_can_move_elements():
    items = list(range(6))
    rng = random.Random(5)
    outcomes = {tuple(shuffle(items, rng=rng)) for _ in range(50)}
    assert any(outcome != tuple(items) for outcome in outcomes)


def test_shuffle_is_approximately_uniform_for_three_items():
    rng = random.Random(2024)
    trials = 6000
    counts = Counter(tuple(shuffle(["a", "b", "c"], rng=rng)) for _ in range(trials))

    assert len(counts) == 6
    expected = trials / 6
    for permutation, count in counts.items():
        assert abs(count - expected) < expected * 0.1, permutation


def test_shuffle_defaults_to_unseeded_rng():
    result = shuffle(["x", "y", "z"])
    assert sorted(result) == ["x", "y", "z"]
