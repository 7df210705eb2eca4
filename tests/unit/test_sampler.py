"""Tests for random sampling of matched books.

Sampling is random on purpose: repeated requests with the same criteria
should surface different books when more than three match. These tests
check bounds and distribution rather than exact picks.
"""

import random
from collections import Counter
from itertools import permutations

import pytest

from book_finder.sampler import sample_books, shuffled


class TestShuffled:
    """Test the Fisher-Yates shuffle."""

    def test_is_a_permutation(self, rng):
        items = list(range(20))
        result = shuffled(items, rng)
        assert sorted(result) == items

    def test_does_not_mutate_input(self, rng):
        items = ("a", "b", "c", "d")
        shuffled(items, rng)
        assert items == ("a", "b", "c", "d")

    def test_empty_and_single(self, rng):
        assert shuffled([], rng) == []
        assert shuffled(["only"], rng) == ["only"]

    def test_same_seed_same_order(self):
        items = list(range(10))
        assert shuffled(items, random.Random(5)) == shuffled(items, random.Random(5))

    def test_all_orderings_equally_likely(self):
        """Each of the 3! orderings should appear about 1/6 of the time."""
        rng = random.Random(2024)
        trials = 60_000
        counts = Counter(tuple(shuffled("abc", rng)) for _ in range(trials))

        assert set(counts) == set(permutations("abc"))
        expected = trials / 6
        for ordering, count in counts.items():
            assert abs(count - expected) < expected * 0.05, ordering


class TestSampleBooks:
    """Test bounded sampling."""

    def test_returns_at_most_k(self, rng):
        assert len(sample_books(list(range(10)), 3, rng)) == 3

    def test_results_are_distinct_members(self, rng):
        items = list(range(10))
        result = sample_books(items, 3, rng)
        assert len(set(result)) == 3
        assert set(result) <= set(items)

    @pytest.mark.parametrize("size", [0, 1, 2, 3])
    def test_small_input_is_returned_whole(self, rng, size):
        items = [f"book-{i}" for i in range(size)]
        assert sorted(sample_books(items, 3, rng)) == items

    def test_default_k_is_three(self, rng):
        assert len(sample_books(list(range(8)), rng=rng)) == 3

    @pytest.mark.parametrize("k", [0, -1])
    def test_non_positive_k_returns_nothing(self, rng, k):
        assert sample_books([1, 2, 3], k, rng) == []

    def test_works_without_rng(self):
        assert len(sample_books(list(range(5)))) == 3

    def test_every_item_can_be_picked(self):
        """With 8 candidates and 3 picks, each item lands in a sample 3/8 of the time."""
        rng = random.Random(99)
        items = list(range(8))
        trials = 40_000
        counts = Counter()
        for _ in range(trials):
            counts.update(sample_books(items, 3, rng))

        expected = trials * 3 / 8
        for item in items:
            assert abs(counts[item] - expected) < expected * 0.05, item

    def test_repeated_calls_vary(self):
        rng = random.Random(3)
        items = list(range(8))
        picks = {tuple(sample_books(items, 3, rng)) for _ in range(50)}
        assert len(picks) > 1
