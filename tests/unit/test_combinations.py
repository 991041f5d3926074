"""Tests for subset generation."""
import pytest
from holdem_trainer.core.combinations import combinations, count_combinations
from holdem_trainer.core.errors import InvalidInputError


def test_seven_choose_five():
    """Seven items yield 21 distinct order-preserving five-subsets."""
    items = list("ABCDEFG")
    subsets = combinations(items, 5)
    assert len(subsets) == 21
    assert len(set(subsets)) == 21
    for subset in subsets:
        assert list(subset) == sorted(subset, key=items.index)


def test_combination_order():
    """Subsets come out in lexicographic index order."""
    subsets = combinations(["a", "b", "c", "d"], 2)
    assert subsets == [
        ("a", "b"), ("a", "c"), ("a", "d"),
        ("b", "c"), ("b", "d"),
        ("c", "d"),
    ]


def test_k_equals_length():
    """Choosing every item gives the one full sequence."""
    assert combinations([1, 2, 3], 3) == [(1, 2, 3)]


def test_k_exceeds_length():
    """Choosing more items than exist gives nothing."""
    assert combinations([1, 2, 3], 4) == []


@pytest.mark.parametrize("k", [0, -1])
def test_non_positive_k_rejected(k):
    """Subset sizes below one are not supported."""
    with pytest.raises(InvalidInputError):
        combinations([1, 2, 3], k)


def test_count_combinations():
    """C(n, k) matches the generator."""
    assert count_combinations(47, 2) == 1081
    assert count_combinations(7, 5) == len(combinations(range(7), 5))
