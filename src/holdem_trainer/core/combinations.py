"""Order-preserving k-subset generation."""
import itertools
import math
from typing import List, Sequence, Tuple, TypeVar

from .errors import InvalidInputError

T = TypeVar('T')


def combinations(items: Sequence[T], k: int) -> List[Tuple[T, ...]]:
    """
    Return every k-element subset of ``items`` as a list of tuples.

    Each subset keeps the relative order of ``items``, and subsets come out in
    lexicographic index order, so 7 cards with ``k=5`` always yield the same
    21 tuples in the same sequence.

    ``k`` must be at least 1. When ``k`` equals ``len(items)`` the result is
    the single full sequence; when it exceeds ``len(items)`` the result is empty.

    Raises:
        InvalidInputError: If ``k`` is less than 1
    """
    if k < 1:
        raise InvalidInputError(f"Subset size must be at least 1, got {k}")
    return list(itertools.combinations(items, k))


def count_combinations(n: int, k: int) -> int:
    """Number of k-subsets of n items, C(n, k)."""
    return math.comb(n, k)
