"""
Random sampling of matched books.

Recommendations are drawn from a uniformly random permutation of the matches
(Fisher-Yates), so repeated requests with identical criteria can return a
different selection whenever more than ``k`` books match.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

DEFAULT_MAX_RESULTS = 3


def shuffled(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of items; the input is left untouched."""
    rng = rng or random.Random()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def sample_books(
    books: Sequence[T],
    k: int = DEFAULT_MAX_RESULTS,
    rng: random.Random | None = None,
) -> list[T]:
    """
    Pick up to k books at random.

    Args:
        books: Filtered books to choose from
        k: Maximum number of books to return
        rng: Random source; a fresh one is used when omitted

    Returns:
        min(k, len(books)) distinct books in random order.
    """
    n = max(0, min(k, len(books)))
    if n == 0:
        return []
    return shuffled(books, rng)[:n]
