"""Sort inputs for the benchmark driver.

Only the elementary insertion sort is provided; it is the subject being
timed, not a sorting library. The array generators reproduce the four input
shapes used in the study: random, ordered, reverse-ordered and partially
ordered (alternating blocks of ten ordered / reverse-ordered values).
"""

from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional, Sequence

PARTIAL_BLOCK = 10


def insertion_sort(xs: List, lo: int = 0, hi: Optional[int] = None) -> None:
    """Sort ``xs[lo:hi]`` in place."""
    if hi is None:
        hi = len(xs)
    for i in range(lo + 1, hi):
        j = i
        while j > lo and xs[j] < xs[j - 1]:
            xs[j], xs[j - 1] = xs[j - 1], xs[j]
            j -= 1


def is_sorted(xs: Sequence, lo: int = 0, hi: Optional[int] = None) -> bool:
    if hi is None:
        hi = len(xs)
    return all(xs[i - 1] <= xs[i] for i in range(lo + 1, hi))


def random_array(n: int, rng: Optional[random.Random] = None) -> List[int]:
    rng = rng or random.Random()
    return [rng.randint(-(2**31), 2**31 - 1) for _ in range(n)]


def ordered_array(n: int) -> List[int]:
    return list(range(n))


def reverse_ordered_array(n: int) -> List[int]:
    return [n - i for i in range(n)]


def partially_ordered_array(n: int) -> List[int]:
    """Blocks of ``PARTIAL_BLOCK`` taken alternately from the ordered and
    the reverse-ordered array."""
    return [i if (i // PARTIAL_BLOCK) % 2 == 0 else n - i for i in range(n)]


DISTRIBUTIONS: Dict[str, Callable[..., List[int]]] = {
    "random": random_array,
    "ordered": lambda n, rng=None: ordered_array(n),
    "reverse_ordered": lambda n, rng=None: reverse_ordered_array(n),
    "partially_ordered": lambda n, rng=None: partially_ordered_array(n),
}


def generate_array(distribution: str, n: int, rng: Optional[random.Random] = None) -> List[int]:
    """Build an input array of length ``n`` with the named shape.

    Raises:
        ValueError: For an unknown distribution name.
    """
    try:
        gen = DISTRIBUTIONS[distribution]
    except KeyError:
        raise ValueError(
            f"Unknown distribution: {distribution} (expected one of {sorted(DISTRIBUTIONS)})"
        ) from None
    return gen(n, rng)
