from __future__ import annotations

import random
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

# Returns a uniform integer in [0, n).
RandBelow = Callable[[int], int]


def build_rng(seed: int | None = None) -> random.Random:
    """Return a random generator, deterministic when seeded."""
    return random.Random(seed)


def shuffle(items: Sequence[T], randbelow: RandBelow) -> list[T]:
    """
    Return a uniformly random permutation of `items` (Fisher-Yates).

    The input is left untouched.
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = randbelow(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def pick_one(items: Sequence[T], randbelow: RandBelow) -> T:
    """Return one element of `items`, each position equally likely."""
    if not items:
        raise ValueError("Cannot pick from an empty sequence")
    return items[randbelow(len(items))]
