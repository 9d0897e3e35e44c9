"""Unbiased Fisher-Yates shuffling with a pluggable random source."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, TypeVar


T = TypeVar("T")


def shuffle(items: Sequence[T], *, rng: Optional[random.Random] = None) -> List[T]:
    """Return a uniformly shuffled copy of ``items``.

    Walks the copy from the last index down to 1 and exchanges each slot
    with one drawn from ``[0, i]``. The input sequence is left untouched.
    ``rng`` only needs a ``randint`` method; seed it for reproducible output.
    """

    rng = rng or random.Random()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


__all__ = ["shuffle"]
