"""Round-robin distribution of shuffled names into balanced groups."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, TypeVar

from group_types import GroupSet
from shuffler import shuffle


T = TypeVar("T")


def distribute(items: Sequence[T], group_count: int) -> List[List[T]]:
    """Deal ``items`` into ``group_count`` groups, item ``i`` to group ``i % group_count``."""

    if group_count <= 0:
        raise ValueError("group_count must be positive")
    if group_count > len(items):
        raise ValueError("Not enough items to fill every group")
    groups: List[List[T]] = [[] for _ in range(group_count)]
    for index, item in enumerate(items):
        groups[index % group_count].append(item)
    return groups


def create_groups(
    names: Sequence[str],
    group_count: int,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> GroupSet:
    """Shuffle ``names`` and split them into ``group_count`` balanced groups.

    ``seed`` is only recorded on the result; pass a seeded ``rng`` to make
    the shuffle itself reproducible.
    """

    shuffled = shuffle(names, rng=rng)
    return GroupSet.from_lists(distribute(shuffled, group_count), seed=seed)


__all__ = ["create_groups", "distribute"]
