"""Parsing and validation of raw name lists and group counts."""

from __future__ import annotations

import math
from typing import Tuple, Union

from group_types import InvalidInputError


DEFAULT_SEPARATOR = ","


def parse_names(raw: str, separator: str = DEFAULT_SEPARATOR) -> Tuple[str, ...]:
    """Split ``raw`` on ``separator``, trimming whitespace and dropping blanks."""

    return tuple(token.strip() for token in raw.split(separator) if token.strip())


def validate_names(raw: str, separator: str = DEFAULT_SEPARATOR) -> Tuple[str, ...]:
    names = parse_names(raw, separator)
    if not names:
        raise InvalidInputError("Please enter at least one name")
    if len(names) == 1:
        raise InvalidInputError("Please enter at least two names to shuffle")
    return names


def parse_group_count(raw: Union[str, int], name_count: int) -> int:
    """Turn ``raw`` into a group count usable for ``name_count`` names.

    Rules are checked in order: a positive integer, no more groups than
    names, and at least two groups.
    """

    if isinstance(raw, bool):
        raise InvalidInputError("Please enter a positive number")
    if isinstance(raw, int):
        count = raw
    else:
        try:
            count = int(str(raw).strip())
        except ValueError:
            raise InvalidInputError("Please enter a positive number") from None
    if count <= 0:
        raise InvalidInputError("Please enter a positive number")
    if count > name_count:
        raise InvalidInputError(
            "Number of groups can't be larger than the number of names "
            f"({name_count})"
        )
    if count == 1:
        raise InvalidInputError("Please enter at least 2 groups for shuffling")
    return count


def suggest_group_count(name_count: int) -> int:
    """Default offered at the group-count prompt: min(ceil(n / 3), floor(n / 2))."""

    return min(math.ceil(name_count / 3), name_count // 2)


__all__ = [
    "DEFAULT_SEPARATOR",
    "parse_group_count",
    "parse_names",
    "suggest_group_count",
    "validate_names",
]
