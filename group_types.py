"""Shared dataclasses and exceptions describing names, groups, and input errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple


class InvalidInputError(ValueError):
    """Raised when a name list or group count fails validation."""


class UserCancelled(Exception):
    """Raised when the user interrupts an interactive prompt."""


@dataclass(frozen=True)
class GroupSet:
    """The final, immutable result of one shuffle: ``groups`` in display order."""

    groups: Tuple[Tuple[str, ...], ...]
    seed: Optional[int] = None

    @classmethod
    def from_lists(
        cls, groups: Sequence[Sequence[str]], *, seed: Optional[int] = None
    ) -> "GroupSet":
        return cls(groups=tuple(tuple(group) for group in groups), seed=seed)

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        return iter(self.groups)

    @property
    def total(self) -> int:
        return sum(len(group) for group in self.groups)

    @property
    def sizes(self) -> Tuple[int, ...]:
        return tuple(len(group) for group in self.groups)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "total": self.total,
            "group_count": len(self.groups),
            "groups": [list(group) for group in self.groups],
        }


__all__ = ["GroupSet", "InvalidInputError", "UserCancelled"]
