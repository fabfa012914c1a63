"""Ranking of fuzzy search matches over shell history."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Iterator, Union

DEFAULT_LIMIT = 200

PathLike = Union[str, PurePosixPath]


def path_dist(a: PathLike, b: PathLike) -> int:
    """Number of path components to climb and descend to get from ``a`` to ``b``."""
    a_parts = list(PurePosixPath(a).parts) if str(a) else []
    b_parts = list(PurePosixPath(b).parts) if str(b) else []
    climbed = 0
    while b_parts[: len(a_parts)] != a_parts:
        climbed += 1
        a_parts.pop()
    return len(b_parts) - len(a_parts) + climbed


def rank_score(
    match_score: float,
    count: int,
    begin: int,
    path_distance: int,
    age_seconds: float,
) -> float:
    """Combine a fuzzy match score with usage hints; lower is better.

    Frequent commands, matches near the start of the command, nearby
    directories and recent use all push the score down.
    """
    duration = math.log2(age_seconds) if age_seconds > 0 else math.nan
    if not math.isfinite(duration) or duration <= 1.0:
        duration = 1.0
    count_weight = math.log2(count + 8.0)
    begin_weight = math.log2(begin + 16.0)
    path_weight = math.log2(path_distance + 8.0)
    return -match_score * count_weight / path_weight / duration / begin_weight


@dataclass
class _Entry:
    score: float
    command: str
    item: Any


@dataclass
class RankedResults:
    """Results kept sorted by score, one per command, at most ``limit`` long."""

    limit: int = DEFAULT_LIMIT
    _entries: list[_Entry] = field(default_factory=list, repr=False)

    def add(self, item: Any, command: str, score: float) -> bool:
        """Offer ``item``; return whether it was kept.

        A command already present with a better or equal score blocks the new
        item; a worse-scored copy is replaced.
        """
        entries = self._entries
        for i, entry in enumerate(entries):
            if entry.score > score:
                entries.insert(i, _Entry(score, command, item))
                for j in range(i + 1, len(entries)):
                    if entries[j].command == command:
                        del entries[j]
                        break
                if len(entries) > self.limit:
                    entries.pop()
                return True
            if entry.command == command:
                return False
        if len(entries) < self.limit:
            entries.append(_Entry(score, command, item))
            return True
        return False

    @property
    def items(self) -> list[Any]:
        return [entry.item for entry in self._entries]

    @property
    def scores(self) -> list[float]:
        return [entry.score for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)