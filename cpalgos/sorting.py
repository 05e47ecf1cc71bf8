"""Custom orderings for pairs and records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from operator import itemgetter
from typing import Any


@dataclass(frozen=True)
class Record:
    """A measurement with a height, a width and a score value."""

    height: int
    width: int
    value: float


def sort_pairs_by_second(pairs: Iterable[tuple[Any, Any]]) -> list[tuple[Any, Any]]:
    """Return the pairs ordered by their second element, ascending."""
    return sorted(pairs, key=itemgetter(1))


def sort_records(records: Iterable[Record]) -> list[Record]:
    """Order by value descending, then height descending, then width ascending."""
    return sorted(records, key=lambda r: (-r.value, -r.height, r.width))