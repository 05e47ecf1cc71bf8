"""Backtracking enumerations: N-queens placements and subsets."""

from __future__ import annotations

from collections.abc import Iterator


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Each placement is a tuple whose ``i``-th entry is the 1-based column of the
    queen in row ``i + 1``. Placements come in lexicographic order.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")

    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    placement: list[int] = []

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row > n:
            yield tuple(placement)
            return
        for col in range(1, n + 1):
            if col in columns or col + row in diagonals or col - row in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(col + row)
            anti_diagonals.add(col - row)
            placement.append(col)
            yield from place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(col + row)
            anti_diagonals.discard(col - row)

    return place(1)


def subsets(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every subset of ``1..n`` as an increasing tuple, in lexicographic order."""
    if n < 0:
        raise ValueError(f"set size must be non-negative, got {n}")

    current: list[int] = []

    def extend(start: int) -> Iterator[tuple[int, ...]]:
        yield tuple(current)
        for item in range(start, n + 1):
            current.append(item)
            yield from extend(item + 1)
            current.pop()

    return extend(1)