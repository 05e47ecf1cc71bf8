"""Array algorithms: inversion counting and sliding-window maxima."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any


def _sort_and_count(items: Sequence[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return list(items), 0
    middle = len(items) // 2
    left, left_count = _sort_and_count(items[:middle])
    right, right_count = _sort_and_count(items[middle:])

    merged: list[Any] = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(values: Iterable[Any]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]`` by merge sort."""
    _, inversions = _sort_and_count(list(values))
    return inversions


def sliding_window_max(values: Iterable[Any], k: int) -> list[Any]:
    """Return the maximum of every contiguous window of length ``k``."""
    if k <= 0:
        raise ValueError(f"window size must be positive, got {k}")
    items = list(values)
    window: deque[int] = deque()
    result = []
    for position, value in enumerate(items):
        while window and items[window[-1]] <= value:
            window.pop()
        window.append(position)
        if window[0] <= position - k:
            window.popleft()
        if position >= k - 1:
            result.append(items[window[0]])
    return result