"""Segment trees for range sums: point assignment and lazy range addition."""

from __future__ import annotations

from collections.abc import Iterable


def _check_range(left: int, right: int, size: int) -> None:
    if left > right:
        raise ValueError(f"left ({left}) must not exceed right ({right})")
    if left < 0 or right >= size:
        raise IndexError(f"range {left}..{right} outside 0..{size - 1}")


class SegmentTree:
    """Range sums over a fixed sequence with point assignment, 0-based inclusive ranges."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        self._tree = [0] * (4 * max(self._size, 1))
        if items:
            self._build(1, 0, self._size - 1, items)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, begin: int, end: int, items: list[int]) -> None:
        if begin == end:
            self._tree[node] = items[begin]
            return
        mid = (begin + end) // 2
        self._build(2 * node, begin, mid, items)
        self._build(2 * node + 1, mid + 1, end, items)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _query(self, node: int, begin: int, end: int, left: int, right: int) -> int:
        if left > end or right < begin:
            return 0
        if left <= begin and end <= right:
            return self._tree[node]
        mid = (begin + end) // 2
        return self._query(2 * node, begin, mid, left, right) + self._query(
            2 * node + 1, mid + 1, end, left, right
        )

    def _update(self, node: int, begin: int, end: int, index: int, value: int) -> None:
        if begin == end:
            self._tree[node] = value
            return
        mid = (begin + end) // 2
        if index <= mid:
            self._update(2 * node, begin, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, end, index, value)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions ``left..right``."""
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right)

    def update(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value``."""
        _check_range(index, index, self._size)
        self._update(1, 0, self._size - 1, index, value)


class LazySegmentTree:
    """Range sums over ``size`` zero-initialised positions with range addition."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._size = size
        self._tree = [0] * (4 * max(size, 1))
        self._pending = [0] * (4 * max(size, 1))

    def __len__(self) -> int:
        return self._size

    def _add(self, node: int, begin: int, end: int, left: int, right: int, value: int) -> None:
        if left > end or right < begin:
            return
        if left <= begin and end <= right:
            self._tree[node] += (end - begin + 1) * value
            self._pending[node] += value
            return
        mid = (begin + end) // 2
        self._add(2 * node, begin, mid, left, right, value)
        self._add(2 * node + 1, mid + 1, end, left, right, value)
        self._tree[node] = (
            self._tree[2 * node]
            + self._tree[2 * node + 1]
            + (end - begin + 1) * self._pending[node]
        )

    def _query(
        self, node: int, begin: int, end: int, left: int, right: int, carry: int
    ) -> int:
        if left > end or right < begin:
            return 0
        if left <= begin and end <= right:
            return self._tree[node] + carry * (end - begin + 1)
        mid = (begin + end) // 2
        carry += self._pending[node]
        return self._query(2 * node, begin, mid, left, right, carry) + self._query(
            2 * node + 1, mid + 1, end, left, right, carry
        )

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every position in ``left..right``."""
        _check_range(left, right, self._size)
        self._add(1, 0, self._size - 1, left, right, value)

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions ``left..right``."""
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right, 0)