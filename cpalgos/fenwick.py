"""Fenwick (binary indexed) tree for prefix sums with point updates."""

from __future__ import annotations


class FenwickTree:
    """Prefix sums over positions ``1..size`` with point increments."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at 1-based ``index``."""
        size = len(self)
        if not 1 <= index <= size:
            raise IndexError(f"index {index} outside 1..{size}")
        while index <= size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions ``1..index``; index 0 gives 0."""
        if not 0 <= index <= len(self):
            raise IndexError(f"index {index} outside 0..{len(self)}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total