"""Dynamic programming: Fibonacci numbers and the 0/1 knapsack."""

from __future__ import annotations

from collections.abc import Iterable


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError(f"index must be non-negative, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def knapsack(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Return the best total value of items whose total weight fits in ``capacity``.

    Each item may be taken at most once.
    """
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    if capacity <= 0:
        return 0

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]