"""Numeric root finding by bisection."""

from __future__ import annotations

EPS = 1e-9


def bisect_sqrt(x: float, eps: float = EPS) -> float:
    """Approximate the square root of ``x`` by bisecting until the bracket is below ``eps``."""
    if x < 0:
        raise ValueError(f"cannot take the square root of a negative number: {x}")
    if eps <= 0:
        raise ValueError("eps must be positive")

    lower, upper = 0.0, max(float(x), 1.0)
    mid = (lower + upper) / 2
    while upper - lower >= eps:
        mid = (lower + upper) / 2
        if mid in (lower, upper):
            break
        if mid * mid >= x:
            upper = mid
        else:
            lower = mid
    return mid