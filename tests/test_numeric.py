import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.numeric import bisect_sqrt


@given(st.floats(min_value=0, max_value=1e6, allow_nan=False, allow_infinity=False))
def test_close_to_true_root(x):
    assert math.isclose(bisect_sqrt(x), math.sqrt(x), rel_tol=1e-9, abs_tol=1e-6)


@given(st.integers(0, 1000))
def test_perfect_squares(k):
    assert math.isclose(bisect_sqrt(k * k), k, abs_tol=1e-6)


def test_fraction_below_one():
    assert math.isclose(bisect_sqrt(0.25), 0.5, abs_tol=1e-6)


@given(st.floats(min_value=0, max_value=100, allow_nan=False))
def test_looser_tolerance_is_honoured(x):
    assert abs(bisect_sqrt(x, 1e-3) - math.sqrt(x)) <= 1e-3


def test_huge_input_terminates():
    assert math.isclose(bisect_sqrt(1e20), 1e10, rel_tol=1e-12)


def test_negative_rejected():
    with pytest.raises(ValueError):
        bisect_sqrt(-4)


def test_non_positive_eps_rejected():
    with pytest.raises(ValueError):
        bisect_sqrt(4, 0)