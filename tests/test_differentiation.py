import math

import pytest

from calcnum.differentiation import derivative, optimal_step, richardson


def f(x):
    return math.cos(x) - 2 * math.sin(x)


def df(x):
    return -math.sin(x) - 2 * math.cos(x)


def test_derivative_of_sine_matches_cosine():
    assert derivative(math.sin, 0.7, 1e-5) == pytest.approx(math.cos(0.7), abs=1e-9)


def test_derivative_of_even_function_vanishes_at_origin():
    assert derivative(math.cos, 0.0, 0.1) == 0.0


def test_smaller_step_is_more_accurate():
    coarse = abs(derivative(f, 2.7, 0.1) - df(2.7))
    fine = abs(derivative(f, 2.7, 0.001) - df(2.7))
    assert fine < coarse


def test_richardson_improves_on_plain_difference():
    plain = abs(derivative(f, 2.7, 0.1) - df(2.7))
    extrapolated = abs(richardson(f, 2.7, 0.1) - df(2.7))
    assert extrapolated < plain


def test_richardson_close_to_analytic():
    assert richardson(f, 2.7, 1e-3) == pytest.approx(df(2.7), abs=1e-6)


def test_optimal_step_is_a_candidate_power_of_ten():
    step = optimal_step(f, df, 2.7)
    candidates = [10.0**-k for k in range(1, 12)]
    assert any(math.isclose(step, c, rel_tol=1e-9) for c in candidates)


def test_optimal_step_not_worse_than_extremes():
    step = optimal_step(f, df, 2.7)
    best = abs(derivative(f, 2.7, step) - df(2.7))
    assert best <= abs(derivative(f, 2.7, 0.1) - df(2.7))
    assert best <= abs(derivative(f, 2.7, 1e-11) - df(2.7))


def test_zero_step_raises():
    with pytest.raises(ZeroDivisionError):
        derivative(f, 1.0, 0.0)