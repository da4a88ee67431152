"""One-dimensional minimisation by golden-section search and parabolic interpolation."""

from __future__ import annotations

import math
from collections.abc import Callable

from calcnum.roots import ConvergenceError

Function = Callable[[float], float]

MAX_PARABOLIC_ITERATIONS = 100


def golden_section(f: Function, a: float, b: float, tol: float) -> tuple[float, int]:
    """Minimise ``f`` on ``[a, b]`` by golden-section search.

    Stops once the two interior values differ by at most ``tol``. Returns the
    estimated minimiser and the number of iterations.
    """
    g = (math.sqrt(5) - 1) / 2
    x1 = a + (1 - g) * (b - a)
    x2 = a + g * (b - a)
    f1, f2 = f(x1), f(x2)
    iterations = 0
    while abs(f1 - f2) > tol:
        if f1 < f2:
            b = x2
            x2, f2 = x1, f1
            x1 = a + (1 - g) * (b - a)
            f1 = f(x1)
        else:
            a = x1
            x1, f1 = x2, f2
            x2 = a + g * (b - a)
            f2 = f(x2)
        iterations += 1
    return (x1 + x2) / 2, iterations


def parabolic(
    f: Function, r: float, s: float, t: float, tol: float
) -> tuple[float, int]:
    """Minimise ``f`` by successive parabolic interpolation from ``r``, ``s``, ``t``.

    Stops once the two newest values differ by at most ``tol``. Returns the
    estimated minimiser and the number of iterations; raises
    :class:`ConvergenceError` after 100 iterations or on collinear points.
    """
    fr, fs, ft = f(r), f(s), f(t)
    iterations = 0
    while abs(fs - ft) > tol:
        denominator = 2 * ((s - r) * (ft - fs) - (fs - fr) * (t - s))
        if denominator == 0:
            raise ConvergenceError("interpolation points are collinear")
        x = (r + s) / 2 - (fs - fr) * (t - r) * (t - s) / denominator
        r, fr = s, fs
        s, fs = t, ft
        t, ft = x, f(x)
        iterations += 1
        if iterations == MAX_PARABOLIC_ITERATIONS:
            raise ConvergenceError(
                f"no convergence in {MAX_PARABOLIC_ITERATIONS} iterations"
            )
    return (s + t) / 2, iterations