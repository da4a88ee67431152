"""Polynomial interpolation in Newton form on Chebyshev nodes."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

Vector = list[float]


def chebyshev(n: int, a: float, b: float) -> Vector:
    """Return the ``n`` Chebyshev sample points of the interval ``[a, b]``."""
    if n < 1:
        raise ValueError("need at least one node")
    half_width = (b - a) / 2
    centre = (a + b) / 2
    return [
        half_width * math.cos((2 * i - 1) * math.pi / (2 * n)) + centre
        for i in range(1, n + 1)
    ]


def newton_coefficients(xs: Sequence[float], f: Callable[[float], float]) -> Vector:
    """Return the divided-difference coefficients of ``f`` on the nodes ``xs``."""
    if not xs:
        raise ValueError("need at least one node")
    if len(set(xs)) != len(xs):
        raise ValueError("interpolation nodes must be distinct")
    values = [f(x) for x in xs]
    coeffs = [values[0]]
    for level in range(1, len(xs)):
        values = [
            (upper - lower) / (xs[i + level] - xs[i])
            for i, (lower, upper) in enumerate(zip(values, values[1:]))
        ]
        coeffs.append(values[0])
    return coeffs


def newton_evaluate(xs: Sequence[float], coeffs: Sequence[float], x: float) -> float:
    """Evaluate the Newton-form interpolating polynomial at ``x``."""
    if not coeffs:
        raise ValueError("need at least one coefficient")
    if len(coeffs) != len(xs):
        raise ValueError("nodes and coefficients differ in number")
    result = 0.0
    product = 1.0
    for xi, bi in zip(xs, coeffs):
        result += bi * product
        product *= x - xi
    return result