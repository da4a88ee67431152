"""Numerical integration: composite, adaptive and Gauss-Legendre rules."""

from __future__ import annotations

import math
from collections.abc import Callable

Function = Callable[[float], float]

_GAUSS2 = ((-math.sqrt(1 / 3), 1.0), (math.sqrt(1 / 3), 1.0))
_GAUSS3 = ((-math.sqrt(3 / 5), 5 / 9), (0.0, 8 / 9), (math.sqrt(3 / 5), 5 / 9))


def _check_steps(n: int) -> None:
    if n < 1:
        raise ValueError("number of subintervals must be at least 1")


def simpson(f: Function, a: float, b: float, n: int) -> float:
    """Composite Simpson rule over ``n`` subintervals of ``[a, b]``."""
    _check_steps(n)
    h = (b - a) / n
    total = 0.0
    right = f(a)
    for i in range(n):
        left = right
        right = f(a + h * (i + 1))
        total += (h / 6) * (left + 4 * f(a + h * i + h / 2) + right)
    return total


def midpoint(f: Function, a: float, b: float, n: int) -> float:
    """Composite midpoint rule over ``n`` subintervals of ``[a, b]``."""
    _check_steps(n)
    h = (b - a) / n
    total = 0.0
    right = a
    for i in range(n):
        left = right
        right = a + h * (i + 1)
        total += h * f((left + right) / 2)
    return total


def double_simpson(f: Function, a: float, b: float) -> tuple[float, float]:
    """Simpson on ``[a, b]`` compared with Simpson on its two halves.

    Returns the corrected estimate of the integral and the estimated error.
    """
    c = (a + b) / 2
    h = c - a
    left = (h / 6) * (f(a) + 4 * f((a + c) / 2) + f(c))
    right = (h / 6) * (f(c) + 4 * f((c + b) / 2) + f(b))
    whole = ((b - a) / 6) * (f(a) + 4 * f((a + b) / 2) + f(b))
    error = abs(whole - left - right) / 15
    return left + right - error, error


def adaptive_simpson(f: Function, a: float, b: float, tol: float) -> float:
    """Integrate by splitting ``[a, b]`` until each piece's error is below its share of ``tol``."""
    value, error = double_simpson(f, a, b)
    if error < tol:
        return value
    c = (a + b) / 2
    return adaptive_simpson(f, a, c, tol / 2) + adaptive_simpson(f, c, b, tol / 2)


def _gauss(f: Function, a: float, b: float, rule: tuple[tuple[float, float], ...]) -> float:
    half = (b - a) / 2
    return sum(weight * f(((b - a) * node + (b + a)) / 2) * half for node, weight in rule)


def gauss2(f: Function, a: float, b: float) -> float:
    """Two-point Gauss-Legendre quadrature on ``[a, b]``."""
    return _gauss(f, a, b, _GAUSS2)


def gauss3(f: Function, a: float, b: float) -> float:
    """Three-point Gauss-Legendre quadrature on ``[a, b]``."""
    return _gauss(f, a, b, _GAUSS3)