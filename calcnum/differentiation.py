"""Finite-difference approximations of first derivatives."""

from __future__ import annotations

from collections.abc import Callable

Function = Callable[[float], float]

_CANDIDATE_STEPS = 11


def derivative(f: Function, x: float, h: float) -> float:
    """Approximate ``f'(x)`` by the central difference with step ``h``."""
    return (f(x + h) - f(x - h)) / (2 * h)


def optimal_step(f: Function, df: Function, x: float) -> float:
    """Pick the step among 10**-1 .. 10**-11 whose central difference best matches ``df(x)``.

    Ties keep the larger step.
    """
    exact = df(x)
    best_step = 0.1
    best_error = abs(derivative(f, x, best_step) - exact)
    h = 1.0
    for _ in range(_CANDIDATE_STEPS):
        h *= 0.1
        error = abs(derivative(f, x, h) - exact)
        if error < best_error:
            best_error = error
            best_step = h
    return best_step


def richardson(f: Function, x: float, h: float) -> float:
    """Combine central differences with steps ``h`` and ``h/2`` by extrapolation."""
    weight = 2.0**3
    return (weight * derivative(f, x, h / 2) - derivative(f, x, h)) / (weight - 1)