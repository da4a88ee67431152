"""Midpoint (second-order Runge-Kutta) integrators for scalar ODEs."""

from __future__ import annotations

import math
from collections.abc import Callable

Derivative = Callable[[float, float], float]


def _midpoint_step(f: Derivative, t: float, y: float, h: float) -> float:
    delta = h * f(t, y)
    return y + h * f(t + h / 2, y + delta / 2)


def midpoint(f: Derivative, t0: float, t1: float, h: float, y0: float) -> float:
    """Integrate ``y' = f(t, y)`` from ``t0`` to ``t1`` with fixed step ``h``.

    The last step is shortened so that it ends at ``t1``.
    """
    if h <= 0:
        raise ValueError("step must be positive")
    t, y = t0, y0
    while t < t1:
        if t + h > t1:
            h = t1 - t
        y = _midpoint_step(f, t, y, h)
        t += h
    return y


def adaptive_midpoint(
    f: Derivative, t0: float, t1: float, h0: float, y0: float, tol: float
) -> float:
    """Integrate ``y' = f(t, y)`` with a step size controlled to local error ``tol``.

    Each step is compared with two half steps; accepted steps are corrected by
    the error estimate and the step is rescaled by the cube root of the ratio
    of tolerance to error.
    """
    if h0 <= 0:
        raise ValueError("initial step must be positive")
    if tol <= 0:
        raise ValueError("tolerance must be positive")
    t, y, h = t0, y0, h0
    while t < t1:
        if t + h > t1:
            h = t1 - t
        full = _midpoint_step(f, t, y, h)
        half = h / 2
        halves = y
        t_half = t
        for _ in range(2):
            halves = _midpoint_step(f, t_half, halves, half)
            t_half += half
        error = (halves - full) / 3
        gamma = math.inf if error == 0 else (tol / abs(error)) ** (1 / 3)
        if gamma >= 1:
            y = halves + error
            t += h
        h *= gamma
    return y