"""Simple pendulum integrated with classical fourth-order Runge-Kutta."""

from __future__ import annotations

import math

PI = math.pi
GRAVITY = 10.0
LENGTH = 15.0
STEP = 1e-3

_CROSSING_EVENTS = 10


def _acceleration(theta: float) -> float:
    return (-GRAVITY / LENGTH) * math.sin(theta)


def rk4_step(t: float, h: float, theta: float, w: float) -> tuple[float, float, float]:
    """Advance angle ``theta`` and angular velocity ``w`` by one RK4 step.

    Returns the new time, angle and angular velocity.
    """
    kt1 = h * w
    kw1 = h * _acceleration(theta)
    kt2 = h * (w + kw1 / 2)
    kw2 = h * _acceleration(theta + kt1 / 2)
    kt3 = h * (w + kw2 / 2)
    kw3 = h * _acceleration(theta + kt2 / 2)
    kt4 = h * (w + kw3)
    kw4 = h * _acceleration(theta + kt3)
    new_w = w + (kw1 + 2 * kw2 + 2 * kw3 + kw4) / 6
    new_theta = theta + (kt1 + 2 * kt2 + 2 * kt3 + kt4) / 6
    return t + h, new_theta, new_w


def period(theta0: float) -> float:
    """Estimate the period for release from rest at angle ``theta0``.

    The pendulum is stepped with :data:`STEP` until the angular velocity has
    changed sign (or touched zero) ten times; the last crossing time is found
    by linear interpolation, doubled and divided by ten.
    """
    if theta0 == 0:
        raise ValueError("a pendulum released at rest at zero angle does not swing")
    t, theta, w = 0.0, theta0, 0.0
    t_prev, w_prev = t, w
    remaining = _CROSSING_EVENTS
    while remaining:
        t_prev, w_prev = t, w
        t, theta, w = rk4_step(t, STEP, theta, w)
        if w_prev * w <= 0:
            remaining -= 1
    crossing = t_prev + abs(w_prev) / (abs(w_prev) + abs(w)) * (t - t_prev)
    return 2 * crossing / _CROSSING_EVENTS


def small_angle_period(theta0: float) -> float:
    """Return the small-angle period, which does not depend on ``theta0``."""
    return 2 * PI * math.sqrt(LENGTH / GRAVITY)