"""Root finding by the secant method and inverse quadratic interpolation."""

from __future__ import annotations

from collections.abc import Callable

Function = Callable[[float], float]

MAX_ITERATIONS = 50


class ConvergenceError(ArithmeticError):
    """Raised when an iterative method fails to converge."""


def _tolerance(digits: int) -> float:
    return 0.5 * 10.0 ** (-digits)


def _secant_step(x0: float, x1: float, y0: float, y1: float) -> float:
    try:
        return x1 - y1 * (x1 - x0) / (y1 - y0)
    except ZeroDivisionError as exc:
        raise ConvergenceError("secant through two equal function values") from exc


def secant(f: Function, x0: float, x1: float, digits: int) -> tuple[float, int]:
    """Find a root of ``f`` by the secant method from ``x0`` and ``x1``.

    Stops once ``|f(x)| < 0.5 * 10**-digits``. Returns the root and the
    number of iterations; raises :class:`ConvergenceError` after 50.
    """
    tol = _tolerance(digits)
    y0, y1 = f(x0), f(x1)
    x2 = _secant_step(x0, x1, y0, y1)
    y2 = f(x2)
    iterations = 1
    while abs(y2) >= tol:
        if iterations == MAX_ITERATIONS:
            raise ConvergenceError(f"no convergence in {MAX_ITERATIONS} iterations")
        x0, y0, x1, y1 = x1, y1, x2, y2
        x2 = _secant_step(x0, x1, y0, y1)
        y2 = f(x2)
        iterations += 1
    return x2, iterations


def _iqi_step(
    x0: float, x1: float, x2: float, y0: float, y1: float, y2: float
) -> float:
    try:
        return (
            x0 * y1 * y2 / ((y0 - y1) * (y0 - y2))
            + x1 * y0 * y2 / ((y1 - y0) * (y1 - y2))
            + x2 * y0 * y1 / ((y2 - y0) * (y2 - y1))
        )
    except ZeroDivisionError as exc:
        raise ConvergenceError("interpolation through repeated function values") from exc


def inverse_quadratic(
    f: Function, x0: float, x1: float, x2: float, digits: int
) -> tuple[float, int]:
    """Find a root of ``f`` by inverse quadratic interpolation.

    The first estimate is accepted when its magnitude is already below the
    tolerance; later ones when ``|f|`` is. Returns the root and the number of
    iterations; raises :class:`ConvergenceError` after 50.
    """
    tol = _tolerance(digits)
    y0, y1, y2 = f(x0), f(x1), f(x2)
    c = _iqi_step(x0, x1, x2, y0, y1, y2)
    y3 = f(c)
    iterations = 1
    error = abs(c)
    while error >= tol:
        if iterations == MAX_ITERATIONS:
            raise ConvergenceError(f"no convergence in {MAX_ITERATIONS} iterations")
        x0, x1, x2 = x1, x2, c
        y0, y1, y2 = y1, y2, y3
        c = _iqi_step(x0, x1, x2, y0, y1, y2)
        y3 = f(c)
        error = abs(y3)
        iterations += 1
    return c, iterations