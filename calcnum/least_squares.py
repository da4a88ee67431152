"""Linear least squares through the normal equations."""

from __future__ import annotations

import math
from collections.abc import Sequence

from calcnum.linear import gauss
from calcnum.matrix import dot, matmul, matvec, norm2, transpose

Vector = list[float]

PI = 3.14159265359


def least_squares(
    a: Sequence[Sequence[float]], b: Sequence[float]
) -> tuple[Vector, float]:
    """Solve ``a x = b`` in the least-squares sense.

    ``a`` has one row per equation and one column per unknown. Returns the
    solution and the 2-norm of the residual ``b - a x``.
    """
    if len(b) != len(a):
        raise ValueError("right-hand side does not match the number of rows")
    at = transpose(a)
    x = gauss(matmul(at, a), matvec(at, b))
    residual = [bi - v for bi, v in zip(b, matvec(a, x))]
    return x, norm2(residual)


def _periodic_basis(t: float) -> Vector:
    return [
        1.0,
        t,
        math.sin(2 * PI * t),
        math.cos(2 * PI * t),
        math.cos(4 * PI * t),
    ]


def fit_periodic(t: Sequence[float], v: Sequence[float]) -> tuple[Vector, float]:
    """Fit ``v = c0 + c1 t + c2 sin 2πt + c3 cos 2πt + c4 cos 4πt`` to samples.

    Returns the five coefficients and the 2-norm of the fit residual.
    """
    if len(t) != len(v):
        raise ValueError("sample times and values differ in length")
    return least_squares([_periodic_basis(ti) for ti in t], v)


def predict_periodic(coeffs: Sequence[float], t: float) -> float:
    """Evaluate the periodic model with the given coefficients at ``t``."""
    if len(coeffs) != 5:
        raise ValueError("the periodic model takes exactly five coefficients")
    return dot(coeffs, _periodic_basis(t))