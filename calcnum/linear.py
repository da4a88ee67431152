"""Direct solvers for square linear systems."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector = list[float]
Matrix = list[list[float]]


def _square_copy(a: Sequence[Sequence[float]]) -> Matrix:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    return [[float(value) for value in row] for row in a]


def _back_substitute(upper: Sequence[Sequence[float]], rhs: Sequence[float]) -> Vector:
    n = len(upper)
    x = [0.0] * n
    for i in reversed(range(n)):
        s = sum(upper[i][j] * x[j] for j in range(i + 1, n))
        x[i] = (rhs[i] - s) / upper[i][i]
    return x


def eliminate(
    a: Sequence[Sequence[float]], b: Sequence[float]
) -> tuple[Matrix, Vector]:
    """Reduce ``a x = b`` to upper-triangular form with partial pivoting.

    Returns the triangular matrix and the transformed right-hand side; the
    inputs are left untouched.
    """
    upper = _square_copy(a)
    rhs = [float(value) for value in b]
    n = len(upper)
    if len(rhs) != n:
        raise ValueError("right-hand side does not match the matrix size")

    for j in range(n - 1):
        pivot = max(range(j, n), key=lambda k: abs(upper[k][j]))
        upper[j], upper[pivot] = upper[pivot], upper[j]
        rhs[j], rhs[pivot] = rhs[pivot], rhs[j]

        pivot_row = upper[j]
        for i in range(j + 1, n):
            factor = upper[i][j] / pivot_row[j]
            upper[i][j:] = [
                value - p * factor for value, p in zip(upper[i][j:], pivot_row[j:])
            ]
            rhs[i] -= rhs[j] * factor

    return upper, rhs


def gauss(a: Sequence[Sequence[float]], b: Sequence[float]) -> Vector:
    """Solve ``a x = b`` by Gaussian elimination with partial pivoting."""
    upper, rhs = eliminate(a, b)
    return _back_substitute(upper, rhs)


def cholesky(a: Sequence[Sequence[float]]) -> Matrix:
    """Factor a symmetric positive definite matrix.

    The result holds the lower factor L below the diagonal and its transpose
    above it, sharing the diagonal, so that ``a = L L^T``.
    """
    m = _square_copy(a)
    n = len(m)
    for k in range(n):
        if m[k][k] <= 0.0:
            raise ValueError("matrix is not positive definite")
        m[k][k] = math.sqrt(m[k][k])
        for i in range(k + 1, n):
            m[i][k] /= m[k][k]
            m[k][i] = m[i][k]
        for i in range(k + 1, n):
            for j in range(k + 1, n):
                m[i][j] -= m[i][k] * m[k][j]
    return m


def substitutions(factor: Sequence[Sequence[float]], b: Sequence[float]) -> Vector:
    """Solve ``a x = b`` given the Cholesky factor of ``a`` from :func:`cholesky`."""
    n = len(factor)
    if len(b) != n:
        raise ValueError("right-hand side does not match the matrix size")
    y = [0.0] * n
    for i in range(n):
        s = sum(factor[i][j] * y[j] for j in range(i))
        y[i] = (b[i] - s) / factor[i][i]
    return _back_substitute(factor, y)