"""Iterative solvers for square linear systems."""

from __future__ import annotations

from collections.abc import Sequence

from calcnum.matrix import dot, matvec, norm2

Vector = list[float]


def _check_system(a: Sequence[Sequence[float]], b: Sequence[float], x0: Sequence[float]) -> None:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    if len(b) != n or len(x0) != n:
        raise ValueError("vector sizes do not match the matrix size")


def _residual(a: Sequence[Sequence[float]], b: Sequence[float], x: Sequence[float]) -> Vector:
    return [bi - axi for bi, axi in zip(b, matvec(a, x))]


def jacobi(
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    x0: Sequence[float],
    tol: float,
) -> tuple[Vector, int]:
    """Solve ``a x = b`` by Jacobi iteration starting from ``x0``.

    Iterates until the 2-norm of the residual ``b - a x`` is no longer above
    ``tol``. Returns the solution and the number of iterations performed.
    """
    _check_system(a, b, x0)
    if any(row[i] == 0 for i, row in enumerate(a)):
        raise ValueError("Jacobi iteration needs a nonzero diagonal")

    x = [float(value) for value in x0]
    iterations = 0
    while norm2(_residual(a, b, x)) > tol:
        x = [
            (bi - sum(aij * xj for j, (aij, xj) in enumerate(zip(row, x)) if j != i)) / row[i]
            for i, (row, bi) in enumerate(zip(a, b))
        ]
        iterations += 1
    return x, iterations


def conjugate_gradient(
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    x0: Sequence[float],
    tol: float,
) -> tuple[Vector, int]:
    """Solve a symmetric positive definite system by conjugate gradients.

    Stops after as many iterations as the system has unknowns, or earlier
    once the residual norm is no longer above ``tol``. Returns the solution
    and the number of iterations performed.
    """
    _check_system(a, b, x0)
    n = len(a)
    x = [float(value) for value in x0]
    r = _residual(a, b, x)
    d = list(r)
    iterations = 0
    while iterations < n and norm2(r) > tol:
        rr = dot(r, r)
        ad = matvec(a, d)
        alpha = rr / dot(d, ad)
        x = [xi + alpha * di for xi, di in zip(x, d)]
        r_next = [ri - alpha * adi for ri, adi in zip(r, ad)]
        beta = dot(r_next, r_next) / rr
        d = [rn + beta * di for rn, di in zip(r_next, d)]
        r = r_next
        iterations += 1
    return x, iterations