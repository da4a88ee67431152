"""QR factorisation by Gram-Schmidt and least squares on top of it."""

from __future__ import annotations

from collections.abc import Sequence

from calcnum.linear import gauss
from calcnum.matrix import dot, matvec, norm2, transpose

Vector = list[float]
Matrix = list[list[float]]


def qr(a: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Factor an m-by-n matrix (m >= n) as ``a = Q R``.

    ``Q`` is m-by-n with orthonormal columns and ``R`` is n-by-n upper
    triangular with a positive diagonal.
    """
    if not a or not a[0]:
        raise ValueError("matrix must not be empty")
    m, n = len(a), len(a[0])
    if m < n:
        raise ValueError("matrix must have at least as many rows as columns")

    r = [[0.0] * n for _ in range(n)]
    q_columns: list[Vector] = []
    for j, column in enumerate(transpose(a)):
        w = [float(value) for value in column]
        for i, qi in enumerate(q_columns):
            r[i][j] = dot(qi, w)
            w = [wk - r[i][j] * qk for wk, qk in zip(w, qi)]
        length = norm2(w)
        if length == 0.0:
            raise ValueError("matrix columns are linearly dependent")
        r[j][j] = length
        q_columns.append([wk / length for wk in w])
    return transpose(q_columns), r


def qr_least_squares(
    q: Sequence[Sequence[float]],
    r: Sequence[Sequence[float]],
    b: Sequence[float],
) -> Vector:
    """Solve ``Q R x = b`` in the least-squares sense from a QR factorisation."""
    if len(b) != len(q):
        raise ValueError("right-hand side does not match the number of rows")
    return gauss(r, matvec(transpose(q), b))