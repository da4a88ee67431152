"""Dense vector and matrix helpers built on plain lists of floats."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector = list[float]
Matrix = list[list[float]]


def dot(v: Sequence[float], w: Sequence[float]) -> float:
    """Return the scalar product of two vectors of equal length."""
    if len(v) != len(w):
        raise ValueError(f"vectors differ in length: {len(v)} and {len(w)}")
    return sum(a * b for a, b in zip(v, w))


def norm2(v: Sequence[float]) -> float:
    """Return the Euclidean norm of a vector."""
    return math.sqrt(dot(v, v))


def transpose(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a matrix."""
    if a and any(len(row) != len(a[0]) for row in a):
        raise ValueError("matrix rows differ in length")
    return [list(column) for column in zip(*a)]


def matvec(a: Sequence[Sequence[float]], v: Sequence[float]) -> Vector:
    """Return the product of a matrix and a vector."""
    return [dot(row, v) for row in a]


def matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product of two matrices."""
    columns = transpose(b)
    if a and len(a[0]) != len(b):
        raise ValueError(
            f"cannot multiply: left has {len(a[0])} columns, right has {len(b)} rows"
        )
    return [[dot(row, column) for column in columns] for row in a]


def format_vector(v: Sequence[float]) -> str:
    """Render a vector as one line of values separated by bars."""
    return "".join(f"{value:f} | " for value in v) + "\n"


def format_matrix(a: Sequence[Sequence[float]]) -> str:
    """Render a matrix one row per line, values separated by bars."""
    return "".join(format_vector(row) for row in a)