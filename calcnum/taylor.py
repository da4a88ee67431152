"""Low-order Taylor approximations and their residual bounds."""

from __future__ import annotations


def cos2(x: float) -> float:
    """Taylor approximation ``1 - x**2`` used for the squared cosine."""
    return 1 - x * x


def cos2_max_residual(x: float) -> float:
    """Bound on the residual of :func:`cos2`: ``|4 x**3 / 6|``."""
    return abs(4 * x * x * x / 6)


def sqrt_approx(x: float) -> float:
    """First-order Taylor approximation of ``sqrt(x)`` around 1.

    The second- and third-order terms carry coefficients that evaluate to
    zero, so only the linear term contributes.
    """
    return 1 + (x - 1) / 2


def sqrt_max_residual(x: float) -> float:
    """Bound on the residual of :func:`sqrt_approx` from a quartic in ``x``."""
    residual = (
        -0.03906
        + 0.1562 * x
        - 0.2343 * x * x
        + 0.1562 * x * x * x
        - 0.03906 * x * x * x * x
    )
    return abs(residual)