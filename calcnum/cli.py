"""Command-line demonstrations of the numerical methods in this package."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence

from calcnum import differentiation, ode, quadrature
from calcnum.interpolation import chebyshev, newton_coefficients, newton_evaluate
from calcnum.iterative import conjugate_gradient, jacobi
from calcnum.least_squares import fit_periodic, least_squares, predict_periodic
from calcnum.linear import cholesky, eliminate, gauss, substitutions
from calcnum.matrix import format_matrix, format_vector, matmul
from calcnum.optimization import golden_section, parabolic
from calcnum.pendulum import period, small_angle_period
from calcnum.qr import qr, qr_least_squares
from calcnum.roots import ConvergenceError, inverse_quadratic, secant
from calcnum.taylor import cos2, cos2_max_residual, sqrt_approx, sqrt_max_residual

PI = math.pi
TAYLOR_PI = 3.14159

_SPD_6 = [
    [3.0, -1.0, 0.0, 0.0, 0.0, 0.5],
    [-1.0, 3.0, -1.0, 0.0, 0.5, 0.0],
    [0.0, -1.0, 3.0, -1.0, 0.0, 0.0],
    [0.0, 0.0, -1.0, 3.0, -1.0, 0.0],
    [0.0, 0.5, 0.0, -1.0, 3.0, -1.0],
    [0.5, 0.0, 0.0, 0.0, -1.0, 3.0],
]
_SPD_6_RHS = [2.5, 1.5, 1.0, 1.0, 1.5, 2.5]

_OVERDETERMINED_A = [
    [3.0, -1.0, 2.0],
    [4.0, 1.0, 0.0],
    [-3.0, 2.0, 1.0],
    [1.0, 1.0, 5.0],
    [-2.0, 0.0, 3.0],
]
_OVERDETERMINED_A_RHS = [10.0, 10.0, -5.0, 15.0, 0.0]
_OVERDETERMINED_B = [
    [4.0, 2.0, 3.0, 0.0],
    [-2.0, 3.0, -1.0, 1.0],
    [1.0, 3.0, -4.0, 2.0],
    [1.0, 0.0, 1.0, -1.0],
    [3.0, 1.0, 3.0, -2.0],
]
_OVERDETERMINED_B_RHS = [10.0, 0.0, 2.0, 0.0, 5.0]

_ICE_TIMES = [round(0.1 * i, 1) for i in range(24)]
_ICE_EXTENT = [
    13.75, 14.51, 14.49, 13.98, 12.69, 11.05, 8.83, 5.66, 4.68, 7.79, 10.11, 12.33,
    13.64, 14.32, 14.53, 13.83, 12.08, 10.60, 8.13, 5.6, 4.72, 6.45, 9.08, 12.09,
]


def _show_vector(v: Sequence[float]) -> None:
    print(format_vector(v), end="")


def _show_matrix(a: Sequence[Sequence[float]]) -> None:
    print(format_matrix(a), end="")


def _demo_integral() -> None:
    def f(x: float) -> float:
        return math.cos(x) - 2 * math.sin(x)

    def df(x: float) -> float:
        return -math.sin(x) - 2 * math.cos(x)

    x = 2.7
    h_opt = 0.00001
    print("Derivative tests\n")
    print(f"optimal step found = {differentiation.optimal_step(f, df, x):.12f}")
    print("theoretical optimal step = 0.00001")
    print(f"derivative with an arbitrary step = {differentiation.derivative(f, x, 0.1):.12f}")
    print(f"derivative with the optimal step = {differentiation.derivative(f, x, h_opt):.12f}")
    print(f"analytic derivative = {df(x):.12f}")
    print()

    rich = differentiation.richardson(f, x, h_opt)
    central = differentiation.derivative(f, x, h_opt)
    print(f"Richardson = {rich:.12f}")
    print(f"central difference = {central:.12f}")
    print(f"analytic derivative = {df(x):.12f}")
    print(f"error (Richardson) = {abs(df(x) - rich):.12f}")
    print(f"error (central difference) = {abs(df(x) - central):.12f}")

    print("\nIntegral tests\n")
    cases: list[tuple[str, Callable[[float], float], float, float]] = [
        ("f1", lambda t: t / math.sqrt(t * t + 9), 0.0, 4.0),
        ("f2", lambda t: t * t * math.log(t), 1.0, 3.0),
        ("f3", lambda t: t * t * math.sin(t), 0.0, PI),
    ]
    for rule_name, rule in (("Simpson", quadrature.simpson), ("midpoint", quadrature.midpoint)):
        for name, g, a, b in cases:
            for n in (16, 32):
                print(f"{rule_name} integral of {name} with {n} steps = {rule(g, a, b, n):.15f}")
    print("Simpson is more precise, and more steps improve precision.")


def _demo_interpolation() -> None:
    nodes = chebyshev(6, 0, PI / 2)
    coeffs = newton_coefficients(nodes, math.sin)
    print("xi = ", end="")
    _show_vector(nodes)
    print("bi = ", end="")
    _show_vector(coeffs)
    value = newton_evaluate(nodes, coeffs, PI / 6)
    print(f"Exact value = {math.sin(PI / 6):f}")
    print(f"Interpolated value = {value:f}")

    n, a, b = 6, -PI / 2, PI / 2
    nodes = chebyshev(n, a, b)
    coeffs = newton_coefficients(nodes, math.sin)
    bound = ((b - a) / 2) ** n / 2 ** (n - 1) / math.factorial(n)
    print(f"\nMaximum error = {bound:f}")
    for x in (-PI / 2, -PI / 3, -PI / 4, -PI / 6, PI / 6, PI / 4, PI / 3, PI / 2):
        value = newton_evaluate(nodes, coeffs, x)
        met = "yes" if abs(math.sin(x) - value) <= bound else "no"
        print(f"\nExact value = {math.sin(x):f}")
        print(f"Interpolated value = {value:f}")
        print(f"Requested precision met for x = {x:f}? {met}")


def _demo_iterative() -> None:
    m1 = [[3.0, 1.0], [1.0, 2.0]]
    b1 = [5.0, 5.0]
    tol = 1e-7
    systems = (("M1", m1, b1), ("M2", _SPD_6, _SPD_6_RHS))
    for method_name, method in (("Jacobi", jacobi), ("Conjugate gradient", conjugate_gradient)):
        for name, a, b in systems:
            x, iterations = method(a, b, [0.0] * len(b), tol)
            print(f"{method_name} on {name} ({iterations} iterations):")
            _show_vector(x)


def _demo_least_squares() -> None:
    print("Least squares\n")
    for a, b in ((_OVERDETERMINED_A, _OVERDETERMINED_A_RHS), (_OVERDETERMINED_B, _OVERDETERMINED_B_RHS)):
        x, residual = least_squares(a, b)
        print(f"Residual 2-norm = {residual:f}")
        _show_vector(x)
    coeffs, error = fit_periodic(_ICE_TIMES, _ICE_EXTENT)
    print("\nPeriodic fit\n")
    print(f"Error = {error:f}")
    print("Coefficients: ", end="")
    _show_vector(coeffs)
    print(f"Predicted ice extent (September 2019): {predict_periodic(coeffs, 5.6):f}")


def _demo_ode() -> None:
    def derivative(t: float, y: float) -> float:
        return t * y + t**3

    def exact_solution(t: float) -> float:
        return math.exp(t * t / 2) - t * t - 2

    t0, t1, y0 = 0.0, 2.4, -1.0
    exact = exact_solution(t1)
    for h in (0.01, 0.001, 0.0001):
        approx = ode.midpoint(derivative, t0, t1, h, y0)
        print(f"Midpoint (h = {h:f}) = {approx:.12f}")
        print(f"Relative error = {abs((exact - approx) / approx):.12f}")
    h = tol = 0.0001
    approx = ode.adaptive_midpoint(derivative, t0, t1, h, y0, tol)
    print(f"Adaptive midpoint (h and tolerance = {h:f}) = {approx:.12f}")
    print(f"Relative error = {abs((exact - approx) / approx):.12f}")


def _demo_optimization() -> None:
    functions: list[tuple[str, Callable[[float], float]]] = [
        ("f1", lambda x: x * x + math.sin(x)),
        ("f2", lambda x: x**6 - 11 * x**3 + 17 * x**2 - 7 * x + 1),
    ]
    tol = 0.0001
    for name, f in functions:
        xmin, iterations = golden_section(f, -10, 10, tol)
        print(f"golden section on {name}: {iterations} iterations, minimum at {xmin:.12f}")
    for name, f in functions:
        try:
            xmin, iterations = parabolic(f, -1.5, -1, 0.5, tol)
        except ConvergenceError as exc:
            print(f"parabolic on {name}: did not converge ({exc})")
        else:
            print(f"parabolic on {name}: {iterations} iterations, minimum at {xmin:.12f}")


def _demo_pendulum() -> None:
    for degrees in (1, 3, 5, 10, 30, 60, 90):
        theta = degrees * PI / 180
        print(f"period(theta = {float(degrees):f}) = {period(theta):.12f}")
        print(f"small_angle_period(theta = {float(degrees):f}) = {small_angle_period(theta):.12f}")


def _demo_qr() -> None:
    cases = (
        (_OVERDETERMINED_A, _OVERDETERMINED_A_RHS),
        (_OVERDETERMINED_B, _OVERDETERMINED_B_RHS),
    )
    for number, (a, b) in enumerate(cases, start=1):
        q, r = qr(a)
        print(f"Matrix {number}")
        print("Q:")
        _show_matrix(q)
        print("R:")
        _show_matrix(r)
        print("Q R:")
        _show_matrix(matmul(q, r))
        print(f"Least squares solution for matrix {number}:")
        _show_vector(qr_least_squares(q, r, b))
        print()


def _demo_roots() -> None:
    def f(x: float) -> float:
        return math.cos(x) - x**3 + x

    for name, solve in (
        ("secant", lambda: secant(f, 0, -0.5, 8)),
        ("inverse quadratic", lambda: inverse_quadratic(f, 0, -0.5, 1, 6)),
    ):
        try:
            root, iterations = solve()
        except ConvergenceError as exc:
            print(f"{name}: did not converge ({exc})")
        else:
            print(f"{name} iterations: {iterations}")
            print(f"{name} root: {root:.17g}")


def _demo_quadrature() -> None:
    def f1(x: float) -> float:
        return x / math.sqrt(x * x + 9)

    def f2(x: float) -> float:
        return math.exp(-(x * x) / 2)

    def f3(x: float) -> float:
        return math.exp(-(x * x))

    for name, f, a, b, scale in (
        ("f1", f1, 0.0, 1.0, 1.0),
        ("f2", f2, -1.0, 1.0, 1 / math.sqrt(2 * PI)),
        ("f3", f3, 0.0, 3.0, 2 / math.sqrt(PI)),
    ):
        value, error = quadrature.double_simpson(f, a, b)
        print(f"Test {name}")
        print(f"Simpson error = {error:.12f}")
        print(f"Integral value = {scale * value:.12f}\n")
    print("Adaptive Simpson")
    print(f"Adaptive Simpson of f1 = {quadrature.adaptive_simpson(f1, 0, 1, 0.0000016):.12f}")
    print("\nGauss quadrature")
    print(f"Gauss2 of f1 = {quadrature.gauss2(f1, 0, 1):.12f}")
    print(f"Gauss3 of f1 = {quadrature.gauss3(f1, 0, 1):.12f}")


def _demo_linear() -> None:
    small = [[1.0, -1.0, 0.0], [-1.0, 2.0, 1.0], [0.0, 1.0, 2.0]]
    small_rhs = [0.0, 2.0, 3.0]
    for label, a, b in (("3x3", small, small_rhs), ("6x6", _SPD_6, _SPD_6_RHS)):
        print(f"Matrix before Gaussian elimination ({label}):")
        _show_matrix(a)
        print(f"Solution of the {label} system:")
        _show_vector(gauss(a, b))
        print("Matrix after Gaussian elimination:")
        _show_matrix(eliminate(a, b)[0])
        print()

    print("6x6 matrix before Cholesky factorisation:")
    _show_matrix(_SPD_6)
    factor = cholesky(_SPD_6)
    print("6x6 matrix after Cholesky factorisation:")
    _show_matrix(factor)
    print("Solution after Cholesky substitutions:")
    _show_vector(substitutions(factor, _SPD_6_RHS))


def _demo_taylor() -> None:
    approx_cos = cos2(TAYLOR_PI)
    exact_cos = math.cos(TAYLOR_PI) ** 2
    approx_sqrt = sqrt_approx(0.5)
    exact_sqrt = math.sqrt(0.5)
    error_cos = abs(exact_cos - approx_cos)
    bound_cos = cos2_max_residual(TAYLOR_PI)
    error_sqrt = abs(exact_sqrt - approx_sqrt)
    bound_sqrt = sqrt_max_residual(3)
    print(f"Using cos2(pi): {approx_cos:f}")
    print(f"Using the library: {exact_cos:f}")
    answer = "yes" if error_cos < bound_cos else "no"
    print(f"Is the error ({error_cos:f}) below the maximum residual ({bound_cos:f})? {answer}\n")
    print(f"Using sqrt_approx(0.5): {approx_sqrt:f}")
    print(f"Using the library: {exact_sqrt:f}")
    answer = "yes" if error_sqrt < bound_sqrt else "no"
    print(f"Is the error ({error_sqrt:f}) below the maximum residual ({bound_sqrt:f})? {answer}")


DEMOS: dict[str, Callable[[], None]] = {
    "integral": _demo_integral,
    "interpolation": _demo_interpolation,
    "iterative": _demo_iterative,
    "least-squares": _demo_least_squares,
    "ode": _demo_ode,
    "optimization": _demo_optimization,
    "pendulum": _demo_pendulum,
    "qr": _demo_qr,
    "roots": _demo_roots,
    "quadrature": _demo_quadrature,
    "linear": _demo_linear,
    "taylor": _demo_taylor,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one demonstration, or all of them, and print the results."""
    parser = argparse.ArgumentParser(
        prog="calcnum", description="Demonstrate the numerical methods."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*DEMOS, "all"],
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    if args.demo == "all":
        for name, demo in DEMOS.items():
            print(f"== {name} ==")
            demo()
            print()
    else:
        DEMOS[args.demo]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())