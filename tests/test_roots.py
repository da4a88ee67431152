import math

import pytest

from calcnum.roots import ConvergenceError, inverse_quadratic, secant


def square_minus_two(x):
    return x * x - 2


def test_secant_finds_square_root():
    root, iterations = secant(square_minus_two, 1.0, 2.0, 8)
    assert abs(square_minus_two(root)) < 0.5e-8
    assert root == pytest.approx(math.sqrt(2), abs=1e-7)
    assert 1 <= iterations < 50


def test_secant_more_digits_needs_no_fewer_iterations():
    _, loose = secant(square_minus_two, 1.0, 2.0, 2)
    _, tight = secant(square_minus_two, 1.0, 2.0, 12)
    assert tight >= loose


def test_secant_constant_function_fails():
    with pytest.raises(ConvergenceError):
        secant(lambda x: 1.0, 0.0, 1.0, 6)


def test_secant_divergent_function_fails():
    def cube_root(x):
        return math.copysign(abs(x) ** (1 / 3), x)

    with pytest.raises(ConvergenceError):
        secant(cube_root, 1.0, 2.0, 8)


def test_inverse_quadratic_finds_square_root():
    root, iterations = inverse_quadratic(square_minus_two, 1.0, 1.5, 2.0, 6)
    assert abs(square_minus_two(root)) < 0.5e-6
    assert root == pytest.approx(math.sqrt(2), abs=1e-5)
    assert iterations >= 2


def test_inverse_quadratic_accepts_first_estimate_near_zero():
    root, iterations = inverse_quadratic(lambda x: 2 * x, -1.0, 0.5, 2.0, 6)
    assert abs(root) < 1e-12
    assert iterations == 1


def test_inverse_quadratic_repeated_values_fail():
    with pytest.raises(ConvergenceError):
        inverse_quadratic(lambda x: 1.0, 0.0, 1.0, 2.0, 6)


def test_convergence_error_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        secant(lambda x: 3.0, 0.0, 1.0, 6)