import math

import pytest

from calcnum.interpolation import chebyshev, newton_coefficients, newton_evaluate


@pytest.mark.parametrize("n,a,b", [(6, 0.0, math.pi / 2), (6, -math.pi / 2, math.pi / 2), (3, 1.0, 5.0)])
def test_chebyshev_nodes_lie_inside_interval(n, a, b):
    nodes = chebyshev(n, a, b)
    assert len(nodes) == n
    assert all(a < x < b for x in nodes)
    assert len(set(nodes)) == n


def test_chebyshev_nodes_symmetric_about_centre():
    nodes = sorted(chebyshev(6, -1.0, 3.0))
    for low, high in zip(nodes, reversed(nodes)):
        assert low + high == pytest.approx(2.0)


def test_chebyshev_single_node_is_midpoint():
    assert chebyshev(1, 2.0, 4.0) == pytest.approx([3.0])


def test_chebyshev_rejects_zero_nodes():
    with pytest.raises(ValueError):
        chebyshev(0, 0.0, 1.0)


def test_interpolant_matches_function_at_nodes():
    xs = chebyshev(6, 0.0, math.pi / 2)
    coeffs = newton_coefficients(xs, math.sin)
    for x in xs:
        assert newton_evaluate(xs, coeffs, x) == pytest.approx(math.sin(x), abs=1e-12)


def test_interpolant_of_sine_is_accurate():
    xs = chebyshev(6, 0.0, math.pi / 2)
    coeffs = newton_coefficients(xs, math.sin)
    assert newton_evaluate(xs, coeffs, math.pi / 6) == pytest.approx(0.5, abs=1e-5)


def test_cubic_reproduced_exactly():
    def cubic(x):
        return 2 * x**3 - x + 4

    xs = [-1.0, 0.5, 2.0, 3.0]
    coeffs = newton_coefficients(xs, cubic)
    for x in (-2.0, 0.0, 1.7, 10.0):
        assert newton_evaluate(xs, coeffs, x) == pytest.approx(cubic(x))


def test_coefficients_of_square():
    assert newton_coefficients([0.0, 1.0, 2.0], lambda x: x * x) == pytest.approx([0.0, 1.0, 1.0])


def test_coefficients_reject_duplicate_nodes():
    with pytest.raises(ValueError):
        newton_coefficients([0.0, 1.0, 1.0], math.sin)


def test_coefficients_reject_empty_nodes():
    with pytest.raises(ValueError):
        newton_coefficients([], math.sin)


def test_evaluate_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        newton_evaluate([0.0, 1.0], [1.0], 0.5)


def test_evaluate_rejects_empty():
    with pytest.raises(ValueError):
        newton_evaluate([], [], 0.5)