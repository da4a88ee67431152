import pytest

from calcnum.least_squares import PI, fit_periodic, least_squares, predict_periodic
from calcnum.matrix import matvec, transpose

A = [[3.0, -1.0, 2.0], [4.0, 1.0, 0.0], [-3.0, 2.0, 1.0], [1.0, 1.0, 5.0], [-2.0, 0.0, 3.0]]
B1 = [10.0, 10.0, -5.0, 15.0, 0.0]

B = [
    [4.0, 2.0, 3.0, 0.0],
    [-2.0, 3.0, -1.0, 1.0],
    [1.0, 3.0, -4.0, 2.0],
    [1.0, 0.0, 1.0, -1.0],
    [3.0, 1.0, 3.0, -2.0],
]
B2 = [10.0, 0.0, 2.0, 0.0, 5.0]

TIMES = [i / 10 for i in range(24)]
SAMPLES = [13.75, 14.51, 14.49, 13.98, 12.69, 11.05, 8.83, 5.66, 4.68, 7.79, 10.11, 12.33,
           13.64, 14.32, 14.53, 13.83, 12.08, 10.60, 8.13, 5.6, 4.72, 6.45, 9.08, 12.09]


@pytest.mark.parametrize("a,b", [(A, B1), (B, B2)])
def test_residual_is_orthogonal_to_columns(a, b):
    x, _ = least_squares(a, b)
    residual = [bi - v for bi, v in zip(b, matvec(a, x))]
    assert matvec(transpose(a), residual) == pytest.approx([0.0] * len(x), abs=1e-9)


@pytest.mark.parametrize("a,b", [(A, B1), (B, B2)])
def test_reported_norm_matches_residual(a, b):
    x, norm = least_squares(a, b)
    residual = [bi - v for bi, v in zip(b, matvec(a, x))]
    assert norm == pytest.approx(sum(r * r for r in residual) ** 0.5)


def test_consistent_system_is_solved_exactly():
    exact = [1.0, -2.0, 0.5]
    b = matvec(A, exact)
    x, norm = least_squares(A, b)
    assert x == pytest.approx(exact)
    assert norm == pytest.approx(0.0, abs=1e-9)


def test_least_squares_rejects_mismatched_rhs():
    with pytest.raises(ValueError):
        least_squares(A, [1.0, 2.0])


def test_fit_periodic_recovers_model():
    coeffs = [10.0, 0.5, 3.0, -2.0, 1.5]
    values = [predict_periodic(coeffs, t) for t in TIMES]
    fitted, norm = fit_periodic(TIMES, values)
    assert fitted == pytest.approx(coeffs, abs=1e-7)
    assert norm == pytest.approx(0.0, abs=1e-7)


def test_fit_periodic_on_ice_data_norm_matches_predictions():
    coeffs, norm = fit_periodic(TIMES, SAMPLES)
    assert len(coeffs) == 5
    residual = [v - predict_periodic(coeffs, t) for t, v in zip(TIMES, SAMPLES)]
    assert norm == pytest.approx(sum(r * r for r in residual) ** 0.5)


def test_predict_periodic_constant_term_at_zero():
    coeffs = [2.0, 7.0, 5.0, 1.0, 1.0]
    assert predict_periodic(coeffs, 0.0) == pytest.approx(4.0)


def test_predict_periodic_is_periodic_apart_from_trend():
    coeffs = [1.0, 0.0, 2.0, 3.0, 4.0]
    assert predict_periodic(coeffs, 0.3) == pytest.approx(predict_periodic(coeffs, 1.3), abs=1e-9)
    assert PI == pytest.approx(3.14159265359)


def test_predict_periodic_rejects_wrong_coefficient_count():
    with pytest.raises(ValueError):
        predict_periodic([1.0, 2.0], 0.5)


def test_fit_periodic_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        fit_periodic([0.0, 1.0], [1.0])