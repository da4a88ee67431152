import math

import pytest

from calcnum.pendulum import GRAVITY, LENGTH, period, rk4_step, small_angle_period


def energy(theta, w):
    return 0.5 * w * w - (GRAVITY / LENGTH) * math.cos(theta)


def test_step_advances_time():
    t, _, _ = rk4_step(1.0, 0.5, 0.2, 0.0)
    assert t == 1.5


def test_rest_position_is_equilibrium():
    assert rk4_step(0.0, 0.1, 0.0, 0.0) == (0.1, 0.0, 0.0)


def test_step_conserves_energy():
    _, theta, w = rk4_step(0.0, 1e-3, 0.5, 0.0)
    assert energy(theta, w) == pytest.approx(energy(0.5, 0.0), rel=1e-10)


def test_released_pendulum_swings_back():
    _, theta, w = rk4_step(0.0, 1e-3, 0.5, 0.0)
    assert w < 0
    assert theta < 0.5


def test_small_angle_period_value():
    assert small_angle_period(0.3) == pytest.approx(7.6953, rel=1e-4)


def test_small_angle_period_independent_of_angle():
    assert small_angle_period(math.radians(1)) == small_angle_period(math.radians(90))


def test_period_grows_with_amplitude():
    assert period(math.radians(60)) > period(math.radians(10))


def test_period_nearly_constant_for_small_angles():
    assert period(math.radians(1)) == pytest.approx(period(math.radians(3)), rel=1e-3)


def test_period_rejects_zero_angle():
    with pytest.raises(ValueError):
        period(0.0)