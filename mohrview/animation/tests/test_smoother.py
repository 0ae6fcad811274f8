import numpy as np
import pytest
from pytest import approx

from mohrview.animation import advance, Smoothed
from mohrview.structures import StressState


# ======================================================================

def test_advance_scalar():
    assert advance(0.0, 100.0, 0.12) == approx(12.0)
    assert advance(100.0, 0.0, 0.5) == approx(50.0)
    assert advance(5.0, 5.0, 0.12) == 5.0
    assert advance(3.0, 7.0, 1.0) == 7.0


def test_advance_types():
    d = advance(StressState(0, 0, 0), StressState(100, -50, 20), 0.5)
    assert d == StressState(50, -25, 10)

    d = advance(np.zeros(3), np.array([10.0, -10.0, 4.0]), 0.25)
    np.testing.assert_allclose(d, [2.5, -2.5, 1.0])


@pytest.mark.parametrize('speed', [0.0, -0.1, 1.5])
def test_advance_invalid_speed(speed):
    with pytest.raises(ValueError):
        advance(0.0, 1.0, speed)


def test_convergence_no_overshoot():
    target = StressState(80, -40, 50)
    value = Smoothed.stress(StressState(-200, 200, -200)).retarget(target)
    prev_err = np.inf
    for _ in range(300):
        value = value.step()
        err = (target - value.displayed).max_abs()
        assert err <= prev_err
        prev_err = err

        # Never passes the target.
        assert value.displayed.σ_x <= target.σ_x
        assert value.displayed.σ_y >= target.σ_y

    assert prev_err < 1e-6


def test_stress_never_snaps():
    value = Smoothed.stress(StressState(0, 0, 0))
    value = value.retarget(StressState(1e-3, 0, 0))
    for _ in range(20):
        value = value.step()
    assert value.snap is None
    assert not value.arrived


def test_angle_snaps_and_arrives():
    value = Smoothed.angle(0.0).retarget(10.0)
    assert value.speed == 0.14 and value.snap == 0.01
    assert not value.arrived

    for n_steps in range(1, 200):
        value = value.step()
        if value.arrived:
            break
    assert value.displayed == 10.0
    assert n_steps < 100

    # Just before snapping the angle is within the snap distance.
    assert advance(9.995, 10.0, 0.14, snap=0.01) == 10.0
    assert advance(9.98, 10.0, 0.14, snap=0.01) == approx(9.9828)


def test_retarget_replaces_target():
    value = Smoothed.angle(0.0).retarget(90.0).step()
    displayed = value.displayed
    value = value.retarget(-30.0)
    assert value.displayed == displayed
    assert value.target == -30.0

    value = value.step()
    assert value.displayed < displayed
