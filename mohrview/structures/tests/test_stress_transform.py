import numpy as np
import pytest
from pytest import approx

from mohrview.structures import (StressState, DegenerateGeometry,
                                 PrincipalSolution, compute_transform,
                                 compute_principal, principal_angles_display,
                                 is_hydrostatic, normalize_angle)


# ======================================================================

def _check_principal(state, σ_1, σ_2, θ_p1, σ_tol=0.1, θ_tol=0.01):
    p = compute_principal(state)
    assert isinstance(p, PrincipalSolution)
    assert p.σ_1 == approx(σ_1, abs=σ_tol)
    assert p.σ_2 == approx(σ_2, abs=σ_tol)
    assert p.θ_p1 == approx(θ_p1, abs=θ_tol)
    assert p.θ_p2 == approx(p.θ_p1 + 90.0)
    assert p.τ_max == approx(0.5 * (p.σ_1 - p.σ_2))


# ----------------------------------------------------------------------

def test_principal():
    # -- Check Principal Stress / Angles Combinations ------------------

    _check_principal(StressState(+80, +40, +30), 96.05, 23.95, 28.15)
    _check_principal(StressState(15000, 5000, 4000), 16403.1, 3596.9, +19.33)
    _check_principal(StressState(15000, 25000, 4000), 26403.1, 13596.9,
                     +70.67)
    _check_principal(StressState(0, 2000, -5000), 6099, -4099, -50.66)
    _check_principal(StressState(-80, +50, -25), 54.6, -84.6, -79.48)


def test_principal_scenarios():
    # Default preset.
    state = StressState(80, -40, 50)
    p = compute_principal(state)
    assert p.σ_avg == approx(20.0)
    assert p.τ_max == approx(78.10, abs=0.01)
    assert p.σ_1 == approx(98.10, abs=0.01)
    assert p.σ_2 == approx(-58.10, abs=0.01)
    assert p.θ_p1 == approx(19.90, abs=0.01)  # ½·atan2(50, 60).
    assert p.θ_s1 == approx(p.θ_p1 - 45.0)

    # Uniaxial.
    p = compute_principal(StressState(100, 0, 0))
    assert (p.τ_max, p.σ_1, p.σ_2, p.θ_p1) == approx((50, 100, 0, 0))

    # Pure shear.
    p = compute_principal(StressState(0, 0, 60))
    assert (p.σ_avg, p.τ_max, p.σ_1, p.σ_2) == approx((0, 60, 60, -60))
    assert p.θ_p1 == approx(45.0)

    # Equal biaxial.
    p = compute_principal(StressState(60, 60, 0))
    assert isinstance(p, DegenerateGeometry)
    assert (p.σ_avg, p.σ_1, p.σ_2, p.τ_max) == (60, 60, 60, 0)


def test_prescribed_angles():
    rot = compute_transform(StressState(1000, 2000, 3000), +60)
    assert (rot.σ_x, rot.σ_y, rot.τ_xy) == approx((4348.1, -1348.1, -1067.0),
                                                  abs=0.1)
    assert rot.θ == 60

    rot = compute_transform(StressState(1000, 2000, 3000), -90)
    assert (rot.σ_x, rot.σ_y, rot.τ_xy) == approx((2000, 1000, -3000))

    # Zero rotation is the identity.
    rot = compute_transform(StressState(80, -40, 50), 0.0)
    assert (rot.σ_x, rot.σ_y, rot.τ_xy) == (80, -40, 50)


@pytest.mark.parametrize('σ_x, σ_y, τ_xy', [(80, -40, 50), (-3, 7, -2.5),
                                             (0, 0, 60), (1e4, 1e4, 1e-3)])
def test_transform_invariants(σ_x, σ_y, τ_xy):
    state = StressState(σ_x, σ_y, τ_xy)
    θ = np.linspace(-360, 360, 97)
    rot = compute_transform(state, θ)
    assert rot.σ_x.shape == θ.shape

    # Trace is preserved.
    np.testing.assert_allclose(rot.σ_x + rot.σ_y, σ_x + σ_y, atol=1e-9)

    # Period of 180°.
    rot_180 = compute_transform(state, θ + 180)
    np.testing.assert_allclose(rot_180.σ_x, rot.σ_x, atol=1e-9)
    np.testing.assert_allclose(rot_180.τ_xy, rot.τ_xy, atol=1e-9)

    # Points stay on the circle.
    np.testing.assert_allclose(np.hypot(rot.σ_x - state.σ_avg, rot.τ_xy),
                               state.radius, atol=1e-9)


@pytest.mark.parametrize('state', [
    StressState(80, -40, 50), StressState(0, 2000, -5000),
    StressState(-80, 50, -25), StressState(0, 0, 60), StressState(100, 0, 0)])
def test_transform_at_principal_angle(state):
    p = compute_principal(state)
    rot = compute_transform(state, p.θ_p1)
    assert rot.σ_x == approx(p.σ_1)
    assert rot.σ_y == approx(p.σ_2)
    assert rot.τ_xy == approx(0.0, abs=1e-9)

    # Maximum shear 45° before the principal axis.
    assert p.θ_s1 == approx(p.θ_p1 - 45.0)
    rot = compute_transform(state, p.θ_s1)
    assert rot.τ_xy == approx(p.τ_max)
    assert rot.σ_x == approx(state.σ_avg)


def test_display_angles():
    assert principal_angles_display(StressState(80, -40, 50)) == approx(
        (19.90, 109.90), abs=0.01)

    # Negative angles wrap into [0, 180) and are then ordered.
    θ_a, θ_b = principal_angles_display(StressState(0, 2000, -5000))
    assert (θ_a, θ_b) == approx((39.34, 129.34), abs=0.01)

    # Both formulae agree modulo 180°.
    for state in (StressState(-80, 50, -25), StressState(3, 3, 1)):
        θ_p1 = normalize_angle(compute_principal(state).θ_p1)
        assert any(θ_p1 == approx(θ)
                   for θ in principal_angles_display(state))

    assert principal_angles_display(StressState(60, 60, 0)) is None


def test_degenerate_guard_shared():
    # Noise below eps is hydrostatic for both paths.
    state = StressState(60 + 1e-12, 60, -1e-12)
    assert is_hydrostatic(state)
    assert isinstance(compute_principal(state), DegenerateGeometry)
    assert principal_angles_display(state) is None

    # Just above eps is not.
    state = StressState(60 + 1e-6, 60, 0)
    assert not is_hydrostatic(state)
    assert principal_angles_display(state) is not None


def test_normalize_angle():
    assert normalize_angle(-30.0) == approx(150.0)
    assert normalize_angle(180.0) == 0.0
    assert normalize_angle(-1e-20) < 180.0
    np.testing.assert_allclose(normalize_angle(np.array([-90, 270, 45])),
                               [90, 90, 45])


def test_stress_arithmetic():
    a, b = StressState(1, 2, 3), StressState(10, 20, 30)
    assert a + b == StressState(11, 22, 33)
    assert b - a == StressState(9, 18, 27)
    assert 2 * a == a * 2 == StressState(2, 4, 6)
    assert StressState(-5, 2, 3).max_abs() == 5
