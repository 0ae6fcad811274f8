import math

import pytest
from pytest import approx

from mohrview.render.primitives import Arc, Circle
from mohrview.structures import (StressState, Visibility, compute_principal,
                                 compute_transform, map_circle_geometry,
                                 mohr_markers, mohr_primitives, mohr_readout,
                                 display_scale, tick_step, axis_ticks)

SCENARIO_A = StressState(80, -40, 50)


# ======================================================================

def test_reference_point():
    geom = map_circle_geometry(SCENARIO_A, 0.0)
    assert geom.centre == (20.0, 0.0)
    assert geom.radius == approx(78.102, abs=1e-3)
    assert geom.α_a == approx(math.degrees(math.atan2(-50, 60)))

    # A and the live point represent the x face at θ = 0.
    assert geom.stress_at(geom.α_a) == approx((80, 50))
    assert geom.live_stress == approx((80, 50))
    assert geom.conj_stress == approx((-40, -50))


@pytest.mark.parametrize('θ', [-75.0, -10.0, 0.0, 12.5, 45.0, 90.0, 170.0])
def test_live_point_matches_transform(θ):
    geom = map_circle_geometry(SCENARIO_A, θ)
    rot = compute_transform(SCENARIO_A, θ)
    assert geom.live_stress == approx((rot.σ_x, rot.τ_xy))
    assert geom.conj_stress == approx((rot.σ_y, -rot.τ_xy))
    assert geom.α_conj == approx(geom.α_live + 180.0)


@pytest.mark.parametrize('state', [SCENARIO_A, StressState(80, -40, -50),
                                   StressState(-80, 50, -25),
                                   StressState(0, 0, 60)])
def test_live_point_reaches_p1(state):
    p = compute_principal(state)
    geom = map_circle_geometry(state, p.θ_p1)
    assert geom.live_point == approx(geom.p1_point)
    assert geom.live_stress == approx((p.σ_1, 0.0), abs=1e-9)


def test_screen_mapping():
    geom = map_circle_geometry(SCENARIO_A, 0.0, size=(900, 820))
    ox, oy = geom.origin
    assert (ox, oy) == (450, 410)

    # Positive shear is plotted below the σ axis.
    ax, ay = geom.point_a
    assert ax == approx(ox + 80 * geom.scale)
    assert ay == approx(oy + 50 * geom.scale)
    assert ay > oy

    assert geom.p1_point[0] > geom.p2_point[0]
    assert geom.shear_top[1] < geom.centre_px[1] < geom.shear_bottom[1]


# ----------------------------------------------------------------------

def test_arcs():
    # Positive θ sweeps anticlockwise.
    arc = map_circle_geometry(SCENARIO_A, 30.0).arc_2θ
    assert arc.visible
    assert (arc.sweep, arc.sweep_flag, arc.large_arc) == (60.0, 0, False)

    # Large negative θ draws the reflex side clockwise.
    arc = map_circle_geometry(SCENARIO_A, -100.0).arc_2θ
    assert (arc.sweep, arc.sweep_flag, arc.large_arc) == (-200.0, 1, True)

    # Tiny rotations are hidden.
    assert not map_circle_geometry(SCENARIO_A, 0.2).arc_2θ.visible


def test_principal_arc_direction():
    # A below the σ axis (τ_xy > 0) sweeps opposite to A above it.
    below = map_circle_geometry(StressState(80, -40, 50), 0.0).arc_2θp
    above = map_circle_geometry(StressState(80, -40, -50), 0.0).arc_2θp
    assert below.visible and above.visible
    assert below.sweep == approx(2 * 19.90, abs=0.02)
    assert above.sweep == approx(-2 * 19.90, abs=0.02)
    assert (below.sweep_flag, above.sweep_flag) == (0, 1)

    # The arc ends on P1.
    assert below.end == approx(0.0, abs=1e-9)
    assert above.end == approx(0.0, abs=1e-9)

    # Uniaxial: A is already on P1.
    arc = map_circle_geometry(StressState(100, 0, 0), 0.0).arc_2θp
    assert not arc.visible


@pytest.mark.parametrize('θ', [-170.0, -100.0, -30.0, 0.0, 45.0, 95.0, 180.0])
def test_arc_flags_match_drawn_arc(θ):
    # Descriptor flags and the drawn arc share one sweep convention.
    geom = map_circle_geometry(SCENARIO_A, θ)
    for desc in (geom.arc_2θ, geom.arc_2θp):
        arc = desc.to_arc(geom.centre_px)
        assert (desc.sweep_flag, desc.large_arc) == (arc.sweep_flag,
                                                     arc.large_arc)
        assert desc.sweep_flag == (0 if desc.sweep >= 0 else 1)
        assert desc.large_arc == (abs(desc.sweep) > 180.0)

def test_degenerate():
    geom = map_circle_geometry(StressState(60, 60, 0), 30.0)
    assert geom.degenerate
    assert geom.radius == 0.0
    assert geom.centre == (60.0, 0.0)
    assert not geom.arc_2θ.visible and not geom.arc_2θp.visible
    for angle in (geom.α_a, geom.α_live, geom.α_conj):
        assert not math.isnan(angle)

    keys = [m.key for m in mohr_markers(geom)]
    assert keys == ['pointA', 'conjPoint', 'livePoint']

    prims = mohr_primitives(geom)
    assert any(isinstance(p, Circle) and p.role == 'mohr-point'
               for p in prims)
    assert not any(isinstance(p, Arc) for p in prims)

    readout = mohr_readout(geom)
    assert readout.θ_p1 is None and readout.θ_s is None
    assert (readout.σ_1, readout.σ_2, readout.τ_max) == (60, 60, 0)


# ----------------------------------------------------------------------

def test_display_scale():
    size = (900, 820)
    assert display_scale(SCENARIO_A, size) == approx(330 / (80 + 78.102 + 10),
                                                     abs=1e-3)
    assert display_scale(StressState(1e6, 0, 0), size) == 0.5
    assert display_scale(StressState(0, 0, 0), size) == 8.0


@pytest.mark.parametrize('extent, step', [(100, 50), (4, 1), (0, 1),
                                          (30, 10), (0.9, 0.5), (7, 2)])
def test_tick_step(extent, step):
    assert tick_step(extent) == approx(step)


def test_axis_ticks():
    ticks = axis_ticks(100, 50)
    assert ticks == (-150, -100, -50, 0, 50, 100, 150)
    assert ticks == tuple(-t for t in reversed(ticks))


# ----------------------------------------------------------------------

def test_markers_and_visibility():
    geom = map_circle_geometry(SCENARIO_A, 10.0)
    keys = [m.key for m in mohr_markers(geom)]
    assert keys == ['tauMax', 'tauMin', 'p1', 'p2', 'pointA', 'conjPoint',
                    'livePoint']

    vis = Visibility().toggled('principal').toggled('rotation')
    keys = [m.key for m in mohr_markers(geom, vis)]
    assert keys == ['tauMax', 'tauMin', 'pointA']

    prims = mohr_primitives(geom, vis)
    assert not any(p.role in ('principal-arc', 'rotation-arc')
                   for p in prims)


def test_hovered_marker_painted_last():
    geom = map_circle_geometry(SCENARIO_A, 10.0)
    prims = mohr_primitives(geom, hovered='p1')
    dots = [p for p in prims if isinstance(p, Circle)
            and p.role.startswith(('principal-', 'point-', 'live-', 'conj-',
                                   'shear-'))]
    assert dots[-1].role == 'principal-1'
    assert dots[-1].radius == 11.0

    # The conjugate label only shows while hovered.
    roles = {p.role for p in mohr_primitives(geom)}
    assert 'conj-label' not in roles
    roles = {p.role for p in mohr_primitives(geom, hovered='conjPoint')}
    assert 'conj-label' in roles


def test_readout():
    readout = mohr_readout(map_circle_geometry(SCENARIO_A, 0.0))
    assert (readout.σ_x, readout.τ_xy) == approx((80, 50))
    assert (readout.conj_σ, readout.conj_τ) == approx((-40, -50))
    assert readout.θ_p1 == approx(19.90, abs=0.01)
    assert readout.θ_s == approx(19.90 - 45, abs=0.01)
    assert readout.equation == "(σx' − 20.00)² + τ² = 78.1²"
