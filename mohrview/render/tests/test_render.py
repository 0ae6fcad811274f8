import pytest
from pytest import approx

from mohrview.render.primitives import Arc, Circle, Marker, Text
from mohrview.structures import (StressState, map_circle_geometry,
                                 mohr_primitives, sample_curve,
                                 curve_primitives)


# ======================================================================

def test_arc_flags_and_points():
    arc = Arc((100, 100), 10.0, start=0.0, sweep=90.0)
    assert arc.end == 90.0
    assert (arc.sweep_flag, arc.large_arc) == (0, False)

    # Anticlockwise on screen means upward at 90°.
    assert arc.point_at(90.0) == approx((100, 90))
    assert arc.point_at(0.0) == approx((110, 100))

    arc = Arc((0, 0), 1.0, start=45.0, sweep=-270.0)
    assert (arc.sweep_flag, arc.large_arc) == (1, True)


def test_marker_primitives():
    label = Text((5, 5), "P1")
    marker = Marker('p1', (0, 0), 9.0, role='principal-1', labels=(label,))
    dot, text = marker.primitives()
    assert dot == Circle((0, 0), 9.0, role='principal-1')
    assert text is label
    assert marker.primitives(hovered=True)[0].radius == 11.0

    marker = Marker('conj', (0, 0), 7.0, role='conj-point', labels=(label,),
                    labels_on_hover=True)
    assert len(marker.primitives()) == 1
    assert len(marker.primitives(hovered=True)) == 2


# ----------------------------------------------------------------------

@pytest.fixture
def ax():
    mpl = pytest.importorskip('matplotlib')
    mpl.use('Agg')
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


def test_draw_mohr(ax):
    from mohrview.render import draw_primitives

    size = (900, 820)
    geom = map_circle_geometry(StressState(80, -40, 50), 25.0, size)
    draw_primitives(ax, mohr_primitives(geom), size=size)
    assert ax.get_xlim() == (0, 900)
    assert ax.get_ylim() == (820, 0)
    assert len(ax.patches) > 0
    assert len(ax.texts) > 0


def test_draw_curve(ax):
    from mohrview.render import draw_primitives

    sample = sample_curve(StressState(80, -40, 50), 0, 180)
    draw_primitives(ax, curve_primitives(sample, (720, 420)))
    assert len(ax.lines) > 0


def test_draw_arc_orientation(ax):
    from mohrview.render import draw_primitives

    # With y inverted the screen arc 0° → 90° is data angles -90° → 0°.
    draw_primitives(ax, [Arc((0, 0), 10.0, start=0.0, sweep=90.0)],
                    size=(50, 50))
    patch = ax.patches[-1]
    assert (patch.theta1, patch.theta2) == (-90.0, 0.0)

    draw_primitives(ax, [Arc((0, 0), 10.0, start=30.0, sweep=-60.0)])
    patch = ax.patches[-1]
    assert (patch.theta1, patch.theta2) == (-30.0, 30.0)


def test_draw_unknown_warns(ax):
    from mohrview.render import draw_primitives

    with pytest.warns(UserWarning):
        draw_primitives(ax, ["not a primitive"])
