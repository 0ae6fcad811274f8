import logging

import pytest

from mohrview.animation import (FrameLoop, CurveView, OrientationView,
                                CircleView)
from mohrview.exception import InvalidRangeError
from mohrview.render.primitives import Polyline, Text
from mohrview.structures import StressState


# ======================================================================

class FakeScheduler:
    """Stands in for a host's request / cancel frame functions."""

    def __init__(self):
        self.pending = {}
        self._next_handle = 0

    def request(self, callback):
        self._next_handle += 1
        self.pending[self._next_handle] = callback
        return self._next_handle

    def cancel(self, handle):
        self.pending.pop(handle, None)

    def fire(self, n=1):
        for _ in range(n):
            due, self.pending = self.pending, {}
            for callback in due.values():
                callback()


@pytest.fixture
def sched():
    return FakeScheduler()


# ----------------------------------------------------------------------

def test_loop_runs_each_frame(sched):
    calls = []
    loop = FrameLoop(sched.request, sched.cancel, lambda: calls.append(1))
    assert not loop.running

    loop.start()
    loop.start()  # Already running, no second frame.
    assert len(sched.pending) == 1

    for _ in range(5):
        sched.fire()
        assert len(sched.pending) == 1
    assert len(calls) == 5

    loop.stop()
    assert not loop.running and not sched.pending
    sched.fire()
    assert len(calls) == 5


def test_restart_never_duplicates(sched):
    calls = []
    loop = FrameLoop(sched.request, sched.cancel, lambda: calls.append(1))
    loop.start()
    for _ in range(10):
        loop.restart()
        assert len(sched.pending) == 1

    sched.fire(3)
    assert len(calls) == 3


def test_cancelled_frame_firing_late(sched):
    calls = []
    loop = FrameLoop(sched.request, sched.cancel, lambda: calls.append(1))
    loop.start()
    stale, = sched.pending.values()
    loop.restart()

    stale()  # Host ignored the cancel.
    assert calls == []
    assert len(sched.pending) == 1


def test_loop_stops_on_false(sched):
    frames = iter([True, None, False])
    loop = FrameLoop(sched.request, sched.cancel, lambda: next(frames))
    loop.start()
    sched.fire(3)
    assert not loop.running and not sched.pending


def test_loop_stops_on_error(sched, caplog):
    def bad_frame():
        raise RuntimeError("boom")

    loop = FrameLoop(sched.request, sched.cancel, bad_frame, name='Bad')
    loop.start()
    with caplog.at_level(logging.ERROR):
        sched.fire()

    assert not loop.running
    assert "[Bad] Frame callback failed" in caplog.text


# ----------------------------------------------------------------------

def test_curve_view(sched):
    view = CurveView(StressState(0, 0, 0), 0, 180, size=(600, 300))
    painted = []
    view.add_paint_callback(painted.append)
    view.attach(sched.request, sched.cancel)
    assert view.running

    view.set_target(StressState(80, -40, 50))
    sched.fire(2)
    assert len(painted) == 2
    assert view.stress.displayed.σ_x == pytest.approx(80 * (1 - 0.88 ** 2))
    assert any(isinstance(p, Polyline) for p in view.primitives)

    # Changing the range restarts the single loop.
    view.set_range(-90, 90)
    assert view.θ_range == (-90, 90)
    assert len(sched.pending) == 1

    with pytest.raises(InvalidRangeError):
        view.set_range(90, -90)
    assert view.θ_range == (-90, 90)

    view.set_size((800, 400))
    assert len(sched.pending) == 1

    view.detach()
    assert not view.running and not sched.pending


def test_orientation_view(sched):
    view = OrientationView(StressState(80, -40, 50), size=(300, 300))
    view.attach(sched.request, sched.cancel)
    view.set_target(45.0)
    sched.fire(150)
    assert view.θ.arrived
    assert view.θ.displayed == 45.0

    texts = {p.text for p in view.primitives if isinstance(p, Text)}
    assert "θ = 45.0°" in texts


def test_views_run_independently(sched):
    curve = CurveView(StressState(1, 2, 3))
    orient = OrientationView(StressState(1, 2, 3))
    curve.attach(sched.request, sched.cancel)
    orient.attach(sched.request, sched.cancel)
    assert len(sched.pending) == 2

    curve.set_range(10, 20)
    assert len(sched.pending) == 2
    orient.detach()
    assert len(sched.pending) == 1


def test_animated_view_requires_hooks():
    from mohrview.animation.views import _AnimatedView

    class NoBuild(_AnimatedView):
        def _step(self):
            pass

    with pytest.raises(TypeError):
        NoBuild((100, 100), 'partial')

    class Blank(NoBuild):
        def _build(self):
            return []

    view = Blank((100, 100), 'blank')
    view.frame()
    assert view.primitives == []

def test_circle_view():
    view = CircleView(StressState(80, -40, 50), 10.0)
    full = view.primitives()
    view.controller.viewport.set_zoom(1.0)
    view.controller.viewport.reset()
    assert view.controller.viewport.zoom == 1.6
    assert len(view.primitives()) == len(full)

    view.toggle('grid')
    assert not view.visibility.grid
    assert len(view.primitives()) < len(full)
