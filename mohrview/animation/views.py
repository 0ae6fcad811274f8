"""
Animated views.  Each view holds its smoothed display state, builds its
primitives once per frame and hands them to any registered paint
callbacks.  The curve and orientation views run independent frame loops
that are not synchronised with each other.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from mohrview.animation.frame_loop import FrameLoop
from mohrview.animation.smoother import Smoothed
from mohrview.exception import InvalidRangeError
from mohrview.interaction import InteractionController, Viewport
from mohrview.render.primitives import Primitive
from mohrview.structures.curve import curve_primitives, sample_curve
from mohrview.structures.element import element_geometry, element_primitives
from mohrview.structures.mohr import (DEFAULT_VIEWPORT, Visibility,
                                      map_circle_geometry, mohr_primitives)
from mohrview.structures.stress import StressState

# Written by the MohrView authors, 2026.

logger = logging.getLogger(__name__)

PaintCallback = Callable[[list[Primitive]], None]


# ======================================================================

class _AnimatedView(ABC):
    """Frame loop attachment and paint callbacks shared by the views."""

    def __init__(self, size: tuple[float, float], name: str):
        self._size = size
        self._name = name
        self._loop: FrameLoop | None = None
        self._paint_callbacks: list[PaintCallback] = []
        self.primitives: list[Primitive] = []

    @property
    def size(self) -> tuple[float, float]:
        return self._size

    @property
    def running(self) -> bool:
        return self._loop is not None and self._loop.running

    def add_paint_callback(self, callback: PaintCallback):
        self._paint_callbacks.append(callback)

    def attach(self, request_frame, cancel_frame):
        """
        Attach to a host frame scheduler (see `FrameLoop`) and start
        animating.  Attaching again replaces the previous loop.
        """
        self.detach()
        self._loop = FrameLoop(request_frame, cancel_frame, self.frame,
                               name=self._name)
        self._loop.start()

    def detach(self):
        if self._loop is not None:
            self._loop.stop()
            self._loop = None

    def set_size(self, size: tuple[float, float]):
        """
        Change the drawing surface size.  Counts as a new surface so the
        frame loop is restarted.
        """
        if size == self._size:
            return
        self._size = size
        self._restart()

    def frame(self):
        """Advance one frame, rebuild the primitives and paint them."""
        self._step()
        self.primitives = self._build()
        for callback in self._paint_callbacks:
            try:
                callback(self.primitives)
            except Exception:
                logger.exception(f"[{self._name}] Paint callback failed "
                                 f"(ignored).")

    def _restart(self):
        if self._loop is not None:
            self._loop.restart()

    @abstractmethod
    def _step(self):
        """Advance the smoothed display state by one frame."""
        raise NotImplementedError

    @abstractmethod
    def _build(self) -> list[Primitive]:
        raise NotImplementedError


# ----------------------------------------------------------------------

class CurveView(_AnimatedView):
    """
    Stress-vs-angle curve.  The stress components are smoothed toward
    their targets; the angle range takes effect immediately.
    """

    def __init__(self, state: StressState, θ_min: float = 0.0,
                 θ_max: float = 180.0,
                 size: tuple[float, float] = (720.0, 420.0)):
        super().__init__(size, 'CurveView')
        self._check_range(θ_min, θ_max)
        self.stress = Smoothed.stress(state)
        self._θ_range = (θ_min, θ_max)

    @property
    def θ_range(self) -> tuple[float, float]:
        return self._θ_range

    def set_target(self, state: StressState):
        self.stress = self.stress.retarget(state)

    def set_range(self, θ_min: float, θ_max: float):
        """
        Change the plotted angle range, restarting the frame loop.

        Raises
        ------
        InvalidRangeError
            If ``θ_min >= θ_max``; the current range is kept.
        """
        self._check_range(θ_min, θ_max)
        if (θ_min, θ_max) == self._θ_range:
            return
        self._θ_range = (θ_min, θ_max)
        logger.debug(f"[{self._name}] Range → [{θ_min}, {θ_max}]")
        self._restart()

    @staticmethod
    def _check_range(θ_min, θ_max):
        if not θ_min < θ_max:
            raise InvalidRangeError(f"Require θ_min < θ_max, got θ_min = "
                                    f"{θ_min}, θ_max = {θ_max}.",
                                    lower=θ_min, upper=θ_max)

    def _step(self):
        self.stress = self.stress.step()

    def _build(self) -> list[Primitive]:
        sample = sample_curve(self.stress.displayed, *self._θ_range)
        return curve_primitives(sample, self._size)


class OrientationView(_AnimatedView):
    """
    Rotated element diagram.  Only the angle is smoothed; it snaps onto
    the target once within `angle_snap`.
    """

    def __init__(self, state: StressState, θ: float = 0.0,
                 size: tuple[float, float] = (360.0, 360.0)):
        super().__init__(size, 'OrientationView')
        self.state = state
        self.θ = Smoothed.angle(θ)

    def set_state(self, state: StressState):
        self.state = state

    def set_target(self, θ: float):
        self.θ = self.θ.retarget(θ)

    def _step(self):
        self.θ = self.θ.step()

    def _build(self) -> list[Primitive]:
        geom = element_geometry(self.state, self.θ.displayed, self._size)
        return element_primitives(geom, self._size)


# ----------------------------------------------------------------------

class CircleView:
    """
    Mohr's circle view.  It has no smoothing of its own: primitives are
    rebuilt on demand from the current state and angle, then the
    controller's zoom / pan is applied.
    """

    def __init__(self, state: StressState, θ: float = 0.0,
                 size: tuple[float, float] = DEFAULT_VIEWPORT,
                 controller: InteractionController = None):
        self.state = state
        self.θ = θ
        self.size = size
        self.visibility = Visibility()
        if controller is None:
            controller = InteractionController(Viewport(size))
        self.controller = controller

    def toggle(self, layer: str):
        """Toggle one of the `Visibility` layers by name."""
        self.visibility = self.visibility.toggled(layer)

    def primitives(self) -> list[Primitive]:
        geom = map_circle_geometry(self.state, self.θ, self.size)
        prims = mohr_primitives(geom, self.visibility,
                                hovered=self.controller.hovered)
        if self.controller.viewport is None:
            return prims
        return self.controller.viewport.apply(prims)
