"""
Zoom and pan of the Mohr's circle viewport.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from mohrview._opts import get_view_options
from mohrview.render.primitives import (Arc, Circle, Line, Point, Polygon,
                                        Polyline, Primitive, Text)

# Written by the MohrView authors, 2026.

logger = logging.getLogger(__name__)


# ======================================================================

@dataclass(frozen=True)
class ViewportState:
    """Current zoom factor and pan offset (pixels)."""
    zoom: float
    pan: Point = (0.0, 0.0)


class Viewport:
    """
    Zoom / pan state of a drawing surface of `size` = (width, height)
    pixels.  Zooming is about the surface centre and the zoom factor is
    always held within the `zoom_min` and `zoom_max` view options.  Pan
    offsets are in screen pixels and so are independent of zoom.
    """

    def __init__(self, size: tuple[float, float], zoom: float = None):
        self.size = size
        if zoom is None:
            zoom = get_view_options().zoom_default
        self._state = ViewportState(zoom=self._clamp(zoom))
        self._pan_press: Point | None = None  # Pointer at pan start.
        self._pan_origin: Point = (0.0, 0.0)  # Pan offset at pan start.

    # -- Properties ----------------------------------------------------

    @property
    def state(self) -> ViewportState:
        return self._state

    @property
    def zoom(self) -> float:
        return self._state.zoom

    @property
    def pan(self) -> Point:
        return self._state.pan

    @property
    def panning(self) -> bool:
        return self._pan_press is not None

    # -- Zoom ----------------------------------------------------------

    @staticmethod
    def _clamp(zoom: float) -> float:
        opts = get_view_options()
        return min(max(zoom, opts.zoom_min), opts.zoom_max)

    def set_zoom(self, zoom: float) -> float:
        """Set the zoom factor (clamped) and return the value applied."""
        self._state = replace(self._state, zoom=self._clamp(zoom))
        return self.zoom

    def wheel(self, delta_y: float) -> float:
        """
        Zoom by one wheel notch: in for a negative `delta_y` (scroll up),
        otherwise out.
        """
        factor = get_view_options().wheel_factor
        if delta_y < 0:
            return self.set_zoom(self.zoom * factor)
        return self.set_zoom(self.zoom / factor)

    def zoom_in(self) -> float:
        return self.set_zoom(self.zoom * get_view_options().button_factor)

    def zoom_out(self) -> float:
        return self.set_zoom(self.zoom / get_view_options().button_factor)

    # -- Pan -----------------------------------------------------------

    def begin_pan(self, x: float, y: float):
        """Start panning with the pointer pressed at (`x`, `y`)."""
        self._pan_press = (x, y)
        self._pan_origin = self.pan

    def move_pan(self, x: float, y: float) -> Point:
        """
        Pointer moved to (`x`, `y`) while panning.  The new offset is the
        offset at the press plus the total pointer movement since.  Does
        nothing if no pan is in progress.
        """
        if self._pan_press is None:
            return self.pan

        px, py = self._pan_press
        ox, oy = self._pan_origin
        self._state = replace(self._state, pan=(ox + x - px, oy + y - py))
        return self.pan

    def end_pan(self):
        self._pan_press = None

    # -- Reset ---------------------------------------------------------

    def reset(self):
        """Restore the default zoom and remove any pan."""
        self._pan_press = None
        self._state = ViewportState(
            zoom=self._clamp(get_view_options().zoom_default))
        logger.debug(f"Viewport reset to zoom = {self.zoom}")

    # -- Transformation ------------------------------------------------

    def transform_point(self, p: Point) -> Point:
        """Unzoomed surface position `p` → displayed position."""
        cx, cy = self.size[0] / 2, self.size[1] / 2
        dx, dy = self.pan
        return (cx + dx + self.zoom * (p[0] - cx),
                cy + dy + self.zoom * (p[1] - cy))

    def inverse_point(self, p: Point) -> Point:
        """Displayed position `p` → unzoomed surface position."""
        cx, cy = self.size[0] / 2, self.size[1] / 2
        dx, dy = self.pan
        return (cx + (p[0] - cx - dx) / self.zoom,
                cy + (p[1] - cy - dy) / self.zoom)

    def apply(self, primitives: list[Primitive]) -> list[Primitive]:
        """
        Return `primitives` with the zoom and pan applied.  Positions and
        radii scale with zoom; text is moved but not resized.
        """
        tp = self.transform_point
        out = []
        for prim in primitives:
            if isinstance(prim, Line):
                out.append(replace(prim, start=tp(prim.start),
                                   end=tp(prim.end)))
            elif isinstance(prim, (Polyline, Polygon)):
                out.append(replace(prim, points=tuple(
                    tp(p) for p in prim.points)))
            elif isinstance(prim, (Circle, Arc)):
                out.append(replace(prim, centre=tp(prim.centre),
                                   radius=prim.radius * self.zoom))
            elif isinstance(prim, Text):
                out.append(replace(prim, position=tp(prim.position)))
            else:
                raise TypeError(f"Unknown primitive type: "
                                f"{type(prim).__name__}")
        return out
