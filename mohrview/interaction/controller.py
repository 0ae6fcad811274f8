"""
Pointer interaction: hover highlighting, drag-to-rotate and forwarding
of zoom / pan gestures to a `Viewport`.
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Iterable, Protocol, TypeVar

from mohrview._opts import get_view_options

# Written by the MohrView authors, 2026.

logger = logging.getLogger(__name__)


# ======================================================================

class _Keyed(Protocol):
    key: str


_K = TypeVar('_K', bound=_Keyed)


def hover_order(items: Iterable[_K], hovered: str | None) -> list[_K]:
    """
    Paint order for interactive items: the same order as `items`,
    except the item whose `key` equals `hovered` (if any) moves to the
    end so it is drawn on top.
    """
    items = list(items)
    if hovered is None:
        return items
    rest = [it for it in items if it.key != hovered]
    top = [it for it in items if it.key == hovered]
    return rest + top


# ----------------------------------------------------------------------

class InteractionMode(Enum):
    """Pointer gesture currently in progress."""
    IDLE = auto()
    ROTATE = auto()
    PAN = auto()


class InteractionController:
    """
    Translates pointer events into viewport changes, a hovered marker
    key and a requested rotation angle.

    Listeners added with `add_rotate_callback` are called with the new
    target angle each time a drag changes it, and those added with
    `add_hover_callback` are called with the new hovered key (or
    ``None``).  An exception raised by a listener is logged and does not
    stop the remaining listeners.

    Usage:
        controller = InteractionController(Viewport(size))
        controller.add_rotate_callback(session.set_θ)
        controller.begin_rotate(x, session.θ)
        controller.drag(x + 20)  # θ target += 10°.
    """

    def __init__(self, viewport=None):
        self.viewport = viewport
        self._mode = InteractionMode.IDLE
        self._hovered: str | None = None
        self._rotate_press: tuple[float, float] | None = None  # (x, θ).

        self._on_rotate_callbacks: list[Callable[[float], None]] = []
        self._on_hover_callbacks: list[Callable[[str | None], None]] = []

    @property
    def mode(self) -> InteractionMode:
        return self._mode

    @property
    def hovered(self) -> str | None:
        return self._hovered

    def add_rotate_callback(self, callback: Callable[[float], None]):
        self._on_rotate_callbacks.append(callback)

    def add_hover_callback(self, callback: Callable[[str | None], None]):
        self._on_hover_callbacks.append(callback)

    # -- Hover ---------------------------------------------------------

    def set_hover(self, key: str | None):
        """Set the hovered marker key, notifying listeners on change."""
        if key == self._hovered:
            return
        self._hovered = key
        self._notify(self._on_hover_callbacks, key, "hover")

    def clear_hover(self):
        self.set_hover(None)

    # -- Drag to Rotate ------------------------------------------------

    def begin_rotate(self, x: float, θ: float):
        """Pointer pressed at horizontal position `x` when at angle `θ`."""
        self._rotate_press = (x, θ)
        self._mode = InteractionMode.ROTATE
        logger.debug(f"Rotate drag started at x = {x}, θ = {θ}")

    def drag(self, x: float) -> float | None:
        """
        Pointer moved to `x` during a rotate drag.  The new target is the
        angle at the press plus the horizontal travel times
        `drag_deg_per_px`, clamped into [`drag_θ_min`, `drag_θ_max`].

        Returns
        -------
        float or None
            The new target angle, or ``None`` if not dragging.
        """
        if self._mode is not InteractionMode.ROTATE:
            return None

        opts = get_view_options()
        x0, θ0 = self._rotate_press
        θ = θ0 + (x - x0) * opts.drag_deg_per_px
        θ = min(max(θ, opts.drag_θ_min), opts.drag_θ_max)
        self._notify(self._on_rotate_callbacks, θ, "rotate")
        return θ

    # -- Pan / Zoom ----------------------------------------------------

    def begin_pan(self, x: float, y: float):
        self._require_viewport().begin_pan(x, y)
        self._mode = InteractionMode.PAN

    def move(self, x: float, y: float):
        """Pointer moved while a pan is in progress."""
        if self._mode is InteractionMode.PAN:
            self._require_viewport().move_pan(x, y)

    def release(self):
        """Pointer released; ends any gesture in progress."""
        if self._mode is InteractionMode.PAN:
            self._require_viewport().end_pan()
        self._rotate_press = None
        self._mode = InteractionMode.IDLE

    def wheel(self, delta_y: float) -> float:
        return self._require_viewport().wheel(delta_y)

    def double_click(self):
        """Double click resets zoom and pan exactly as the reset button."""
        self._require_viewport().reset()

    # -- Internal ------------------------------------------------------

    def _require_viewport(self):
        if self.viewport is None:
            raise RuntimeError("No viewport attached to this controller.")
        return self.viewport

    @staticmethod
    def _notify(callbacks, value, what: str):
        for callback in callbacks:
            try:
                callback(value)
            except Exception:
                logger.exception(f"Error in {what} callback (ignored).")
