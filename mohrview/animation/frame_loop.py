"""
Cooperative frame loop driven by a host frame scheduler.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

# Written by the MohrView authors, 2026.

logger = logging.getLogger(__name__)


# ======================================================================

class FrameLoop:
    """
    Repeatedly calls `on_frame` once per host frame.

    The host supplies ``request_frame(callback) -> handle``, which must
    arrange for ``callback()`` to be called once on the next frame, and
    ``cancel_frame(handle)``.  At most one frame is ever pending: any
    pending frame is cancelled before another is requested.

    `on_frame` may return ``False`` to let the loop stop after the
    current frame.  If it raises, the exception is logged and the loop
    stops.
    """

    def __init__(self, request_frame: Callable[[Callable], Any],
                 cancel_frame: Callable[[Any], None],
                 on_frame: Callable[[], bool | None], name: str = ''):
        self._request_frame = request_frame
        self._cancel_frame = cancel_frame
        self._on_frame = on_frame
        self.name = name or 'FrameLoop'
        self._handle = None
        self._generation = 0  # Ignores late calls from cancelled frames.

    @property
    def running(self) -> bool:
        """``True`` while a frame is pending."""
        return self._handle is not None

    def start(self):
        """Start the loop if not already running."""
        if not self.running:
            self._schedule()

    def restart(self):
        """Cancel any pending frame and schedule a fresh one."""
        logger.debug(f"[{self.name}] Restart")
        self.stop()
        self._schedule()

    def stop(self):
        if self._handle is not None:
            self._cancel_frame(self._handle)
            self._handle = None
        self._generation += 1

    # -- Internal ------------------------------------------------------

    def _schedule(self):
        generation = self._generation

        def tick(*_):
            if generation != self._generation:
                return  # Frame was cancelled but fired anyway.
            self._handle = None
            try:
                keep_going = self._on_frame()
            except Exception:
                logger.exception(f"[{self.name}] Frame callback failed, "
                                 f"stopping.")
                return
            if (keep_going is not False and self._handle is None and
                    generation == self._generation):
                self._schedule()

        self._handle = self._request_frame(tick)
