"""
Session state: the stress and rotation targets driven by the user, the
editable slider ranges, the plotted angle range and the derived values
listed alongside the views.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from mohrview.exception import InvalidRangeError
from mohrview.structures.presets import get_preset
from mohrview.structures.stress import (StressState, compute_principal,
                                        principal_angles_display)

# Written by the MohrView authors, 2026.

logger = logging.getLogger(__name__)

STRESS_KEYS = ('σ_x', 'σ_y', 'τ_xy')


# ======================================================================

@dataclass(frozen=True)
class ParameterRange:
    """
    A slider value and its editable limits.  The value always lies
    within [`lo`, `hi`].
    """
    value: float
    lo: float = -200.0
    hi: float = 200.0
    step: float = 1.0

    def __post_init__(self):
        if not self.lo < self.hi:
            raise InvalidRangeError(f"Require lo < hi, got lo = {self.lo}, "
                                    f"hi = {self.hi}.", lower=self.lo,
                                    upper=self.hi)
        if not (self.lo <= self.value <= self.hi):
            raise ValueError(f"Value {self.value} outside range "
                             f"[{self.lo}, {self.hi}].")

    def with_value(self, value: float) -> ParameterRange:
        """New value, clamped into the current limits."""
        return replace(self, value=min(max(value, self.lo), self.hi))

    def with_lo(self, lo: float) -> ParameterRange:
        """
        New lower limit.  The value is raised to `lo` if it would fall
        below it.

        Raises
        ------
        InvalidRangeError
            If ``lo >= hi``.
        """
        if not lo < self.hi:
            raise InvalidRangeError(f"Require lo < hi = {self.hi}, got: "
                                    f"{lo}", lower=lo, upper=self.hi)
        return replace(self, lo=lo, value=max(self.value, lo))

    def with_hi(self, hi: float) -> ParameterRange:
        """As for `with_lo`, for the upper limit."""
        if not hi > self.lo:
            raise InvalidRangeError(f"Require hi > lo = {self.lo}, got: "
                                    f"{hi}", lower=self.lo, upper=hi)
        return replace(self, hi=hi, value=min(self.value, hi))


@dataclass(frozen=True)
class DerivedValues:
    """
    Values shown in the summary panel.  Principal angles are in [0, 180)
    and are ``None`` for a hydrostatic state.
    """
    σ_1: float
    σ_2: float
    τ_max: float
    σ_avg: float
    θ_p1: float | None
    θ_p2: float | None


# ----------------------------------------------------------------------

class Session:
    """
    Owns the targets that the views chase.  The views read these
    targets; only this object (driven by the host's controls or by an
    `InteractionController` rotate callback) changes them.

    Listeners added with `add_change_callback` are called with the
    session after every change.

    Initial stress components must lie within the default slider range
    [-200, 200], otherwise `ValueError` is raised.
    """

    def __init__(self, state: StressState = None, θ: float = 0.0,
                 θ_min: float = 0.0, θ_max: float = 180.0):
        if state is None:
            state = get_preset('Default')
        self._params = {key: ParameterRange(getattr(state, key))
                        for key in STRESS_KEYS}
        if not θ_min < θ_max:
            raise InvalidRangeError(f"Require θ_min < θ_max, got θ_min = "
                                    f"{θ_min}, θ_max = {θ_max}.",
                                    lower=θ_min, upper=θ_max)
        self._θ = θ
        self._θ_range = (θ_min, θ_max)
        self._on_change_callbacks: list[Callable[[Session], None]] = []

    # -- Properties ----------------------------------------------------

    @property
    def state(self) -> StressState:
        return StressState(*(self._params[k].value for k in STRESS_KEYS))

    @property
    def θ(self) -> float:
        return self._θ

    @property
    def θ_range(self) -> tuple[float, float]:
        return self._θ_range

    def parameter(self, key: str) -> ParameterRange:
        return self._params[key]

    def add_change_callback(self, callback: Callable[[Session], None]):
        self._on_change_callbacks.append(callback)

    # -- Stress --------------------------------------------------------

    def set_stress(self, key: str, value: float):
        """Set one stress component, clamped into its slider range."""
        self._update(key, self._params[key].with_value(value))

    def set_stress_lo(self, key: str, lo: float):
        self._update(key, self._params[key].with_lo(lo))

    def set_stress_hi(self, key: str, hi: float):
        self._update(key, self._params[key].with_hi(hi))

    def apply_preset(self, name: str):
        """
        Load a named preset.  Slider ranges return to their defaults and
        the rotation is reset to zero.
        """
        state = get_preset(name)
        self._params = {key: ParameterRange(getattr(state, key))
                        for key in STRESS_KEYS}
        self._θ = 0.0
        logger.debug(f"Preset '{name}' applied: {state}")
        self._notify()

    # -- Angles --------------------------------------------------------

    def set_θ(self, θ: float):
        self._θ = θ
        self._notify()

    def set_θ_range(self, θ_min: float, θ_max: float):
        """
        Raises
        ------
        InvalidRangeError
            If ``θ_min >= θ_max``.  The current range is kept.
        """
        if not θ_min < θ_max:
            raise InvalidRangeError(f"Require θ_min < θ_max, got θ_min = "
                                    f"{θ_min}, θ_max = {θ_max}.",
                                    lower=θ_min, upper=θ_max)
        self._θ_range = (θ_min, θ_max)
        self._notify()

    def set_θ_min(self, θ_min: float):
        self.set_θ_range(θ_min, self._θ_range[1])

    def set_θ_max(self, θ_max: float):
        self.set_θ_range(self._θ_range[0], θ_max)

    # -- Derived -------------------------------------------------------

    def derived(self) -> DerivedValues:
        state = self.state
        p = compute_principal(state)
        angles = principal_angles_display(state)
        θ_p1, θ_p2 = angles if angles is not None else (None, None)
        return DerivedValues(σ_1=p.σ_1, σ_2=p.σ_2, τ_max=p.τ_max,
                             σ_avg=state.σ_avg, θ_p1=θ_p1, θ_p2=θ_p2)

    # -- Internal ------------------------------------------------------

    def _update(self, key: str, param: ParameterRange):
        self._params[key] = param
        self._notify()

    def _notify(self):
        for callback in self._on_change_callbacks:
            try:
                callback(self)
            except Exception:
                logger.exception("Error in session change callback "
                                 "(ignored).")
