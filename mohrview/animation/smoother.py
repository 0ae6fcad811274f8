"""
Exponential smoothing of displayed values toward their targets.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from mohrview._opts import get_view_options
from mohrview.structures.stress import StressState

# Written by the MohrView authors, 2026.


# ======================================================================

def advance(displayed, target, speed: float, snap: float = None):
    r"""
    One smoothing tick, moving `displayed` a fraction `speed` of the
    remaining distance toward `target`:

    .. math:: d' = d + (t - d) \cdot speed

    Parameters
    ----------
    displayed, target : float, ndarray or StressState
        Current and goal values.  Any type supporting ``+``, ``-`` and
        multiplication by a float may be used.
    speed : float
        Fraction in (0, 1].  Values in this range never overshoot.
    snap : float, optional
        For scalars only.  If the distance *before* the step is less
        than `snap`, `target` is returned exactly.  Without `snap` the
        distance decays geometrically and never becomes exactly zero.

    Returns
    -------
    Same type as `displayed`.

    Raises
    ------
    ValueError
        If `speed` is outside (0, 1].
    """
    if not (0 < speed <= 1):
        raise ValueError(f"Require 0 < speed <= 1, got: {speed}")

    if snap is not None and abs(target - displayed) < snap:
        return target
    return displayed + (target - displayed) * speed


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Smoothed:
    """
    A displayed value chasing a target.  Instances are immutable;
    `retarget` and `step` return new instances.  Setting a new target
    simply replaces the old one, so superseded targets are never
    queued.
    """
    displayed: Any
    target: Any
    speed: float
    snap: float | None = None

    @classmethod
    def stress(cls, state: StressState) -> Smoothed:
        """Smoothed stress state at rest, using `stress_speed`."""
        return cls(displayed=state, target=state,
                   speed=get_view_options().stress_speed)

    @classmethod
    def angle(cls, θ: float) -> Smoothed:
        """Smoothed angle at rest, using `angle_speed` and `angle_snap`."""
        opts = get_view_options()
        return cls(displayed=θ, target=θ, speed=opts.angle_speed,
                   snap=opts.angle_snap)

    @property
    def arrived(self) -> bool:
        """
        ``True`` once the displayed value equals the target exactly.
        Only values with a `snap` are guaranteed to arrive.
        """
        return self.displayed == self.target

    def retarget(self, target) -> Smoothed:
        return replace(self, target=target)

    def step(self) -> Smoothed:
        return replace(self, displayed=advance(self.displayed, self.target,
                                               self.speed, self.snap))
