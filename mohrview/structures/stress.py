"""
Plane stress transformation and principal stress solution.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from mohrview._opts import get_view_options

# Written by the MohrView authors, 2026.


# ======================================================================

@dataclass(frozen=True)
class StressState:
    """
    Plane stress state in the reference `x-y` axes.  Any real triple is
    valid.
    """
    σ_x: float
    σ_y: float
    τ_xy: float

    @property
    def σ_avg(self) -> float:
        """Average normal stress, i.e. the Mohr's circle centre."""
        return 0.5 * (self.σ_x + self.σ_y)

    @property
    def diff(self) -> float:
        """Half the normal stress difference :math:`(σ_x - σ_y) / 2`."""
        return 0.5 * (self.σ_x - self.σ_y)

    @property
    def radius(self) -> float:
        """Mohr's circle radius, equal to the maximum in-plane shear."""
        return float(np.hypot(self.diff, self.τ_xy))

    def __add__(self, other: StressState) -> StressState:
        return StressState(self.σ_x + other.σ_x, self.σ_y + other.σ_y,
                           self.τ_xy + other.τ_xy)

    def __sub__(self, other: StressState) -> StressState:
        return StressState(self.σ_x - other.σ_x, self.σ_y - other.σ_y,
                           self.τ_xy - other.τ_xy)

    def __mul__(self, k: float) -> StressState:
        return StressState(self.σ_x * k, self.σ_y * k, self.τ_xy * k)

    __rmul__ = __mul__

    def max_abs(self) -> float:
        """Largest absolute component."""
        return max(abs(self.σ_x), abs(self.σ_y), abs(self.τ_xy))


@dataclass(frozen=True)
class TransformedState:
    """
    Stresses on the `x'-y'` axes obtained by rotating the reference axes
    anticlockwise by `θ` (degrees, repeated here).  Fields are arrays
    when `θ` was an array.
    """
    σ_x: float | np.ndarray
    σ_y: float | np.ndarray
    τ_xy: float | np.ndarray
    θ: float | np.ndarray


@dataclass(frozen=True)
class PrincipalSolution:
    """
    Principal stresses and orientations.  Always ``σ_1 >= σ_2``,
    ``θ_p2 = θ_p1 + 90`` and ``τ_max = (σ_1 - σ_2) / 2 >= 0``.  Angles
    are in degrees, with `θ_p1` in the range [-90, +90].
    """
    σ_1: float
    σ_2: float
    θ_p1: float
    θ_p2: float
    τ_max: float
    σ_avg: float

    @property
    def θ_s1(self) -> float:
        """Orientation of maximum in-plane shear, 45° before `θ_p1`."""
        return self.θ_p1 - 45.0


@dataclass(frozen=True)
class DegenerateGeometry:
    """
    Returned in place of a `PrincipalSolution` for a hydrostatic stress
    state.  Every orientation is principal so no angle is reported;
    callers should suppress angle-dependent display.  The circle
    collapses to the point (`σ_avg`, 0).
    """
    σ_avg: float

    @property
    def σ_1(self) -> float:
        return self.σ_avg

    @property
    def σ_2(self) -> float:
        return self.σ_avg

    @property
    def τ_max(self) -> float:
        return 0.0


# ----------------------------------------------------------------------


def normalize_angle(θ: ArrayLike, period: float = 180.0) -> ArrayLike:
    """
    Wrap angle/s `θ` into ``[0, period)``.  Negative values wrap from
    the top, e.g. -30 → 150 for the default period.
    """
    res = np.mod(θ, period)
    # np.mod can return `period` itself for tiny negative inputs.
    res = np.where(res >= period, res - period, res)
    return float(res) if np.ndim(res) == 0 else res


def is_hydrostatic(state: StressState, eps: float = None) -> bool:
    """
    Returns ``True`` if `state` has equal normal stresses and no shear
    to within `eps` (default taken from the view options).  This is the
    only degeneracy test in the package so that all views agree.
    """
    if eps is None:
        eps = get_view_options().eps
    return abs(state.diff) < eps and abs(state.τ_xy) < eps


def compute_transform(state: StressState, θ: ArrayLike) -> TransformedState:
    r"""
    Transform `state` to axes rotated anticlockwise by `θ`:

    .. math::
        σ_{x'} &= σ_{avg} + d \cos 2θ + τ_{xy} \sin 2θ \\
        σ_{y'} &= σ_{avg} - d \cos 2θ - τ_{xy} \sin 2θ \\
        τ_{x'y'} &= -d \sin 2θ + τ_{xy} \cos 2θ

    where :math:`d = (σ_x - σ_y)/2`.  The trace :math:`σ_{x'} + σ_{y'}`
    is preserved.

    Parameters
    ----------
    state : StressState
        Reference stress state.
    θ : float or array_like
        Rotation angle/s in **degrees**.  The result has a period of
        180°.

    Returns
    -------
    TransformedState
        Floats for a scalar `θ`, otherwise arrays of the same shape.
    """
    scalar = np.ndim(θ) == 0
    θ = np.asarray(θ, dtype=float)
    two_θ = 2 * np.deg2rad(θ)
    cos_2θ, sin_2θ = np.cos(two_θ), np.sin(two_θ)

    avg, d, τ = state.σ_avg, state.diff, state.τ_xy
    rot = d * cos_2θ + τ * sin_2θ
    σ_x = avg + rot
    σ_y = avg - rot
    τ_xy = -d * sin_2θ + τ * cos_2θ

    if scalar:
        return TransformedState(float(σ_x), float(σ_y), float(τ_xy),
                                float(θ))
    return TransformedState(σ_x, σ_y, τ_xy, θ)


def compute_principal(state: StressState
                      ) -> PrincipalSolution | DegenerateGeometry:
    r"""
    Principal stresses, principal angles and maximum in-plane shear.

    Parameters
    ----------
    state : StressState
        Reference stress state.

    Returns
    -------
    PrincipalSolution or DegenerateGeometry
        `DegenerateGeometry` is returned for a hydrostatic state
        (see `is_hydrostatic`) because :math:`atan2(0, 0)` does not
        define an orientation.  Otherwise `θ_p1` is
        :math:`\frac{1}{2} atan2(τ_{xy}, d)` in degrees, i.e. the
        anticlockwise rotation taking `x-x` onto the `σ_1` axis.
    """
    avg = state.σ_avg
    if is_hydrostatic(state):
        return DegenerateGeometry(σ_avg=avg)

    R = state.radius
    θ_p1 = 0.5 * np.rad2deg(np.arctan2(state.τ_xy, state.diff))
    return PrincipalSolution(σ_1=avg + R, σ_2=avg - R,
                             θ_p1=float(θ_p1), θ_p2=float(θ_p1) + 90.0,
                             τ_max=R, σ_avg=avg)


def principal_angles_display(state: StressState
                             ) -> tuple[float, float] | None:
    r"""
    Principal angles for display in the angle-domain view, using the
    alternate form :math:`\frac{1}{2} atan2(2 τ_{xy}, σ_x - σ_y)`.

    Returns
    -------
    (float, float) or None
        Both principal angles (degrees) normalised into [0, 180), the
        smaller first.  ``None`` for a hydrostatic state (same test as
        `compute_principal`).
    """
    if is_hydrostatic(state):
        return None

    θ = 0.5 * np.rad2deg(np.arctan2(2 * state.τ_xy, state.σ_x - state.σ_y))
    θ_a, θ_b = normalize_angle(θ), normalize_angle(θ + 90.0)
    return (θ_a, θ_b) if θ_a <= θ_b else (θ_b, θ_a)

# ----------------------------------------------------------------------
