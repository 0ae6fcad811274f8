"""
Sampling of transformed stress over an angle range, principal markers
by zero-crossing of the shear curve and the primitives of the
stress-vs-angle view.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from mohrview._opts import get_view_options
from mohrview.exception import InvalidRangeError
from mohrview.render.primitives import (Line, Polyline, Circle, Polygon,
                                        Text, Primitive)
from mohrview.structures.stress import StressState, compute_transform

# Written by the MohrView authors, 2026.

# Plot box padding (left, right, top, bottom) in pixels.
CURVE_PADDING = (62.0, 28.0, 28.0, 48.0)
N_θ_DIVS, N_VALUE_DIVS = 10, 6


# ======================================================================

@dataclass(frozen=True)
class CurveSample:
    """
    Transformed stresses on one shared, strictly ascending `θ` grid
    (degrees).
    """
    θ: np.ndarray
    σ_x: np.ndarray
    σ_y: np.ndarray
    τ_xy: np.ndarray

    def __len__(self):
        return len(self.θ)

    @property
    def θ_min(self) -> float:
        return float(self.θ[0])

    @property
    def θ_max(self) -> float:
        return float(self.θ[-1])


@dataclass(frozen=True)
class ZeroCrossing:
    """Interpolated angle where the shear curve crosses zero."""
    θ: float
    σ: float


# ----------------------------------------------------------------------

def sample_curve(state: StressState, θ_min: float, θ_max: float,
                 steps: int = None) -> CurveSample:
    """
    Sample the stress transformation at ``steps + 1`` evenly spaced
    angles over ``[θ_min, θ_max]`` (both ends included).

    Parameters
    ----------
    state : StressState
        Reference stress state.
    θ_min, θ_max : float
        Angle range (degrees).  Require ``θ_min < θ_max``.
    steps : int, optional
        Number of intervals.  Defaults to the `curve_steps` view option
        (500).

    Returns
    -------
    CurveSample

    Raises
    ------
    InvalidRangeError
        If ``θ_min >= θ_max``.  The bounds are not reordered.
    ValueError
        If ``steps < 1``.
    """
    if not θ_min < θ_max:
        raise InvalidRangeError(f"Require θ_min < θ_max, got θ_min = "
                                f"{θ_min}, θ_max = {θ_max}.",
                                lower=θ_min, upper=θ_max)
    if steps is None:
        steps = get_view_options().curve_steps
    if steps < 1:
        raise ValueError(f"Require steps >= 1, got: {steps}")

    θ = np.linspace(θ_min, θ_max, num=steps + 1)
    rot = compute_transform(state, θ)
    return CurveSample(θ=θ, σ_x=rot.σ_x, σ_y=rot.σ_y, τ_xy=rot.τ_xy)


def find_zero_crossings(sample: CurveSample,
                        eps: float = None) -> list[ZeroCrossing]:
    """
    Locate every angle in the sample where the shear curve changes sign.

    A crossing is taken for each adjacent pair of shear values whose
    product is ``<= 0`` and whose difference exceeds `eps`.  The
    crossing angle is found by linear interpolation and the normal
    stress at the crossing uses the same interpolation fraction.  A
    crossing falling exactly on a sample point is reported once.

    Returns
    -------
    [ZeroCrossing, ...]
        Ascending in `θ`; empty when there is no sign change (this is
        not an error).
    """
    if eps is None:
        eps = get_view_options().eps

    τ0, τ1 = sample.τ_xy[:-1], sample.τ_xy[1:]
    idx = np.nonzero((τ0 * τ1 <= 0) & (np.abs(τ0 - τ1) > eps))[0]
    if idx.size == 0:
        return []

    frac = -τ0[idx] / (τ1[idx] - τ0[idx])
    θ, σ = sample.θ, sample.σ_x
    θ_c = θ[idx] + frac * (θ[idx + 1] - θ[idx])
    σ_c = σ[idx] + frac * (σ[idx + 1] - σ[idx])

    crossings = []
    for θ_i, σ_i in zip(θ_c, σ_c):
        if crossings and abs(θ_i - crossings[-1].θ) <= eps:
            continue  # Same crossing seen from both sides of a sample.
        crossings.append(ZeroCrossing(θ=float(θ_i), σ=float(σ_i)))

    return crossings


def value_limits(sample: CurveSample, margin: float = None,
                 eps: float = None) -> tuple[float, float]:
    """
    Value-axis limits covering both the normal and shear curves, with
    `margin` (fraction of the range, default 12%) added on each side.
    If the curves are flat (range below `eps`) a nominal range of 1 is
    used instead so that later scaling never divides by zero.
    """
    opts = get_view_options()
    margin = opts.curve_margin if margin is None else margin
    eps = opts.eps if eps is None else eps

    lo = float(min(np.min(sample.σ_x), np.min(sample.τ_xy)))
    hi = float(max(np.max(sample.σ_x), np.max(sample.τ_xy)))
    span = hi - lo
    if span < eps:
        span = 1.0
    pad = span * margin
    return lo - pad, hi + pad


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class _PlotBox:
    """Maps (θ, value) onto the screen rectangle of the plot."""
    left: float
    top: float
    width: float
    height: float
    θ_lim: tuple[float, float]
    v_lim: tuple[float, float]

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    def x(self, θ):
        θ0, θ1 = self.θ_lim
        return self.left + (θ - θ0) / (θ1 - θ0) * self.width

    def y(self, v):
        v0, v1 = self.v_lim
        return self.top + (1 - (v - v0) / (v1 - v0)) * self.height


def curve_primitives(sample: CurveSample,
                     size: tuple[float, float]) -> list[Primitive]:
    """
    Build the stress-vs-angle view for `sample` on a surface of `size`
    = (width, height) pixels: grid with labels, zero line, principal
    markers at each shear zero crossing, the :math:`σ_{x'}` and
    :math:`τ_{x'y'}` curves, plot border and axis titles.
    """
    W, H = size
    pad_l, pad_r, pad_t, pad_b = CURVE_PADDING
    box = _PlotBox(left=pad_l, top=pad_t, width=W - pad_l - pad_r,
                   height=H - pad_t - pad_b,
                   θ_lim=(sample.θ_min, sample.θ_max),
                   v_lim=value_limits(sample))
    prims: list[Primitive] = []

    # -- Grid and Labels -----------------------------------------------

    labels = []
    θ_step = (sample.θ_max - sample.θ_min) / N_θ_DIVS
    for i in range(N_θ_DIVS + 1):
        θ = sample.θ_min + i * θ_step
        x = box.x(θ)
        role = 'grid-mid' if i % 2 == 0 else 'grid'
        prims.append(Line((x, box.top), (x, box.bottom), role=role))
        labels.append(Text((x, box.bottom + 18), f"{θ:.0f}°",
                           role='axis-label', anchor='middle'))

    v0, v1 = box.v_lim
    v_step = (v1 - v0) / N_VALUE_DIVS
    for i in range(N_VALUE_DIVS + 1):
        v = v0 + i * v_step
        y = box.y(v)
        role = 'grid-mid' if i % 2 == 0 else 'grid'
        prims.append(Line((box.left, y), (box.right, y), role=role))
        labels.append(Text((box.left - 8, y + 4), f"{v:.1f}",
                           role='axis-label', anchor='end'))

    y0 = box.y(0.0)
    if box.top <= y0 <= box.bottom:
        prims.append(Line((box.left, y0), (box.right, y0), role='zero-axis'))

    # -- Principal Markers ---------------------------------------------

    for cross in find_zero_crossings(sample):
        mx, my = box.x(cross.θ), box.y(cross.σ)
        prims.append(Circle((mx, my), 5.0, role='principal-marker'))
        prims.append(Line((mx, box.top), (mx, box.bottom), dashed=True,
                          role='principal-line'))

    # -- Curves --------------------------------------------------------

    xs = box.x(sample.θ)
    for values, role in ((sample.σ_x, 'sigma-curve'),
                         (sample.τ_xy, 'tau-curve')):
        ys = box.y(values)
        prims.append(Polyline(tuple(zip(xs.tolist(), ys.tolist())),
                              role=role))

    # -- Border and Titles ---------------------------------------------

    prims.append(Polygon(((box.left, box.top), (box.right, box.top),
                          (box.right, box.bottom), (box.left, box.bottom)),
                         role='plot-border'))
    prims.extend(labels)
    prims.append(Text((box.left + box.width / 2, box.bottom + 40),
                      "θ  (degrees)", role='axis-title', anchor='middle'))
    prims.append(Text((box.left - 46, box.top + box.height / 2),
                      "Stress  (MPa)", role='axis-title-y', anchor='middle'))
    return prims
