from __future__ import annotations

from dataclasses import dataclass, fields, replace

# Written by the MohrView authors, 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class ViewOptions:
    """
    Dataclass that holds the numerical and interaction tunables used
    throughout the package.  See `get_view_options` and
    `set_view_options` for full details.
    """
    eps: float
    stress_speed: float
    angle_speed: float
    angle_snap: float
    curve_steps: int
    curve_margin: float
    zoom_min: float
    zoom_max: float
    zoom_default: float
    wheel_factor: float
    button_factor: float
    drag_deg_per_px: float
    drag_θ_min: float
    drag_θ_max: float
    scale_margin: float
    scale_pad: float
    scale_min: float
    scale_max: float

    def __post_init__(self):
        """Check certain values"""
        if self.eps <= 0:
            raise ValueError("Require 'eps' > 0.")
        for name in ('stress_speed', 'angle_speed'):
            if not (0 < getattr(self, name) <= 1):
                raise ValueError(f"Require 0 < '{name}' <= 1.")
        if self.angle_snap < 0:
            raise ValueError("Require 'angle_snap' >= 0.")
        if self.curve_steps < 1:
            raise ValueError("Require 'curve_steps' >= 1.")
        if not (0 < self.zoom_min <= self.zoom_default <= self.zoom_max):
            raise ValueError("Require 0 < 'zoom_min' <= 'zoom_default' <= "
                             "'zoom_max'.")
        if self.wheel_factor <= 1 or self.button_factor <= 1:
            raise ValueError("Require zoom step factors > 1.")
        if self.drag_θ_min >= self.drag_θ_max:
            raise ValueError("Require 'drag_θ_min' < 'drag_θ_max'.")
        if not (0 < self.scale_min <= self.scale_max):
            raise ValueError("Require 0 < 'scale_min' <= 'scale_max'.")


# Create single instance and set defaults.
_view_options = ViewOptions(
    eps=1e-9,
    stress_speed=0.12,
    angle_speed=0.14,
    angle_snap=0.01,
    curve_steps=500,
    curve_margin=0.12,
    zoom_min=0.4,
    zoom_max=8.0,
    zoom_default=1.6,
    wheel_factor=1.12,
    button_factor=1.25,
    drag_deg_per_px=0.5,
    drag_θ_min=0.0,
    drag_θ_max=180.0,
    scale_margin=80.0,
    scale_pad=10.0,
    scale_min=0.5,
    scale_max=8.0
)


# ----------------------------------------------------------------------

def get_view_options() -> ViewOptions:
    """
    Returns
    -------
    view_options : ViewOptions
        Returns a copy of the current options.  For a full description
        of each option, see `set_view_options`.
    """
    return replace(_view_options)


# noinspection PyIncorrectDocstring
def set_view_options(**kwargs):
    """
    Set the current view options.

    Parameters
    ----------
    eps : float, default = 1e-9
        Single tolerance used for every near-zero comparison: the
        hydrostatic (degenerate) test on both principal angle formulae,
        and the minimum step between adjacent shear samples that counts
        as a crossing.  Using one value means the curve view and the
        circle view always agree on whether a state is degenerate.

    stress_speed : float, default = 0.12
        Fraction of the remaining distance covered per animation frame
        when smoothing stress components.

    angle_speed : float, default = 0.14
        As for `stress_speed` but for the rotation angle.

    angle_snap : float, default = 0.01
        The smoothed angle snaps exactly onto its target once closer
        than this (degrees).

    curve_steps : int, default = 500
        Number of intervals used when sampling the angle-domain curve.

    curve_margin : float, default = 0.12
        Fractional margin added above and below the sampled curve
        values when auto-scaling the value axis.

    zoom_min, zoom_max : float, default = 0.4, 8.0
        Zoom limits of the Mohr's circle viewport.

    zoom_default : float, default = 1.6
        Zoom applied initially and when the view is reset.

    wheel_factor, button_factor : float, default = 1.12, 1.25
        Multiplicative zoom step for one wheel notch or one button press.

    drag_deg_per_px : float, default = 0.5
        Rotation applied per horizontal pixel when dragging the element
        orientation diagram.

    drag_θ_min, drag_θ_max : float, default = 0.0, 180.0
        Range the drag-to-rotate angle is clamped into (degrees).

    scale_margin, scale_pad : float, default = 80.0, 10.0
        Screen margin (pixels) and stress padding used when fitting the
        circle into the viewport.

    scale_min, scale_max : float, default = 0.5, 8.0
        Limits of the automatic circle display scale (pixels per unit
        stress).
    """
    global _view_options
    names = {f.name for f in fields(ViewOptions)}
    for k in kwargs:
        if k not in names:
            raise AttributeError(f"Unknown view option '{k}'.")

    _view_options = replace(_view_options, **kwargs)
