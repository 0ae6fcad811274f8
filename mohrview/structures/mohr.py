"""
Mohr's circle construction geometry.

Conventions
-----------
- The σ axis points right.  The shear axis is *inverted*: positive `τ`
  is plotted downward.  A stress point (σ, τ) therefore sits at plot
  coordinates (σ, -τ) where the plot `y` axis points up.
- Angles on the circle are measured in degrees anticlockwise in that
  plot frame (which is also anticlockwise as seen on screen), about the
  centre (σ_avg, 0).
- Reference point A is the `x` face (σ_x, τ_xy), at angle
  :math:`α_A = atan2(-τ_{xy}, d)`.  Rotating the element anticlockwise
  by θ moves the live `x'` face point anticlockwise by 2θ, so the live
  point is at :math:`α_A + 2θ` and lands on P1 (angle 0) when
  θ = θ_p1.  The conjugate `y'` face point is diametrically opposite.
- Every arc is described by a signed sweep; a non-negative sweep runs
  anticlockwise.  Both the 2θ arc (A to the live point) and the 2θ_p arc
  (A to P1) follow this single rule.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace

from mohrview._opts import get_view_options
from mohrview.interaction.controller import hover_order
from mohrview.render.primitives import (Arc, Circle, Line, Marker, Point,
                                        Primitive, Text)
from mohrview.structures.stress import (
    StressState, PrincipalSolution, DegenerateGeometry, compute_principal,
    compute_transform)

# Written by the MohrView authors, 2026.

DEFAULT_VIEWPORT = (900.0, 820.0)


# ======================================================================

@dataclass(frozen=True)
class ArcDescriptor:
    """
    Angle arc drawn inside the circle.  `start` and `sweep` are degrees
    in the plot frame; `radius` is in pixels.
    """
    start: float
    sweep: float
    radius: float
    visible: bool

    @property
    def end(self) -> float:
        return self.start + self.sweep

    @property
    def mid(self) -> float:
        """Angle halfway along the arc, used to place its label."""
        return self.start + 0.5 * self.sweep

    @property
    def large_arc(self) -> bool:
        return self.to_arc((0.0, 0.0)).large_arc

    @property
    def sweep_flag(self) -> int:
        """Same convention as `Arc.sweep_flag`."""
        return self.to_arc((0.0, 0.0)).sweep_flag

    def to_arc(self, centre: Point, role: str = '') -> Arc:
        return Arc(centre, self.radius, self.start, self.sweep, role=role)


@dataclass(frozen=True)
class Visibility:
    """Optional layers of the circle view, all shown by default."""
    grid: bool = True
    principal: bool = True  # P1, P2, radius lines and 2θ_p arc.
    shear: bool = True  # τ_max / τ_min points.
    sigma_avg: bool = True
    rotation: bool = True  # Live / conjugate points, 2θ arc, R label.
    axis_ticks: bool = True

    def toggled(self, name: str) -> Visibility:
        return replace(self, **{name: not getattr(self, name)})


@dataclass(frozen=True)
class CircleGeometry:
    """
    Complete construction for one stress state and rotation, including
    its placement on a viewport of `size` pixels.  Angles are degrees.
    """
    state: StressState
    θ: float
    principal: PrincipalSolution | DegenerateGeometry
    σ_avg: float
    radius: float
    α_a: float
    α_live: float
    α_conj: float
    arc_2θ: ArcDescriptor
    arc_2θp: ArcDescriptor
    scale: float
    size: tuple[float, float]
    tick_step: float
    ticks: tuple[float, ...]
    axis_bounds: tuple[float, float, float, float]  # L, T, R, B.

    # -- Stress Space --------------------------------------------------

    @property
    def centre(self) -> Point:
        return self.σ_avg, 0.0

    @property
    def degenerate(self) -> bool:
        return isinstance(self.principal, DegenerateGeometry)

    def stress_at(self, angle: float) -> Point:
        """
        Stress (σ, τ) represented by the circle point at `angle`,
        allowing for the inverted shear axis.
        """
        a = math.radians(angle)
        return (self.σ_avg + self.radius * math.cos(a),
                -self.radius * math.sin(a))

    @property
    def live_stress(self) -> Point:
        return self.stress_at(self.α_live)

    @property
    def conj_stress(self) -> Point:
        return self.stress_at(self.α_conj)

    # -- Screen Space --------------------------------------------------

    @property
    def origin(self) -> Point:
        """Screen position of the stress origin (viewport centre)."""
        return self.size[0] / 2, self.size[1] / 2

    @property
    def radius_px(self) -> float:
        return self.radius * self.scale

    def to_screen(self, σ: float, τ: float) -> Point:
        """Screen position of stress point (σ, τ); positive τ is down."""
        ox, oy = self.origin
        return ox + σ * self.scale, oy + τ * self.scale

    def screen_at(self, angle: float) -> Point:
        return self.to_screen(*self.stress_at(angle))

    @property
    def centre_px(self) -> Point:
        return self.to_screen(self.σ_avg, 0.0)

    @property
    def point_a(self) -> Point:
        return self.screen_at(self.α_a)

    @property
    def live_point(self) -> Point:
        return self.screen_at(self.α_live)

    @property
    def conj_point(self) -> Point:
        return self.screen_at(self.α_conj)

    @property
    def p1_point(self) -> Point:
        return self.screen_at(0.0)

    @property
    def p2_point(self) -> Point:
        return self.screen_at(180.0)

    @property
    def shear_top(self) -> Point:
        return self.screen_at(90.0)

    @property
    def shear_bottom(self) -> Point:
        return self.screen_at(-90.0)


@dataclass(frozen=True)
class MohrReadout:
    """Derived values listed beside the circle."""
    σ_x: float  # Live x' face.
    τ_xy: float
    σ_avg: float
    σ_1: float
    σ_2: float
    τ_max: float
    θ_p1: float | None  # None when degenerate.
    θ_p2: float | None
    θ_s: float | None
    conj_σ: float  # Conjugate y' face.
    conj_τ: float
    equation: str


# ----------------------------------------------------------------------

def display_scale(state: StressState, size: tuple[float, float]) -> float:
    """
    Pixels per unit stress so the circle fills most of the viewport:

    ``clamp((min(W, H) / 2 - margin) / (max|σ| + R + pad), lo, hi)``

    with the margin, padding and limits taken from the view options.
    The largest component is taken as at least 1.
    """
    opts = get_view_options()
    max_val = max(state.max_abs(), 1.0)
    scale = ((min(size) / 2 - opts.scale_margin) /
             (max_val + state.radius + opts.scale_pad))
    return min(max(scale, opts.scale_min), opts.scale_max)


def tick_step(extent: float) -> float:
    """
    Smallest 'nice' step from {1, 2, 5, 10} × 10^k that is at least
    ``extent / 4``.  A zero extent gives a step of 1.
    """
    raw = extent / 4
    exp = 10.0 ** math.floor(math.log10(raw or 1.0))
    nice = next((f for f in (1, 2, 5, 10) if f * exp >= raw), 10)
    return nice * exp


def axis_ticks(extent: float, step: float) -> tuple[float, ...]:
    """
    Symmetric tick values from ``-max_tick`` to ``+max_tick`` in `step`,
    where `max_tick` is `extent` rounded up with one step to spare.
    Values are rounded to 4 significant figures.
    """
    n = math.ceil((extent + step) / step)
    return tuple(float(f"{k * step:.4g}") for k in range(-n, n + 1))


def map_circle_geometry(state: StressState, θ: float,
                        size: tuple[float, float] = DEFAULT_VIEWPORT
                        ) -> CircleGeometry:
    """
    Map a stress state and rotation `θ` (degrees) onto the Mohr's circle
    construction for a viewport of `size` = (width, height) pixels.

    The result is a pure function of its inputs.  Hydrostatic input
    gives a zero radius circle at (σ_avg, 0) with both arcs hidden and
    never produces NaN angles.
    """
    principal = compute_principal(state)
    avg, R = state.σ_avg, state.radius
    d = state.diff
    if d == 0 or math.isnan(d):
        d = 0.0

    α_a = math.degrees(math.atan2(-state.τ_xy, d))
    α_live = α_a + 2 * θ
    α_conj = α_live + 180.0

    scale = display_scale(state, size)
    R_px = R * scale

    arc_2θ = ArcDescriptor(start=α_a, sweep=2 * θ,
                           radius=max(0.22 * R_px, 14.0),
                           visible=R_px > 5 and abs(θ) > 0.3)
    if isinstance(principal, PrincipalSolution):
        θ_p1 = principal.θ_p1
        arc_2θp = ArcDescriptor(start=α_a, sweep=2 * θ_p1,
                                radius=0.35 * R_px,
                                visible=R_px > 8 and abs(θ_p1) > 0.5)
    else:
        arc_2θp = ArcDescriptor(start=α_a, sweep=0.0, radius=0.35 * R_px,
                                visible=False)

    extent = (R + abs(avg)) / scale
    step = tick_step(extent)

    W, H = size
    cx, cy = W / 2, H / 2
    axis_ext = (R + max(abs(avg), 1.0) + 15) * scale + 40
    bounds = (max(cx - axis_ext, 10.0), max(cy - axis_ext, 10.0),
              min(cx + axis_ext, W - 10.0), min(cy + axis_ext, H - 10.0))

    return CircleGeometry(
        state=state, θ=θ, principal=principal, σ_avg=avg, radius=R,
        α_a=α_a, α_live=α_live, α_conj=α_conj, arc_2θ=arc_2θ,
        arc_2θp=arc_2θp, scale=scale, size=(W, H), tick_step=step,
        ticks=axis_ticks(extent, step), axis_bounds=bounds)


def mohr_readout(geom: CircleGeometry) -> MohrReadout:
    """Readout values for `geom`, angles omitted when degenerate."""
    rot = compute_transform(geom.state, geom.θ)
    p = geom.principal
    if isinstance(p, PrincipalSolution):
        θ_p1, θ_p2, θ_s = p.θ_p1, p.θ_p2, p.θ_s1
    else:
        θ_p1 = θ_p2 = θ_s = None

    return MohrReadout(
        σ_x=rot.σ_x, τ_xy=rot.τ_xy, σ_avg=geom.σ_avg, σ_1=p.σ_1,
        σ_2=p.σ_2, τ_max=p.τ_max, θ_p1=θ_p1, θ_p2=θ_p2, θ_s=θ_s,
        conj_σ=2 * geom.σ_avg - rot.σ_x, conj_τ=-rot.τ_xy,
        equation=f"(σx' − {geom.σ_avg:.2f})² + τ² = {geom.radius:.1f}²")


# ----------------------------------------------------------------------

def _polar(centre: Point, r: float, angle: float) -> Point:
    a = math.radians(angle)
    return centre[0] + r * math.cos(a), centre[1] - r * math.sin(a)


def _tick_label(v: float) -> str:
    if abs(v) >= 1000:
        return f"{v / 1000:.0f}k"
    if v % 1 == 0:
        return str(int(v))
    return f"{v:.1f}"


def _outward_labels(geom: CircleGeometry, pt: Point, offset: float,
                    texts: list[str], role: str,
                    dy: tuple[float, ...] = (0.0,)) -> tuple[Text, ...]:
    """
    Labels placed `offset` px beyond `pt` along the ray from the circle
    centre, anchored away from the circle.
    """
    cx, cy = geom.centre_px
    dx, dy_ = pt[0] - cx, pt[1] - cy
    length = math.hypot(dx, dy_) or 1.0
    nx, ny = dx / length, dy_ / length
    lx, ly = pt[0] + nx * offset, pt[1] + ny * offset
    anchor = 'middle' if abs(nx) < 0.3 else ('start' if nx > 0 else 'end')
    return tuple(Text((lx, ly + off), txt, role=role, anchor=anchor,
                      boxed=True) for txt, off in zip(texts, dy))


def mohr_markers(geom: CircleGeometry,
                 visibility: Visibility = Visibility()) -> list[Marker]:
    """
    Interactive points of the construction in their default paint
    order, filtered by `visibility`.
    """
    R_px = geom.radius_px
    p, s = geom.principal, geom.state
    live_σ, live_τ = geom.live_stress
    conj_σ, conj_τ = geom.conj_stress
    markers = []

    shown = R_px > 0 and not geom.degenerate
    if visibility.shear and shown:
        for key, pt, txt in (('tauMax', geom.shear_top,
                              f"τmax = {geom.radius:.2f}"),
                             ('tauMin', geom.shear_bottom,
                              f"τmin = {-geom.radius:.2f}")):
            markers.append(Marker(key, pt, 7.0, role='shear-point',
                                  labels=_outward_labels(
                                      geom, pt, 34, [txt],
                                      role='shear-label')))

    if visibility.principal and shown:
        θ_p1 = p.θ_p1
        for key, pt, θ_p, σ_p, n in (('p1', geom.p1_point, θ_p1, p.σ_1, 1),
                                     ('p2', geom.p2_point, θ_p1 + 90, p.σ_2,
                                      2)):
            markers.append(Marker(key, pt, 9.0, role=f'principal-{n}',
                                  labels=_outward_labels(
                                      geom, pt, 32,
                                      [f"P{n}  θp = {θ_p:.1f}°",
                                       f"σ{n} = {σ_p:.2f}"],
                                      role=f'principal-{n}-label',
                                      dy=(-2.0, 22.0))))

    markers.append(Marker('pointA', geom.point_a, 9.0, role='point-a',
                          labels=(Text(geom.point_a, "A", role='point-a-tag',
                                       anchor='middle'),
                                  *_outward_labels(
                                      geom, geom.point_a, 32,
                                      [f"A  (σx={s.σ_x:.2f}, "
                                       f"τxy={s.τ_xy:.2f})"],
                                      role='point-a-label'))))

    if visibility.rotation:
        markers.append(Marker('conjPoint', geom.conj_point, 7.0,
                              role='conj-point', labels_on_hover=True,
                              labels=_outward_labels(
                                  geom, geom.conj_point, 30,
                                  [f"({conj_σ:.2f}, {conj_τ:.2f})"],
                                  role='conj-label')))
        markers.append(Marker('livePoint', geom.live_point, 9.0,
                              role='live-point',
                              labels=_outward_labels(
                                  geom, geom.live_point, 32,
                                  [f"({live_σ:.2f}, {live_τ:.2f})"],
                                  role='live-label')))
    return markers


def mohr_primitives(geom: CircleGeometry,
                    visibility: Visibility = Visibility(),
                    hovered: str | None = None) -> list[Primitive]:
    """
    Drawing primitives for the whole construction, in paint order.  The
    `hovered` marker (if any) is painted last so it sits on top.
    Coordinates are for the unzoomed viewport; see
    `mohrview.interaction.Viewport.apply` for zoom and pan.
    """
    W, H = geom.size
    ox, oy = geom.origin
    left, top, right, bottom = geom.axis_bounds
    cx, cy = geom.centre_px
    R_px = geom.radius_px
    prims: list[Primitive] = []

    # -- Grid, Axes and Ticks ------------------------------------------

    # Shear is positive downward so tick v sits at +v px on both axes.
    offsets = [(v, ox + v * geom.scale, oy + v * geom.scale)
               for v in geom.ticks]
    if visibility.grid:
        for _, gx, gy in offsets:
            if 10 < gx < W - 10:
                prims.append(Line((gx, top), (gx, bottom), role='grid'))
            if 10 < gy < H - 10:
                prims.append(Line((left, gy), (right, gy), role='grid'))

    prims.append(Line((left, oy), (right, oy), role='axis', arrow=True))
    prims.append(Line((ox, top), (ox, bottom), role='axis', arrow=True))
    prims.append(Text((right - 6, oy - 14), "σ (MPa)", role='axis-title',
                      anchor='end'))
    prims.append(Text((ox + 12, bottom - 8), "τ (MPa)", role='axis-title'))

    if visibility.axis_ticks:
        for v, gx, gy in offsets:
            if v == 0:
                continue
            label = _tick_label(v)
            if 34 < gx < W - 34:
                prims.append(Text((gx, oy + 19), label, role='tick-label',
                                  anchor='middle'))
            if 22 < gy < H - 22:
                prims.append(Text((ox - 9, gy + 4), label,
                                  role='tick-label', anchor='end'))

    # -- Average Stress ------------------------------------------------

    if visibility.sigma_avg:
        prims.append(Line((cx, top), (cx, bottom), dashed=True,
                          role='sigma-avg'))
        if R_px > 0:
            ly = top + 18
            prims.append(Line((left + 10, ly), (cx - 8, ly), dashed=True,
                              arrow=True, role='sigma-avg'))
            prims.append(Text(((left + 10 + cx - 8) / 2, ly - 4),
                              f"σavg={geom.σ_avg:.2f}", role='sigma-avg',
                              anchor='middle', boxed=True))

    # -- Shear Projections and Principal Ticks -------------------------

    if visibility.shear and R_px > 0:
        for sx, sy in (geom.shear_top, geom.shear_bottom):
            prims.append(Line((sx, sy), (ox, sy), dashed=True,
                              role='shear-projection'))

    if visibility.principal:
        p = geom.principal
        for σ_p, n in ((p.σ_1, 1), (p.σ_2, 2)):
            x = ox + σ_p * geom.scale
            prims.append(Line((x, oy - 12), (x, oy + 12),
                              role=f'principal-{n}'))

    # -- Circle --------------------------------------------------------

    if R_px > 0:
        prims.append(Circle((cx, cy), R_px, role='mohr-circle'))
    else:
        prims.append(Circle((cx, cy), 6.0, role='mohr-point'))
    prims.append(Circle((cx, cy), 7.0, role='centre'))
    prims.append(Text((cx - 18, cy + 5), "C", role='centre'))

    if visibility.principal and geom.arc_2θp.visible:
        arc = geom.arc_2θp
        prims.append(arc.to_arc((cx, cy), role='principal-arc'))
        prims.append(Text(_polar((cx, cy), arc.radius + 18, arc.mid),
                          f"2θp={arc.sweep:.1f}°", role='principal-1',
                          anchor='middle', boxed=True))

    if R_px > 0:
        prims.append(Line((cx, cy), geom.point_a, role='radius-a'))

    if visibility.principal and R_px > 0:
        prims.append(Line((cx, cy), geom.p1_point, dashed=True,
                          role='principal-1'))
        prims.append(Line((cx, cy), geom.p2_point, dashed=True,
                          role='principal-2'))

    # -- Rotation ------------------------------------------------------

    if visibility.rotation:
        px, py = geom.live_point
        prims.append(Line((px, py), geom.conj_point, dashed=True,
                          role='diameter'))

        if geom.arc_2θ.visible:
            arc = geom.arc_2θ
            prims.append(arc.to_arc((cx, cy), role='rotation-arc'))
            prims.append(Text(_polar((cx, cy), arc.radius + 16, arc.mid),
                              f"2θ={arc.sweep:.1f}°", role='rotation-arc',
                              anchor='middle', boxed=True))

        prims.append(Line((px, py), (px, oy), dashed=True,
                          role='projection'))
        prims.append(Line((px, py), (ox, py), dashed=True,
                          role='projection'))
        prims.append(Circle((px, oy), 5.0, role='projection'))
        prims.append(Circle((ox, py), 5.0, role='projection'))

        if R_px > 30:
            prims.append(Text(((cx + px) / 2 + 6, (cy + py) / 2),
                              f"R={geom.radius:.2f}", role='rotation-arc',
                              boxed=True))

    # -- Markers -------------------------------------------------------

    for marker in hover_order(mohr_markers(geom, visibility), hovered):
        prims.extend(marker.primitives(hovered=marker.key == hovered))

    return prims

