"""
Rotated square stress element with normal and shear arrows on each
face, as drawn in the element orientation diagram.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from mohrview.render.primitives import Line, Point, Polygon, Primitive, Text
from mohrview.structures.stress import (StressState, TransformedState,
                                        compute_transform)

# Written by the MohrView authors, 2026.


# ======================================================================

@dataclass(frozen=True)
class FaceArrow:
    """
    Stress arrow on one face of the element.  `start` is the face
    midpoint and `end` the arrow tip, both on screen.
    """
    face: str  # One of '+x', '-x', '+y', '-y'.
    kind: str  # 'normal' or 'shear'.
    value: float
    start: Point
    end: Point


@dataclass(frozen=True)
class ElementGeometry:
    """Element outline, face arrows and rotated axes on screen."""
    θ: float
    stress: TransformedState
    corners: tuple[Point, Point, Point, Point]
    arrows: tuple[FaceArrow, ...]
    axes: tuple[tuple[Point, Point, str], ...]  # (start, end, label).
    centre: Point
    side: float


# ----------------------------------------------------------------------

def element_geometry(state: StressState, θ: float,
                     size: tuple[float, float]) -> ElementGeometry:
    """
    Geometry of the element rotated anticlockwise by `θ` (degrees) drawn
    on a surface of `size` = (width, height) pixels.

    The element side is 30% of the smaller surface dimension.  Arrow
    lengths are proportional to the transformed stresses, scaled so the
    largest (taken as at least 1) spans 55% of a side.  Tension points
    away from a face; positive shear on a positive face points along
    the positive rotated axis.
    """
    W, H = size
    cx, cy = W / 2, H / 2
    side = min(W, H) * 0.3
    half = side / 2
    rot = compute_transform(state, θ)
    σ_x, σ_y, τ = rot.σ_x, rot.σ_y, rot.τ_xy

    a = math.radians(θ)
    cos_a, sin_a = math.cos(a), math.sin(a)

    def to_screen(u: float, v: float) -> Point:
        # Element frame (u, v) → screen, with screen y pointing down.
        return (cx + u * cos_a - v * sin_a,
                cy - (u * sin_a + v * cos_a))

    corners = tuple(to_screen(u, v) for u, v in
                    ((-half, -half), (half, -half), (half, half),
                     (-half, half)))

    k = side * 0.55 / max(abs(σ_x), abs(σ_y), abs(τ), 1.0)
    arrows = []
    # Traction on a face with outward normal n is (σ n, τ t) where the
    # tangent t is +v on the +x face and +u on the +y face.
    for face, nu, nv, tu, tv, σ_n in (('+x', 1, 0, 0, 1, σ_x),
                                      ('-x', -1, 0, 0, -1, σ_x),
                                      ('+y', 0, 1, 1, 0, σ_y),
                                      ('-y', 0, -1, -1, 0, σ_y)):
        mu, mv = nu * half, nv * half
        start = to_screen(mu, mv)
        arrows.append(FaceArrow(face, 'normal', σ_n, start,
                                to_screen(mu + nu * σ_n * k,
                                          mv + nv * σ_n * k)))
        arrows.append(FaceArrow(face, 'shear', τ, start,
                                to_screen(mu + tu * τ * k,
                                          mv + tv * τ * k)))

    axis_len = side * 0.85
    axes = ((to_screen(0, 0), to_screen(axis_len, 0), "x′"),
            (to_screen(0, 0), to_screen(0, axis_len), "y′"))

    return ElementGeometry(θ=θ, stress=rot, corners=corners,
                           arrows=tuple(arrows), axes=axes, centre=(cx, cy),
                           side=side)


def element_primitives(geom: ElementGeometry,
                       size: tuple[float, float]) -> list[Primitive]:
    """
    Primitives for the orientation diagram: fixed reference axes,
    rotated axes, element outline, face arrows, angle label and the
    transformed stress legend.
    """
    W, H = size
    cx, cy = geom.centre
    prims: list[Primitive] = [
        Line((cx - W * 0.45, cy), (cx + W * 0.45, cy), dashed=True,
             role='reference-axis'),
        Line((cx, cy - H * 0.45), (cx, cy + H * 0.45), dashed=True,
             role='reference-axis')]

    for start, end, label in geom.axes:
        prims.append(Line(start, end, dashed=True, role='rotated-axis'))
        dx, dy = end[0] - start[0], end[1] - start[1]
        length = math.hypot(dx, dy) or 1.0
        prims.append(Text((end[0] + 16 * dx / length,
                           end[1] + 16 * dy / length), label,
                          role='rotated-axis', anchor='middle'))

    prims.append(Polygon(geom.corners, role='element'))
    for arrow in geom.arrows:
        if arrow.start == arrow.end:
            continue
        prims.append(Line(arrow.start, arrow.end, arrow=True,
                          dashed=arrow.kind == 'shear',
                          role=f'{arrow.kind}-arrow'))

    s = geom.stress
    prims.append(Text((cx, H - 14), f"θ = {geom.θ:.1f}°", role='theta-label',
                      anchor='middle'))
    for i, (txt, role) in enumerate(
            ((f"σx′ = {s.σ_x:.1f} MPa", 'sigma-x-legend'),
             (f"σy′ = {s.σ_y:.1f} MPa", 'sigma-y-legend'),
             (f"τx′y′ = {s.τ_xy:.1f} MPa", 'tau-legend'))):
        prims.append(Text((14, H - 66 + i * 16), txt, role=role))

    return prims
