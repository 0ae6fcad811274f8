"""
Typed drawing primitives.  Geometry modules return lists of these in
screen coordinates (pixels, `y` increasing downward); painting them is
left to a thin adapter such as `mohrview.render.mpl`.

Each primitive carries a `role` naming its style class (e.g.
``'sigma-curve'``, ``'principal-marker'``) so that an adapter can map
roles to colours and line styles without the geometry knowing either.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

# Written by the MohrView authors, 2026.

Point = tuple[float, float]


# ======================================================================

@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    role: str = ''
    dashed: bool = False
    arrow: bool = False  # Arrow head at `end`.


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    role: str = ''


@dataclass(frozen=True)
class Polygon:
    points: tuple[Point, ...]
    role: str = ''


@dataclass(frozen=True)
class Circle:
    centre: Point
    radius: float
    role: str = ''


@dataclass(frozen=True)
class Arc:
    """
    Circular arc about `centre`.  `start` is the angle of the first
    endpoint and `sweep` the signed angular extent, both in degrees
    measured anticlockwise *as seen on screen* (i.e. with `y` up).
    """
    centre: Point
    radius: float
    start: float
    sweep: float
    role: str = ''

    @property
    def end(self) -> float:
        return self.start + self.sweep

    def point_at(self, angle: float) -> Point:
        """Screen position at `angle` (degrees, anticlockwise on screen)."""
        a = np.deg2rad(angle)
        return (float(self.centre[0] + self.radius * np.cos(a)),
                float(self.centre[1] - self.radius * np.sin(a)))

    @property
    def large_arc(self) -> bool:
        """SVG style large-arc flag."""
        return abs(self.sweep) > 180.0

    @property
    def sweep_flag(self) -> int:
        """
        SVG style sweep flag for a `y`-down surface: 0 for an
        anticlockwise (non-negative) sweep, 1 for clockwise.
        """
        return 0 if self.sweep >= 0 else 1


@dataclass(frozen=True)
class Text:
    position: Point
    text: str
    role: str = ''
    anchor: str = 'start'  # One of 'start', 'middle', 'end'.
    boxed: bool = False  # Drawn as a 'pill' label with background.


Primitive = Line | Polyline | Polygon | Circle | Arc | Text


@dataclass(frozen=True)
class Marker:
    """
    Interactive point on a diagram, drawn as a dot with attached label
    lines.  Markers are ordered for painting by
    `mohrview.interaction.hover_order`.
    """
    key: str
    position: Point
    radius: float
    role: str
    labels: tuple[Text, ...] = field(default_factory=tuple)
    labels_on_hover: bool = False  # Labels only shown while hovered.

    def primitives(self, hovered: bool = False) -> list[Primitive]:
        """Dot and labels, the dot enlarged by 2 px when `hovered`."""
        r = self.radius + 2 if hovered else self.radius
        dot = Circle(self.position, r, role=self.role)
        if self.labels_on_hover and not hovered:
            return [dot]
        return [dot, *self.labels]
