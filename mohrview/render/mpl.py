"""
Paint drawing primitives onto a `matplotlib` `Axes`.  `matplotlib` is an
optional dependency and is only imported when drawing.
"""
from __future__ import annotations

import warnings

from mohrview.render.primitives import (Arc, Circle, Line, Polygon, Polyline,
                                        Primitive, Text)

# Written by the MohrView authors, 2026.

# Colour for each role; roles not listed use `DEFAULT_COLOUR`.
ROLE_COLOURS = {
    'axis': '#1a3a6e', 'axis-title': '#1a3a6e', 'axis-title-y': '#1a3a6e',
    'axis-label': '#2a4a7a', 'tick-label': '#2a4a7a',
    'grid': '#5b7fa6', 'grid-mid': '#5b7fa6', 'zero-axis': '#1a3a6e',
    'sigma-curve': '#1565c0', 'tau-curve': '#c62828',
    'principal-marker': '#1b5e20', 'principal-line': '#1b5e20',
    'principal-1': '#1b5e20', 'principal-1-label': '#1b5e20',
    'principal-2': '#e65100', 'principal-2-label': '#e65100',
    'principal-arc': '#1b5e20',
    'shear-point': '#6a1b9a', 'shear-label': '#6a1b9a',
    'shear-projection': '#6a1b9a',
    'sigma-avg': '#e65c00', 'centre': '#e65c00', 'rotation-arc': '#e65c00',
    'mohr-circle': '#1565c0', 'mohr-point': '#1565c0',
    'live-point': '#1565c0', 'live-label': '#1565c0',
    'conj-point': '#5c6bc0', 'conj-label': '#5c6bc0',
    'projection': '#1565c0', 'diameter': '#1565c0',
    'point-a': '#37474f', 'point-a-tag': '#ffffff',
    'point-a-label': '#37474f', 'radius-a': '#37474f',
    'element': '#1a3a6e', 'normal-arrow': '#1565c0', 'shear-arrow': '#c62828',
    'reference-axis': '#5b7fa6', 'rotated-axis': '#1a3a6e',
    'sigma-x-legend': '#1565c0', 'sigma-y-legend': '#2e7d32',
    'tau-legend': '#c62828', 'theta-label': '#1a3a6e',
    'plot-border': '#1a3a6e',
}
DEFAULT_COLOUR = '#333333'

# Roles drawn as filled dots rather than outlines.
_FILLED = {'principal-marker', 'shear-point', 'principal-1', 'principal-2',
           'centre', 'mohr-point', 'live-point', 'conj-point', 'point-a',
           'projection'}
_FAINT = {'grid', 'reference-axis'}


# ======================================================================

def draw_primitives(ax, primitives: list[Primitive],
                    size: tuple[float, float] = None):
    """
    Draw `primitives` (screen pixels, `y` down) onto `ax`.

    Parameters
    ----------
    ax : matplotlib.axes.Axes
        Target axes.  These are not cleared first.
    primitives : [Primitive, ...]
        Drawn in order, so later items sit on top.
    size : (float, float), optional
        If given, the axes limits are set to the surface ``(width,
        height)`` with `y` inverted, equal aspect and axis decoration
        hidden.

    Notes
    -----
    Unknown primitive types raise a `UserWarning` and are skipped.
    """
    from matplotlib import patches

    if size is not None:
        W, H = size
        ax.set_xlim(0, W)
        ax.set_ylim(H, 0)
        ax.set_aspect('equal')
        ax.set_axis_off()

    for z, prim in enumerate(primitives):
        role = getattr(prim, 'role', '')
        colour = ROLE_COLOURS.get(role, DEFAULT_COLOUR)
        alpha = 0.25 if role in _FAINT else 1.0

        if isinstance(prim, Line):
            style = '--' if prim.dashed else '-'
            if prim.arrow:
                ax.annotate('', xy=prim.end, xytext=prim.start, zorder=z,
                            arrowprops=dict(arrowstyle='->', color=colour,
                                            linestyle=style, alpha=alpha))
            else:
                ax.plot((prim.start[0], prim.end[0]),
                        (prim.start[1], prim.end[1]), style, color=colour,
                        alpha=alpha, zorder=z)

        elif isinstance(prim, Polyline):
            if prim.points:
                xs, ys = zip(*prim.points)
                ax.plot(xs, ys, '-', color=colour, linewidth=2, zorder=z)

        elif isinstance(prim, Polygon):
            ax.add_patch(patches.Polygon(prim.points, closed=True,
                                         fill=False, edgecolor=colour,
                                         zorder=z))

        elif isinstance(prim, Circle):
            filled = role in _FILLED
            ax.add_patch(patches.Circle(prim.centre, prim.radius,
                                        fill=filled, facecolor=colour,
                                        edgecolor=colour, zorder=z))

        elif isinstance(prim, Arc):
            # With `y` inverted a screen angle `a` is data angle `-a`.
            θ1, θ2 = sorted((-prim.start, -prim.end))
            ax.add_patch(patches.Arc(prim.centre, 2 * prim.radius,
                                     2 * prim.radius, theta1=θ1, theta2=θ2,
                                     edgecolor=colour, linewidth=2,
                                     zorder=z))

        elif isinstance(prim, Text):
            ha = {'start': 'left', 'middle': 'center', 'end': 'right'}
            bbox = (dict(boxstyle='round', facecolor='white',
                         edgecolor=colour) if prim.boxed else None)
            ax.text(prim.position[0], prim.position[1], prim.text,
                    color=colour, ha=ha.get(prim.anchor, 'left'),
                    va='baseline', bbox=bbox, zorder=z,
                    rotation=90 if role == 'axis-title-y' else 0)

        else:
            warnings.warn(f"Cannot draw primitive of type "
                          f"'{type(prim).__name__}', skipped.")
