"""
====================================
Rendering (:mod:`mohrview.render`)
====================================

.. module:: mohrview.render

Typed drawing primitives produced by the geometry modules and a
reference adapter painting them with `matplotlib`.

.. autosummary::
    :toctree: _gen_mohrview_render/

    Line
    Polyline
    Polygon
    Circle
    Arc
    Text
    Marker
    draw_primitives
"""

from .primitives import (Point, Line, Polyline, Polygon, Circle, Arc, Text,
                         Primitive, Marker)
from .mpl import draw_primitives
