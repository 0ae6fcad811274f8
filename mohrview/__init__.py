"""
.. This module acts as the top-level API documentation.

.. module: mohrview

Plane stress transformation and Mohr's circle geometry, with the
animation and interaction state needed to drive live views of them.

Subpackages
-----------

- `mohrview.structures`: stress transformation, curve sampling, Mohr's
  circle and element geometry.
- `mohrview.animation`: smoothing, frame loops and animated views.
- `mohrview.interaction`: zoom / pan viewport and pointer handling.
- `mohrview.render`: drawing primitives and a `matplotlib` adapter.
"""

__version__ = "0.1.0"

# Written by the MohrView authors, 2026.

# ======================================================================

from ._opts import ViewOptions, get_view_options, set_view_options
from .exception import InvalidRangeError
from .structures import (StressState, compute_transform, compute_principal,
                         principal_angles_display, sample_curve,
                         find_zero_crossings, map_circle_geometry)
from .session import Session
