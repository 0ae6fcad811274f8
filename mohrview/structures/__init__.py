"""
=================================================
Stress Structures (:mod:`mohrview.structures`)
=================================================

.. module:: mohrview.structures

Plane stress transformation, principal solution, angle-domain sampling,
Mohr's circle construction and the rotated element diagram.

Stress Transformation
---------------------

.. autosummary::
    :toctree: _gen_mohrview_structures/

    StressState
    TransformedState
    PrincipalSolution
    DegenerateGeometry
    compute_transform
    compute_principal
    principal_angles_display
    is_hydrostatic
    normalize_angle

Angle-Domain Curve
------------------

.. autosummary::
    :toctree: _gen_mohrview_structures/

    CurveSample
    ZeroCrossing
    sample_curve
    find_zero_crossings
    value_limits
    curve_primitives

Mohr's Circle
-------------

.. autosummary::
    :toctree: _gen_mohrview_structures/

    CircleGeometry
    ArcDescriptor
    Visibility
    map_circle_geometry
    mohr_markers
    mohr_primitives
    mohr_readout

Element Diagram and Presets
---------------------------

.. autosummary::
    :toctree: _gen_mohrview_structures/

    element_geometry
    element_primitives
    PRESETS
    get_preset
"""

from .stress import (StressState, TransformedState, PrincipalSolution,
                     DegenerateGeometry, compute_transform,
                     compute_principal, principal_angles_display,
                     is_hydrostatic, normalize_angle)
from .curve import (CurveSample, ZeroCrossing, sample_curve,
                    find_zero_crossings, value_limits, curve_primitives)
from .mohr import (CircleGeometry, ArcDescriptor, MohrReadout, Visibility,
                   map_circle_geometry, mohr_markers, mohr_primitives,
                   mohr_readout, display_scale, tick_step, axis_ticks)
from .element import (ElementGeometry, FaceArrow, element_geometry,
                      element_primitives)
from .presets import PRESETS, get_preset
