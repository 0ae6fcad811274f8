"""
==========================================
Animation (:mod:`mohrview.animation`)
==========================================

.. module:: mohrview.animation

Smoothing of displayed values, host-driven frame loops and the animated
views built on them.

.. autosummary::
    :toctree: _gen_mohrview_animation/

    advance
    Smoothed
    FrameLoop
    CurveView
    OrientationView
    CircleView
"""

from .smoother import advance, Smoothed
from .frame_loop import FrameLoop
from .views import CurveView, OrientationView, CircleView
