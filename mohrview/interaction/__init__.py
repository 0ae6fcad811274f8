"""
==============================================
Interaction (:mod:`mohrview.interaction`)
==============================================

.. module:: mohrview.interaction

Zoom / pan viewport, hover ordering and drag-to-rotate.

.. autosummary::
    :toctree: _gen_mohrview_interaction/

    Viewport
    ViewportState
    InteractionController
    InteractionMode
    hover_order
"""

from .controller import InteractionController, InteractionMode, hover_order
from .viewport import Viewport, ViewportState
