#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Per plane mapping between world millimeters and screen pixels

    World points are (z, t): depth along the optical axis and the transverse
    height in the plane. Screen points are (x, y) pixels with y down::

        x = offset_x + z*scale
        y = offset_y - t*scale

    :class:`ViewState` owns the pan/zoom state of one plane view. Each plane
    has its own instance; nothing is shared between them.

.. Created on Sun Oct 11 09:18:26 2026

.. codeauthor: Michael J. Hayford
"""

import logging
import math

from holoview.typing import Point2d, Bounds2d
from holoview.util.misc_math import is_finite_positive

logger = logging.getLogger(__name__)

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 400

DEFAULT_SCALE = 2.
ZOOM_INTENSITY = 0.1

FIT_HEIGHT_FRACTION = 0.6
FIT_ORIGIN_FRACTION = 0.2


class ViewState:
    """ Pan and zoom state of one plane view

    Attributes:
        scale: pixels per mm
        offset_x: screen x of the world origin, pixels
        offset_y: screen y of the world origin, pixels
        is_dragging: True while a pan drag is in progress
        last_x: screen x of the last drag event
        last_y: screen y of the last drag event
    """

    def __init__(self, scale=DEFAULT_SCALE, offset_x=None, offset_y=None,
                 width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
        self.scale = scale
        self.offset_x = width/2 + 100 if offset_x is None else offset_x
        self.offset_y = height/2 if offset_y is None else offset_y
        self.is_dragging = False
        self.last_x = 0.
        self.last_y = 0.

    def __repr__(self):
        return (f"{type(self).__name__}(scale={self.scale!r}, "
                f"offset_x={self.offset_x!r}, offset_y={self.offset_y!r})")

    def listobj_str(self):
        return (f"scale: {self.scale:.6g} px/mm, "
                f"origin: ({self.offset_x:.1f}, {self.offset_y:.1f}) px\n")

    def is_degenerate(self) -> bool:
        """ True if the scale or origin can't map world to screen. """
        return not (is_finite_positive(self.scale)
                    and math.isfinite(self.offset_x)
                    and math.isfinite(self.offset_y))

    def to_screen(self, z: float, t: float) -> Point2d:
        return self.offset_x + z*self.scale, self.offset_y - t*self.scale

    def to_world(self, x: float, y: float) -> Point2d:
        return (x - self.offset_x)/self.scale, (self.offset_y - y)/self.scale

    def visible_bounds(self, width=CANVAS_WIDTH,
                       height=CANVAS_HEIGHT) -> Bounds2d:
        """ Returns (z_min, z_max, t_min, t_max) of the visible world. """
        z_min = -self.offset_x/self.scale
        z_max = (width - self.offset_x)/self.scale
        t_max = self.offset_y/self.scale
        t_min = (self.offset_y - height)/self.scale
        return z_min, z_max, t_min, t_max

    # --- 2D view controls
    def zoom_at(self, wheel_delta: float, x: float, y: float,
                intensity=ZOOM_INTENSITY):
        """ Zoom toward the screen point (x, y).

        A positive wheel delta (scrolling down) zooms out. The world point
        under (x, y) maps to the same pixel after the zoom.
        """
        delta = -intensity if wheel_delta > 0 else intensity
        new_scale = self.scale*(1 + delta)

        world_x = (x - self.offset_x)/self.scale
        world_y = (y - self.offset_y)/self.scale

        self.offset_x = x - world_x*new_scale
        self.offset_y = y - world_y*new_scale
        self.scale = new_scale

    def pan(self, dx: float, dy: float):
        """ Move the view by a pixel delta, 1:1. """
        self.offset_x += dx
        self.offset_y += dy

    def start_drag(self, x: float, y: float):
        self.is_dragging = True
        self.last_x = x
        self.last_y = y

    def drag_to(self, x: float, y: float) -> bool:
        """ Pan by the motion since the last drag event.

        Returns:
            True if the view moved, False if no drag is in progress
        """
        if not self.is_dragging:
            return False
        self.pan(x - self.last_x, y - self.last_y)
        self.last_x = x
        self.last_y = y
        return True

    def end_drag(self):
        self.is_dragging = False


def fit_view(view_state: ViewState, hologram_width: float,
             width=CANVAS_WIDTH, height=CANVAS_HEIGHT) -> bool:
    """ Fit the hologram aperture to 60% of the view height.

    The world origin is placed 20% in from the left edge, vertically
    centered. The view state is left untouched if the aperture width
    isn't > 0.

    Returns:
        True if the view state was updated
    """
    if not hologram_width > 0:
        logger.debug("fit_view skipped, hologram width is %s", hologram_width)
        return False
    view_state.scale = height*FIT_HEIGHT_FRACTION/hologram_width
    view_state.offset_x = width*FIT_ORIGIN_FRACTION
    view_state.offset_y = height/2
    return True


def fit_views(view_states, params, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """ Apply :func:`fit_view` to each plane, independently.

    Args:
        view_states: dict of plane: ViewState
        params: :class:`~.OpticalParameters` instance

    Returns:
        list of the planes whose view was updated
    """
    fitted = []
    for plane, view_state in view_states.items():
        if fit_view(view_state, params.hologram_width(plane), width, height):
            fitted.append(plane)
    return fitted
