#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Adaptive grid, axes and labels for a plane view

    The grid step is chosen so that about 4 intervals span the view width,
    snapped to a "nice" value of 1, 2 or 5 times a power of 10.

.. Created on Sun Oct 11 10:37:15 2026

.. codeauthor: Michael J. Hayford
"""

import logging
import math
from collections import namedtuple

import numpy as np

from holoview.util.misc_math import format_number

logger = logging.getLogger(__name__)

GridStep = namedtuple('GridStep', ['mm', 'px'])
GridStep.mm.__doc__ = "grid spacing in world millimeters"
GridStep.px.__doc__ = "grid spacing in screen pixels"

GRID_DIVISIONS = 4
MIN_STEP_PX = 2.
LABEL_EVERY = 5
LABEL_ALL_STEP_PX = 50.
EDGE_TOLERANCE_PX = 10.
LABEL_DECIMALS = 3


def nice_base(base: float) -> float:
    """ Snap a mantissa in [1, 10) to the nearest of 1, 2, 5 or 10. """
    if base < 1.5:
        return 1.
    elif base < 3.5:
        return 2.
    elif base < 7.5:
        return 5.
    else:
        return 10.


def nice_number(x: float) -> float:
    """ Round x > 0 to 1, 2 or 5 times a power of 10. """
    power = math.floor(math.log10(x))
    base = x / 10**power
    return nice_base(base) * 10**power


def nice_grid_step(width_px, scale, divisions=GRID_DIVISIONS,
                   min_step_px=MIN_STEP_PX):
    """ Grid step for a view `width_px` wide at `scale` pixels per mm.

    Returns:
        a GridStep, or None if the view can't carry a readable grid
    """
    if scale == 0:
        return None
    visible_mm = width_px / scale
    if not (math.isfinite(visible_mm) and visible_mm > 0):
        return None

    step_mm = nice_number(visible_mm / divisions)
    step_px = step_mm * scale
    if step_px < min_step_px:
        return None
    return GridStep(step_mm, step_px)


def grid_positions(origin_px, extent_px, step_px, direction=1):
    """ Grid line indices and screen positions across one view axis.

    Lines are at origin_px + direction*i*step_px; only those within 10 px of
    the visible range [0, extent_px] are returned.

    Args:
        origin_px: screen position of the world origin
        extent_px: width or height of the view
        step_px: grid step, pixels
        direction: 1 if world and screen increase together, -1 if inverted

    Returns:
        list of (i, position) tuples in ascending i
    """
    if direction > 0:
        i_start = math.floor(-origin_px / step_px)
        i_end = math.ceil((extent_px - origin_px) / step_px)
    else:
        i_start = math.ceil((origin_px - extent_px) / step_px)
        i_end = math.floor(origin_px / step_px)

    indices = np.arange(i_start, i_end + 1)
    positions = origin_px + direction*indices*step_px
    keep = ((positions >= -EDGE_TOLERANCE_PX) &
            (positions <= extent_px + EDGE_TOLERANCE_PX))
    return [(int(i), float(p)) for i, p in zip(indices[keep], positions[keep])]


def should_label(i, step_px) -> bool:
    return i % LABEL_EVERY == 0 or step_px > LABEL_ALL_STEP_PX


def label_text(i, step_mm) -> str:
    return format_number(i*step_mm, LABEL_DECIMALS)


def draw_grid(surface, width, height, view_state, step: GridStep, rgb):
    """ Draw the grid lines and their labels. """
    origin_x, origin_y = view_state.offset_x, view_state.offset_y
    z_lines = grid_positions(origin_x, width, step.px, direction=1)
    t_lines = grid_positions(origin_y, height, step.px, direction=-1)

    surface.set_stroke_style(rgb['grid'])
    surface.set_line_width(0.5)
    surface.set_line_dash([])
    surface.set_font(10)
    surface.set_fill_style(rgb['grid_label'])

    # lines of constant z
    surface.begin_path()
    for i, x in z_lines:
        surface.move_to(x, 0)
        surface.line_to(x, height)
    surface.stroke()

    surface.set_text_align('center')
    surface.set_text_baseline('top')
    for i, x in z_lines:
        if should_label(i, step.px):
            surface.fill_text(label_text(i, step.mm), x, origin_y + 5)

    # lines of constant t
    surface.begin_path()
    for i, y in t_lines:
        surface.move_to(0, y)
        surface.line_to(width, y)
    surface.stroke()

    surface.set_text_align('right')
    surface.set_text_baseline('middle')
    for i, y in t_lines:
        if should_label(i, step.px):
            surface.fill_text(label_text(i, step.mm), origin_x - 5, y)


def draw_axes(surface, width, height, view_state, v_label, rgb):
    """ Draw the z and transverse axes through the origin, with names. """
    origin_x, origin_y = view_state.offset_x, view_state.offset_y

    surface.set_stroke_style(rgb['axis'])
    surface.set_line_width(1.5)
    surface.set_line_dash([])
    surface.stroke_line((0, origin_y), (width, origin_y))
    surface.stroke_line((origin_x, 0), (origin_x, height))

    surface.set_fill_style(rgb['axis_label'])
    surface.set_font(12)
    surface.set_text_baseline('alphabetic')
    surface.set_text_align('right')
    surface.fill_text('Z (mm)', width - 10, origin_y - 10)
    surface.set_text_align('left')
    surface.fill_text(v_label, origin_x + 10, 20)


def draw_grid_and_axes(surface, width, height, view_state, v_label, rgb):
    """ Draw the adaptive grid, then the axes.

    Nothing is drawn for a degenerate view state. The axes are drawn even
    when the grid step is too fine to draw.

    Returns:
        the GridStep used, or None if no grid was drawn
    """
    if view_state.is_degenerate():
        logger.debug("degenerate view state %s, grid skipped", view_state)
        return None

    step = nice_grid_step(width, view_state.scale)
    if step is not None:
        draw_grid(surface, width, height, view_state, step, rgb)
    else:
        logger.debug("no readable grid step at scale %g", view_state.scale)

    draw_axes(surface, width, height, view_state, v_label, rgb)
    return step
