#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Draw the optical scene of one projection plane

    The scene is drawn back to front:

        - grid and axes
        - hologram aperture at z=0
        - object bounding box
        - dashed object-aware rays from the hologram edges through the far
          corners of the box
        - translucent construction rays from the object center to the
          hologram center and edges
        - solid parallel illumination rays (YZ plane)
        - dashed maximum diffraction rays, when physical

    The rays come from :func:`~.rays.build_rays`, the same set used by the
    safety calculation.

.. Created on Sun Oct 11 15:06:39 2026

.. codeauthor: Michael J. Hayford
"""

import logging

from holoview.gui.grid import draw_grid_and_axes
from holoview.optical.opticalparams import transverse_labels
from holoview.raytr.rays import build_rays, rays_of_family, ray_segment
from holoview.util import colors

logger = logging.getLogger(__name__)

OBJECT_RAY_DASH = (2, 4)
DIFFRACTION_DASH = (5, 5)


def ray_reach(view_state, width, height):
    """ Lengths along a ray that are sure to run off screen.

    The visible bounds are padded by half the visible z span on each side.

    Returns:
        (reach, illumination reach), 2x and 1.5x the larger padded span
    """
    z_min, z_max, t_min, t_max = view_state.visible_bounds(width, height)
    buffer = 0.5*(z_max - z_min)
    view_size = max(z_max - z_min + 2*buffer, t_max - t_min + 2*buffer)
    return 2*view_size, 1.5*view_size


def draw_rays(surface, view_state, rays, reach, back_reach=0.):
    for ray in rays:
        start, end = ray_segment(ray, reach, back_reach=back_reach)
        surface.stroke_line(view_state.to_screen(*start),
                            view_state.to_screen(*end))


def draw_hologram(surface, view_state, hologram_width, rgb):
    surface.set_stroke_style(rgb['hologram'])
    surface.set_line_width(3)
    surface.set_line_dash([])
    surface.stroke_line(view_state.to_screen(0, -hologram_width/2),
                        view_state.to_screen(0, hologram_width/2))


def draw_object_box(surface, view_state, box, rgb):
    surface.set_stroke_style(rgb['object'])
    surface.set_line_width(2)
    surface.set_line_dash([])
    p1, p2, p3, p4 = [view_state.to_screen(*c) for c in box.corners()]
    surface.begin_path()
    surface.move_to(*p1)
    surface.line_to(*p2)
    surface.line_to(*p3)
    surface.line_to(*p4)
    surface.close_path()
    surface.stroke()


def draw_construction_rays(surface, view_state, obj_center, hologram_width,
                           rgb):
    surface.set_stroke_style(rgb['construction'])
    surface.set_line_width(1)
    surface.set_line_dash([])
    center = view_state.to_screen(*obj_center)
    for t in (0., -hologram_width/2, hologram_width/2):
        surface.stroke_line(center, view_state.to_screen(0., t))


def draw_scene(surface, plane, params, view_state, rgb=None):
    """ Clear `surface` and draw the scene for `plane`.

    Args:
        surface: a :class:`~.DrawingSurface`
        plane: 'XZ' or 'YZ'
        params: :class:`~.OpticalParameters` instance
        view_state: the :class:`~.ViewState` of this plane
        rgb: scene palette, see :func:`~.colors.light_or_dark`

    Returns:
        True if the scene was drawn, False if the view state is degenerate
    """
    if rgb is None:
        rgb = colors.light_or_dark(is_dark=False)
    width, height = surface.width, surface.height
    surface.clear_rect(0, 0, width, height)

    if view_state.is_degenerate():
        logger.debug("%s: degenerate view state %s, scene skipped",
                     plane, view_state)
        return False

    draw_grid_and_axes(surface, width, height, view_state,
                       transverse_labels[plane], rgb)

    hologram_width = params.hologram_width(plane)
    rays = build_rays(params, plane)
    reach, illumination_reach = ray_reach(view_state, width, height)

    draw_hologram(surface, view_state, hologram_width, rgb)
    draw_object_box(surface, view_state, params.object_box(plane), rgb)

    surface.set_stroke_style(rgb['object_ray'])
    surface.set_line_width(1)
    surface.set_line_dash(OBJECT_RAY_DASH)
    draw_rays(surface, view_state, rays_of_family(rays, 'object'), reach)
    surface.set_line_dash([])

    draw_construction_rays(surface, view_state, params.object_center(plane),
                           hologram_width, rgb)

    # the illumination beam is drawn through the aperture, from behind it
    surface.set_stroke_style(rgb['illumination'])
    surface.set_line_width(2)
    draw_rays(surface, view_state, rays_of_family(rays, 'illumination'),
              illumination_reach, back_reach=illumination_reach)

    diffraction = rays_of_family(rays, 'diffraction')
    if len(diffraction) > 0:
        surface.set_stroke_style(rgb['diffraction'])
        surface.set_line_width(1.5)
        surface.set_line_dash(DIFFRACTION_DASH)
        draw_rays(surface, view_state, diffraction, reach)
        surface.set_line_dash([])

    return True
