#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Construction of the optical ray families for one projection plane

    Every ray leaves a hologram edge at z=0 and is an infinite line in
    (z, t) space, ``t = slope*z + intercept``. :func:`build_rays` is the
    single source of the ray set; the scene drawing and the safety
    calculation both consume it, so what is drawn and what is measured
    can't disagree.

    The families, in order, are:

        - parallel illumination through both edges, YZ plane only
        - the maximum diffraction envelope, omitted when the grating
          equation has no real solution
        - object-aware rays from each edge through the far corner of the
          object box

    The diffraction envelope is a first order geometric estimate, using the
    maximum angle for a pitch p, sin(theta) = wvl/(2p) + sin(theta_ill).

.. Created on Sat Oct 10 14:27:03 2026

.. codeauthor: Michael J. Hayford
"""

import logging
import math

from holoview.raytr import Ray
from holoview.typing import Plane, RayFamily
from holoview.util.misc_math import signed_big

logger = logging.getLogger(__name__)

# object corners closer than this to the hologram plane give a
# near-vertical ray, which is represented by a large finite slope
NEAR_VERTICAL_Z = 1e-6
NEAR_VERTICAL_SLOPE = 1e6


def illumination_slope(theta_ill: float, plane: Plane) -> float:
    """ Slope of the parallel illumination beam.

    In the YZ plane the transverse position decreases as z increases for a
    positive illumination angle.
    """
    dz = math.cos(theta_ill)
    dt = -math.sin(theta_ill) if plane == 'YZ' else math.sin(theta_ill)
    return dt/dz


def diffraction_term(params, plane: Plane) -> float:
    """ sin of the maximum diffraction angle, wvl/(2p) + sin(theta_ill)

    A zero pitch has no finite term and is returned as +inf.
    """
    theta_ill = params.illumination_angle(plane)
    if params.pitch == 0.:
        return math.inf
    return params.wavelength/(2*params.pitch) + math.sin(theta_ill)


def max_diffraction_angle(params, plane: Plane):
    """ Maximum diffraction angle in radians, or None if non-physical. """
    term = diffraction_term(params, plane)
    if abs(term) > 1.0:
        logger.debug("%s: diffraction term %g outside [-1, 1], "
                     "no diffraction envelope", plane, term)
        return None
    return math.asin(term)


def edge_slope(edge_t: float, corner_z: float, corner_t: float) -> float:
    """ Slope of the line from (0, edge_t) through (corner_z, corner_t).

    When the corner lies on the hologram plane the slope is clamped to
    +/-NEAR_VERTICAL_SLOPE, keeping the direction of the corner.
    """
    dt = corner_t - edge_t
    if abs(corner_z) > NEAR_VERTICAL_Z:
        return dt/corner_z
    return signed_big(dt, NEAR_VERTICAL_SLOPE)


def illumination_rays(params, plane: Plane) -> list[Ray]:
    if plane == 'XZ':
        return []
    half_width = params.hologram_width(plane)/2
    slope = illumination_slope(params.illumination_angle(plane), plane)
    return [Ray(slope, half_width, 'illumination', 'top'),
            Ray(slope, -half_width, 'illumination', 'bottom')]


def diffraction_rays(params, plane: Plane) -> list[Ray]:
    theta_base = max_diffraction_angle(params, plane)
    if theta_base is None:
        return []
    half_width = params.hologram_width(plane)/2
    # the top and bottom edges bound a symmetric diffraction cone
    return [Ray(math.tan(-theta_base), half_width, 'diffraction', 'top'),
            Ray(math.tan(theta_base), -half_width, 'diffraction', 'bottom')]


def object_rays(params, plane: Plane) -> list[Ray]:
    half_width = params.hologram_width(plane)/2
    box = params.object_box(plane)
    return [Ray(edge_slope(half_width, box.z_max, box.t_max),
                half_width, 'object', 'top'),
            Ray(edge_slope(-half_width, box.z_max, box.t_min),
                -half_width, 'object', 'bottom')]


def build_rays(params, plane: Plane) -> list[Ray]:
    """ Return the full ray set for `plane`, in fixed family order.

    Args:
        params: :class:`~.OpticalParameters` instance
        plane: 'XZ' or 'YZ'

    Returns:
        list of :class:`~.Ray`, illumination, diffraction, then object-aware
    """
    rays = []
    rays += illumination_rays(params, plane)
    rays += diffraction_rays(params, plane)
    rays += object_rays(params, plane)
    return rays


def rays_of_family(rays, family: RayFamily) -> list[Ray]:
    return [r for r in rays if r.family == family]


def eval_ray(ray: Ray, z):
    """ Transverse height of `ray` at z; z may be a numpy array. """
    return ray.slope*z + ray.intercept


def ray_direction(ray: Ray):
    """ Unit (dz, dt) direction of the ray, always heading toward +z. """
    theta = math.atan(ray.slope)
    return math.cos(theta), math.sin(theta)


def ray_segment(ray: Ray, reach: float, back_reach: float = 0.):
    """ Finite segment of `ray` for drawing.

    The segment starts `back_reach` behind the hologram point (0, intercept)
    and ends `reach` past it, both measured along the ray.

    Returns:
        ((z0, t0), (z1, t1))
    """
    dz, dt = ray_direction(ray)
    start = (-back_reach*dz, ray.intercept - back_reach*dt)
    end = (reach*dz, ray.intercept + reach*dt)
    return start, end
