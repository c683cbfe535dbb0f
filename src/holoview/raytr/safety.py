#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Safety margin at an observation depth

    The safety margin is the nearest ray crossing above and below the optical
    axis at depth z, over the full ray set of :func:`~.rays.build_rays`. It is
    a proxy for the beam exposure of an eye or sensor placed at z.

    A side with no crossing is reported as ``inf``, which is displayed as
    "Safe". A ray passing exactly through the axis gives zero margin on both
    sides.

.. Created on Sat Oct 10 16:45:32 2026

.. codeauthor: Michael J. Hayford
"""

import logging
import math

import numpy as np
import pandas as pd

from holoview.raytr import SafetyResult
from holoview.raytr.rays import build_rays, eval_ray
from holoview.raytr.traceerror import HoloViewError, SafetyCalcError
from holoview.optical.opticalparams import PLANES
from holoview.typing import Plane

logger = logging.getLogger(__name__)

SAFE_TEXT = 'Safe'
ERROR_TEXT = 'Err'

readout_keys = [f"{plane}{side}" for plane in PLANES for side in ('+', '-')]


def closest_crossings(rays, z: float) -> SafetyResult:
    """ Reduce the rays to the nearest crossings above and below the axis.

    Args:
        rays: iterable of :class:`~.Ray`
        z: observation depth, mm

    Raises:
        SafetyCalcError: if z or any crossing is NaN
    """
    if math.isnan(z):
        raise SafetyCalcError("observation depth is not a number", z=z)

    dist_plus = math.inf
    dist_minus = -math.inf
    on_axis = False
    for ray in rays:
        t = eval_ray(ray, z)
        if t > 0:
            dist_plus = min(dist_plus, t)
        elif t < 0:
            dist_minus = max(dist_minus, t)
        elif t == 0:
            on_axis = True
        else:
            raise SafetyCalcError(f"{ray.family} ray ({ray.edge}) crossing "
                                  f"at z={z} is not a number", z=z)

    if on_axis:
        return SafetyResult(0., 0.)
    if dist_minus == -math.inf:
        dist_minus = math.inf
    return SafetyResult(dist_plus, dist_minus)


def calculate_intersections(z: float, params, plane: Plane) -> SafetyResult:
    """ Nearest ray crossings above and below the axis at depth z.

    Args:
        z: observation depth, mm
        params: :class:`~.OpticalParameters` instance
        plane: 'XZ' or 'YZ'

    Returns:
        :class:`~.SafetyResult`; dist_minus is negative unless it is 0 or inf
    """
    try:
        return closest_crossings(build_rays(params, plane), z)
    except SafetyCalcError as err:
        err.plane = plane
        raise


def format_distance(dist: float) -> str:
    """ 'Safe' for an unbounded side, else the magnitude to 2 decimals. """
    if dist == math.inf:
        return SAFE_TEXT
    return f"{abs(dist):.2f}"


def safety_readout(z, params) -> dict[str, str]:
    """ Display text for the four safety fields, XZ+, XZ-, YZ+, YZ-.

    This is the error boundary of the safety calculation: any failure,
    including invalid parameters, is logged and every field reads 'Err'.

    Args:
        z: observation depth in mm; strings are converted to float
        params: :class:`~.OpticalParameters` instance

    Returns:
        dict keyed by 'XZ+', 'XZ-', 'YZ+', 'YZ-'
    """
    try:
        z = float(z)
        params.validate()
        readout = {}
        for plane in PLANES:
            result = calculate_intersections(z, params, plane)
            readout[f"{plane}+"] = format_distance(result.dist_plus)
            readout[f"{plane}-"] = format_distance(result.dist_minus)
    except (HoloViewError, ValueError, TypeError, ArithmeticError) as err:
        logger.error("Safety calculation error: %s", err)
        return {key: ERROR_TEXT for key in readout_keys}
    return readout


def safety_profile(params, z_values) -> pd.DataFrame:
    """ Tabulate the safety margins over a range of observation depths.

    Args:
        params: :class:`~.OpticalParameters` instance
        z_values: sequence of observation depths, mm

    Returns:
        a |DataFrame| indexed by z with a column per readout field holding
        the margin magnitude; inf where that side is unbounded
    """
    z_values = np.asarray(z_values, dtype=float)
    ray_sets = {plane: build_rays(params, plane) for plane in PLANES}
    data = []
    for z in z_values:
        row = []
        for plane in PLANES:
            result = closest_crossings(ray_sets[plane], z)
            row += [abs(result.dist_plus), abs(result.dist_minus)]
        data.append(row)
    df = pd.DataFrame(data, columns=readout_keys,
                      index=pd.Index(z_values, name='z'))
    return df
