#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" miscellaneous functions for working with floats

.. Created on Sat Oct 10 10:41:18 2026

.. codeauthor: Michael J. Hayford
"""
import math


def isanumber(a):
    """ returns true if input a can be converted to floating point number """
    try:
        float(a)
        bool_a = True
    except ValueError:
        bool_a = False
    except TypeError:
        bool_a = False

    return bool_a


def parse_float(a):
    """ convert a to float, returning NaN when a isn't a number

    This mirrors what an html form hands back for a malformed field, so
    that bad input propagates as NaN rather than stopping a redraw.
    """
    return float(a) if isanumber(a) else math.nan


def is_finite_positive(x) -> bool:
    """ Test that x is a real number, finite and > 0 """
    try:
        return math.isfinite(x) and x > 0.
    except TypeError:
        return False


def signed_big(x: float, big: float) -> float:
    """ Return +big if x > 0, otherwise -big. """
    return big if x > 0 else -big


def format_number(x: float, decimals: int = 3) -> str:
    """ Shortest text for x rounded to `decimals`, without trailing zeros.

    Integral values print without a decimal point and -0 prints as 0.
    """
    val = round(x, decimals)
    if not math.isfinite(val):
        return str(val)
    if val == int(val):
        return str(int(val))
    return f"{val:.{decimals}f}".rstrip('0').rstrip('.')
