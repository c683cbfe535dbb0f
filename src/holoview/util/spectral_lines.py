#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Support for spectral line and laser line data

    Holographic displays are usually lit by lasers, so the common laser
    lines are included along with the Fraunhofer lines.

.. codeauthor: Michael J. Hayford
"""


spectra = {'Nd': 1064.0,
           't': 1013.98,
           's': 852.11,
           'r': 706.5188,
           'C': 656.2725,
           "C'": 643.8469,
           'Kr': 647.1,
           'He-Ne': 632.8,
           'D': 589.2938,
           'd': 587.5618,
           'e': 546.074,
           'Nd:YAG-2': 532.0,
           'Ar': 514.5,
           'F': 486.1327,
           "F'": 479.9914,
           'g': 435.8343,
           'h': 404.6561,
           'i': 365.014}


spectra_uc = {key.upper(): val for key, val in spectra.items()}


def get_wavelength(wvl):
    """Return wvl in nm, where wvl can be a spectral line

    Example::

        In [1]: from holoview.util.spectral_lines import *

        In [2]: wl_e = get_wavelength('e'); wl_e
        Out[2]: 546.074

        In [3]: wl_HeNe = get_wavelength('he-ne'); wl_HeNe
        Out[3]: 632.8

        In [4]: wl_532 = get_wavelength('532'); wl_532
        Out[4]: 532.0

    Args:
        wvl: either the wavelength in nm, as a number or numeric string, or
             a string with a spectral line identifier. Case insensitive.

    Returns:
        float: the wavelength in nm

    Raises:
        KeyError: if ``wvl`` is not a number and not in the spectra dictionary
    """
    if isinstance(wvl, (int, float)):
        return float(wvl)
    try:
        return float(wvl)
    except ValueError:
        return spectra_uc[wvl.strip().upper()]
