#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for misc_math and spectral_lines

.. Created on Fri Oct 16 11:58:36 2026

.. codeauthor: Michael J. Hayford
"""

import math

import pytest

from holoview.util import misc_math
from holoview.util.spectral_lines import get_wavelength
from holoview.util.colors import light_or_dark


def test_format_number():
    assert misc_math.format_number(1.0) == '1'
    assert misc_math.format_number(-20.) == '-20'
    assert misc_math.format_number(0.25) == '0.25'
    assert misc_math.format_number(1.23456) == '1.235'
    assert misc_math.format_number(1e-4) == '0'
    assert misc_math.format_number(-0.0) == '0'
    assert misc_math.format_number(0.1 + 0.2) == '0.3'
    assert misc_math.format_number(math.inf) == 'inf'


def test_parse_float():
    assert misc_math.isanumber('1.5')
    assert misc_math.isanumber(2)
    assert not misc_math.isanumber('abc')
    assert not misc_math.isanumber(None)
    assert misc_math.parse_float(' 42 ') == 42.
    assert math.isnan(misc_math.parse_float(''))


def test_is_finite_positive():
    assert misc_math.is_finite_positive(1e-9)
    for x in (0., -1., math.inf, math.nan, None):
        assert not misc_math.is_finite_positive(x)


def test_signed_big():
    assert misc_math.signed_big(3., 1e6) == 1e6
    assert misc_math.signed_big(-3., 1e6) == -1e6
    assert misc_math.signed_big(0., 1e6) == -1e6


def test_get_wavelength():
    assert get_wavelength(532) == 532.
    assert get_wavelength('632.8') == pytest.approx(632.8)
    assert get_wavelength('he-ne') == pytest.approx(632.8)
    assert get_wavelength(' e ') == pytest.approx(546.074)
    with pytest.raises(KeyError):
        get_wavelength('not a line')


def test_palette():
    for is_dark in (False, True):
        rgb = light_or_dark(is_dark)
        for key in ('background', 'background1', 'foreground1', 'grid',
                    'axis', 'hologram', 'object', 'object_ray',
                    'construction', 'illumination', 'diffraction'):
            assert key in rgb
    assert light_or_dark(True)['background'] != \
        light_or_dark(False)['background']
