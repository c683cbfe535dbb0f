#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" manage light and dark color schemes for the plane views

.. Created on Sat Oct 10 10:03:52 2026

.. codeauthor: Michael J. Hayford
"""


# Solarized, with base2 and base3 replaced by blue tinted hues
solarize_blue = {
    'base03': '#002b36',
    'base02': '#073642',
    'base01': '#586e75',
    'base00': '#657b83',
    'base0': '#839496',
    'base1': '#93a1a1',
    'base2': '#e1e7f2',
    'base3': '#edf3fe',
    'violet': '#6c71c4',
    'blue': '#268bd2',
    'cyan': '#2aa198',
    'green': '#859900',
    'yellow': '#b58900',
    'orange': '#cb4b16',
    'red': '#dc322f',
    'magenta': '#d33682',
    }


solarize_dict = solarize_blue


def accent_colors(is_dark=True):
    accent = {key: solarize_dict[key]
              for key in ('violet', 'blue', 'cyan', 'green', 'yellow',
                          'orange', 'red', 'magenta')}
    return accent


def foreground_background(is_dark=True):
    if is_dark:
        rgb = {
            'background': solarize_dict['base03'],
            'background1': solarize_dict['base02'],
            'background2': solarize_dict['base01'],
            'foreground': solarize_dict['base0'],
            'foreground1': solarize_dict['base1'],
            'foreground2': solarize_dict['base01'],
            }
    else:
        rgb = {
            'background': solarize_dict['base3'],
            'background1': solarize_dict['base2'],
            'background2': solarize_dict['base1'],
            'foreground': solarize_dict['base00'],
            'foreground1': solarize_dict['base01'],
            'foreground2': solarize_dict['base1'],
            }
    return rgb


def light_or_dark(is_dark=False):
    """ Return the scene palette, keyed by the item being drawn.

    Colors are strings accepted by both matplotlib and a css canvas. The
    construction rays carry an alpha suffix so they render translucent.
    """
    accent = accent_colors(is_dark)
    fb = foreground_background(is_dark)
    rgb = {
        'grid': fb['background2'],
        'grid_label': fb['foreground'],
        'axis': fb['foreground1'],
        'axis_label': fb['foreground1'],
        'hologram': accent['magenta'],
        'object': accent['green'],
        'object_ray': accent['violet'],
        'construction': accent['blue'] + '4d',
        'illumination': accent['blue'],
        'diffraction': accent['yellow'],
        }
    return {**fb, **rgb}
