#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" manage light and dark interface color schemes

.. Created on Tue Oct 13 08:51:30 2026

.. codeauthor: Michael J. Hayford
"""
from matplotlib.figure import Figure

from holoview.util import colors


class StyledFigure(Figure):
    """Figure whose face, axes and titles follow a light or dark palette.

    The palette, see :func:`~.colors.light_or_dark`, is kept in `_rgb` so
    subclasses can draw their scenes with it.
    """

    def __init__(self, **kwargs):
        is_dark = kwargs.pop('is_dark', False)
        self.is_dark = is_dark
        self._rgb = colors.light_or_dark(is_dark)

        super().__init__(**kwargs)

        self.sync_light_or_dark(is_dark, do_refresh=False)

    def sync_light_or_dark(self, is_dark, do_refresh=True):
        self.is_dark = is_dark
        self._rgb = colors.light_or_dark(is_dark)
        self.set_facecolor(self._rgb['background'])
        for axes in self.axes:
            axes.set_facecolor(self._rgb['background1'])
            for spine in axes.spines.values():
                spine.set_edgecolor(self._rgb['foreground2'])
            axes.title.set_color(self._rgb['foreground1'])
        if do_refresh:
            self.refresh()

    def refresh(self, **kwargs):
        return self
