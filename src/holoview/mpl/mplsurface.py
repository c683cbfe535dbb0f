#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Drawing surface rendered into a matplotlib Axes

    The Axes data coordinates are the surface pixels: x from 0 to width and
    y from 0 at the top to height at the bottom.

.. Created on Tue Oct 13 10:22:57 2026

.. codeauthor: Michael J. Hayford
"""

from matplotlib import collections
from matplotlib import lines

from holoview.gui.surface import RecordingSurface, StrokeItem, TextItem

# canvas text alignment -> matplotlib alignment
halign = {'left': 'left', 'start': 'left', 'center': 'center',
          'right': 'right', 'end': 'right'}
valign = {'top': 'top', 'hanging': 'top', 'middle': 'center',
          'alphabetic': 'baseline', 'ideographic': 'baseline',
          'bottom': 'bottom'}


def linestyle_for_dash(dash):
    """ matplotlib linestyle for a canvas dash pattern. """
    if len(dash) == 0:
        return '-'
    return (0, tuple(dash))


class MplSurface(RecordingSurface):
    """ Recording surface that draws its display list into an Axes

    Attributes:
        ax: the matplotlib Axes drawn into
        bg_color: Axes face color
    """

    def __init__(self, ax, bg_color=None, **kwargs):
        super().__init__(**kwargs)
        self.ax = ax
        self.bg_color = bg_color

    def setup_axes(self):
        ax = self.ax
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_aspect('equal', adjustable='box')
        ax.set_xticks([])
        ax.set_yticks([])
        if self.bg_color is not None:
            ax.set_facecolor(self.bg_color)

    def create_stroke(self, item: StrokeItem):
        ls = linestyle_for_dash(item.dash)
        polylines = []
        for points, closed in item.subpaths:
            if closed:
                points = points + [points[0]]
            polylines.append(points)
        if len(polylines) == 1:
            x, y = zip(*polylines[0])
            return lines.Line2D(x, y, color=item.color,
                                linewidth=item.linewidth, linestyle=ls)
        return collections.LineCollection(polylines, colors=item.color,
                                          linewidths=item.linewidth,
                                          linestyles=ls)

    def create_text(self, item: TextItem):
        return self.ax.text(item.x, item.y, item.text, color=item.color,
                            fontsize=item.fontsize,
                            ha=halign.get(item.align, 'left'),
                            va=valign.get(item.baseline, 'baseline'),
                            clip_on=True)

    def render(self):
        """ Redraw the Axes from the display list.

        Returns:
            list of the artists created
        """
        ax = self.ax
        ax.cla()
        self.setup_axes()
        artists = []
        for item in self.items:
            if isinstance(item, TextItem):
                artists.append(self.create_text(item))
            else:
                a = self.create_stroke(item)
                if isinstance(a, lines.Line2D):
                    ax.add_line(a)
                else:
                    ax.add_collection(a, autolim=False)
                artists.append(a)
        # adding artists may autoscale; restore the pixel limits
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        return artists
