#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" A canvas-like 2D drawing surface that records a display list

    :class:`DrawingSurface` offers the subset of an html canvas 2D context the
    scene drawing needs: style setters, path building, stroke and text.
    Coordinates are surface pixels with y pointing down.

    :class:`RecordingSurface` keeps what was drawn as a list of
    :class:`StrokeItem` and :class:`TextItem`, in drawing order. Toolkit
    surfaces, e.g. :class:`~.MplSurface`, render that list.

.. Created on Sun Oct 11 13:52:48 2026

.. codeauthor: Michael J. Hayford
"""

from collections import namedtuple

from holoview.gui.viewtransform import CANVAS_WIDTH, CANVAS_HEIGHT

StrokeItem = namedtuple('StrokeItem', ['subpaths', 'color', 'linewidth',
                                       'dash'])
StrokeItem.subpaths.__doc__ = "list of (points, closed) tuples"
StrokeItem.color.__doc__ = "stroke color"
StrokeItem.linewidth.__doc__ = "line width, pixels"
StrokeItem.dash.__doc__ = "tuple of on/off lengths, empty for a solid line"

TextItem = namedtuple('TextItem', ['text', 'x', 'y', 'color', 'fontsize',
                                   'align', 'baseline'])
TextItem.text.__doc__ = "the string drawn"
TextItem.x.__doc__ = "anchor x, pixels"
TextItem.y.__doc__ = "anchor y, pixels"
TextItem.color.__doc__ = "fill color"
TextItem.fontsize.__doc__ = "font size, pixels"
TextItem.align.__doc__ = "'left' | 'center' | 'right'"
TextItem.baseline.__doc__ = "'top' | 'middle' | 'alphabetic' | 'bottom'"


class DrawingSurface:
    """ Base class for a canvas-like drawing surface

    Subclasses implement :meth:`clear_rect`, :meth:`_stroke_subpaths` and
    :meth:`_fill_text`.

    Attributes:
        width: logical width, pixels
        height: logical height, pixels
        stroke_style: current stroke color
        fill_style: current fill (text) color
        line_width: current line width
        line_dash: current dash pattern, empty for solid lines
        font_size: current font size
        text_align: current horizontal text alignment
        text_baseline: current vertical text alignment
    """

    def __init__(self, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
        self.width = width
        self.height = height
        self.stroke_style = 'black'
        self.fill_style = 'black'
        self.line_width = 1.
        self.line_dash = ()
        self.font_size = 10
        self.text_align = 'left'
        self.text_baseline = 'alphabetic'
        self._subpaths = []

    # --- state
    def set_stroke_style(self, color):
        self.stroke_style = color

    def set_fill_style(self, color):
        self.fill_style = color

    def set_line_width(self, line_width):
        self.line_width = line_width

    def set_line_dash(self, segments):
        self.line_dash = tuple(segments)

    def set_font(self, size):
        self.font_size = size

    def set_text_align(self, align):
        self.text_align = align

    def set_text_baseline(self, baseline):
        self.text_baseline = baseline

    # --- paths
    def begin_path(self):
        self._subpaths = []

    def move_to(self, x, y):
        self._subpaths.append(([(x, y)], False))

    def line_to(self, x, y):
        if len(self._subpaths) == 0:
            self.move_to(x, y)
        else:
            self._subpaths[-1][0].append((x, y))

    def close_path(self):
        if len(self._subpaths) > 0:
            points, _ = self._subpaths[-1]
            self._subpaths[-1] = (points, True)

    def stroke(self):
        subpaths = [(list(pts), closed) for pts, closed in self._subpaths
                    if len(pts) > 1]
        if len(subpaths) > 0:
            self._stroke_subpaths(subpaths)

    def fill_text(self, text, x, y):
        self._fill_text(str(text), x, y)

    # --- convenience
    def stroke_line(self, p0, p1):
        """ Stroke a single segment from p0 to p1. """
        self.begin_path()
        self.move_to(*p0)
        self.line_to(*p1)
        self.stroke()

    def clear_rect(self, x, y, w, h):
        raise NotImplementedError

    def _stroke_subpaths(self, subpaths):
        raise NotImplementedError

    def _fill_text(self, text, x, y):
        raise NotImplementedError


class RecordingSurface(DrawingSurface):
    """ Drawing surface that keeps a display list

    Attributes:
        items: list of StrokeItem and TextItem in drawing order
    """

    def __init__(self, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
        super().__init__(width=width, height=height)
        self.items = []

    def clear_rect(self, x, y, w, h):
        """ Erase the rectangle.

        Clearing the whole surface drops the display list, including lines
        running off the edges. Otherwise only items lying entirely inside
        the rectangle are removed.
        """
        if x <= 0 and y <= 0 and x + w >= self.width and y + h >= self.height:
            self.reset()
            return

        def inside(px, py):
            return x <= px <= x + w and y <= py <= y + h

        def is_covered(item):
            if isinstance(item, TextItem):
                return inside(item.x, item.y)
            return all(inside(*pt) for pts, _ in item.subpaths for pt in pts)

        self.items = [item for item in self.items if not is_covered(item)]

    def _stroke_subpaths(self, subpaths):
        self.items.append(StrokeItem(subpaths, self.stroke_style,
                                     self.line_width, self.line_dash))

    def _fill_text(self, text, x, y):
        self.items.append(TextItem(text, x, y, self.fill_style,
                                   self.font_size, self.text_align,
                                   self.text_baseline))

    def reset(self):
        """ Drop the whole display list. """
        self.items = []

    def strokes(self):
        return [item for item in self.items if isinstance(item, StrokeItem)]

    def texts(self):
        return [item for item in self.items if isinstance(item, TextItem)]
