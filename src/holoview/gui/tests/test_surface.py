#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the recording drawing surface

.. Created on Thu Oct 15 15:36:48 2026

.. codeauthor: Michael J. Hayford
"""

import unittest

from holoview.gui.surface import RecordingSurface, StrokeItem, TextItem


class RecordingSurfaceTestCase(unittest.TestCase):
    def setUp(self):
        self.surface = RecordingSurface(200, 100)

    def test_stroke_records_style(self):
        s = self.surface
        s.set_stroke_style('red')
        s.set_line_width(2)
        s.set_line_dash([5, 5])
        s.stroke_line((0, 0), (10, 10))
        self.assertEqual(s.items, [StrokeItem([([(0, 0), (10, 10)], False)],
                                              'red', 2, (5, 5))])

    def test_closed_and_degenerate_subpaths(self):
        s = self.surface
        s.begin_path()
        s.move_to(1, 1)
        s.move_to(2, 2)
        s.line_to(3, 3)
        s.line_to(3, 5)
        s.close_path()
        s.stroke()
        stroke, = s.strokes()
        # the lone move_to is not drawn
        self.assertEqual(stroke.subpaths, [([(2, 2), (3, 3), (3, 5)], True)])

        s.begin_path()
        s.move_to(4, 4)
        s.stroke()
        self.assertEqual(len(s.strokes()), 1)

    def test_text(self):
        s = self.surface
        s.set_fill_style('blue')
        s.set_font(12)
        s.set_text_align('right')
        s.set_text_baseline('middle')
        s.fill_text(1.5, 20, 30)
        self.assertEqual(s.texts(), [TextItem('1.5', 20, 30, 'blue', 12,
                                              'right', 'middle')])

    def test_clear(self):
        s = self.surface
        s.stroke_line((-50, 10), (500, 10))
        s.stroke_line((10, 10), (20, 20))
        s.fill_text('a', 150, 50)

        s.clear_rect(0, 0, 100, 100)
        self.assertEqual(len(s.strokes()), 1)
        self.assertEqual(len(s.texts()), 1)

        s.clear_rect(0, 0, s.width, s.height)
        self.assertEqual(s.items, [])
