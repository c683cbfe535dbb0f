#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the plane view transform

.. Created on Thu Oct 15 13:40:27 2026

.. codeauthor: Michael J. Hayford
"""

import math
import unittest

import pytest

from holoview.gui.viewtransform import ViewState, fit_view, fit_views
from holoview.optical.opticalparams import OpticalParameters


class ViewStateTestCase(unittest.TestCase):
    def setUp(self):
        self.vs = ViewState()

    def test_defaults(self):
        self.assertEqual(self.vs.scale, 2.)
        self.assertEqual(self.vs.offset_x, 500.)
        self.assertEqual(self.vs.offset_y, 200.)
        self.assertFalse(self.vs.is_dragging)

    def test_screen_mapping(self):
        self.assertEqual(self.vs.to_screen(0., 0.), (500., 200.))
        # transverse axis points up the screen
        self.assertEqual(self.vs.to_screen(10., 5.), (520., 190.))
        for z, t in ((0., 0.), (12.5, -3.25), (-100., 42.)):
            zw, tw = self.vs.to_world(*self.vs.to_screen(z, t))
            assert (zw, tw) == pytest.approx((z, t))

    def test_visible_bounds(self):
        bounds = self.vs.visible_bounds(800, 400)
        assert bounds == pytest.approx((-250., 150., -100., 100.))

    def test_zoom_keeps_point_under_cursor(self):
        x, y = 300., 150.
        before = self.vs.to_world(x, y)
        self.vs.zoom_at(-1, x, y)
        assert self.vs.scale == pytest.approx(2.2)
        assert self.vs.to_world(x, y) == pytest.approx(before)

        self.vs.zoom_at(120, 650., 30.)
        assert self.vs.scale == pytest.approx(2.2*0.9)

    def test_zoom_in_then_out(self):
        self.vs.zoom_at(-1, 400., 200.)
        self.vs.zoom_at(1, 400., 200.)
        assert self.vs.scale == pytest.approx(2.*1.1*0.9)

    def test_pan_and_drag(self):
        self.vs.pan(10., -20.)
        self.assertEqual((self.vs.offset_x, self.vs.offset_y), (510., 180.))

        self.assertFalse(self.vs.drag_to(0., 0.))
        self.vs.start_drag(100., 100.)
        self.assertTrue(self.vs.drag_to(105., 110.))
        self.assertTrue(self.vs.drag_to(107., 111.))
        self.assertEqual((self.vs.offset_x, self.vs.offset_y), (517., 191.))
        self.vs.end_drag()
        self.assertFalse(self.vs.drag_to(200., 200.))
        self.assertEqual((self.vs.offset_x, self.vs.offset_y), (517., 191.))

    def test_degenerate(self):
        self.assertFalse(self.vs.is_degenerate())
        for scale in (0., -1., math.nan, math.inf):
            self.assertTrue(ViewState(scale=scale).is_degenerate())
        self.assertTrue(ViewState(offset_x=math.nan).is_degenerate())
        self.assertTrue(ViewState(offset_y=math.inf).is_degenerate())


class FitViewTestCase(unittest.TestCase):
    def test_fit(self):
        vs = ViewState()
        self.assertTrue(fit_view(vs, 1.0, 800, 400))
        assert vs.scale == pytest.approx(240.)
        self.assertEqual(vs.offset_x, 160.)
        self.assertEqual(vs.offset_y, 200.)
        # the aperture spans 60% of the height
        _, y_top = vs.to_screen(0., 0.5)
        _, y_bottom = vs.to_screen(0., -0.5)
        assert y_bottom - y_top == pytest.approx(240.)

    def test_no_fit_for_empty_aperture(self):
        vs = ViewState()
        for width in (0., -1., math.nan):
            self.assertFalse(fit_view(vs, width))
            self.assertEqual(vs.scale, 2.)
            self.assertEqual(vs.offset_x, 500.)

    def test_fit_views(self):
        params = OpticalParameters(res_x=100, res_y=0, pitch=0.01,
                                   wavelength=0.0005)
        view_states = {'XZ': ViewState(), 'YZ': ViewState()}
        fitted = fit_views(view_states, params, 800, 400)
        self.assertEqual(fitted, ['XZ'])
        assert view_states['XZ'].scale == pytest.approx(240.)
        self.assertEqual(view_states['YZ'].scale, 2.)
