#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the plane scene drawing

.. Created on Thu Oct 15 17:21:33 2026

.. codeauthor: Michael J. Hayford
"""

import unittest

import pytest

from holoview.gui import scene
from holoview.gui.surface import RecordingSurface
from holoview.gui.viewtransform import ViewState, fit_view
from holoview.optical.opticalparams import OpticalParameters
from holoview.util.colors import light_or_dark


def make_params(**kwargs):
    inputs = dict(res_x=100, res_y=100, pitch=0.01, wavelength=0.0005,
                  light_angle=0.1, obj_center=(0., 0., 5.),
                  obj_corner=(0.3, 0.3, 6.))
    inputs.update(kwargs)
    return OpticalParameters(**inputs)


class DrawSceneTestCase(unittest.TestCase):
    def setUp(self):
        self.rgb = light_or_dark(is_dark=False)
        self.surface = RecordingSurface(800, 400)
        self.view_state = ViewState()
        fit_view(self.view_state, 1.0, 800, 400)

    def strokes_of(self, key):
        return [s for s in self.surface.strokes() if s.color == self.rgb[key]]

    def first_index(self, key):
        for i, item in enumerate(self.surface.items):
            if getattr(item, 'color', None) == self.rgb[key]:
                return i
        return None

    def test_drawing_order(self):
        drawn = scene.draw_scene(self.surface, 'YZ', make_params(),
                                 self.view_state, self.rgb)
        self.assertTrue(drawn)
        order = [self.first_index(key)
                 for key in ('axis', 'hologram', 'object', 'object_ray',
                             'construction', 'illumination', 'diffraction')]
        self.assertNotIn(None, order)
        self.assertEqual(order, sorted(order))

    def test_ray_styles(self):
        scene.draw_scene(self.surface, 'YZ', make_params(),
                         self.view_state, self.rgb)
        object_rays = self.strokes_of('object_ray')
        self.assertEqual(len(object_rays), 2)
        self.assertTrue(all(s.dash == scene.OBJECT_RAY_DASH
                            for s in object_rays))

        diffraction = self.strokes_of('diffraction')
        self.assertEqual(len(diffraction), 2)
        self.assertTrue(all(s.dash == scene.DIFFRACTION_DASH
                            for s in diffraction))

        illumination = self.strokes_of('illumination')
        self.assertEqual(len(illumination), 2)
        self.assertTrue(all(s.dash == () and s.linewidth == 2
                            for s in illumination))

        self.assertEqual(len(self.strokes_of('construction')), 3)

        hologram, = self.strokes_of('hologram')
        self.assertEqual(hologram.linewidth, 3)
        (p0, p1), _ = hologram.subpaths[0]
        assert p0 == pytest.approx((160., 320.))
        assert p1 == pytest.approx((160., 80.))

        box, = self.strokes_of('object')
        points, closed = box.subpaths[0]
        self.assertTrue(closed)
        self.assertEqual(len(points), 4)

    def test_xz_has_no_illumination(self):
        scene.draw_scene(self.surface, 'XZ', make_params(),
                         self.view_state, self.rgb)
        self.assertEqual(self.strokes_of('illumination'), [])
        self.assertEqual(len(self.strokes_of('diffraction')), 2)
        texts = [t.text for t in self.surface.texts()]
        self.assertIn('X (mm)', texts)

    def test_non_physical_diffraction_not_drawn(self):
        scene.draw_scene(self.surface, 'YZ', make_params(wavelength=0.05),
                         self.view_state, self.rgb)
        self.assertEqual(self.strokes_of('diffraction'), [])
        self.assertEqual(len(self.strokes_of('illumination')), 2)

    def test_redraw_replaces_previous_frame(self):
        scene.draw_scene(self.surface, 'YZ', make_params(),
                         self.view_state, self.rgb)
        n_items = len(self.surface.items)
        scene.draw_scene(self.surface, 'YZ', make_params(),
                         self.view_state, self.rgb)
        self.assertEqual(len(self.surface.items), n_items)

    def test_nan_parameters_still_drawn(self):
        params = make_params(wavelength=float('nan'))
        drawn = scene.draw_scene(self.surface, 'YZ', params,
                                 self.view_state, self.rgb)
        self.assertTrue(drawn)
        self.assertEqual(len(self.strokes_of('hologram')), 1)
        self.assertEqual(len(self.strokes_of('object')), 1)
        self.assertEqual(len(self.strokes_of('illumination')), 2)

    def test_degenerate_view_clears(self):
        scene.draw_scene(self.surface, 'YZ', make_params(),
                         self.view_state, self.rgb)
        self.view_state.scale = 0.
        drawn = scene.draw_scene(self.surface, 'YZ', make_params(),
                                 self.view_state, self.rgb)
        self.assertFalse(drawn)
        self.assertEqual(self.surface.items, [])


def test_ray_reach():
    reach, illumination_reach = scene.ray_reach(ViewState(), 800, 400)
    # visible z span 400, padded by 200 on each side
    assert reach == pytest.approx(1600.)
    assert illumination_reach == pytest.approx(1200.)


def test_default_palette():
    surface = RecordingSurface(800, 400)
    assert scene.draw_scene(surface, 'YZ', make_params(), ViewState())
    assert len(surface.items) > 0
