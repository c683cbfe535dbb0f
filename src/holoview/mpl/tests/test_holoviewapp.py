#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the input form of the desktop viewer

.. Created on Fri Oct 16 16:40:12 2026

.. codeauthor: Michael J. Hayford
"""

import math

import attr
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402

import pytest  # noqa: E402

from holoview.mpl.holoviewapp import (HoloViewApp, main,  # noqa: E402
                                      form_values_from_user_params)
from holoview.optical.opticalparams import DEFAULT_USER_PARAMS  # noqa: E402
from holoview.optical.paramfile import save_params  # noqa: E402


@pytest.fixture
def app():
    app = HoloViewApp()
    yield app
    plt.close(app.fig)


def test_form_values():
    values = form_values_from_user_params(DEFAULT_USER_PARAMS, view_z=12.5)
    assert values['res_x'] == '1920'
    assert values['pitch_um'] == '8'
    assert values['obj_z'] == '50'
    assert values['obj_max_x'] == '5'
    assert values['view_z'] == '12.5'
    assert values['file_name'] == ''


def test_params_from_form(app):
    params = app.get_params()
    assert params.pitch == pytest.approx(0.008)
    assert params.wavelength == pytest.approx(532e-6)
    assert app.get_view_z() == 0.

    app.text_boxes['wavelength'].set_val('He-Ne')
    assert app.get_params().wavelength == pytest.approx(632.8e-6)


def test_bad_fields_become_nan(app):
    app.text_boxes['wavelength'].set_val('laser')
    assert math.isnan(app.get_params().wavelength)
    app.text_boxes['pitch_um'].set_val('8um')
    assert math.isnan(app.get_params().pitch)
    app.text_boxes['view_z'].set_val('')
    assert math.isnan(app.get_view_z())


def test_render_readout(app):
    app.fig.scheduler.flush()
    # 1920 x 8 um aperture, 7.68 mm either side at the hologram plane
    assert app.fig.readout['XZ+'] == '7.68'
    assert app.fig.readout['YZ-'] == '4.32'


def test_angle_unit(app):
    app.text_boxes['light_angle'].set_val('30')
    assert app.get_params().light_angle == pytest.approx(math.radians(30.))
    app.on_angle_unit('rad')
    assert app.get_params().light_angle == pytest.approx(30.)


def test_save_and_open(app, tmp_path):
    file_name = str(tmp_path / 'form.hvp')
    app.text_boxes['file_name'].set_val(file_name)
    app.text_boxes['res_x'].set_val('640')
    app.on_save(None)

    app.text_boxes['res_x'].set_val('100')
    app.on_open(None)
    assert app.field('res_x') == '640'
    assert app.get_params().res_x == 640.


def test_form_values_keep_precision():
    user_params = {**DEFAULT_USER_PARAMS,
                   'light_angle': math.degrees(0.1),
                   'pitch_um': 0.008/1e-3}
    values = form_values_from_user_params(user_params)
    assert values['pitch_um'] == '8'
    assert math.radians(float(values['light_angle'])) == pytest.approx(
        0.1, rel=1e-10)


def test_open_keeps_angle(app, tmp_path):
    file_path = tmp_path / 'angle.hvp'
    params = attr.evolve(app.get_params(), light_angle=0.1)
    save_params(params, file_path)
    app.text_boxes['file_name'].set_val(str(file_path))
    app.on_open(None)
    assert app.get_params().light_angle == pytest.approx(0.1, rel=1e-10)


def test_open_malformed_file_keeps_form(app, tmp_path):
    file_path = tmp_path / 'broken.hvp'
    file_path.write_text('{"optical_params": ')
    app.text_boxes['res_x'].set_val('640')
    app.text_boxes['file_name'].set_val(str(file_path))
    app.on_open(None)
    assert app.field('res_x') == '640'


def test_main_with_malformed_file(tmp_path, monkeypatch):
    file_path = tmp_path / 'broken.hvp'
    file_path.write_text('{"optical_params": {"res_x": "abc"}}')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(plt, 'show', lambda: None)
    try:
        main([str(file_path)])
    finally:
        plt.close('all')
