#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Desktop viewer for holographic display geometry

    A matplotlib window with an input form on the left and the XZ and YZ
    plane views on the right. Editing a field redraws the views; the Update
    button also fits the views to the hologram aperture. An optional
    parameter file (.hvp) given on the command line sets the initial values.

.. Created on Wed Oct 14 19:25:44 2026

.. codeauthor: Michael J. Hayford
"""

import logging
import math
import sys
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, RadioButtons, TextBox

from holoview.mpl.planefigure import PlaneFigure
from holoview.optical.opticalparams import (OpticalParameters,
                                            DEFAULT_USER_PARAMS)
from holoview.optical.paramfile import open_params, save_params
from holoview.raytr.traceerror import ParameterError
from holoview.util.misc_math import format_number, isanumber, parse_float

logger = logging.getLogger(__name__)

# (key, label) of the input form text fields, top to bottom
form_fields = [('res_x', 'Resolution X'),
               ('res_y', 'Resolution Y'),
               ('pitch_um', 'Pitch (um)'),
               ('wavelength', 'Wavelength (nm)'),
               ('light_angle', 'Light angle'),
               ('obj_x', 'Object X (mm)'),
               ('obj_y', 'Object Y (mm)'),
               ('obj_z', 'Object Z (mm)'),
               ('obj_max_x', 'Corner X (mm)'),
               ('obj_max_y', 'Corner Y (mm)'),
               ('obj_max_z', 'Corner Z (mm)'),
               ('view_z', 'Observe at Z (mm)'),
               ('file_name', 'Parameter file'),
               ]

# decimals kept when a value is written into a form field
FORM_DECIMALS = 9

plane_axes_rects = {'XZ': [0.30, 0.53, 0.68, 0.40],
                    'YZ': [0.30, 0.05, 0.68, 0.40]}


def form_values_from_user_params(user_params, view_z=0., file_name=''):
    """ Flatten user unit parameters into form field text. """
    cx, cy, cz = user_params['obj_center']
    mx, my, mz = user_params['obj_corner']
    values = {'res_x': user_params['res_x'],
              'res_y': user_params['res_y'],
              'pitch_um': user_params['pitch_um'],
              'wavelength': user_params['wavelength'],
              'light_angle': user_params['light_angle'],
              'obj_x': cx, 'obj_y': cy, 'obj_z': cz,
              'obj_max_x': mx, 'obj_max_y': my, 'obj_max_z': mz,
              'view_z': view_z,
              'file_name': file_name,
              }
    return {key: format_number(val, FORM_DECIMALS)
            if isinstance(val, (int, float)) else str(val)
            for key, val in values.items()}


class HoloViewApp:
    """ Input form plus plane views

    Attributes:
        fig: the :class:`~.PlaneFigure`
        text_boxes: dict of form field key: TextBox
        angle_unit: 'deg' or 'rad', from the unit radio buttons
    """

    def __init__(self, user_params=None, file_name='', figsize=(14, 8)):
        user_params = user_params if user_params else DEFAULT_USER_PARAMS
        self.angle_unit = user_params.get('angle_unit', 'deg')
        self.fig = plt.figure(FigureClass=PlaneFigure, figsize=figsize,
                              params_fct=self.get_params,
                              view_z_fct=self.get_view_z,
                              axes_rects=plane_axes_rects)
        self.fig.canvas.manager.set_window_title('holoview')
        self.create_form(form_values_from_user_params(user_params,
                                                      file_name=file_name))
        self.fig.request_update(fit=True)

    def create_form(self, values):
        fig = self.fig
        self.text_boxes = {}
        top = 0.93
        row_height = 0.055
        for i, (key, label) in enumerate(form_fields):
            ax = fig.add_axes([0.12, top - i*row_height, 0.12, 0.04])
            box = TextBox(ax, label, initial=values[key])
            box.on_submit(self.on_field_changed)
            self.text_boxes[key] = box

        bottom = top - len(form_fields)*row_height
        unit_ax = fig.add_axes([0.12, bottom - 0.05, 0.12, 0.08])
        self.unit_buttons = RadioButtons(
            unit_ax, ('deg', 'rad'),
            active=0 if self.angle_unit == 'deg' else 1)
        self.unit_buttons.on_clicked(self.on_angle_unit)

        update_ax = fig.add_axes([0.03, 0.02, 0.07, 0.05])
        self.update_button = Button(update_ax, 'Update')
        self.update_button.on_clicked(self.on_update)

        save_ax = fig.add_axes([0.12, 0.02, 0.05, 0.05])
        self.save_button = Button(save_ax, 'Save')
        self.save_button.on_clicked(self.on_save)

        open_ax = fig.add_axes([0.19, 0.02, 0.05, 0.05])
        self.open_button = Button(open_ax, 'Open')
        self.open_button.on_clicked(self.on_open)

    # --- input
    def field(self, key):
        return self.text_boxes[key].text

    def get_view_z(self):
        return parse_float(self.field('view_z'))

    def get_params(self) -> OpticalParameters:
        """ Read the form into an OpticalParameters instance.

        Fields that aren't numbers become NaN, which shows up as 'Err' in the
        safety readout. An unknown spectral line is treated the same way.
        """
        wvl = self.field('wavelength')
        wavelength = parse_float(wvl) if isanumber(wvl) else wvl.strip()
        user_params = dict(
            res_x=parse_float(self.field('res_x')),
            res_y=parse_float(self.field('res_y')),
            pitch_um=parse_float(self.field('pitch_um')),
            wavelength=wavelength,
            light_angle=parse_float(self.field('light_angle')),
            angle_unit=self.angle_unit,
            obj_center=[parse_float(self.field(k))
                        for k in ('obj_x', 'obj_y', 'obj_z')],
            obj_corner=[parse_float(self.field(k))
                        for k in ('obj_max_x', 'obj_max_y', 'obj_max_z')],
            )
        try:
            return OpticalParameters.from_user_units(**user_params)
        except ParameterError as err:
            logger.warning("%s", err)
            user_params['wavelength'] = math.nan
            return OpticalParameters.from_user_units(**user_params)

    def set_form_values(self, values):
        for key, box in self.text_boxes.items():
            if key in values and key != 'file_name':
                box.set_val(values[key])

    # --- callbacks
    def on_field_changed(self, text):
        self.fig.request_update()

    def on_angle_unit(self, label):
        self.angle_unit = label
        self.fig.request_update()

    def on_update(self, event):
        self.fig.request_update(fit=True)

    def on_save(self, event):
        file_name = self.field('file_name').strip()
        if file_name == '':
            file_name = 'holoview.hvp'
        try:
            save_params(self.get_params(), file_name)
        except OSError as err:
            logger.error("can't save %s: %s", file_name, err)

    def on_open(self, event):
        file_name = self.field('file_name').strip()
        try:
            params = open_params(file_name)
        except (OSError, ParameterError) as err:
            logger.error("can't open %s: %s", file_name, err)
            return
        user_params = params.to_user_units(self.angle_unit)
        self.set_form_values(form_values_from_user_params(
            user_params, view_z=self.get_view_z()))
        self.fig.request_update(fit=True)


def main(argv=None):
    logging_level = logging.INFO
    try:
        logging.basicConfig(filename='holoview.log',
                            filemode='w',
                            level=logging_level)
    except OSError:
        logging.basicConfig(filename=Path.home().joinpath('holoview.log'),
                            filemode='w',
                            level=logging_level)

    argv = sys.argv[1:] if argv is None else argv
    user_params = None
    file_name = ''
    if len(argv) > 0:
        file_name = argv[0]
        try:
            user_params = open_params(file_name).to_user_units()
        except (OSError, ParameterError) as err:
            logger.error("can't open %s: %s", file_name, err)

    app = HoloViewApp(user_params=user_params, file_name=file_name)
    logger.info("started holoview with %s", file_name if file_name
                else "default parameters")
    plt.show()
    del app


if __name__ == '__main__':
    main()
