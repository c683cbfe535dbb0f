#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Interactive figure with the XZ and YZ plane views

    :class:`PlaneFigure` hosts one Axes per projection plane. Each plane has
    its own :class:`~.ViewState`; scrolling zooms toward the cursor and a
    left button drag pans the plane under the cursor. Every change requests a
    render through a :class:`~.RenderScheduler`, so a burst of events leads to
    one redraw.

    The figure doesn't read the parameters itself: it calls `params_fct` and
    `view_z_fct` at render time, so it always draws the latest input.

.. Created on Tue Oct 13 14:40:02 2026

.. codeauthor: Michael J. Hayford
"""

import logging

from holoview.gui.scene import draw_scene
from holoview.gui.scheduler import RenderScheduler
from holoview.gui.viewtransform import (ViewState, fit_views,
                                        CANVAS_WIDTH, CANVAS_HEIGHT)
from holoview.mpl.mplsurface import MplSurface
from holoview.mpl.styledfigure import StyledFigure
from holoview.optical.opticalparams import PLANES
from holoview.raytr.safety import safety_readout

logger = logging.getLogger(__name__)

default_axes_rects = {'XZ': [0.03, 0.53, 0.94, 0.40],
                      'YZ': [0.03, 0.05, 0.94, 0.40]}


class PlaneFigure(StyledFigure):
    """ Figure with interactive XZ and YZ views and safety readouts

    Attributes:
        params_fct: callable returning the current :class:`~.OpticalParameters`
        view_z_fct: callable returning the observation depth for the safety
                    readout, a float or a numeric string
        planes: the planes shown, ('XZ', 'YZ')
        plane_axes: dict of plane: Axes
        view_states: dict of plane: ViewState
        surfaces: dict of plane: MplSurface
        readout: dict of the last safety readout text, see
                 :func:`~.safety_readout`
        on_readout: optional callable, called with the readout after a render
        scheduler: the :class:`~.RenderScheduler` coalescing renders
    """

    def __init__(self, params_fct,
                 view_z_fct=None,
                 planes=PLANES,
                 surface_size=(CANVAS_WIDTH, CANVAS_HEIGHT),
                 axes_rects=None,
                 use_timer=True,
                 on_readout=None,
                 **kwargs):
        self.params_fct = params_fct
        self.view_z_fct = view_z_fct if view_z_fct else (lambda: 0.)
        self.planes = planes
        self.surface_width, self.surface_height = surface_size
        self.on_readout = on_readout
        self.readout = {}
        self.event_dict = {}
        self.callback_ids = []
        self._timer = None

        super().__init__(**kwargs)

        rects = axes_rects if axes_rects else default_axes_rects
        self.plane_axes = {}
        self.surfaces = {}
        self.view_states = {}
        for plane in self.planes:
            ax = self.add_axes(rects[plane])
            self.plane_axes[plane] = ax
            self.surfaces[plane] = MplSurface(ax,
                                              bg_color=self._rgb['background1'],
                                              width=self.surface_width,
                                              height=self.surface_height)
            self.surfaces[plane].setup_axes()
            self.view_states[plane] = ViewState(width=self.surface_width,
                                                height=self.surface_height)

        schedule_fct = self.schedule_on_idle if use_timer else None
        self.scheduler = RenderScheduler(self.render, schedule_fct)

        self.connect_events()

    def connect_events(self, action_dict=None):
        'connect to all the events we need'
        if action_dict is None:
            action_dict = {'scroll_event': self.on_scroll,
                           'button_press_event': self.on_press,
                           'motion_notify_event': self.on_motion,
                           'button_release_event': self.on_release,
                           'key_press_event': self.on_key_press,
                           }
        self.callback_ids = []
        for event, action in action_dict.items():
            self.event_dict[event] = action
            cid = self.canvas.mpl_connect(event, action)
            self.callback_ids.append(cid)

    def disconnect_events(self):
        'disconnect all the stored connection ids'
        for clbk in self.callback_ids:
            self.canvas.mpl_disconnect(clbk)
        self.callback_ids = []
        event_dict, self.event_dict = self.event_dict, {}
        return event_dict

    def sync_light_or_dark(self, is_dark, do_refresh=True):
        super().sync_light_or_dark(is_dark, do_refresh=False)
        for surface in getattr(self, 'surfaces', {}).values():
            surface.bg_color = self._rgb['background1']
        if do_refresh:
            self.refresh()

    # --- rendering
    def schedule_on_idle(self, callback):
        """ Have the gui event loop call `callback` once, when idle. """
        timer = self.canvas.new_timer(interval=0)
        timer.single_shot = True
        timer.add_callback(callback)
        self._timer = timer
        timer.start()

    def request_update(self, fit=False):
        """ Request a coalesced render, fitting the views if `fit`. """
        return self.scheduler.request(fit=fit)

    def refresh(self, fit=False, **kwargs):
        """Render immediately, return self.

        Returns:
            self (class Figure) so scripting envs will auto display results
        """
        self.render(fit=fit)
        return self

    def render(self, fit=False):
        """ Compute the safety readout and redraw both planes. """
        params = self.params_fct()

        self.readout = safety_readout(self.view_z_fct(), params)
        if self.on_readout is not None:
            self.on_readout(self.readout)

        if fit:
            fitted = fit_views(self.view_states, params,
                               self.surface_width, self.surface_height)
            logger.debug("fit views: %s", fitted)

        for plane in self.planes:
            surface = self.surfaces[plane]
            draw_scene(surface, plane, params, self.view_states[plane],
                       self._rgb)
            surface.render()
            self.draw_title(plane)

        self.canvas.draw_idle()
        return self

    def draw_title(self, plane):
        ax = self.plane_axes[plane]
        plus = self.readout.get(f"{plane}+", '')
        minus = self.readout.get(f"{plane}-", '')
        ax.set_title(f"{plane} plane      safety margin  "
                     f"+{plane[0]}: {plus}    -{plane[0]}: {minus}",
                     color=self._rgb['foreground1'], fontsize=10, loc='left')

    # --- interactive actions
    def plane_at(self, event):
        """ The plane whose Axes the event is in, or None. """
        for plane, ax in self.plane_axes.items():
            if event.inaxes is ax:
                return plane
        return None

    def surface_coords(self, plane, event):
        """ Event position in the surface pixels of `plane`. """
        ax = self.plane_axes[plane]
        x, y = ax.transData.inverted().transform((event.x, event.y))
        return float(x), float(y)

    def on_scroll(self, event):
        plane = self.plane_at(event)
        if plane is None:
            return
        x, y = self.surface_coords(plane, event)
        # scrolling down is a positive wheel delta and zooms out
        self.view_states[plane].zoom_at(-event.step, x, y)
        self.request_update()

    def on_press(self, event):
        if event.button != 1:
            return
        plane = self.plane_at(event)
        if plane is None:
            return
        x, y = self.surface_coords(plane, event)
        self.view_states[plane].start_drag(x, y)

    def on_motion(self, event):
        moved = False
        for plane, view_state in self.view_states.items():
            if view_state.is_dragging:
                x, y = self.surface_coords(plane, event)
                moved |= view_state.drag_to(x, y)
        if moved:
            self.request_update()

    def on_release(self, event):
        'on release we end any drag in progress'
        for view_state in self.view_states.values():
            view_state.end_drag()

    def on_key_press(self, event):
        # 'f' is taken by the matplotlib fullscreen keymap
        if event.key == 'a':
            self.request_update(fit=True)
