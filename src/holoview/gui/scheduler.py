#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Coalescing of redraw requests into a single pending render

.. Created on Mon Oct 12 20:14:09 2026

.. codeauthor: Michael J. Hayford
"""
import logging

logger = logging.getLogger(__name__)


class RenderScheduler:
    """ Single slot request queue for renders

    Any number of :meth:`request` calls before the render runs produce one
    render, which uses whatever state is current when it runs. A request for
    a fit is sticky until the render that honors it.

    Attributes:
        render_fct: called as ``render_fct(fit=bool)``
        schedule_fct: called with :meth:`run` to have it invoked later, e.g.
                      on the next idle cycle of the gui. If None, the owner
                      calls :meth:`flush`.
        is_pending: True if a render has been scheduled and not yet run
        fit_pending: True if the next render should fit the views
    """

    def __init__(self, render_fct, schedule_fct=None):
        self.render_fct = render_fct
        self.schedule_fct = schedule_fct
        self.is_pending = False
        self.fit_pending = False
        self.render_count = 0

    def request(self, fit=False) -> bool:
        """ Ask for a render, optionally fitting the views first.

        Returns:
            True if a new render was scheduled, False if one was pending
        """
        if fit:
            self.fit_pending = True
        if self.is_pending:
            return False
        self.is_pending = True
        if self.schedule_fct is not None:
            self.schedule_fct(self.run)
        return True

    def run(self):
        """ Execute the pending render. """
        self.is_pending = False
        fit, self.fit_pending = self.fit_pending, False
        self.render_count += 1
        logger.debug("render %d, fit=%s", self.render_count, fit)
        self.render_fct(fit=fit)

    def flush(self) -> bool:
        """ Run the pending render now, if there is one. """
        if self.is_pending:
            self.run()
            return True
        return False
