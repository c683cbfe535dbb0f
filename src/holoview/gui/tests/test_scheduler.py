#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for render request coalescing

.. Created on Thu Oct 15 16:05:19 2026

.. codeauthor: Michael J. Hayford
"""

from holoview.gui.scheduler import RenderScheduler


class Recorder:
    def __init__(self):
        self.renders = []
        self.scheduled = []

    def render(self, fit=False):
        self.renders.append(fit)

    def schedule(self, callback):
        self.scheduled.append(callback)


def test_requests_coalesce():
    rec = Recorder()
    scheduler = RenderScheduler(rec.render, rec.schedule)
    assert scheduler.request()
    assert not scheduler.request()
    assert not scheduler.request()
    assert scheduler.is_pending
    assert len(rec.scheduled) == 1

    rec.scheduled[0]()
    assert rec.renders == [False]
    assert not scheduler.is_pending
    assert scheduler.render_count == 1

    assert scheduler.request()
    assert len(rec.scheduled) == 2


def test_fit_is_sticky():
    rec = Recorder()
    scheduler = RenderScheduler(rec.render)
    scheduler.request()
    scheduler.request(fit=True)
    scheduler.request()
    assert scheduler.fit_pending
    assert scheduler.flush()
    assert rec.renders == [True]
    assert not scheduler.fit_pending

    scheduler.request()
    scheduler.flush()
    assert rec.renders == [True, False]


def test_flush_without_request():
    rec = Recorder()
    scheduler = RenderScheduler(rec.render)
    assert not scheduler.flush()
    assert rec.renders == []


def test_request_from_inside_render():
    calls = []

    def render(fit=False):
        calls.append(fit)
        if len(calls) == 1:
            # state changed mid render; a follow up render is scheduled
            assert scheduler.request()

    scheduler = RenderScheduler(render)
    scheduler.request()
    scheduler.flush()
    assert scheduler.is_pending
    scheduler.flush()
    assert calls == [False, False]
