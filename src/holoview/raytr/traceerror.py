#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Support for parameter and safety calculation exception handling

.. Created on Sat Oct 10 11:20:07 2026

.. codeauthor: Michael J. Hayford
"""


class HoloViewError(Exception):
    """ Base class for exceptions raised by holoview """


class ParameterError(HoloViewError, ValueError):
    """ Exception raised for invalid or unconvertible optical parameters """
    def __init__(self, msg, name=None, value=None):
        super().__init__(msg)
        self.name = name
        self.value = value


class SafetyCalcError(HoloViewError):
    """ Exception raised when the safety margin can't be evaluated

    Typically raised when malformed input yields a NaN crossing.
    """
    def __init__(self, msg, plane=None, z=None):
        super().__init__(msg)
        self.plane = plane
        self.z = z
