#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for holoview

.. Created on Sat Oct 10 09:12:41 2026

.. codeauthor: Michael J. Hayford
"""
from typing import Literal

Plane = Literal['XZ', 'YZ']
RayFamily = Literal['illumination', 'diffraction', 'object']
AngleUnit = Literal['deg', 'rad']

Point2d = tuple[float, float]
Bounds2d = tuple[float, float, float, float]
