# -*- coding: utf-8 -*-
""" The **holoview** holographic display geometry viewer

    The optical configuration of the display is contained in the
    :mod:`~.optical` subpackage. It is supported by the following
    subpackages:

        - :mod:`~.optical`: :class:`~.OpticalParameters` and parameter files
        - :mod:`~.raytr`: construction of the optical ray families and the
          safety margin calculation at an observation depth

    The :mod:`~.gui` subpackage is a layer that implements the platform
    neutral part of the viewer: the pan/zoom view transform, the adaptive
    grid, the scene drawing against a canvas-like surface and the
    coalescing render scheduler.

    The :mod:`~.mpl` subpackage implements the interactive XZ/YZ views and
    the desktop application using the :doc:`matplotlib <matplotlib:index>`
    package.

    The :mod:`~.util` subpackage provides color palettes, spectral line data
    and miscellaneous math.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where detailed,
    textual output is supported. Classes may implement the `listobj_str`
    method that returns a string containing a formatted description of the
    object, e.g. :meth:`.OpticalParameters.listobj_str` and
    :meth:`.ViewState.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
