""" Package encompassing the optical configuration of the display

    The ``holoview.optical`` subpackage provides the
    :class:`~.OpticalParameters` snapshot used for one render, the derived
    :class:`~.ObjectBox` and reading/writing of parameter files,
    :mod:`~.paramfile`.
"""
