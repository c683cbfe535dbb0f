""" package supplying utility functions for colors, spectra and math

    The :mod:`~holoview.util` subpackage provides miscellaneous functions
    that don't have an obvious home. These include:

        - miscellaneous math functions, :mod:`~.misc_math`
        - light and dark color palettes for the scene, :mod:`~.colors`
        - spectral line conversion with :func:`~.spectral_lines.get_wavelength`
          in :mod:`~.spectral_lines`
"""
