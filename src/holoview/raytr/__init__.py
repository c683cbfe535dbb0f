""" Package for optical ray construction and safety calculations

    The :mod:`~.raytr` subpackage provides the ray geometry shared by the
    scene drawing and the safety readout. These include:

        - Construction of the illumination, maximum diffraction and
          object-aware ray families, :mod:`~.rays`
        - Nearest ray crossings above and below the axis at an observation
          depth, :mod:`~.safety`
        - Exception classes for reporting parameter and calculation errors,
          :mod:`~.traceerror`

    Rays are infinite lines in (z, transverse) space, t = slope*z + intercept.
"""

from collections import namedtuple

Ray = namedtuple('Ray', ['slope', 'intercept', 'family', 'edge'])
Ray.__doc__ = "A line in (z, t) space, t = slope*z + intercept"
Ray.slope.__doc__ = "dt/dz of the ray"
Ray.intercept.__doc__ = "transverse height of the ray at z=0"
Ray.family.__doc__ = "'illumination' | 'diffraction' | 'object'"
Ray.edge.__doc__ = "hologram edge the ray leaves from, 'top' | 'bottom'"

SafetyResult = namedtuple('SafetyResult', ['dist_plus', 'dist_minus'])
SafetyResult.__doc__ = "Nearest ray crossings above and below the axis"
SafetyResult.dist_plus.__doc__ = "smallest t > 0, or inf if no ray is above"
SafetyResult.dist_minus.__doc__ = "largest t < 0, or inf if no ray is below"
