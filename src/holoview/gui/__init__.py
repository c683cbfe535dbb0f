""" Package encompassing the platform agnostic part of the plane views

    The :mod:`~.gui` subpackage provides:

        - per plane pan/zoom state and the world <-> screen mapping,
          :mod:`~.viewtransform`
        - the adaptive "nice number" grid and axes, :mod:`~.grid`
        - drawing of the hologram, object and rays, :mod:`~.scene`
        - the canvas-like drawing surface and its display list,
          :mod:`~.surface`
        - coalescing of redraw requests, :mod:`~.scheduler`

"""
