""" package implementing the holoview plane views using matplotlib

    The :mod:`~.mpl` subpackage renders the scene display lists with the
    matplotlib plotting package. Particular features include:

        - a drawing surface backed by a matplotlib Axes, :mod:`~.mplsurface`
        - the interactive XZ/YZ figure with pan, zoom and safety readouts,
          :mod:`~.planefigure`
        - base class to manage light and dark UI styles, :mod:`~.styledfigure`
        - the desktop application, :mod:`~.holoviewapp`
"""
