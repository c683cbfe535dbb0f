#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Container class for the optical configuration of a holographic display

    :class:`~.OpticalParameters` is an immutable snapshot of the display and
    object geometry. All lengths are in millimeters and angles in radians;
    :meth:`~.OpticalParameters.from_user_units` converts from the units used
    on the input form (pitch in um, wavelength in nm or a spectral line, angle
    in degrees or radians).

    The two projection planes are identified by the strings 'XZ' and 'YZ'.
    The plane selects which world axis is the transverse (screen vertical)
    axis; the illumination tilt is defined in the YZ plane only.

.. Created on Sat Oct 10 11:34:50 2026

.. codeauthor: Michael J. Hayford
"""

import math
from collections import namedtuple

import attr

from holoview.typing import Plane, AngleUnit
from holoview.raytr.traceerror import ParameterError
from holoview.util.spectral_lines import get_wavelength

PLANES: tuple[Plane, ...] = ('XZ', 'YZ')

transverse_index = {'XZ': 0, 'YZ': 1}
transverse_labels = {'XZ': 'X (mm)', 'YZ': 'Y (mm)'}

um_to_mm = 1e-3
nm_to_mm = 1e-6

# defaults of the input form, in user units
DEFAULT_USER_PARAMS = {
    'res_x': 1920,
    'res_y': 1080,
    'pitch_um': 8.0,
    'wavelength': 532.0,
    'light_angle': 0.0,
    'angle_unit': 'deg',
    'obj_center': (0., 0., 50.),
    'obj_corner': (5., 5., 60.),
    }


def check_plane(plane):
    if plane not in transverse_index:
        raise ParameterError(f"unknown plane {plane!r}, expected 'XZ' or 'YZ'",
                             name='plane', value=plane)
    return plane


def _vec3(v):
    try:
        vec = tuple(float(c) for c in v)
    except TypeError:
        raise ParameterError(f"expected an (x, y, z) point, got {v!r}",
                             value=v)
    if len(vec) != 3:
        raise ParameterError(f"expected an (x, y, z) point, got {v!r}",
                             value=v)
    return vec


class ObjectBox(namedtuple('ObjectBox', ['z_min', 'z_max', 't_min', 't_max'])):
    """ Axis aligned bounding box of the object in one plane

    Attributes:
        z_min: near side of the box along z
        z_max: far side of the box along z
        t_min: lower side of the box along the transverse axis
        t_max: upper side of the box along the transverse axis
    """
    __slots__ = ()

    @classmethod
    def from_center_corner(cls, center, corner):
        """ Build the box from a (z, t) center and any (z, t) corner. """
        cz, ct = center
        dz = abs(corner[0] - cz)
        dt = abs(corner[1] - ct)
        return cls(cz - dz, cz + dz, ct - dt, ct + dt)

    @property
    def center(self):
        return (self.z_min + self.z_max)/2, (self.t_min + self.t_max)/2

    @property
    def half_extents(self):
        return (self.z_max - self.z_min)/2, (self.t_max - self.t_min)/2

    def corners(self):
        """ The 4 corners, counterclockwise from (z_min, t_min). """
        return [(self.z_min, self.t_min), (self.z_max, self.t_min),
                (self.z_max, self.t_max), (self.z_min, self.t_max)]


@attr.s(frozen=True)
class OpticalParameters:
    """ Snapshot of the optical/geometric configuration for one render

    Attributes:
        res_x: number of hologram samples along x
        res_y: number of hologram samples along y
        pitch: sample spacing, mm
        wavelength: illumination wavelength, mm
        light_angle: illumination tilt in the YZ plane, radians
        obj_center: (x, y, z) center of the object, mm
        obj_corner: (x, y, z) of any corner of the object box, mm
    """
    res_x: float = attr.ib(converter=float)
    res_y: float = attr.ib(converter=float)
    pitch: float = attr.ib(converter=float)
    wavelength: float = attr.ib(converter=float)
    light_angle: float = attr.ib(default=0., converter=float)
    obj_center: tuple = attr.ib(default=(0., 0., 0.), converter=_vec3)
    obj_corner: tuple = attr.ib(default=(0., 0., 0.), converter=_vec3)

    @classmethod
    def from_user_units(cls, res_x, res_y, pitch_um, wavelength,
                        light_angle=0., angle_unit: AngleUnit = 'deg',
                        obj_center=(0., 0., 0.), obj_corner=(0., 0., 0.)):
        """ Create an instance from input form units.

        Args:
            res_x, res_y: hologram resolution, samples
            pitch_um: sample pitch, micrometers
            wavelength: wavelength in nm or a spectral line, e.g. 'He-Ne'
            light_angle: illumination angle in `angle_unit`
            angle_unit: 'deg' or 'rad'
            obj_center: (x, y, z) object center, mm
            obj_corner: (x, y, z) object corner, mm

        Raises:
            ParameterError: for an unknown spectral line or angle unit
        """
        try:
            wvl_nm = get_wavelength(wavelength)
        except KeyError:
            raise ParameterError(f"unknown spectral line {wavelength!r}",
                                 name='wavelength', value=wavelength)
        if angle_unit == 'deg':
            angle = math.radians(float(light_angle))
        elif angle_unit == 'rad':
            angle = float(light_angle)
        else:
            raise ParameterError(f"unknown angle unit {angle_unit!r}",
                                 name='angle_unit', value=angle_unit)
        return cls(res_x=res_x, res_y=res_y,
                   pitch=float(pitch_um)*um_to_mm,
                   wavelength=wvl_nm*nm_to_mm,
                   light_angle=angle,
                   obj_center=obj_center, obj_corner=obj_corner)

    def to_user_units(self, angle_unit: AngleUnit = 'deg'):
        """ Returns a dict of input form values, see DEFAULT_USER_PARAMS. """
        if angle_unit == 'deg':
            angle = math.degrees(self.light_angle)
        elif angle_unit == 'rad':
            angle = self.light_angle
        else:
            raise ParameterError(f"unknown angle unit {angle_unit!r}",
                                 name='angle_unit', value=angle_unit)
        return {'res_x': self.res_x,
                'res_y': self.res_y,
                'pitch_um': self.pitch/um_to_mm,
                'wavelength': self.wavelength/nm_to_mm,
                'light_angle': angle,
                'angle_unit': angle_unit,
                'obj_center': self.obj_center,
                'obj_corner': self.obj_corner,
                }

    def validate(self):
        """ Raise ParameterError unless every value is usable, return self. """
        for name in ('res_x', 'res_y', 'pitch', 'wavelength'):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0.):
                raise ParameterError(f"{name} must be finite and > 0, "
                                     f"got {value}", name=name, value=value)
        for name in ('light_angle',):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ParameterError(f"{name} must be finite, got {value}",
                                     name=name, value=value)
        for name in ('obj_center', 'obj_corner'):
            value = getattr(self, name)
            if not all(math.isfinite(c) for c in value):
                raise ParameterError(f"{name} must be finite, got {value}",
                                     name=name, value=value)
        return self

    def listobj_str(self):
        o_str = (f"resolution: {self.res_x:g} x {self.res_y:g}, "
                 f"pitch: {self.pitch/um_to_mm:g} um, "
                 f"wavelength: {self.wavelength/nm_to_mm:g} nm\n"
                 f"light angle: {math.degrees(self.light_angle):g} deg\n"
                 f"object center: {self.obj_center}, "
                 f"corner: {self.obj_corner}\n")
        for plane in PLANES:
            o_str += (f"{plane} hologram width: "
                      f"{self.hologram_width(plane):.4f} mm\n")
        return o_str

    def resolution(self, plane: Plane) -> float:
        return self.res_x if check_plane(plane) == 'XZ' else self.res_y

    def hologram_width(self, plane: Plane) -> float:
        """ Aperture width, resolution x pitch, in the given plane. """
        return self.resolution(plane) * self.pitch

    def illumination_angle(self, plane: Plane) -> float:
        """ The XZ plane sees the illumination head-on. """
        return self.light_angle if check_plane(plane) == 'YZ' else 0.

    def object_center(self, plane: Plane):
        """ (z, t) of the object center in the plane. """
        i = transverse_index[check_plane(plane)]
        return self.obj_center[2], self.obj_center[i]

    def object_corner(self, plane: Plane):
        """ (z, t) of the object corner in the plane. """
        i = transverse_index[check_plane(plane)]
        return self.obj_corner[2], self.obj_corner[i]

    def object_box(self, plane: Plane) -> ObjectBox:
        return ObjectBox.from_center_corner(self.object_center(plane),
                                            self.object_corner(plane))
