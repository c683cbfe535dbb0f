#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Read and write holoview parameter (.hvp) files

    A parameter file is a json document holding one
    :class:`~.OpticalParameters` snapshot in internal units (mm and radians)
    and the version of holoview that wrote it. View state (pan and zoom) is
    not saved.

.. Created on Sun Oct 11 16:02:11 2026

.. codeauthor: Michael J. Hayford
"""

import logging
from pathlib import Path

import attr
import json_tricks

import holoview
from holoview.optical.opticalparams import OpticalParameters
from holoview.raytr.traceerror import ParameterError

logger = logging.getLogger(__name__)

PARAM_FILE_SUFFIX = '.hvp'


def params_to_dict(params: OpticalParameters):
    return attr.asdict(params, retain_collection_types=True)


def params_from_dict(attrs) -> OpticalParameters:
    """ Build OpticalParameters from a dict of its fields.

    Raises:
        ParameterError: if `attrs` is not a complete, numeric parameter set
    """
    if not isinstance(attrs, dict):
        raise ParameterError(f"expected a dict of parameters, got {attrs!r}")
    field_names = {a.name for a in attr.fields(OpticalParameters)}
    unknown = set(attrs) - field_names
    if unknown:
        logger.warning("ignoring unknown parameters: %s", sorted(unknown))
    try:
        return OpticalParameters(**{k: v for k, v in attrs.items()
                                    if k in field_names})
    except ParameterError:
        raise
    except TypeError as err:
        raise ParameterError(f"incomplete or malformed parameter set: {err}")
    except ValueError as err:
        raise ParameterError(f"bad parameter value: {err}")


def save_params(params: OpticalParameters, file_name):
    """ save the optical parameters to file_name

    If file_name has no suffix, '.hvp' is appended.

    Returns:
        the Path of the file written
    """
    file_path = Path(file_name)
    if file_path.suffix == '':
        file_path = file_path.with_suffix(PARAM_FILE_SUFFIX)

    doc = {'holoview_version': holoview.__version__,
           'optical_params': params_to_dict(params)}
    with open(file_path, 'w') as f:
        json_tricks.dump(doc, f, indent=1)
    logger.info("saved optical parameters to %s", file_path)
    return file_path


def open_params(file_name) -> OpticalParameters:
    """ open a holoview parameter file and return the OpticalParameters

    Raises:
        ParameterError: if the file is not json or does not hold a valid
                        parameter set
        OSError: if the file can't be read
    """
    try:
        with open(file_name, 'r') as f:
            contents = f.read()
        obj_dict = json_tricks.loads(contents)
    except ValueError as err:
        raise ParameterError(f"{file_name} is not readable as json: {err}")
    if not isinstance(obj_dict, dict) or 'optical_params' not in obj_dict:
        raise ParameterError(f"{file_name} is not a holoview parameter file")

    file_version = obj_dict.get('holoview_version', 'unknown')
    logger.info("reading %s, written by holoview %s", file_name, file_version)
    return params_from_dict(obj_dict['optical_params'])
