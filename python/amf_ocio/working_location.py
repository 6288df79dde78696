#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Resolves the *AMF* working location into the named transform converting the
clip media to the working space.
"""

from amf_ocio.assembler import ACES
from amf_ocio.utilities import create_ocio_named_transform

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = [
    'working_location_direction', 'working_location_transforms',
    'process_working_location'
]


def working_location_direction(output_applied, looks_applied, looks_before):
    """
    Returns the direction of the conversion from the clip media to the working
    location.

    Parameters
    ----------
    output_applied : bool
        Whether the output transform is baked in the clip media.
    looks_applied : int
        Count of looks baked in the clip media.
    looks_before : int
        Count of looks preceding the working location marker.

    Returns
    -------
    unicode
         *forward* or *backward*.

    Examples
    --------
    >>> working_location_direction(False, 1, 1)
    'forward'
    >>> working_location_direction(False, 2, 1)
    'backward'
    """

    if output_applied:
        return 'backward'

    if looks_applied > looks_before:
        return 'backward'

    return 'forward'


def working_location_transforms(assembler, direction):
    """
    Returns the transform descriptions converting the clip media to the
    working location.

    Parameters
    ----------
    assembler : AMFConfigAssembler
        Assembler having processed the input, look and output transforms.
    direction : str or unicode
        *forward* or *backward*.

    Returns
    -------
    list
         Transform descriptions, never empty.
    """

    context = assembler.context
    looks_before = context.looks_before_working_location

    transforms = []
    if direction == 'forward':
        if (assembler.input_colorspace_name
                and assembler.input_colorspace_name != ACES):
            transforms.append({
                'type': 'colorspace',
                'src': assembler.input_colorspace_name,
                'dst': ACES,
                'data_bypass': True,
                'direction': 'forward'
            })

        for look, look_name in assembler.looks:
            if not look.applied and look.index <= looks_before:
                transforms.append({
                    'type': 'look',
                    'look': look_name,
                    'src': ACES,
                    'dst': ACES,
                    'direction': 'forward'
                })
    else:
        if (context.output.is_applied() and assembler.active_display
                and assembler.active_view):
            transforms.append({
                'type': 'displayView',
                'src': ACES,
                'display': assembler.active_display,
                'view': assembler.active_view,
                'looks_bypass': True,
                'direction': 'inverse'
            })

        for look, look_name in reversed(assembler.looks):
            if look.applied and look.index <= looks_before:
                transforms.append({
                    'type': 'look',
                    'look': look_name,
                    'src': ACES,
                    'dst': ACES,
                    'direction': 'inverse'
                })

    if not transforms:
        transforms.append({'type': 'matrix'})

    return transforms


def process_working_location(assembler):
    """
    Adds the named transform converting the clip media to the working
    location when the *AMF* declares one.

    Parameters
    ----------
    assembler : AMFConfigAssembler
        Assembler having processed the input, look and output transforms.

    Returns
    -------
    unicode
         Named transform name or *None* without working location marker.
    """

    context = assembler.context
    if context.looks_before_working_location is None:
        return None

    direction = working_location_direction(
        context.output.is_applied(), assembler.info.num_looks_applied,
        context.looks_before_working_location)

    name = 'AMF Clip to Working Space Transform -- {0}'.format(
        assembler.clip_name)

    assembler.log('Adding {0} named transform {1}'.format(direction, name))

    assembler.config.addNamedTransform(
        create_ocio_named_transform(
            name,
            working_location_transforms(assembler, direction),
            family=assembler.family,
            description=''))

    assembler.info.working_location_transform_name = name

    return name
