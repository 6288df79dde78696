#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Defines various package utilities objects.
"""

import os
import re

import PyOpenColorIO as ocio

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = [
    'DIRECTION_OPTIONS', 'sanitize', 'resolve_lut_path', 'extract_floats',
    'create_ocio_transform', 'create_ocio_colorspace',
    'create_ocio_named_transform'
]

DIRECTION_OPTIONS = {
    'forward': ocio.TRANSFORM_DIR_FORWARD,
    'inverse': ocio.TRANSFORM_DIR_INVERSE
}


def sanitize(name):
    """
    Replaces every character of given name that is not a letter, a digit or
    an underscore with an underscore.

    Parameters
    ----------
    name : str or unicode
        Name to manipulate.

    Returns
    -------
    unicode
        Manipulated name.

    Examples
    --------
    >>> sanitize('Shot 010 (v2)')
    'Shot_010__v2_'
    """

    return re.sub('[^0-9a-zA-Z_]', '_', name)


def resolve_lut_path(lut_path, amf_directory=None):
    """
    Resolves given *LUT* path, first as given, then relatively to the
    directory of the *AMF* document referencing it.

    Absolute paths are only tried as given.

    Parameters
    ----------
    lut_path : str or unicode
        *LUT* path as written in the *AMF* document.
    amf_directory : str or unicode, optional
        Directory of the *AMF* document.

    Returns
    -------
    str or unicode
         Existing *LUT* path or *None* if the file cannot be found.
    """

    if os.path.isfile(lut_path):
        return lut_path

    if os.path.isabs(lut_path) or not amf_directory:
        return None

    path = os.path.join(amf_directory, lut_path)
    if os.path.isfile(path):
        return path

    return None


def extract_floats(string, count=3):
    """
    Extracts given count of whitespace separated floating point numbers from
    given string.

    Parameters
    ----------
    string : str or unicode
        String to parse, e.g. the content of a *cdl:Slope* element.
    count : int, optional
        Expected count of numbers.

    Returns
    -------
    list of float
         Extracted numbers.

    Raises
    ------
    ValueError
        If the string does not hold exactly the expected count of numbers.
    """

    values = [float(value) for value in string.split()]
    if len(values) != count:
        raise ValueError('Expected {0} values, found {1} in "{2}"'.format(
            count, len(values), string))

    return values


def create_ocio_transform(transforms):
    """
    Returns an *OCIO* transform from given array of transform descriptions.

    Parameters
    ----------
    transforms : array_like
        Transform descriptions as an array_like of dicts:
        {'type', 'src', 'dst', 'direction', ...}

    Returns
    -------
    Transform
         *OCIO* transform, a *GroupTransform* when more than one description
         is given.
    """

    ocio_transforms = []

    for transform in transforms:

        # *lutFile* transform
        if transform['type'] == 'lutFile':
            ocio_transform = ocio.FileTransform()

            if 'path' in transform:
                ocio_transform.setSrc(transform['path'])

            ocio_transform.setCCCId(transform.get('cccid', ''))

            if 'interpolation' in transform:
                ocio_transform.setInterpolation(transform['interpolation'])
            else:
                ocio_transform.setInterpolation(ocio.INTERP_BEST)

        # *matrix* transform, identity unless a matrix is given.
        elif transform['type'] == 'matrix':
            ocio_transform = ocio.MatrixTransform()

            if 'matrix' in transform:
                ocio_transform.setMatrix(transform['matrix'])

            if 'offset' in transform:
                ocio_transform.setOffset(transform['offset'])

        # *colorspace* transform
        elif transform['type'] == 'colorspace':
            ocio_transform = ocio.ColorSpaceTransform()

            if 'src' in transform:
                ocio_transform.setSrc(transform['src'])

            if 'dst' in transform:
                ocio_transform.setDst(transform['dst'])

            if 'data_bypass' in transform:
                ocio_transform.setDataBypass(transform['data_bypass'])

        # *look* transform
        elif transform['type'] == 'look':
            ocio_transform = ocio.LookTransform()
            if 'look' in transform:
                ocio_transform.setLooks(transform['look'])

            if 'src' in transform:
                ocio_transform.setSrc(transform['src'])

            if 'dst' in transform:
                ocio_transform.setDst(transform['dst'])

            ocio_transform.setSkipColorSpaceConversion(
                transform.get('skip_colorspace_conversion', False))

        # *cdl* transform
        elif transform['type'] == 'cdl':
            ocio_transform = ocio.CDLTransform()

            if 'slope' in transform:
                ocio_transform.setSlope(transform['slope'])

            if 'offset' in transform:
                ocio_transform.setOffset(transform['offset'])

            if 'power' in transform:
                ocio_transform.setPower(transform['power'])

            if 'saturation' in transform:
                ocio_transform.setSat(transform['saturation'])

        # *displayView* transform
        elif transform['type'] == 'displayView':
            ocio_transform = ocio.DisplayViewTransform()

            if 'src' in transform:
                ocio_transform.setSrc(transform['src'])

            if 'display' in transform:
                ocio_transform.setDisplay(transform['display'])

            if 'view' in transform:
                ocio_transform.setView(transform['view'])

            ocio_transform.setLooksBypass(transform.get('looks_bypass', False))

        # *unknown* type
        else:
            raise ValueError('Unknown transform type : {0}'.format(
                transform['type']))

        if 'direction' in transform:
            ocio_transform.setDirection(
                DIRECTION_OPTIONS[transform['direction']])

        ocio_transforms.append(ocio_transform)

    if len(ocio_transforms) > 1:
        group_transform = ocio.GroupTransform()
        for transform in ocio_transforms:
            group_transform.appendTransform(transform)
        transform = group_transform
    else:
        transform = ocio_transforms[0]

    return transform


def create_ocio_colorspace(name,
                           family=None,
                           description=None,
                           categories=None,
                           is_data=False,
                           to_reference_transforms=None,
                           from_reference_transforms=None):
    """
    Creates a scene-referred *OCIO* colorspace.

    Parameters
    ----------
    name : str or unicode
        Name of the colorspace.
    family : str or unicode, optional
        Family of the colorspace.
    description : str or unicode, optional
        Description of the colorspace.
    categories : array_like, optional
        Categories of the colorspace, e.g. *file-io*.
    is_data : bool, optional
        Whether the colorspace holds non-color data.
    to_reference_transforms : array_like, optional
        Transform descriptions converting to the reference colorspace.
    from_reference_transforms : array_like, optional
        Transform descriptions converting from the reference colorspace.

    Returns
    -------
    ColorSpace
         *OCIO* colorspace.
    """

    colorspace = ocio.ColorSpace()
    colorspace.setName(name)

    if family is not None:
        colorspace.setFamily(family)

    if description is not None:
        colorspace.setDescription(description)

    for category in categories or []:
        colorspace.addCategory(category)

    colorspace.setIsData(is_data)

    if to_reference_transforms:
        colorspace.setTransform(
            create_ocio_transform(to_reference_transforms),
            ocio.COLORSPACE_DIR_TO_REFERENCE)

    if from_reference_transforms:
        colorspace.setTransform(
            create_ocio_transform(from_reference_transforms),
            ocio.COLORSPACE_DIR_FROM_REFERENCE)

    return colorspace


def create_ocio_named_transform(name,
                                transforms,
                                family=None,
                                description=None):
    """
    Creates an *OCIO* named transform.

    Parameters
    ----------
    name : str or unicode
        Name of the named transform.
    transforms : array_like
        Transform descriptions of the forward direction.
    family : str or unicode, optional
        Family of the named transform.
    description : str or unicode, optional
        Description of the named transform.

    Returns
    -------
    NamedTransform
         *OCIO* named transform.
    """

    named_transform = ocio.NamedTransform()
    named_transform.setName(name)

    if family is not None:
        named_transform.setFamily(family)

    if description is not None:
        named_transform.setDescription(description)

    named_transform.setTransform(
        create_ocio_transform(transforms), ocio.TRANSFORM_DIR_FORWARD)

    return named_transform
