#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Loads the reference *OCIO* config and resolves *ACES* transform identifiers
against the descriptions of its colorspaces, view transforms and looks.
"""

import copy
import os

import PyOpenColorIO as ocio

from amf_ocio.exceptions import AMFReferenceVersionError

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = [
    'AMF_OCIO_REFERENCE_CONFIG_ENVIRON', 'REFERENCE_CONFIG_NAME',
    'MINIMUM_OCIO_VERSION', 'load_reference_config', 'search_colorspaces',
    'search_view_transforms', 'search_looks'
]

AMF_OCIO_REFERENCE_CONFIG_ENVIRON = 'AMF_OCIO_REFERENCE_CONFIG'

REFERENCE_CONFIG_NAME = 'studio-config-v2.1.0_aces-v1.3_ocio-v2.3'

MINIMUM_OCIO_VERSION = (2, 3)


def load_reference_config(reference_config=None):
    """
    Loads the reference *OCIO* config.

    Parameters
    ----------
    reference_config : Config or str or unicode, optional
        Loaded config, path to a config file or name of a built-in config.
        Defaults to the *AMF_OCIO_REFERENCE_CONFIG* environment variable
        value, then to the *ACES* studio built-in config.

    Returns
    -------
    Config
         Reference *OCIO* config.

    Raises
    ------
    AMFReferenceVersionError
        If the *OCIO* library or the reference config predates *OCIO* 2.3.
    """

    if ocio.GetVersionHex() < ((MINIMUM_OCIO_VERSION[0] << 24) |
                               (MINIMUM_OCIO_VERSION[1] << 16)):
        raise AMFReferenceVersionError(
            'Requires OCIO library version {0}.{1}.0 or higher, found '
            '{2}'.format(MINIMUM_OCIO_VERSION[0], MINIMUM_OCIO_VERSION[1],
                         ocio.GetVersion()))

    if reference_config is None:
        reference_config = os.environ.get(AMF_OCIO_REFERENCE_CONFIG_ENVIRON,
                                          REFERENCE_CONFIG_NAME)

    if isinstance(reference_config, ocio.Config):
        config = reference_config
    elif os.path.isfile(reference_config):
        config = ocio.Config.CreateFromFile(reference_config)
    else:
        config = ocio.Config.CreateFromBuiltinConfig(reference_config)

    version = (config.getMajorVersion(), config.getMinorVersion())
    if version < MINIMUM_OCIO_VERSION:
        raise AMFReferenceVersionError(
            'Reference config version {0}.{1} is older than the required '
            '{2}.{3}'.format(version[0], version[1], MINIMUM_OCIO_VERSION[0],
                             MINIMUM_OCIO_VERSION[1]))

    return config


def search_colorspaces(config,
                       aces_id,
                       reference_space=ocio.SEARCH_REFERENCE_SPACE_ALL):
    """
    Returns the first colorspace of given config whose description contains
    given *ACES* transform identifier.

    Parameters
    ----------
    config : Config
        Reference *OCIO* config.
    aces_id : str or unicode
        *ACES* transform identifier, e.g.
        *urn:ampas:aces:transformId:v1.5:IDT.Sony.SLog3_SGamut3.a1.v1*.
    reference_space : SearchReferenceSpaceType, optional
        Restricts the search to scene or display referred colorspaces.

    Returns
    -------
    ColorSpace
         Matching colorspace or *None*.
    """

    if not aces_id:
        return None

    for colorspace in config.getColorSpaces(reference_space,
                                            ocio.COLORSPACE_ALL):
        if aces_id in colorspace.getDescription():
            return colorspace


def search_view_transforms(config, aces_id):
    """
    Returns the first view transform of given config whose description
    contains given *ACES* transform identifier.
    """

    if not aces_id:
        return None

    for view_transform in config.getViewTransforms():
        if aces_id in view_transform.getDescription():
            return view_transform


def search_looks(config, aces_id):
    """
    Returns an editable copy of the first look of given config whose
    description contains given *ACES* transform identifier.

    Parameters
    ----------
    config : Config
        Reference *OCIO* config.
    aces_id : str or unicode
        *ACES* transform identifier.

    Returns
    -------
    Look
         Matching look copy or *None*.
    """

    if not aces_id:
        return None

    for look in config.getLooks():
        if aces_id in look.getDescription():
            return copy.deepcopy(look)
