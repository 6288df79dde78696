#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
AMF OCIO
========

Usage
-----

Python
******

>>> from amf_ocio.generate_config import create_config_from_amf, write_config
>>> config, info = create_config_from_amf('/path/to/clip.amf')
>>> info.clip_colorspace_name
'S-Log3 S-Gamut3'
>>> write_config(config, '/path/to/clip.ocio')
True

Command Line
************

Using the *create_config_from_amf* binary:

$ create_config_from_amf -i '/path/to/clip.amf' -c '/path/to/clip.ocio'

It is possible to set the following environment variables to avoid passing
the paths to the binary:

- *AMF_OCIO_AMF_FILE*
- *AMF_OCIO_CONFIG_FILE*
- *AMF_OCIO_REFERENCE_CONFIG*

The reference config defaults to the *OCIO* built-in
*studio-config-v2.1.0_aces-v1.3_ocio-v2.3* config.

Testing is done as follows:

$ python -m unittest discover -s python/amf_ocio/tests -p 'tests_*.py'

Build
-----

OpenColorIO
***********

The *OpenColorIO* 2.3 or later Python bindings are required:

$ pip install opencolorio
"""

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__major_version__ = '1'
__minor_version__ = '0'
__change_version__ = '0'
__version__ = '.'.join((__major_version__, __minor_version__,
                        __change_version__))
