#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Defines objects creating the *OCIO* configuration of an *ACES Metadata File*.
"""

import optparse
import os
import sys

from amf_ocio.assembler import AMFConfigAssembler
from amf_ocio.exceptions import AMFError
from amf_ocio.reference import (AMF_OCIO_REFERENCE_CONFIG_ENVIRON,
                                load_reference_config)
from amf_ocio.router import parse_amf
from amf_ocio.working_location import process_working_location

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = [
    'AMF_OCIO_AMF_FILE_ENVIRON', 'AMF_OCIO_CONFIG_FILE_ENVIRON',
    'create_config_from_amf', 'write_config', 'main'
]

AMF_OCIO_AMF_FILE_ENVIRON = 'AMF_OCIO_AMF_FILE'
AMF_OCIO_CONFIG_FILE_ENVIRON = 'AMF_OCIO_CONFIG_FILE'


def create_config_from_amf(amf_file_path, reference_config=None, echo=False):
    """
    Creates the *OCIO* configuration described by given *AMF* file.

    Parameters
    ----------
    amf_file_path : str or unicode
        Path of the *AMF* document.
    reference_config : Config or str or unicode, optional
        Reference config, a loaded config, a config file path or a built-in
        config name, see :func:`amf_ocio.reference.load_reference_config`.
    echo : bool, optional
        Whether to print the assembly progress.

    Returns
    -------
    tuple
         *OCIO* configuration and :class:`amf_ocio.assembler.AMFInfo`.

    Raises
    ------
    AMFError
        If the *AMF* document cannot be compiled.
    """

    reference_config = load_reference_config(reference_config)

    if echo:
        print('Parsing "{0}"'.format(amf_file_path))

    context = parse_amf(amf_file_path)

    assembler = AMFConfigAssembler(context, reference_config, echo)
    assembler.initialize_config()
    assembler.process_clip_id()
    assembler.process_input_transform()
    assembler.process_look_transforms()
    assembler.process_output_transform()
    process_working_location(assembler)
    config = assembler.finalize_config()

    return config, assembler.info


def write_config(config, config_path, sanity_check=True):
    """
    Writes the configuration to given path.

    Parameters
    ----------
    config : Config
        *OCIO* configuration.
    config_path : str or unicode
        Path to write the configuration path.
    sanity_check : bool
        Performs configuration sanity checking prior to writing it on disk.

    Returns
    -------
    bool
         Definition success.
    """

    if sanity_check:
        try:
            config.validate()
        except Exception as error:
            print(error)
            print('Configuration was not written due to a failed Sanity Check')
            return False

    with open(config_path, mode='w') as fp:
        fp.write(config.serialize())

    return True


def main():
    """
    A simple main that allows the user to exercise the various functions
    defined in the module.
    """

    usage = '%prog [options]\n'
    usage += '\n'
    usage += 'An OCIO config generation script for ACES Metadata Files\n'
    usage += '\n'
    usage += 'Command-line examples'
    usage += '\n'
    usage += 'Create the config of an AMF file:\n'
    usage += ('\tcreate_config_from_amf -i /path/to/clip.amf '
              '-c /path/to/clip.ocio')
    usage += '\n'
    usage += 'Create the config against a specific reference config:\n'
    usage += ('\tcreate_config_from_amf -i /path/to/clip.amf '
              '-c /path/to/clip.ocio -r /path/to/reference.ocio')
    usage += '\n'

    p = optparse.OptionParser(
        description='',
        prog='create_config_from_amf',
        version='create_config_from_amf 1.0',
        usage=usage)
    p.add_option(
        '--amfFile',
        '-i',
        default=os.environ.get(AMF_OCIO_AMF_FILE_ENVIRON, None))
    p.add_option(
        '--configFile',
        '-c',
        default=os.environ.get(AMF_OCIO_CONFIG_FILE_ENVIRON, None))
    p.add_option(
        '--referenceConfig',
        '-r',
        default=os.environ.get(AMF_OCIO_REFERENCE_CONFIG_ENVIRON, None))
    p.add_option('--skipSanityCheck', action='store_true', default=False)
    p.add_option('--quiet', '-q', action='store_true', default=False)

    options, arguments = p.parse_args()

    if options.amfFile is None:
        p.error('No "{0}" environment variable defined or no AMF file '
                'specified'.format(AMF_OCIO_AMF_FILE_ENVIRON))

    if options.configFile is None:
        p.error('No "{0}" environment variable defined or no configuration '
                'file specified'.format(AMF_OCIO_CONFIG_FILE_ENVIRON))

    echo = not options.quiet

    if echo:
        print('command line :\n{0}\n'.format(' '.join(sys.argv)))

    try:
        config, info = create_config_from_amf(
            options.amfFile, options.referenceConfig, echo)
    except AMFError as error:
        print(error)
        return 1

    if echo:
        print('\n')
        print('Clip identifier       : {0}'.format(info.clip_identifier))
        print('Input colorspace      : {0}'.format(info.input_colorspace_name))
        print('Clip colorspace       : {0}'.format(info.clip_colorspace_name))
        print('Display               : {0}'.format(info.display_name))
        print('View                  : {0}'.format(info.view_name))
        print('Looks applied         : {0}'.format(info.num_looks_applied))
        if info.working_location_transform_name is not None:
            print('Working location      : {0}'.format(
                info.working_location_transform_name))
        print('\n')

    if not write_config(config, options.configFile,
                        not options.skipSanityCheck):
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
