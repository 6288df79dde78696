#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Assembles the *OCIO* config graph described by the captured *AMF* sections:
colorspaces, looks, displays and views, and named transforms.
"""

import os

import PyOpenColorIO as ocio

from amf_ocio.exceptions import (
    AMFCharacterDataError, AMFInputTransformError, AMFMissingFileError,
    AMFReferenceColorSpaceError)
from amf_ocio.reference import (search_colorspaces, search_looks,
                                search_view_transforms)
from amf_ocio.sections import (
    AMF_SAT_TAGS, AMF_SOP_TAGS, AMF_TAG_CDLCCR, AMF_TAG_CLIPNAME,
    AMF_TAG_DESC, AMF_TAG_FILE, AMF_TAG_FROMCDLWS, AMF_TAG_IODT, AMF_TAG_IRRT,
    AMF_TAG_ODT, AMF_TAG_OFFSET, AMF_TAG_POWER, AMF_TAG_RRT, AMF_TAG_SAT,
    AMF_TAG_SLOPE, AMF_TAG_TOCDLWS, AMF_TAG_TRANSFORMID, AMF_TAG_UUID)
from amf_ocio.utilities import (create_ocio_colorspace,
                                create_ocio_named_transform,
                                create_ocio_transform, extract_floats,
                                resolve_lut_path, sanitize)

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = [
    'ACES', 'ACES_LOOK_NAME', 'CONTEXT_NAME', 'RAW', 'CIE_XYZ_D65',
    'USE_DISPLAY_NAME', 'CAMERA_MAPPING', 'set_config_roles', 'AMFInfo',
    'AMFConfigAssembler'
]

ACES = 'ACES2065-1'

ACES_LOOK_NAME = 'ACES Look Transform'
CONTEXT_NAME = 'SHOT_LOOKS'

RAW = 'Raw'
CIE_XYZ_D65 = 'CIE-XYZ-D65'

USE_DISPLAY_NAME = '<USE_DISPLAY_NAME>'

# Log camera colorspaces of the *ACES* studio config mapped to their
# linearised camera colorspace.
CAMERA_MAPPING = {
    'ARRI LogC3 (EI800)': 'Linear ARRI Wide Gamut 3',
    'ARRI LogC4': 'Linear ARRI Wide Gamut 4',
    'BMDFilm WideGamut Gen5': 'Linear BMD WideGamut Gen5',
    'CanonLog2 CinemaGamut D55': 'Linear CinemaGamut D55',
    'CanonLog3 CinemaGamut D55': 'Linear CinemaGamut D55',
    'V-Log V-Gamut': 'Linear V-Gamut',
    'Log3G10 REDWideGamutRGB': 'Linear REDWideGamutRGB',
    'S-Log3 S-Gamut3': 'Linear S-Gamut3',
    'S-Log3 S-Gamut3.Cine': 'Linear S-Gamut3.Cine',
    'S-Log3 Venice S-Gamut3': 'Linear Venice S-Gamut3',
    'S-Log3 Venice S-Gamut3.Cine': 'Linear Venice S-Gamut3.Cine'
}


def set_config_roles(config,
                     color_timing=None,
                     compositing_log=None,
                     default=None,
                     scene_linear=None,
                     aces_interchange=None,
                     cie_xyz_d65_interchange=None):
    """
    Sets given *OCIO* configuration roles to the config.

    Parameters
    ----------
    config : Config
        *OCIO* configuration.
    color_timing : str or unicode, optional
        Color Timing role title.
    compositing_log : str or unicode, optional
        Compositing Log role title.
    default : str or unicode, optional
        Default role title.
    scene_linear : str or unicode, optional
        Scene Linear role title.
    aces_interchange : str or unicode, optional
        Scene-referred interchange role title.
    cie_xyz_d65_interchange : str or unicode, optional
        Display-referred interchange role title.

    Returns
    -------
    bool
         Definition success.
    """

    if color_timing is not None:
        config.setRole('color_timing', color_timing)
    if compositing_log is not None:
        config.setRole('compositing_log', compositing_log)
    if default is not None:
        config.setRole('default', default)
    if scene_linear is not None:
        config.setRole('scene_linear', scene_linear)
    if aces_interchange is not None:
        config.setRole('aces_interchange', aces_interchange)
    if cie_xyz_d65_interchange is not None:
        config.setRole('cie_xyz_d65_interchange', cie_xyz_d65_interchange)

    return True


class AMFInfo:
    """
    Summary of an *AMF* compilation handed back with the *OCIO* config.
    """

    def __init__(self):
        self.clip_identifier = ''
        self.input_colorspace_name = ''
        self.clip_colorspace_name = ''
        self.display_name = ''
        self.view_name = ''
        self.num_looks_applied = 0
        self.working_location_transform_name = None

    def __repr__(self):
        return ('AMFInfo(clip_identifier={0!r}, input_colorspace_name={1!r}, '
                'clip_colorspace_name={2!r}, display_name={3!r}, '
                'view_name={4!r}, num_looks_applied={5!r})').format(
                    self.clip_identifier, self.input_colorspace_name,
                    self.clip_colorspace_name, self.display_name,
                    self.view_name, self.num_looks_applied)


class AMFConfigAssembler:
    """
    Builds the *OCIO* config of a single *AMF* compilation from its captured
    sections.

    The processing order is fixed: :meth:`initialize_config`,
    :meth:`process_clip_id`, :meth:`process_input_transform`,
    :meth:`process_look_transforms`, :meth:`process_output_transform` then
    :meth:`finalize_config`.

    Parameters
    ----------
    context : ParseContext
        Populated compilation state.
    reference_config : Config
        Reference *OCIO* config, only queried.
    echo : bool, optional
        Whether to print the assembly progress.
    """

    def __init__(self, context, reference_config, echo=False):
        self.context = context
        self.reference_config = reference_config
        self.echo = echo

        self.config = None
        self.info = AMFInfo()
        self.clip_name = ''

        self.input_colorspace_name = None
        self.display_colorspace_name = None
        self.active_display = None
        self.active_view = None
        self.displays = []
        self.inactive_colorspaces = []

        # *(AMFLook, look name)* of the looks registered in the config, in
        # document order.
        self.looks = []

    @property
    def family(self):
        return 'AMF/{0}'.format(self.clip_name)

    def log(self, message):
        if self.echo:
            print(message)

    def error(self, exception_class, message):
        return exception_class(message, self.context.line_number)

    def initialize_config(self):
        """
        Creates the *OCIO* config with the reference colorspaces, roles, file
        rules and the *ACES Look Transform* look every view refers to.

        Returns
        -------
        Config
             *OCIO* config.
        """

        if self.reference_config.getColorSpace(ACES) is None:
            raise self.error(AMFReferenceColorSpaceError,
                             'Reference config is missing ACES color space')

        self.log('Initialising the config')

        self.config = ocio.Config()
        self.config.setVersion(2, 3)

        scene_linear = self.add_reference_colorspace('ACEScg')
        color_timing = self.add_reference_colorspace('ACEScct')
        self.add_reference_colorspace(ACES)

        if self.add_reference_colorspace(RAW) is None:
            self.config.addColorSpace(
                create_ocio_colorspace(
                    RAW,
                    family='Utility',
                    description='The utility "Raw" colorspace.',
                    is_data=True))

        set_config_roles(
            self.config,
            color_timing=color_timing,
            compositing_log=color_timing,
            scene_linear=scene_linear,
            aces_interchange=ACES)

        rules = ocio.FileRules()
        rules.setDefaultRuleColorSpace(ACES)
        self.config.setFileRules(rules)

        look = ocio.Look()
        look.setName(ACES_LOOK_NAME)
        look.setProcessSpace(ACES)
        look.setTransform(
            create_ocio_transform([{
                'type': 'colorspace',
                'src': ACES,
                'dst': '${0}'.format(CONTEXT_NAME),
                'data_bypass': True,
                'direction': 'forward'
            }]))
        look.setDescription('')
        self.config.addLook(look)

        self.config.addEnvironmentVar(CONTEXT_NAME, ACES)
        self.config.setSearchPath('.')

        return self.config

    def add_reference_colorspace(self, name):
        """
        Copies given reference colorspace into the config.

        Parameters
        ----------
        name : str or unicode
            Reference colorspace name.

        Returns
        -------
        str or unicode
             Colorspace name or *None* if the reference does not define it.
        """

        colorspace = self.reference_config.getColorSpace(name)
        if colorspace is None:
            return None

        self.config.addColorSpace(colorspace)

        return colorspace.getName()

    def add_display_interchange(self):
        if self.config.getColorSpace(CIE_XYZ_D65) is not None:
            return

        if self.add_reference_colorspace(CIE_XYZ_D65) is not None:
            set_config_roles(
                self.config, cie_xyz_d65_interchange=CIE_XYZ_D65)

    def add_inactive_colorspace(self, name):
        if name not in self.inactive_colorspaces:
            self.inactive_colorspaces.append(name)

    def register_display(self, display):
        if display not in self.displays:
            self.displays.append(display)

    def activate_display_view(self, display, view):
        self.log('Activating display "{0}", view "{1}"'.format(display, view))

        self.config.setActiveDisplays(display)
        self.config.setActiveViews(view)
        self.active_display = display
        self.active_view = view

    def check_lut_path(self, lut_path):
        """
        Returns the existing path of given *LUT* file.

        Raises
        ------
        AMFMissingFileError
            If the file exists neither as given nor relatively to the *AMF*
            document directory.
        """

        path = resolve_lut_path(lut_path, self.context.amf_directory)
        if path is None:
            raise self.error(AMFMissingFileError,
                             'Invalid LUT Path: {0}'.format(lut_path))

        return path

    def process_clip_id(self):
        """
        Determines the clip name: *clipName*, then *uuid*, then the *AMF* file
        base name.
        """

        clip_id = self.context.clip_id

        clip_name = (clip_id.value(AMF_TAG_CLIPNAME)
                     or clip_id.value(AMF_TAG_UUID))
        if not clip_name:
            clip_name = os.path.splitext(
                os.path.basename(self.context.amf_file_path))[0]

        self.clip_name = clip_name or 'AMF Clip Name'
        self.info.clip_identifier = self.clip_name

        self.log('Clip identifier : {0}'.format(self.clip_name))

        return self.clip_name

    def process_input_transform(self):
        """
        Registers the colorspace of the input transform and records it as the
        clip input colorspace.

        Raises
        ------
        AMFInputTransformError
            If the input transform is present but cannot be resolved.
        """

        section = self.context.input

        if not section.present:
            self.log('No input transform, the clip is assumed to be in '
                     '{0}'.format(ACES))
            self.input_colorspace_name = self.reference_config.getColorSpace(
                ACES).getName()
            self.info.input_colorspace_name = self.input_colorspace_name
            return self.input_colorspace_name

        for name, value in section.top_level_elements:
            if name == AMF_TAG_TRANSFORMID:
                colorspace = search_colorspaces(self.reference_config, value)
                if colorspace is None:
                    self.log('Skipping unresolved input transform : '
                             '{0}'.format(value))
                    continue

                self.log('Adding input colorspace {0}'.format(
                    colorspace.getName()))
                self.config.addColorSpace(colorspace)
                self.input_colorspace_name = colorspace.getName()

                linear_name = CAMERA_MAPPING.get(colorspace.getName())
                if linear_name is not None:
                    self.log('Adding linear camera colorspace {0}'.format(
                        linear_name))
                    self.add_reference_colorspace(linear_name)

            elif name == AMF_TAG_FILE:
                colorspace_name = 'AMF Input Transform -- {0}'.format(
                    self.clip_name)

                self.log('Adding input LUT colorspace {0}'.format(
                    colorspace_name))
                self.config.addColorSpace(
                    create_ocio_colorspace(
                        colorspace_name,
                        family=self.family,
                        categories=['file-io'],
                        to_reference_transforms=[{
                            'type': 'lutFile',
                            'path': self.check_lut_path(value),
                            'direction': 'forward'
                        }]))
                self.input_colorspace_name = colorspace_name

        self.process_device_transforms(section, 'inverse')

        if self.input_colorspace_name is None:
            raise self.error(AMFInputTransformError,
                             'Input transform not found')

        self.info.input_colorspace_name = self.input_colorspace_name

        return self.input_colorspace_name

    def process_output_transform(self):
        """
        Registers the display and view realising the output transform.

        The direct *transformId* takes precedence over the direct *file* which
        takes precedence over the nested output device transform. A *Raw*
        display is registered when the output transform is absent or does not
        yield any display.
        """

        section = self.context.output

        if section.present:
            transform_id = section.top_level_value(AMF_TAG_TRANSFORMID)
            lut = section.top_level_value(AMF_TAG_FILE)

            if (transform_id is not None and self.process_output_transform_id(
                    transform_id, 'forward')):
                pass
            elif lut is not None:
                self.add_device_lut_colorspace(section, lut, None, 'forward')
            else:
                self.process_device_transforms(section, 'forward')

        if not section.present or not self.displays:
            self.add_raw_display()

    def process_output_transform_id(self, transform_id, direction):
        """
        Registers the reference display colorspace and view transform matching
        given output transform identifier.

        In the inverse direction, an input colorspace inverting the display
        and view is also registered.

        Parameters
        ----------
        transform_id : str or unicode
            *ACES* output transform identifier.
        direction : str or unicode
            *forward* or *inverse*.

        Returns
        -------
        bool
             Whether the identifier could be resolved.
        """

        display_colorspace = search_colorspaces(
            self.reference_config, transform_id,
            ocio.SEARCH_REFERENCE_SPACE_DISPLAY)
        view_transform = search_view_transforms(self.reference_config,
                                                transform_id)

        if display_colorspace is None or view_transform is None:
            self.log('Skipping unresolved output transform : {0}'.format(
                transform_id))
            return False

        display = display_colorspace.getName()
        view = view_transform.getName()

        self.log('Adding display "{0}" with shared view "{1}"'.format(
            display, view))

        self.add_display_interchange()
        self.config.addColorSpace(display_colorspace)
        self.config.addViewTransform(view_transform)
        self.config.addSharedView(view, view, USE_DISPLAY_NAME,
                                  ACES_LOOK_NAME, '', '')
        self.config.addDisplaySharedView(display, view)
        self.register_display(display)

        if direction == 'inverse':
            colorspace_name = 'AMF Input Transform -- {0}'.format(
                self.clip_name)

            self.log('Adding inverse output colorspace {0}'.format(
                colorspace_name))
            self.config.addColorSpace(
                create_ocio_colorspace(
                    colorspace_name,
                    family=self.family,
                    categories=['file-io'],
                    to_reference_transforms=[{
                        'type': 'displayView',
                        'src': ACES,
                        'display': display,
                        'view': view,
                        'looks_bypass': True,
                        'direction': 'inverse'
                    }]))
            self.input_colorspace_name = colorspace_name
        else:
            self.activate_display_view(display, view)
            self.display_colorspace_name = display

        return True

    def process_device_transforms(self, section, direction):
        """
        Processes the nested output device transform blocks of given section.

        Each device block is paired with the closest rendering transform
        block: the preceding one in the forward direction, the following one
        in the inverse direction.

        Parameters
        ----------
        section : AMFTransformSection
            Input or output transform section.
        direction : str or unicode
            *forward* for the output transform, *inverse* for the input
            transform.
        """

        if direction == 'inverse':
            device_tag, rendering_tag = AMF_TAG_IODT, AMF_TAG_IRRT
        else:
            device_tag, rendering_tag = AMF_TAG_ODT, AMF_TAG_RRT

        blocks = section.nested_blocks()
        for index, (tag, elements) in enumerate(blocks):
            if tag != device_tag:
                continue

            transform_id = next(
                (value
                 for name, value in elements if name == AMF_TAG_TRANSFORMID),
                None)
            lut = next(
                (value for name, value in elements if name == AMF_TAG_FILE),
                None)

            if (transform_id is not None and self.process_output_transform_id(
                    transform_id, direction)):
                continue

            if lut is None:
                continue

            preceding = blocks[index - 1::-1] if index else []
            following = blocks[index + 1:]
            if direction == 'inverse':
                candidates = list(following) + list(preceding)
            else:
                candidates = list(preceding) + list(following)

            rendering_lut = None
            for candidate_tag, candidate_elements in candidates:
                if candidate_tag != rendering_tag:
                    continue

                rendering_lut = next((value
                                      for name, value in candidate_elements
                                      if name == AMF_TAG_FILE), None)
                break

            self.add_device_lut_colorspace(section, lut, rendering_lut,
                                           direction)

    def add_device_lut_colorspace(self, section, device_lut, rendering_lut,
                                  direction):
        """
        Registers a colorspace chaining the optional rendering transform *LUT*
        and the output device *LUT*, exposes it as a display and view and
        activates them.

        Parameters
        ----------
        section : AMFTransformSection
            Input or output transform section.
        device_lut : str or unicode
            Output device transform *LUT* path.
        rendering_lut : str or unicode
            Reference rendering transform *LUT* path or *None*.
        direction : str or unicode
            *forward* for the output transform, *inverse* for the input
            transform.

        Returns
        -------
        str or unicode
             Colorspace name.
        """

        if direction == 'inverse':
            colorspace_name = 'AMF Input Transform LUT -- {0}'.format(
                self.clip_name)
        else:
            colorspace_name = 'AMF Output Transform LUT -- {0}'.format(
                self.clip_name)

        display = section.description() or colorspace_name

        transforms = []
        if rendering_lut is not None:
            transforms.append({
                'type': 'lutFile',
                'path': self.check_lut_path(rendering_lut),
                'direction': 'forward'
            })
        transforms.append({
            'type': 'lutFile',
            'path': self.check_lut_path(device_lut),
            'direction': 'forward'
        })

        self.log('Adding LUT colorspace {0} for display "{1}"'.format(
            colorspace_name, display))

        if direction == 'inverse':
            colorspace = create_ocio_colorspace(
                colorspace_name,
                family=self.family,
                categories=['file-io'],
                to_reference_transforms=[
                    dict(transform, direction='inverse')
                    for transform in reversed(transforms)
                ])
            self.input_colorspace_name = colorspace_name
        else:
            colorspace = create_ocio_colorspace(
                colorspace_name,
                family=self.family,
                categories=['file-io'],
                from_reference_transforms=transforms)
            self.display_colorspace_name = colorspace_name

        self.config.addColorSpace(colorspace)
        self.config.addDisplayView(display, colorspace_name, colorspace_name,
                                   ACES_LOOK_NAME)
        self.register_display(display)
        self.add_inactive_colorspace(colorspace_name)
        self.activate_display_view(display, colorspace_name)

        return colorspace_name

    def add_raw_display(self):
        self.log('Adding the "{0}" display'.format(RAW))

        self.config.addDisplayView(RAW, RAW, RAW)
        self.register_display(RAW)

        if self.active_display is None:
            self.activate_display_view(RAW, RAW)

    def look_name(self, look):
        """
        Returns the name of given look in the config.

        Parameters
        ----------
        look : AMFLook
            Look record.

        Returns
        -------
        unicode
             Look name, e.g. *AMF Look 2 (Applied) -- A001C003*.
        """

        name = 'AMF Look {0}'.format(look.index)
        if look.applied:
            name += ' (Applied)'

        looks_before = self.context.looks_before_working_location
        if looks_before is not None and look.index <= looks_before:
            name += ' (Before Working Location)'

        return '{0} -- {1}'.format(name, self.clip_name)

    def process_look_transforms(self):
        """
        Registers the looks of the *AMF*, counts the applied ones and adds the
        named transform combining the unapplied ones.

        Returns
        -------
        int
             Count of applied looks.
        """

        self.info.num_looks_applied = 0

        for look in self.context.looks:
            look_name = self.look_name(look)
            if not self.process_look_transform(look, look_name):
                self.log('Skipping unresolved look transform {0}'.format(
                    look.index))
                continue

            self.looks.append((look, look_name))
            if look.applied:
                self.info.num_looks_applied += 1

        unapplied_looks = [{
            'type': 'look',
            'look': look_name,
            'src': ACES,
            'dst': ACES,
            'direction': 'forward'
        } for look, look_name in self.looks if not look.applied]

        if unapplied_looks:
            name = 'AMF Unapplied Look Transforms -- {0}'.format(
                self.clip_name)

            self.log('Adding named transform {0}'.format(name))
            self.config.addNamedTransform(
                create_ocio_named_transform(
                    name, unapplied_looks, family=self.family,
                    description=''))
            self.config.addEnvironmentVar(CONTEXT_NAME, name)

        return self.info.num_looks_applied

    def process_look_transform(self, look, look_name):
        """
        Registers given look, trying in order a reference look matching its
        *transformId*, its *LUT* file and its *ASC CDL* nodes.

        Parameters
        ----------
        look : AMFLook
            Look record.
        look_name : str or unicode
            Look name in the config.

        Returns
        -------
        bool
             Whether the look was registered.
        """

        transform_id = look.value(AMF_TAG_TRANSFORMID)
        if transform_id is not None:
            reference_look = search_looks(self.reference_config, transform_id)
            if reference_look is not None:
                self.log('Adding reference look {0} as {1}'.format(
                    reference_look.getName(), look_name))

                reference_look.setName(look_name)
                process_space = reference_look.getProcessSpace()
                if self.config.getColorSpace(process_space) is None:
                    self.add_reference_colorspace(process_space)

                self.config.addLook(reference_look)
                return True

        lut = look.value(AMF_TAG_FILE)
        if lut is not None:
            description = look.value(AMF_TAG_DESC) or ''
            cccid = look.value(AMF_TAG_CDLCCR) or ''
            if cccid:
                description = '{0} ({1})'.format(description, cccid).strip()

            self.log('Adding LUT look {0}'.format(look_name))

            ocio_look = ocio.Look()
            ocio_look.setName(look_name)
            ocio_look.setProcessSpace(ACES)
            ocio_look.setTransform(
                create_ocio_transform([{
                    'type': 'lutFile',
                    'path': self.check_lut_path(lut),
                    'cccid': cccid,
                    'direction': 'forward'
                }]))
            ocio_look.setDescription(description)

            self.config.addLook(ocio_look)
            return True

        return self.process_cdl_look(look, look_name)

    def process_cdl_look(self, look, look_name):
        """
        Registers given look from its *ASC CDL* nodes, optionally wrapped in
        the conversions to and from the *CDL* working space.

        Returns
        -------
        bool
             Whether the look holds *ASC CDL* values.
        """

        slope = look.value(AMF_TAG_SLOPE, AMF_SOP_TAGS)
        offset = look.value(AMF_TAG_OFFSET, AMF_SOP_TAGS)
        power = look.value(AMF_TAG_POWER, AMF_SOP_TAGS)
        saturation = look.value(AMF_TAG_SAT, AMF_SAT_TAGS)

        if slope is None and offset is None and power is None and (
                saturation is None):
            return False

        try:
            cdl = {
                'type': 'cdl',
                'slope': ([1.0, 1.0, 1.0]
                          if slope is None else extract_floats(slope)),
                'offset': ([0.0, 0.0, 0.0]
                           if offset is None else extract_floats(offset)),
                'power': ([1.0, 1.0, 1.0]
                          if power is None else extract_floats(power)),
                'saturation': (1.0 if saturation is None else
                               extract_floats(saturation, 1)[0]),
                'direction': 'forward'
            }
        except ValueError as error:
            raise self.error(AMFCharacterDataError,
                             'Invalid ASC CDL values: {0}'.format(error))

        to_specified, to_working_space = self.cdl_working_space_transform(
            look, AMF_TAG_TOCDLWS)
        from_specified, from_working_space = (
            self.cdl_working_space_transform(look, AMF_TAG_FROMCDLWS))

        if ((to_specified and to_working_space is None)
                or (from_specified and from_working_space is None)):
            self.log('Skipping look {0}, its CDL working space cannot be '
                     'resolved'.format(look_name))
            return False

        if to_working_space and from_working_space:
            transforms = [to_working_space, cdl, from_working_space]
        elif to_working_space:
            transforms = [
                to_working_space, cdl,
                dict(to_working_space, direction='inverse')
            ]
        elif from_working_space:
            transforms = [
                dict(from_working_space, direction='inverse'), cdl,
                from_working_space
            ]
        else:
            transforms = [cdl]

        self.log('Adding ASC CDL look {0}'.format(look_name))

        ocio_look = ocio.Look()
        ocio_look.setName(look_name)
        ocio_look.setProcessSpace(ACES)
        ocio_look.setTransform(create_ocio_transform(transforms))
        ocio_look.setDescription('ASC CDL')

        self.config.addLook(ocio_look)

        return True

    def cdl_working_space_transform(self, look, tag):
        """
        Returns the forward transform description of the conversion to or
        from the *CDL* working space of given look.

        Parameters
        ----------
        look : AMFLook
            Look record.
        tag : str or unicode
            *tocdlworkingspace* or *fromcdlworkingspace*.

        Returns
        -------
        tuple
             Whether the conversion is specified and its description, *None*
             when unspecified or unresolved.
        """

        transform_id = look.value(AMF_TAG_TRANSFORMID, (tag, ))
        lut = look.value(AMF_TAG_FILE, (tag, ))

        if transform_id is not None:
            colorspace = search_colorspaces(self.reference_config,
                                            transform_id)
            if colorspace is None:
                return True, None

            self.config.addColorSpace(colorspace)
            name = colorspace.getName()

            if tag == AMF_TAG_TOCDLWS:
                src, dst = ACES, name
            else:
                src, dst = name, ACES

            return True, {
                'type': 'colorspace',
                'src': src,
                'dst': dst,
                'direction': 'forward'
            }

        if lut is not None:
            return True, {
                'type': 'lutFile',
                'path': self.check_lut_path(lut),
                'direction': 'forward'
            }

        return False, None

    def determine_clip_colorspace(self):
        """
        Determines the colorspace the clip media is encoded in: the display
        colorspace if the output transform was applied, the input colorspace
        if the input transform still needs to be applied, the *ACES*
        colorspace otherwise.

        Returns
        -------
        unicode
             Clip colorspace name.
        """

        if (self.context.output.is_applied()
                and self.display_colorspace_name is not None):
            clip_colorspace_name = self.display_colorspace_name
        elif not self.context.input.is_applied():
            clip_colorspace_name = self.input_colorspace_name
        else:
            clip_colorspace_name = ACES

        self.info.clip_colorspace_name = clip_colorspace_name

        return clip_colorspace_name

    def finalize_config(self):
        """
        Sets the clip role and the inactive colorspaces, fills the
        :class:`AMFInfo` and validates the config.

        Returns
        -------
        Config
             Validated *OCIO* config.
        """

        clip_colorspace_name = self.determine_clip_colorspace()

        role = 'amf_clip_{0}'.format(sanitize(self.clip_name))
        self.log('Adding role {0} pointing to {1}'.format(
            role, clip_colorspace_name))
        self.config.setRole(role, clip_colorspace_name)

        if self.inactive_colorspaces:
            self.config.setInactiveColorSpaces(', '.join(
                self.inactive_colorspaces))

        self.info.display_name = self.active_display
        self.info.view_name = self.active_view

        self.config.validate()

        return self.config
