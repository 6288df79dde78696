#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Routes the *XML* elements of an *AMF* document into their section records.

The *expat* parser is fed line by line and its callbacks are forwarded to an
:class:`AMFElementRouter` which classifies every element into at most one
active section: clip identification, input transform, output transform or
look transform.
"""

import os
from xml.parsers import expat

from amf_ocio.exceptions import (AMFCharacterDataError, AMFError,
                                 AMFParsingError)
from amf_ocio.sections import (
    AMF_TAG_CLIPID, AMF_TAG_CDLCCR, AMF_TAG_INPUT_TRANSFORM, AMF_TAG_IODT,
    AMF_TAG_IRRT, AMF_TAG_LOOK_TRANSFORM, AMF_TAG_ODT,
    AMF_TAG_OUTPUT_TRANSFORM, AMF_TAG_PIPELINE, AMF_TAG_RRT,
    AMF_TAG_WORKING_LOCATION, AMFLook, AMFSection, AMFTransformSection,
    local_name)

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = ['ParseContext', 'AMFElementRouter', 'parse_amf_lines', 'parse_amf']


class ParseContext:
    """
    State of a single *AMF* compilation: the section records and the router
    state machine.

    Parameters
    ----------
    amf_file_path : str or unicode, optional
        Path of the *AMF* document.
    """

    def __init__(self, amf_file_path=''):
        self.amf_file_path = amf_file_path
        self.line_number = 0

        self.clip_id = AMFSection(AMF_TAG_CLIPID)
        self.input = AMFTransformSection(AMF_TAG_INPUT_TRANSFORM,
                                         (AMF_TAG_IODT, AMF_TAG_IRRT))
        self.output = AMFTransformSection(AMF_TAG_OUTPUT_TRANSFORM,
                                          (AMF_TAG_ODT, AMF_TAG_RRT))
        self.looks = []

        self.inside_pipeline = False
        # Depth of the unclassified elements open below the pipeline root.
        self.pipeline_depth = 0
        self.section = None
        self.element_stack = []
        self.text = []

        # Count of looks preceding the working location marker, *None* until
        # the marker is seen.
        self.looks_before_working_location = None

    @property
    def amf_directory(self):
        return os.path.dirname(os.path.abspath(self.amf_file_path))

    @property
    def current_element(self):
        """
        Path, relative to the active section root, of the element currently
        accepting character data.
        """

        if self.element_stack:
            return '/'.join(self.element_stack)


class AMFElementRouter:
    """
    Push based state machine classifying the start tag, end tag and character
    data notifications of an *XML* tokenizer.

    Parameters
    ----------
    context : ParseContext
        Compilation state receiving the captured sections.
    """

    def __init__(self, context):
        self.context = context

    def error(self, exception_class, message):
        return exception_class(message, self.context.line_number)

    def validate_tag(self, tag):
        if not tag:
            raise self.error(AMFParsingError,
                             'Internal parsing error: empty element name')

        return local_name(tag)

    def on_start(self, tag, attributes):
        """
        Handles given start tag.

        Parameters
        ----------
        tag : str or unicode
            Qualified element name.
        attributes : array_like
            *(name, value)* attribute pairs.
        """

        name = self.validate_tag(tag)
        context = self.context

        if context.section is not None:
            self.start_section_element(name, attributes)
            return

        if name == AMF_TAG_CLIPID:
            context.section = context.clip_id
        elif name == AMF_TAG_PIPELINE:
            context.inside_pipeline = True
            context.pipeline_depth = 0
            return
        elif not context.inside_pipeline:
            return
        elif name == AMF_TAG_INPUT_TRANSFORM:
            context.section = context.input
        elif name == AMF_TAG_OUTPUT_TRANSFORM:
            context.section = context.output
        elif name == AMF_TAG_LOOK_TRANSFORM:
            look = AMFLook(len(context.looks) + 1, attributes)
            context.looks.append(look)
            context.section = look
            return
        else:
            if (name == AMF_TAG_WORKING_LOCATION
                    and not context.pipeline_depth
                    and context.looks_before_working_location is None):
                context.looks_before_working_location = len(context.looks)
            context.pipeline_depth += 1
            return

        context.section.present = True
        for attribute_name, value in attributes:
            context.section.add_attribute(attribute_name, value)

    def start_section_element(self, name, attributes):
        context = self.context
        section = context.section

        if (isinstance(section, AMFTransformSection)
                and name in section.nested_tags):
            section.push_nested(name)

        context.element_stack.append(name)
        context.text = []

        if name == AMF_TAG_CDLCCR:
            for attribute_name, value in attributes:
                if local_name(attribute_name) == 'ref' and value:
                    section.add_element(context.current_element, value)

    def on_end(self, tag):
        """
        Handles given end tag.

        Parameters
        ----------
        tag : str or unicode
            Qualified element name.
        """

        name = self.validate_tag(tag)
        context = self.context
        section = context.section

        if section is None:
            if name == AMF_TAG_PIPELINE and not context.pipeline_depth:
                context.inside_pipeline = False
            elif context.inside_pipeline and context.pipeline_depth:
                context.pipeline_depth -= 1
            return

        if not context.element_stack:
            if name == section.tag:
                context.section = None
                context.text = []
            return

        if context.element_stack[-1] == name:
            value = ''.join(context.text).strip()
            if value:
                section.add_element(context.current_element, value)

            context.element_stack.pop()
            context.text = []

            if (isinstance(section, AMFTransformSection)
                    and name in section.nested_tags and section.nested):
                section.pop_nested()

    def on_text(self, data):
        """
        Handles given character data.

        Parameters
        ----------
        data : str or unicode
            Character data.
        """

        if not data:
            raise self.error(AMFCharacterDataError,
                             'XML parsing error: attribute illegal')

        # Line feeding artifact, only kept as a separator.
        if data == '\n':
            data = ' '

        if self.context.section is not None and self.context.element_stack:
            self.context.text.append(data)


def parse_amf_lines(lines, amf_file_path=''):
    """
    Parses given *AMF* document lines.

    Parameters
    ----------
    lines : array_like
        Document lines, as bytes or unicode, without their line terminator.
    amf_file_path : str or unicode, optional
        Path of the *AMF* document, used to resolve relative file references
        and as the clip identifier of last resort.

    Returns
    -------
    ParseContext
         Populated compilation state.
    """

    context = ParseContext(amf_file_path)
    router = AMFElementRouter(context)

    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    parser.StartElementHandler = (lambda tag, attributes: router.on_start(
        tag, list(zip(attributes[0::2], attributes[1::2]))))
    parser.EndElementHandler = router.on_end
    parser.CharacterDataHandler = router.on_text

    lines = list(lines) or ['']
    for line_number, line in enumerate(lines, 1):
        context.line_number = line_number
        line += b'\n' if isinstance(line, bytes) else '\n'
        try:
            parser.Parse(line, line_number == len(lines))
        except expat.ExpatError as error:
            raise AMFParsingError(
                'XML parsing error: {0}'.format(expat.ErrorString(error.code)),
                line_number)

    return context


def parse_amf(amf_file_path):
    """
    Parses given *AMF* file.

    Parameters
    ----------
    amf_file_path : str or unicode
        Path of the *AMF* document.

    Returns
    -------
    ParseContext
         Populated compilation state.
    """

    try:
        with open(amf_file_path, 'rb') as fp:
            lines = fp.read().splitlines()
    except (IOError, OSError) as error:
        raise AMFError('Cannot read AMF file "{0}": {1}'.format(
            amf_file_path, error))

    return parse_amf_lines(lines, amf_file_path)
