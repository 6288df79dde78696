#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Defines the records capturing the structural sections of an *AMF* document:
the clip identification, the input transform, the look transforms and the
output transform.

Element and attribute names are stored as lower cased local names, e.g.
*aces:transformId* is stored as *transformid*. Elements nested below a
section root are stored with their path relative to that root, e.g.
*sopnode/slope*.
"""

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = [
    'AMF_TAG_CLIPID', 'AMF_TAG_CLIPNAME', 'AMF_TAG_UUID', 'AMF_TAG_DESC',
    'AMF_TAG_PIPELINE', 'AMF_TAG_WORKING_LOCATION', 'AMF_TAG_INPUT_TRANSFORM',
    'AMF_TAG_OUTPUT_TRANSFORM', 'AMF_TAG_LOOK_TRANSFORM', 'AMF_TAG_TRANSFORMID',
    'AMF_TAG_FILE', 'AMF_TAG_CDLCCR', 'AMF_TAG_IODT', 'AMF_TAG_IRRT',
    'AMF_TAG_ODT', 'AMF_TAG_RRT', 'AMF_TAG_CDLWS', 'AMF_TAG_TOCDLWS',
    'AMF_TAG_FROMCDLWS', 'AMF_TAG_SOPNODE', 'AMF_TAG_ASCSOP', 'AMF_TAG_SLOPE',
    'AMF_TAG_OFFSET', 'AMF_TAG_POWER', 'AMF_TAG_SATNODE', 'AMF_TAG_ASCSAT',
    'AMF_TAG_SAT', 'AMF_SOP_TAGS', 'AMF_SAT_TAGS', 'local_name', 'AMFSection',
    'AMFTransformSection', 'AMFLook'
]

AMF_TAG_CLIPID = 'clipid'
AMF_TAG_CLIPNAME = 'clipname'
AMF_TAG_UUID = 'uuid'
AMF_TAG_DESC = 'description'

AMF_TAG_PIPELINE = 'pipeline'
AMF_TAG_WORKING_LOCATION = 'workinglocation'

AMF_TAG_INPUT_TRANSFORM = 'inputtransform'
AMF_TAG_OUTPUT_TRANSFORM = 'outputtransform'
AMF_TAG_LOOK_TRANSFORM = 'looktransform'

AMF_TAG_TRANSFORMID = 'transformid'
AMF_TAG_FILE = 'file'
AMF_TAG_CDLCCR = 'colorcorrectionref'

AMF_TAG_IODT = 'inverseoutputdevicetransform'
AMF_TAG_IRRT = 'inversereferencerenderingtransform'
AMF_TAG_ODT = 'outputdevicetransform'
AMF_TAG_RRT = 'referencerenderingtransform'

AMF_TAG_CDLWS = 'cdlworkingspace'
AMF_TAG_TOCDLWS = 'tocdlworkingspace'
AMF_TAG_FROMCDLWS = 'fromcdlworkingspace'
AMF_TAG_SOPNODE = 'sopnode'
AMF_TAG_ASCSOP = 'asc_sop'
AMF_TAG_SLOPE = 'slope'
AMF_TAG_OFFSET = 'offset'
AMF_TAG_POWER = 'power'
AMF_TAG_SATNODE = 'satnode'
AMF_TAG_ASCSAT = 'asc_sat'
AMF_TAG_SAT = 'saturation'

AMF_SOP_TAGS = (AMF_TAG_SOPNODE, AMF_TAG_ASCSOP)
AMF_SAT_TAGS = (AMF_TAG_SATNODE, AMF_TAG_ASCSAT)


def local_name(name):
    """
    Returns the lower cased local part of given qualified *XML* name.

    Parameters
    ----------
    name : str or unicode
        Qualified name, e.g. *aces:transformId*.

    Returns
    -------
    unicode
        Local name, e.g. *transformid*.
    """

    return name.rpartition(':')[2].lower()


class AMFSection:
    """
    Ordered, append-only record of the attributes and sub-elements of an *AMF*
    section.

    Parameters
    ----------
    tag : str or unicode
        Local name of the section root element.
    """

    def __init__(self, tag):
        self.tag = tag
        self.present = False
        self.attributes = []
        self.sub_elements = []

    def add_attribute(self, name, value):
        self.attributes.append((local_name(name), value))

    def add_sub_element(self, path, value):
        self.sub_elements.append((path, value))

    def add_element(self, path, value):
        """
        Records the character data of an element of the section.

        Parameters
        ----------
        path : str or unicode
            Element path relative to the section root.
        value : str or unicode
            Element character data.
        """

        self.add_sub_element(path, value)

    def attribute(self, name):
        """
        Returns the value of the first attribute with given name.

        Parameters
        ----------
        name : str or unicode
            Attribute name.

        Returns
        -------
        str or unicode
             Attribute value or *None*.
        """

        name = local_name(name)
        for attribute_name, value in self.attributes:
            if attribute_name == name:
                return value

    def is_applied(self):
        """
        Returns whether the section declares its transform as already applied,
        i.e. carries an *applied="true"* attribute.

        Returns
        -------
        bool
        """

        applied = self.attribute('applied')
        return applied is not None and applied.strip().lower() == 'true'

    def values(self, name, parents=None):
        """
        Yields the values of the sub-elements with given name.

        Parameters
        ----------
        name : str or unicode
            Element local name.
        parents : array_like, optional
            Local names of the accepted parent elements, when omitted only
            direct children of the section root are matched.

        Returns
        -------
        generator
        """

        for path, value in self.sub_elements:
            components = path.split('/')
            if components[-1] != name:
                continue

            if parents is None:
                if len(components) == 1:
                    yield value
            elif len(components) > 1 and components[-2] in parents:
                yield value

    def value(self, name, parents=None):
        """
        Returns the value of the first sub-element with given name, see
        :meth:`AMFSection.values`.
        """

        return next(self.values(name, parents), None)


class AMFTransformSection(AMFSection):
    """
    Record of an input or output transform section.

    Elements that are direct children of the section root are kept in the
    *top_level_elements* list while elements nested in one of the rendering
    transform blocks are kept in the *sub_elements* list, each block being
    introduced by a marker entry holding the block tag and an empty value.

    Parameters
    ----------
    tag : str or unicode
        Local name of the section root element.
    nested_tags : array_like
        Local names of the nested rendering transform blocks.
    """

    def __init__(self, tag, nested_tags):
        super().__init__(tag)

        self.nested_tags = tuple(nested_tags)
        self.nested = []
        self.top_level_elements = []

    def push_nested(self, tag):
        self.nested.append(tag)
        self.add_sub_element(tag, '')

    def pop_nested(self):
        self.nested.pop()

    def add_element(self, path, value):
        if self.nested:
            self.add_sub_element(path, value)
        else:
            self.top_level_elements.append((path, value))

    def top_level_value(self, name):
        """
        Returns the value of the first direct child element with given name.

        Parameters
        ----------
        name : str or unicode
            Element local name.

        Returns
        -------
        str or unicode
             Element value or *None*.
        """

        for path, value in self.top_level_elements:
            if path == name:
                return value

    def description(self):
        """
        Returns the section description, looking at the direct children first.
        """

        for elements in (self.top_level_elements, self.sub_elements):
            for path, value in elements:
                if path.split('/')[-1] == AMF_TAG_DESC:
                    return value

    def nested_blocks(self):
        """
        Splits the nested elements into their rendering transform blocks.

        Returns
        -------
        list
             *(block tag, [(element local name, value), ...])* tuples in
             document order.
        """

        blocks = []
        for path, value in self.sub_elements:
            if path in self.nested_tags and not value:
                blocks.append((path, []))
            elif blocks:
                blocks[-1][1].append((path.split('/')[-1], value))

        return blocks


class AMFLook(AMFSection):
    """
    Record of a look transform section.

    Parameters
    ----------
    index : int
        1-based position of the look in the document.
    attributes : array_like
        *(name, value)* attribute pairs of the look transform root element.
    """

    def __init__(self, index, attributes=()):
        super().__init__(AMF_TAG_LOOK_TRANSFORM)

        self.index = index
        self.present = True
        for name, value in attributes:
            self.add_attribute(name, value)

        self.applied = self.is_applied()
