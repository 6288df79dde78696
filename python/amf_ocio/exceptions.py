#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Defines the exceptions raised while building an *OCIO* config from an *AMF*.
"""

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = [
    'AMFError', 'AMFParsingError', 'AMFCharacterDataError',
    'AMFReferenceVersionError', 'AMFReferenceColorSpaceError',
    'AMFMissingFileError', 'AMFInputTransformError'
]


class AMFError(Exception):
    """
    Base class of the errors aborting an *AMF* compilation.

    Parameters
    ----------
    message : str or unicode
        Error description.
    line_number : int, optional
        1-based line of the *AMF* document being read when the error was
        detected.
    """

    def __init__(self, message, line_number=None):
        self.message = message
        self.line_number = line_number

        super().__init__(str(self))

    def __str__(self):
        if self.line_number is None:
            return self.message

        return '{0}. At line ({1})'.format(self.message, self.line_number)


class AMFParsingError(AMFError):
    """
    The *AMF* document is not well-formed *XML*.
    """


class AMFCharacterDataError(AMFError):
    """
    Character data is empty or cannot be interpreted.
    """


class AMFReferenceVersionError(AMFError):
    """
    The *OCIO* library or the reference config is too old.
    """


class AMFReferenceColorSpaceError(AMFError):
    """
    The reference config lacks the *ACES* interchange colorspace.
    """


class AMFMissingFileError(AMFError):
    """
    A *LUT* or *CDL* file referenced by the *AMF* does not exist.
    """


class AMFInputTransformError(AMFError):
    """
    No colorspace could be determined for the input transform.
    """
