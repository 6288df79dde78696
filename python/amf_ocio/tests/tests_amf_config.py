#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Defines unit tests for *OCIO* configurations created from *AMF* files.
"""

import os
import shutil
import sys
import tempfile
import unittest

import PyOpenColorIO as ocio

sys.path.append(
    os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from amf_ocio.exceptions import (AMFInputTransformError, AMFMissingFileError,
                                 AMFReferenceColorSpaceError)
from amf_ocio.generate_config import create_config_from_amf, write_config

from reference_config import (CSC_ACESCCT, IDT_SLOG3, LMT_GAMUT_COMPRESS,
                              ODT_REC709, RESOURCES_DIRECTORY,
                              create_reference_config)

__author__ = 'ACES Developers'
__copyright__ = 'Copyright (C) 2014 - 2016 - ACES Developers'
__license__ = ''
__maintainer__ = 'ACES Developers'
__email__ = 'aces@oscars.org'
__status__ = 'Production'

__all__ = [
    'AMF_TEMPLATE', 'LUT_1D', 'TestExampleConfig', 'TestWorkingLocationConfig',
    'TestAMFConfig'
]

AMF_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<aces:acesMetadataFile xmlns:aces="urn:ampas:aces:amf:v2.0"
                       xmlns:cdl="urn:ASC:CDL:v1.01" version="2.0">
    <aces:clipId>
        <aces:clipName>{clip_name}</aces:clipName>
    </aces:clipId>
    <aces:pipeline>
{pipeline}
    </aces:pipeline>
</aces:acesMetadataFile>
"""

LUT_1D = 'LUT_1D_SIZE 2\n0.0 0.0 0.0\n1.0 1.0 1.0\n'


class TestExampleConfig(unittest.TestCase):
    """
    Performs tests on the configuration created from the *example.amf* file.
    """

    def setUp(self):
        self.__config, self.__info = create_config_from_amf(
            os.path.join(RESOURCES_DIRECTORY, 'example.amf'),
            create_reference_config())

    def test_info(self):
        self.assertEqual(self.__info.clip_identifier, 'A001C003_190208_R0EI')
        self.assertEqual(self.__info.input_colorspace_name, 'S-Log3 S-Gamut3')
        self.assertEqual(self.__info.clip_colorspace_name, 'S-Log3 S-Gamut3')
        self.assertEqual(self.__info.display_name,
                         'Rec.1886 Rec.709 - Display')
        self.assertEqual(self.__info.view_name, 'ACES 1.0 - SDR Video')
        self.assertEqual(self.__info.num_looks_applied, 0)
        self.assertIsNone(self.__info.working_location_transform_name)

    def test_colorspaces(self):
        for name in ('ACES2065-1', 'ACEScg', 'ACEScct', 'Raw',
                     'S-Log3 S-Gamut3', 'Linear S-Gamut3', 'ACEScc',
                     'CIE-XYZ-D65', 'Rec.1886 Rec.709 - Display'):
            self.assertIsNotNone(self.__config.getColorSpace(name), name)

        self.assertIsNone(
            self.__config.getColorSpace('ST2084-P3-D65 - Display'))

    def test_roles(self):
        self.assertEqual(
            self.__config.getColorSpace('scene_linear').getName(), 'ACEScg')
        self.assertEqual(
            self.__config.getColorSpace('aces_interchange').getName(),
            'ACES2065-1')
        self.assertEqual(
            self.__config.getColorSpace('color_timing').getName(), 'ACEScct')
        self.assertEqual(
            self.__config.getColorSpace('cie_xyz_d65_interchange').getName(),
            'CIE-XYZ-D65')
        self.assertEqual(
            self.__config.getColorSpace(
                'amf_clip_A001C003_190208_R0EI').getName(), 'S-Log3 S-Gamut3')

    def test_looks(self):
        look = self.__config.getLook('AMF Look 1 -- A001C003_190208_R0EI')
        self.assertIsNotNone(look)
        self.assertEqual(look.getProcessSpace(), 'ACEScc')
        self.assertIn(LMT_GAMUT_COMPRESS, look.getDescription())

        look = self.__config.getLook('AMF Look 2 -- A001C003_190208_R0EI')
        self.assertIsNotNone(look)
        transform = look.getTransform()
        self.assertIsInstance(transform, ocio.GroupTransform)
        self.assertEqual(len(transform), 3)
        self.assertIsInstance(list(transform)[1], ocio.CDLTransform)
        self.assertEqual(list(transform)[0].getDst(), 'ACEScct')
        self.assertEqual(list(transform)[2].getDst(), 'ACEScct')
        self.assertEqual(
            list(transform)[2].getDirection(),
            ocio.TRANSFORM_DIR_INVERSE)

        self.assertIsNotNone(self.__config.getLook('ACES Look Transform'))

    def test_unapplied_looks(self):
        name = 'AMF Unapplied Look Transforms -- A001C003_190208_R0EI'
        named_transform = self.__config.getNamedTransform(name)
        self.assertIsNotNone(named_transform)
        self.assertEqual(named_transform.getFamily(),
                         'AMF/A001C003_190208_R0EI')

        transform = named_transform.getTransform(ocio.TRANSFORM_DIR_FORWARD)
        self.assertEqual(len(transform), 2)
        self.assertEqual(
            list(transform)[0].getLooks(),
            'AMF Look 1 -- A001C003_190208_R0EI')
        self.assertEqual(
            list(transform)[1].getLooks(),
            'AMF Look 2 -- A001C003_190208_R0EI')

        self.assertIn(name, self.__config.getEnvironmentVarDefault(
            'SHOT_LOOKS'))

    def test_displays(self):
        self.assertEqual(self.__config.getDefaultDisplay(),
                         'Rec.1886 Rec.709 - Display')
        self.assertEqual(
            self.__config.getDefaultView('Rec.1886 Rec.709 - Display'),
            'ACES 1.0 - SDR Video')
        self.assertIsInstance(self.__info.display_name, str)
        self.assertIsInstance(self.__info.view_name, str)
        self.assertIsNotNone(
            self.__config.getViewTransform('ACES 1.0 - SDR Video'))
        self.assertEqual(
            self.__config.getDisplayViewLooks('Rec.1886 Rec.709 - Display',
                                              'ACES 1.0 - SDR Video'),
            'ACES Look Transform')

    def test_idempotence(self):
        config, info = create_config_from_amf(
            os.path.join(RESOURCES_DIRECTORY, 'example.amf'),
            create_reference_config())

        self.assertEqual(config.serialize(), self.__config.serialize())
        self.assertEqual(repr(info), repr(self.__info))

    def test_write_config(self):
        temporary_directory = tempfile.mkdtemp()
        try:
            config_path = os.path.join(temporary_directory, 'config.ocio')
            self.assertTrue(write_config(self.__config, config_path))

            config = ocio.Config.CreateFromFile(config_path)
            self.assertEqual(config.getDefaultDisplay(),
                             'Rec.1886 Rec.709 - Display')
        finally:
            shutil.rmtree(temporary_directory)


class TestWorkingLocationConfig(unittest.TestCase):
    """
    Performs tests on the configuration created from the
    *slogtopq_wlook.amf* file.
    """

    def setUp(self):
        self.__config, self.__info = create_config_from_amf(
            os.path.join(RESOURCES_DIRECTORY, 'slogtopq_wlook.amf'),
            create_reference_config())

    def test_info(self):
        self.assertEqual(self.__info.clip_identifier, 'SLogToPQ_A001')
        self.assertEqual(self.__info.num_looks_applied, 1)
        self.assertEqual(self.__info.display_name, 'ST2084-P3-D65 - Display')
        self.assertEqual(self.__info.view_name,
                         'ACES 1.1 - HDR Video (1000 nits & P3 lim)')
        self.assertEqual(self.__info.working_location_transform_name,
                         'AMF Clip to Working Space Transform -- '
                         'SLogToPQ_A001')

    def test_look_names(self):
        for name in ('AMF Look 1 (Applied) (Before Working Location) -- '
                     'SLogToPQ_A001',
                     'AMF Look 2 (Before Working Location) -- SLogToPQ_A001',
                     'AMF Look 3 -- SLogToPQ_A001'):
            self.assertIsNotNone(self.__config.getLook(name), name)

    def test_lut_path(self):
        transform = self.__config.getLook(
            'AMF Look 3 -- SLogToPQ_A001').getTransform()

        self.assertIsInstance(transform, ocio.FileTransform)
        self.assertEqual(
            transform.getSrc(),
            os.path.join(
                os.path.abspath(RESOURCES_DIRECTORY), 'luts',
                'show_look.cube'))

    def test_unapplied_looks(self):
        transform = self.__config.getNamedTransform(
            'AMF Unapplied Look Transforms -- SLogToPQ_A001').getTransform(
                ocio.TRANSFORM_DIR_FORWARD)

        self.assertListEqual([
            look_transform.getLooks() for look_transform in transform
        ], [
            'AMF Look 2 (Before Working Location) -- SLogToPQ_A001',
            'AMF Look 3 -- SLogToPQ_A001'
        ])

    def test_working_location(self):
        transform = self.__config.getNamedTransform(
            'AMF Clip to Working Space Transform -- SLogToPQ_A001'
        ).getTransform(ocio.TRANSFORM_DIR_FORWARD)

        self.assertIsInstance(transform, ocio.GroupTransform)
        self.assertEqual(len(transform), 2)

        colorspace_transform = list(transform)[0]
        self.assertIsInstance(colorspace_transform, ocio.ColorSpaceTransform)
        self.assertEqual(colorspace_transform.getSrc(), 'S-Log3 S-Gamut3')
        self.assertEqual(colorspace_transform.getDst(), 'ACES2065-1')
        self.assertTrue(colorspace_transform.getDataBypass())

        look_transform = list(transform)[1]
        self.assertEqual(
            look_transform.getLooks(),
            'AMF Look 2 (Before Working Location) -- SLogToPQ_A001')
        self.assertEqual(look_transform.getDirection(),
                         ocio.TRANSFORM_DIR_FORWARD)


class TestAMFConfig(unittest.TestCase):
    """
    Performs tests on configurations created from generated *AMF* files.
    """

    def setUp(self):
        self.__temporary_directory = tempfile.mkdtemp()
        self.__reference_config = create_reference_config()

        os.makedirs(os.path.join(self.__temporary_directory, 'luts'))
        for name in ('rrt.cube', 'odt.cube', 'grade.cube'):
            with open(
                    os.path.join(self.__temporary_directory, 'luts', name),
                    'w') as fp:
                fp.write(LUT_1D)

    def tearDown(self):
        shutil.rmtree(self.__temporary_directory)

    def create_config(self, pipeline, clip_name='Shot 010', file_name=None):
        """
        Writes an *AMF* file with given pipeline content and creates its
        configuration.
        """

        amf_file_path = os.path.join(self.__temporary_directory, file_name
                                     or 'clip.amf')
        with open(amf_file_path, 'w') as fp:
            fp.write(
                AMF_TEMPLATE.format(clip_name=clip_name, pipeline=pipeline))

        return create_config_from_amf(amf_file_path, self.__reference_config)

    def test_raw_display(self):
        config, info = self.create_config(
            '<aces:inputTransform><aces:transformId>{0}</aces:transformId>'
            '</aces:inputTransform>'.format(IDT_SLOG3))

        self.assertEqual(info.display_name, 'Raw')
        self.assertEqual(info.view_name, 'Raw')
        self.assertEqual(config.getDisplayViewColorSpaceName('Raw', 'Raw'),
                         'Raw')

    def test_absent_input(self):
        config, info = self.create_config('')

        self.assertEqual(info.input_colorspace_name, 'ACES2065-1')
        self.assertEqual(info.clip_colorspace_name, 'ACES2065-1')
        self.assertEqual(info.display_name, 'Raw')

    def test_role_name(self):
        config, info = self.create_config('', clip_name='Shot 010 (v2)')

        self.assertEqual(info.clip_identifier, 'Shot 010 (v2)')
        self.assertTrue(config.hasRole('amf_clip_Shot_010__v2_'))

    def test_clip_identifier_fallback(self):
        config, info = self.create_config('', clip_name='', file_name='B002.amf')

        self.assertEqual(info.clip_identifier, 'B002')

    def test_applied_output(self):
        config, info = self.create_config(
            '<aces:inputTransform applied="true">'
            '<aces:transformId>{0}</aces:transformId></aces:inputTransform>'
            '<aces:outputTransform applied="true">'
            '<aces:transformId>{1}</aces:transformId></aces:outputTransform>'
            .format(IDT_SLOG3, ODT_REC709))

        self.assertEqual(info.clip_colorspace_name,
                         'Rec.1886 Rec.709 - Display')

    def test_applied_input(self):
        config, info = self.create_config(
            '<aces:inputTransform applied="true">'
            '<aces:transformId>{0}</aces:transformId></aces:inputTransform>'
            .format(IDT_SLOG3))

        self.assertEqual(info.input_colorspace_name, 'S-Log3 S-Gamut3')
        self.assertEqual(info.clip_colorspace_name, 'ACES2065-1')

    def test_cdl_look(self):
        config, info = self.create_config(
            '<aces:lookTransform applied="true">'
            '<cdl:SOPNode><cdl:Slope>2.0 2.0 2.0</cdl:Slope>'
            '<cdl:Offset>0.1 0.1 0.1</cdl:Offset>'
            '<cdl:Power>1.0 1.0 1.0</cdl:Power></cdl:SOPNode>'
            '</aces:lookTransform>'
            '<aces:lookTransform>'
            '<aces:cdlWorkingSpace><aces:fromCdlWorkingSpace>'
            '<aces:transformId>{0}</aces:transformId>'
            '</aces:fromCdlWorkingSpace></aces:cdlWorkingSpace>'
            '<cdl:SatNode><cdl:Saturation>1.0</cdl:Saturation></cdl:SatNode>'
            '</aces:lookTransform>'.format(CSC_ACESCCT))

        self.assertEqual(info.num_looks_applied, 1)

        look = config.getLook('AMF Look 1 (Applied) -- Shot 010')
        self.assertEqual(look.getDescription(), 'ASC CDL')
        processor = config.getProcessor(look.getTransform())
        for value, expected in zip(
                processor.getDefaultCPUProcessor().applyRGB([0.2, 0.2, 0.2]),
                [0.5, 0.5, 0.5]):
            self.assertAlmostEqual(value, expected, places=5)

        transform = config.getLook('AMF Look 2 -- Shot 010').getTransform()
        self.assertEqual(len(transform), 3)
        self.assertEqual(list(transform)[0].getSrc(), 'ACEScct')
        self.assertEqual(
            list(transform)[0].getDirection(),
            ocio.TRANSFORM_DIR_INVERSE)
        self.assertEqual(
            list(transform)[2].getDirection(),
            ocio.TRANSFORM_DIR_FORWARD)

        processor = config.getProcessor(transform)
        for value, expected in zip(
                processor.getDefaultCPUProcessor().applyRGB([0.2, 0.4, 0.6]),
                [0.2, 0.4, 0.6]):
            self.assertAlmostEqual(value, expected, places=5)

    def test_unresolved_cdl_working_space(self):
        config, info = self.create_config(
            '<aces:lookTransform applied="true">'
            '<aces:cdlWorkingSpace><aces:toCdlWorkingSpace>'
            '<aces:transformId>unknown</aces:transformId>'
            '</aces:toCdlWorkingSpace></aces:cdlWorkingSpace>'
            '<cdl:SOPNode><cdl:Slope>2.0 2.0 2.0</cdl:Slope></cdl:SOPNode>'
            '</aces:lookTransform>')

        self.assertEqual(info.num_looks_applied, 0)
        self.assertIsNone(
            config.getLook('AMF Look 1 (Applied) -- Shot 010'))

    def test_look_precedence(self):
        config, info = self.create_config(
            '<aces:lookTransform>'
            '<aces:transformId>unknown</aces:transformId>'
            '<aces:description>Grade</aces:description>'
            '<cdl:ColorCorrectionRef>cc0001</cdl:ColorCorrectionRef>'
            '<aces:file>luts/grade.cube</aces:file>'
            '<cdl:SOPNode><cdl:Slope>2.0 2.0 2.0</cdl:Slope></cdl:SOPNode>'
            '</aces:lookTransform>')

        look = config.getLook('AMF Look 1 -- Shot 010')
        self.assertEqual(look.getDescription(), 'Grade (cc0001)')
        self.assertIsInstance(look.getTransform(), ocio.FileTransform)
        self.assertEqual(look.getTransform().getCCCId(), 'cc0001')

    def test_output_device_luts(self):
        config, info = self.create_config(
            '<aces:outputTransform>'
            '<aces:description>Projector</aces:description>'
            '<aces:referenceRenderingTransform>'
            '<aces:file>luts/rrt.cube</aces:file>'
            '</aces:referenceRenderingTransform>'
            '<aces:outputDeviceTransform>'
            '<aces:file>luts/odt.cube</aces:file>'
            '</aces:outputDeviceTransform>'
            '</aces:outputTransform>')

        name = 'AMF Output Transform LUT -- Shot 010'
        self.assertEqual(info.display_name, 'Projector')
        self.assertEqual(info.view_name, name)
        self.assertIn(name, config.getInactiveColorSpaces())

        transform = config.getColorSpace(name).getTransform(
            ocio.COLORSPACE_DIR_FROM_REFERENCE)
        self.assertEqual(len(transform), 2)
        self.assertTrue(list(transform)[0].getSrc().endswith(
            'rrt.cube'))
        self.assertTrue(list(transform)[1].getSrc().endswith(
            'odt.cube'))

    def test_output_precedence(self):
        config, info = self.create_config(
            '<aces:outputTransform>'
            '<aces:transformId>{0}</aces:transformId>'
            '<aces:file>luts/odt.cube</aces:file>'
            '</aces:outputTransform>'.format(ODT_REC709))

        self.assertEqual(info.display_name, 'Rec.1886 Rec.709 - Display')
        self.assertIsNone(
            config.getColorSpace('AMF Output Transform LUT -- Shot 010'))

    def test_inverse_output_device_luts(self):
        config, info = self.create_config(
            '<aces:inputTransform>'
            '<aces:inverseOutputDeviceTransform>'
            '<aces:file>luts/odt.cube</aces:file>'
            '</aces:inverseOutputDeviceTransform>'
            '<aces:inverseReferenceRenderingTransform>'
            '<aces:file>luts/rrt.cube</aces:file>'
            '</aces:inverseReferenceRenderingTransform>'
            '</aces:inputTransform>')

        name = 'AMF Input Transform LUT -- Shot 010'
        self.assertEqual(info.input_colorspace_name, name)
        self.assertIn(name, config.getInactiveColorSpaces())

        transform = config.getColorSpace(name).getTransform(
            ocio.COLORSPACE_DIR_TO_REFERENCE)
        self.assertEqual(len(transform), 2)
        self.assertTrue(list(transform)[0].getSrc().endswith(
            'odt.cube'))
        self.assertEqual(
            list(transform)[0].getDirection(),
            ocio.TRANSFORM_DIR_INVERSE)
        self.assertTrue(list(transform)[1].getSrc().endswith(
            'rrt.cube'))

    def test_inverse_output_transform_id(self):
        config, info = self.create_config(
            '<aces:inputTransform>'
            '<aces:inverseOutputDeviceTransform>'
            '<aces:transformId>{0}</aces:transformId>'
            '</aces:inverseOutputDeviceTransform>'
            '</aces:inputTransform>'.format(ODT_REC709))

        name = 'AMF Input Transform -- Shot 010'
        self.assertEqual(info.input_colorspace_name, name)
        self.assertEqual(info.display_name, 'Raw')

        transform = config.getColorSpace(name).getTransform(
            ocio.COLORSPACE_DIR_TO_REFERENCE)
        self.assertIsInstance(transform, ocio.DisplayViewTransform)
        self.assertEqual(transform.getDisplay(), 'Rec.1886 Rec.709 - Display')
        self.assertEqual(transform.getDirection(), ocio.TRANSFORM_DIR_INVERSE)

    def test_backward_working_location(self):
        config, info = self.create_config(
            '<aces:inputTransform>'
            '<aces:transformId>{0}</aces:transformId></aces:inputTransform>'
            '<aces:lookTransform applied="true">'
            '<cdl:SOPNode><cdl:Slope>2.0 2.0 2.0</cdl:Slope></cdl:SOPNode>'
            '</aces:lookTransform>'
            '<aces:lookTransform applied="true">'
            '<cdl:SOPNode><cdl:Slope>1.5 1.5 1.5</cdl:Slope></cdl:SOPNode>'
            '</aces:lookTransform>'
            '<aces:workingLocation/>'
            '<aces:lookTransform applied="true">'
            '<cdl:SOPNode><cdl:Slope>0.5 0.5 0.5</cdl:Slope></cdl:SOPNode>'
            '</aces:lookTransform>'
            '<aces:outputTransform>'
            '<aces:transformId>{1}</aces:transformId></aces:outputTransform>'
            .format(IDT_SLOG3, ODT_REC709))

        self.assertEqual(info.num_looks_applied, 3)

        transform = config.getNamedTransform(
            info.working_location_transform_name).getTransform(
                ocio.TRANSFORM_DIR_FORWARD)
        self.assertEqual(len(transform), 2)

        self.assertListEqual(
            [look_transform.getLooks() for look_transform in transform], [
                'AMF Look 2 (Applied) (Before Working Location) -- Shot 010',
                'AMF Look 1 (Applied) (Before Working Location) -- Shot 010'
            ])
        for look_transform in transform:
            self.assertEqual(look_transform.getDirection(),
                             ocio.TRANSFORM_DIR_INVERSE)

    def test_backward_working_location_applied_output(self):
        config, info = self.create_config(
            '<aces:inputTransform applied="true">'
            '<aces:transformId>{0}</aces:transformId></aces:inputTransform>'
            '<aces:lookTransform applied="true">'
            '<cdl:SOPNode><cdl:Slope>2.0 2.0 2.0</cdl:Slope></cdl:SOPNode>'
            '</aces:lookTransform>'
            '<aces:workingLocation/>'
            '<aces:lookTransform applied="true">'
            '<cdl:SOPNode><cdl:Slope>0.5 0.5 0.5</cdl:Slope></cdl:SOPNode>'
            '</aces:lookTransform>'
            '<aces:outputTransform applied="true">'
            '<aces:transformId>{1}</aces:transformId></aces:outputTransform>'
            .format(IDT_SLOG3, ODT_REC709))

        self.assertEqual(info.num_looks_applied, 2)
        self.assertIsInstance(info.display_name, str)
        self.assertIsInstance(info.view_name, str)

        transform = config.getNamedTransform(
            info.working_location_transform_name).getTransform(
                ocio.TRANSFORM_DIR_FORWARD)
        self.assertEqual(len(transform), 2)

        display_view_transform = list(transform)[0]
        self.assertIsInstance(display_view_transform,
                              ocio.DisplayViewTransform)
        self.assertEqual(display_view_transform.getDisplay(),
                         info.display_name)
        self.assertEqual(display_view_transform.getView(), info.view_name)
        self.assertEqual(display_view_transform.getDisplay(),
                         'Rec.1886 Rec.709 - Display')
        self.assertEqual(display_view_transform.getView(),
                         'ACES 1.0 - SDR Video')
        self.assertEqual(display_view_transform.getDirection(),
                         ocio.TRANSFORM_DIR_INVERSE)

        look_transform = list(transform)[1]
        self.assertEqual(
            look_transform.getLooks(),
            'AMF Look 1 (Applied) (Before Working Location) -- Shot 010')
        self.assertEqual(look_transform.getDirection(),
                         ocio.TRANSFORM_DIR_INVERSE)

    def test_forward_working_location_applied_input(self):
        config, info = self.create_config(
            '<aces:inputTransform applied="true">'
            '<aces:transformId>{0}</aces:transformId></aces:inputTransform>'
            '<aces:workingLocation/>'.format(IDT_SLOG3))

        transform = config.getNamedTransform(
            info.working_location_transform_name).getTransform(
                ocio.TRANSFORM_DIR_FORWARD)
        self.assertIsInstance(transform, ocio.ColorSpaceTransform)
        self.assertEqual(transform.getSrc(), 'S-Log3 S-Gamut3')
        self.assertEqual(transform.getDst(), 'ACES2065-1')
        self.assertTrue(transform.getDataBypass())

    def test_identity_working_location(self):
        config, info = self.create_config('<aces:workingLocation/>')

        self.assertEqual(info.input_colorspace_name, 'ACES2065-1')

        transform = config.getNamedTransform(
            info.working_location_transform_name).getTransform(
                ocio.TRANSFORM_DIR_FORWARD)
        self.assertIsInstance(transform, ocio.MatrixTransform)

    def test_nested_working_location(self):
        config, info = self.create_config(
            '<aces:pipelineInfo><aces:workingLocation/></aces:pipelineInfo>')

        self.assertIsNone(info.working_location_transform_name)

    def test_raise_exception_missing_file(self):
        self.assertRaises(
            AMFMissingFileError, self.create_config,
            '<aces:lookTransform><aces:file>luts/missing.cube</aces:file>'
            '</aces:lookTransform>')

    def test_raise_exception_input_transform(self):
        self.assertRaises(
            AMFInputTransformError, self.create_config,
            '<aces:inputTransform><aces:transformId>unknown</aces:transformId>'
            '</aces:inputTransform>')

    def test_raise_exception_reference_colorspace(self):
        amf_file_path = os.path.join(self.__temporary_directory, 'clip.amf')
        with open(amf_file_path, 'w') as fp:
            fp.write(AMF_TEMPLATE.format(clip_name='Shot 010', pipeline=''))

        self.assertRaises(AMFReferenceColorSpaceError, create_config_from_amf,
                          amf_file_path, ocio.Config())


if __name__ == '__main__':
    unittest.main()
