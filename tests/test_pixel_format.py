#!/usr/bin/env python3
"""
Tests for the BC texture format fallback table.

Run with: python3 -m pytest tests/test_pixel_format.py
"""

import unittest

from gamecook.cooker.pixel_format import (
    BC_DOWNGRADE_TABLE,
    BC_FORMATS,
    PixelFormat,
    downgrade_bc_format,
    is_compressed_bc,
)
from gamecook.cooker.settings import CookerSettings
from gamecook.cooker.ios.ios_platform_tools import IosPlatformTools


class TestPixelFormat(unittest.TestCase):

    def test_every_bc_format_has_a_replacement(self):
        self.assertEqual(set(BC_DOWNGRADE_TABLE.keys()), set(BC_FORMATS))

    def test_replacements_are_not_compressed(self):
        for fmt in BC_FORMATS:
            with self.subTest(fmt=fmt):
                self.assertFalse(is_compressed_bc(downgrade_bc_format(fmt)))

    def test_other_formats_pass_through(self):
        for fmt in PixelFormat:
            if fmt in BC_FORMATS:
                continue
            with self.subTest(fmt=fmt):
                self.assertIs(downgrade_bc_format(fmt), fmt)

    def test_idempotent(self):
        for fmt in PixelFormat:
            with self.subTest(fmt=fmt):
                once = downgrade_bc_format(fmt)
                self.assertIs(downgrade_bc_format(once), once)

    def test_table_values(self):
        expected = {
            PixelFormat.BC1_TYPELESS: PixelFormat.R8G8B8A8_TYPELESS,
            PixelFormat.BC2_UNORM: PixelFormat.R8G8B8A8_UNORM,
            PixelFormat.BC3_UNORM_SRGB: PixelFormat.R8G8B8A8_UNORM_SRGB,
            PixelFormat.BC4_TYPELESS: PixelFormat.R8_TYPELESS,
            PixelFormat.BC4_UNORM: PixelFormat.R8_UNORM,
            PixelFormat.BC4_SNORM: PixelFormat.R8_SNORM,
            PixelFormat.BC5_TYPELESS: PixelFormat.R16G16_TYPELESS,
            PixelFormat.BC5_UNORM: PixelFormat.R16G16_UNORM,
            PixelFormat.BC5_SNORM: PixelFormat.R16G16_SNORM,
            PixelFormat.BC6H_TYPELESS: PixelFormat.R16G16B16A16_TYPELESS,
            PixelFormat.BC7_TYPELESS: PixelFormat.R16G16B16A16_TYPELESS,
            PixelFormat.BC6H_UF16: PixelFormat.R16G16B16A16_FLOAT,
            PixelFormat.BC6H_SF16: PixelFormat.R16G16B16A16_FLOAT,
            PixelFormat.BC7_UNORM: PixelFormat.R16G16B16A16_FLOAT,
            PixelFormat.BC7_UNORM_SRGB: PixelFormat.R16G16B16A16_UNORM,
        }
        for src, dst in expected.items():
            with self.subTest(src=src):
                self.assertIs(downgrade_bc_format(src), dst)

    def test_ios_tools_use_the_table(self):
        tools = IosPlatformTools(CookerSettings())
        self.assertIs(
            tools.get_texture_format(None, None, PixelFormat.BC3_UNORM),
            PixelFormat.R8G8B8A8_UNORM,
        )
        self.assertIs(
            tools.get_texture_format(None, None, PixelFormat.R8G8B8A8_UNORM),
            PixelFormat.R8G8B8A8_UNORM,
        )


if __name__ == "__main__":
    unittest.main()
