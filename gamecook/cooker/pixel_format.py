#
# Copyright 2024 gamecook Project Authors. All rights reserved.
# Use of this source code is governed by a MIT-style
# license that can be found at
#
# https://opensource.org/license/MIT
#
# The above copyright notice and this permission
# notice shall be included in all copies or
# substantial portions of the Software.

"""
Pixel formats known to the cooker and the fallback table for targets
without BC (block compression) support.
"""

from enum import Enum


class PixelFormat(Enum):
    UNKNOWN = 0
    R32G32B32A32_FLOAT = 2
    R16G16B16A16_TYPELESS = 9
    R16G16B16A16_FLOAT = 10
    R16G16B16A16_UNORM = 11
    R16G16_TYPELESS = 33
    R16G16_FLOAT = 34
    R16G16_UNORM = 35
    R16G16_SNORM = 37
    R8G8B8A8_TYPELESS = 27
    R8G8B8A8_UNORM = 28
    R8G8B8A8_UNORM_SRGB = 29
    R8G8_UNORM = 49
    R8_TYPELESS = 60
    R8_UNORM = 61
    R8_SNORM = 63
    A8_UNORM = 65
    BC1_TYPELESS = 70
    BC1_UNORM = 71
    BC1_UNORM_SRGB = 72
    BC2_TYPELESS = 73
    BC2_UNORM = 74
    BC2_UNORM_SRGB = 75
    BC3_TYPELESS = 76
    BC3_UNORM = 77
    BC3_UNORM_SRGB = 78
    BC4_TYPELESS = 79
    BC4_UNORM = 80
    BC4_SNORM = 81
    BC5_TYPELESS = 82
    BC5_UNORM = 83
    BC5_SNORM = 84
    B8G8R8A8_UNORM = 87
    B8G8R8A8_UNORM_SRGB = 91
    BC6H_TYPELESS = 94
    BC6H_UF16 = 95
    BC6H_SF16 = 96
    BC7_TYPELESS = 97
    BC7_UNORM = 98
    BC7_UNORM_SRGB = 99


BC_FORMATS = frozenset(f for f in PixelFormat if f.name.startswith("BC"))

# BC format -> uncompressed equivalent
BC_DOWNGRADE_TABLE = {
    PixelFormat.BC1_TYPELESS: PixelFormat.R8G8B8A8_TYPELESS,
    PixelFormat.BC2_TYPELESS: PixelFormat.R8G8B8A8_TYPELESS,
    PixelFormat.BC3_TYPELESS: PixelFormat.R8G8B8A8_TYPELESS,
    PixelFormat.BC1_UNORM: PixelFormat.R8G8B8A8_UNORM,
    PixelFormat.BC2_UNORM: PixelFormat.R8G8B8A8_UNORM,
    PixelFormat.BC3_UNORM: PixelFormat.R8G8B8A8_UNORM,
    PixelFormat.BC1_UNORM_SRGB: PixelFormat.R8G8B8A8_UNORM_SRGB,
    PixelFormat.BC2_UNORM_SRGB: PixelFormat.R8G8B8A8_UNORM_SRGB,
    PixelFormat.BC3_UNORM_SRGB: PixelFormat.R8G8B8A8_UNORM_SRGB,
    PixelFormat.BC4_TYPELESS: PixelFormat.R8_TYPELESS,
    PixelFormat.BC4_UNORM: PixelFormat.R8_UNORM,
    PixelFormat.BC4_SNORM: PixelFormat.R8_SNORM,
    PixelFormat.BC5_TYPELESS: PixelFormat.R16G16_TYPELESS,
    PixelFormat.BC5_UNORM: PixelFormat.R16G16_UNORM,
    PixelFormat.BC5_SNORM: PixelFormat.R16G16_SNORM,
    PixelFormat.BC7_TYPELESS: PixelFormat.R16G16B16A16_TYPELESS,
    PixelFormat.BC6H_TYPELESS: PixelFormat.R16G16B16A16_TYPELESS,
    PixelFormat.BC7_UNORM: PixelFormat.R16G16B16A16_FLOAT,
    PixelFormat.BC6H_UF16: PixelFormat.R16G16B16A16_FLOAT,
    PixelFormat.BC6H_SF16: PixelFormat.R16G16B16A16_FLOAT,
    PixelFormat.BC7_UNORM_SRGB: PixelFormat.R16G16B16A16_UNORM,
}


def is_compressed_bc(fmt: PixelFormat) -> bool:
    return fmt in BC_FORMATS


def downgrade_bc_format(fmt: PixelFormat) -> PixelFormat:
    """Uncompressed replacement for a BC format, any other format is returned as is."""
    return BC_DOWNGRADE_TABLE.get(fmt, fmt)
