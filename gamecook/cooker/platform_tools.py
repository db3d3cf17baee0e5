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
Base class for platform specific cookers.

A cooker is driven by GameCooker at fixed points of a build: once when the
build starts and once after every output file has been produced.
"""

import os
from enum import Enum

from .pixel_format import PixelFormat


class PlatformType(Enum):
    WINDOWS = 1
    XBOX_ONE = 2
    UWP = 3
    LINUX = 4
    PS4 = 5
    XBOX_SCARLETT = 6
    ANDROID = 7
    SWITCH = 8
    PS5 = 9
    MAC = 10
    IOS = 11


class ArchitectureType(Enum):
    ANYCPU = 0
    X86 = 1
    X64 = 2
    ARM = 3
    ARM64 = 4


class DotNetAOTModes(Enum):
    NONE = 0
    CLR_NATIVE = 1
    MONO_AOT_DYNAMIC = 2
    MONO_AOT_STATIC = 3
    MONO_INTERPRETER = 4


class PlatformTools:
    def get_display_name(self) -> str:
        raise NotImplementedError

    def get_name(self) -> str:
        raise NotImplementedError

    def get_platform(self) -> PlatformType:
        raise NotImplementedError

    def get_architecture(self) -> ArchitectureType:
        raise NotImplementedError

    def use_aot(self) -> DotNetAOTModes:
        return DotNetAOTModes.NONE

    def get_texture_format(self, data, texture, fmt: PixelFormat) -> PixelFormat:
        return fmt

    def is_native_code_file(self, data, file) -> bool:
        return False

    def on_build_started(self, data):
        """Create the output folders before anything gets written to them."""
        for path in (
            data.data_output_path,
            data.native_code_output_path,
            data.managed_code_output_path,
        ):
            os.makedirs(path, exist_ok=True)

    def on_post_process(self, data) -> bool:
        """Returns True if the build failed."""
        return False
