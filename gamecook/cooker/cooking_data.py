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

import os


class CookingData:
    """
    Paths and hooks shared by every step of one cook.

    Args:
        original_output_path: Root of the final platform project
        platform_binaries_root: Platform data folder holding the project template
        startup_folder: Engine installation folder, used for header search paths
        package_files: Callable run when the cooked files should be packaged
    """

    def __init__(
        self,
        original_output_path,
        platform_binaries_root,
        startup_folder=None,
        package_files=None,
    ):
        self.original_output_path = original_output_path
        self.data_output_path = original_output_path
        self.native_code_output_path = original_output_path
        self.managed_code_output_path = original_output_path
        self.platform_binaries_root = platform_binaries_root
        self.startup_folder = startup_folder or os.getcwd()
        self._package_files = package_files

    def get_platform_binaries_root(self):
        return self.platform_binaries_root

    def package_files(self):
        if self._package_files is not None:
            self._package_files(self)

    def __repr__(self):
        return (
            f"CookingData(original_output_path={self.original_output_path!r}, "
            f"data_output_path={self.data_output_path!r})"
        )
