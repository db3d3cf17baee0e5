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
Minimal cooking pipeline around a platform cooker.

The game itself is compiled elsewhere; GameCooker places the compiled files
where the platform cooker expects them and runs the cooker hooks in order.
"""

import os
import shutil
import time

from gamecook.utils.context.result import CliResult
from gamecook.utils.file_util import get_files


def package_files(data):
    """Print what ends up in the app package."""
    files = get_files(data.data_output_path)
    total_size = sum(os.path.getsize(f) for f in files)
    print(f"Packaging {len(files)} files from {data.data_output_path}")
    print(f"  total size: {total_size / 1024 / 1024:.2f} MB")


class GameCooker:
    def __init__(self, tools, data):
        self.tools = tools
        self.data = data

    def deploy_build(self, input_path):
        """Copy the compiled game files into the data output folder."""
        if not os.path.isdir(input_path):
            print(f"ERROR: Build input folder not found: {input_path}")
            return False
        try:
            shutil.copytree(input_path, self.data.data_output_path, dirs_exist_ok=True)
        except OSError as e:
            print(f"ERROR: Failed to copy build {input_path} to {self.data.data_output_path}: {e}")
            return False
        return True

    def cook(self, input_path) -> CliResult:
        before_time = time.time()
        name = self.tools.get_display_name()
        print(f"==================cook {name}========================")

        self.tools.on_build_started(self.data)
        if not self.deploy_build(input_path):
            return CliResult(error=f"failed to deploy build input {input_path}")
        if self.tools.on_post_process(self.data):
            return CliResult(error=f"{name} post process failed")

        after_time = time.time()
        print(f"==================cook {name} end, use time: {int(after_time - before_time)}s========================")
        return CliResult(value=self.data.original_output_path)
