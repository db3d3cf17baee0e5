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
import sys
import argparse

from gamecook.utils.context.namespace import CliNameSpace
from gamecook.utils.context.context import CliContext
from gamecook.utils.context.command import CliCommand
from gamecook.utils.config import load_config
from gamecook.cooker.cooking_data import CookingData
from gamecook.cooker.game_cooker import GameCooker, package_files
from gamecook.cooker.ios.ios_platform_tools import IosPlatformTools

PLATFORM_TOOLS = {
    "ios": IosPlatformTools,
}


class Cook(CliCommand):
    def description(self) -> str:
        return """
        Post-process a compiled game build into a platform project.

        The compiled files are copied into the app data folder, the platform
        project template is deployed next to them and filled in from
        GAMECOOK.toml.

        Examples:
            gamecook cook ios --input build/ios --output out/ios --binaries-root Platforms/iOS
            gamecook cook ios --input build/ios --output out/ios --binaries-root Platforms/iOS --skip-packaging
            gamecook cook ios --config path/to/GAMECOOK.toml ...
        """

    def get_target_list(self) -> list:
        return list(PLATFORM_TOOLS.keys())

    def cli(self) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="gamecook cook",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "target",
            metavar=f"{self.get_target_list()}",
            type=str,
            choices=self.get_target_list(),
            help="Platform to cook for",
        )
        parser.add_argument(
            "--input",
            required=True,
            help="Folder with the compiled game files",
        )
        parser.add_argument(
            "--output",
            required=True,
            help="Folder where the platform project is generated",
        )
        parser.add_argument(
            "--binaries-root",
            required=True,
            help="Platform data folder holding the Project template",
        )
        parser.add_argument(
            "--config",
            default=None,
            help="Path to GAMECOOK.toml (default: ./GAMECOOK.toml)",
        )
        parser.add_argument(
            "--startup-folder",
            default=None,
            help="Engine folder used for header search paths (default: current directory)",
        )
        parser.add_argument(
            "--skip-packaging",
            action="store_true",
            help="Stop after the project is generated",
        )
        module_name = os.path.splitext(os.path.basename(__file__))[0]
        input_argv = sys.argv[1:]
        if module_name in input_argv:
            input_argv.remove(module_name)
        args, unknown = parser.parse_known_args(input_argv, namespace=CliNameSpace())
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        settings = load_config(args.config)
        if args.skip_packaging:
            settings.build.skip_packaging = True

        data = CookingData(
            original_output_path=os.path.abspath(args.output),
            platform_binaries_root=os.path.abspath(args.binaries_root),
            startup_folder=args.startup_folder or context.project_dir,
            package_files=package_files,
        )
        tools = PLATFORM_TOOLS[args.target](settings)
        result = GameCooker(tools, data).cook(os.path.abspath(args.input))
        if result.is_failure():
            print(f"ERROR: Cook failed: {result.get_error()}")
            sys.exit(1)
        print(f"\nGenerated {tools.get_display_name()} project: {result.get_value()}")
