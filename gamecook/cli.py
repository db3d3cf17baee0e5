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
import importlib
import argparse

from gamecook.utils.context.namespace import CliNameSpace
from gamecook.utils.context.context import CliContext
from gamecook.utils.context.command import CliCommand

SCRIPT_PATH = os.path.split(os.path.realpath(__file__))[0]
PACKAGE_NAME = os.path.basename(SCRIPT_PATH)


# Root Class for Command Line Interface
class Cli(CliCommand):
    def description(self) -> str:
        return """gamecook - Game build post-processing for mobile platforms

Turns a compiled game build into a deployable platform project.

USAGE:
    gamecook <command> [options]

COMMANDS:
    cook        Post-process a compiled build into a platform project
    check       Check platform tools and GAMECOOK.toml settings

EXAMPLES:
    gamecook cook ios --input build/ios --output out/ios --binaries-root Platforms/iOS
    gamecook check

For more information on a specific command:
    gamecook <command> --help
        """

    def get_command_list(self) -> list:
        arr = []
        for command in os.listdir(os.path.join(SCRIPT_PATH, "commands")):
            if not command.startswith("_") and command.endswith(".py"):
                arr.append(os.path.splitext(os.path.basename(command))[0])
        return sorted(arr)

    def _make_parser(self, add_help=True):
        parser = argparse.ArgumentParser(
            prog="gamecook",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
            add_help=add_help,
        )
        parser.add_argument(
            "subcommand",
            metavar=f"{self.get_command_list()}",
            type=str,
            nargs="?" if not add_help else None,
            choices=self.get_command_list(),
        )
        return parser

    def cli(self) -> CliNameSpace:
        # gamecook --help, but not gamecook cook --help
        if len(sys.argv) == 2 and sys.argv[1] in ["--help", "-h"]:
            self._make_parser().print_help()
            sys.exit(0)

        # parse only known args, subcommand options are left for the subcommand
        parser = self._make_parser(add_help=False)
        args, unknown = parser.parse_known_args(namespace=CliNameSpace())
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        if not args.subcommand:
            print("ERROR: No command specified\n")
            self._make_parser().print_help()
            sys.exit(1)

        module = importlib.import_module(f"{PACKAGE_NAME}.commands.{args.subcommand}")
        klass = getattr(module, args.subcommand.capitalize())
        sub_cmd = klass()
        sub_cmd.exec(context, sub_cmd.cli())


def main():
    cmd = Cli()
    context = CliContext()
    context.project_dir = os.getcwd()
    cmd.exec(context, cmd.cli())


if __name__ == "__main__":
    main()
