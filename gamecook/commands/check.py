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
import shutil
import platform

from gamecook.utils.context.namespace import CliNameSpace
from gamecook.utils.context.context import CliContext
from gamecook.utils.context.command import CliCommand
from gamecook.utils.cmd.cmd_util import exec_command
from gamecook.utils.config import load_config
from gamecook.cooker.ios.app_identifier import AppIdentifierError, get_app_identifier


class Check(CliCommand):
    def description(self) -> str:
        return """
        This is a subcommand to check the tools and settings needed to cook.

        Examples:
            gamecook check                  # Check with ./GAMECOOK.toml
            gamecook check --config a.toml  # Check with another settings file
        """

    def cli(self) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="gamecook check",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "--config",
            default=None,
            help="Path to GAMECOOK.toml (default: ./GAMECOOK.toml)",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed information",
        )
        module_name = os.path.splitext(os.path.basename(__file__))[0]
        input_argv = sys.argv[1:]
        if module_name in input_argv:
            input_argv.remove(module_name)
        args, unknown = parser.parse_known_args(input_argv, namespace=CliNameSpace())
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        print("🔍 Checking iOS cook configuration...\n")

        checker = IosChecker(load_config(args.config), verbose=args.verbose)
        checker.check_all()
        checker.print_summary()
        if checker.errors:
            sys.exit(1)


class IosChecker:
    def __init__(self, settings, verbose=False):
        self.settings = settings
        self.verbose = verbose
        self.results = {}
        self.warnings = []
        self.errors = []
        self.current_os = platform.system()

    def print_ok(self, msg):
        """Print success message"""
        print(f"  ✅ {msg}")

    def print_error(self, msg):
        """Print error message"""
        print(f"  ❌ {msg}")
        self.errors.append(msg)

    def print_warning(self, msg):
        """Print warning message"""
        print(f"  ⚠️  {msg}")
        self.warnings.append(msg)

    def print_info(self, msg):
        """Print info message"""
        print(f"  ℹ️  {msg}")

    def print_section(self, title):
        """Print section header"""
        print(f"\n{'='*60}")
        print(f"  {title}")
        print(f"{'='*60}")

    def check_command_exists(self, command, required=True):
        """Check if a command exists in PATH"""
        if shutil.which(command) is None:
            msg = f"{command}: Not found in PATH"
            if required:
                self.print_error(msg)
            else:
                self.print_warning(msg)
            return False
        self.print_ok(f"{command}: Found")
        return True

    def check_tools(self):
        self.print_section("Tools")
        if self.current_os != "Darwin":
            self.print_warning(
                f"Running on {self.current_os}, dylib install names can only be fixed on macOS"
            )
        found = self.check_command_exists("install_name_tool", required=False)
        self.results["install_name_tool"] = found
        if shutil.which("xcodebuild"):
            err_code, version = exec_command(["xcodebuild", "-version"], timeout_second=10)
            if err_code == 0 and version:
                self.print_ok(f"Xcode: {version.splitlines()[0]}")
            else:
                self.print_ok("Xcode: Found")
            self.results["xcodebuild"] = True
        else:
            self.print_warning("xcodebuild: Not found, the generated project cannot be built here")
            self.results["xcodebuild"] = False

    def check_settings(self):
        self.print_section("Settings")
        game = self.settings.game
        try:
            app_identifier = get_app_identifier(game, self.settings.ios)
        except AppIdentifierError as e:
            self.print_error(str(e))
            self.results["app_identifier"] = False
            return
        self.print_ok(f"App identifier: {app_identifier}")
        self.results["app_identifier"] = True
        if not self.settings.ios.app_team_id:
            self.print_warning("ios.app_team_id is empty, Xcode will ask for a team when signing")
        if self.verbose:
            self.print_info(f"Product: {game.product_name} ({game.company_name})")
            self.print_info(f"Project version: {self.settings.project.version}")
            self.print_info(f"Skip packaging: {self.settings.build.skip_packaging}")

    def check_all(self):
        self.check_tools()
        self.check_settings()

    def print_summary(self):
        """Print summary of check results"""
        self.print_section("Summary")
        if self.verbose:
            for check, result in self.results.items():
                symbol = "✅" if result else "❌"
                print(f"    {symbol} {check}")
        if self.errors:
            print(f"  Total Errors: {len(self.errors)}")
        if self.warnings:
            print(f"  Total Warnings: {len(self.warnings)}")
        print(f"{'='*60}\n")
        if not self.errors:
            print("🎉 Ready to cook for iOS!")
        else:
            print("❌ Fix the errors above before cooking for iOS.")
