#!/usr/bin/env python3
"""
Tests for the iOS cooker.

Run with: python3 -m pytest tests/test_ios_platform_tools.py
"""

import io
import os
import tempfile
import unittest
from unittest.mock import Mock, patch

from gamecook.cooker.cooking_data import CookingData
from gamecook.cooker.platform_tools import ArchitectureType, DotNetAOTModes, PlatformType
from gamecook.cooker.settings import (
    BuildSettings,
    CookerSettings,
    GameSettings,
    IosPlatformSettings,
    ProjectInfo,
)
from gamecook.cooker.ios.ios_platform_tools import IosPlatformTools

EXEC_COMMAND = "gamecook.cooker.ios.ios_platform_tools.exec_command"

PROJECT_TEMPLATE = """// !$*UTF8*$!
{
	objects = {
/* Begin PBXBuildFile section */
${PBXBuildFile}/* End PBXBuildFile section */
/* Begin PBXCopyFilesBuildPhase section */
${PBXCopyFilesBuildPhaseFiles}/* End PBXCopyFilesBuildPhase section */
/* Begin PBXFileReference section */
${PBXFileReference}/* End PBXFileReference section */
/* Frameworks build phase */
${PBXFrameworksBuildPhase}/* Frameworks group */
${PBXFrameworksGroup}/* Files group */
${PBXFilesGroup}/* Resources build phase */
${PBXResourcesGroup}/* settings */
		PRODUCT_NAME = "${AppName}";
		PRODUCT_BUNDLE_IDENTIFIER = ${AppIdentifier};
		DEVELOPMENT_TEAM = "${AppTeamId}";
		CURRENT_PROJECT_VERSION = ${AppVersion};
		MARKETING_VERSION = ${ProjectVersion};
		INFOPLIST_KEY_CFBundleDisplayName = "${ProjectName}";
		HEADER_SEARCH_PATHS = "${HeaderSearchPaths}";
	};
}
"""


def write_file(path, content="x"):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write(content)


def make_settings(**kwargs):
    return CookerSettings(
        game=GameSettings(product_name="Space Game", company_name="Star-Studio"),
        build=BuildSettings(skip_packaging=kwargs.get("skip_packaging", False)),
        ios=IosPlatformSettings(
            app_identifier=kwargs.get("app_identifier", "com.${COMPANY_NAME}.${PROJECT_NAME}"),
            app_team_id="TEAM42",
        ),
        project=ProjectInfo(version="2.5"),
    )


class TestIosPlatformIdentity(unittest.TestCase):

    def setUp(self):
        self.tools = IosPlatformTools(CookerSettings())

    def test_identity(self):
        self.assertEqual(self.tools.get_display_name(), "iOS")
        self.assertEqual(self.tools.get_name(), "iOS")
        self.assertIs(self.tools.get_platform(), PlatformType.IOS)
        self.assertIs(self.tools.get_architecture(), ArchitectureType.ARM64)
        self.assertIs(self.tools.use_aot(), DotNetAOTModes.MONO_AOT_DYNAMIC)

    def test_native_code_files(self):
        self.assertTrue(self.tools.is_native_code_file(None, "libgame.dylib"))
        self.assertTrue(self.tools.is_native_code_file(None, "/out/Data/GameApp"))
        self.assertTrue(self.tools.is_native_code_file(None, "/out/Data/trailing."))
        self.assertFalse(self.tools.is_native_code_file(None, "/out/Data/level.json"))
        self.assertFalse(self.tools.is_native_code_file(None, "libgame.so"))
        self.assertFalse(self.tools.is_native_code_file(None, "libgame.DYLIB"))
        self.assertFalse(self.tools.is_native_code_file(None, "game.dylib.meta"))


class TestOnBuildStarted(unittest.TestCase):

    def test_output_paths_move_into_app_data(self):
        with tempfile.TemporaryDirectory() as out:
            data = CookingData(out, platform_binaries_root="/unused")
            IosPlatformTools(CookerSettings()).on_build_started(data)

            expected = os.path.join(out, "GameApp/Data")
            self.assertEqual(data.data_output_path, expected)
            self.assertEqual(data.native_code_output_path, expected)
            self.assertEqual(data.managed_code_output_path, expected)
            self.assertEqual(data.original_output_path, out)
            self.assertTrue(os.path.isdir(expected))


class TestOnPostProcess(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        root = self.temp_dir.name
        self.binaries_root = os.path.join(root, "Platforms", "iOS")
        self.output = os.path.join(root, "Output")
        write_file(
            os.path.join(self.binaries_root, "Project", "GameApp.xcodeproj", "project.pbxproj"),
            PROJECT_TEMPLATE,
        )
        write_file(os.path.join(self.binaries_root, "Project", "GameApp", "main.m"), "int main() {}")

        self.package_files = Mock()
        self.data = CookingData(
            self.output,
            platform_binaries_root=self.binaries_root,
            startup_folder="/opt/engine",
            package_files=self.package_files,
        )

    def tearDown(self):
        self.temp_dir.cleanup()

    def cook_files(self, tools):
        tools.on_build_started(self.data)
        data_dir = self.data.data_output_path
        write_file(os.path.join(data_dir, "libgame.dylib"))
        write_file(os.path.join(data_dir, "Content", "level.json"), "{}")
        write_file(os.path.join(data_dir, ".DS_Store"))
        write_file(os.path.join(data_dir, "GameApp"))
        write_file(os.path.join(data_dir, "Dotnet", "DOTNET-LICENSE.TXT"), "license")

    def project_file(self):
        return os.path.join(self.output, "GameApp.xcodeproj", "project.pbxproj")

    def read_project(self):
        with open(self.project_file()) as f:
            return f.read()

    def run_post_process(self, tools, exec_result=(0, "")):
        with patch(EXEC_COMMAND, return_value=exec_result) as exec_command, \
                patch("sys.stdout", new_callable=io.StringIO) as stdout:
            failed = tools.on_post_process(self.data)
        return failed, exec_command, stdout.getvalue()

    def test_generates_project(self):
        tools = IosPlatformTools(make_settings())
        self.cook_files(tools)

        failed, exec_command, output = self.run_post_process(tools)

        self.assertFalse(failed)
        project = self.read_project()
        self.assertNotIn("${", project)
        self.assertIn('PRODUCT_NAME = "SpaceGame";', project)
        self.assertIn("PRODUCT_BUNDLE_IDENTIFIER = com.starstudio.spacegame;", project)
        self.assertIn('DEVELOPMENT_TEAM = "TEAM42";', project)
        self.assertIn("CURRENT_PROJECT_VERSION = 1;", project)
        self.assertIn("MARKETING_VERSION = 2.5;", project)
        self.assertIn('INFOPLIST_KEY_CFBundleDisplayName = "Space Game";', project)
        self.assertIn('HEADER_SEARCH_PATHS = "/opt/engine";', project)

        self.assertEqual(project.count("libgame.dylib in Frameworks */ = {isa = PBXBuildFile"), 1)
        self.assertEqual(project.count("libgame.dylib in Embed Frameworks */ = {isa = PBXBuildFile"), 1)
        self.assertIn('path = "GameApp/Data/libgame.dylib"', project)
        self.assertEqual(project.count("level.json in Resources */ = {isa = PBXBuildFile"), 1)
        self.assertIn('path = "Data/Content/level.json"', project)
        self.assertIn('path = "Data/Dotnet/LICENSE.TXT"', project)
        self.assertNotIn(".DS_Store", project)
        self.assertNotIn("/* GameApp */", project)

        self.assertTrue(os.path.isfile(os.path.join(self.output, "GameApp", "main.m")))
        self.assertTrue(os.path.isfile(os.path.join(self.data.data_output_path, "Content", "level.json")))

        exec_command.assert_called_once_with(
            [
                "install_name_tool",
                "-id",
                "@rpath/libgame.dylib",
                os.path.join(self.data.data_output_path, "libgame.dylib"),
            ]
        )
        self.package_files.assert_called_once_with(self.data)
        self.assertIn("Building app package...", output)

    def test_renames_dotnet_license(self):
        tools = IosPlatformTools(make_settings())
        self.cook_files(tools)
        dotnet_dir = os.path.join(self.data.data_output_path, "Dotnet")
        write_file(os.path.join(dotnet_dir, "LICENSE.TXT"), "old")

        failed, _, _ = self.run_post_process(tools)

        self.assertFalse(failed)
        self.assertFalse(os.path.exists(os.path.join(dotnet_dir, "DOTNET-LICENSE.TXT")))
        with open(os.path.join(dotnet_dir, "LICENSE.TXT")) as f:
            self.assertEqual(f.read(), "license")

    def test_skip_packaging(self):
        tools = IosPlatformTools(make_settings(skip_packaging=True))
        self.cook_files(tools)

        failed, _, output = self.run_post_process(tools)

        self.assertFalse(failed)
        self.package_files.assert_not_called()
        self.assertNotIn("Building app package...", output)
        self.assertTrue(os.path.isfile(self.project_file()))

    def test_invalid_app_identifier_fails(self):
        tools = IosPlatformTools(make_settings(app_identifier="com.studio/${PROJECT_NAME}"))
        self.cook_files(tools)

        failed, exec_command, output = self.run_post_process(tools)

        self.assertTrue(failed)
        self.assertIn("ERROR: Apple app identifier 'com.studio/spacegame' contains invalid character", output)
        self.assertFalse(os.path.exists(self.project_file()))
        exec_command.assert_not_called()
        self.package_files.assert_not_called()

    def test_empty_app_identifier_fails(self):
        tools = IosPlatformTools(make_settings(app_identifier=""))
        self.cook_files(tools)

        failed, _, output = self.run_post_process(tools)

        self.assertTrue(failed)
        self.assertIn("ERROR: Apple app identifier is empty.", output)

    def test_missing_template_fails(self):
        self.data.platform_binaries_root = os.path.join(self.temp_dir.name, "Missing")
        tools = IosPlatformTools(make_settings())
        self.cook_files(tools)

        failed, exec_command, output = self.run_post_process(tools)

        self.assertTrue(failed)
        self.assertIn("ERROR: Failed to deploy Xcode project", output)
        self.assertFalse(os.path.exists(self.project_file()))
        exec_command.assert_not_called()
        self.package_files.assert_not_called()
        # nothing renamed after the failed copy
        self.assertTrue(
            os.path.isfile(os.path.join(self.data.data_output_path, "Dotnet", "DOTNET-LICENSE.TXT"))
        )

    def test_missing_project_file_fails(self):
        os.remove(
            os.path.join(self.binaries_root, "Project", "GameApp.xcodeproj", "project.pbxproj")
        )
        tools = IosPlatformTools(make_settings())
        self.cook_files(tools)

        failed, _, output = self.run_post_process(tools)

        self.assertTrue(failed)
        self.assertIn("ERROR: Failed to format Xcode project", output)
        self.package_files.assert_not_called()

    def test_install_name_tool_failure_is_not_fatal(self):
        tools = IosPlatformTools(make_settings())
        self.cook_files(tools)

        failed, exec_command, output = self.run_post_process(tools, exec_result=(1, "bad dylib"))

        self.assertFalse(failed)
        exec_command.assert_called_once()
        self.assertIn("WARNING: Failed to set install name", output)
        self.assertIn("bad dylib", output)
        self.package_files.assert_called_once_with(self.data)

    def test_file_names_do_not_inject_tokens(self):
        tools = IosPlatformTools(make_settings())
        self.cook_files(tools)
        write_file(os.path.join(self.data.data_output_path, "${AppTeamId}.txt"))

        failed, _, _ = self.run_post_process(tools)

        self.assertFalse(failed)
        project = self.read_project()
        self.assertIn('name = "${AppTeamId}.txt"', project)


if __name__ == "__main__":
    unittest.main()
