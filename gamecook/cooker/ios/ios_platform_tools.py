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
iOS cooker.

Turns a cooked game build into an Xcode project:
- Synthesizes the app identifier from the game settings
- Deploys the Xcode project template from the platform data folder
- Adds every cooked file to project.pbxproj (dylibs as embedded frameworks,
  everything else as bundled resources)
- Fixes the install name of each dylib with install_name_tool

Archiving and exporting the .ipa is not done here, the generated project is
built with Xcode.
"""

import os

from gamecook.cooker.pixel_format import PixelFormat, downgrade_bc_format, is_compressed_bc
from gamecook.cooker.platform_tools import (
    ArchitectureType,
    DotNetAOTModes,
    PlatformTools,
    PlatformType,
)
from gamecook.cooker.ios.app_identifier import (
    AppIdentifierError,
    get_app_identifier,
    get_app_name,
)
from gamecook.cooker.ios.xcode_project import (
    APP_DATA_SUBDIR,
    PROJECT_FILE_PATH,
    PbxIdGenerator,
    build_replace_map,
    collect_entries,
    render_sections,
)
from gamecook.utils.cmd.cmd_util import exec_command, format_command
from gamecook.utils.file_util import (
    copy_directory,
    get_extension,
    move_file,
    replace_in_file,
)

PROJECT_TEMPLATE_DIR = "Project"

# dotnet license files are renamed so they are not taken for the game license
DOTNET_LICENSE_RENAMES = (
    ("Dotnet/DOTNET-LICENSE.TXT", "Dotnet/LICENSE.TXT"),
    ("Dotnet/DOTNET-THIRD-PARTY-NOTICES.TXT", "Dotnet/THIRD-PARTY-NOTICES.TXT"),
)


class IosPlatformTools(PlatformTools):
    def __init__(self, settings, id_generator_factory=PbxIdGenerator):
        """
        Args:
            settings: CookerSettings with the game, build, ios and project tables
            id_generator_factory: Callable returning a fresh PbxIdGenerator
        """
        self.settings = settings
        self.id_generator_factory = id_generator_factory

    def get_display_name(self) -> str:
        return "iOS"

    def get_name(self) -> str:
        return "iOS"

    def get_platform(self) -> PlatformType:
        return PlatformType.IOS

    def get_architecture(self) -> ArchitectureType:
        return ArchitectureType.ARM64

    def use_aot(self) -> DotNetAOTModes:
        return DotNetAOTModes.MONO_AOT_DYNAMIC

    def get_texture_format(self, data, texture, fmt: PixelFormat) -> PixelFormat:
        # TODO: ETC and ASTC compression so BC textures are not stored uncompressed
        if is_compressed_bc(fmt):
            return downgrade_bc_format(fmt)
        return fmt

    def is_native_code_file(self, data, file) -> bool:
        extension = get_extension(file)
        return not extension or extension == "dylib"

    def on_build_started(self, data):
        # cooked files go into the Data folder of the app target
        data.data_output_path = os.path.join(data.data_output_path, APP_DATA_SUBDIR)
        data.native_code_output_path = os.path.join(
            data.native_code_output_path, APP_DATA_SUBDIR
        )
        data.managed_code_output_path = os.path.join(
            data.managed_code_output_path, APP_DATA_SUBDIR
        )

        super().on_build_started(data)

    def on_post_process(self, data) -> bool:
        """
        Generate the Xcode project from the cooked files.

        Returns:
            bool: True if the build failed, the reason is already printed
        """
        game_settings = self.settings.game
        platform_settings = self.settings.ios
        platform_data_path = data.get_platform_binaries_root()
        app_name = get_app_name(game_settings)

        try:
            app_identifier = get_app_identifier(game_settings, platform_settings)
        except AppIdentifierError as e:
            print(f"ERROR: {e}")
            return True

        template_path = os.path.join(platform_data_path, PROJECT_TEMPLATE_DIR)
        if not copy_directory(template_path, data.original_output_path, overwrite=True):
            print(
                f"ERROR: Failed to deploy Xcode project to {data.original_output_path} "
                f"from {platform_data_path}"
            )
            return True

        replace_map = build_replace_map(
            app_name=app_name,
            app_identifier=app_identifier,
            app_team_id=platform_settings.app_team_id,
            app_version=platform_settings.app_version,
            project_name=game_settings.product_name,
            project_version=self.settings.project.version,
            header_search_paths=data.startup_folder,
        )

        self.rename_dotnet_license_files(data)

        entries = collect_entries(data.data_output_path, self.id_generator_factory())
        for entry in entries:
            if entry.is_framework:
                self.fix_install_name(entry.name, entry.file_path)
        replace_map.update(render_sections(entries))

        project_file = os.path.join(data.original_output_path, PROJECT_FILE_PATH)
        if not replace_in_file(project_file, replace_map):
            print("ERROR: Failed to format Xcode project")
            return True

        # TODO: update splash screen images and the game icon

        if self.settings.build.skip_packaging:
            return False
        data.package_files()
        print("Building app package...")
        return False

    def rename_dotnet_license_files(self, data):
        for src, dst in DOTNET_LICENSE_RENAMES:
            src_path = os.path.join(data.data_output_path, src)
            dst_path = os.path.join(data.data_output_path, dst)
            try:
                move_file(src_path, dst_path, overwrite=True)
            except OSError as e:
                print(f"WARNING: Failed to rename {src_path}: {e}")

    def fix_install_name(self, name, file_path):
        """Point the dylib id at @rpath so the app can load it from Frameworks."""
        # TODO: only needed for dylibs produced by the AOT step
        cmd = ["install_name_tool", "-id", f"@rpath/{name}", file_path]
        err_code, err_msg = exec_command(cmd)
        if err_code != 0:
            print(f"WARNING: Failed to set install name for {file_path}, cmd:['{format_command(cmd)}']")
            if err_msg:
                print(err_msg.rstrip())
        return err_code == 0
