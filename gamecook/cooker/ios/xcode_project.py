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
Xcode project (project.pbxproj) generation helpers.

Every cooked file becomes one XcodeFileEntry. Shared libraries are linked
and embedded as frameworks, everything else is bundled as a resource. The
entries are rendered into the regions of the project template with Jinja2.
"""

import os
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional

import jinja2

from gamecook.utils.file_util import convert_absolute_path_to_relative, get_files

PBX_ID_LENGTH = 24

# folder of the app target inside the Xcode project, holds the Data folder
APP_FOLDER_NAME = "GameApp"
APP_DATA_SUBDIR = APP_FOLDER_NAME + "/Data"
PROJECT_FILE_PATH = APP_FOLDER_NAME + ".xcodeproj/project.pbxproj"

# cooked files that never go into the project
SKIP_FILE_NAMES = (".DS_Store", APP_FOLDER_NAME)

DYLIB_SUFFIX = ".dylib"

KIND_FRAMEWORK = "framework"
KIND_RESOURCE = "resource"

# region tokens in project.pbxproj, in the order they are filled
SECTION_TOKENS = (
    "${PBXBuildFile}",
    "${PBXCopyFilesBuildPhaseFiles}",
    "${PBXFileReference}",
    "${PBXFrameworksBuildPhase}",
    "${PBXFrameworksGroup}",
    "${PBXFilesGroup}",
    "${PBXResourcesGroup}",
)

_SECTION_TEMPLATES = {
    "${PBXBuildFile}": (
        "{% for e in entries %}"
        "{% if e.is_framework %}"
        "\t\t{{ e.framework_id }} /* {{ e.name|pbx_comment }} in Frameworks */ = "
        "{isa = PBXBuildFile; fileRef = {{ e.file_id }} /* {{ e.name|pbx_comment }} */; };\n"
        "\t\t{{ e.embed_id }} /* {{ e.name|pbx_comment }} in Embed Frameworks */ = "
        "{isa = PBXBuildFile; fileRef = {{ e.file_id }} /* {{ e.name|pbx_comment }} */; "
        "settings = {ATTRIBUTES = (CodeSignOnCopy, ); }; };\n"
        "{% else %}"
        "\t\t{{ e.build_id }} /* {{ e.name|pbx_comment }} in Resources */ = "
        "{isa = PBXBuildFile; fileRef = {{ e.file_id }} /* {{ e.name|pbx_comment }} */; };\n"
        "{% endif %}"
        "{% endfor %}"
    ),
    "${PBXCopyFilesBuildPhaseFiles}": (
        "{% for e in entries if e.is_framework %}"
        "\t\t\t\t{{ e.embed_id }} /* {{ e.name|pbx_comment }} in Embed Frameworks */,\n"
        "{% endfor %}"
    ),
    "${PBXFileReference}": (
        "{% for e in entries %}"
        "{% if e.is_framework %}"
        "\t\t{{ e.file_id }} /* {{ e.name|pbx_comment }} */ = {isa = PBXFileReference; "
        'lastKnownFileType = "compiled.mach-o.dylib"; name = "{{ e.name|pbx_string }}"; '
        'path = "{{ app_data_subdir }}/{{ e.project_path|pbx_string }}"; sourceTree = "<group>"; };\n'
        "{% else %}"
        "\t\t{{ e.file_id }} /* {{ e.name|pbx_comment }} */ = {isa = PBXFileReference; "
        'lastKnownFileType = file; name = "{{ e.name|pbx_string }}"; '
        'path = "Data/{{ e.project_path|pbx_string }}"; sourceTree = "<group>"; };\n'
        "{% endif %}"
        "{% endfor %}"
    ),
    "${PBXFrameworksBuildPhase}": (
        "{% for e in entries if e.is_framework %}"
        "\t\t\t\t{{ e.framework_id }} /* {{ e.name|pbx_comment }} in Frameworks */,\n"
        "{% endfor %}"
    ),
    "${PBXFrameworksGroup}": (
        "{% for e in entries if e.is_framework %}"
        "\t\t\t\t{{ e.file_id }} /* {{ e.name|pbx_comment }} */,\n"
        "{% endfor %}"
    ),
    "${PBXFilesGroup}": (
        "{% for e in entries if not e.is_framework %}"
        "\t\t\t\t{{ e.file_id }} /* {{ e.name|pbx_comment }} */,\n"
        "{% endfor %}"
    ),
    "${PBXResourcesGroup}": (
        "{% for e in entries if not e.is_framework %}"
        "\t\t\t\t{{ e.build_id }} /* {{ e.name|pbx_comment }} in Resources */,\n"
        "{% endfor %}"
    ),
}


def pbx_comment(value):
    """Keep a value from closing the /* */ comment it is written into."""
    return str(value).replace("*/", "* /")


def pbx_string(value):
    """Escape a value written between double quotes."""
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


_jinja_env = jinja2.Environment(
    autoescape=False,
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
)
_jinja_env.filters["pbx_comment"] = pbx_comment
_jinja_env.filters["pbx_string"] = pbx_string


class PbxIdGenerator:
    """Hands out 24 character object ids, never the same one twice."""

    def __init__(self):
        self._issued = set()

    def new_id(self) -> str:
        while True:
            pbx_id = uuid.uuid4().hex[:PBX_ID_LENGTH]
            if pbx_id not in self._issued:
                self._issued.add(pbx_id)
                return pbx_id


@dataclass
class XcodeFileEntry:
    """One cooked file as it appears in the Xcode project."""
    file_id: str  # PBXFileReference id
    name: str
    project_path: str  # relative to the data output folder, forward slashes
    file_path: str  # absolute path on disk
    kind: str = KIND_RESOURCE
    build_id: Optional[str] = None  # resources build phase id
    framework_id: Optional[str] = None  # frameworks build phase id
    embed_id: Optional[str] = None  # embed frameworks copy phase id

    @property
    def is_framework(self) -> bool:
        return self.kind == KIND_FRAMEWORK


def make_entry(file_path, data_output_path, id_generator) -> XcodeFileEntry:
    name = os.path.basename(file_path)
    entry = XcodeFileEntry(
        file_id=id_generator.new_id(),
        name=name,
        project_path=convert_absolute_path_to_relative(data_output_path, file_path),
        file_path=file_path,
    )
    if name.endswith(DYLIB_SUFFIX):
        entry.kind = KIND_FRAMEWORK
        entry.framework_id = id_generator.new_id()
        entry.embed_id = id_generator.new_id()
    else:
        entry.build_id = id_generator.new_id()
    return entry


def collect_entries(data_output_path, id_generator=None) -> List[XcodeFileEntry]:
    """
    Create project entries for every file under the data output folder.

    Args:
        data_output_path: Folder holding the cooked game data
        id_generator: Source of object ids, a fresh PbxIdGenerator by default

    Returns:
        list: Entries in sorted path order, skipping SKIP_FILE_NAMES
    """
    if id_generator is None:
        id_generator = PbxIdGenerator()
    entries = []
    for file_path in get_files(data_output_path):
        if os.path.basename(file_path) in SKIP_FILE_NAMES:
            continue
        entries.append(make_entry(file_path, data_output_path, id_generator))
    return entries


def render_sections(entries) -> Dict[str, str]:
    """Render the seven generated project regions for the given entries."""
    sections = {}
    for token in SECTION_TOKENS:
        template = _jinja_env.from_string(_SECTION_TEMPLATES[token])
        sections[token] = template.render(
            entries=entries, app_data_subdir=APP_DATA_SUBDIR
        )
    return sections


def build_replace_map(
    app_name,
    app_identifier,
    app_team_id,
    app_version,
    project_name,
    project_version,
    header_search_paths,
) -> Dict[str, str]:
    """Token map for the project template, generated regions start empty."""
    replace_map = {
        "${AppName}": app_name,
        "${AppIdentifier}": app_identifier,
        "${AppTeamId}": app_team_id,
        "${AppVersion}": app_version,
        "${ProjectName}": project_name,
        "${ProjectVersion}": project_version,
        "${HeaderSearchPaths}": header_search_paths,
    }
    # TODO: screen rotation settings from IosPlatformSettings
    for token in SECTION_TOKENS:
        replace_map[token] = ""
    return replace_map
