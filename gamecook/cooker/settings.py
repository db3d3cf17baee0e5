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
Settings consumed by the cookers.

Each group mirrors one table of GAMECOOK.toml and is passed to the platform
tools explicitly.
"""

from dataclasses import dataclass, field

DEFAULT_APP_IDENTIFIER = "com.${COMPANY_NAME}.${PROJECT_NAME}"


@dataclass
class GameSettings:
    """[game] table."""
    product_name: str = "My Game"
    company_name: str = "My Company"


@dataclass
class BuildSettings:
    """[build] table."""
    skip_packaging: bool = False


@dataclass
class IosPlatformSettings:
    """[ios] table."""
    app_identifier: str = DEFAULT_APP_IDENTIFIER  # e.g. com.company.project
    app_team_id: str = ""  # Apple developer team id used for signing
    app_version: str = "1"  # CURRENT_PROJECT_VERSION in Xcode


@dataclass
class ProjectInfo:
    """[project] table."""
    version: str = "1.0"


@dataclass
class CookerSettings:
    game: GameSettings = field(default_factory=GameSettings)
    build: BuildSettings = field(default_factory=BuildSettings)
    ios: IosPlatformSettings = field(default_factory=IosPlatformSettings)
    project: ProjectInfo = field(default_factory=ProjectInfo)
