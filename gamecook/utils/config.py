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
GAMECOOK.toml loading.

Example:
    [game]
    product_name = "My Game"
    company_name = "My Company"

    [project]
    version = "1.2"

    [build]
    skip_packaging = false

    [ios]
    app_identifier = "com.${COMPANY_NAME}.${PROJECT_NAME}"
    app_team_id = "${APPLE_TEAM_ID}"
    app_version = "1"
"""

import os
import re
import sys

if sys.version_info >= (3, 11, 0, "alpha", 7):
    import tomllib
else:
    import tomli as tomllib

from gamecook.cooker.settings import (
    BuildSettings,
    CookerSettings,
    GameSettings,
    IosPlatformSettings,
    ProjectInfo,
)

CONFIG_FILE_NAME = "GAMECOOK.toml"

APP_IDENTIFIER_TOKENS = ("PROJECT_NAME", "COMPANY_NAME")

_ENV_BRACED = re.compile(r"\$\{([^}]+)\}")
_ENV_PLAIN = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")


def expand_env(value, keep=()):
    """
    Expand environment variables in configuration values.

    Supports ${VAR_NAME} and $VAR_NAME syntax. Unknown variables are kept
    as written. Names listed in keep (compared case-insensitively) are never
    expanded, even when the environment defines them.
    """
    if not isinstance(value, str):
        return value
    kept = {name.upper() for name in keep}

    def _lookup(match):
        name = match.group(1)
        if name.upper() in kept:
            return match.group(0)
        return os.environ.get(name, match.group(0))

    value = _ENV_BRACED.sub(_lookup, value)
    value = _ENV_PLAIN.sub(_lookup, value)
    return value


def _get_str(table, key, default, keep=()):
    value = table.get(key, default)
    return str(expand_env(value, keep))


def _get_bool(table, key, default):
    value = table.get(key, default)
    if isinstance(value, str):
        return expand_env(value).strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def parse_config(toml_data) -> CookerSettings:
    """Build CookerSettings from an already parsed GAMECOOK.toml dict."""
    game = toml_data.get("game", {})
    build = toml_data.get("build", {})
    ios = toml_data.get("ios", {})
    project = toml_data.get("project", {})

    defaults = CookerSettings()
    return CookerSettings(
        game=GameSettings(
            product_name=_get_str(game, "product_name", defaults.game.product_name),
            company_name=_get_str(game, "company_name", defaults.game.company_name),
        ),
        build=BuildSettings(
            skip_packaging=_get_bool(build, "skip_packaging", defaults.build.skip_packaging),
        ),
        ios=IosPlatformSettings(
            app_identifier=_get_str(
                ios, "app_identifier", defaults.ios.app_identifier, keep=APP_IDENTIFIER_TOKENS
            ),
            app_team_id=_get_str(ios, "app_team_id", defaults.ios.app_team_id),
            app_version=_get_str(ios, "app_version", defaults.ios.app_version),
        ),
        project=ProjectInfo(
            version=_get_str(project, "version", defaults.project.version),
        ),
    )


def load_config(config_file=None) -> CookerSettings:
    """
    Load cooker settings from GAMECOOK.toml.

    Args:
        config_file: Path of the file, GAMECOOK.toml in the working directory by default

    Returns:
        CookerSettings: Parsed settings, defaults when the file does not exist

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML
    """
    if config_file is None:
        config_file = os.path.join(os.getcwd(), CONFIG_FILE_NAME)
    if not os.path.isfile(config_file):
        print(f"   ⚠️  Warning: {CONFIG_FILE_NAME} not found at {config_file}")
        print("   ⚠️  Using default configuration values")
        return CookerSettings()

    with open(config_file, "rb") as f:
        toml_data = tomllib.load(f)
    return parse_config(toml_data)
