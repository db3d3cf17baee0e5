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
Apple application identifier (bundle id) synthesis.

The identifier is built from a template such as
"com.${COMPANY_NAME}.${PROJECT_NAME}", lowercased and checked against the
characters Apple accepts.
"""

import re

PROJECT_NAME_TOKEN = "${PROJECT_NAME}"
COMPANY_NAME_TOKEN = "${COMPANY_NAME}"

# characters removed from product and company names
_STRIP_CHARS = (" ", ".", "-")


class AppIdentifierError(ValueError):
    """Raised when the synthesized app identifier is not usable."""


def sanitize_name(name):
    for c in _STRIP_CHARS:
        name = name.replace(c, "")
    return name


def get_app_name(game_settings):
    """Application name: the product name without spaces, dots and hyphens."""
    return sanitize_name(game_settings.product_name)


def _replace_ignore_case(text, token, value):
    return re.sub(re.escape(token), lambda m: value, text, flags=re.IGNORECASE)


def _is_valid_char(c):
    return c == "_" or c == "." or (c.isascii() and c.isalnum())


def make_app_identifier(template, product_name, company_name):
    """
    Build the app identifier for the given names.

    Args:
        template: Identifier template, tokens are matched case-insensitively
        product_name: Game product name
        company_name: Company name

    Returns:
        str: Lowercase identifier made only of letters, digits, dots and underscores

    Raises:
        AppIdentifierError: The result is empty or holds an invalid character
    """
    app_identifier = _replace_ignore_case(
        template, PROJECT_NAME_TOKEN, sanitize_name(product_name)
    )
    app_identifier = _replace_ignore_case(
        app_identifier, COMPANY_NAME_TOKEN, sanitize_name(company_name)
    )
    app_identifier = app_identifier.lower()
    for c in app_identifier:
        if not _is_valid_char(c):
            raise AppIdentifierError(
                f"Apple app identifier '{app_identifier}' contains invalid character. "
                "Only letters, numbers, dots and underscore characters are allowed."
            )
    if not app_identifier:
        raise AppIdentifierError("Apple app identifier is empty.")
    return app_identifier


def get_app_identifier(game_settings, platform_settings):
    return make_app_identifier(
        platform_settings.app_identifier,
        game_settings.product_name,
        game_settings.company_name,
    )
