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

"""iOS platform cooker."""

from .app_identifier import AppIdentifierError, make_app_identifier
from .ios_platform_tools import IosPlatformTools

__all__ = ['AppIdentifierError', 'IosPlatformTools', 'make_app_identifier']
