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

"""gamecook - post-process cooked game builds into platform app projects."""

__version__ = "0.1.0"
