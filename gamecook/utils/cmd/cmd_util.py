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

import shlex
import subprocess
import sys
import time
from threading import Timer

# exit code reported when the executable cannot be found
COMMAND_NOT_FOUND = 127


def decode_bytes(input: bytes) -> str:
    """
    Decode bytes to string with fallback encoding support.

    Attempts UTF-8 decoding first, falls back to GBK for Chinese Windows systems.
    """
    if not input:
        return ""
    try:
        return bytes.decode(input, "UTF-8")
    except UnicodeDecodeError:
        return bytes.decode(input, "GBK", errors="replace")


def exec_command(args, timeout_second=None, cwd=None):
    """
    Run a command without a shell and capture its combined output.

    Args:
        args: Program and arguments as a list, e.g. ["install_name_tool", "-id", ...]
        timeout_second: Kill the child after this many seconds (None waits forever)
        cwd: Working directory for the child process

    Returns:
        tuple: (exit_code, output_message)
            - exit_code: return code of the process, COMMAND_NOT_FOUND when
              the program is missing, -9 when killed by the timeout
            - output_message: combined stdout/stderr as decoded string
    """
    start_mills = int(time.time() * 1000)
    try:
        popen = subprocess.Popen(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except FileNotFoundError as e:
        return COMMAND_NOT_FOUND, f"Command not found: {args[0]} ({e})"
    except PermissionError as e:
        return COMMAND_NOT_FOUND, f"Command not executable: {args[0]} ({e})"

    timer = None
    if timeout_second is not None:
        timer = Timer(timeout_second, lambda process: process.kill(), [popen])
    try:
        if timer:
            timer.start()
        stdout, _ = popen.communicate()
    finally:
        if timer:
            timer.cancel()
    err_code = popen.returncode
    err_msg = decode_bytes(stdout)
    if err_code == -9 and not err_msg:
        use_time = int(time.time() * 1000) - start_mills
        err_msg = f"Failed for timeout({err_code}), use_time: {use_time}ms"
    return err_code, err_msg


def format_command(args):
    """Render an argument list as a copy-pasteable command line."""
    if sys.platform.startswith("win"):
        return subprocess.list2cmdline(args)
    return " ".join(shlex.quote(str(arg)) for arg in args)
