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
File system helpers used by the platform cookers.

Covers the handful of operations a cooker needs on the build output:
- Deploying a project template directory
- Moving files with overwrite
- Recursive file listing and relative path conversion
- Token replacement inside a text file
"""

import os
import re
import shutil


def get_extension(file_path):
    """
    Get the extension of a file name without the leading dot.

    Only the text after the last dot of the file name counts, so
    "libgame.dylib" gives "dylib", "Game" gives "" and ".DS_Store" gives "DS_Store".
    """
    name = os.path.basename(file_path)
    dot = name.rfind(".")
    if dot == -1:
        return ""
    return name[dot + 1 :]


def copy_directory(src_dir, dst_dir, overwrite=True):
    """
    Deploy the template tree at src_dir into dst_dir.

    Every file is copied verbatim, whatever its name or content.

    Args:
        src_dir: Template directory to copy from
        dst_dir: Destination directory, created when missing
        overwrite: Replace files that already exist in dst_dir

    Returns:
        bool: True if the copy succeeded, False otherwise
    """
    if not os.path.isdir(src_dir):
        print(f"ERROR: Template directory not found: {src_dir}")
        return False
    try:
        shutil.copytree(src_dir, dst_dir, dirs_exist_ok=overwrite)
    except OSError as e:
        print(f"ERROR: Failed to copy {src_dir} to {dst_dir}: {e}")
        return False
    return True


def move_file(src, dst, overwrite=False):
    """
    Move a file, creating the destination directory as needed.

    Returns:
        bool: True if the file was moved, False if src is missing,
        dst exists and overwrite is False, or the move failed
    """
    if not os.path.isfile(src):
        return False
    if os.path.exists(dst):
        if not overwrite:
            return False
        os.remove(dst)
    os.makedirs(os.path.dirname(os.path.abspath(dst)), exist_ok=True)
    shutil.move(src, dst)
    return True


def get_files(path):
    """List every file below path recursively, in sorted order."""
    files = []
    for root, dirs, names in os.walk(path, followlinks=True):
        dirs.sort()
        for name in sorted(names):
            files.append(os.path.join(root, name))
    return files


def convert_absolute_path_to_relative(base_path, path):
    """Path of path relative to base_path, always with forward slashes."""
    return os.path.relpath(path, base_path).replace(os.sep, "/")


def replace_tokens(text, replace_map):
    """
    Replace every key of replace_map found in text with its value.

    All keys are matched in a single pass, so replacement values are never
    scanned again for other tokens. Longer keys win when keys overlap.
    """
    if not replace_map:
        return text
    keys = sorted(replace_map.keys(), key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda m: replace_map[m.group(0)], text)


def replace_in_file(file_path, replace_map):
    """
    Replace tokens inside a text file in place.

    Args:
        file_path: Path of the file to update
        replace_map: Dict of token -> replacement text

    Returns:
        bool: True if the file was updated, False if it could not be read or written
    """
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except OSError as e:
        print(f"ERROR: Cannot read {file_path}: {e}")
        return False

    content = replace_tokens(content, replace_map)

    try:
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        print(f"ERROR: Cannot write {file_path}: {e}")
        return False
    return True
