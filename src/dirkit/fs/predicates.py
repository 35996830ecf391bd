"""Existence and type checks for filesystem paths."""

from __future__ import annotations

import os


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True if path is an existing directory.

    Returns False when it is a file, does not exist, or cannot be probed.
    """
    return os.path.isdir(path)


def is_exist(path: str | os.PathLike[str]) -> bool:
    """Return True if anything, including a dangling symlink, exists at path."""
    try:
        os.lstat(path)
    except (OSError, ValueError):
        return False
    return True
