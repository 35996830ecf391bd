"""Depth-first listing of a directory tree as root-relative paths."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dirkit.errors import DirectoryNotFoundError
from dirkit.fs.predicates import is_dir
from dirkit.infrastructure.logger import logger

if TYPE_CHECKING:
    from collections.abc import Iterator

DIR_MARKER = "/"


def _join_label(prefix: str, name: str) -> str:
    return f"{prefix}{DIR_MARKER}{name}" if prefix else name


def _read_entries(dir_path: str) -> list[os.DirEntry[str]]:
    logger.debug("Reading directory", path=dir_path)
    with os.scandir(dir_path) as it:
        return list(it)


def _walk(root: str, include_dirs: bool) -> list[str]:
    """Pre-order walk driven by an explicit stack instead of recursion.

    Each frame pairs the remaining entries of one open level with that
    level's label relative to the traversal root ("" for the root itself).
    The on-disk path of a child is always entry.path, so the two frames
    never share state.
    """
    listing: list[str] = []
    stack: list[tuple[Iterator[os.DirEntry[str]], str]] = [(iter(_read_entries(root)), "")]

    while stack:
        entries, rel_prefix = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        rel_path = _join_label(rel_prefix, entry.name)
        if entry.is_dir(follow_symlinks=False):
            if include_dirs:
                listing.append(rel_path + DIR_MARKER)
            stack.append((iter(_read_entries(entry.path)), rel_path))
        else:
            listing.append(rel_path)
    return listing


def stat_dir(dir_path: str | os.PathLike[str], include_dirs: bool = False) -> list[str]:
    """Gather the entries below dir_path, depth-first.

    Returns a list of paths relative to dir_path, which itself is never
    included. With include_dirs, subdirectories are listed too, suffixed
    with "/", each one ahead of its own contents. Sibling order is whatever
    the filesystem yields; nothing is sorted.

    Raises DirectoryNotFoundError if dir_path is not an existing directory.
    OSError from opening or reading any directory propagates unchanged.
    """
    root = os.fspath(dir_path)
    if not is_dir(root):
        logger.warning("Not a directory or does not exist", path=root)
        raise DirectoryNotFoundError(root)

    return _walk(root, include_dirs)
