"""Recursive copy of a directory tree into a new location."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dirkit.errors import DestinationExistsError
from dirkit.fs import file_copy
from dirkit.fs.listing import DIR_MARKER, stat_dir
from dirkit.fs.predicates import is_exist
from dirkit.infrastructure.config import DIR_MODE
from dirkit.infrastructure.logger import logger
from dirkit.types import CopyStats

if TYPE_CHECKING:
    from collections.abc import Callable


def copy_dir(
    src_path: str | os.PathLike[str],
    dest_path: str | os.PathLike[str],
    *,
    copy_file: Callable[[str, str], int] = file_copy.copy_file,
) -> CopyStats:
    """Copy the tree under src_path into dest_path, which must not exist yet.

    Directories are created before any file they contain. The first error
    aborts the copy; whatever was already written under dest_path is left
    in place. Returns how many directories and files were created below
    dest_path.
    """
    src = os.fspath(src_path)
    dest = os.fspath(dest_path)

    if is_exist(dest):
        logger.warning("Copy destination already exists", destination=dest)
        raise DestinationExistsError(dest)

    os.mkdir(dest, DIR_MODE)

    entries = stat_dir(src, include_dirs=True)
    logger.info("Copying directory tree", source=src, destination=dest, entries=len(entries))

    stats = CopyStats()
    for entry in entries:
        if entry.endswith(DIR_MARKER):
            os.mkdir(os.path.join(dest, entry.rstrip(DIR_MARKER)), DIR_MODE)
            stats.directories += 1
        else:
            copy_file(os.path.join(src, entry), os.path.join(dest, entry))
            stats.files += 1

    logger.info(
        "Directory tree copied",
        source=src,
        destination=dest,
        directories=stats.directories,
        files=stats.files,
    )
    return stats
