"""Recursive directory listing and directory tree copy."""

from __future__ import annotations

from .errors import DestinationExistsError, DirectoryNotFoundError, DirkitError
from .fs.file_copy import copy_file
from .fs.listing import DIR_MARKER, stat_dir
from .fs.predicates import is_dir, is_exist
from .fs.tree_copy import copy_dir
from .types import CopyReport, CopyStats, StatReport

__all__ = [
    # errors
    "DestinationExistsError",
    "DirectoryNotFoundError",
    "DirkitError",
    # file_copy
    "copy_file",
    # listing
    "DIR_MARKER",
    "stat_dir",
    # predicates
    "is_dir",
    "is_exist",
    # tree_copy
    "copy_dir",
    # types
    "CopyReport",
    "CopyStats",
    "StatReport",
]
