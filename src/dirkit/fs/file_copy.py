"""Single-file copy primitive."""

from __future__ import annotations

import os
import shutil


def copy_file(src: str | os.PathLike[str], dest: str | os.PathLike[str]) -> int:
    """Copy the bytes of src to dest and return how many were written.

    dest is created or truncated. Errors from the underlying open/read/write
    calls propagate unchanged.
    """
    with open(src, "rb") as fsrc, open(dest, "wb") as fdest:
        shutil.copyfileobj(fsrc, fdest)
        return fdest.tell()
