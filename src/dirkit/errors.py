"""Precondition errors raised by the directory operations."""

from __future__ import annotations

from typing import Any


class DirkitError(Exception):
    """Base error for precondition failures.

    I/O failures are never wrapped in this type; they surface as the
    original ``OSError``.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class DirectoryNotFoundError(DirkitError):
    """The path given as a traversal root is not an existing directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"not a directory or does not exist: {path}", {"path": path})
        self.path = path


class DestinationExistsError(DirkitError):
    """The copy destination is already taken by a file or directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"file or directory already exists: {path}", {"path": path})
        self.path = path
