"""Report models emitted by the command-line scripts."""

from __future__ import annotations

from pydantic import BaseModel


class StatReport(BaseModel):
    path: str
    include_dirs: bool
    entries: list[str]


class CopyReport(BaseModel):
    success: bool
    source: str
    destination: str
    directories: int = 0
    files: int = 0
    error: str | None = None


class CopyStats(BaseModel):
    directories: int = 0
    files: int = 0
