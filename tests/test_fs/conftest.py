"""Shared fixtures for directory listing and copy tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


def write_files(root: Path, files: dict[str, str]) -> None:
    """Create files (and their parent directories) below root."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file below root (relative posix path) to its bytes."""
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in root.rglob("*") if p.is_file()}


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """A small tree: a.txt, b/c.txt, b/d/e.txt, an empty dir and a dotfile."""
    root = tmp_path / "src"
    root.mkdir()
    write_files(
        root,
        {
            "a.txt": "alpha",
            "b/c.txt": "charlie",
            "b/d/e.txt": "echo",
            ".hidden": "secret",
        },
    )
    (root / "empty").mkdir()
    return root
