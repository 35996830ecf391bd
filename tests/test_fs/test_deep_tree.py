"""Tests for listing and copying trees deeper than the recursion limit."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest

from dirkit.fs.listing import stat_dir
from dirkit.fs.tree_copy import copy_dir

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

DEPTH = sys.getrecursionlimit() + 100
LEVEL = "a"
LEAF = "leaf.txt"


def _build_chain(top: str, depth: int) -> None:
    """Create depth nested LEVEL dirs under top, one chdir at a time."""
    os.chdir(top)
    for _ in range(depth):
        os.mkdir(LEVEL)
        os.chdir(LEVEL)
    with open(LEAF, "w", encoding="utf-8") as f:
        f.write("bottom")


def _remove_chain(top: str, depth: int) -> None:
    """Delete a chain built by _build_chain bottom-up without recursion."""
    if not os.path.isdir(top):
        return
    os.chdir(top)
    levels = 0
    while levels < depth and os.path.isdir(LEVEL):
        os.chdir(LEVEL)
        levels += 1
    if os.path.exists(LEAF):
        os.remove(LEAF)
    for _ in range(levels):
        os.chdir(os.pardir)
        os.rmdir(LEVEL)


@pytest.mark.skipif(os.name != "posix", reason="relies on long POSIX paths")
class TestDeepTree:
    @pytest.fixture(autouse=True)
    def _setup(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
        monkeypatch.chdir(tmp_path)
        self.src = str(tmp_path / "deep")
        self.dest = str(tmp_path / "deep-copy")
        os.mkdir(self.src)
        _build_chain(self.src, DEPTH)
        os.chdir(tmp_path)
        yield
        _remove_chain(self.dest, DEPTH)
        _remove_chain(self.src, DEPTH)
        os.chdir(tmp_path)

    def test_stat_dir_lists_leaf_below_recursion_limit(self) -> None:
        assert stat_dir(self.src) == [f"{LEVEL}/" * DEPTH + LEAF]

    def test_stat_dir_marks_every_level_in_order(self) -> None:
        result = stat_dir(self.src, include_dirs=True)
        assert len(result) == DEPTH + 1
        assert result[0] == f"{LEVEL}/"
        assert result[DEPTH - 1] == f"{LEVEL}/" * DEPTH
        assert result[-1] == f"{LEVEL}/" * DEPTH + LEAF

    def test_copy_dir_replicates_deep_chain(self) -> None:
        stats = copy_dir(self.src, self.dest)

        assert stats.directories == DEPTH
        assert stats.files == 1
        with open(os.path.join(self.dest, f"{LEVEL}/" * DEPTH + LEAF), encoding="utf-8") as f:
            assert f.read() == "bottom"
