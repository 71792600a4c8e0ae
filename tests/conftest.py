"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from cyclewalk.walker.filesystem import LocalFilesystem, NodeType

# Tree layout: name -> nested dict (directory), str (file content),
# or ("link", target) for a symlink.
TreeLayout = dict[str, object]


def _build(base: Path, layout: TreeLayout) -> None:
    for name, node in layout.items():
        path = base / name
        if isinstance(node, dict):
            path.mkdir()
            _build(path, node)  # type: ignore[arg-type]
        elif isinstance(node, tuple):
            _, target = node
            os.symlink(target, path)
        else:
            path.write_text(str(node))


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Empty, fully resolved directory to build trees in."""
    base = tmp_path.resolve() / "root"
    base.mkdir()
    return base


@pytest.fixture
def build_tree(root: Path) -> Callable[[TreeLayout], Path]:
    """Factory that materializes a tree layout under the root fixture."""

    def _factory(layout: TreeLayout) -> Path:
        _build(root, layout)
        return root

    return _factory


class ReversedFilesystem(LocalFilesystem):
    """Lists children in reverse sorted order."""

    def list_dir(self, path: str) -> list[str]:
        return list(reversed(super().list_dir(path)))


class DeniedFilesystem(LocalFilesystem):
    """Raises PermissionError for a fixed set of paths."""

    def __init__(self, denied: set[str]) -> None:
        self.denied = denied

    def node_type(self, path: str) -> NodeType:
        if path in self.denied:
            raise PermissionError(13, "Permission denied", path)
        return super().node_type(path)

    def list_dir(self, path: str) -> list[str]:
        if path in self.denied:
            raise PermissionError(13, "Permission denied", path)
        return super().list_dir(path)


class UnlistableFilesystem(LocalFilesystem):
    """Inspects every path but refuses to list a fixed set of directories."""

    def __init__(self, unlistable: set[str]) -> None:
        self.unlistable = unlistable

    def list_dir(self, path: str) -> list[str]:
        if path in self.unlistable:
            raise PermissionError(13, "Permission denied", path)
        return super().list_dir(path)


class CountingFilesystem(LocalFilesystem):
    """Counts list_dir calls per path."""

    def __init__(self) -> None:
        self.listed: list[str] = []

    def list_dir(self, path: str) -> list[str]:
        self.listed.append(path)
        return super().list_dir(path)


@pytest.fixture
def reversed_fs() -> ReversedFilesystem:
    """Filesystem enumerating children in reverse order."""
    return ReversedFilesystem()


@pytest.fixture
def make_denied_fs() -> Callable[..., DeniedFilesystem]:
    """Factory for a filesystem that denies access to the given paths."""

    def _factory(*paths: str | Path) -> DeniedFilesystem:
        return DeniedFilesystem({str(p) for p in paths})

    return _factory


@pytest.fixture
def make_unlistable_fs() -> Callable[..., UnlistableFilesystem]:
    """Factory for a filesystem whose listing of the given paths fails."""

    def _factory(*paths: str | Path) -> UnlistableFilesystem:
        return UnlistableFilesystem({str(p) for p in paths})

    return _factory


@pytest.fixture
def counting_fs() -> CountingFilesystem:
    """Filesystem recording every directory listing."""
    return CountingFilesystem()
