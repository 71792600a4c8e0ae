"""Filesystem access used by the classifier and walker.

This module defines the FilesystemAccess interface the walker reads
metadata through, and the LocalFilesystem implementation backed by
the operating system.
"""

import os
import stat
from abc import ABC, abstractmethod
from enum import Enum


class NodeType(str, Enum):
    """Raw type of a filesystem node, as reported without following links."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class FilesystemAccess(ABC):
    """Abstract interface for reading filesystem metadata.

    Implementations report failures with the built-in OSError subclasses
    (FileNotFoundError, NotADirectoryError, PermissionError) so callers
    can classify them uniformly.

    Example:
        >>> fs = LocalFilesystem()
        >>> for name in fs.list_dir("/etc"):
        ...     print(name, fs.node_type(f"/etc/{name}"))
    """

    @abstractmethod
    def node_type(self, path: str) -> NodeType:
        """Return the type of path without following a trailing symlink.

        Raises:
            FileNotFoundError: If the path does not exist.
            NotADirectoryError: If a parent component is not a directory.
            PermissionError: If the path cannot be inspected.
        """

    @abstractmethod
    def read_link(self, path: str) -> str:
        """Return the immediate target stored in a symlink."""

    @abstractmethod
    def list_dir(self, path: str) -> list[str]:
        """Return the names of the immediate children of a directory.

        The order must be stable for an unmodified directory.
        """


class LocalFilesystem(FilesystemAccess):
    """FilesystemAccess backed by the os module.

    Children are listed in sorted order so walks are deterministic
    regardless of the underlying directory order.
    """

    def node_type(self, path: str) -> NodeType:
        mode = os.lstat(path).st_mode
        if stat.S_ISLNK(mode):
            return NodeType.SYMLINK
        if stat.S_ISDIR(mode):
            return NodeType.DIRECTORY
        return NodeType.FILE

    def read_link(self, path: str) -> str:
        return os.readlink(path)

    def list_dir(self, path: str) -> list[str]:
        return sorted(os.listdir(path))
