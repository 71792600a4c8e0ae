"""Entry classification and hop-bounded path canonicalization.

Classifies a single path with lstat semantics and resolves paths to
their canonical identity one component at a time, counting symlink
hops so that self-referencing or mutually referencing links terminate
with an error instead of looping.
"""

import logging
import os
from collections import deque

from cyclewalk.walker.errors import (
    BrokenLinkError,
    EntryNotFoundError,
    EntryPermissionError,
    ResolutionCycleError,
)
from cyclewalk.walker.filesystem import FilesystemAccess, LocalFilesystem, NodeType
from cyclewalk.walker.models import DirectoryEntry, EntryKind

logger = logging.getLogger(__name__)

# Matches the Linux MAXSYMLINKS limit
DEFAULT_MAX_HOPS = 40


class EntryClassifier:
    """Classifies entries and canonicalizes paths.

    Args:
        filesystem: Metadata source. Defaults to the local filesystem.
        max_hops: Maximum number of symlinks followed while resolving
            a single path.
    """

    def __init__(
        self,
        filesystem: FilesystemAccess | None = None,
        *,
        max_hops: int = DEFAULT_MAX_HOPS,
    ) -> None:
        if max_hops < 1:
            msg = f"max_hops must be positive, got {max_hops}"
            raise ValueError(msg)
        self._fs = filesystem or LocalFilesystem()
        self._max_hops = max_hops

    @property
    def max_hops(self) -> int:
        return self._max_hops

    def classify(self, path: str) -> DirectoryEntry:
        """Classify a path without following a trailing symlink.

        Symlinks are resolved to refine their kind: a link to a directory,
        a link to anything else, a dangling link, or a link whose chain
        exceeds the hop limit.

        Args:
            path: Path to classify.

        Returns:
            DirectoryEntry describing the path.

        Raises:
            EntryNotFoundError: If the path does not exist.
            EntryPermissionError: If the path cannot be inspected.
        """
        node = self._node_type(path)
        if node == NodeType.DIRECTORY:
            return DirectoryEntry(path=path, kind=EntryKind.DIRECTORY)
        if node == NodeType.FILE:
            return DirectoryEntry(path=path, kind=EntryKind.FILE)

        target = self._read_link(path)
        try:
            identity, resolved = self._resolve(path)
        except BrokenLinkError:
            return DirectoryEntry(path=path, kind=EntryKind.SYMLINK_BROKEN, link_target=target)
        except ResolutionCycleError:
            return DirectoryEntry(path=path, kind=EntryKind.SYMLINK_LOOP, link_target=target)

        kind = (
            EntryKind.SYMLINK_TO_DIRECTORY
            if resolved == NodeType.DIRECTORY
            else EntryKind.SYMLINK_TO_FILE
        )
        return DirectoryEntry(path=path, kind=kind, link_target=target, identity=identity)

    def canonicalize(self, path: str) -> str:
        """Resolve every symlink component of a path.

        Args:
            path: Path to resolve. Relative paths are taken from the
                current working directory.

        Returns:
            Absolute path with no symlink components.

        Raises:
            BrokenLinkError: If a component is missing or not a directory.
            ResolutionCycleError: If more than max_hops links were followed.
            EntryPermissionError: If a component cannot be inspected.
        """
        identity, _ = self._resolve(path)
        return identity

    def _resolve(self, path: str) -> tuple[str, NodeType]:
        """Resolve a path, returning its identity and the node type found there."""
        # No lexical normalization: ".." must apply to the resolved location
        absolute = path if os.path.isabs(path) else os.path.join(os.getcwd(), path)
        pending = deque(_split(absolute))
        resolved = os.sep
        node = NodeType.DIRECTORY
        hops = 0

        while pending:
            name = pending.popleft()
            if node != NodeType.DIRECTORY:
                raise BrokenLinkError(path, resolved)
            if name in ("", "."):
                continue
            if name == "..":
                resolved = os.path.dirname(resolved)
                continue

            candidate = os.path.join(resolved, name)
            try:
                node = self._fs.node_type(candidate)
            except (FileNotFoundError, NotADirectoryError) as e:
                raise BrokenLinkError(path, candidate) from e
            except PermissionError as e:
                raise EntryPermissionError(candidate) from e

            if node != NodeType.SYMLINK:
                resolved = candidate
                continue

            hops += 1
            if hops > self._max_hops:
                logger.debug("Hop limit reached resolving %s", path)
                raise ResolutionCycleError(path, self._max_hops)

            target = self._read_link(candidate)
            if os.path.isabs(target):
                resolved = os.sep
            pending.extendleft(reversed(_split(target)))
            node = NodeType.DIRECTORY

        return resolved, node

    def _node_type(self, path: str) -> NodeType:
        try:
            return self._fs.node_type(path)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise EntryNotFoundError(path) from e
        except PermissionError as e:
            raise EntryPermissionError(path) from e

    def _read_link(self, path: str) -> str:
        try:
            return self._fs.read_link(path)
        except FileNotFoundError as e:
            raise EntryNotFoundError(path) from e
        except PermissionError as e:
            raise EntryPermissionError(path) from e


def _split(path: str) -> list[str]:
    return path.split(os.sep)
