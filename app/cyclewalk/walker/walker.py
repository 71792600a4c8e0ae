"""Cycle-detecting directory walker.

Walks a directory tree depth-first, following symbolic links to
directories, and reports every traversal edge that resolves to a
directory identity already entered during the same walk.
"""

import fnmatch
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from cyclewalk.walker.classifier import EntryClassifier
from cyclewalk.walker.config import WalkerConfig
from cyclewalk.walker.errors import (
    BrokenLinkError,
    EntryNotFoundError,
    EntryPermissionError,
    ResolutionCycleError,
    RootNotADirectoryError,
    WalkError,
)
from cyclewalk.walker.filesystem import FilesystemAccess, LocalFilesystem
from cyclewalk.walker.models import (
    CycleReport,
    EntryError,
    EntryKind,
    VisitRecord,
    WalkEvent,
    WalkResult,
)

logger = logging.getLogger(__name__)


class CycleWalker:
    """Depth-first walker with symlink cycle detection.

    Every directory is entered at most once per walk, keyed by its
    canonical identity. A directory or followed symlink resolving to an
    identity already entered on any branch yields a CycleReport instead
    of being descended again.

    The walker holds no per-walk state, so one instance can run any
    number of independent walks.

    Args:
        filesystem: Metadata source. Defaults to the local filesystem.
        config: Walk options. Defaults to WalkerConfig().

    Example:
        >>> result = CycleWalker().walk("/srv/data")
        >>> for cycle in result.cycles:
        ...     print(f"{cycle.path} -> {cycle.identity}")
    """

    def __init__(
        self,
        filesystem: FilesystemAccess | None = None,
        config: WalkerConfig | None = None,
    ) -> None:
        self._fs = filesystem or LocalFilesystem()
        self._config = config or WalkerConfig()
        self._classifier = EntryClassifier(self._fs, max_hops=self._config.max_hops)

    @property
    def config(self) -> WalkerConfig:
        return self._config

    def walk(self, root: str | Path) -> WalkResult:
        """Walk a tree and collect all events.

        Args:
            root: Directory to start from.

        Returns:
            WalkResult with visits, cycles and entry errors.

        Raises:
            WalkError: If the root itself cannot be walked.
        """
        identity = self._open_root(os.fspath(root))
        result = WalkResult(root=identity)
        for event in self._walk_from(identity):
            result.add(event)

        logger.debug(
            "Walk of %s finished: %d visits, %d cycles, %d errors",
            identity,
            len(result.visits),
            len(result.cycles),
            len(result.errors),
        )
        return result

    def iter_events(self, root: str | Path) -> Iterator[WalkEvent]:
        """Lazily walk a tree, yielding events in traversal order.

        Enumeration only advances as events are consumed; abandoning the
        iterator stops the walk. Every root failure, including an
        unreadable root listing, is raised on the first call to next().

        Args:
            root: Directory to start from.

        Yields:
            VisitRecord, CycleReport and EntryError events.

        Raises:
            WalkError: If the root itself cannot be walked.
        """
        identity = self._open_root(os.fspath(root))
        yield from self._walk_from(identity)

    def _open_root(self, root: str) -> str:
        """Classify and canonicalize the walk root.

        Raises:
            EntryNotFoundError: If the root does not exist.
            RootNotADirectoryError: If the root does not resolve to a directory.
            WalkError: For any other failure on the root.
        """
        entry = self._classifier.classify(root)

        if entry.kind == EntryKind.DIRECTORY:
            return self._classifier.canonicalize(root)
        if entry.kind == EntryKind.SYMLINK_TO_DIRECTORY and entry.identity is not None:
            return entry.identity
        if entry.kind == EntryKind.SYMLINK_BROKEN:
            raise BrokenLinkError(root, entry.link_target or root)
        if entry.kind == EntryKind.SYMLINK_LOOP:
            raise ResolutionCycleError(root, self._classifier.max_hops)
        raise RootNotADirectoryError(root)

    def _walk_from(self, root: str) -> Iterator[WalkEvent]:
        """Depth-first traversal from a canonical root.

        Uses an explicit stack of child iterators instead of recursion;
        the event order is the same as a recursive pre-order walk.
        """
        # Root listing failures are fatal and precede the first event
        stack: list[Iterator[str]] = [iter(self._list_children(root))]
        visited: set[str] = {root}
        yield VisitRecord(path=root, is_directory=True)

        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                continue

            event, identity = self._step(child, visited)
            if event is not None:
                yield event
            if identity is None:
                continue

            visited.add(identity)
            yield VisitRecord(path=identity, is_directory=True)
            try:
                stack.append(iter(self._list_children(identity)))
            except WalkError as e:
                yield self._entry_error(e)

    def _step(self, path: str, visited: set[str]) -> tuple[WalkEvent | None, str | None]:
        """Process one child entry.

        Returns:
            Tuple of (event to emit, identity to descend into).
        """
        if self._is_excluded(path):
            logger.debug("Excluded: %s", path)
            return None, None

        try:
            entry = self._classifier.classify(path)
        except WalkError as e:
            return self._entry_error(e), None

        if entry.kind == EntryKind.FILE:
            if self._config.include_files:
                return VisitRecord(path=path, is_directory=False), None
            return None, None

        if entry.kind == EntryKind.DIRECTORY:
            # Children are listed under a canonical parent, so a real
            # directory entry is already its own identity
            identity = path
        elif entry.kind == EntryKind.SYMLINK_TO_DIRECTORY and entry.identity is not None:
            if not self._config.follow_symlinks:
                logger.debug("Not following symlink: %s -> %s", path, entry.link_target)
                return None, None
            identity = entry.identity
        elif entry.kind == EntryKind.SYMLINK_BROKEN:
            return self._entry_error(BrokenLinkError(path, entry.link_target or path)), None
        elif entry.kind == EntryKind.SYMLINK_LOOP:
            return self._entry_error(ResolutionCycleError(path, self._classifier.max_hops)), None
        else:
            # Links to files carry no traversal edges
            return None, None

        if identity in visited:
            logger.info("Cycle detected: %s -> %s", path, identity)
            return CycleReport(path=path, identity=identity), None
        return None, identity

    def _list_children(self, directory: str) -> list[str]:
        try:
            names = self._fs.list_dir(directory)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise EntryNotFoundError(directory) from e
        except PermissionError as e:
            raise EntryPermissionError(directory) from e
        return [os.path.join(directory, name) for name in names]

    def _is_excluded(self, path: str) -> bool:
        name = os.path.basename(path)
        return any(fnmatch.fnmatch(name, pattern) for pattern in self._config.exclude)

    @staticmethod
    def _entry_error(error: WalkError) -> EntryError:
        logger.warning("Skipping %s: %s", error.path, error.message)
        return error.to_entry_error()
