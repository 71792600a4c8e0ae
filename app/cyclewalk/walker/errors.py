"""Exceptions raised while classifying entries and walking trees."""

from cyclewalk.walker.models import EntryError, ErrorKind


class WalkError(Exception):
    """Base exception for walk failures.

    Attributes:
        path: Path the failure refers to.
        kind: Failure classification.
    """

    kind: ErrorKind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(message)

    def to_entry_error(self) -> EntryError:
        """Convert to a non-fatal entry error record."""
        return EntryError(path=self.path, kind=self.kind, message=self.message)


class EntryNotFoundError(WalkError):
    """Raised when a path does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(path, f"No such file or directory: {path}")


class RootNotADirectoryError(WalkError):
    """Raised when the walk root is not a directory."""

    kind = ErrorKind.NOT_A_DIRECTORY

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Not a directory: {path}")


class EntryPermissionError(WalkError):
    """Raised when a path cannot be inspected or listed."""

    kind = ErrorKind.PERMISSION_DENIED

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Permission denied: {path}")


class BrokenLinkError(WalkError):
    """Raised when link resolution reaches a missing component."""

    kind = ErrorKind.BROKEN_LINK

    def __init__(self, path: str, missing: str) -> None:
        self.missing = missing
        super().__init__(path, f"Broken link: {path} (cannot resolve {missing})")


class ResolutionCycleError(WalkError):
    """Raised when a path's own link chain exceeds the hop limit."""

    kind = ErrorKind.RESOLUTION_CYCLE

    def __init__(self, path: str, max_hops: int) -> None:
        self.max_hops = max_hops
        super().__init__(path, f"Too many levels of symbolic links ({max_hops}): {path}")
