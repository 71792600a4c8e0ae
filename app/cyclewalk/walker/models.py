"""Walker domain models for entry classification and cycle reporting.

This module defines the core data structures produced while walking a
directory tree: classified entries, visit records, cycle reports and
per-entry errors, plus the aggregated result of one walk.
"""

from dataclasses import dataclass, field
from enum import Enum


class EntryKind(str, Enum):
    """Kind of a classified filesystem entry.

    Symbolic links are refined by what their fully resolved target is,
    so the walker can switch on a single tag.

    Attributes:
        FILE: Regular file (or any non-directory, non-link entry).
        DIRECTORY: Real directory.
        SYMLINK_TO_DIRECTORY: Link whose resolved target is a directory.
        SYMLINK_TO_FILE: Link whose resolved target is not a directory.
        SYMLINK_BROKEN: Link whose target does not exist.
        SYMLINK_LOOP: Link whose own chain never resolves.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK_TO_DIRECTORY = "symlink_to_directory"
    SYMLINK_TO_FILE = "symlink_to_file"
    SYMLINK_BROKEN = "symlink_broken"
    SYMLINK_LOOP = "symlink_loop"

    @property
    def is_symlink(self) -> bool:
        """Whether this kind describes a symbolic link."""
        return self not in (EntryKind.FILE, EntryKind.DIRECTORY)


class ErrorKind(str, Enum):
    """Classification of walk failures.

    Attributes:
        NOT_FOUND: Path does not exist.
        NOT_A_DIRECTORY: Walk root is not a directory.
        PERMISSION_DENIED: Path cannot be inspected or listed.
        BROKEN_LINK: Link resolution hit a missing component.
        RESOLUTION_CYCLE: Link chain exceeded the hop limit.
    """

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    BROKEN_LINK = "broken_link"
    RESOLUTION_CYCLE = "resolution_cycle"

    @property
    def is_fatal(self) -> bool:
        """Whether this kind aborts the whole walk when it hits the root."""
        return self in (ErrorKind.NOT_FOUND, ErrorKind.NOT_A_DIRECTORY)


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A classified filesystem entry.

    Attributes:
        path: Path as it was reached (not resolved).
        kind: Classified kind of the entry.
        link_target: Immediate target of a symlink as stored in the link.
        identity: Canonical identity of a resolvable symlink's target.
    """

    path: str
    kind: EntryKind
    link_target: str | None = None
    identity: str | None = None

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.link_target is not None and not self.kind.is_symlink:
            msg = f"Only symlinks carry a link target, got {self.kind.value}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class VisitRecord:
    """A path visited during a walk.

    Attributes:
        path: Visited path (directories are reported by identity).
        is_directory: True for directories, False for files.
    """

    path: str
    is_directory: bool


@dataclass(frozen=True, slots=True)
class CycleReport:
    """A traversal edge that resolved to an already visited directory.

    Attributes:
        path: Path of the entry that triggered the revisit.
        identity: Canonical identity it resolved to.
    """

    path: str
    identity: str


@dataclass(frozen=True, slots=True)
class EntryError:
    """A non-fatal failure on a single entry.

    Attributes:
        path: Path of the failing entry.
        kind: Failure classification.
        message: Human-readable description.
    """

    path: str
    kind: ErrorKind
    message: str


WalkEvent = VisitRecord | CycleReport | EntryError


@dataclass(slots=True)
class WalkResult:
    """Aggregated output of one walk.

    Attributes:
        root: Canonical identity of the walk root.
        visits: Visited paths in traversal order.
        cycles: Cycle reports in detection order.
        errors: Non-fatal entry errors in encounter order.
    """

    root: str
    visits: list[VisitRecord] = field(default_factory=lambda: [])
    cycles: list[CycleReport] = field(default_factory=lambda: [])
    errors: list[EntryError] = field(default_factory=lambda: [])

    def add(self, event: WalkEvent) -> None:
        """Append an event to the matching sequence."""
        if isinstance(event, VisitRecord):
            self.visits.append(event)
        elif isinstance(event, CycleReport):
            self.cycles.append(event)
        else:
            self.errors.append(event)

    @property
    def visited_directories(self) -> list[str]:
        """Identities of all directories entered, in traversal order."""
        return [v.path for v in self.visits if v.is_directory]

    @property
    def visited_files(self) -> list[str]:
        """Paths of all files recorded, in traversal order."""
        return [v.path for v in self.visits if not v.is_directory]

    @property
    def cycle_identities(self) -> set[str]:
        """Distinct identities that were revisited."""
        return {c.identity for c in self.cycles}

    @property
    def has_cycles(self) -> bool:
        """Whether any cycle was detected."""
        return bool(self.cycles)
