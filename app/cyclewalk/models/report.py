"""Walk report model for JSON export.

This module defines the data structure for exporting walk results
to JSON with proper metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from cyclewalk.walker.models import CycleReport, EntryError, VisitRecord, WalkResult


@dataclass(frozen=True, slots=True)
class ReportMetadata:
    """Metadata for a walk report.

    Attributes:
        timestamp: ISO format timestamp when the walk was performed.
        hostname: Name of the machine that was walked.
        cyclewalk_version: Version of cyclewalk that performed the walk.
        root: Canonical identity of the walk root.
    """

    timestamp: str
    hostname: str
    cyclewalk_version: str
    root: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "hostname": self.hostname,
            "cyclewalk_version": self.cyclewalk_version,
            "root": self.root,
        }


@dataclass(frozen=True, slots=True)
class WalkReport:
    """Complete walk report for export.

    Attributes:
        metadata: Report metadata including timestamp and hostname.
        cycles: Cycle reports in detection order.
        errors: Non-fatal entry errors.
        visits: Visited paths (empty unless requested).
        summary: Count summary.
    """

    metadata: ReportMetadata
    cycles: list[CycleReport]
    errors: list[EntryError]
    visits: list[VisitRecord] = field(default_factory=lambda: [])
    summary: dict[str, int] = field(default_factory=lambda: {})

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metadata": self.metadata.to_dict(),
            "cycles": [{"path": c.path, "identity": c.identity} for c in self.cycles],
            "errors": [
                {"path": e.path, "kind": e.kind.value, "message": e.message}
                for e in self.errors
            ],
            "visits": [{"path": v.path, "is_directory": v.is_directory} for v in self.visits],
            "summary": self.summary,
        }

    @classmethod
    def create(cls, result: WalkResult, include_visits: bool = False) -> WalkReport:
        """Create a WalkReport with auto-generated metadata.

        Args:
            result: Completed walk result.
            include_visits: Whether to embed the full visit list.

        Returns:
            WalkReport with populated metadata and summary.
        """
        import socket

        from cyclewalk import __version__

        summary = {
            "directories": len(result.visited_directories),
            "files": len(result.visited_files),
            "cycles": len(result.cycles),
            "errors": len(result.errors),
        }

        metadata = ReportMetadata(
            timestamp=datetime.now(UTC).isoformat(),
            hostname=socket.gethostname(),
            cyclewalk_version=__version__,
            root=result.root,
        )

        return cls(
            metadata=metadata,
            cycles=list(result.cycles),
            errors=list(result.errors),
            visits=list(result.visits) if include_visits else [],
            summary=summary,
        )
