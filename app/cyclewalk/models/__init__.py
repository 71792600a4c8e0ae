"""Data models for cyclewalk.

This module exports the report model used for JSON export.
"""

from cyclewalk.models.report import ReportMetadata, WalkReport

__all__ = ["ReportMetadata", "WalkReport"]
