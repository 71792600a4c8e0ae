"""Cycle-aware directory walking.

This module provides entry classification, hop-bounded path
canonicalization, and the depth-first walker that reports symlink
cycles.
"""

from cyclewalk.walker.classifier import DEFAULT_MAX_HOPS, EntryClassifier
from cyclewalk.walker.config import WalkerConfig, load_walker_config, save_walker_config
from cyclewalk.walker.errors import (
    BrokenLinkError,
    EntryNotFoundError,
    EntryPermissionError,
    ResolutionCycleError,
    RootNotADirectoryError,
    WalkError,
)
from cyclewalk.walker.filesystem import FilesystemAccess, LocalFilesystem, NodeType
from cyclewalk.walker.models import (
    CycleReport,
    DirectoryEntry,
    EntryError,
    EntryKind,
    ErrorKind,
    VisitRecord,
    WalkEvent,
    WalkResult,
)
from cyclewalk.walker.walker import CycleWalker

__all__ = [
    "DEFAULT_MAX_HOPS",
    "BrokenLinkError",
    "CycleReport",
    "CycleWalker",
    "DirectoryEntry",
    "EntryClassifier",
    "EntryError",
    "EntryKind",
    "EntryNotFoundError",
    "EntryPermissionError",
    "ErrorKind",
    "FilesystemAccess",
    "LocalFilesystem",
    "NodeType",
    "ResolutionCycleError",
    "RootNotADirectoryError",
    "VisitRecord",
    "WalkError",
    "WalkEvent",
    "WalkResult",
    "WalkerConfig",
    "load_walker_config",
    "save_walker_config",
]
