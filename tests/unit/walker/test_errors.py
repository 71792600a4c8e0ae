"""Tests for walker exceptions."""

import pytest
from cyclewalk.walker.errors import (
    BrokenLinkError,
    EntryNotFoundError,
    EntryPermissionError,
    ResolutionCycleError,
    RootNotADirectoryError,
    WalkError,
)
from cyclewalk.walker.models import EntryError, ErrorKind


class TestErrorHierarchy:
    """All walk errors share one base class."""

    @pytest.mark.parametrize(
        "error",
        [
            EntryNotFoundError("/r/x"),
            RootNotADirectoryError("/r/f"),
            EntryPermissionError("/r/locked"),
            BrokenLinkError("/r/link", "/r/missing"),
            ResolutionCycleError("/r/loop", 40),
        ],
    )
    def test_is_walk_error(self, error: WalkError) -> None:
        """Every error can be caught as WalkError."""
        with pytest.raises(WalkError):
            raise error


class TestErrorKinds:
    """Each error maps to exactly one ErrorKind."""

    def test_kinds(self) -> None:
        """Kinds match the failure they describe."""
        assert EntryNotFoundError("/x").kind == ErrorKind.NOT_FOUND
        assert RootNotADirectoryError("/x").kind == ErrorKind.NOT_A_DIRECTORY
        assert EntryPermissionError("/x").kind == ErrorKind.PERMISSION_DENIED
        assert BrokenLinkError("/x", "/y").kind == ErrorKind.BROKEN_LINK
        assert ResolutionCycleError("/x", 40).kind == ErrorKind.RESOLUTION_CYCLE


class TestMessages:
    """Error messages name the offending path."""

    def test_not_found_message(self) -> None:
        """EntryNotFoundError mentions the path."""
        error = EntryNotFoundError("/r/x")
        assert error.path == "/r/x"
        assert str(error) == "No such file or directory: /r/x"

    def test_broken_link_message(self) -> None:
        """BrokenLinkError mentions the link and what could not be resolved."""
        error = BrokenLinkError("/r/link", "/r/missing")
        assert error.missing == "/r/missing"
        assert "/r/link" in str(error)
        assert "/r/missing" in str(error)

    def test_resolution_cycle_message(self) -> None:
        """ResolutionCycleError mentions the hop limit."""
        error = ResolutionCycleError("/r/loop", 40)
        assert error.max_hops == 40
        assert "Too many levels of symbolic links (40)" in str(error)


class TestToEntryError:
    """Conversion to non-fatal entry error records."""

    def test_to_entry_error(self) -> None:
        """to_entry_error() keeps path, kind and message."""
        error = EntryPermissionError("/r/locked")
        assert error.to_entry_error() == EntryError(
            path="/r/locked",
            kind=ErrorKind.PERMISSION_DENIED,
            message="Permission denied: /r/locked",
        )
