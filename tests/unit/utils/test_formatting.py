"""Unit tests for Rich formatting helpers."""

import pytest
from cyclewalk.core.theme import get_theme
from cyclewalk.utils.formatting import (
    create_cycle_table,
    create_visits_table,
    format_entry_error,
    print_error,
    print_success,
    print_warning,
)
from cyclewalk.walker.models import CycleReport, EntryError, ErrorKind, VisitRecord
from rich.console import Console


class TestCreateCycleTable:
    """Tests for create_cycle_table."""

    def test_columns_and_rows(self) -> None:
        """One row per cycle report, numbered from one."""
        table = create_cycle_table(
            [
                CycleReport(path="/r/a/up", identity="/r"),
                CycleReport(path="/r/b", identity="/r/a"),
            ]
        )

        assert table.title == "Detected Cycles"
        assert [c.header for c in table.columns] == ["#", "Path", "Resolves To"]
        assert table.row_count == 2
        assert list(table.columns[0].cells) == ["1", "2"]
        assert [cell.plain for cell in table.columns[2].cells] == ["/r", "/r/a"]

    def test_custom_title(self) -> None:
        """The title can be overridden."""
        assert create_cycle_table([], title="Loops").title == "Loops"


class TestCreateVisitsTable:
    """Tests for create_visits_table."""

    def test_marks_directories_and_files(self) -> None:
        """Rows are labelled dir or file."""
        table = create_visits_table(
            [
                VisitRecord(path="/r", is_directory=True),
                VisitRecord(path="/r/f.txt", is_directory=False),
            ]
        )

        types = list(table.columns[0].cells)
        assert table.row_count == 2
        assert "dir" in str(types[0])
        assert "file" in str(types[1])


class TestFormatEntryError:
    """Tests for format_entry_error."""

    def test_includes_kind_path_and_message(self) -> None:
        """The formatted line names the kind, path and message."""
        line = format_entry_error(
            EntryError(path="/r/bad", kind=ErrorKind.BROKEN_LINK, message="Broken link: /r/bad")
        )
        assert line.plain == "broken_link /r/bad: Broken link: /r/bad"

    def test_bracketed_path_is_literal(self) -> None:
        """Names that look like markup stay in the text."""
        line = format_entry_error(
            EntryError(path="/r/[/x]", kind=ErrorKind.BROKEN_LINK, message="Broken link: /r/[/x]")
        )
        assert "/r/[/x]:" in line.plain


class TestMarkupInPaths:
    """Paths containing square brackets render verbatim."""

    def _render(self, renderable: object) -> str:
        console = Console(record=True, width=200, theme=get_theme())
        console.print(renderable)
        return console.export_text()

    def test_cycle_table(self) -> None:
        """Cycle table cells are not parsed as markup."""
        table = create_cycle_table([CycleReport(path="/r/[bold]/up", identity="/r/a[/b]")])
        text = self._render(table)
        assert "/r/[bold]/up" in text
        assert "/r/a[/b]" in text

    def test_visits_table(self) -> None:
        """Visit table cells are not parsed as markup."""
        table = create_visits_table(
            [
                VisitRecord(path="/r/[red]", is_directory=True),
                VisitRecord(path="/r/[/x].txt", is_directory=False),
            ]
        )
        text = self._render(table)
        assert "/r/[red]" in text
        assert "/r/[/x].txt" in text

    def test_index_column_is_visible(self) -> None:
        """Row numbers survive long paths at narrow widths."""
        long_path = "/r/" + "d" * 120
        table = create_cycle_table([CycleReport(path=long_path, identity=long_path)])
        console = Console(record=True, width=80, theme=get_theme())
        console.print(table)
        assert " 1 " in console.export_text()

    def test_print_helpers_escape_messages(self, capsys: pytest.CaptureFixture[str]) -> None:
        """print_* helpers print bracketed text without raising."""
        print_error("Not a directory: /r/[/x]")
        print_warning("Broken link: /r/[bold]")
        print_success("No cycles found under /r/[italic]")

        captured = capsys.readouterr()
        assert "/r/[/x]" in captured.err
        assert "/r/[bold]" in captured.err
        assert "/r/[italic]" in captured.out
