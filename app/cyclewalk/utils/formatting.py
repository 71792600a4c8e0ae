"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from cyclewalk.core.theme import get_theme
from cyclewalk.walker.models import CycleReport, EntryError, VisitRecord


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_cycle_table(cycles: list[CycleReport], title: str = "Detected Cycles") -> Table:
    """Create a table listing cycle reports.

    Args:
        cycles: Cycle reports in detection order.
        title: Table title.

    Returns:
        Rich Table with one row per report.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("#", min_width=3, justify="right", style="muted", no_wrap=True)
    table.add_column("Path", overflow="fold", style="symlink")
    table.add_column("Resolves To", overflow="fold", style="cycle")

    # Paths are arbitrary names, so cells are Text rather than markup
    for index, cycle in enumerate(cycles, start=1):
        table.add_row(str(index), Text(cycle.path), Text(cycle.identity))

    return table


def create_visits_table(visits: list[VisitRecord]) -> Table:
    """Create a table listing visited paths.

    Directories are highlighted; files are muted.
    """
    table = Table(
        title="Visited Paths",
        show_header=True,
        header_style="header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Type", width=5, justify="center")
    table.add_column("Path", overflow="fold")

    for visit in visits:
        if visit.is_directory:
            table.add_row("[directory]dir[/]", Text(visit.path, style="directory"))
        else:
            table.add_row("[muted]file[/]", Text(visit.path, style="file"))

    return table


def format_entry_error(error: EntryError) -> Text:
    """Format an entry error as a single styled line."""
    return Text.assemble((error.kind.value, "muted"), f" {error.path}: {error.message}")


def _plain(message: str | Text) -> str | Text:
    """Escape a plain-text message so bracketed names are printed as-is."""
    return message if isinstance(message, Text) else escape(message)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(message, style="info"))


def print_warning(message: str | Text) -> None:
    """Print a warning message."""
    err_console.print("[warning]Warning:[/]", _plain(message))


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print("[error]Error:[/]", _plain(message))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(message, style="success"))
