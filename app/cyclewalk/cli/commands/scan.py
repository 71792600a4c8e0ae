"""Scan command implementation.

Walks a directory tree and reports symlink cycles.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer

from cyclewalk.models.report import WalkReport
from cyclewalk.utils.formatting import (
    console,
    create_cycle_table,
    create_visits_table,
    format_entry_error,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from cyclewalk.walker.config import WalkerConfig, WalkerConfigError, load_walker_config
from cyclewalk.walker.errors import WalkError
from cyclewalk.walker.models import WalkResult
from cyclewalk.walker.walker import CycleWalker

# Exit code when --fail-on-cycle is set and cycles were found
CYCLES_FOUND_EXIT_CODE = 2


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def scan(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Argument(help="Directory to walk."),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the walk report to a JSON file.",
        ),
    ] = None,
    show_visits: Annotated[
        bool,
        typer.Option(
            "--visits",
            help="Also list every visited path.",
        ),
    ] = False,
    max_hops: Annotated[
        int | None,
        typer.Option(
            "--max-hops",
            min=1,
            max=255,
            help="Symlink hop limit per path.",
        ),
    ] = None,
    no_follow: Annotated[
        bool,
        typer.Option(
            "--no-follow",
            help="Do not follow symlinks to directories.",
        ),
    ] = False,
    no_files: Annotated[
        bool,
        typer.Option(
            "--no-files",
            help="Do not record regular files as visits.",
        ),
    ] = False,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-x",
            help="Skip entries whose name matches this glob (repeatable).",
        ),
    ] = None,
    fail_on_cycle: Annotated[
        bool,
        typer.Option(
            "--fail-on-cycle",
            help=f"Exit with code {CYCLES_FOUND_EXIT_CODE} if any cycle is found.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Walker config file (default: ~/.config/cyclewalk/config.toml).",
        ),
    ] = None,
) -> None:
    """Walk ROOT and display every entry that loops back to a visited directory.

    Examples:
        cyclewalk scan /srv/data                  # Table of cycles
        cyclewalk scan /srv/data --format json    # Output as JSON
        cyclewalk scan . --visits                 # Also list visited paths
        cyclewalk scan . -x .git -x node_modules  # Skip matching entries
        cyclewalk scan . --fail-on-cycle          # Non-zero exit on cycles
    """
    quiet = bool((ctx.obj or {}).get("quiet", False))

    try:
        config = load_walker_config(config_path)
    except WalkerConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    config = _apply_overrides(
        config,
        max_hops=max_hops,
        no_follow=no_follow,
        no_files=no_files,
        exclude=exclude or [],
    )

    walker = CycleWalker(config=config)
    try:
        result = walker.walk(root)
    except WalkError as e:
        print_error(e.message)
        raise typer.Exit(code=1) from e

    for error in result.errors:
        print_warning(format_entry_error(error))

    report = WalkReport.create(result, include_visits=show_visits)

    if export_path is not None:
        _export_report(report, export_path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(report.to_dict()))
    else:
        _print_tables(result, show_visits=show_visits, quiet=quiet)

    if fail_on_cycle and result.has_cycles:
        raise typer.Exit(code=CYCLES_FOUND_EXIT_CODE)


def _apply_overrides(
    config: WalkerConfig,
    *,
    max_hops: int | None,
    no_follow: bool,
    no_files: bool,
    exclude: list[str],
) -> WalkerConfig:
    """Merge command-line flags into a loaded config."""
    update: dict[str, Any] = {}
    if max_hops is not None:
        update["max_hops"] = max_hops
    if no_follow:
        update["follow_symlinks"] = False
    if no_files:
        update["include_files"] = False
    if exclude:
        update["exclude"] = [*config.exclude, *exclude]
    if not update:
        return config
    return WalkerConfig.model_validate({**config.model_dump(), **update})


def _print_tables(result: WalkResult, *, show_visits: bool, quiet: bool) -> None:
    """Display walk results as Rich tables."""
    if show_visits:
        console.print(create_visits_table(result.visits))

    if result.has_cycles:
        console.print(create_cycle_table(result.cycles))
    else:
        print_success(f"No cycles found under {result.root}")

    if quiet:
        return

    console.print(
        f"\n[muted]Walked {len(result.visited_directories)} directories "
        f"and {len(result.visited_files)} files: "
        f"{len(result.cycles)} cycle(s), {len(result.errors)} error(s)[/muted]"
    )


def _export_report(report: WalkReport, export_path: Path) -> None:
    """Write the walk report to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(report.to_dict(), indent=2))
        print_info(f"Report exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
