"""Walker configuration commands.

Provides commands to display the effective walker configuration and
to write a default configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table
from rich.text import Text

from cyclewalk.core.paths import get_config_path
from cyclewalk.utils.formatting import console, print_error, print_info, print_success
from cyclewalk.walker.config import (
    WalkerConfig,
    WalkerConfigError,
    load_walker_config,
    save_walker_config,
)

app = typer.Typer(
    help="Show or initialize the walker configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file to read."),
    ] = None,
) -> None:
    """Display the effective walker configuration."""
    path = config_path or get_config_path()
    try:
        config = load_walker_config(path)
    except WalkerConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(path) if path.exists() else f"{path} (not found, using defaults)"

    table = Table(title="Walker Configuration", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("max_hops", str(config.max_hops))
    table.add_row("follow_symlinks", str(config.follow_symlinks).lower())
    table.add_row("include_files", str(config.include_files).lower())
    table.add_row("exclude", Text(", ".join(config.exclude) or "-"))

    console.print(table)
    console.print(Text(f"Source: {source}", style="muted"))


@app.command()
def init(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file to write."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_walker_config(WalkerConfig(), path)
    except WalkerConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
