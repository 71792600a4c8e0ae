"""CLI package for cyclewalk.

This package contains the Typer application and all subcommands.
"""

from cyclewalk.cli.main import app

__all__ = ["app"]
