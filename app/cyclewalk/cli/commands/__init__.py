"""CLI commands for cyclewalk.

This package contains all subcommand implementations.
"""

from cyclewalk.cli.commands import config, scan

__all__ = ["config", "scan"]
