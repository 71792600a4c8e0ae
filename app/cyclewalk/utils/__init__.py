"""Utility modules for cyclewalk.

This module exports commonly used utility functions.
"""

from cyclewalk.utils.formatting import (
    console,
    create_cycle_table,
    create_visits_table,
    err_console,
    format_entry_error,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_cycle_table",
    "create_visits_table",
    "err_console",
    "format_entry_error",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
