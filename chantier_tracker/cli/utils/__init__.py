"""CLI utility functions."""

from chantier_tracker.cli.utils.formatters import (
    format_error,
    format_info,
    format_stats,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_error",
    "format_info",
    "format_stats",
    "format_success",
    "format_table",
    "format_warning",
]
