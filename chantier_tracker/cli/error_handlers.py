"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from chantier_tracker.cli.utils.formatters import format_error, format_warning
from chantier_tracker.errors import RecordSourceError, SiteNotFoundError


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Print a user-friendly message for an error and pick an exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code: 1 configuration, 2 data file, 3 unknown site,
        130 cancelled, 255 unexpected
    """
    if isinstance(error, ConfigurationError):
        click.echo(format_error(f"Configuration Error: {error.message}"))
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"))
        return 1

    elif isinstance(error, ValidationError):
        click.echo(format_error("Configuration Error: invalid settings"))
        for detail in error.errors():
            location = ".".join(str(part) for part in detail["loc"])
            click.echo(f"  {location}: {detail['msg']}")
        return 1

    elif isinstance(error, RecordSourceError):
        click.echo(format_error(f"Data Error: {error}"))
        click.echo(
            format_warning("Hint: Check --data or DATA_FILE points to a JSON export")
        )
        return 2

    elif isinstance(error, SiteNotFoundError):
        click.echo(format_error(str(error)))
        click.echo(format_warning("Hint: Run 'chantier-cli sites' to list site ids"))
        return 3

    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130  # Standard exit code for SIGINT

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
        click.echo(str(error))

        if debug:
            click.echo("\nFull stack trace:")
            click.echo(traceback.format_exc())
        else:
            click.echo(format_warning("\nRun with --debug flag for full stack trace"))

        return 255


class ErrorHandler:
    """Context manager turning exceptions into messages and exit codes."""

    def __init__(self, show_debug: bool):
        self.show_debug = show_debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # click.exceptions.Exit and UsageError are click's own control flow
        if exc_val is None or isinstance(
            exc_val, (click.exceptions.Exit, click.UsageError)
        ):
            return False
        exit_code = handle_cli_error(exc_val, self.show_debug)
        sys.exit(exit_code)


def with_error_handling(debug: bool = False) -> ErrorHandler:
    """
    Wrap a command body with standardized error handling.

    Example:
        @click.command()
        @click.pass_context
        def my_command(ctx):
            with with_error_handling(is_debug(ctx)):
                ...
    """
    return ErrorHandler(debug)


def is_debug(ctx: click.Context) -> bool:
    """Read the group-level --debug flag (False when run standalone)."""
    return bool(ctx.obj and ctx.obj.get("debug"))
