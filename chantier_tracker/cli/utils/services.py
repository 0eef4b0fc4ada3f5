"""Helpers shared by CLI commands to build services from options."""

import datetime as dt
from typing import Optional

import click

from chantier_tracker.cli.error_handlers import ConfigurationError
from chantier_tracker.config.settings import ChantierTrackerConfig
from chantier_tracker.models.session import Session
from chantier_tracker.readers.json_record_source import JsonRecordSource
from chantier_tracker.services.report_service import ReportService


def parse_date_option(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[dt.date]:
    """Click callback parsing a YYYY-MM-DD option."""
    if value is None:
        return None
    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"Invalid date: {value}. Expected YYYY-MM-DD")


def build_report_service(
    data_file: Optional[str], settings: ChantierTrackerConfig
) -> ReportService:
    """Load the JSON data file (option or configured default)."""
    path = data_file or settings.data_file
    return ReportService(JsonRecordSource.from_file(path))


def resolve_session(
    user_id: Optional[str], settings: ChantierTrackerConfig, required: bool = False
) -> Optional[Session]:
    """Build the session from --user or the configured USER_ID.

    Raises:
        ConfigurationError: If required and no user id is available
    """
    effective = user_id or settings.user_id
    if effective is None:
        if required:
            raise ConfigurationError(
                "No user id given",
                recovery_hint="Pass --user or set USER_ID in your .env file",
            )
        return None
    return Session(user_id=effective)
