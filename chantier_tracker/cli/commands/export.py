"""Export command."""

import datetime as dt
from typing import Optional

import click

from chantier_tracker.cli.error_handlers import is_debug, with_error_handling
from chantier_tracker.cli.utils.formatters import format_success
from chantier_tracker.cli.utils.services import (
    build_report_service,
    parse_date_option,
    resolve_session,
)
from chantier_tracker.config.settings import get_config
from chantier_tracker.writers.export_generator import count_exported_records
from chantier_tracker.writers.spreadsheet_writer import SpreadsheetWriter


@click.command(name="export")
@click.argument("site_id")
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    required=True,
    help="Destination CSV file",
)
@click.option("--data", "data_file", type=str, default=None, help="JSON data file")
@click.option("--user", "user_id", type=str, default=None, help="Owner user id")
@click.option(
    "--date",
    "day",
    type=str,
    default=None,
    callback=parse_date_option,
    help="Only this day (YYYY-MM-DD)",
)
@click.pass_context
def export_site(
    ctx: click.Context,
    site_id: str,
    output_path: str,
    data_file: Optional[str],
    user_id: Optional[str],
    day: Optional[dt.date],
):
    """Export time entries and expenses of a site to CSV.

    Example:
        chantier-cli export 12 --output villa-rose.csv
        chantier-cli export 12 --date 2024-05-02 -o 2024-05-02.csv
    """
    with with_error_handling(is_debug(ctx)):
        settings = get_config()
        service = build_report_service(data_file, settings)
        rows = service.export(site_id, day, resolve_session(user_id, settings))

        writer = SpreadsheetWriter(delimiter=settings.export_delimiter)
        path = writer.write_rows(rows, output_path)
        entry_count, expense_count = count_exported_records(rows)
        click.echo(
            format_success(
                f"Exported {entry_count} time entries and {expense_count} "
                f"expenses to {path}"
            )
        )
