"""Site and day summary command."""

import datetime as dt
from typing import Optional

import click

from chantier_tracker.calculators.earnings_calculator import compute_entry_breakdown
from chantier_tracker.calculators.expense_calculator import compute_expense_breakdown
from chantier_tracker.calculators.money_utils import format_currency
from chantier_tracker.cli.error_handlers import is_debug, with_error_handling
from chantier_tracker.cli.utils.formatters import (
    format_info,
    format_stats,
    format_table,
)
from chantier_tracker.cli.utils.services import (
    build_report_service,
    parse_date_option,
    resolve_session,
)
from chantier_tracker.config.settings import get_config

ENTRY_HEADERS = ["Date", "Arrival", "Departure", "Hours", "Rate", "Earnings"]
EXPENSE_HEADERS = ["Date", "Description", "Base", "Margin", "Total"]


def _fmt_time(value: Optional[dt.time]) -> str:
    return value.strftime("%H:%M") if value else "-"


def _fmt_date(value: Optional[dt.date]) -> str:
    return value.isoformat() if value else "-"


@click.command(name="summary")
@click.argument("site_id")
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
def summary(
    ctx: click.Context,
    site_id: str,
    data_file: Optional[str],
    user_id: Optional[str],
    day: Optional[dt.date],
):
    """Show statistics, time entries and expenses of a site.

    Example:
        chantier-cli summary 12
        chantier-cli summary 12 --date 2024-05-02
    """
    with with_error_handling(is_debug(ctx)):
        settings = get_config()
        symbol = settings.currency_symbol
        session = resolve_session(user_id, settings)
        service = build_report_service(data_file, settings)

        if day is None:
            report = service.site_report(site_id, session)
            site = report.site
            entries = report.entries
            expenses = report.expenses
            totals = report.totals
            title = site.name or f"Site {site.id}"
        else:
            site = service.get_site(site_id, session)
            day_stats = service.day_report(site.id, day, session)
            entries = [(e, compute_entry_breakdown(e)) for e in day_stats.time_entries]
            expenses = [(x, compute_expense_breakdown(x)) for x in day_stats.expenses]
            totals = day_stats.totals
            title = f"{site.name or f'Site {site.id}'} - {day.isoformat()}"

        click.echo(click.style(title, bold=True))
        click.echo(f"Current rate: {format_currency(site.current_rate, symbol)}/h")
        click.echo()
        click.echo(format_stats(totals.display(symbol)))
        click.echo()

        if entries:
            entry_rows = []
            for entry, breakdown in entries:
                entry_rows.append(
                    [
                        _fmt_date(entry.date),
                        _fmt_time(entry.arrived_at),
                        _fmt_time(entry.departed_at),
                        breakdown.duration_display,
                        format_currency(breakdown.hourly_rate, symbol),
                        breakdown.earnings_display(symbol),
                    ]
                )
            click.echo(format_table(ENTRY_HEADERS, entry_rows, right_align=(3, 4, 5)))
        else:
            click.echo(format_info("No time entries recorded."))
        click.echo()

        if expenses:
            expense_rows = []
            for expense, breakdown in expenses:
                expense_rows.append(
                    [
                        _fmt_date(expense.date),
                        expense.description,
                        format_currency(breakdown.base, symbol),
                        breakdown.margin_display,
                        breakdown.total_display(symbol),
                    ]
                )
            click.echo(
                format_table(EXPENSE_HEADERS, expense_rows, right_align=(2, 3, 4))
            )
        else:
            click.echo(format_info("No expenses recorded."))
