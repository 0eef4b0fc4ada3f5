"""Daily summary command."""

from typing import Optional

import click

from chantier_tracker.calculators.money_utils import format_currency
from chantier_tracker.cli.error_handlers import is_debug, with_error_handling
from chantier_tracker.cli.utils.formatters import format_info, format_table
from chantier_tracker.cli.utils.services import build_report_service, resolve_session
from chantier_tracker.config.settings import get_config


@click.command(name="days")
@click.argument("site_id")
@click.option("--data", "data_file", type=str, default=None, help="JSON data file")
@click.option("--user", "user_id", type=str, default=None, help="Owner user id")
@click.pass_context
def list_days(
    ctx: click.Context, site_id: str, data_file: Optional[str], user_id: Optional[str]
):
    """Show per-day totals of a site, newest day first.

    Example:
        chantier-cli days 12
    """
    with with_error_handling(is_debug(ctx)):
        settings = get_config()
        symbol = settings.currency_symbol
        service = build_report_service(data_file, settings)
        day_stats = service.days(site_id, resolve_session(user_id, settings))

        if not day_stats:
            click.echo(format_info("No data available for this site."))
            return

        rows = [
            [
                stats.date.strftime("%a %Y-%m-%d"),
                stats.totals.hours_display,
                format_currency(stats.totals.total_earnings, symbol),
                format_currency(stats.totals.total_expenses, symbol),
                format_currency(stats.totals.net_total, symbol),
            ]
            for stats in day_stats
        ]
        click.echo(
            format_table(
                ["Day", "Hours", "Earnings", "Expenses", "Net"],
                rows,
                right_align=(1, 2, 3, 4),
            )
        )
