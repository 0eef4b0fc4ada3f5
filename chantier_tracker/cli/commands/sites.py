"""List sites command."""

from typing import Optional

import click

from chantier_tracker.calculators.money_utils import format_currency
from chantier_tracker.cli.error_handlers import is_debug, with_error_handling
from chantier_tracker.cli.utils.formatters import format_info, format_table
from chantier_tracker.cli.utils.services import build_report_service, resolve_session
from chantier_tracker.config.settings import get_config


@click.command(name="sites")
@click.option("--data", "data_file", type=str, default=None, help="JSON data file")
@click.option("--user", "user_id", type=str, default=None, help="Owner user id")
@click.pass_context
def list_sites(ctx: click.Context, data_file: Optional[str], user_id: Optional[str]):
    """List your sites with hours worked and net total.

    Example:
        chantier-cli sites --data chantiers.json --user u-42
    """
    with with_error_handling(is_debug(ctx)):
        settings = get_config()
        session = resolve_session(user_id, settings, required=True)
        service = build_report_service(data_file, settings)

        overview = service.site_overview(session)
        if not overview:
            click.echo(format_info("No sites found."))
            return

        rows = [
            [
                str(stats.site.id),
                stats.site.name or "(unnamed)",
                format_currency(stats.site.current_rate, settings.currency_symbol),
                stats.totals.hours_display,
                format_currency(stats.totals.net_total, settings.currency_symbol),
            ]
            for stats in overview
        ]
        click.echo(
            format_table(
                ["ID", "Site", "Current Rate", "Hours", "Net Total"],
                rows,
                right_align=(2, 3, 4),
            )
        )
