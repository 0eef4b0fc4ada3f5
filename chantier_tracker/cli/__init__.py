"""Chantier Tracker CLI.

This module provides a command-line interface over the aggregation engine.
It includes commands for listing sites, showing site and day summaries,
and exporting records to CSV.
"""

import click

from chantier_tracker import __version__
from chantier_tracker.cli.commands.days import list_days
from chantier_tracker.cli.commands.export import export_site
from chantier_tracker.cli.commands.sites import list_sites
from chantier_tracker.cli.commands.summary import summary
from chantier_tracker.config.logging_config import LoggingConfig, configure_logging


@click.group(
    help="Chantier Tracker CLI - Hours, earnings and expenses per construction site"
)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Verbose logs and full stack traces")
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """Chantier Tracker CLI main entry point."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    # Logs go to stderr; keep them quiet unless asked for
    logging_config = LoggingConfig.from_env(default_level="WARNING")
    if debug:
        logging_config.log_level = "DEBUG"
    configure_logging(logging_config)


# Register commands
cli.add_command(list_sites)
cli.add_command(summary)
cli.add_command(list_days)
cli.add_command(export_site)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
