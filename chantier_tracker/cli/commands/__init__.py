"""CLI commands."""

from chantier_tracker.cli.commands.days import list_days
from chantier_tracker.cli.commands.export import export_site
from chantier_tracker.cli.commands.sites import list_sites
from chantier_tracker.cli.commands.summary import summary

__all__ = ["export_site", "list_days", "list_sites", "summary"]
