"""Aggregators for rolling records up into totals.

This module turns time entries and expenses into the figures shown by the
site list, site detail and daily summary views.
"""

from chantier_tracker.aggregators.day_aggregator import (
    DayStats,
    available_days,
    compute_day_stats,
    filter_by_date,
    group_by_day,
)
from chantier_tracker.aggregators.site_aggregator import SiteStats, compute_site_stats
from chantier_tracker.aggregators.totals_aggregator import (
    Totals,
    aggregate,
    compute_totals,
)

__all__ = [
    "DayStats",
    "available_days",
    "compute_day_stats",
    "filter_by_date",
    "group_by_day",
    "SiteStats",
    "compute_site_stats",
    "Totals",
    "aggregate",
    "compute_totals",
]
