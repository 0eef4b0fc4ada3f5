"""Site-level statistics for the site list view."""

from dataclasses import dataclass
from typing import Iterable

from chantier_tracker.aggregators.totals_aggregator import Totals, compute_totals
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.site import Site
from chantier_tracker.models.time_entry import TimeEntry


@dataclass(frozen=True)
class SiteStats:
    """A site together with the totals over all of its records.

    Attributes:
        site: The site
        totals: Totals over every time entry and expense of the site
    """

    site: Site
    totals: Totals


def compute_site_stats(
    site: Site, time_entries: Iterable[TimeEntry], expenses: Iterable[Expense]
) -> SiteStats:
    """Aggregate the records of one site.

    Only records whose chantier_id matches the site are counted; records
    without a chantier_id are assumed to belong to it.
    """
    site_key = str(site.id)
    own_entries = [
        e for e in time_entries if e.chantier_id is None or str(e.chantier_id) == site_key
    ]
    own_expenses = [
        x for x in expenses if x.chantier_id is None or str(x.chantier_id) == site_key
    ]
    return SiteStats(site=site, totals=compute_totals(own_entries, own_expenses))
