"""Report service wiring record sources to the aggregation engine.

This service serves the three presentation contexts:
- the site list (hours and net total per owned site)
- the site detail (totals plus per-entry and per-expense breakdowns)
- the daily summary (available days and per-day totals)
and produces export rows for a whole site or a single day.

All figures come from the same calculators, so the contexts always agree.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from chantier_tracker.aggregators.day_aggregator import (
    DayStats,
    available_days,
    compute_day_stats,
    group_by_day,
)
from chantier_tracker.aggregators.site_aggregator import SiteStats, compute_site_stats
from chantier_tracker.aggregators.totals_aggregator import Totals, compute_totals
from chantier_tracker.calculators.earnings_calculator import (
    EntryBreakdown,
    compute_entry_breakdown,
)
from chantier_tracker.calculators.expense_calculator import (
    ExpenseBreakdown,
    compute_expense_breakdown,
)
from chantier_tracker.calculators.time_utils import convert_time_to_minutes
from chantier_tracker.errors import SiteNotFoundError
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.session import Session
from chantier_tracker.models.site import Site
from chantier_tracker.models.time_entry import TimeEntry
from chantier_tracker.readers.record_source import RecordId, RecordSource
from chantier_tracker.utils.logging_utils import LogContext
from chantier_tracker.writers.export_generator import Row, to_export_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteReport:
    """Everything the site detail view shows.

    Attributes:
        site: The site
        totals: Totals over all records of the site
        entries: Time entries with their breakdowns, latest first
        expenses: Expenses with their breakdowns, latest first
    """

    site: Site
    totals: Totals
    entries: List[Tuple[TimeEntry, EntryBreakdown]]
    expenses: List[Tuple[Expense, ExpenseBreakdown]]


def _chronological_entries(entries: List[TimeEntry]) -> List[TimeEntry]:
    return sorted(
        entries,
        key=lambda e: (
            e.date,
            convert_time_to_minutes(e.arrived_at) if e.arrived_at else -1,
        ),
    )


def _chronological_expenses(expenses: List[Expense]) -> List[Expense]:
    # Undated expenses first, then by date; ties keep creation order
    return sorted(expenses, key=lambda x: (x.date is not None, x.date or dt.date.min))


class ReportService:
    """Build site, day and export reports from a record source.

    Owner checks are explicit: pass a Session to restrict a lookup to the
    sites of that user. Without a session any site id is accepted.

    Example:
        >>> service = ReportService(JsonRecordSource.from_file("chantiers.json"))
        >>> report = service.site_report(1)
        >>> report.totals.display()["net_total"]
        '€270.00'
    """

    def __init__(self, source: RecordSource):
        """Initialize the report service.

        Args:
            source: Collaborator providing sites, time entries and expenses
        """
        self.source = source

    def get_site(self, site_id: RecordId, session: Optional[Session] = None) -> Site:
        """Fetch a site, checking ownership when a session is given.

        Raises:
            SiteNotFoundError: If the site is unknown or owned by someone else
        """
        site = self.source.get_site(site_id)
        if session is not None and not site.owned_by(session.user_id):
            logger.warning(
                f"User {session.user_id} requested site {site_id} they do not own"
            )
            raise SiteNotFoundError(site_id, session.user_id)
        return site

    def site_overview(self, session: Session) -> List[SiteStats]:
        """Compute hours and net totals for every site owned by the user."""
        with LogContext(user_id=session.user_id):
            sites = self.source.list_sites(session)
            logger.info(f"Computing stats for {len(sites)} sites")
            return [
                compute_site_stats(
                    site,
                    self.source.list_time_entries(site.id),
                    self.source.list_expenses(site.id),
                )
                for site in sites
            ]

    def site_report(
        self, site_id: RecordId, session: Optional[Session] = None
    ) -> SiteReport:
        """Build the site detail report."""
        with LogContext(site_id=str(site_id)):
            site = self.get_site(site_id, session)
            entries = self.source.list_time_entries(site.id)
            expenses = self.source.list_expenses(site.id)
            logger.info(
                f"Site {site.id}: {len(entries)} time entries, "
                f"{len(expenses)} expenses"
            )

            ordered_entries = list(reversed(_chronological_entries(entries)))
            ordered_expenses = list(reversed(_chronological_expenses(expenses)))
            return SiteReport(
                site=site,
                totals=compute_totals(entries, expenses),
                entries=[(e, compute_entry_breakdown(e)) for e in ordered_entries],
                expenses=[(x, compute_expense_breakdown(x)) for x in ordered_expenses],
            )

    def days(
        self, site_id: RecordId, session: Optional[Session] = None
    ) -> List[DayStats]:
        """Per-day stats of a site, newest day first."""
        with LogContext(site_id=str(site_id)):
            site = self.get_site(site_id, session)
            day_stats = group_by_day(
                self.source.list_time_entries(site.id),
                self.source.list_expenses(site.id),
            )
            logger.info(f"Site {site.id} has records on {len(day_stats)} days")
            return day_stats

    def available_days(
        self, site_id: RecordId, session: Optional[Session] = None
    ) -> List[dt.date]:
        """Dates with at least one record, newest first."""
        site = self.get_site(site_id, session)
        return available_days(
            self.source.list_time_entries(site.id),
            self.source.list_expenses(site.id),
        )

    def day_report(
        self, site_id: RecordId, day: dt.date, session: Optional[Session] = None
    ) -> DayStats:
        """Totals and records of a site for one date."""
        with LogContext(site_id=str(site_id), day=day.isoformat()):
            site = self.get_site(site_id, session)
            return compute_day_stats(
                day,
                self.source.list_time_entries(site.id, day),
                self.source.list_expenses(site.id, day),
            )

    def export(
        self,
        site_id: RecordId,
        day: Optional[dt.date] = None,
        session: Optional[Session] = None,
    ) -> List[Row]:
        """Export rows for a site, or for one date of it, in date order."""
        with LogContext(site_id=str(site_id)):
            site = self.get_site(site_id, session)
            entries = _chronological_entries(self.source.list_time_entries(site.id, day))
            expenses = _chronological_expenses(self.source.list_expenses(site.id, day))
            logger.info(
                f"Exporting {len(entries)} time entries and {len(expenses)} "
                f"expenses for site {site.id}"
                + (f" on {day.isoformat()}" if day else "")
            )
            return to_export_rows(entries, expenses)
