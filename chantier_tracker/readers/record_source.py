"""Record sources feeding the aggregation engine.

The hosted backend stays outside this package. Anything that can list a
site's time entries and expenses and fetch a site satisfies RecordSource;
InMemoryRecordSource is the implementation used by the CLI (through
JsonRecordSource) and by tests.
"""

import datetime as dt
import itertools
import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol, Union

from chantier_tracker.errors import SiteNotFoundError
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.session import Session
from chantier_tracker.models.site import Site
from chantier_tracker.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)

RecordId = Union[int, str]


class RecordSource(Protocol):
    """Read interface the report service needs from persistence."""

    def list_sites(self, session: Session) -> List[Site]:
        ...

    def get_site(self, site_id: RecordId) -> Site:
        ...

    def list_time_entries(
        self, site_id: RecordId, date: Optional[dt.date] = None
    ) -> List[TimeEntry]:
        ...

    def list_expenses(
        self, site_id: RecordId, date: Optional[dt.date] = None
    ) -> List[Expense]:
        ...


def _same_id(left: Optional[RecordId], right: RecordId) -> bool:
    # Backend ids come back as ints or strings depending on the column type
    return left is not None and str(left) == str(right)


def _numeric_id(record_id: Optional[RecordId]) -> Optional[int]:
    # Ids compare as strings, so "7" and 7 are the same id
    text = str(record_id).strip() if record_id is not None else ""
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


class InMemoryRecordSource:
    """RecordSource holding sites, time entries and expenses in memory.

    Besides the read interface it offers the few writes the tracker needs:
    adding records, changing a site's current rate and deleting. New time
    entries snapshot the site's current rate, so later rate changes never
    alter them. Deleting a site also deletes its entries and expenses.

    Example:
        >>> source = InMemoryRecordSource()
        >>> source.add_site(Site(id=1, name="Villa Rose", current_rate=20))
        >>> entry = source.add_time_entry(1, dt.date(2024, 5, 2), "09:00", "17:00")
        >>> entry.hourly_rate
        Decimal('20')
    """

    def __init__(
        self,
        sites: Iterable[Site] = (),
        time_entries: Iterable[TimeEntry] = (),
        expenses: Iterable[Expense] = (),
    ):
        self._sites: Dict[str, Site] = {}
        self._time_entries: List[TimeEntry] = list(time_entries)
        self._expenses: List[Expense] = list(expenses)
        self._ids = itertools.count(self._next_free_id())
        for site in sites:
            self.add_site(site)

    def _next_free_id(self) -> int:
        numeric = [
            _numeric_id(record.id)
            for record in itertools.chain(self._time_entries, self._expenses)
        ]
        return max((n for n in numeric if n is not None), default=0) + 1

    # Read interface

    def list_sites(self, session: Session) -> List[Site]:
        """List the sites owned by the session user."""
        sites = [s for s in self._sites.values() if s.owned_by(session.user_id)]
        logger.debug(f"Found {len(sites)} sites for user {session.user_id}")
        return sites

    def get_site(self, site_id: RecordId) -> Site:
        """Fetch a site by id.

        Raises:
            SiteNotFoundError: If no site has this id
        """
        try:
            return self._sites[str(site_id)]
        except KeyError:
            raise SiteNotFoundError(site_id) from None

    def list_time_entries(
        self, site_id: RecordId, date: Optional[dt.date] = None
    ) -> List[TimeEntry]:
        """List a site's time entries, optionally only those of one date."""
        return [
            entry
            for entry in self._time_entries
            if _same_id(entry.chantier_id, site_id)
            and (date is None or entry.date == date)
        ]

    def list_expenses(
        self, site_id: RecordId, date: Optional[dt.date] = None
    ) -> List[Expense]:
        """List a site's expenses, optionally only those of one date."""
        return [
            expense
            for expense in self._expenses
            if _same_id(expense.chantier_id, site_id)
            and (date is None or expense.date == date)
        ]

    # Writes

    def add_site(self, site: Site) -> None:
        """Register a site, replacing any site with the same id."""
        self._sites[str(site.id)] = site

    def add_time_entry(
        self,
        site_id: RecordId,
        date: dt.date,
        arrived_at: Any,
        departed_at: Any,
        hourly_rate: Optional[Any] = None,
    ) -> TimeEntry:
        """Log a shift on a site.

        Args:
            site_id: Site the shift belongs to
            date: Date of the shift
            arrived_at: Arrival time (dt.time or "HH:MM")
            departed_at: Departure time (dt.time or "HH:MM")
            hourly_rate: Explicit rate; defaults to the site's current rate

        Returns:
            The stored TimeEntry

        Raises:
            SiteNotFoundError: If the site does not exist
        """
        site = self.get_site(site_id)
        rate = site.current_rate if hourly_rate is None else hourly_rate
        entry = TimeEntry(
            id=next(self._ids),
            chantier_id=site.id,
            date=date,
            arrived_at=arrived_at,
            departed_at=departed_at,
            hourly_rate=rate,
        )
        self._time_entries.append(entry)
        logger.info(f"Added time entry {entry.id} to site {site.id} at rate {rate}")
        return entry

    def add_expense(
        self,
        site_id: RecordId,
        description: str,
        base_amount: Any,
        margin: Any = 0,
        date: Optional[dt.date] = None,
        file_path: Optional[str] = None,
    ) -> Expense:
        """Log an expense on a site.

        Raises:
            SiteNotFoundError: If the site does not exist
        """
        site = self.get_site(site_id)
        expense = Expense(
            id=next(self._ids),
            chantier_id=site.id,
            date=date,
            description=description,
            base_amount=base_amount,
            margin=margin,
            file_path=file_path,
        )
        self._expenses.append(expense)
        logger.info(f"Added expense {expense.id} to site {site.id}")
        return expense

    def update_rate(self, site_id: RecordId, rate: Any) -> Site:
        """Change a site's current rate; existing entries keep theirs."""
        site = self.get_site(site_id)
        site.current_rate = rate
        logger.info(f"Site {site.id} current rate set to {site.current_rate}")
        return site

    def delete_time_entry(self, entry_id: RecordId) -> bool:
        """Delete one time entry; returns False if it did not exist."""
        before = len(self._time_entries)
        self._time_entries = [
            e for e in self._time_entries if not _same_id(e.id, entry_id)
        ]
        return len(self._time_entries) < before

    def delete_expense(self, expense_id: RecordId) -> bool:
        """Delete one expense; returns False if it did not exist."""
        before = len(self._expenses)
        self._expenses = [x for x in self._expenses if not _same_id(x.id, expense_id)]
        return len(self._expenses) < before

    def delete_site(self, site_id: RecordId) -> None:
        """Delete a site together with its time entries and expenses.

        Raises:
            SiteNotFoundError: If the site does not exist
        """
        site = self.get_site(site_id)
        del self._sites[str(site.id)]

        entries_before = len(self._time_entries)
        expenses_before = len(self._expenses)
        self._time_entries = [
            e for e in self._time_entries if not _same_id(e.chantier_id, site.id)
        ]
        self._expenses = [
            x for x in self._expenses if not _same_id(x.chantier_id, site.id)
        ]
        logger.info(
            f"Deleted site {site.id} with "
            f"{entries_before - len(self._time_entries)} time entries and "
            f"{expenses_before - len(self._expenses)} expenses"
        )
