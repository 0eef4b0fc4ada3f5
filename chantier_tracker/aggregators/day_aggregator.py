"""Per-day grouping for the daily summary view.

The daily summary lists every date that has at least one time entry or
expense, newest first, and shows each day's totals. Day totals come from
compute_totals over that day's records, so they always agree with the
site-wide figures.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from chantier_tracker.aggregators.totals_aggregator import Totals, compute_totals
from chantier_tracker.calculators.time_utils import convert_time_to_minutes
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.time_entry import TimeEntry

Record = TypeVar("Record", TimeEntry, Expense)


@dataclass(frozen=True)
class DayStats:
    """Records and totals for one calendar day of a site.

    Attributes:
        date: The day
        time_entries: Entries of the day, by arrival time
        expenses: Expenses of the day
        totals: Aggregated figures for the day
    """

    date: dt.date
    time_entries: Tuple[TimeEntry, ...]
    expenses: Tuple[Expense, ...]
    totals: Totals


def filter_by_date(
    records: Iterable[Record], day: Optional[dt.date]
) -> List[Record]:
    """Keep the records dated ``day``; no filtering when day is None."""
    if day is None:
        return list(records)
    return [record for record in records if record.date == day]


def available_days(
    time_entries: Iterable[TimeEntry], expenses: Iterable[Expense]
) -> List[dt.date]:
    """List the distinct dates present in either stream, newest first.

    Undated expenses (older rows) have no day and are left out.

    Example:
        >>> available_days([], [Expense(date=dt.date(2024, 5, 1))])
        [datetime.date(2024, 5, 1)]
    """
    dates = {entry.date for entry in time_entries}
    dates.update(expense.date for expense in expenses if expense.date is not None)
    return sorted(dates, reverse=True)


def _arrival_sort_key(entry: TimeEntry) -> Tuple[int, int]:
    # Entries without an arrival time go last
    if entry.arrived_at is None:
        return (1, 0)
    return (0, convert_time_to_minutes(entry.arrived_at))


def compute_day_stats(
    day: dt.date,
    time_entries: Sequence[TimeEntry],
    expenses: Sequence[Expense],
) -> DayStats:
    """Build DayStats for ``day`` from a site's records.

    Records of other days are ignored, so callers may pass either the full
    site record set or records already filtered to the day.
    """
    day_entries = sorted(filter_by_date(time_entries, day), key=_arrival_sort_key)
    day_expenses = filter_by_date(expenses, day)
    return DayStats(
        date=day,
        time_entries=tuple(day_entries),
        expenses=tuple(day_expenses),
        totals=compute_totals(day_entries, day_expenses),
    )


def group_by_day(
    time_entries: Sequence[TimeEntry], expenses: Sequence[Expense]
) -> List[DayStats]:
    """Split a site's records into per-day stats, newest day first.

    Args:
        time_entries: All time entries of a site
        expenses: All expenses of a site

    Returns:
        One DayStats per date in available_days()
    """
    entries_by_day: Dict[dt.date, List[TimeEntry]] = {}
    for entry in time_entries:
        entries_by_day.setdefault(entry.date, []).append(entry)

    expenses_by_day: Dict[Optional[dt.date], List[Expense]] = {}
    for expense in expenses:
        expenses_by_day.setdefault(expense.date, []).append(expense)

    return [
        compute_day_stats(
            day, entries_by_day.get(day, []), expenses_by_day.get(day, [])
        )
        for day in available_days(time_entries, expenses)
    ]
