"""Export projection of time entries and expenses.

This module flattens a site's records into spreadsheet rows: a time-entry
section and an expense section, each with a fixed header row, separated by
one blank row. Per-entry figures come from the same calculators as the live
views, so an exported entry always shows the same earnings to the cent.
"""

import datetime as dt
from typing import List, Optional, Sequence, Tuple

from chantier_tracker.calculators.earnings_calculator import compute_entry_breakdown
from chantier_tracker.calculators.expense_calculator import compute_expense_breakdown
from chantier_tracker.calculators.money_utils import format_amount
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.time_entry import TimeEntry

TIME_ENTRY_COLUMNS = [
    "Date",
    "Arrival",
    "Departure",
    "Duration",
    "Hourly Rate",
    "Earnings",
]

EXPENSE_COLUMNS = [
    "Date",
    "Description",
    "Base Amount",
    "Margin",
    "Total",
]

Row = List[str]


class ExportGenerator:
    """Generate export rows from a site's records.

    Records are exported in the order given; callers sort them.

    Example:
        >>> generator = ExportGenerator(entries, expenses)
        >>> rows = generator.rows()
        >>> rows[0]
        ['Date', 'Arrival', 'Departure', 'Duration', 'Hourly Rate', 'Earnings']
    """

    def __init__(
        self, time_entries: Sequence[TimeEntry], expenses: Sequence[Expense]
    ):
        self.time_entries = list(time_entries)
        self.expenses = list(expenses)

    def rows(self) -> List[Row]:
        """Build the full tabular export.

        Returns:
            Time header, time rows, a blank row, expense header, expense rows
        """
        rows: List[Row] = [list(TIME_ENTRY_COLUMNS)]
        rows.extend(self._build_time_entry_row(entry) for entry in self.time_entries)
        rows.append([])
        rows.append(list(EXPENSE_COLUMNS))
        rows.extend(self._build_expense_row(expense) for expense in self.expenses)
        return rows

    def _build_time_entry_row(self, entry: TimeEntry) -> Row:
        breakdown = compute_entry_breakdown(entry)
        return [
            self._format_date(entry.date),
            self._format_time(entry.arrived_at),
            self._format_time(entry.departed_at),
            breakdown.duration_display,
            format_amount(breakdown.hourly_rate),
            format_amount(breakdown.earnings),
        ]

    def _build_expense_row(self, expense: Expense) -> Row:
        breakdown = compute_expense_breakdown(expense)
        return [
            self._format_date(expense.date),
            expense.description,
            format_amount(breakdown.base),
            breakdown.margin_display,
            format_amount(breakdown.total),
        ]

    def _format_date(self, date_obj: Optional[dt.date]) -> str:
        """Format date as YYYY-MM-DD; blank when absent."""
        if date_obj is None:
            return ""
        return date_obj.strftime("%Y-%m-%d")

    def _format_time(self, time_obj: Optional[dt.time]) -> str:
        """Format time as HH:MM; blank when absent."""
        if time_obj is None:
            return ""
        return time_obj.strftime("%H:%M")


def to_export_rows(
    time_entries: Sequence[TimeEntry], expenses: Sequence[Expense]
) -> List[Row]:
    """Flatten records into export rows (see ExportGenerator.rows)."""
    return ExportGenerator(time_entries, expenses).rows()


def count_exported_records(rows: Sequence[Row]) -> Tuple[int, int]:
    """Count the time entries and expenses in export rows.

    Header rows and the blank separator are not records.

    Example:
        >>> count_exported_records(to_export_rows(entries, []))
        (2, 0)
    """
    separator = list(rows).index([])
    return separator - 1, len(rows) - separator - 2


export_rows = to_export_rows
