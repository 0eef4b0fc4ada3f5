"""Earnings calculation for time entries.

Earnings are (duration in minutes / 60) × the entry's own hourly rate. The
rate is the one snapshotted on the entry, never the site's current rate, so
changing a site's rate leaves historical earnings untouched.
"""

from dataclasses import dataclass
from decimal import Decimal

from chantier_tracker.calculators.money_utils import (
    DEFAULT_CURRENCY_SYMBOL,
    format_currency,
)
from chantier_tracker.calculators.time_utils import (
    calculate_duration_minutes,
    format_duration,
)
from chantier_tracker.models.time_entry import TimeEntry

MINUTES_PER_HOUR = Decimal(60)


@dataclass(frozen=True)
class EntryBreakdown:
    """Duration and earnings of a single time entry.

    Attributes:
        duration_minutes: Shift length in minutes (0-1439)
        hourly_rate: Rate snapshotted on the entry
        earnings: Unrounded earnings
    """

    duration_minutes: int
    hourly_rate: Decimal
    earnings: Decimal

    @property
    def duration_display(self) -> str:
        """Duration as "{h}h {m}m"."""
        return format_duration(self.duration_minutes)

    def earnings_display(self, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        """Earnings rounded to cents with a currency prefix."""
        return format_currency(self.earnings, currency_symbol)


def calculate_entry_duration(entry: TimeEntry) -> int:
    """Duration of an entry in minutes (0 when a time is missing)."""
    return calculate_duration_minutes(entry.arrived_at, entry.departed_at)


def calculate_entry_earnings(entry: TimeEntry) -> Decimal:
    """Calculate unrounded earnings for one time entry.

    Args:
        entry: Time entry carrying its own hourly rate

    Returns:
        (minutes / 60) × hourly_rate, unrounded

    Example:
        >>> entry = TimeEntry(
        ...     date=dt.date(2024, 5, 2),
        ...     arrived_at="09:00",
        ...     departed_at="17:30",
        ...     hourly_rate="20",
        ... )
        >>> calculate_entry_earnings(entry)
        Decimal('170')
    """
    minutes = calculate_entry_duration(entry)
    return Decimal(minutes) * entry.hourly_rate / MINUTES_PER_HOUR


def compute_entry_breakdown(entry: TimeEntry) -> EntryBreakdown:
    """Compute the duration/earnings pair shown for each entry row."""
    return EntryBreakdown(
        duration_minutes=calculate_entry_duration(entry),
        hourly_rate=entry.hourly_rate,
        earnings=calculate_entry_earnings(entry),
    )
