"""Totals roll-up for time entries and expenses.

One aggregation serves every view: the site list, the site detail and the
daily summary all call compute_totals, with either a site's full record set
or records already filtered to one date. The aggregator itself knows
nothing about dates.

Net total is earnings PLUS marked-up expenses. Expenses are treated as
separately billable amounts passed on to the client, not as deductions.
This is the established business rule and must not be turned into a
subtraction.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable

from chantier_tracker.calculators.earnings_calculator import (
    MINUTES_PER_HOUR,
    calculate_entry_duration,
)
from chantier_tracker.calculators.expense_calculator import calculate_expense_total
from chantier_tracker.calculators.money_utils import (
    DEFAULT_CURRENCY_SYMBOL,
    format_currency,
    quantize_money,
)
from chantier_tracker.calculators.time_utils import format_duration
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.time_entry import TimeEntry


@dataclass(frozen=True)
class Totals:
    """Aggregated figures for a set of time entries and expenses.

    Amounts are unrounded; use display() for presentation.

    Attributes:
        total_minutes: Sum of entry durations
        total_earnings: Sum of entry earnings, each at its own rate
        total_expenses: Sum of marked-up expense totals
        entry_count: Number of time entries aggregated
        expense_count: Number of expenses aggregated

    Example:
        >>> totals = Totals(
        ...     total_minutes=720,
        ...     total_earnings=Decimal("220"),
        ...     total_expenses=Decimal("50"),
        ...     entry_count=2,
        ...     expense_count=1,
        ... )
        >>> totals.net_total
        Decimal('270')
        >>> totals.hours_display
        '12h 0m'
    """

    total_minutes: int
    total_earnings: Decimal
    total_expenses: Decimal
    entry_count: int = 0
    expense_count: int = 0

    @property
    def net_total(self) -> Decimal:
        """Earnings plus expenses (additive by business rule)."""
        return self.total_earnings + self.total_expenses

    @property
    def hours_display(self) -> str:
        """Total duration as "{h}h {m}m"."""
        return format_duration(self.total_minutes)

    def display(self, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> Dict[str, str]:
        """Presentation strings for the stats cards.

        Example:
            >>> Totals(0, Decimal("0"), Decimal("0")).display()
            {'total_hours': '0h 0m', 'total_earnings': '€0.00', 'total_expenses': '€0.00', 'net_total': '€0.00'}
        """
        return {
            "total_hours": self.hours_display,
            "total_earnings": format_currency(self.total_earnings, currency_symbol),
            "total_expenses": format_currency(self.total_expenses, currency_symbol),
            "net_total": format_currency(self.net_total, currency_symbol),
        }

    def rounded(self) -> Dict[str, object]:
        """Minutes plus cent-rounded amounts, e.g. for JSON output."""
        return {
            "minutes": self.total_minutes,
            "earnings": quantize_money(self.total_earnings),
            "expenses": quantize_money(self.total_expenses),
            "net": quantize_money(self.net_total),
        }


def compute_totals(
    time_entries: Iterable[TimeEntry], expenses: Iterable[Expense]
) -> Totals:
    """Aggregate durations, earnings and expenses.

    The function is pure: inputs are only read, and the same inputs always
    give the same Totals regardless of their order.

    Args:
        time_entries: Entries to aggregate (site-wide or one day)
        expenses: Expenses to aggregate (site-wide or one day)

    Returns:
        Totals with unrounded amounts; zero totals for empty inputs

    Example:
        >>> compute_totals([], []).rounded()
        {'minutes': 0, 'earnings': Decimal('0.00'), 'expenses': Decimal('0.00'), 'net': Decimal('0.00')}
    """
    total_minutes = 0
    # Sum minute×rate products and divide once: the products are exact, so
    # the total does not depend on summation order
    rate_minutes = Decimal("0")
    entry_count = 0
    for entry in time_entries:
        minutes = calculate_entry_duration(entry)
        total_minutes += minutes
        rate_minutes += Decimal(minutes) * entry.hourly_rate
        entry_count += 1

    total_expenses = Decimal("0")
    expense_count = 0
    for expense in expenses:
        total_expenses += calculate_expense_total(expense)
        expense_count += 1

    return Totals(
        total_minutes=total_minutes,
        total_earnings=rate_minutes / MINUTES_PER_HOUR,
        total_expenses=total_expenses,
        entry_count=entry_count,
        expense_count=expense_count,
    )


# Name used by callers that think of this as "the aggregate"
aggregate = compute_totals
