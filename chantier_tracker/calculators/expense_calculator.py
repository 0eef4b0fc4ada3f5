"""Expense and margin calculation.

An expense's billable total is its base amount marked up by its margin
percentage: base × (1 + margin / 100). Legacy rows without ``base_amount``
use their flat ``amount`` as the base; the two are never added together.
"""

from dataclasses import dataclass
from decimal import Decimal

from chantier_tracker.calculators.money_utils import (
    DEFAULT_CURRENCY_SYMBOL,
    format_currency,
    format_percentage,
)
from chantier_tracker.models.expense import Expense

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Base amount, margin and marked-up total of one expense.

    Attributes:
        base: Amount before margin
        margin_pct: Markup percentage
        total: Unrounded total including margin
    """

    base: Decimal
    margin_pct: Decimal
    total: Decimal

    @property
    def margin_display(self) -> str:
        """Margin as "N%"."""
        return format_percentage(self.margin_pct)

    def total_display(self, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        """Total rounded to cents with a currency prefix."""
        return format_currency(self.total, currency_symbol)


def resolve_base_amount(expense: Expense) -> Decimal:
    """Pick the base amount of an expense, supporting the legacy shape.

    Example:
        >>> resolve_base_amount(Expense(amount="42"))
        Decimal('42')
        >>> resolve_base_amount(Expense(base_amount="10", amount="42"))
        Decimal('10')
        >>> resolve_base_amount(Expense())
        Decimal('0')
    """
    if expense.base_amount is not None:
        return expense.base_amount
    if expense.amount is not None:
        return expense.amount
    return Decimal("0")


def calculate_expense_total(expense: Expense) -> Decimal:
    """Calculate the marked-up total of an expense.

    Args:
        expense: Expense record in either shape

    Returns:
        base × (1 + margin / 100), unrounded

    Example:
        >>> calculate_expense_total(Expense(base_amount="100", margin="15"))
        Decimal('115')
        >>> calculate_expense_total(Expense(amount="50"))
        Decimal('50')
    """
    base = resolve_base_amount(expense)
    # Division by 100 is exact in Decimal, so totals stay exact
    return base * (HUNDRED + expense.margin) / HUNDRED


def compute_expense_breakdown(expense: Expense) -> ExpenseBreakdown:
    """Compute the base/margin/total triple shown for each expense row."""
    return ExpenseBreakdown(
        base=resolve_base_amount(expense),
        margin_pct=expense.margin,
        total=calculate_expense_total(expense),
    )
