"""Calculator modules for the chantier tracker."""

from chantier_tracker.calculators.earnings_calculator import (
    EntryBreakdown,
    calculate_entry_duration,
    calculate_entry_earnings,
    compute_entry_breakdown,
)
from chantier_tracker.calculators.expense_calculator import (
    ExpenseBreakdown,
    calculate_expense_total,
    compute_expense_breakdown,
    resolve_base_amount,
)
from chantier_tracker.calculators.money_utils import (
    format_amount,
    format_currency,
    format_percentage,
    quantize_money,
)
from chantier_tracker.calculators.time_utils import (
    calculate_duration_minutes,
    convert_time_to_minutes,
    format_duration,
    parse_time_of_day,
)

__all__ = [
    # earnings_calculator
    "EntryBreakdown",
    "calculate_entry_duration",
    "calculate_entry_earnings",
    "compute_entry_breakdown",
    # expense_calculator
    "ExpenseBreakdown",
    "calculate_expense_total",
    "compute_expense_breakdown",
    "resolve_base_amount",
    # money_utils
    "format_amount",
    "format_currency",
    "format_percentage",
    "quantize_money",
    # time_utils
    "calculate_duration_minutes",
    "convert_time_to_minutes",
    "format_duration",
    "parse_time_of_day",
]
