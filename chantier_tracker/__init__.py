"""Chantier tracker: hours, earnings and expenses per construction site.

The aggregation engine (calculators and aggregators) is pure and
synchronous; readers, writers, services and the CLI are the thin shell
around it.
"""

from chantier_tracker.aggregators.totals_aggregator import Totals, compute_totals
from chantier_tracker.calculators.earnings_calculator import compute_entry_breakdown
from chantier_tracker.calculators.expense_calculator import compute_expense_breakdown
from chantier_tracker.writers.export_generator import export_rows

__version__ = "1.0.0"

__all__ = [
    "Totals",
    "compute_entry_breakdown",
    "compute_expense_breakdown",
    "compute_totals",
    "export_rows",
]
