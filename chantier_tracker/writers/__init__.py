"""Writers module for generating export rows and spreadsheet files."""

from chantier_tracker.writers.export_generator import (
    EXPENSE_COLUMNS,
    TIME_ENTRY_COLUMNS,
    ExportGenerator,
    count_exported_records,
    export_rows,
    to_export_rows,
)
from chantier_tracker.writers.spreadsheet_writer import SpreadsheetWriter

__all__ = [
    "EXPENSE_COLUMNS",
    "TIME_ENTRY_COLUMNS",
    "ExportGenerator",
    "SpreadsheetWriter",
    "count_exported_records",
    "export_rows",
    "to_export_rows",
]
