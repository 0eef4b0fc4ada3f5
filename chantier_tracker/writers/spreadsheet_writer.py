"""Spreadsheet writer for export rows.

Serialises the rows produced by ExportGenerator into a CSV file that opens
directly in spreadsheet applications.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

logger = logging.getLogger(__name__)


class SpreadsheetWriter:
    """Write export rows to CSV with pandas.

    The two export sections have different widths, so rows are padded to
    the widest one; the blank separator row stays empty.

    Example:
        >>> writer = SpreadsheetWriter()
        >>> path = writer.write_rows(rows, "exports/site-12.csv")
        >>> path.name
        'site-12.csv'
    """

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8-sig"):
        """Initialize the writer.

        Args:
            delimiter: Field separator (";" suits French spreadsheet locales)
            encoding: File encoding; the BOM variant keeps "€" readable in Excel
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def to_dataframe(self, rows: Sequence[Sequence[str]]) -> pd.DataFrame:
        """Turn ragged rows into a rectangular, string-only DataFrame."""
        width = max((len(row) for row in rows), default=0)
        padded: List[List[str]] = [
            list(row) + [""] * (width - len(row)) for row in rows
        ]
        return pd.DataFrame(padded, columns=range(width), dtype=str)

    def write_rows(
        self, rows: Sequence[Sequence[str]], output_path: Union[str, Path]
    ) -> Path:
        """Write rows to a CSV file, creating parent directories.

        Args:
            rows: Export rows, header rows included
            output_path: Destination file

        Returns:
            Path of the written file
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        df = self.to_dataframe(rows)
        logger.info(f"Writing {len(df)} export rows to {path}")
        df.to_csv(
            path,
            sep=self.delimiter,
            index=False,
            header=False,
            encoding=self.encoding,
        )
        return path
