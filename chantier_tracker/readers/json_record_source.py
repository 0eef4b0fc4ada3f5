"""Record source backed by a JSON dump of the backend tables.

The expected file layout mirrors the backend tables:

```
{
  "chantiers":   [{"id": 1, "name": "Villa Rose", "current_rate": 20, ...}],
  "daily_hours": [{"chantier_id": 1, "date": "2024-05-02",
                   "arrived_at": "09:00:00", "departed_at": "17:30:00",
                   "hourly_rate": 20}, ...],
  "expenses":    [{"chantier_id": 1, "date": "2024-05-02",
                   "description": "Ciment", "amount": 50}, ...]
}
```

Rows that cannot be turned into records (missing id, unparsable date) are
skipped with a warning; the rest of the file is still loaded.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from chantier_tracker.errors import RecordSourceError
from chantier_tracker.models.base import BaseDataModel
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.site import Site
from chantier_tracker.models.time_entry import TimeEntry
from chantier_tracker.readers.record_source import InMemoryRecordSource

logger = logging.getLogger(__name__)

SITES_TABLE = "chantiers"
TIME_ENTRIES_TABLE = "daily_hours"
EXPENSES_TABLE = "expenses"

Model = TypeVar("Model", bound=BaseDataModel)


class JsonRecordSource(InMemoryRecordSource):
    """In-memory record source loaded from a JSON dump.

    Attributes:
        path: File the records were loaded from
        skipped_rows: Number of rows rejected during loading

    Example:
        >>> source = JsonRecordSource.from_file("chantiers.json")
        >>> site = source.get_site(1)
        >>> len(source.list_time_entries(site.id))
        42
    """

    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None):
        """Build the source from already-decoded JSON data.

        Args:
            data: Mapping of table name to list of row dicts
            path: Origin of the data, for log messages
        """
        self.path = path
        self.skipped_rows = 0

        sites = self._parse_rows(data, SITES_TABLE, Site)
        time_entries = self._parse_rows(data, TIME_ENTRIES_TABLE, TimeEntry)
        expenses = self._parse_rows(data, EXPENSES_TABLE, Expense)
        super().__init__(sites=sites, time_entries=time_entries, expenses=expenses)

        logger.info(
            f"Loaded {len(sites)} sites, {len(time_entries)} time entries and "
            f"{len(expenses)} expenses from {path or 'memory'}"
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "JsonRecordSource":
        """Load records from a JSON file.

        Raises:
            RecordSourceError: If the file is missing, unreadable or not a
                JSON object
        """
        file_path = Path(path)
        try:
            with file_path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError as e:
            raise RecordSourceError(f"Data file not found: {file_path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise RecordSourceError(f"Cannot read data file {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise RecordSourceError(
                f"Data file {file_path} must contain a JSON object with "
                f"'{SITES_TABLE}', '{TIME_ENTRIES_TABLE}' and "
                f"'{EXPENSES_TABLE}' arrays"
            )
        return cls(data, path=file_path)

    def _parse_rows(
        self, data: Dict[str, Any], table: str, model: Type[Model]
    ) -> List[Model]:
        """Validate the rows of one table, skipping invalid ones."""
        rows = data.get(table) or []
        if not isinstance(rows, list):
            raise RecordSourceError(f"'{table}' must be a list of rows")

        records: List[Model] = []
        for index, row in enumerate(rows):
            record = self._parse_row(row, table, index, model)
            if record is not None:
                records.append(record)
        return records

    def _parse_row(
        self, row: Any, table: str, index: int, model: Type[Model]
    ) -> Optional[Model]:
        if not isinstance(row, dict):
            logger.warning(f"Skipping {table}[{index}]: not an object")
            self.skipped_rows += 1
            return None
        try:
            return model.model_validate(row)
        except ValidationError as e:
            logger.warning(
                f"Skipping {table}[{index}]: {e.error_count()} validation error(s): "
                f"{e.errors()[0]['msg']}"
            )
            self.skipped_rows += 1
            return None
