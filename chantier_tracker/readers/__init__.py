"""
Record sources for sites, time entries and expenses.
"""

from .json_record_source import JsonRecordSource
from .record_source import InMemoryRecordSource, RecordSource

__all__ = ["InMemoryRecordSource", "JsonRecordSource", "RecordSource"]
