"""Record models for the chantier tracker.

This package contains Pydantic models for all records:
- BaseDataModel: Base class with common configuration
- Site: A construction site (chantier)
- TimeEntry: One logged shift
- Expense: One logged cost item
- Session: The logged-in user
"""

from chantier_tracker.models.base import BaseDataModel
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.session import Session
from chantier_tracker.models.site import Site
from chantier_tracker.models.time_entry import TimeEntry

__all__ = [
    "BaseDataModel",
    "Expense",
    "Session",
    "Site",
    "TimeEntry",
]
