"""Exceptions raised around the aggregation engine.

The calculators and aggregators never raise; these errors belong to the
record sources and the services that look records up.
"""

from typing import Optional, Union


class ChantierTrackerError(Exception):
    """Base exception for the chantier tracker."""


class RecordSourceError(ChantierTrackerError):
    """Records could not be loaded from their source."""


class SiteNotFoundError(ChantierTrackerError):
    """The site does not exist or is not owned by the session user."""

    def __init__(
        self, site_id: Union[int, str], user_id: Optional[Union[int, str]] = None
    ):
        self.site_id = site_id
        self.user_id = user_id
        if user_id is None:
            message = f"Site '{site_id}' not found"
        else:
            message = f"Site '{site_id}' not found for user '{user_id}'"
        super().__init__(message)
