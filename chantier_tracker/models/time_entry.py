"""Time entry data model.

A time entry is one logged shift on a site: a date, an arrival and a
departure wall-clock time, and the hourly rate that applied when the entry
was created.
"""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from chantier_tracker.models.base import BaseDataModel
from chantier_tracker.utils.coercion import (
    coerce_non_negative_decimal,
    coerce_time_of_day,
)


class TimeEntry(BaseDataModel):
    """Represents a single logged shift.

    Arrival and departure have no date component. A departure earlier than
    the arrival means the shift ran past midnight; equal times mean a
    zero-length shift. Missing or unparsable times are kept as None and
    count as zero minutes.

    Attributes:
        id: Backend identifier (None for unsaved entries)
        chantier_id: Owning site
        date: Calendar date of the shift
        arrived_at: Arrival time of day
        departed_at: Departure time of day
        hourly_rate: Rate snapshotted from the site at creation

    Example:
        >>> entry = TimeEntry(
        ...     chantier_id=1,
        ...     date=dt.date(2024, 5, 2),
        ...     arrived_at="09:00",
        ...     departed_at="17:30:00",
        ...     hourly_rate="20",
        ... )
        >>> entry.departed_at
        datetime.time(17, 30)
    """

    id: Optional[Union[int, str]] = Field(None, description="Entry identifier")
    chantier_id: Optional[Union[int, str]] = Field(None, description="Site id")
    date: dt.date = Field(..., description="Date of the shift")
    arrived_at: Optional[dt.time] = Field(None, description="Arrival time")
    departed_at: Optional[dt.time] = Field(None, description="Departure time")
    hourly_rate: Decimal = Field(
        Decimal("0"), description="Hourly rate at creation time"
    )

    @field_validator("arrived_at", "departed_at", mode="before")
    @classmethod
    def parse_time(cls, v: Any) -> Optional[dt.time]:
        """Parse wall-clock times; absent or malformed values become None."""
        return coerce_time_of_day(v)

    @field_validator("hourly_rate", mode="before")
    @classmethod
    def convert_rate(cls, v: Any) -> Decimal:
        """Coerce the rate to a non-negative Decimal (malformed -> 0)."""
        return coerce_non_negative_decimal(v)
