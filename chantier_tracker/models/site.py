"""Site (chantier) data model."""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from chantier_tracker.models.base import BaseDataModel
from chantier_tracker.utils.coercion import coerce_non_negative_decimal


class Site(BaseDataModel):
    """Represents a construction site, the root of all records.

    The current rate is only the default hourly rate for new time entries.
    Changing it never touches entries that already exist: each entry keeps
    the rate it was created with.

    Attributes:
        id: Backend identifier
        name: Display name
        address: Optional street address
        description: Optional free text
        start_date: Optional start date
        status: Lifecycle status (default "active")
        current_rate: Default hourly rate for new entries
        user_id: Owner of the site

    Example:
        >>> site = Site(id=1, name="Villa Rose", current_rate="22.5")
        >>> site.current_rate
        Decimal('22.5')
    """

    id: Union[int, str] = Field(..., description="Site identifier")
    name: str = Field("", description="Site name")
    address: Optional[str] = Field(None, description="Street address")
    description: Optional[str] = Field(None, description="Free text description")
    start_date: Optional[dt.date] = Field(None, description="Start date")
    status: str = Field("active", description="Lifecycle status")
    current_rate: Decimal = Field(
        Decimal("0"), description="Default hourly rate for new entries"
    )
    user_id: Optional[Union[int, str]] = Field(None, description="Owner id")

    @field_validator("name", mode="before")
    @classmethod
    def default_blank_name(cls, v: Any) -> str:
        """Treat a missing name as an empty one."""
        return "" if v is None else v

    @field_validator("current_rate", mode="before")
    @classmethod
    def convert_rate(cls, v: Any) -> Decimal:
        """Coerce the rate to a non-negative Decimal (malformed -> 0)."""
        return coerce_non_negative_decimal(v)

    def owned_by(self, user_id: Union[int, str]) -> bool:
        """Check ownership, comparing ids as strings."""
        return self.user_id is not None and str(self.user_id) == str(user_id)
