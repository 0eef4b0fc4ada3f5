"""Expense data model."""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from chantier_tracker.models.base import BaseDataModel
from chantier_tracker.utils.coercion import coerce_decimal, coerce_optional_amount


class Expense(BaseDataModel):
    """Represents one cost item logged on a site.

    Two record shapes exist in the backend. Older rows only hold a flat
    ``amount``; newer rows hold ``base_amount`` plus a ``margin``
    percentage. Both fields are kept as read; the expense calculator picks
    ``base_amount`` first and falls back to ``amount``.

    Attributes:
        id: Backend identifier
        chantier_id: Owning site
        date: Date of the expense (older rows may have none)
        description: Free text
        base_amount: Amount before margin
        amount: Legacy flat amount
        margin: Markup percentage (default 0)
        file_path: Storage path of an attached receipt
        created_at: Creation timestamp

    Example:
        >>> expense = Expense(chantier_id=1, base_amount="100", margin=15)
        >>> expense.margin
        Decimal('15')
    """

    id: Optional[Union[int, str]] = Field(None, description="Expense identifier")
    chantier_id: Optional[Union[int, str]] = Field(None, description="Site id")
    date: Optional[dt.date] = Field(None, description="Date of the expense")
    description: str = Field("", description="What was bought")
    base_amount: Optional[Decimal] = Field(None, description="Amount before margin")
    amount: Optional[Decimal] = Field(None, description="Legacy flat amount")
    margin: Decimal = Field(Decimal("0"), description="Markup percentage")
    file_path: Optional[str] = Field(None, description="Attached file path")
    created_at: Optional[dt.datetime] = Field(None, description="Creation time")

    @field_validator("date", mode="before")
    @classmethod
    def blank_date_to_none(cls, v: Any) -> Any:
        """Rows saved without a date hold an empty string."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("description", mode="before")
    @classmethod
    def default_blank_description(cls, v: Any) -> str:
        """Treat a missing description as an empty one."""
        return "" if v is None else v

    @field_validator("base_amount", "amount", mode="before")
    @classmethod
    def convert_amount(cls, v: Any) -> Optional[Decimal]:
        """Keep absent amounts as None; coerce the rest (malformed -> 0)."""
        return coerce_optional_amount(v)

    @field_validator("margin", mode="before")
    @classmethod
    def convert_margin(cls, v: Any) -> Decimal:
        """Coerce the margin percentage (absent or malformed -> 0)."""
        return coerce_decimal(v)
