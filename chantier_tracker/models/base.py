"""Base model for all record models in the chantier tracker.

This module provides a base Pydantic model with the configuration shared by
sites, time entries and expenses read from the hosted backend.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all record models.

    Provides common configuration for:
    - Lax validation, so JSON strings become dates, times and decimals
    - Validation on assignment
    - Ignoring unknown backend columns (ids of joined tables, signed URLs...)

    Example:
        >>> class Row(BaseDataModel):
        ...     name: str
        >>> Row.model_validate({"name": "Villa Rose", "created_at": "..."})
        Row(name='Villa Rose')
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        strict=False,
        # Backend rows carry more columns than the engine needs
        extra="ignore",
        frozen=False,
    )
