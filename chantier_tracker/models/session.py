"""Session model scoping owner-filtered queries."""

from typing import Union

from pydantic import Field

from chantier_tracker.models.base import BaseDataModel


class Session(BaseDataModel):
    """The logged-in user, passed explicitly to owner-scoped lookups.

    Example:
        >>> Session(user_id="u-42").user_id
        'u-42'
    """

    user_id: Union[int, str] = Field(..., description="Logged-in user id")
