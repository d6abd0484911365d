"""Shared base for polls, votes and identities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain entity.

    Changes go through ``model_copy(update=...)`` so a stored poll is never
    edited in place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
