"""Rate limit window entry."""

from pydantic import Field

from polly.domain.model.common import DomainModel


class RateLimitEntry(DomainModel):
    """Request count for one ``(limit class, identifier)`` window.

    Replaced, never merged, once ``reset_time`` has passed.
    """

    count: int = Field(ge=0)
    reset_time: float  # epoch seconds

    def is_expired(self, now: float) -> bool:
        return now > self.reset_time
