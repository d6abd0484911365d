"""Shared poll use case models."""

from datetime import datetime
from uuid import UUID

from polly.application.usecase.base import RateLimitedResponse
from polly.domain.model.identity import Identity
from polly.domain.model.poll import Poll
from polly.domain.value import PollId, RateLimitResult


class PollResponse(RateLimitedResponse):
    """Poll with per-option vote counts."""

    poll_id: str
    owner_id: str
    question: str
    options: list[str]
    votes: list[int]  # Vote count per option, same order as options
    total_votes: int
    created_at: datetime
    updated_at: datetime
    is_owner: bool

    @classmethod
    def from_poll(
        cls,
        poll: Poll,
        votes: list[int],
        identity: Identity | None = None,
        rate_limit: RateLimitResult | None = None,
    ) -> "PollResponse":
        return cls(
            poll_id=str(poll.id),
            owner_id=str(poll.owner_id),
            question=poll.question,
            options=poll.options,
            votes=votes,
            total_votes=sum(votes),
            created_at=poll.created_at,
            updated_at=poll.updated_at,
            is_owner=identity is not None and identity.user_id == poll.owner_id,
            rate_limit=rate_limit,
        )


def parse_poll_id(value: str) -> PollId | None:
    """Parse a poll ID string, returning None if it isn't a UUID."""
    try:
        return PollId(UUID(value))
    except ValueError:
        return None
