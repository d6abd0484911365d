"""In-memory poll repository for testing."""

from typing import Optional

from polly.domain.model.poll import Poll
from polly.domain.repository.poll import PollRepository
from polly.domain.value import PollId


class InMemoryPollRepository(PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self) -> None:
        self._polls: dict[PollId, Poll] = {}

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        return self._polls.get(poll_id)

    async def find_all(self, limit: int = 30, offset: int = 0) -> list[Poll]:
        """Find polls, newest first."""
        polls = sorted(self._polls.values(), key=lambda p: p.created_at, reverse=True)
        return polls[offset : offset + limit]

    async def count(self) -> int:
        """Count all polls."""
        return len(self._polls)

    async def save(self, poll: Poll) -> Poll:
        """Save or update a poll."""
        self._polls[poll.id] = poll
        return poll

    async def delete(self, poll_id: PollId) -> None:
        """Delete a poll."""
        self._polls.pop(poll_id, None)
