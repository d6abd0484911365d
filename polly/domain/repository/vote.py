"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from polly.domain.model.vote import Vote
from polly.domain.value import PollId


class VoteRepository(ABC):
    """Repository for Vote entities."""

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises:
            IntegrityError: If the voter already voted on this poll
        """
        pass

    @abstractmethod
    async def count_by_option(self, poll_id: PollId) -> dict[int, int]:
        """Count votes per option index for one poll."""
        pass

    @abstractmethod
    async def count_by_polls(self, poll_ids: Sequence[PollId]) -> dict[PollId, int]:
        """Count total votes for several polls (batch query)."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all votes."""
        pass

    @abstractmethod
    async def delete_by_poll(self, poll_id: PollId) -> int:
        """Delete every vote on a poll.

        Returns:
            Number of votes removed
        """
        pass
