"""In-memory vote repository for testing."""

from collections import Counter
from typing import Sequence

from sqlalchemy.exc import IntegrityError

from polly.domain.model.vote import Vote
from polly.domain.repository.vote import VoteRepository
from polly.domain.value import PollId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the voter already voted on this poll
        """
        if vote.voter_id is not None:
            if any(
                v.voter_id == vote.voter_id and v.poll_id == vote.poll_id
                for v in self._votes
            ):
                raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def count_by_option(self, poll_id: PollId) -> dict[int, int]:
        """Count votes per option index."""
        return dict(Counter(v.option_index for v in self._votes if v.poll_id == poll_id))

    async def count_by_polls(self, poll_ids: Sequence[PollId]) -> dict[PollId, int]:
        """Count total votes for several polls."""
        wanted = set(poll_ids)
        return dict(Counter(v.poll_id for v in self._votes if v.poll_id in wanted))

    async def count(self) -> int:
        """Count all votes."""
        return len(self._votes)

    async def delete_by_poll(self, poll_id: PollId) -> int:
        """Delete every vote on a poll."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.poll_id != poll_id]
        return before - len(self._votes)
