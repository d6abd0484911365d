"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from polly.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationFailedError,
)
from polly.domain.model.vote import Vote
from polly.domain.repository import VoteRepository
from polly.domain.value import PollId, UserId, VoteId

from .base import Service
from .poll_service import PollService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self, vote_repository: VoteRepository, poll_service: PollService
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            poll_service: Poll domain service
        """
        self.vote_repository = vote_repository
        self.poll_service = poll_service

    async def cast_vote(
        self, poll_id: PollId, voter_id: UserId | None, option_index: int
    ) -> Vote:
        """Record a vote for one option of a poll.

        Args:
            poll_id: Poll ID
            voter_id: Voting user, None for an anonymous vote
            option_index: Zero-based index into the poll's options

        Returns:
            Created vote

        Raises:
            NotFoundError: If the poll doesn't exist
            ValidationFailedError: If the option index is out of range
            BusinessRuleViolationError: If the user already voted on this poll
        """
        with logfire.span(
            "vote_service.cast_vote",
            poll_id=str(poll_id),
            voter_id=str(voter_id) if voter_id else None,
            option_index=option_index,
        ):
            poll = await self.poll_service.get_poll_by_id(poll_id)
            if not poll:
                raise NotFoundError("Poll", str(poll_id))

            if not poll.has_option(option_index):
                logfire.warn(
                    "Vote for non-existent option",
                    poll_id=str(poll_id),
                    option_index=option_index,
                    option_count=len(poll.options),
                )
                raise ValidationFailedError(["Please select a valid option"])

            vote = Vote(
                id=VoteId(uuid4()),
                poll_id=poll_id,
                voter_id=voter_id,
                option_index=option_index,
                created_at=datetime.now(),
            )

            try:
                saved_vote = await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote attempt",
                    voter_id=str(voter_id),
                    poll_id=str(poll_id),
                )
                raise BusinessRuleViolationError("You have already voted on this poll")

            logfire.info("Vote cast", poll_id=str(poll_id), vote_id=str(saved_vote.id))
            return saved_vote

    async def count_votes(self) -> int:
        """Count all votes."""
        return await self.vote_repository.count()

    async def count_votes_for_polls(self, poll_ids: list[PollId]) -> dict[PollId, int]:
        """Total votes per poll."""
        return await self.vote_repository.count_by_polls(poll_ids)
