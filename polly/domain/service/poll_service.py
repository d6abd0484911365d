"""Poll domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from polly.domain.model.poll import Poll
from polly.domain.repository import PollRepository, VoteRepository
from polly.domain.value import PollId, UserId

from .base import Service


class PollService(Service):
    """Domain service for poll operations."""

    def __init__(
        self, poll_repository: PollRepository, vote_repository: VoteRepository
    ) -> None:
        """Initialize poll service.

        Args:
            poll_repository: Poll repository
            vote_repository: Vote repository
        """
        self.poll_repository = poll_repository
        self.vote_repository = vote_repository

    async def create_poll(
        self, owner_id: UserId, question: str, options: list[str]
    ) -> Poll:
        """Create a poll from already-sanitized input.

        Args:
            owner_id: Creating user
            question: Sanitized question
            options: Sanitized options

        Returns:
            Saved poll
        """
        now = datetime.now()
        poll = Poll(
            id=PollId(uuid4()),
            owner_id=owner_id,
            question=question,
            options=options,
            created_at=now,
            updated_at=now,
        )

        with logfire.span(
            "poll_service.create_poll", poll_id=str(poll.id), owner_id=str(owner_id)
        ):
            saved = await self.poll_repository.save(poll)
            logfire.info(
                "Poll created", poll_id=str(saved.id), option_count=len(saved.options)
            )
            return saved

    async def get_poll_by_id(self, poll_id: PollId) -> Poll | None:
        """Get a poll by ID.

        Returns:
            Poll if found, None otherwise
        """
        with logfire.span("poll_service.get_poll_by_id", poll_id=str(poll_id)):
            poll = await self.poll_repository.find_by_id(poll_id)

            if not poll:
                logfire.warn("Poll not found", poll_id=str(poll_id))

            return poll

    async def list_polls(self, limit: int = 30, offset: int = 0) -> list[Poll]:
        """List polls, newest first."""
        with logfire.span("poll_service.list_polls", limit=limit, offset=offset):
            return await self.poll_repository.find_all(limit=limit, offset=offset)

    async def count_polls(self) -> int:
        """Count all polls."""
        return await self.poll_repository.count()

    async def update_poll(self, poll: Poll, question: str, options: list[str]) -> Poll:
        """Replace a poll's question and options.

        Votes are cleared when the option list changes, since their indexes
        would no longer point at the options they were cast for.

        Args:
            poll: Current poll (ownership already checked)
            question: Sanitized question
            options: Sanitized options

        Returns:
            Updated poll
        """
        with logfire.span("poll_service.update_poll", poll_id=str(poll.id)):
            options_changed = options != poll.options

            updated = poll.model_copy(
                update={
                    "question": question,
                    "options": options,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.poll_repository.save(updated)

            if options_changed:
                cleared = await self.vote_repository.delete_by_poll(poll.id)
                logfire.info(
                    "Votes cleared after option change",
                    poll_id=str(poll.id),
                    cleared=cleared,
                )

            logfire.info("Poll updated", poll_id=str(poll.id))
            return saved

    async def delete_poll(self, poll_id: PollId) -> None:
        """Delete a poll and its votes (ownership already checked)."""
        with logfire.span("poll_service.delete_poll", poll_id=str(poll_id)):
            removed_votes = await self.vote_repository.delete_by_poll(poll_id)
            await self.poll_repository.delete(poll_id)
            logfire.info(
                "Poll deleted", poll_id=str(poll_id), removed_votes=removed_votes
            )

    async def get_results(self, poll: Poll) -> list[int]:
        """Vote count for each option of ``poll``, in option order."""
        counts = await self.vote_repository.count_by_option(poll.id)
        return [counts.get(index, 0) for index in range(len(poll.options))]
