"""PostgreSQL implementation of Vote repository."""

from typing import Sequence

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from polly.domain.model import Vote
from polly.domain.repository import VoteRepository
from polly.domain.value import PollId
from polly.persistence.mappers import vote_to_dict
from polly.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def count_by_option(self, poll_id: PollId) -> dict[int, int]:
        """Count votes per option index."""
        stmt = (
            select(votes_table.c.option_index, func.count())
            .where(votes_table.c.poll_id == poll_id)
            .group_by(votes_table.c.option_index)
        )
        result = await self.session.execute(stmt)
        return {option_index: count for option_index, count in result.fetchall()}

    async def count_by_polls(self, poll_ids: Sequence[PollId]) -> dict[PollId, int]:
        """Count total votes for several polls (batch query)."""
        if not poll_ids:
            return {}

        stmt = (
            select(votes_table.c.poll_id, func.count())
            .where(votes_table.c.poll_id.in_(poll_ids))
            .group_by(votes_table.c.poll_id)
        )
        result = await self.session.execute(stmt)
        return {PollId(poll_id): count for poll_id, count in result.fetchall()}

    async def count(self) -> int:
        """Count all votes."""
        stmt = select(func.count()).select_from(votes_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete_by_poll(self, poll_id: PollId) -> int:
        """Delete every vote on a poll."""
        stmt = delete(votes_table).where(votes_table.c.poll_id == poll_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
