"""PostgreSQL implementation of Poll repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from polly.domain.model import Poll
from polly.domain.repository import PollRepository
from polly.domain.value import PollId
from polly.persistence.mappers import poll_to_dict, row_to_poll
from polly.persistence.tables import polls_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        with logfire.span("poll_repository.find_by_id", poll_id=str(poll_id)):
            stmt = select(polls_table).where(polls_table.c.id == poll_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_poll(row._asdict()) if row else None

    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Poll]:
        """Find polls, newest first."""
        stmt = (
            select(polls_table)
            .order_by(desc(polls_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_poll(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all polls."""
        stmt = select(func.count()).select_from(polls_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, poll: Poll) -> Poll:
        """Save a poll (upsert)."""
        poll_dict = poll_to_dict(poll)
        stmt = insert(polls_table).values(**poll_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[polls_table.c.id],
            set_={
                "question": stmt.excluded.question,
                "options": stmt.excluded.options,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return poll

    async def delete(self, poll_id: PollId) -> None:
        """Delete a poll."""
        stmt = delete(polls_table).where(polls_table.c.id == poll_id)
        await self.session.execute(stmt)
        await self.session.flush()
