"""Integration tests for the PostgreSQL poll and vote repositories.

Run with ``pytest -m integration`` against a migrated database.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from polly.domain.model import Vote
from polly.domain.repository import PollRepository, VoteRepository
from polly.domain.value import UserId, VoteId
from tests.conftest import make_poll
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def make_vote(poll_id, option_index: int, voter_id=None) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        poll_id=poll_id,
        voter_id=voter_id or UserId(uuid4()),
        option_index=option_index,
    )


class TestPollRepositoryIntegration:
    """PostgresPollRepository against a real database."""

    @pytest.mark.asyncio
    async def test_options_round_trip_through_jsonb(self, integration_env):
        # Arrange
        poll_repo = await integration_env.get(PollRepository)
        poll = make_poll(options=["Café", "Thé", "Eau"])

        # Act
        await poll_repo.save(poll)
        found = await poll_repo.find_by_id(poll.id)

        # Assert
        assert found is not None
        assert found.options == ["Café", "Thé", "Eau"]
        assert found.owner_id == poll.owner_id

    @pytest.mark.asyncio
    async def test_save_upserts_question_and_options(self, integration_env):
        poll_repo = await integration_env.get(PollRepository)
        poll = await poll_repo.save(make_poll())

        await poll_repo.save(
            poll.model_copy(update={"question": "Which one now?", "options": ["X", "Y"]})
        )

        found = await poll_repo.find_by_id(poll.id)
        assert found.question == "Which one now?"
        assert found.options == ["X", "Y"]


class TestVoteRepositoryIntegration:
    """PostgresVoteRepository against a real database."""

    @pytest.mark.asyncio
    async def test_counts_and_cascade(self, integration_env):
        # Arrange
        poll_repo = await integration_env.get(PollRepository)
        vote_repo = await integration_env.get(VoteRepository)
        poll = await poll_repo.save(make_poll())
        for option_index in (0, 2, 2):
            await vote_repo.save(make_vote(poll.id, option_index))

        # Act
        by_option = await vote_repo.count_by_option(poll.id)
        by_poll = await vote_repo.count_by_polls([poll.id])
        await poll_repo.delete(poll.id)

        # Assert
        assert by_option == {0: 1, 2: 2}
        assert by_poll == {poll.id: 3}
        assert await vote_repo.count_by_option(poll.id) == {}

    @pytest.mark.asyncio
    async def test_one_vote_per_voter(self, integration_env):
        # Arrange
        poll_repo = await integration_env.get(PollRepository)
        vote_repo = await integration_env.get(VoteRepository)
        poll = await poll_repo.save(make_poll())
        voter_id = UserId(uuid4())
        await vote_repo.save(make_vote(poll.id, 0, voter_id))

        # Act / Assert
        with pytest.raises(IntegrityError):
            await vote_repo.save(make_vote(poll.id, 1, voter_id))

        # The failed flush leaves the request session unusable
        session = await integration_env.get(AsyncSession)
        await session.rollback()
