"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from polly.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from polly.config import VotingSettings
from polly.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    UnauthenticatedError,
    ValidationFailedError,
)
from polly.domain.repository import PollRepository
from polly.domain.service import AuthorizationService, RateLimiter, VoteService
from tests.conftest import make_identity, make_poll
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_cast_vote(self, unit_env: AsyncContainer):
        # Arrange
        cast_vote_use_case = await unit_env.get(CastVoteUseCase)
        poll_repo = await unit_env.get(PollRepository)
        poll = await poll_repo.save(make_poll())

        # Act
        response = await cast_vote_use_case.execute(
            CastVoteRequest(
                poll_id=str(poll.id), option_index=2, identity=make_identity()
            )
        )

        # Assert
        assert response.poll_id == str(poll.id)
        assert response.option_index == 2

    @pytest.mark.asyncio
    async def test_second_vote_is_rejected(self, unit_env: AsyncContainer):
        cast_vote_use_case = await unit_env.get(CastVoteUseCase)
        poll_repo = await unit_env.get(PollRepository)
        poll = await poll_repo.save(make_poll())
        request = CastVoteRequest(
            poll_id=str(poll.id), option_index=0, identity=make_identity()
        )
        await cast_vote_use_case.execute(request)

        with pytest.raises(BusinessRuleViolationError):
            await cast_vote_use_case.execute(request)

    @pytest.mark.asyncio
    async def test_negative_option(self, unit_env: AsyncContainer):
        cast_vote_use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(ValidationFailedError):
            await cast_vote_use_case.execute(
                CastVoteRequest(
                    poll_id=str(uuid4()), option_index=-1, identity=make_identity()
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_vote_rejected_by_default(self, unit_env: AsyncContainer):
        cast_vote_use_case = await unit_env.get(CastVoteUseCase)
        poll_repo = await unit_env.get(PollRepository)
        poll = await poll_repo.save(make_poll())

        with pytest.raises(UnauthenticatedError):
            await cast_vote_use_case.execute(
                CastVoteRequest(poll_id=str(poll.id), option_index=0)
            )

    @pytest.mark.asyncio
    async def test_anonymous_vote_when_allowed(self, unit_env: AsyncContainer):
        # Arrange
        poll_repo = await unit_env.get(PollRepository)
        cast_vote_use_case = CastVoteUseCase(
            vote_service=await unit_env.get(VoteService),
            authorization_service=await unit_env.get(AuthorizationService),
            voting_settings=VotingSettings(allow_anonymous=True),
            rate_limiter=await unit_env.get(RateLimiter),
        )
        poll = await poll_repo.save(make_poll())

        # Act
        response = await cast_vote_use_case.execute(
            CastVoteRequest(poll_id=str(poll.id), option_index=1)
        )

        # Assert
        assert response.option_index == 1

    @pytest.mark.asyncio
    async def test_malformed_poll_id(self, unit_env: AsyncContainer):
        cast_vote_use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await cast_vote_use_case.execute(
                CastVoteRequest(
                    poll_id="nope", option_index=0, identity=make_identity()
                )
            )
