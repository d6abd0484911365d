"""Unit tests for the admin use cases."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from polly.adapter.platform import MockPlatformAuthClient
from polly.application.usecase.admin import (
    AdminOverviewRequest,
    AdminOverviewUseCase,
    ListUsersRequest,
    ListUsersUseCase,
)
from polly.domain.error import ForbiddenError, UpstreamFailureError
from polly.domain.repository import PollRepository
from polly.domain.service import VoteService
from polly.domain.value import UserId
from tests.conftest import make_identity, make_poll
from tests.harness import create_env_fixture

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture(autouse=True)
def _admin_allow_list(monkeypatch, _test_environment_settings):
    monkeypatch.setenv("ADMIN__EMAILS", f'["{ADMIN_EMAIL}"]')


# Unit test fixture
unit_env = create_env_fixture()


class TestAdminOverviewUseCase:
    """Tests for AdminOverviewUseCase."""

    @pytest.mark.asyncio
    async def test_overview_totals(self, unit_env: AsyncContainer):
        # Arrange
        overview_use_case = await unit_env.get(AdminOverviewUseCase)
        poll_repo = await unit_env.get(PollRepository)
        vote_service = await unit_env.get(VoteService)
        poll = await poll_repo.save(make_poll())
        await poll_repo.save(make_poll())
        await vote_service.cast_vote(poll.id, UserId(uuid4()), 0)

        # Act
        response = await overview_use_case.execute(
            AdminOverviewRequest(identity=make_identity(email=ADMIN_EMAIL))
        )

        # Assert
        assert response.total_polls == 2
        assert response.total_votes == 1
        assert len(response.polls) == 2

    @pytest.mark.asyncio
    async def test_regular_user_is_forbidden(self, unit_env: AsyncContainer):
        overview_use_case = await unit_env.get(AdminOverviewUseCase)

        with pytest.raises(ForbiddenError):
            await overview_use_case.execute(
                AdminOverviewRequest(identity=make_identity())
            )


class TestListUsersUseCase:
    """Tests for ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_lists_platform_users(self, unit_env: AsyncContainer):
        list_users_use_case = await unit_env.get(ListUsersUseCase)
        client = await unit_env.get(MockPlatformAuthClient)
        await client.sign_up("carol@example.com", "Passw0rd!", "Carol")

        response = await list_users_use_case.execute(
            ListUsersRequest(identity=make_identity(email=ADMIN_EMAIL))
        )

        assert [user.email for user in response.users] == ["carol@example.com"]

    @pytest.mark.asyncio
    async def test_platform_failure_is_generic(self, unit_env: AsyncContainer):
        list_users_use_case = await unit_env.get(ListUsersUseCase)
        client = await unit_env.get(MockPlatformAuthClient)
        client.fail_next = True

        with pytest.raises(UpstreamFailureError) as exc_info:
            await list_users_use_case.execute(
                ListUsersRequest(identity=make_identity(email=ADMIN_EMAIL))
            )

        assert str(exc_info.value) == "Failed to load users. Please try again."
