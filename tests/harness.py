"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is already running. Settings are loaded
from environment variables (configure via .env or export).
"""

import pytest_asyncio
from fastapi.testclient import TestClient

from polly.interface.api.app import create_app
from polly.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    unmocking and yields a request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_poll(unit_env):
            service = await unit_env.get(PollService)
            poll = await service.create_poll(owner_id, "Question?", ["A", "B"])
            assert poll.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


TEST_PASSWORD = "Passw0rd!"


def create_test_client() -> TestClient:
    """Full app over in-memory persistence and the mock platform."""
    return TestClient(create_app(container=build_test_container()))


def sign_up_and_login(
    client: TestClient,
    email: str = "alice@example.com",
    name: str = "Alice",
    ip: str = "203.0.113.10",
) -> str:
    """Register and sign in through the API.

    The session cookie stays on ``client``. Each user should get its own
    ``ip`` so sign-ups don't share an auth rate limit window.

    Returns:
        The new user's ID
    """
    client.post(
        "/auth/register",
        json={"email": email, "password": TEST_PASSWORD, "name": name},
        headers={"x-real-ip": ip},
    )
    response = client.post(
        "/auth/login",
        json={"email": email, "password": TEST_PASSWORD},
        headers={"x-real-ip": ip},
    )
    assert response.status_code == 200, response.json()
    return response.json()["user_id"]
