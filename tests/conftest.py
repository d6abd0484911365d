"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire
import pytest

from polly.config import PlatformSettings, Settings
from polly.domain.model import Identity, Poll
from polly.domain.value import PollId, Role, UserId
from polly.util.jwt import create_token


TEST_JWT_SECRET = "test-secret-that-is-long-enough-for-hs256"


class FakeClock:
    """Manually advanced clock for rate limiter tests."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="session", autouse=True)
def _quiet_logfire():
    """Keep spans and logs local and off the console."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def _test_environment_settings(monkeypatch):
    """Keep tests independent of a developer's .env file."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("PLATFORM__JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.delenv("ADMIN__EMAILS", raising=False)
    monkeypatch.delenv("VOTING__ALLOW_ANONYMOUS", raising=False)
    monkeypatch.delenv("RATE_LIMIT__ENABLED", raising=False)


def make_identity(
    email: str = "alice@example.com", name: str = "Alice", role: Role = Role.REGULAR
) -> Identity:
    """Build an identity with a fresh user ID."""
    return Identity(user_id=UserId(uuid4()), email=email, name=name, role=role)


def make_poll(
    owner_id: UserId | None = None,
    question: str = "What is your favourite colour?",
    options: list[str] | None = None,
) -> Poll:
    """Build an unsaved poll."""
    now = datetime.now()
    return Poll(
        id=PollId(uuid4()),
        owner_id=owner_id or UserId(uuid4()),
        question=question,
        options=options or ["Red", "Green", "Blue"],
        created_at=now,
        updated_at=now,
    )


def make_token(identity: Identity, settings: PlatformSettings | None = None) -> str:
    """Sign an access token for ``identity`` the way the platform would."""
    return create_token(
        str(identity.user_id),
        identity.email,
        identity.name,
        settings or Settings().platform,
    )
