"""Authentication domain service."""

import logfire

from polly.domain.value import PlatformSession, PlatformUser

from .base import Service


class AuthClient:
    """Auth platform client interface.

    Implementations raise ``polly.adapter.error.PlatformError`` on any failure.
    """

    async def sign_in_with_password(self, email: str, password: str) -> PlatformSession:
        """Exchange credentials for a session."""
        raise NotImplementedError

    async def sign_up(self, email: str, password: str, name: str) -> PlatformUser:
        """Create an account with ``name`` stored as user metadata."""
        raise NotImplementedError

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind ``access_token``."""
        raise NotImplementedError

    async def list_users(self) -> list[PlatformUser]:
        """List every account (requires the service role key)."""
        raise NotImplementedError


class AuthService(Service):
    """Domain service for credential-based authentication."""

    def __init__(self, auth_client: AuthClient) -> None:
        """Initialize auth service.

        Args:
            auth_client: Auth platform client
        """
        self.auth_client = auth_client

    async def sign_in(self, email: str, password: str) -> PlatformSession:
        """Sign in with email and password.

        Raises:
            PlatformError: If the platform rejects the credentials or fails
        """
        with logfire.span("auth_service.sign_in", email=email):
            session = await self.auth_client.sign_in_with_password(email, password)
            logfire.info("User signed in", user_id=session.user.id)
            return session

    async def sign_up(self, email: str, password: str, name: str) -> PlatformUser:
        """Register a new account.

        Raises:
            PlatformError: If the platform refuses the registration or fails
        """
        with logfire.span("auth_service.sign_up", email=email):
            user = await self.auth_client.sign_up(email, password, name)
            logfire.info("User registered", user_id=user.id)
            return user

    async def sign_out(self, access_token: str) -> None:
        """Sign out the session behind ``access_token``."""
        with logfire.span("auth_service.sign_out"):
            await self.auth_client.sign_out(access_token)

    async def list_users(self) -> list[PlatformUser]:
        """List platform accounts."""
        with logfire.span("auth_service.list_users"):
            users = await self.auth_client.list_users()
            logfire.info("Users listed", count=len(users))
            return users
