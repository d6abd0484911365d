"""Logout use case."""

import logfire
from pydantic import BaseModel

from polly.adapter.error import AdapterError
from polly.domain.service import AuthService

from .common import AuthResponse

LOGOUT_FAILED = "Failed to sign out. Please try again."


class LogoutRequest(BaseModel):
    """Logout request."""

    access_token: str | None = None


class LogoutUseCase:
    """Use case for ending the current session."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LogoutRequest) -> AuthResponse:
        """Sign out with the platform; a missing token is already signed out."""
        if not request.access_token:
            return AuthResponse(error=None)

        try:
            await self.auth_service.sign_out(request.access_token)
        except AdapterError as e:
            logfire.warn("Logout failed", error=str(e))
            return AuthResponse(error=LOGOUT_FAILED)

        return AuthResponse(error=None)
