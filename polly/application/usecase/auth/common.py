"""Shared auth use case models."""

from polly.application.usecase.base import RateLimitedResponse


class AuthResponse(RateLimitedResponse):
    """Result of an auth action: ``error`` is None on success."""

    error: str | None = None
    user_id: str | None = None
    access_token: str | None = None
    expires_in: int | None = None
