"""Login use case."""

import logfire
from pydantic import BaseModel

from polly.adapter.error import AdapterError
from polly.domain.service import AuthService, RateLimiter
from polly.domain.validation import validate_email, validate_password
from polly.domain.value import LimitClass

from .common import AuthResponse

INVALID_CREDENTIALS = "Invalid email or password"


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str
    client_id: str = "unknown"  # Rate limit identifier (client IP)


class LoginUseCase:
    """Use case for email/password sign-in."""

    def __init__(self, auth_service: AuthService, rate_limiter: RateLimiter) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            rate_limiter: Rate limiter
        """
        self.auth_service = auth_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Steps:
        1. Validate email and password (first error is returned as-is)
        2. Count the attempt against the ``auth`` limit class
        3. Sign in with the platform
        4. Map any platform failure to a single generic message

        Returns:
            Auth response with the session token, or an error message

        Raises:
            RateLimitedError: If too many attempts were made from this client
        """
        email = validate_email(request.email)
        password = validate_password(request.password)

        if not email.is_valid:
            return AuthResponse(error=email.errors[0])

        if not password.is_valid:
            return AuthResponse(error=password.errors[0])

        rate_limit = await self.rate_limiter.enforce(
            request.client_id, LimitClass.AUTH
        )

        try:
            session = await self.auth_service.sign_in(email.sanitized, request.password)
        except AdapterError as e:
            # Never tell the caller whether the account exists
            logfire.warn("Login failed", error=str(e))
            return AuthResponse(error=INVALID_CREDENTIALS, rate_limit=rate_limit)

        return AuthResponse(
            error=None,
            user_id=session.user.id,
            access_token=session.access_token,
            expires_in=session.expires_in,
            rate_limit=rate_limit,
        )
