"""Register use case."""

import logfire
from pydantic import BaseModel

from polly.adapter.error import AdapterError
from polly.domain.service import AuthService, RateLimiter
from polly.domain.validation import validate_email, validate_name, validate_password
from polly.domain.value import LimitClass

from .common import AuthResponse

REGISTRATION_FAILED = "Failed to create account. Please try again."


class RegisterRequest(BaseModel):
    """Register request."""

    email: str
    password: str
    name: str
    client_id: str = "unknown"  # Rate limit identifier (client IP)


class RegisterUseCase:
    """Use case for creating an account."""

    def __init__(self, auth_service: AuthService, rate_limiter: RateLimiter) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            rate_limiter: Rate limiter
        """
        self.auth_service = auth_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Returns:
            Auth response with the new user ID, or an error message

        Raises:
            RateLimitedError: If too many attempts were made from this client
        """
        email = validate_email(request.email)
        password = validate_password(request.password)
        name = validate_name(request.name)

        for result in (email, password, name):
            if not result.is_valid:
                return AuthResponse(error=result.errors[0])

        rate_limit = await self.rate_limiter.enforce(
            request.client_id, LimitClass.AUTH
        )

        try:
            user = await self.auth_service.sign_up(
                email.sanitized, request.password, name.sanitized
            )
        except AdapterError as e:
            # Covers "already registered" too, so accounts can't be enumerated
            logfire.warn("Registration failed", error=str(e))
            return AuthResponse(error=REGISTRATION_FAILED, rate_limit=rate_limit)

        return AuthResponse(error=None, user_id=user.id, rate_limit=rate_limit)
