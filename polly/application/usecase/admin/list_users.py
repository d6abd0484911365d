"""List users use case."""

from pydantic import BaseModel

from polly.application.usecase.base import RateLimitedResponse, upstream_guard
from polly.domain.model.identity import Identity
from polly.domain.service import AuthorizationService, AuthService, RateLimiter
from polly.domain.value import LimitClass, PlatformUser


class ListUsersRequest(BaseModel):
    """List users request."""

    identity: Identity | None
    client_id: str = "unknown"  # Client IP, for the api limit class


class ListUsersResponse(RateLimitedResponse):
    """Users registered with the auth platform."""

    users: list[PlatformUser]


class ListUsersUseCase:
    """Use case for listing platform users (admin only)."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        auth_service: AuthService,
        rate_limiter: RateLimiter,
    ) -> None:
        self.authorization_service = authorization_service
        self.auth_service = auth_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        rate_limit = await self.rate_limiter.enforce(request.client_id, LimitClass.API)

        self.authorization_service.require_admin(request.identity)

        with upstream_guard("list_users", "Failed to load users. Please try again."):
            users = await self.auth_service.list_users()

        return ListUsersResponse(users=users, rate_limit=rate_limit)
