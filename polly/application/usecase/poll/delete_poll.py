"""Delete poll use case."""

from pydantic import BaseModel

from polly.application.usecase.base import RateLimitedResponse, upstream_guard
from polly.domain.error import ForbiddenError
from polly.domain.model.identity import Identity
from polly.domain.service import AuthorizationService, PollService, RateLimiter
from polly.domain.value import LimitClass

from .common import parse_poll_id


class DeletePollRequest(BaseModel):
    """Delete poll request."""

    poll_id: str  # UUID string
    identity: Identity | None  # Acting user (must be owner)
    client_id: str = "unknown"  # Client IP, for the api limit class


class DeletePollResponse(RateLimitedResponse):
    """Delete poll response."""

    poll_id: str
    deleted: bool


class DeletePollUseCase:
    """Use case for deleting a poll and its votes."""

    def __init__(
        self,
        poll_service: PollService,
        authorization_service: AuthorizationService,
        rate_limiter: RateLimiter,
    ) -> None:
        """Initialize delete poll use case.

        Args:
            poll_service: Poll domain service
            authorization_service: Authorization gate
            rate_limiter: Rate limiter
        """
        self.poll_service = poll_service
        self.authorization_service = authorization_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: DeletePollRequest) -> DeletePollResponse:
        """Execute delete poll flow.

        Raises:
            RateLimitedError: If the caller exhausted the ``api`` window
            UnauthenticatedError: If there is no acting identity
            ForbiddenError: If the poll doesn't exist or has another owner
            UpstreamFailureError: If the poll couldn't be deleted
        """
        rate_limit = await self.rate_limiter.enforce(request.client_id, LimitClass.API)

        identity = self.authorization_service.require_authenticated(request.identity)

        poll_id = parse_poll_id(request.poll_id)
        if poll_id is None:
            raise ForbiddenError()

        with upstream_guard(
            "delete_poll", "Failed to delete poll. Please try again."
        ):
            await self.authorization_service.require_poll_owner(identity, poll_id)
            await self.poll_service.delete_poll(poll_id)

        return DeletePollResponse(
            poll_id=request.poll_id, deleted=True, rate_limit=rate_limit
        )
