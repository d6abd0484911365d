"""Get poll use case."""

from pydantic import BaseModel

from polly.application.usecase.base import upstream_guard
from polly.domain.error import NotFoundError
from polly.domain.model.identity import Identity
from polly.domain.service import PollService, RateLimiter
from polly.domain.value import LimitClass

from .common import PollResponse, parse_poll_id


class GetPollRequest(BaseModel):
    """Get poll request."""

    poll_id: str  # UUID string
    identity: Identity | None = None
    client_id: str = "unknown"  # Client IP, for the api limit class


class GetPollUseCase:
    """Use case for viewing a poll and its results."""

    def __init__(self, poll_service: PollService, rate_limiter: RateLimiter) -> None:
        self.poll_service = poll_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: GetPollRequest) -> PollResponse:
        """Fetch a poll with vote counts per option.

        Raises:
            RateLimitedError: If the caller exhausted the ``api`` window
            NotFoundError: If the poll doesn't exist
            UpstreamFailureError: If the poll couldn't be loaded
        """
        rate_limit = await self.rate_limiter.enforce(request.client_id, LimitClass.API)

        poll_id = parse_poll_id(request.poll_id)
        if poll_id is None:
            raise NotFoundError("Poll", request.poll_id)

        with upstream_guard("get_poll", "Failed to load poll. Please try again."):
            poll = await self.poll_service.get_poll_by_id(poll_id)
            if poll is None:
                raise NotFoundError("Poll", request.poll_id)
            votes = await self.poll_service.get_results(poll)

        return PollResponse.from_poll(
            poll, votes, request.identity, rate_limit=rate_limit
        )
