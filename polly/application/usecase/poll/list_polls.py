"""List polls use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from polly.application.usecase.base import RateLimitedResponse, upstream_guard
from polly.domain.model.identity import Identity
from polly.domain.service import PollService, RateLimiter, VoteService
from polly.domain.value import LimitClass


class ListPollsRequest(BaseModel):
    """List polls request."""

    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    identity: Identity | None = None
    client_id: str = "unknown"  # Client IP, for the api limit class


class PollSummary(BaseModel):
    """Poll as shown in a listing."""

    poll_id: str
    owner_id: str
    question: str
    options: list[str]
    total_votes: int
    created_at: datetime
    is_owner: bool


class ListPollsResponse(RateLimitedResponse):
    """List polls response."""

    polls: list[PollSummary]
    total: int


class ListPollsUseCase:
    """Use case for listing polls, newest first."""

    def __init__(
        self,
        poll_service: PollService,
        vote_service: VoteService,
        rate_limiter: RateLimiter,
    ) -> None:
        """Initialize list polls use case.

        Args:
            poll_service: Poll domain service
            vote_service: Vote domain service
            rate_limiter: Rate limiter
        """
        self.poll_service = poll_service
        self.vote_service = vote_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: ListPollsRequest) -> ListPollsResponse:
        """Execute list polls flow.

        Raises:
            RateLimitedError: If the caller exhausted the ``api`` window
            UpstreamFailureError: If polls couldn't be loaded
        """
        rate_limit = await self.rate_limiter.enforce(request.client_id, LimitClass.API)

        with upstream_guard("list_polls", "Failed to load polls. Please try again."):
            polls = await self.poll_service.list_polls(
                limit=request.limit, offset=request.offset
            )
            totals = await self.vote_service.count_votes_for_polls(
                [poll.id for poll in polls]
            )
            total = await self.poll_service.count_polls()

        user_id = request.identity.user_id if request.identity else None

        return ListPollsResponse(
            polls=[
                PollSummary(
                    poll_id=str(poll.id),
                    owner_id=str(poll.owner_id),
                    question=poll.question,
                    options=poll.options,
                    total_votes=totals.get(poll.id, 0),
                    created_at=poll.created_at,
                    is_owner=poll.owner_id == user_id,
                )
                for poll in polls
            ],
            total=total,
            rate_limit=rate_limit,
        )
