"""Admin overview use case."""

from pydantic import BaseModel, Field

from polly.application.usecase.base import RateLimitedResponse, upstream_guard
from polly.application.usecase.poll.list_polls import PollSummary
from polly.domain.model.identity import Identity
from polly.domain.service import (
    AuthorizationService,
    PollService,
    RateLimiter,
    VoteService,
)
from polly.domain.value import LimitClass


class AdminOverviewRequest(BaseModel):
    """Admin overview request."""

    identity: Identity | None
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)
    client_id: str = "unknown"  # Client IP, for the api limit class


class AdminOverviewResponse(RateLimitedResponse):
    """Platform-wide poll and vote totals."""

    total_polls: int
    total_votes: int
    polls: list[PollSummary]


class AdminOverviewUseCase:
    """Use case for the admin dashboard overview."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        poll_service: PollService,
        vote_service: VoteService,
        rate_limiter: RateLimiter,
    ) -> None:
        """Initialize admin overview use case.

        Args:
            authorization_service: Authorization gate
            poll_service: Poll domain service
            vote_service: Vote domain service
            rate_limiter: Rate limiter
        """
        self.authorization_service = authorization_service
        self.poll_service = poll_service
        self.vote_service = vote_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: AdminOverviewRequest) -> AdminOverviewResponse:
        """Execute admin overview flow.

        Raises:
            RateLimitedError: If the caller exhausted the ``api`` window
            UnauthenticatedError: If there is no acting identity
            ForbiddenError: If the identity is not an admin
            UpstreamFailureError: If totals couldn't be loaded
        """
        rate_limit = await self.rate_limiter.enforce(request.client_id, LimitClass.API)

        self.authorization_service.require_admin(request.identity)

        with upstream_guard(
            "admin_overview", "Failed to load overview. Please try again."
        ):
            polls = await self.poll_service.list_polls(
                limit=request.limit, offset=request.offset
            )
            totals = await self.vote_service.count_votes_for_polls(
                [poll.id for poll in polls]
            )
            total_polls = await self.poll_service.count_polls()
            total_votes = await self.vote_service.count_votes()

        return AdminOverviewResponse(
            total_polls=total_polls,
            total_votes=total_votes,
            polls=[
                PollSummary(
                    poll_id=str(poll.id),
                    owner_id=str(poll.owner_id),
                    question=poll.question,
                    options=poll.options,
                    total_votes=totals.get(poll.id, 0),
                    created_at=poll.created_at,
                    is_owner=False,
                )
                for poll in polls
            ],
            rate_limit=rate_limit,
        )
