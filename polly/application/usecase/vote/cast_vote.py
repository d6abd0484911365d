"""Cast vote use case."""

from datetime import datetime

from pydantic import BaseModel

from polly.application.usecase.base import RateLimitedResponse, upstream_guard
from polly.application.usecase.poll.common import parse_poll_id
from polly.config import VotingSettings
from polly.domain.error import NotFoundError, ValidationFailedError
from polly.domain.model.identity import Identity
from polly.domain.service import AuthorizationService, RateLimiter, VoteService
from polly.domain.value import LimitClass


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    poll_id: str  # UUID string
    option_index: int  # Zero-based
    identity: Identity | None = None
    client_id: str = "unknown"  # Client IP, for the api limit class


class CastVoteResponse(RateLimitedResponse):
    """Cast vote response."""

    vote_id: str
    poll_id: str
    option_index: int
    created_at: datetime


class CastVoteUseCase:
    """Use case for voting on a poll."""

    def __init__(
        self,
        vote_service: VoteService,
        authorization_service: AuthorizationService,
        voting_settings: VotingSettings,
        rate_limiter: RateLimiter,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            authorization_service: Authorization gate
            voting_settings: Voting policy (anonymous votes)
            rate_limiter: Rate limiter
        """
        self.vote_service = vote_service
        self.authorization_service = authorization_service
        self.voting_settings = voting_settings
        self.rate_limiter = rate_limiter

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Returns:
            The recorded vote

        Raises:
            ValidationFailedError: If the option index is out of range
            RateLimitedError: If the caller exhausted the ``api`` window
            UnauthenticatedError: If anonymous voting is off and there is no identity
            NotFoundError: If the poll doesn't exist
            BusinessRuleViolationError: If the user already voted on this poll
            UpstreamFailureError: If the vote couldn't be stored
        """
        if request.option_index < 0:
            raise ValidationFailedError(["Please select a valid option"])

        rate_limit = await self.rate_limiter.enforce(request.client_id, LimitClass.API)

        if not self.voting_settings.allow_anonymous:
            self.authorization_service.require_authenticated(request.identity)

        poll_id = parse_poll_id(request.poll_id)
        if poll_id is None:
            raise NotFoundError("Poll", request.poll_id)

        voter_id = request.identity.user_id if request.identity else None

        with upstream_guard("cast_vote", "Failed to record vote. Please try again."):
            vote = await self.vote_service.cast_vote(
                poll_id, voter_id, request.option_index
            )

        return CastVoteResponse(
            vote_id=str(vote.id),
            poll_id=str(vote.poll_id),
            option_index=vote.option_index,
            created_at=vote.created_at,
            rate_limit=rate_limit,
        )
