"""Update poll use case."""

from pydantic import BaseModel

from polly.application.usecase.base import upstream_guard
from polly.domain.error import ForbiddenError, ValidationFailedError
from polly.domain.model.identity import Identity
from polly.domain.service import AuthorizationService, PollService, RateLimiter
from polly.domain.validation import validate_poll_options, validate_poll_question
from polly.domain.value import LimitClass

from .common import PollResponse, parse_poll_id


class UpdatePollRequest(BaseModel):
    """Update poll request."""

    poll_id: str  # UUID string
    identity: Identity | None  # Acting user (must be owner)
    question: str
    options: list[str]
    client_id: str = "unknown"  # Client IP, for the api limit class


class UpdatePollUseCase:
    """Use case for replacing a poll's question and options."""

    def __init__(
        self,
        poll_service: PollService,
        authorization_service: AuthorizationService,
        rate_limiter: RateLimiter,
    ) -> None:
        self.poll_service = poll_service
        self.authorization_service = authorization_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: UpdatePollRequest) -> PollResponse:
        """Execute update poll flow.

        Input is validated before the request is counted against the ``api``
        limit class, and ownership is checked before anything is written.

        Returns:
            Updated poll with current vote counts

        Raises:
            ValidationFailedError: If the question or options are invalid
            RateLimitedError: If the caller exhausted the ``api`` window
            UnauthenticatedError: If there is no acting identity
            ForbiddenError: If the poll doesn't exist or has another owner
            UpstreamFailureError: If the poll couldn't be stored
        """
        question = validate_poll_question(request.question)
        options = validate_poll_options(request.options)

        errors = question.errors + options.errors
        if errors:
            raise ValidationFailedError(errors)

        rate_limit = await self.rate_limiter.enforce(request.client_id, LimitClass.API)

        identity = self.authorization_service.require_authenticated(request.identity)

        poll_id = parse_poll_id(request.poll_id)
        if poll_id is None:
            raise ForbiddenError()

        with upstream_guard(
            "update_poll", "Failed to update poll. Please try again."
        ):
            poll = await self.authorization_service.require_poll_owner(
                identity, poll_id
            )
            updated = await self.poll_service.update_poll(
                poll, question.sanitized, options.sanitized
            )
            votes = await self.poll_service.get_results(updated)

        return PollResponse.from_poll(updated, votes, identity, rate_limit=rate_limit)
