"""Create poll use case."""

from pydantic import BaseModel

from polly.application.usecase.base import upstream_guard
from polly.domain.error import ValidationFailedError
from polly.domain.model.identity import Identity
from polly.domain.service import AuthorizationService, PollService, RateLimiter
from polly.domain.validation import validate_poll_options, validate_poll_question
from polly.domain.value import LimitClass

from .common import PollResponse


class CreatePollRequest(BaseModel):
    """Create poll request."""

    identity: Identity | None  # Acting user (None when unauthenticated)
    question: str
    options: list[str]
    client_id: str = "unknown"  # Client IP, used when there is no identity


class CreatePollUseCase:
    """Use case for creating a poll."""

    def __init__(
        self,
        poll_service: PollService,
        authorization_service: AuthorizationService,
        rate_limiter: RateLimiter,
    ) -> None:
        """Initialize create poll use case.

        Args:
            poll_service: Poll domain service
            authorization_service: Authorization gate
            rate_limiter: Rate limiter
        """
        self.poll_service = poll_service
        self.authorization_service = authorization_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: CreatePollRequest) -> PollResponse:
        """Execute create poll flow.

        Steps:
        1. Validate and sanitize question and options
        2. Count the attempt against the ``pollCreation`` limit class
        3. Require an authenticated caller
        4. Persist the sanitized poll

        Returns:
            Created poll with zeroed vote counts

        Raises:
            ValidationFailedError: If the question or options are invalid
            RateLimitedError: If the caller created too many polls recently
            UnauthenticatedError: If there is no acting identity
            UpstreamFailureError: If the poll couldn't be stored
        """
        question = validate_poll_question(request.question)
        options = validate_poll_options(request.options)

        errors = question.errors + options.errors
        if errors:
            raise ValidationFailedError(errors)

        identifier = (
            str(request.identity.user_id) if request.identity else request.client_id
        )
        rate_limit = await self.rate_limiter.enforce(
            identifier, LimitClass.POLL_CREATION
        )

        identity = self.authorization_service.require_authenticated(request.identity)

        with upstream_guard(
            "create_poll", "Failed to create poll. Please try again."
        ):
            poll = await self.poll_service.create_poll(
                owner_id=identity.user_id,
                question=question.sanitized,
                options=options.sanitized,
            )

        return PollResponse.from_poll(
            poll, [0] * len(poll.options), identity, rate_limit=rate_limit
        )
