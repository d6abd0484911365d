"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request, Response, status
from pydantic import BaseModel

from polly.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from polly.domain.service import JWTService, get_client_ip
from polly.interface.api.rate_limit import apply_rate_limit_headers

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting."""

    option_index: int


@router.post(
    "/polls/{poll_id}/vote",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def cast_vote(
    poll_id: str,
    body: CastVoteAPIRequest,
    request: Request,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote for one option of a poll.

    Args:
        poll_id: Poll UUID
        body: Zero-based option index
        request: Incoming request (for the client IP)
        response: Outgoing response (rate limit headers)
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The recorded vote

    Raises:
        ValidationFailedError: Mapped to 422 for a negative or unknown option
        NotFoundError: Mapped to 404
        BusinessRuleViolationError: Mapped to 409 on a second vote
    """
    result = await cast_vote_use_case.execute(
        CastVoteRequest(
            poll_id=poll_id,
            option_index=body.option_index,
            identity=jwt_service.get_identity(auth_token),
            client_id=get_client_ip(request.headers),
        )
    )
    apply_rate_limit_headers(response.headers, result.rate_limit)
    return result
