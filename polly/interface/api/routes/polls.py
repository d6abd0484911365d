"""Poll routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, Response, status
from pydantic import BaseModel

from polly.application.usecase.poll import (
    CreatePollRequest,
    CreatePollUseCase,
    DeletePollRequest,
    DeletePollResponse,
    DeletePollUseCase,
    GetPollRequest,
    GetPollUseCase,
    ListPollsRequest,
    ListPollsResponse,
    ListPollsUseCase,
    PollResponse,
    UpdatePollRequest,
    UpdatePollUseCase,
)
from polly.domain.service import JWTService, get_client_ip
from polly.interface.api.rate_limit import apply_rate_limit_headers

router = APIRouter(prefix="/polls", tags=["polls"], route_class=DishkaRoute)


class PollAPIRequest(BaseModel):
    """API request for creating or replacing a poll.

    Length and count rules are enforced by the validator so every failure
    comes back in one ``errors`` list.
    """

    question: str = ""
    options: list[str] = []


@router.get("", response_model=ListPollsResponse)
async def list_polls(
    request: Request,
    response: Response,
    list_polls_use_case: FromDishka[ListPollsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListPollsResponse:
    """List polls, newest first."""
    result = await list_polls_use_case.execute(
        ListPollsRequest(
            limit=limit,
            offset=offset,
            identity=jwt_service.get_identity(auth_token),
            client_id=get_client_ip(request.headers),
        )
    )
    apply_rate_limit_headers(response.headers, result.rate_limit)
    return result


@router.post("", response_model=PollResponse, status_code=status.HTTP_201_CREATED)
async def create_poll(
    body: PollAPIRequest,
    request: Request,
    response: Response,
    create_poll_use_case: FromDishka[CreatePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PollResponse:
    """Create a poll.

    Requires authentication. Limited by the ``pollCreation`` class, not ``api``.

    Raises:
        ValidationFailedError: Mapped to 422
        RateLimitedError: Mapped to 429
        UnauthenticatedError: Mapped to 401
    """
    result = await create_poll_use_case.execute(
        CreatePollRequest(
            identity=jwt_service.get_identity(auth_token),
            question=body.question,
            options=body.options,
            client_id=get_client_ip(request.headers),
        )
    )
    apply_rate_limit_headers(response.headers, result.rate_limit)
    return result


@router.get("/{poll_id}", response_model=PollResponse)
async def get_poll(
    poll_id: str,
    request: Request,
    response: Response,
    get_poll_use_case: FromDishka[GetPollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PollResponse:
    """Get a poll with its results."""
    result = await get_poll_use_case.execute(
        GetPollRequest(
            poll_id=poll_id,
            identity=jwt_service.get_identity(auth_token),
            client_id=get_client_ip(request.headers),
        )
    )
    apply_rate_limit_headers(response.headers, result.rate_limit)
    return result


@router.patch("/{poll_id}", response_model=PollResponse)
async def update_poll(
    poll_id: str,
    body: PollAPIRequest,
    request: Request,
    response: Response,
    update_poll_use_case: FromDishka[UpdatePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PollResponse:
    """Replace a poll's question and options.

    Only the owner may update; anyone else gets a bare 403. Invalid input is
    rejected before the request counts against the ``api`` limit.
    """
    result = await update_poll_use_case.execute(
        UpdatePollRequest(
            poll_id=poll_id,
            identity=jwt_service.get_identity(auth_token),
            question=body.question,
            options=body.options,
            client_id=get_client_ip(request.headers),
        )
    )
    apply_rate_limit_headers(response.headers, result.rate_limit)
    return result


@router.delete("/{poll_id}", response_model=DeletePollResponse)
async def delete_poll(
    poll_id: str,
    request: Request,
    response: Response,
    delete_poll_use_case: FromDishka[DeletePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePollResponse:
    """Delete a poll and its votes. Only the owner may delete."""
    result = await delete_poll_use_case.execute(
        DeletePollRequest(
            poll_id=poll_id,
            identity=jwt_service.get_identity(auth_token),
            client_id=get_client_ip(request.headers),
        )
    )
    apply_rate_limit_headers(response.headers, result.rate_limit)
    return result
