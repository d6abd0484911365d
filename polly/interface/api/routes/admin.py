"""Admin routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, Response

from polly.application.usecase.admin import (
    AdminOverviewRequest,
    AdminOverviewResponse,
    AdminOverviewUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
)
from polly.domain.service import JWTService, get_client_ip
from polly.interface.api.rate_limit import apply_rate_limit_headers

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/overview", response_model=AdminOverviewResponse)
async def overview(
    request: Request,
    response: Response,
    admin_overview_use_case: FromDishka[AdminOverviewUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> AdminOverviewResponse:
    """Poll and vote totals for the whole platform. Admins only."""
    result = await admin_overview_use_case.execute(
        AdminOverviewRequest(
            identity=jwt_service.get_identity(auth_token),
            limit=limit,
            offset=offset,
            client_id=get_client_ip(request.headers),
        )
    )
    apply_rate_limit_headers(response.headers, result.rate_limit)
    return result


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    request: Request,
    response: Response,
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListUsersResponse:
    """Users registered with the auth platform. Admins only."""
    result = await list_users_use_case.execute(
        ListUsersRequest(
            identity=jwt_service.get_identity(auth_token),
            client_id=get_client_ip(request.headers),
        )
    )
    apply_rate_limit_headers(response.headers, result.rate_limit)
    return result
