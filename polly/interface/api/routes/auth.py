"""Authentication routes.

The session token lives in an HttpOnly ``auth_token`` cookie; it never
appears in a response body.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request, Response, status
from pydantic import BaseModel

from polly.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from polly.config import Settings
from polly.domain.service import get_client_ip
from polly.interface.api.rate_limit import apply_rate_limit_headers

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)

AUTH_COOKIE = "auth_token"
DEFAULT_COOKIE_MAX_AGE = 3600


class LoginAPIRequest(BaseModel):
    """API request for signing in."""

    email: str = ""
    password: str = ""


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    email: str = ""
    password: str = ""
    name: str = ""


class AuthAPIResponse(BaseModel):
    """Outcome of an auth action; ``error`` is null on success."""

    error: str | None = None
    user_id: str | None = None


def _set_auth_cookie(
    response: Response, token: str, max_age: int | None, settings: Settings
) -> None:
    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        path="/",
        max_age=max_age or DEFAULT_COOKIE_MAX_AGE,
    )


def _to_api_response(result: AuthResponse, response: Response) -> AuthAPIResponse:
    apply_rate_limit_headers(response.headers, result.rate_limit)
    if result.error is not None:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return AuthAPIResponse(error=result.error, user_id=result.user_id)


@router.post("/login", response_model=AuthAPIResponse)
async def login(
    body: LoginAPIRequest,
    request: Request,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthAPIResponse:
    """Sign in with email and password.

    Returns:
        ``{"error": null}`` and the session cookie on success, otherwise
        ``{"error": "..."}`` with status 400

    Raises:
        RateLimitedError: Mapped to 429 after too many attempts
    """
    result = await login_use_case.execute(
        LoginRequest(
            email=body.email,
            password=body.password,
            client_id=get_client_ip(request.headers),
        )
    )

    if result.access_token:
        _set_auth_cookie(response, result.access_token, result.expires_in, settings)

    return _to_api_response(result, response)


@router.post("/register", response_model=AuthAPIResponse)
async def register(
    body: RegisterAPIRequest,
    request: Request,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthAPIResponse:
    """Create an account.

    The platform may require email confirmation, so no session is started.
    """
    result = await register_use_case.execute(
        RegisterRequest(
            email=body.email,
            password=body.password,
            name=body.name,
            client_id=get_client_ip(request.headers),
        )
    )
    if result.error is None:
        response.status_code = status.HTTP_201_CREATED
    return _to_api_response(result, response)


@router.post("/logout", response_model=AuthAPIResponse)
async def logout(
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthAPIResponse:
    """Sign out with the platform and clear the session cookie."""
    result = await logout_use_case.execute(LogoutRequest(access_token=auth_token))

    if result.error is None:
        response.delete_cookie(key=AUTH_COOKIE, path="/")

    return _to_api_response(result, response)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get current user if authenticated, or ``authenticated=false``.

    Safe to call without a session so the frontend can check auth state.
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
