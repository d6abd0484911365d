"""Mapping of domain errors to HTTP responses.

Bodies are always ``{"error": ...}``; validation failures add the full
``errors`` list and rate limiting adds ``retryAfter``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from polly.domain.error import (
    BusinessRuleViolationError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    UnauthenticatedError,
    UpstreamFailureError,
    ValidationFailedError,
)

from .rate_limit import rate_limit_headers


async def handle_validation_failed(
    request: Request, exc: ValidationFailedError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,  # Unprocessable Content
        content={"error": str(exc), "errors": exc.errors},
    )


async def handle_rate_limited(request: Request, exc: RateLimitedError) -> JSONResponse:
    headers = rate_limit_headers(exc.result)
    headers["Retry-After"] = str(exc.retry_after)
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"error": str(exc), "retryAfter": exc.retry_after},
        headers=headers,
    )


async def handle_forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN, content={"error": "Forbidden"}
    )


async def handle_unauthenticated(
    request: Request, exc: UnauthenticatedError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"error": str(exc)}
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": f"{exc.resource} not found"},
    )


async def handle_business_rule(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": str(exc)})


async def handle_upstream_failure(
    request: Request, exc: UpstreamFailureError
) -> JSONResponse:
    logfire.error("Upstream failure response", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY, content={"error": str(exc)}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on ``app``."""
    app.add_exception_handler(ValidationFailedError, handle_validation_failed)
    app.add_exception_handler(RateLimitedError, handle_rate_limited)
    app.add_exception_handler(ForbiddenError, handle_forbidden)
    app.add_exception_handler(UnauthenticatedError, handle_unauthenticated)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(BusinessRuleViolationError, handle_business_rule)
    app.add_exception_handler(UpstreamFailureError, handle_upstream_failure)
