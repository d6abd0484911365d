"""Shared pieces of the use case layer."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError

from polly.adapter.error import AdapterError
from polly.domain.error import UpstreamFailureError
from polly.domain.value import RateLimitResult


class RateLimitedResponse(BaseModel):
    """Response of a use case that counted the request against a limit class.

    ``rate_limit`` is the check that admitted the request. Routes turn it
    into ``X-RateLimit-*`` headers; it is never part of the body.
    """

    rate_limit: RateLimitResult | None = Field(default=None, exclude=True)


@contextmanager
def upstream_guard(operation: str, message: str) -> Iterator[None]:
    """Turn platform and database failures into a generic ``UpstreamFailureError``.

    The original error is logged and chained, never surfaced to the caller.

    Args:
        operation: Name recorded in the log
        message: Fixed message returned to the caller
    """
    try:
        yield
    except (AdapterError, SQLAlchemyError) as e:
        logfire.error(
            "Upstream failure",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise UpstreamFailureError(message) from e
