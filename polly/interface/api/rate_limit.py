"""Rate limit headers for routes.

Use cases run the check after validating their input and hand back the
result; routes only render it.
"""

from collections.abc import MutableMapping

from polly.domain.value import RateLimitResult


def rate_limit_headers(result: RateLimitResult) -> dict[str, str]:
    """Standard ``X-RateLimit-*`` headers for a check result."""
    return {
        "X-RateLimit-Limit": str(result.limit),
        "X-RateLimit-Remaining": str(result.remaining),
        "X-RateLimit-Reset": str(int(result.reset_time)),
    }


def apply_rate_limit_headers(
    headers: MutableMapping[str, str], result: RateLimitResult | None
) -> None:
    """Add the headers for ``result``, if the request was counted at all."""
    if result is not None:
        headers.update(rate_limit_headers(result))
