"""Fixed-window rate limiting domain service."""

import time
from collections.abc import Callable, Mapping

import logfire

from polly.domain.error import RateLimitedError
from polly.domain.model.rate_limit import RateLimitEntry
from polly.domain.repository import RateLimitStore
from polly.domain.value import (
    RATE_LIMIT_POLICIES,
    LimitClass,
    RateLimitPolicy,
    RateLimitResult,
)

from .base import Service

Clock = Callable[[], float]

UNKNOWN_CLIENT = "unknown"


def get_client_ip(headers: Mapping[str, str]) -> str:
    """Derive the rate limit identifier for an HTTP caller.

    Prefers the CDN client-IP header, then the real-IP header, then the first
    hop of the forwarded-for list. Callers with none of these all share the
    ``"unknown"`` bucket.

    Args:
        headers: Request headers (lowercase keys, or a case-insensitive mapping)

    Returns:
        Client IP address, or "unknown"
    """
    cf_connecting_ip = headers.get("cf-connecting-ip")
    if cf_connecting_ip:
        return cf_connecting_ip

    real_ip = headers.get("x-real-ip")
    if real_ip:
        return real_ip

    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop

    return UNKNOWN_CLIENT


class RateLimiter(Service):
    """Fixed (non-sliding) window limiter over a ``RateLimitStore``.

    The read-check-write sequence in ``check_rate_limit`` is not atomic:
    concurrent requests for the same key can both be admitted at the cap.
    """

    def __init__(
        self,
        store: RateLimitStore,
        policies: Mapping[LimitClass, RateLimitPolicy] = RATE_LIMIT_POLICIES,
        clock: Clock = time.time,
        enabled: bool = True,
    ) -> None:
        """Initialize rate limiter.

        Args:
            store: Counter store shared by every request in the process
            policies: Cap and window per limit class
            clock: Returns the current time in epoch seconds
            enabled: When False every check is allowed and nothing is counted
        """
        self.store = store
        self.policies = policies
        self.clock = clock
        self.enabled = enabled

    @staticmethod
    def _key(identifier: str, limit_class: LimitClass) -> str:
        return f"{limit_class.value}:{identifier}"

    async def check_rate_limit(
        self, identifier: str, limit_class: LimitClass
    ) -> RateLimitResult:
        """Count one request against ``identifier`` in ``limit_class``.

        Args:
            identifier: Client identifier (IP address, user ID, ...)
            limit_class: Which policy applies

        Returns:
            Whether the request is allowed, attempts left and window reset time
        """
        policy = self.policies[limit_class]
        now = self.clock()

        if not self.enabled:
            return RateLimitResult(
                allowed=True,
                remaining=policy.max_attempts,
                reset_time=now + policy.window_seconds,
                limit=policy.max_attempts,
            )

        key = self._key(identifier, limit_class)
        entry = await self.store.get(key)

        if entry is None or entry.is_expired(now):
            # No entry or window has expired, start a new window
            entry = RateLimitEntry(count=1, reset_time=now + policy.window_seconds)
            await self.store.set(key, entry)
            return RateLimitResult(
                allowed=True,
                remaining=policy.max_attempts - 1,
                reset_time=entry.reset_time,
                limit=policy.max_attempts,
            )

        if entry.count >= policy.max_attempts:
            # Denied requests are not counted
            logfire.warn(
                "Rate limit exceeded",
                limit_class=limit_class.value,
                identifier=identifier,
                reset_time=entry.reset_time,
            )
            return RateLimitResult(
                allowed=False,
                remaining=0,
                reset_time=entry.reset_time,
                limit=policy.max_attempts,
            )

        entry = entry.model_copy(update={"count": entry.count + 1})
        await self.store.set(key, entry)

        return RateLimitResult(
            allowed=True,
            remaining=policy.max_attempts - entry.count,
            reset_time=entry.reset_time,
            limit=policy.max_attempts,
        )

    async def enforce(self, identifier: str, limit_class: LimitClass) -> RateLimitResult:
        """Check the limit and raise when the request is denied.

        Raises:
            RateLimitedError: If the window's cap has been reached
        """
        result = await self.check_rate_limit(identifier, limit_class)
        if not result.allowed:
            raise RateLimitedError(result, retry_after=result.retry_after(self.clock()))
        return result

    async def cleanup_expired_entries(self) -> int:
        """Drop every entry whose window has ended.

        Returns:
            Number of entries removed
        """
        removed = await self.store.sweep(self.clock())
        if removed:
            logfire.debug("Expired rate limit entries removed", removed=removed)
        return removed
