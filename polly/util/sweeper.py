"""Background sweep of expired rate limit windows."""

import asyncio

import logfire

from polly.domain.service.rate_limit_service import RateLimiter


async def run_periodic_sweep(rate_limiter: RateLimiter, interval_seconds: float) -> None:
    """Sweep expired entries every ``interval_seconds`` until cancelled.

    Args:
        rate_limiter: Limiter whose store is swept
        interval_seconds: Pause between sweeps
    """
    logfire.info("Rate limit sweeper started", interval_seconds=interval_seconds)
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await rate_limiter.cleanup_expired_entries()
        except Exception as e:
            # A failed pass must not stop later ones
            logfire.error("Rate limit sweep failed", error=str(e))
