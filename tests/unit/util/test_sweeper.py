"""Unit tests for the periodic rate limit sweep."""

import asyncio
from contextlib import suppress

import pytest

from polly.domain.service import RateLimiter
from polly.domain.value import LimitClass
from polly.persistence.repository.inmemory import InMemoryRateLimitStore
from polly.util.sweeper import run_periodic_sweep


class TestRunPeriodicSweep:
    """Tests for run_periodic_sweep."""

    @pytest.mark.asyncio
    async def test_expired_entries_are_swept(self, clock):
        # Arrange
        store = InMemoryRateLimitStore()
        limiter = RateLimiter(store=store, clock=clock)
        await limiter.check_rate_limit("ip", LimitClass.API)
        clock.advance(61)

        # Act
        task = asyncio.create_task(run_periodic_sweep(limiter, interval_seconds=0.01))
        for _ in range(100):
            await asyncio.sleep(0.01)
            if len(store) == 0:
                break
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task

        # Assert
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_failed_pass_does_not_stop_the_loop(self, clock):
        calls = 0

        class FlakyLimiter:
            async def cleanup_expired_entries(self) -> int:
                nonlocal calls
                calls += 1
                if calls == 1:
                    raise RuntimeError("store unavailable")
                return 0

        task = asyncio.create_task(
            run_periodic_sweep(FlakyLimiter(), interval_seconds=0.01)
        )
        for _ in range(100):
            await asyncio.sleep(0.01)
            if calls >= 2:
                break
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task

        assert calls >= 2
