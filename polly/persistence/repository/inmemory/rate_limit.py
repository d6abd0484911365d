"""In-memory rate limit store.

The default store for a single process, also used by tests.
"""

from typing import Optional

from polly.domain.model.rate_limit import RateLimitEntry
from polly.domain.repository.rate_limit import RateLimitStore


class InMemoryRateLimitStore(RateLimitStore):
    """Process-wide dict of rate limit windows."""

    def __init__(self) -> None:
        self._entries: dict[str, RateLimitEntry] = {}

    async def get(self, key: str) -> Optional[RateLimitEntry]:
        """Return the entry for ``key``, if any."""
        return self._entries.get(key)

    async def set(self, key: str, entry: RateLimitEntry) -> None:
        """Create or replace the entry for ``key``."""
        self._entries[key] = entry

    async def sweep(self, now: float) -> int:
        """Remove expired entries.

        Runs without yielding to the event loop, so no check can interleave
        with a pass.
        """
        removed = 0
        for key, entry in list(self._entries.items()):
            if entry.is_expired(now):
                del self._entries[key]
                removed += 1
        return removed

    def __len__(self) -> int:
        return len(self._entries)
