"""Rate limit store interface.

The in-memory store is the default. Multi-instance deployments can back this
with a shared cache; a store that needs strict caps under concurrency should
make the read-check-write in ``RateLimiter`` atomic at this boundary.
"""

from abc import ABC, abstractmethod
from typing import Optional

from polly.domain.model.rate_limit import RateLimitEntry


class RateLimitStore(ABC):
    """Counter store keyed by ``"<limit class>:<identifier>"``."""

    @abstractmethod
    async def get(self, key: str) -> Optional[RateLimitEntry]:
        """Return the entry for ``key``, if any."""
        pass

    @abstractmethod
    async def set(self, key: str, entry: RateLimitEntry) -> None:
        """Create or replace the entry for ``key``."""
        pass

    @abstractmethod
    async def sweep(self, now: float) -> int:
        """Remove entries whose window ended before ``now``.

        Returns:
            Number of entries removed
        """
        pass
