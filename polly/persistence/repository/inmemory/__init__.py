"""In-memory repository implementations."""

from .poll import InMemoryPollRepository
from .rate_limit import InMemoryRateLimitStore
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryPollRepository",
    "InMemoryRateLimitStore",
    "InMemoryVoteRepository",
]
