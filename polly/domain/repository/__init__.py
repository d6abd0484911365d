"""Repository interfaces for polly domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from polly.domain.repository.poll import PollRepository
from polly.domain.repository.rate_limit import RateLimitStore
from polly.domain.repository.vote import VoteRepository

__all__ = [
    "PollRepository",
    "RateLimitStore",
    "VoteRepository",
]
