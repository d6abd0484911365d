"""Domain model entities for polly."""

from polly.domain.model.identity import Identity
from polly.domain.model.poll import Poll
from polly.domain.model.rate_limit import RateLimitEntry
from polly.domain.model.vote import Vote

__all__ = [
    "Identity",
    "Poll",
    "RateLimitEntry",
    "Vote",
]
