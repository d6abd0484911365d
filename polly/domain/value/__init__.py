"""Domain value objects for polly."""

from polly.domain.value.identifiers import PollId, UserId, VoteId
from polly.domain.value.types import (
    RATE_LIMIT_POLICIES,
    LimitClass,
    PlatformSession,
    PlatformUser,
    RateLimitPolicy,
    RateLimitResult,
    Role,
)

__all__ = [
    # Identifiers
    "PollId",
    "UserId",
    "VoteId",
    # Types
    "LimitClass",
    "PlatformSession",
    "PlatformUser",
    "RATE_LIMIT_POLICIES",
    "RateLimitPolicy",
    "RateLimitResult",
    "Role",
]
