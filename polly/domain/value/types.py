"""Domain value objects for polly.

Value objects are immutable and defined by their values, not identity.
"""

import math
from enum import Enum

from pydantic import Field

from polly.domain.value.common import ValueObject


class Role(str, Enum):
    """Capability held by an authenticated identity."""

    REGULAR = "regular"
    ADMIN = "admin"


class LimitClass(str, Enum):
    """Named category of rate-limited operation."""

    AUTH = "auth"
    POLL_CREATION = "pollCreation"
    API = "api"


class RateLimitPolicy(ValueObject):
    """Fixed-window cap for one limit class."""

    max_attempts: int = Field(gt=0)
    window_seconds: float = Field(gt=0)


RATE_LIMIT_POLICIES: dict[LimitClass, RateLimitPolicy] = {
    # Authentication attempts
    LimitClass.AUTH: RateLimitPolicy(max_attempts=5, window_seconds=15 * 60),
    # Poll creation
    LimitClass.POLL_CREATION: RateLimitPolicy(max_attempts=3, window_seconds=60),
    # General API calls
    LimitClass.API: RateLimitPolicy(max_attempts=30, window_seconds=60),
}


class RateLimitResult(ValueObject):
    """Outcome of a rate limit check.

    ``reset_time`` is an absolute timestamp in epoch seconds.
    """

    allowed: bool
    remaining: int = Field(ge=0)
    reset_time: float
    limit: int

    def retry_after(self, now: float) -> int:
        """Whole seconds until the window resets (never negative)."""
        return max(0, math.ceil(self.reset_time - now))


class PlatformUser(ValueObject):
    """User record as reported by the auth platform."""

    id: str
    email: str | None = None
    name: str | None = None


class PlatformSession(ValueObject):
    """Session issued by the auth platform after sign-in."""

    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    user: PlatformUser
