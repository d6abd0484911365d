"""Domain layer errors.

Messages carried by ``ValidationFailedError`` and ``RateLimitedError`` are safe to
show to the caller. ``ForbiddenError`` and ``UpstreamFailureError`` always carry a
fixed, generic message; details belong in the server-side log only.
"""

from polly.domain.value.types import RateLimitResult


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationFailedError(DomainError):
    """One or more input fields failed validation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(self.errors[0] if self.errors else "Validation failed")


class RateLimitedError(DomainError):
    """Too many requests for a limit class within the current window."""

    def __init__(self, result: RateLimitResult, retry_after: int):
        self.result = result
        self.retry_after = retry_after
        super().__init__("Too many requests. Please try again later.")


class ForbiddenError(DomainError):
    """The acting identity may not perform this operation.

    Never says why: a missing resource and a resource owned by someone else
    look exactly the same.
    """

    def __init__(self) -> None:
        super().__init__("Forbidden")


class UnauthenticatedError(DomainError):
    """The operation requires a signed-in identity."""

    def __init__(self) -> None:
        super().__init__("Authentication required")


class UpstreamFailureError(DomainError):
    """The auth/data platform failed; carries only a generic message."""

    def __init__(self, message: str = "Something went wrong. Please try again."):
        super().__init__(message)


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
