"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class PlatformError(AdapterError):
    """Auth/data platform error.

    The message may contain platform detail; it is logged, never shown.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
