"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span polls, votes and identities: ownership
    checks, vote bounds, rate limit windows. They are constructed by the DI
    container and never hold request state.
    """
