"""Authorization gate.

Every denial raises the same generic ``ForbiddenError``; whether a poll is
missing or simply belongs to someone else is never revealed.
"""

from abc import ABC, abstractmethod

import logfire

from polly.domain.error import ForbiddenError, UnauthenticatedError
from polly.domain.model.identity import Identity
from polly.domain.model.poll import Poll
from polly.domain.repository import PollRepository
from polly.domain.value import PollId, Role

from .base import Service


class RoleResolver(ABC):
    """Decides which role an authenticated identity holds."""

    @abstractmethod
    def resolve_role(self, identity: Identity) -> Role:
        pass


class AllowListRoleResolver(RoleResolver):
    """Grants ``admin`` to identities whose email is on a fixed allow-list."""

    def __init__(self, admin_emails: list[str]) -> None:
        self.admin_emails = frozenset(
            email.strip().lower() for email in admin_emails if email.strip()
        )

    def resolve_role(self, identity: Identity) -> Role:
        if identity.email and identity.email.strip().lower() in self.admin_emails:
            return Role.ADMIN
        return Role.REGULAR


class AuthorizationService(Service):
    """Ownership and role checks run before any mutation."""

    def __init__(
        self, poll_repository: PollRepository, role_resolver: RoleResolver
    ) -> None:
        """Initialize authorization service.

        Args:
            poll_repository: Poll repository (ownership lookups)
            role_resolver: Role resolution strategy
        """
        self.poll_repository = poll_repository
        self.role_resolver = role_resolver

    def require_authenticated(self, identity: Identity | None) -> Identity:
        """Reject unauthenticated callers.

        Raises:
            UnauthenticatedError: If there is no acting identity
        """
        if identity is None:
            raise UnauthenticatedError()
        return identity

    def resolve_role(self, identity: Identity) -> Role:
        """Resolve the role of an authenticated identity."""
        return self.role_resolver.resolve_role(identity)

    async def require_poll_owner(
        self, identity: Identity | None, poll_id: PollId
    ) -> Poll:
        """Ensure the acting identity owns the poll.

        Args:
            identity: Acting identity (None when unauthenticated)
            poll_id: Poll about to be mutated

        Returns:
            The poll, for use by the caller

        Raises:
            UnauthenticatedError: If there is no acting identity
            ForbiddenError: If the poll doesn't exist or has another owner
        """
        identity = self.require_authenticated(identity)

        with logfire.span(
            "authorization.require_poll_owner",
            poll_id=str(poll_id),
            user_id=str(identity.user_id),
        ):
            poll = await self.poll_repository.find_by_id(poll_id)

            if poll is None or poll.owner_id != identity.user_id:
                logfire.warn(
                    "Poll ownership check denied",
                    poll_id=str(poll_id),
                    user_id=str(identity.user_id),
                    poll_exists=poll is not None,
                )
                raise ForbiddenError()

            return poll

    def require_admin(self, identity: Identity | None) -> Identity:
        """Ensure the acting identity holds the admin capability.

        Raises:
            UnauthenticatedError: If there is no acting identity
            ForbiddenError: If the identity is not an admin
        """
        identity = self.require_authenticated(identity)

        if self.resolve_role(identity) != Role.ADMIN:
            logfire.warn("Admin access denied", user_id=str(identity.user_id))
            raise ForbiddenError()

        return identity
