"""Access token domain service."""

from uuid import UUID

import logfire

from polly.config import PlatformSettings
from polly.domain.model.identity import Identity
from polly.domain.value import UserId
from polly.util.jwt import JWTError, TokenPayload, verify_token

from .authorization_service import RoleResolver
from .base import Service


class JWTService(Service):
    """Domain service turning platform access tokens into identities."""

    def __init__(
        self, platform_settings: PlatformSettings, role_resolver: RoleResolver
    ) -> None:
        """Initialize JWT service.

        Args:
            platform_settings: Platform settings holding the signing secret
            role_resolver: Resolves the role of a verified identity
        """
        self.platform_settings = platform_settings
        self.role_resolver = role_resolver

    def verify_token(self, token: str) -> TokenPayload:
        """Verify access token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.platform_settings)
                logfire.info("Access token verified", user_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.warn("Access token verification failed", error=str(e))
                raise

    def get_identity(self, token: str | None) -> Identity | None:
        """Resolve the acting identity without raising.

        Args:
            token: Access token (optional)

        Returns:
            Identity with its role if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            user_id = UserId(UUID(payload.sub))
        except (JWTError, ValueError) as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "Token rejected, treating as unauthenticated", error=str(e)
            )
            return None

        identity = Identity(
            user_id=user_id,
            email=payload.email,
            name=payload.user_metadata.get("name"),
        )
        return identity.model_copy(
            update={"role": self.role_resolver.resolve_role(identity)}
        )
