"""Domain layer DI providers."""

from dishka import Scope, provide

from polly.config import PlatformSettings, RateLimitSettings, Settings
from polly.domain.repository import PollRepository, RateLimitStore, VoteRepository
from polly.domain.service import (
    AllowListRoleResolver,
    AuthClient,
    AuthorizationService,
    AuthService,
    JWTService,
    PollService,
    RateLimiter,
    RoleResolver,
    VoteService,
)
from polly.persistence.repository.inmemory import InMemoryRateLimitStore
from polly.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle. The rate limiter and its store are APP-scoped: counters must
    outlive a single request.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_rate_limit_store(self) -> RateLimitStore:
        """Provide the process-wide rate limit store."""
        return InMemoryRateLimitStore()

    @provide(scope=Scope.APP)
    def get_rate_limiter(
        self, store: RateLimitStore, rate_limit_settings: RateLimitSettings
    ) -> RateLimiter:
        """Provide the process-wide rate limiter."""
        return RateLimiter(store=store, enabled=rate_limit_settings.enabled)

    @provide(scope=Scope.APP)
    def get_role_resolver(self, settings: Settings) -> RoleResolver:
        """Provide role resolution from the configured admin allow-list."""
        return AllowListRoleResolver(admin_emails=settings.admin.emails)

    @provide
    def get_jwt_service(
        self, platform_settings: PlatformSettings, role_resolver: RoleResolver
    ) -> JWTService:
        """Provide access token domain service."""
        return JWTService(
            platform_settings=platform_settings, role_resolver=role_resolver
        )

    @provide
    def get_auth_service(self, auth_client: AuthClient) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(auth_client=auth_client)

    @provide
    def get_authorization_service(
        self, poll_repository: PollRepository, role_resolver: RoleResolver
    ) -> AuthorizationService:
        """Provide authorization gate."""
        return AuthorizationService(
            poll_repository=poll_repository, role_resolver=role_resolver
        )

    @provide
    def get_poll_service(
        self, poll_repository: PollRepository, vote_repository: VoteRepository
    ) -> PollService:
        """Provide poll domain service."""
        return PollService(
            poll_repository=poll_repository, vote_repository=vote_repository
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, poll_service: PollService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, poll_service=poll_service)
