"""Application layer DI providers."""

from dishka import Scope, provide

from polly.application.usecase.admin import AdminOverviewUseCase, ListUsersUseCase
from polly.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
    RegisterUseCase,
)
from polly.application.usecase.poll import (
    CreatePollUseCase,
    DeletePollUseCase,
    GetPollUseCase,
    ListPollsUseCase,
    UpdatePollUseCase,
)
from polly.application.usecase.vote import CastVoteUseCase
from polly.config import VotingSettings
from polly.domain.service import (
    AuthorizationService,
    AuthService,
    JWTService,
    PollService,
    RateLimiter,
    VoteService,
)
from polly.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self, auth_service: AuthService, rate_limiter: RateLimiter
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, rate_limiter=rate_limiter)

    @provide
    def get_register_use_case(
        self, auth_service: AuthService, rate_limiter: RateLimiter
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, rate_limiter=rate_limiter)

    @provide
    def get_logout_use_case(self, auth_service: AuthService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(auth_service=auth_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service)

    # Poll use cases
    @provide
    def get_create_poll_use_case(
        self,
        poll_service: PollService,
        authorization_service: AuthorizationService,
        rate_limiter: RateLimiter,
    ) -> CreatePollUseCase:
        """Provide create poll use case."""
        return CreatePollUseCase(
            poll_service=poll_service,
            authorization_service=authorization_service,
            rate_limiter=rate_limiter,
        )

    @provide
    def get_update_poll_use_case(
        self,
        poll_service: PollService,
        authorization_service: AuthorizationService,
        rate_limiter: RateLimiter,
    ) -> UpdatePollUseCase:
        """Provide update poll use case."""
        return UpdatePollUseCase(
            poll_service=poll_service,
            authorization_service=authorization_service,
            rate_limiter=rate_limiter,
        )

    @provide
    def get_delete_poll_use_case(
        self,
        poll_service: PollService,
        authorization_service: AuthorizationService,
        rate_limiter: RateLimiter,
    ) -> DeletePollUseCase:
        """Provide delete poll use case."""
        return DeletePollUseCase(
            poll_service=poll_service,
            authorization_service=authorization_service,
            rate_limiter=rate_limiter,
        )

    @provide
    def get_poll_use_case(
        self, poll_service: PollService, rate_limiter: RateLimiter
    ) -> GetPollUseCase:
        """Provide get poll use case."""
        return GetPollUseCase(poll_service=poll_service, rate_limiter=rate_limiter)

    @provide
    def get_list_polls_use_case(
        self,
        poll_service: PollService,
        vote_service: VoteService,
        rate_limiter: RateLimiter,
    ) -> ListPollsUseCase:
        """Provide list polls use case."""
        return ListPollsUseCase(
            poll_service=poll_service,
            vote_service=vote_service,
            rate_limiter=rate_limiter,
        )

    # Vote use cases
    @provide
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        authorization_service: AuthorizationService,
        voting_settings: VotingSettings,
        rate_limiter: RateLimiter,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            authorization_service=authorization_service,
            voting_settings=voting_settings,
            rate_limiter=rate_limiter,
        )

    # Admin use cases
    @provide
    def get_admin_overview_use_case(
        self,
        authorization_service: AuthorizationService,
        poll_service: PollService,
        vote_service: VoteService,
        rate_limiter: RateLimiter,
    ) -> AdminOverviewUseCase:
        """Provide admin overview use case."""
        return AdminOverviewUseCase(
            authorization_service=authorization_service,
            poll_service=poll_service,
            vote_service=vote_service,
            rate_limiter=rate_limiter,
        )

    @provide
    def get_list_users_use_case(
        self,
        authorization_service: AuthorizationService,
        auth_service: AuthService,
        rate_limiter: RateLimiter,
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(
            authorization_service=authorization_service,
            auth_service=auth_service,
            rate_limiter=rate_limiter,
        )
