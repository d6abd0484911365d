"""Get current user use case."""

from pydantic import BaseModel

from polly.domain.service import JWTService
from polly.domain.value import Role


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # Access token from cookie


class GetCurrentUserResponse(BaseModel):
    """Current user, or ``authenticated=False``."""

    authenticated: bool
    user_id: str | None = None
    email: str | None = None
    name: str | None = None
    role: Role | None = None


class GetCurrentUserUseCase:
    """Use case for resolving the signed-in user from the session token."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: Access token domain service
        """
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        identity = self.jwt_service.get_identity(request.token)

        if identity is None:
            return GetCurrentUserResponse(authenticated=False)

        return GetCurrentUserResponse(
            authenticated=True,
            user_id=str(identity.user_id),
            email=identity.email,
            name=identity.name,
            role=identity.role,
        )
