"""Domain services."""

from .auth_service import AuthClient, AuthService
from .authorization_service import (
    AllowListRoleResolver,
    AuthorizationService,
    RoleResolver,
)
from .base import Service
from .jwt_service import JWTService
from .poll_service import PollService
from .rate_limit_service import RateLimiter, get_client_ip
from .vote_service import VoteService

__all__ = [
    "AllowListRoleResolver",
    "AuthClient",
    "AuthService",
    "AuthorizationService",
    "JWTService",
    "PollService",
    "RateLimiter",
    "RoleResolver",
    "Service",
    "VoteService",
    "get_client_ip",
]
