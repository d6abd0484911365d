"""Admin use cases."""

from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .overview import AdminOverviewRequest, AdminOverviewResponse, AdminOverviewUseCase

__all__ = [
    "AdminOverviewRequest",
    "AdminOverviewResponse",
    "AdminOverviewUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
]
