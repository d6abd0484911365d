"""Poll use cases."""

from .common import PollResponse
from .create_poll import CreatePollRequest, CreatePollUseCase
from .delete_poll import DeletePollRequest, DeletePollResponse, DeletePollUseCase
from .get_poll import GetPollRequest, GetPollUseCase
from .list_polls import (
    ListPollsRequest,
    ListPollsResponse,
    ListPollsUseCase,
    PollSummary,
)
from .update_poll import UpdatePollRequest, UpdatePollUseCase

__all__ = [
    "CreatePollRequest",
    "CreatePollUseCase",
    "DeletePollRequest",
    "DeletePollResponse",
    "DeletePollUseCase",
    "GetPollRequest",
    "GetPollUseCase",
    "ListPollsRequest",
    "ListPollsResponse",
    "ListPollsUseCase",
    "PollResponse",
    "PollSummary",
    "UpdatePollRequest",
    "UpdatePollUseCase",
]
