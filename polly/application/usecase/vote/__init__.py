"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase

__all__ = ["CastVoteRequest", "CastVoteResponse", "CastVoteUseCase"]
