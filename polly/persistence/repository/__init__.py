"""PostgreSQL repository implementations."""

from polly.persistence.repository.poll import PostgresPollRepository
from polly.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresPollRepository",
    "PostgresVoteRepository",
]
