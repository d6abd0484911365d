"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from polly.domain.model import Poll, Vote
from polly.domain.value import PollId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_poll(row: Dict[str, Any]) -> Poll:
    """Convert database row to Poll domain model.

    Args:
        row: Database row as dict

    Returns:
        Poll domain model
    """
    return Poll(
        id=PollId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        question=row["question"],
        options=list(row["options"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def poll_to_dict(poll: Poll) -> Dict[str, Any]:
    """Convert Poll domain model to database dict."""
    return poll.model_dump()


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
