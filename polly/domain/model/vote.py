"""Vote entity."""

from datetime import datetime

from pydantic import Field

from polly.domain.model.common import DomainModel
from polly.domain.value import PollId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per signed-in user per poll (enforced by database unique constraint)
    - Anonymous votes carry no voter and are not deduplicated
    """

    id: VoteId
    poll_id: PollId
    voter_id: UserId | None = None
    option_index: int = Field(ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
