"""Strongly typed identifiers for polly domain entities.

Using NewType for strong typing prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

PollId = NewType("PollId", UUID)
VoteId = NewType("VoteId", UUID)
UserId = NewType("UserId", UUID)
