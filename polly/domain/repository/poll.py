"""Poll repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from polly.domain.model.poll import Poll
from polly.domain.value import PollId


class PollRepository(ABC):
    """Repository for Poll aggregate.

    Defines the contract for poll persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID.

        Args:
            poll_id: The poll's unique identifier

        Returns:
            The poll if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Poll]:
        """Find polls, newest first.

        Args:
            limit: Maximum number of polls to return
            offset: Number of polls to skip

        Returns:
            List of polls
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all polls."""
        pass

    @abstractmethod
    async def save(self, poll: Poll) -> Poll:
        """Save a poll (create or update).

        Args:
            poll: The poll to save

        Returns:
            The saved poll
        """
        pass

    @abstractmethod
    async def delete(self, poll_id: PollId) -> None:
        """Delete a poll and, through cascade, its votes.

        Args:
            poll_id: The poll ID to delete
        """
        pass
