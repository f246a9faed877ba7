"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from alumni.domain.model.thread import Thread
from alumni.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread aggregate."""

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def adjust_vote_counts(
        self, thread_id: ThreadId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Thread]:
        """Atomically add deltas to a thread's vote counters.

        Counters never drop below zero.

        Args:
            thread_id: The thread's unique identifier
            upvotes_delta: Change to apply to upvotes (-1, 0 or +1)
            downvotes_delta: Change to apply to downvotes (-1, 0 or +1)

        Returns:
            The updated thread, None if it does not exist
        """
        pass
