"""Thread vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from alumni.domain.model.vote import ThreadVote
from alumni.domain.value import AlumniId, ThreadId, ThreadVoteId, VoteChoice


class ThreadVoteRepository(ABC):
    """Repository for ThreadVote entity.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_alumni_and_thread(
        self, alumni_id: AlumniId, thread_id: ThreadId
    ) -> Optional[ThreadVote]:
        """Find an alumnus' vote on a thread.

        Args:
            alumni_id: The voter's ID
            thread_id: The thread's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: ThreadVote) -> ThreadVote:
        """Insert a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the alumnus already voted on the thread
        """
        pass

    @abstractmethod
    async def update_choice(
        self, vote_id: ThreadVoteId, choice: VoteChoice
    ) -> Optional[ThreadVote]:
        """Switch an existing vote's direction.

        Args:
            vote_id: The vote to update
            choice: New direction (UP or DOWN)

        Returns:
            The updated vote, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete_by_alumni_and_thread(
        self, alumni_id: AlumniId, thread_id: ThreadId
    ) -> bool:
        """Delete an alumnus' vote on a thread.

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass
