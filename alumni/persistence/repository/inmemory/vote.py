"""In-memory thread vote repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from alumni.domain.model.vote import ThreadVote
from alumni.domain.repository.vote import ThreadVoteRepository
from alumni.domain.value import AlumniId, ThreadId, ThreadVoteId, VoteChoice


class InMemoryThreadVoteRepository(ThreadVoteRepository):
    """In-memory implementation of ThreadVoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[ThreadVote] = []

    async def find_by_alumni_and_thread(
        self, alumni_id: AlumniId, thread_id: ThreadId
    ) -> Optional[ThreadVote]:
        """Find an alumnus' vote on a thread."""
        for vote in self._votes:
            if vote.alumni_id == alumni_id and vote.thread_id == thread_id:
                return vote
        return None

    async def save(self, vote: ThreadVote) -> ThreadVote:
        """Insert a vote.

        Raises:
            IntegrityError: If the alumnus already voted on the thread
        """
        existing = await self.find_by_alumni_and_thread(vote.alumni_id, vote.thread_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_choice(
        self, vote_id: ThreadVoteId, choice: VoteChoice
    ) -> Optional[ThreadVote]:
        """Switch an existing vote's direction."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                updated = vote.model_copy(
                    update={"choice": choice, "updated_at": datetime.now()}
                )
                self._votes[i] = updated
                return updated
        return None

    async def delete_by_alumni_and_thread(
        self, alumni_id: AlumniId, thread_id: ThreadId
    ) -> bool:
        """Delete an alumnus' vote on a thread."""
        for i, vote in enumerate(self._votes):
            if vote.alumni_id == alumni_id and vote.thread_id == thread_id:
                self._votes.pop(i)
                return True
        return False
