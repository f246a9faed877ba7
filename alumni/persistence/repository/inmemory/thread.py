"""In-memory thread repository for testing."""

from copy import deepcopy
from datetime import datetime
from typing import Optional

from alumni.domain.model.thread import Thread
from alumni.domain.repository.thread import ThreadRepository
from alumni.domain.value import ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        thread = self._threads.get(thread_id)
        return deepcopy(thread) if thread else None

    async def save(self, thread: Thread) -> Thread:
        """Save a thread."""
        self._threads[thread.id] = deepcopy(thread)
        return deepcopy(thread)

    async def adjust_vote_counts(
        self, thread_id: ThreadId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Thread]:
        """Add deltas to the vote counters (floored at zero)."""
        thread = self._threads.get(thread_id)
        if not thread:
            return None

        updated = thread.model_copy(
            update={
                "upvotes": max(thread.upvotes + upvotes_delta, 0),
                "downvotes": max(thread.downvotes + downvotes_delta, 0),
                "updated_at": datetime.now(),
            }
        )
        self._threads[thread_id] = updated
        return deepcopy(updated)
