"""Thread domain service."""

import logfire

from alumni.domain.model.thread import Thread
from alumni.domain.repository import ThreadRepository
from alumni.domain.value import ThreadId

from .base import Service


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def get_thread_by_id(self, thread_id: ThreadId) -> Thread | None:
        """Get a thread by ID.

        Args:
            thread_id: Thread ID

        Returns:
            Thread if found, None otherwise
        """
        with logfire.span("thread_service.get_thread_by_id", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)

            if thread:
                logfire.info("Thread found", thread_id=str(thread_id))
            else:
                logfire.warn("Thread not found", thread_id=str(thread_id))

            return thread

    async def adjust_vote_counts(
        self, thread_id: ThreadId, upvotes_delta: int, downvotes_delta: int
    ) -> Thread:
        """Atomically apply vote counter deltas.

        Args:
            thread_id: Thread ID
            upvotes_delta: Change to the upvote counter
            downvotes_delta: Change to the downvote counter

        Returns:
            Updated thread

        Raises:
            ValueError: If thread not found
        """
        with logfire.span(
            "thread_service.adjust_vote_counts",
            thread_id=str(thread_id),
            upvotes_delta=upvotes_delta,
            downvotes_delta=downvotes_delta,
        ):
            updated = await self.thread_repository.adjust_vote_counts(
                thread_id, upvotes_delta, downvotes_delta
            )
            if not updated:
                logfire.error(
                    "Thread not found for vote count update", thread_id=str(thread_id)
                )
                raise ValueError("Thread not found")

            logfire.info(
                "Thread vote counts adjusted",
                thread_id=str(thread_id),
                upvotes=updated.upvotes,
                downvotes=updated.downvotes,
            )
            return updated
