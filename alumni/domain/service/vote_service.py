"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from alumni.domain.error import BusinessRuleViolationError, NotFoundError, VoteConflictError
from alumni.domain.model.thread import Thread
from alumni.domain.model.vote import ThreadVote
from alumni.domain.repository import AlumnusRepository, ThreadVoteRepository
from alumni.domain.value import AlumniId, ThreadId, ThreadVoteId, VoteChoice, VoteTally

from .base import Service
from .thread_service import ThreadService


class VoteService(Service):
    """Domain service for thread votes.

    Receives the authoritative vote for an alumnus and keeps the thread's
    denormalized counters in step with the stored vote.
    """

    def __init__(
        self,
        vote_repository: ThreadVoteRepository,
        thread_service: ThreadService,
        alumnus_repository: AlumnusRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Thread vote repository
            thread_service: Thread domain service
            alumnus_repository: Alumni directory
        """
        self.vote_repository = vote_repository
        self.thread_service = thread_service
        self.alumnus_repository = alumnus_repository

    async def cast_vote(
        self,
        thread_id: ThreadId,
        alumni_id: AlumniId,
        choice: VoteChoice,
        previous: VoteChoice | None = None,
    ) -> VoteTally:
        """Set an alumnus' vote on a thread.

        ``VoteChoice.NONE`` retracts the vote. Re-sending the stored vote is a
        no-op even when ``previous`` is stale, so a retried request that already
        landed succeeds.

        Args:
            thread_id: Thread ID
            alumni_id: Voter ID
            choice: New vote
            previous: Vote the caller believes is stored; checked when given

        Returns:
            Tally after the change

        Raises:
            NotFoundError: If the thread or the voter does not exist
            VoteConflictError: If ``previous`` does not match the stored vote
            BusinessRuleViolationError: If a concurrent vote won the insert
        """
        with logfire.span(
            "vote_service.cast_vote",
            thread_id=str(thread_id),
            alumni_id=str(alumni_id),
            choice=choice.value,
            previous=previous.value if previous else None,
        ):
            thread = await self.thread_service.get_thread_by_id(thread_id)
            if not thread:
                logfire.warn("Vote on non-existent thread", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))

            if not await self.alumnus_repository.find_by_id(alumni_id):
                logfire.warn("Vote from unknown alumnus", alumni_id=str(alumni_id))
                raise NotFoundError("Alumnus", str(alumni_id))

            existing = await self.vote_repository.find_by_alumni_and_thread(
                alumni_id, thread_id
            )
            current = existing.choice if existing else VoteChoice.NONE

            if choice is current:
                logfire.info(
                    "Vote unchanged", thread_id=str(thread_id), choice=choice.value
                )
                return self._tally(thread, current)

            if previous is not None and previous is not current:
                logfire.warn(
                    "Stale vote transition",
                    thread_id=str(thread_id),
                    expected=previous.value,
                    actual=current.value,
                )
                raise VoteConflictError(
                    self._tally(thread, current),
                    expected=previous.value,
                    actual=current.value,
                )

            if existing is None:
                vote = ThreadVote(
                    id=ThreadVoteId(uuid4()),
                    alumni_id=alumni_id,
                    thread_id=thread_id,
                    choice=choice,
                    created_at=datetime.now(),
                    updated_at=datetime.now(),
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Concurrent vote insert",
                        thread_id=str(thread_id),
                        alumni_id=str(alumni_id),
                    )
                    raise BusinessRuleViolationError(
                        "Vote changed concurrently, reload and retry"
                    )
            elif choice is VoteChoice.NONE:
                await self.vote_repository.delete_by_alumni_and_thread(
                    alumni_id, thread_id
                )
            else:
                await self.vote_repository.update_choice(existing.id, choice)

            upvotes_delta = int(choice is VoteChoice.UP) - int(current is VoteChoice.UP)
            downvotes_delta = int(choice is VoteChoice.DOWN) - int(
                current is VoteChoice.DOWN
            )
            updated = await self.thread_service.adjust_vote_counts(
                thread_id, upvotes_delta, downvotes_delta
            )

            logfire.info(
                "Vote recorded",
                thread_id=str(thread_id),
                alumni_id=str(alumni_id),
                previous=current.value,
                choice=choice.value,
            )
            return self._tally(updated, choice)

    async def get_tally(
        self, thread_id: ThreadId, alumni_id: AlumniId | None = None
    ) -> VoteTally:
        """Current counts for a thread and, if known, the alumnus' vote.

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span("vote_service.get_tally", thread_id=str(thread_id)):
            thread = await self.thread_service.get_thread_by_id(thread_id)
            if not thread:
                raise NotFoundError("Thread", str(thread_id))
            return self._tally(thread, await self.get_user_vote(thread_id, alumni_id))

    async def get_user_vote(
        self, thread_id: ThreadId, alumni_id: AlumniId | None
    ) -> VoteChoice:
        """The alumnus' stored vote, NONE for anonymous callers."""
        if alumni_id is None:
            return VoteChoice.NONE
        vote = await self.vote_repository.find_by_alumni_and_thread(
            alumni_id, thread_id
        )
        return vote.choice if vote else VoteChoice.NONE

    @staticmethod
    def _tally(thread: Thread, user_vote: VoteChoice) -> VoteTally:
        return VoteTally(
            thread_id=thread.id,
            upvotes=thread.upvotes,
            downvotes=thread.downvotes,
            user_vote=user_vote,
        )
