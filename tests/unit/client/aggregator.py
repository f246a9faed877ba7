"""Scripted vote aggregator for controller tests."""

import asyncio
from typing import Optional

from alumni.client import ConflictError, ThreadSeed, VoteAggregator
from alumni.domain.value import VoteChoice, VoteTally


class ScriptedAggregator(VoteAggregator):
    """In-process aggregator that behaves like the API's vote endpoint.

    ``failures`` are raised, in order, by the next submit calls before the
    vote is applied; ``fetch_failures`` likewise for tally reads.
    """

    def __init__(
        self,
        thread_id: str,
        upvotes: int = 0,
        downvotes: int = 0,
        stored: VoteChoice = VoteChoice.NONE,
        failures: Optional[list[Exception]] = None,
        fetch_failures: Optional[list[Exception]] = None,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.thread_id = thread_id
        self.upvotes = upvotes
        self.downvotes = downvotes
        self.stored = stored
        self.failures = list(failures or [])
        self.fetch_failures = list(fetch_failures or [])
        self.gate = gate
        self.calls: list[tuple[VoteChoice, Optional[VoteChoice]]] = []

    def tally(self) -> VoteTally:
        return VoteTally(
            thread_id=self.thread_id,
            upvotes=self.upvotes,
            downvotes=self.downvotes,
            user_vote=self.stored,
        )

    def seed(self) -> ThreadSeed:
        return ThreadSeed(
            thread_id=self.thread_id,
            upvotes=self.upvotes,
            downvotes=self.downvotes,
            user_vote=self.stored,
        )

    async def submit_vote(
        self,
        thread_id: str,
        vote: VoteChoice,
        previous_vote: Optional[VoteChoice] = None,
    ) -> VoteTally:
        self.calls.append((vote, previous_vote))
        if self.gate is not None:
            await self.gate.wait()
        if self.failures:
            raise self.failures.pop(0)

        if vote is self.stored:
            return self.tally()
        if previous_vote is not None and previous_vote is not self.stored:
            raise ConflictError("Vote changed on the server", tally=self.tally())

        self.upvotes += int(vote is VoteChoice.UP) - int(self.stored is VoteChoice.UP)
        self.downvotes += int(vote is VoteChoice.DOWN) - int(
            self.stored is VoteChoice.DOWN
        )
        self.stored = vote
        return self.tally()

    async def fetch_tally(self, thread_id: str) -> VoteTally:
        if self.fetch_failures:
            raise self.fetch_failures.pop(0)
        return self.tally()

    async def fetch_thread(self, thread_id: str) -> ThreadSeed:
        return self.seed()
