"""Client-side vote controller.

Tracks one alumnus' vote on one thread. Clicks update the displayed count
immediately; the new vote is then sent to the aggregator in the background.
Notifications are chained so they reach the aggregator in click order, and
every settlement reconciles local state with the server's tally.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Optional

import logfire

from alumni.config import VoteClientSettings
from alumni.domain.value import VoteChoice, VoteTally

from .error import ConflictError, NetworkError, VoteClientError
from .model import ThreadSeed, VoteState
from .transport import VoteAggregator


def transition(current: VoteChoice, direction: VoteChoice) -> tuple[VoteChoice, int]:
    """Apply a click to a vote.

    Clicking the current direction retracts the vote; any other click moves
    straight to the clicked direction.

    Args:
        current: Vote before the click
        direction: Clicked direction, UP or DOWN

    Returns:
        Tuple of (next vote, change to the displayed count)

    Raises:
        ValueError: If ``direction`` is NONE
    """
    if direction is VoteChoice.NONE:
        raise ValueError("A click must be an upvote or a downvote")

    next_vote = VoteChoice.NONE if current is direction else direction
    return next_vote, next_vote.weight - current.weight


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff for notifications that fail with a network error."""

    max_attempts: int = 3
    backoff_seconds: float = 0.25

    @classmethod
    def from_settings(cls, settings: VoteClientSettings) -> "RetryPolicy":
        return cls(
            max_attempts=settings.max_attempts,
            backoff_seconds=settings.backoff_seconds,
        )

    def delay(self, attempt: int) -> float:
        """Delay after the given failed attempt (1-based)."""
        return self.backoff_seconds * 2 ** (attempt - 1)


class VoteController:
    """State machine behind a thread's vote widget.

    The displayed count is always the last known server net score adjusted by
    the difference between the local vote and the last known server vote.
    """

    def __init__(
        self,
        seed: ThreadSeed,
        aggregator: VoteAggregator,
        retry: Optional[RetryPolicy] = None,
        on_reply: Optional[Callable[[], Any]] = None,
        on_error: Optional[Callable[[VoteClientError], Any]] = None,
        on_settled: Optional[Callable[[VoteTally], Any]] = None,
    ) -> None:
        """Initialize controller from server data.

        Args:
            seed: Thread counters and the alumnus' stored vote
            aggregator: Remote vote aggregator
            retry: Backoff for network failures
            on_reply: Called when the alumnus asks to reply
            on_error: Called with every failed notification
            on_settled: Called with the tally of every successful notification
        """
        self.thread_id = seed.thread_id
        self.aggregator = aggregator
        self.retry = retry or RetryPolicy()
        self.on_reply = on_reply
        self.on_error = on_error
        self.on_settled = on_settled

        self._current = seed.user_vote
        self._server_net = seed.net_score
        self._server_vote = seed.user_vote
        self._clicks = 0
        self._pending: Optional[asyncio.Task[None]] = None

    @classmethod
    async def load(
        cls, thread_id: str, aggregator: VoteAggregator, **kwargs: Any
    ) -> "VoteController":
        """Create a controller seeded from the aggregator."""
        seed = await aggregator.fetch_thread(thread_id)
        return cls(seed, aggregator, **kwargs)

    @property
    def current_vote(self) -> VoteChoice:
        return self._current

    @property
    def displayed_count(self) -> int:
        return self._server_net + self._current.weight - self._server_vote.weight

    @property
    def state(self) -> VoteState:
        return VoteState(
            thread_id=self.thread_id,
            current_vote=self._current,
            displayed_count=self.displayed_count,
        )

    def click(self, direction: VoteChoice) -> "asyncio.Task[None]":
        """Apply a click and notify the aggregator in the background.

        Must be called from a running event loop. The displayed count changes
        before this returns.

        Args:
            direction: UP or DOWN

        Returns:
            Task that settles once the aggregator has answered

        Raises:
            ValueError: If ``direction`` is NONE
        """
        previous = self._current
        next_vote, delta = transition(previous, direction)
        self._current = next_vote
        self._clicks += 1

        logfire.debug(
            "Vote click",
            thread_id=self.thread_id,
            direction=direction.value,
            previous=previous.value,
            vote=next_vote.value,
            delta=delta,
        )

        task = asyncio.get_running_loop().create_task(
            self._notify(self._pending, next_vote, self._clicks)
        )
        self._pending = task
        return task

    def reply(self) -> None:
        """Ask the surrounding UI to open a reply."""
        logfire.debug("Reply requested", thread_id=self.thread_id)
        if self.on_reply is not None:
            self.on_reply()

    async def drain(self) -> None:
        """Wait until every notification issued so far has settled."""
        while self._pending is not None and not self._pending.done():
            await asyncio.wait([self._pending])

    async def _notify(
        self,
        prior: Optional["asyncio.Task[None]"],
        vote: VoteChoice,
        click: int,
    ) -> None:
        if prior is not None:
            # Waits without re-raising, so a failed predecessor does not stop this one
            await asyncio.wait([prior])

        try:
            tally = await self._submit(vote)
        except ConflictError as e:
            tally = e.tally or await self._fetch_tally()
            if tally is not None:
                self._adopt(tally, overwrite=True)
            logfire.debug(
                "Vote conflict", thread_id=self.thread_id, vote=vote.value
            )
            self._report(e)
            return
        except NetworkError as e:
            tally = await self._fetch_tally()
            if tally is not None:
                self._adopt(tally, overwrite=click == self._clicks)
            else:
                self._revert(click)
            self._report(e)
            return
        except VoteClientError as e:
            self._revert(click)
            self._report(e)
            return

        self._adopt(tally, overwrite=click == self._clicks)
        logfire.debug(
            "Vote settled",
            thread_id=self.thread_id,
            vote=tally.user_vote.value,
            net_score=tally.net_score,
        )
        if self.on_settled is not None:
            self.on_settled(tally)

    async def _submit(self, vote: VoteChoice) -> VoteTally:
        # The transition starts from the last vote the server confirmed
        attempt = 1
        while True:
            try:
                return await self.aggregator.submit_vote(
                    self.thread_id, vote, self._server_vote
                )
            except NetworkError:
                if attempt >= self.retry.max_attempts:
                    raise
                delay = self.retry.delay(attempt)
                logfire.debug(
                    "Retrying vote notification",
                    thread_id=self.thread_id,
                    attempt=attempt,
                    delay=delay,
                )
                await asyncio.sleep(delay)
                attempt += 1

    async def _fetch_tally(self) -> Optional[VoteTally]:
        try:
            return await self.aggregator.fetch_tally(self.thread_id)
        except VoteClientError as e:
            logfire.debug(
                "Tally refresh failed", thread_id=self.thread_id, error=str(e)
            )
            return None

    def _adopt(self, tally: VoteTally, overwrite: bool) -> None:
        """Take the server's tally as the confirmed state.

        Without ``overwrite`` the local vote is kept because a later click is
        still on its way to the aggregator.
        """
        self._server_net = tally.net_score
        self._server_vote = tally.user_vote
        if overwrite:
            self._current = tally.user_vote

    def _revert(self, click: int) -> None:
        """Fall back to the last confirmed vote unless a later click superseded it."""
        if click == self._clicks:
            self._current = self._server_vote

    def _report(self, error: VoteClientError) -> None:
        if self.on_error is not None:
            self.on_error(error)
