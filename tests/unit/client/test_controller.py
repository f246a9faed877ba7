"""Unit tests for the client-side VoteController."""

import asyncio
from uuid import uuid4

import pytest

from alumni.client import (
    ConflictError,
    NetworkError,
    RetryPolicy,
    ThreadSeed,
    ValidationError,
    VoteClientError,
    VoteController,
    transition,
)
from alumni.config import VoteClientSettings
from alumni.domain.value import VoteChoice
from tests.unit.client.aggregator import ScriptedAggregator

UP = VoteChoice.UP
DOWN = VoteChoice.DOWN
NONE = VoteChoice.NONE

NO_BACKOFF = RetryPolicy(max_attempts=3, backoff_seconds=0)


def make_controller(aggregator: ScriptedAggregator, **kwargs) -> VoteController:
    kwargs.setdefault("retry", NO_BACKOFF)
    return VoteController(aggregator.seed(), aggregator, **kwargs)


class TestTransition:
    """Tests for the pure transition function."""

    @pytest.mark.parametrize(
        "current, direction, expected_vote, expected_delta",
        [
            (NONE, UP, UP, 1),
            (NONE, DOWN, DOWN, -1),
            (UP, UP, NONE, -1),
            (UP, DOWN, DOWN, -2),
            (DOWN, DOWN, NONE, 1),
            (DOWN, UP, UP, 2),
        ],
    )
    def test_transition_table(self, current, direction, expected_vote, expected_delta):
        """Every (vote, click) pair maps to the documented next vote and delta."""
        assert transition(current, direction) == (expected_vote, expected_delta)

    def test_none_direction_rejected(self):
        """A click must be up or down."""
        with pytest.raises(ValueError):
            transition(UP, NONE)


class TestThreadSeed:
    """Tests for seed parsing."""

    def test_null_vote_and_missing_counts(self):
        """Null vote means NONE and missing counters count as zero."""
        seed = ThreadSeed.model_validate(
            {"thread_id": "t-1", "upvotes": None, "user_vote": None}
        )

        assert seed.user_vote is NONE
        assert seed.net_score == 0

    def test_extra_fields_ignored(self):
        """The full thread payload can be used as a seed."""
        seed = ThreadSeed.model_validate(
            {
                "thread_id": "t-1",
                "title": "Reunion",
                "upvotes": 7,
                "downvotes": 2,
                "user_vote": "downvote",
            }
        )

        assert seed.user_vote is DOWN
        assert seed.net_score == 5


class TestClickScenarios:
    """Tests for click sequences and their outbound notifications."""

    @pytest.mark.asyncio
    async def test_toggle_then_switch_from_five(self):
        """Up, up, down from 5 with no vote: 6/upvote, 5/null, 4/downvote."""
        # Arrange
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=5)
        controller = make_controller(aggregator)

        # Act & Assert
        task = controller.click(UP)
        assert (controller.current_vote, controller.displayed_count) == (UP, 6)
        await task
        assert aggregator.calls[-1][0].value == "upvote"

        task = controller.click(UP)
        assert (controller.current_vote, controller.displayed_count) == (NONE, 5)
        await task
        assert aggregator.calls[-1][0].value == "null"

        task = controller.click(DOWN)
        assert (controller.current_vote, controller.displayed_count) == (DOWN, 4)
        await task
        assert aggregator.calls[-1][0].value == "downvote"

        assert len(aggregator.calls) == 3

    @pytest.mark.asyncio
    async def test_switch_from_upvote_swings_two(self):
        """Down from 10 with an upvote goes straight to 8/downvote."""
        # Arrange
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=10, stored=UP)
        controller = make_controller(aggregator)

        # Act
        await controller.click(DOWN)

        # Assert
        assert controller.state.current_vote is DOWN
        assert controller.state.displayed_count == 8
        assert aggregator.calls == [(DOWN, UP)]

    @pytest.mark.asyncio
    async def test_same_direction_twice_restores_initial(self):
        """Clicking a direction twice ends with no vote and the initial count."""
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=3, downvotes=1)
        controller = make_controller(aggregator)

        controller.click(DOWN)
        controller.click(DOWN)
        await controller.drain()

        assert controller.current_vote is NONE
        assert controller.displayed_count == 2
        assert [vote for vote, _ in aggregator.calls] == [DOWN, NONE]

    @pytest.mark.asyncio
    async def test_count_tracks_sum_of_deltas(self):
        """Displayed count equals the initial count plus every click's delta."""
        # Arrange
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=20, downvotes=4)
        controller = make_controller(aggregator)
        clicks = [UP, DOWN, DOWN, UP, UP, UP, DOWN, UP, DOWN, DOWN]

        # Act
        expected = controller.displayed_count
        vote = controller.current_vote
        for direction in clicks:
            vote, delta = transition(vote, direction)
            expected += delta
            controller.click(direction)
            assert controller.displayed_count == expected
        await controller.drain()

        # Assert - server agrees with the local view
        assert controller.current_vote is aggregator.stored
        assert controller.displayed_count == expected
        assert aggregator.upvotes - aggregator.downvotes == expected

    @pytest.mark.asyncio
    async def test_count_updates_before_notification_resolves(self):
        """The click is reflected locally while the aggregator is still busy."""
        # Arrange
        gate = asyncio.Event()
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=1, gate=gate)
        controller = make_controller(aggregator)

        # Act
        task = controller.click(UP)
        await asyncio.sleep(0)

        # Assert
        assert controller.displayed_count == 2
        assert not task.done()

        gate.set()
        await task
        assert controller.displayed_count == 2

    @pytest.mark.asyncio
    async def test_notifications_arrive_in_click_order(self):
        """Rapid clicks reach the aggregator one at a time, in order."""
        # Arrange
        gate = asyncio.Event()
        aggregator = ScriptedAggregator(str(uuid4()), gate=gate)
        controller = make_controller(aggregator)

        # Act
        controller.click(UP)
        controller.click(UP)
        controller.click(DOWN)
        await asyncio.sleep(0)

        # Assert - only the first notification is in flight
        assert aggregator.calls == [(UP, NONE)]

        gate.set()
        await controller.drain()
        assert aggregator.calls == [(UP, NONE), (NONE, UP), (DOWN, NONE)]
        assert aggregator.stored is DOWN
        assert controller.displayed_count == -1

    @pytest.mark.asyncio
    async def test_settled_callback_receives_tally(self):
        """Successful notifications are reported with the server tally."""
        settled = []
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=2)
        controller = make_controller(aggregator, on_settled=settled.append)

        await controller.click(UP)

        assert len(settled) == 1
        assert settled[0].user_vote is UP
        assert settled[0].net_score == 3

    def test_click_none_rejected(self):
        """NONE is not a click and leaves state untouched."""
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=2)
        controller = make_controller(aggregator)

        with pytest.raises(ValueError):
            controller.click(NONE)

        assert controller.state.displayed_count == 2
        assert aggregator.calls == []


class TestReconciliation:
    """Tests for error handling and server reconciliation."""

    @pytest.mark.asyncio
    async def test_conflict_adopts_server_tally(self):
        """A stale seed is overwritten by the tally in the 409."""
        # Arrange - the server already holds a downvote the seed didn't know about
        errors: list[VoteClientError] = []
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=4, downvotes=2)
        seed = aggregator.seed()
        aggregator.stored = DOWN
        aggregator.downvotes = 3
        controller = VoteController(
            seed, aggregator, retry=NO_BACKOFF, on_error=errors.append
        )

        # Act
        task = controller.click(UP)
        assert controller.displayed_count == 3
        await task

        # Assert
        assert controller.current_vote is DOWN
        assert controller.displayed_count == 1
        assert len(errors) == 1
        assert isinstance(errors[0], ConflictError)

    @pytest.mark.asyncio
    async def test_conflict_without_tally_fetches_it(self):
        """A 409 without a body falls back to reading the tally."""
        aggregator = ScriptedAggregator(
            str(uuid4()),
            upvotes=6,
            failures=[ConflictError("Vote changed on the server")],
        )
        controller = make_controller(aggregator)

        await controller.click(DOWN)

        assert controller.current_vote is NONE
        assert controller.displayed_count == 6

    @pytest.mark.asyncio
    async def test_network_error_is_retried(self):
        """Transient network errors are retried until the vote lands."""
        # Arrange
        errors: list[VoteClientError] = []
        aggregator = ScriptedAggregator(
            str(uuid4()),
            failures=[NetworkError("timeout"), NetworkError("502", status_code=502)],
        )
        controller = make_controller(aggregator, on_error=errors.append)

        # Act
        await controller.click(UP)

        # Assert
        assert len(aggregator.calls) == 3
        assert aggregator.stored is UP
        assert controller.displayed_count == 1
        assert errors == []

    @pytest.mark.asyncio
    async def test_exhausted_retries_reconcile_from_fresh_tally(self):
        """After the last attempt the controller adopts the server's tally."""
        # Arrange
        errors: list[VoteClientError] = []
        aggregator = ScriptedAggregator(
            str(uuid4()),
            upvotes=9,
            failures=[NetworkError("down")] * 3,
        )
        controller = make_controller(aggregator, on_error=errors.append)

        # Act
        task = controller.click(UP)
        assert controller.displayed_count == 10
        await task

        # Assert - the vote never landed, so the server still shows no vote
        assert len(aggregator.calls) == 3
        assert controller.current_vote is NONE
        assert controller.displayed_count == 9
        assert isinstance(errors[0], NetworkError)

    @pytest.mark.asyncio
    async def test_exhausted_retries_revert_when_tally_unavailable(self):
        """Without a fresh tally the controller reverts to the confirmed vote."""
        aggregator = ScriptedAggregator(
            str(uuid4()),
            upvotes=9,
            stored=UP,
            failures=[NetworkError("down")] * 3,
            fetch_failures=[NetworkError("down")],
        )
        controller = make_controller(aggregator)

        await controller.click(DOWN)

        assert controller.current_vote is UP
        assert controller.displayed_count == 9

    @pytest.mark.asyncio
    async def test_validation_error_reverts_without_retry(self):
        """Rejected payloads are not retried and the click is undone."""
        # Arrange
        errors: list[VoteClientError] = []
        aggregator = ScriptedAggregator(
            str(uuid4()),
            upvotes=2,
            failures=[ValidationError("Thread not found", status_code=404)],
        )
        controller = make_controller(aggregator, on_error=errors.append)

        # Act
        await controller.click(UP)

        # Assert
        assert len(aggregator.calls) == 1
        assert controller.current_vote is NONE
        assert controller.displayed_count == 2
        assert isinstance(errors[0], ValidationError)

    @pytest.mark.asyncio
    async def test_failed_click_does_not_undo_later_click(self):
        """A failure settles into the server's state, never a stale local one."""
        # Arrange
        aggregator = ScriptedAggregator(
            str(uuid4()),
            upvotes=4,
            failures=[ValidationError("rejected", status_code=422)],
        )
        controller = make_controller(aggregator)

        # Act
        controller.click(UP)
        controller.click(DOWN)
        await controller.drain()

        # Assert - local view matches the server after everything settled
        assert controller.current_vote is aggregator.stored
        assert controller.displayed_count == aggregator.upvotes - aggregator.downvotes

    @pytest.mark.asyncio
    async def test_click_after_failed_click_is_kept(self):
        """The next notification starts from the confirmed vote, so it lands."""
        # Arrange
        errors: list[VoteClientError] = []
        aggregator = ScriptedAggregator(
            str(uuid4()),
            upvotes=4,
            failures=[ValidationError("rejected", status_code=422)],
        )
        controller = make_controller(aggregator, on_error=errors.append)

        # Act
        controller.click(UP)
        controller.click(DOWN)
        await controller.drain()

        # Assert
        assert aggregator.calls == [(UP, NONE), (DOWN, NONE)]
        assert aggregator.stored is DOWN
        assert controller.current_vote is DOWN
        assert controller.displayed_count == 3
        assert [type(e) for e in errors] == [ValidationError]


class TestRetryPolicy:
    """Tests for backoff delays."""

    def test_delay_doubles(self):
        policy = RetryPolicy(max_attempts=4, backoff_seconds=0.25)

        assert [policy.delay(n) for n in (1, 2, 3)] == [0.25, 0.5, 1.0]


class TestReplyAndLoad:
    """Tests for the reply action and seeding from the aggregator."""

    def test_reply_notifies_collaborator(self):
        replies = []
        aggregator = ScriptedAggregator(str(uuid4()))
        controller = make_controller(aggregator, on_reply=lambda: replies.append(1))

        controller.reply()

        assert replies == [1]
        assert aggregator.calls == []

    @pytest.mark.asyncio
    async def test_load_seeds_from_aggregator(self):
        aggregator = ScriptedAggregator(str(uuid4()), upvotes=3, stored=UP)

        controller = await VoteController.load(aggregator.thread_id, aggregator)

        assert controller.current_vote is UP
        assert controller.displayed_count == 3


class TestRetryPolicyFromSettings:
    def test_from_settings(self):
        settings = VoteClientSettings(max_attempts=5, backoff_seconds=0.1)

        policy = RetryPolicy.from_settings(settings)

        assert policy.max_attempts == 5
        assert policy.delay(2) == pytest.approx(0.2)
