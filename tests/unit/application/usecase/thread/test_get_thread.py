"""Unit tests for GetThreadUseCase."""

from uuid import uuid4

import pytest

from alumni.application.usecase.thread import GetThreadRequest, GetThreadUseCase
from alumni.domain.repository import ThreadRepository
from alumni.domain.service import VoteService
from alumni.domain.value import VoteChoice
from tests.conftest import add_alumnus, make_thread
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_returns_counts_tags_and_vote(self, unit_env):
        """The response seeds a vote widget."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        vote_service = await unit_env.get(VoteService)
        thread_repo = await unit_env.get(ThreadRepository)

        thread = await thread_repo.save(
            make_thread(upvotes=10, tags=["Reunions", "Class of 2019"])
        )
        alumni_id = await add_alumnus(unit_env)
        await vote_service.cast_vote(thread.id, alumni_id, VoteChoice.UP)

        # Act
        response = await use_case.execute(
            GetThreadRequest(thread_id=str(thread.id), alumni_id=str(alumni_id))
        )

        # Assert
        assert response is not None
        assert response.thread_id == str(thread.id)
        assert response.upvotes == 11
        assert response.downvotes == 0
        assert response.user_vote == "upvote"
        assert response.tags == ["Reunions", "Class of 2019"]

    @pytest.mark.asyncio
    async def test_anonymous_caller_has_no_vote(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(upvotes=1))

        response = await use_case.execute(GetThreadRequest(thread_id=str(thread.id)))

        assert response is not None
        assert response.user_vote is None

    @pytest.mark.asyncio
    async def test_unknown_thread_returns_none(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        response = await use_case.execute(GetThreadRequest(thread_id=str(uuid4())))

        assert response is None
