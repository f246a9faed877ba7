"""Get thread use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from alumni.domain.service import ThreadService, VoteService
from alumni.domain.value import AlumniId, ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str  # UUID string
    alumni_id: str | None = None  # Current alumnus (if known)


class GetThreadResponse(BaseModel):
    """Thread as rendered on a page.

    Doubles as the seed for a client-side vote controller: ``upvotes``,
    ``downvotes`` and ``user_vote`` are the server's view at render time.
    """

    thread_id: str
    title: str
    description: str | None
    upvotes: int
    downvotes: int
    user_vote: str | None  # "upvote", "downvote", or null
    tags: list[str]
    views: int
    comments_count: int
    updated_at: datetime


class GetThreadUseCase:
    """Use case for retrieving a thread with the caller's vote."""

    def __init__(self, thread_service: ThreadService, vote_service: VoteService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
            vote_service: Vote domain service
        """
        self.thread_service = thread_service
        self.vote_service = vote_service

    async def execute(self, request: GetThreadRequest) -> Optional[GetThreadResponse]:
        """Execute get thread flow.

        Args:
            request: Get thread request with thread ID and optional alumnus ID

        Returns:
            Thread details if found, None otherwise
        """
        thread_id = ThreadId(UUID(request.thread_id))
        thread = await self.thread_service.get_thread_by_id(thread_id)
        if not thread:
            return None

        alumni_id = AlumniId(UUID(request.alumni_id)) if request.alumni_id else None
        user_vote = await self.vote_service.get_user_vote(thread_id, alumni_id)

        return GetThreadResponse(
            thread_id=str(thread.id),
            title=thread.title,
            description=thread.description,
            upvotes=thread.upvotes,
            downvotes=thread.downvotes,
            user_vote=user_vote.to_seed(),
            tags=[tag.root for tag in thread.tag_names],
            views=thread.views,
            comments_count=thread.comments_count,
            updated_at=thread.updated_at,
        )
