"""Get vote tally use case."""

from uuid import UUID

from pydantic import BaseModel

from alumni.domain.service import VoteService
from alumni.domain.value import AlumniId, ThreadId

from .cast_vote import VoteTallyResponse


class GetVoteTallyRequest(BaseModel):
    """Get vote tally request."""

    thread_id: str
    alumni_id: str | None = None  # Caller identity, if known


class GetVoteTallyUseCase:
    """Use case for reading a thread's current tally."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteTallyRequest) -> VoteTallyResponse:
        """Execute get tally flow.

        Raises:
            NotFoundError: If the thread does not exist
        """
        alumni_id = AlumniId(UUID(request.alumni_id)) if request.alumni_id else None
        tally = await self.vote_service.get_tally(
            ThreadId(UUID(request.thread_id)), alumni_id
        )
        return VoteTallyResponse.from_tally(tally)
