"""Cast vote use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from alumni.domain.service import VoteService
from alumni.domain.value import AlumniId, ThreadId, VoteChoice, VoteTally


class CastVoteRequest(BaseModel):
    """Cast vote request.

    ``vote`` is the alumnus' new standing vote; ``"null"`` retracts it.
    """

    thread_id: str  # UUID string
    alumni_id: str  # Caller identity
    vote: VoteChoice
    previous_vote: VoteChoice | None = None


class VoteTallyResponse(BaseModel):
    """Authoritative vote tally for a thread."""

    thread_id: str
    upvotes: int
    downvotes: int
    user_vote: str | None  # "upvote", "downvote", or null
    net_score: int

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "VoteTallyResponse":
        return cls(
            thread_id=str(tally.thread_id),
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
            user_vote=tally.user_vote.to_seed(),
            net_score=tally.net_score,
        )


class CastVoteUseCase:
    """Use case for setting an alumnus' vote on a thread."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> VoteTallyResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Tally after the vote was applied

        Raises:
            NotFoundError: If the thread does not exist
            VoteConflictError: If ``previous_vote`` is stale
        """
        with logfire.span(
            "cast_vote.execute",
            thread_id=request.thread_id,
            vote=request.vote.value,
        ):
            tally = await self.vote_service.cast_vote(
                thread_id=ThreadId(UUID(request.thread_id)),
                alumni_id=AlumniId(UUID(request.alumni_id)),
                choice=request.vote,
                previous=request.previous_vote,
            )
            return VoteTallyResponse.from_tally(tally)
