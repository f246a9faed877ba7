"""Thread and vote routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from alumni.application.usecase.thread import (
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
)
from alumni.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteTallyRequest,
    GetVoteTallyUseCase,
    VoteTallyResponse,
)
from alumni.domain.error import DomainError
from alumni.domain.value import VoteChoice
from alumni.interface.api.identity import optional_alumni_id, require_alumni_id
from alumni.interface.error import to_http_exception

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body.

    ``vote`` is the new standing vote ("upvote", "downvote" or "null").
    ``previous_vote`` is the vote the client believes is stored; when given, a
    mismatch answers 409 with the current tally.
    """

    vote: VoteChoice
    previous_vote: VoteChoice | None = None


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: UUID,
    use_case: FromDishka[GetThreadUseCase],
    alumni_id: str | None = Depends(optional_alumni_id),
) -> GetThreadResponse:
    """Get a thread with the caller's vote (seed data for the vote widget).

    Raises:
        HTTPException: 404 if the thread does not exist
    """
    response = await use_case.execute(
        GetThreadRequest(thread_id=str(thread_id), alumni_id=alumni_id)
    )
    if not response:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Thread not found",
        )
    return response


@router.get("/{thread_id}/votes", response_model=VoteTallyResponse)
async def get_vote_tally(
    thread_id: UUID,
    use_case: FromDishka[GetVoteTallyUseCase],
    alumni_id: str | None = Depends(optional_alumni_id),
) -> VoteTallyResponse:
    """Get a thread's current tally and the caller's vote."""
    try:
        return await use_case.execute(
            GetVoteTallyRequest(thread_id=str(thread_id), alumni_id=alumni_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{thread_id}/vote", response_model=VoteTallyResponse)
async def cast_vote(
    thread_id: UUID,
    body: VoteBody,
    use_case: FromDishka[CastVoteUseCase],
    alumni_id: str = Depends(require_alumni_id),
) -> VoteTallyResponse:
    """Set the caller's vote on a thread.

    Raises:
        HTTPException: 401 without identity, 404 if the thread or the caller
            is unknown, 409 if ``previous_vote`` is stale
    """
    with logfire.span(
        "api.cast_vote", thread_id=str(thread_id), vote=body.vote.value
    ):
        try:
            return await use_case.execute(
                CastVoteRequest(
                    thread_id=str(thread_id),
                    alumni_id=alumni_id,
                    vote=body.vote,
                    previous_vote=body.previous_vote,
                )
            )
        except DomainError as e:
            raise to_http_exception(e)
