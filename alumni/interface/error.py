"""Translation of domain errors into HTTP errors."""

from fastapi import HTTPException, status

from alumni.application.usecase.vote import VoteTallyResponse
from alumni.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    VoteConflictError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the matching HTTP status.

    A stale vote answers 409 with the current tally so the client can adopt it.
    Validation errors and any other domain error answer 400.
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, VoteConflictError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": str(error),
                "tally": VoteTallyResponse.from_tally(error.tally).model_dump(),
            },
        )
    if isinstance(error, BusinessRuleViolationError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
