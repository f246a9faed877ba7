"""Thread vote entity."""

from datetime import datetime

from pydantic import Field, field_validator

from alumni.domain.model.common import DomainModel
from alumni.domain.value import AlumniId, ThreadId, ThreadVoteId, VoteChoice


class ThreadVote(DomainModel):
    """A standing up- or downvote by one alumnus on one thread.

    Business rules:
    - One vote per alumnus per thread (unique constraint)
    - A retracted vote is deleted, so ``choice`` is never NONE
    """

    id: ThreadVoteId
    alumni_id: AlumniId
    thread_id: ThreadId
    choice: VoteChoice
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("choice")
    @classmethod
    def validate_choice(cls, v: VoteChoice) -> VoteChoice:
        if v is VoteChoice.NONE:
            raise ValueError("A stored vote must be an upvote or a downvote")
        return v
