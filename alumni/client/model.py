"""Client-side vote data."""

from dataclasses import dataclass

from pydantic import BaseModel, field_validator

from alumni.domain.value import VoteChoice


class ThreadSeed(BaseModel):
    """Server data a vote controller is created from.

    Matches the payload of ``GET /threads/{id}``; extra fields are ignored.
    Missing or null counters count as zero.
    """

    thread_id: str
    upvotes: int = 0
    downvotes: int = 0
    user_vote: VoteChoice = VoteChoice.NONE

    @field_validator("upvotes", "downvotes", mode="before")
    @classmethod
    def default_count(cls, v):
        return 0 if v is None else v

    @field_validator("user_vote", mode="before")
    @classmethod
    def parse_user_vote(cls, v):
        return VoteChoice.parse(v)

    @property
    def net_score(self) -> int:
        return self.upvotes - self.downvotes


@dataclass(frozen=True)
class VoteState:
    """Snapshot of what a vote widget shows."""

    thread_id: str
    current_vote: VoteChoice
    displayed_count: int
