"""Domain value objects for Alumni Connect.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from uuid import UUID

from pydantic import field_validator

from alumni.domain.value.common import RootValueObject, ValueObject


class VoteChoice(str, Enum):
    """An alumnus' standing vote on a thread.

    The enum value is the wire representation. ``NONE`` travels as the
    string sentinel ``"null"`` so that a retracted vote is an explicit
    message rather than the absence of one.
    """

    NONE = "null"
    UP = "upvote"
    DOWN = "downvote"

    @property
    def weight(self) -> int:
        """Contribution of this vote to a thread's net score."""
        if self is VoteChoice.UP:
            return 1
        if self is VoteChoice.DOWN:
            return -1
        return 0

    @classmethod
    def parse(cls, value: "str | VoteChoice | None") -> "VoteChoice":
        """Parse a seed or wire value; ``None`` means no vote."""
        if value is None:
            return cls.NONE
        return cls(value)

    def to_seed(self) -> str | None:
        """Seed representation (``None`` instead of the sentinel)."""
        return None if self is VoteChoice.NONE else self.value


class QuestionType(str, Enum):
    """Kind of survey question."""

    MULTIPLE_CHOICE = "Multiple Choice"
    OPEN_ENDED = "Open-ended"
    RATING = "Rating"

    @property
    def has_options(self) -> bool:
        """Whether answers are chosen from stored options."""
        return self in (QuestionType.MULTIPLE_CHOICE, QuestionType.RATING)


class TagName(RootValueObject[str]):
    """Unique tag name, e.g. 'career', 'class-of-2019'."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Strip whitespace and check length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Tag name must be 1-255 characters")
        return v


class VoteTally(ValueObject):
    """Authoritative vote counts for a thread, as seen by one alumnus."""

    thread_id: UUID
    upvotes: int = 0
    downvotes: int = 0
    user_vote: VoteChoice = VoteChoice.NONE

    @field_validator("user_vote", mode="before")
    @classmethod
    def parse_user_vote(cls, v):
        """Accept ``None`` for no vote."""
        return VoteChoice.parse(v)

    @property
    def net_score(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvotes - self.downvotes
