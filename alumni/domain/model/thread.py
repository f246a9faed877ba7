"""Discussion thread aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import AlumniId, TagName, ThreadId


class Thread(DomainModel):
    """Discussion thread.

    Vote counters are denormalized from the thread_votes table and kept in
    step by the vote service.
    """

    id: ThreadId
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    author_id: AlumniId
    tag_names: list[TagName] = Field(default_factory=list)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def net_score(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvotes - self.downvotes
