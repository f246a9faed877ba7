"""Tag entity for categorizing threads."""

from datetime import datetime

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import TagId, TagName


class Tag(DomainModel):
    """Lookup entry used to label discussion threads."""

    id: TagId
    name: TagName
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
