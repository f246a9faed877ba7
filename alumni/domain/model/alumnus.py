"""Alumnus directory entry."""

from datetime import datetime

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import AlumniId


class Alumnus(DomainModel):
    """A registered alumnus.

    Only the fields needed to attribute votes and survey responses are kept
    here; profiles and credentials live elsewhere.
    """

    id: AlumniId
    email: str = Field(min_length=3, max_length=255)
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
