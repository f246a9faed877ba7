"""Alumnus repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from alumni.domain.model.alumnus import Alumnus
from alumni.domain.value import AlumniId


class AlumnusRepository(ABC):
    """Repository for the alumni directory."""

    @abstractmethod
    async def find_by_id(self, alumni_id: AlumniId) -> Alumnus | None:
        """Find an alumnus by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, alumni_ids: Sequence[AlumniId]) -> list[Alumnus]:
        """Find several alumni in one query (missing IDs are skipped)."""
        pass

    @abstractmethod
    async def save(self, alumnus: Alumnus) -> Alumnus:
        """Save an alumnus (create or update)."""
        pass
