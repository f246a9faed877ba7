"""In-memory alumnus repository for testing."""

from copy import deepcopy
from typing import Sequence

from alumni.domain.model.alumnus import Alumnus
from alumni.domain.repository.alumnus import AlumnusRepository
from alumni.domain.value import AlumniId


class InMemoryAlumnusRepository(AlumnusRepository):
    """In-memory implementation of AlumnusRepository for testing."""

    def __init__(self) -> None:
        self._alumni: dict[AlumniId, Alumnus] = {}

    async def find_by_id(self, alumni_id: AlumniId) -> Alumnus | None:
        """Find an alumnus by ID."""
        alumnus = self._alumni.get(alumni_id)
        return deepcopy(alumnus) if alumnus else None

    async def find_by_ids(self, alumni_ids: Sequence[AlumniId]) -> list[Alumnus]:
        """Find several alumni."""
        return [
            deepcopy(self._alumni[alumni_id])
            for alumni_id in alumni_ids
            if alumni_id in self._alumni
        ]

    async def save(self, alumnus: Alumnus) -> Alumnus:
        """Save an alumnus."""
        self._alumni[alumnus.id] = deepcopy(alumnus)
        return deepcopy(alumnus)
