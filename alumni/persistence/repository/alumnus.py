"""PostgreSQL implementation of Alumnus repository."""

from typing import Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Alumnus
from alumni.domain.repository import AlumnusRepository
from alumni.domain.value import AlumniId
from alumni.persistence.mappers import alumnus_to_dict, row_to_alumnus
from alumni.persistence.tables import alumni_table


class PostgresAlumnusRepository(AlumnusRepository):
    """PostgreSQL implementation of AlumnusRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, alumni_id: AlumniId) -> Alumnus | None:
        """Find an alumnus by ID."""
        stmt = select(alumni_table).where(alumni_table.c.id == alumni_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_alumnus(row._asdict()) if row else None

    async def find_by_ids(self, alumni_ids: Sequence[AlumniId]) -> list[Alumnus]:
        """Find several alumni in one query."""
        if not alumni_ids:
            return []

        stmt = select(alumni_table).where(alumni_table.c.id.in_(list(alumni_ids)))
        result = await self.session.execute(stmt)
        return [row_to_alumnus(row._asdict()) for row in result.fetchall()]

    async def save(self, alumnus: Alumnus) -> Alumnus:
        """Save an alumnus (create or update)."""
        data = alumnus_to_dict(alumnus)
        existing = await self.session.execute(
            select(alumni_table.c.id).where(alumni_table.c.id == alumnus.id)
        )
        if existing.fetchone():
            stmt = (
                update(alumni_table).where(alumni_table.c.id == alumnus.id).values(**data)
            )
        else:
            stmt = insert(alumni_table).values(**data)
        await self.session.execute(stmt)
        await self.session.flush()
        return alumnus
