"""PostgreSQL implementation of Tag repository."""

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Tag
from alumni.domain.repository import TagRepository
from alumni.persistence.mappers import row_to_tag, tag_to_dict
from alumni.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        tag_dict = tag_to_dict(tag)

        existing = await self.session.execute(
            select(tags_table.c.id).where(tags_table.c.id == tag.id)
        )
        if existing.fetchone():
            stmt = update(tags_table).where(tags_table.c.id == tag.id).values(**tag_dict)
        else:
            stmt = insert(tags_table).values(**tag_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return tag

    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """Find all tags."""
        stmt = select(tags_table).limit(limit)

        if order_by == "created_at":
            stmt = stmt.order_by(tags_table.c.created_at.desc())
        else:
            stmt = stmt.order_by(tags_table.c.name)

        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]
