"""PostgreSQL implementation of Thread repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Thread
from alumni.domain.repository import ThreadRepository
from alumni.domain.value import ThreadId
from alumni.persistence.mappers import row_to_thread, thread_to_dict
from alumni.persistence.tables import tags_table, thread_tags_table, threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tag_names(self, thread_id: ThreadId) -> list[str]:
        stmt = (
            select(tags_table.c.name)
            .select_from(thread_tags_table)
            .join(tags_table, thread_tags_table.c.tag_id == tags_table.c.id)
            .where(thread_tags_table.c.thread_id == thread_id)
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row.name for row in result.fetchall()]

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        with logfire.span("thread_repository.find_by_id", thread_id=str(thread_id)):
            stmt = select(threads_table).where(threads_table.c.id == thread_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if not row:
                return None

            tag_names = await self._fetch_tag_names(thread_id)
            return row_to_thread(row._asdict(), tag_names=tag_names)

    async def save(self, thread: Thread) -> Thread:
        """Save a thread and replace its tag links."""
        thread_dict = thread_to_dict(thread)

        exists = await self.session.execute(
            select(threads_table.c.id).where(threads_table.c.id == thread.id)
        )
        if exists.fetchone():
            await self.session.execute(
                update(threads_table)
                .where(threads_table.c.id == thread.id)
                .values(**thread_dict)
            )
        else:
            await self.session.execute(insert(threads_table).values(**thread_dict))

        await self.session.execute(
            delete(thread_tags_table).where(thread_tags_table.c.thread_id == thread.id)
        )
        if thread.tag_names:
            tag_rows = await self.session.execute(
                select(tags_table.c.id).where(
                    tags_table.c.name.in_([name.root for name in thread.tag_names])
                )
            )
            links = [
                {"thread_id": thread.id, "tag_id": row.id}
                for row in tag_rows.fetchall()
            ]
            if links:
                await self.session.execute(insert(thread_tags_table), links)

        await self.session.flush()
        return thread

    async def adjust_vote_counts(
        self, thread_id: ThreadId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Thread]:
        """Atomically add deltas to the vote counters (floored at zero)."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(
                upvotes=func.greatest(threads_table.c.upvotes + upvotes_delta, 0),
                downvotes=func.greatest(threads_table.c.downvotes + downvotes_delta, 0),
            )
            .returning(*threads_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        if not row:
            return None

        tag_names = await self._fetch_tag_names(thread_id)
        return row_to_thread(row._asdict(), tag_names=tag_names)
