"""PostgreSQL implementation of ThreadVote repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import ThreadVote
from alumni.domain.repository import ThreadVoteRepository
from alumni.domain.value import AlumniId, ThreadId, ThreadVoteId, VoteChoice
from alumni.persistence.mappers import row_to_thread_vote, thread_vote_to_dict
from alumni.persistence.tables import thread_votes_table


class PostgresThreadVoteRepository(ThreadVoteRepository):
    """PostgreSQL implementation of ThreadVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_alumni_and_thread(
        self, alumni_id: AlumniId, thread_id: ThreadId
    ) -> Optional[ThreadVote]:
        """Find an alumnus' vote on a thread."""
        stmt = select(thread_votes_table).where(
            and_(
                thread_votes_table.c.alumni_id == alumni_id,
                thread_votes_table.c.thread_id == thread_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread_vote(row._asdict()) if row else None

    async def save(self, vote: ThreadVote) -> ThreadVote:
        """Insert a vote."""
        stmt = insert(thread_votes_table).values(**thread_vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_choice(
        self, vote_id: ThreadVoteId, choice: VoteChoice
    ) -> Optional[ThreadVote]:
        """Switch an existing vote's direction."""
        stmt = (
            update(thread_votes_table)
            .where(thread_votes_table.c.id == vote_id)
            .values(choice=choice.value, updated_at=datetime.now())
            .returning(*thread_votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_thread_vote(row._asdict()) if row else None

    async def delete_by_alumni_and_thread(
        self, alumni_id: AlumniId, thread_id: ThreadId
    ) -> bool:
        """Delete an alumnus' vote on a thread."""
        stmt = delete(thread_votes_table).where(
            and_(
                thread_votes_table.c.alumni_id == alumni_id,
                thread_votes_table.c.thread_id == thread_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
