"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from alumni.config import Settings
from alumni.domain.repository import (
    AlumnusRepository,
    FeedbackRepository,
    SurveyRepository,
    TagRepository,
    ThreadRepository,
    ThreadVoteRepository,
)
from alumni.persistence.database import create_engine, create_session_factory
from alumni.persistence.repository import (
    PostgresAlumnusRepository,
    PostgresFeedbackRepository,
    PostgresSurveyRepository,
    PostgresTagRepository,
    PostgresThreadRepository,
    PostgresThreadVoteRepository,
)
from alumni.util.di.base import ProviderBase
from alumni.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_alumnus_repository(self, session: AsyncSession) -> AlumnusRepository:
        """Provide Alumnus repository."""
        return PostgresAlumnusRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        """Provide Thread repository."""
        return PostgresThreadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> ThreadVoteRepository:
        """Provide ThreadVote repository."""
        return PostgresThreadVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_survey_repository(self, session: AsyncSession) -> SurveyRepository:
        """Provide Survey repository."""
        return PostgresSurveyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_feedback_repository(self, session: AsyncSession) -> FeedbackRepository:
        """Provide Feedback repository."""
        return PostgresFeedbackRepository(session)
