"""PostgreSQL repository implementations."""

from alumni.persistence.repository.alumnus import PostgresAlumnusRepository
from alumni.persistence.repository.feedback import PostgresFeedbackRepository
from alumni.persistence.repository.survey import PostgresSurveyRepository
from alumni.persistence.repository.tag import PostgresTagRepository
from alumni.persistence.repository.thread import PostgresThreadRepository
from alumni.persistence.repository.vote import PostgresThreadVoteRepository

__all__ = [
    "PostgresAlumnusRepository",
    "PostgresFeedbackRepository",
    "PostgresSurveyRepository",
    "PostgresTagRepository",
    "PostgresThreadRepository",
    "PostgresThreadVoteRepository",
]
