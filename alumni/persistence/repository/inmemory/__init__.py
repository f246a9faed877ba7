"""In-memory repository implementations for testing."""

from .alumnus import InMemoryAlumnusRepository
from .feedback import InMemoryFeedbackRepository
from .survey import InMemorySurveyRepository
from .tag import InMemoryTagRepository
from .thread import InMemoryThreadRepository
from .vote import InMemoryThreadVoteRepository

__all__ = [
    "InMemoryAlumnusRepository",
    "InMemoryFeedbackRepository",
    "InMemorySurveyRepository",
    "InMemoryTagRepository",
    "InMemoryThreadRepository",
    "InMemoryThreadVoteRepository",
]
