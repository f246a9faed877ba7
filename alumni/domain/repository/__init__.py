"""Repository interfaces for the Alumni Connect domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from alumni.domain.repository.alumnus import AlumnusRepository
from alumni.domain.repository.feedback import FeedbackRepository
from alumni.domain.repository.survey import SurveyRepository
from alumni.domain.repository.tag import TagRepository
from alumni.domain.repository.thread import ThreadRepository
from alumni.domain.repository.vote import ThreadVoteRepository

__all__ = [
    "AlumnusRepository",
    "FeedbackRepository",
    "SurveyRepository",
    "TagRepository",
    "ThreadRepository",
    "ThreadVoteRepository",
]
