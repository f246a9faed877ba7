"""Domain value objects for Alumni Connect."""

from alumni.domain.value.identifiers import (
    AlumniId,
    FeedbackResponseId,
    OptionId,
    QuestionId,
    QuestionResponseId,
    SectionId,
    SurveyId,
    TagId,
    ThreadId,
    ThreadVoteId,
)
from alumni.domain.value.types import QuestionType, TagName, VoteChoice, VoteTally

__all__ = [
    # Identifiers
    "AlumniId",
    "ThreadId",
    "ThreadVoteId",
    "TagId",
    "SurveyId",
    "SectionId",
    "QuestionId",
    "OptionId",
    "FeedbackResponseId",
    "QuestionResponseId",
    # Types
    "QuestionType",
    "TagName",
    "VoteChoice",
    "VoteTally",
]
