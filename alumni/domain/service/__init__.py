"""Domain services."""

from .base import Service
from .feedback_service import (
    AnswerDraft,
    FeedbackService,
    QuestionReport,
    RespondentAnswer,
    SectionReport,
    SurveyReport,
)
from .survey_service import (
    OptionDraft,
    QuestionDetail,
    QuestionDraft,
    SectionDetail,
    SectionDraft,
    SurveyDetail,
    SurveyService,
)
from .tag_service import TagService
from .thread_service import ThreadService
from .vote_service import VoteService

__all__ = [
    "AnswerDraft",
    "FeedbackService",
    "OptionDraft",
    "QuestionDetail",
    "QuestionDraft",
    "QuestionReport",
    "RespondentAnswer",
    "SectionDetail",
    "SectionDraft",
    "SectionReport",
    "Service",
    "SurveyDetail",
    "SurveyReport",
    "SurveyService",
    "TagService",
    "ThreadService",
    "VoteService",
]
