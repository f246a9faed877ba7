"""Domain model entities for Alumni Connect."""

from alumni.domain.model.alumnus import Alumnus
from alumni.domain.model.feedback import FeedbackResponse, QuestionResponse
from alumni.domain.model.survey import Survey, SurveyOption, SurveyQuestion, SurveySection
from alumni.domain.model.tag import Tag
from alumni.domain.model.thread import Thread
from alumni.domain.model.vote import ThreadVote

__all__ = [
    "Alumnus",
    "Thread",
    "ThreadVote",
    "Tag",
    "Survey",
    "SurveySection",
    "SurveyQuestion",
    "SurveyOption",
    "FeedbackResponse",
    "QuestionResponse",
]
