"""Survey submissions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import (
    AlumniId,
    FeedbackResponseId,
    OptionId,
    QuestionId,
    QuestionResponseId,
    SurveyId,
)


class FeedbackResponse(DomainModel):
    """One alumnus' submission for a survey (at most one per survey)."""

    id: FeedbackResponseId
    survey_id: SurveyId
    alumni_id: AlumniId
    response_date: datetime = Field(default_factory=datetime.now)


class QuestionResponse(DomainModel):
    """Answer to a single question: a chosen option, free text, or both."""

    id: QuestionResponseId
    response_id: FeedbackResponseId
    question_id: QuestionId
    option_id: Optional[OptionId] = None
    response_text: Optional[str] = None
