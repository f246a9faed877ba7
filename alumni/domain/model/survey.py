"""Survey aggregate: survey, sections, questions and options."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import OptionId, QuestionId, QuestionType, SectionId, SurveyId


class Survey(DomainModel):
    """Administrator-authored survey."""

    id: SurveyId
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    creation_date: datetime = Field(default_factory=datetime.now)
    start_date: date
    end_date: date


class SurveySection(DomainModel):
    """Titled group of questions inside a survey."""

    id: SectionId
    survey_id: SurveyId
    section_title: str = Field(min_length=1, max_length=255)
    section_description: Optional[str] = None
    position: int = 0


class SurveyQuestion(DomainModel):
    """Question within a section.

    ``survey_id`` is denormalized so responses can be checked against the
    survey without walking sections.
    """

    id: QuestionId
    survey_id: SurveyId
    section_id: SectionId
    question_text: str = Field(min_length=1, max_length=255)
    question_type: QuestionType
    position: int = 0


class SurveyOption(DomainModel):
    """Selectable answer for Multiple Choice and Rating questions."""

    id: OptionId
    question_id: QuestionId
    option_text: str = Field(min_length=1, max_length=255)
    option_value: Optional[int] = None
    position: int = 0
