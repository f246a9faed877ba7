"""Get survey use case."""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from alumni.domain.model.survey import Survey
from alumni.domain.service import QuestionDetail, SurveyDetail, SurveyService
from alumni.domain.value import QuestionType, SurveyId


class SurveySummary(BaseModel):
    """Survey header."""

    survey_id: str
    title: str
    description: str | None
    creation_date: datetime
    start_date: date
    end_date: date

    @classmethod
    def from_survey(cls, survey: Survey) -> "SurveySummary":
        return cls(
            survey_id=str(survey.id),
            title=survey.title,
            description=survey.description,
            creation_date=survey.creation_date,
            start_date=survey.start_date,
            end_date=survey.end_date,
        )


class OptionItem(BaseModel):
    """Selectable answer."""

    option_id: str
    option_text: str
    option_value: int | None


class QuestionItem(BaseModel):
    """Question with its options."""

    question_id: str
    section_id: str
    question_text: str
    question_type: QuestionType
    options: list[OptionItem]

    @classmethod
    def from_detail(cls, detail: QuestionDetail) -> "QuestionItem":
        return cls(
            question_id=str(detail.question.id),
            section_id=str(detail.question.section_id),
            question_text=detail.question.question_text,
            question_type=detail.question.question_type,
            options=[
                OptionItem(
                    option_id=str(o.id),
                    option_text=o.option_text,
                    option_value=o.option_value,
                )
                for o in detail.options
            ],
        )


class SectionItem(BaseModel):
    """Section with its questions."""

    section_id: str
    section_title: str
    section_description: str | None
    questions: list[QuestionItem]


class SurveyDetailResponse(SurveySummary):
    """Survey with nested sections, questions and options."""

    sections: list[SectionItem]

    @classmethod
    def from_detail(cls, detail: SurveyDetail) -> "SurveyDetailResponse":
        summary = SurveySummary.from_survey(detail.survey)
        return cls(
            **summary.model_dump(),
            sections=[
                SectionItem(
                    section_id=str(s.section.id),
                    section_title=s.section.section_title,
                    section_description=s.section.section_description,
                    questions=[QuestionItem.from_detail(q) for q in s.questions],
                )
                for s in detail.sections
            ],
        )


class GetSurveyRequest(BaseModel):
    """Get survey request."""

    survey_id: str  # UUID string


class GetSurveyUseCase:
    """Use case for loading a survey with its full question tree."""

    def __init__(self, survey_service: SurveyService) -> None:
        """Initialize get survey use case.

        Args:
            survey_service: Survey domain service
        """
        self.survey_service = survey_service

    async def execute(self, request: GetSurveyRequest) -> Optional[SurveyDetailResponse]:
        """Execute get survey flow.

        Returns:
            Survey tree if found, None otherwise
        """
        detail = await self.survey_service.get_survey_detail(
            SurveyId(UUID(request.survey_id))
        )
        if not detail:
            return None
        return SurveyDetailResponse.from_detail(detail)
