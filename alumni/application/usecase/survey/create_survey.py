"""Create survey use case."""

from datetime import date, datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from alumni.domain.error import ValidationError
from alumni.domain.model.survey import Survey
from alumni.domain.service import (
    OptionDraft,
    QuestionDraft,
    SectionDraft,
    SurveyService,
)
from alumni.domain.value import QuestionType, SurveyId

from .get_survey import SurveyDetailResponse


class OptionInput(BaseModel):
    """Authored option."""

    option_text: str
    option_value: int | None = None


class QuestionInput(BaseModel):
    """Authored question."""

    question_text: str
    question_type: QuestionType
    options: list[OptionInput] = Field(default_factory=list)


class SectionInput(BaseModel):
    """Authored section."""

    section_title: str
    section_description: str | None = None
    questions: list[QuestionInput] = Field(default_factory=list)


class CreateSurveyRequest(BaseModel):
    """Create survey request."""

    title: str
    description: str | None = None
    start_date: date
    end_date: date
    sections: list[SectionInput] = Field(default_factory=list)


class CreateSurveyResponse(BaseModel):
    """Create survey response."""

    message: str
    survey: SurveyDetailResponse


class CreateSurveyUseCase:
    """Use case for authoring a survey with sections, questions and options."""

    def __init__(self, survey_service: SurveyService) -> None:
        """Initialize create survey use case.

        Args:
            survey_service: Survey domain service
        """
        self.survey_service = survey_service

    async def execute(self, request: CreateSurveyRequest) -> CreateSurveyResponse:
        """Execute create survey flow.

        Args:
            request: Survey header and authored sections

        Returns:
            The created survey tree

        Raises:
            ValidationError: If the survey ends before it starts
        """
        if request.end_date < request.start_date:
            raise ValidationError("The end date must not be before the start date.")

        with logfire.span("create_survey.execute", title=request.title):
            survey = Survey(
                id=SurveyId(uuid4()),
                title=request.title,
                description=request.description,
                creation_date=datetime.now(),
                start_date=request.start_date,
                end_date=request.end_date,
            )
            sections = [
                SectionDraft(
                    section_title=section.section_title,
                    section_description=section.section_description,
                    questions=[
                        QuestionDraft(
                            question_text=question.question_text,
                            question_type=question.question_type,
                            options=[
                                OptionDraft(o.option_text, o.option_value)
                                for o in question.options
                            ],
                        )
                        for question in section.questions
                    ],
                )
                for section in request.sections
            ]

            detail = await self.survey_service.create_survey(survey, sections)

            return CreateSurveyResponse(
                message="Survey with sections and questions created successfully.",
                survey=SurveyDetailResponse.from_detail(detail),
            )
