"""Survey domain service."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

import logfire

from alumni.domain.error import NotFoundError
from alumni.domain.model.survey import Survey, SurveyOption, SurveyQuestion, SurveySection
from alumni.domain.repository import FeedbackRepository, SurveyRepository
from alumni.domain.value import (
    AlumniId,
    OptionId,
    QuestionId,
    QuestionType,
    SectionId,
    SurveyId,
)

from .base import Service


@dataclass
class OptionDraft:
    """Option as authored, before it has an ID."""

    option_text: str
    option_value: Optional[int] = None


@dataclass
class QuestionDraft:
    """Question as authored, before it has an ID."""

    question_text: str
    question_type: QuestionType
    options: list[OptionDraft] = field(default_factory=list)


@dataclass
class SectionDraft:
    """Section as authored, before it has an ID."""

    section_title: str
    section_description: Optional[str] = None
    questions: list[QuestionDraft] = field(default_factory=list)


@dataclass
class QuestionDetail:
    """A question with its options."""

    question: SurveyQuestion
    options: list[SurveyOption]


@dataclass
class SectionDetail:
    """A section with its questions."""

    section: SurveySection
    questions: list[QuestionDetail]


@dataclass
class SurveyDetail:
    """A survey with its full section/question/option tree."""

    survey: Survey
    sections: list[SectionDetail]

    @property
    def questions(self) -> list[QuestionDetail]:
        """All questions in authoring order."""
        return [q for section in self.sections for q in section.questions]


class SurveyService(Service):
    """Domain service for authoring and reading surveys."""

    def __init__(
        self,
        survey_repository: SurveyRepository,
        feedback_repository: FeedbackRepository,
    ) -> None:
        """Initialize survey service.

        Args:
            survey_repository: Survey repository
            feedback_repository: Feedback repository (for answered/unanswered)
        """
        self.survey_repository = survey_repository
        self.feedback_repository = feedback_repository

    async def create_survey(
        self, survey: Survey, sections: list[SectionDraft]
    ) -> SurveyDetail:
        """Create a survey together with its sections, questions and options.

        Options are only stored for question types that use them.

        Args:
            survey: Survey header
            sections: Authored sections in display order

        Returns:
            The created survey tree
        """
        with logfire.span(
            "survey_service.create_survey",
            survey_id=str(survey.id),
            title=survey.title,
            section_count=len(sections),
        ):
            saved = await self.survey_repository.save(survey)

            section_details = []
            for section_position, section_draft in enumerate(sections):
                section = await self.survey_repository.save_section(
                    SurveySection(
                        id=SectionId(uuid4()),
                        survey_id=saved.id,
                        section_title=section_draft.section_title,
                        section_description=section_draft.section_description,
                        position=section_position,
                    )
                )

                question_details = []
                for question_position, question_draft in enumerate(
                    section_draft.questions
                ):
                    question = await self.survey_repository.save_question(
                        SurveyQuestion(
                            id=QuestionId(uuid4()),
                            survey_id=saved.id,
                            section_id=section.id,
                            question_text=question_draft.question_text,
                            question_type=question_draft.question_type,
                            position=question_position,
                        )
                    )

                    options: list[SurveyOption] = []
                    if question.question_type.has_options and question_draft.options:
                        options = await self.survey_repository.save_options(
                            [
                                SurveyOption(
                                    id=OptionId(uuid4()),
                                    question_id=question.id,
                                    option_text=option.option_text,
                                    option_value=option.option_value,
                                    position=option_position,
                                )
                                for option_position, option in enumerate(
                                    question_draft.options
                                )
                            ]
                        )
                    elif question_draft.options:
                        logfire.warn(
                            "Ignoring options for question type",
                            question_id=str(question.id),
                            question_type=question.question_type.value,
                        )

                    question_details.append(QuestionDetail(question, options))

                section_details.append(SectionDetail(section, question_details))

            logfire.info(
                "Survey created",
                survey_id=str(saved.id),
                questions=sum(len(s.questions) for s in section_details),
            )
            return SurveyDetail(saved, section_details)

    async def get_survey(self, survey_id: SurveyId) -> Survey | None:
        """Get a survey header by ID."""
        with logfire.span("survey_service.get_survey", survey_id=str(survey_id)):
            survey = await self.survey_repository.find_by_id(survey_id)
            if not survey:
                logfire.warn("Survey not found", survey_id=str(survey_id))
            return survey

    async def get_survey_detail(self, survey_id: SurveyId) -> SurveyDetail | None:
        """Load a survey with sections, questions and options.

        Args:
            survey_id: Survey ID

        Returns:
            Survey tree if found, None otherwise
        """
        with logfire.span("survey_service.get_survey_detail", survey_id=str(survey_id)):
            survey = await self.get_survey(survey_id)
            if not survey:
                return None

            sections = await self.survey_repository.find_sections(survey_id)
            questions = await self.survey_repository.find_questions(survey_id)
            options = await self.survey_repository.find_options(
                [q.id for q in questions]
            )

            options_by_question: dict[QuestionId, list[SurveyOption]] = defaultdict(
                list
            )
            for option in options:
                options_by_question[option.question_id].append(option)

            questions_by_section: dict[SectionId, list[QuestionDetail]] = defaultdict(
                list
            )
            for question in questions:
                questions_by_section[question.section_id].append(
                    QuestionDetail(question, options_by_question[question.id])
                )

            return SurveyDetail(
                survey,
                [
                    SectionDetail(section, questions_by_section[section.id])
                    for section in sections
                ],
            )

    async def list_surveys(self) -> list[Survey]:
        """All surveys, newest first."""
        with logfire.span("survey_service.list_surveys"):
            surveys = await self.survey_repository.find_all()
            logfire.info("Surveys listed", count=len(surveys))
            return surveys

    async def list_answered(self, alumni_id: AlumniId) -> list[Survey]:
        """Surveys the alumnus has responded to, newest first."""
        with logfire.span("survey_service.list_answered", alumni_id=str(alumni_id)):
            answered = await self.feedback_repository.find_survey_ids_answered_by(
                alumni_id
            )
            surveys = await self.survey_repository.find_all()
            return [s for s in surveys if s.id in answered]

    async def list_unanswered(self, alumni_id: AlumniId) -> list[Survey]:
        """Surveys the alumnus has not responded to yet, newest first."""
        with logfire.span("survey_service.list_unanswered", alumni_id=str(alumni_id)):
            answered = await self.feedback_repository.find_survey_ids_answered_by(
                alumni_id
            )
            surveys = await self.survey_repository.find_all()
            return [s for s in surveys if s.id not in answered]

    async def delete_survey(self, survey_id: SurveyId) -> None:
        """Delete a survey and everything that belongs to it.

        Raises:
            NotFoundError: If the survey does not exist
        """
        with logfire.span("survey_service.delete_survey", survey_id=str(survey_id)):
            deleted = await self.survey_repository.delete(survey_id)
            if not deleted:
                logfire.warn("Delete of non-existent survey", survey_id=str(survey_id))
                raise NotFoundError("Survey", str(survey_id))
            logfire.info("Survey deleted", survey_id=str(survey_id))
