"""Feedback (survey response) domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from alumni.domain.error import DuplicateResponseError, NotFoundError, ValidationError
from alumni.domain.model.alumnus import Alumnus
from alumni.domain.model.feedback import FeedbackResponse, QuestionResponse
from alumni.domain.model.survey import Survey, SurveyOption, SurveyQuestion, SurveySection
from alumni.domain.repository import AlumnusRepository, FeedbackRepository
from alumni.domain.value import (
    AlumniId,
    FeedbackResponseId,
    OptionId,
    QuestionId,
    QuestionResponseId,
    SurveyId,
)

from .base import Service
from .survey_service import QuestionDetail, SurveyService


@dataclass
class AnswerDraft:
    """One answer in a submission."""

    question_id: QuestionId
    option_id: Optional[OptionId] = None
    response_text: Optional[str] = None


@dataclass
class RespondentAnswer:
    """A respondent's answer to one question (fields are None when unanswered)."""

    alumni_id: AlumniId
    alumnus: Optional[Alumnus]
    response_text: Optional[str]
    option: Optional[SurveyOption]


@dataclass
class QuestionReport:
    """All respondents' answers to one question."""

    question: SurveyQuestion
    answers: list[RespondentAnswer]


@dataclass
class SectionReport:
    """Question reports for one section."""

    section: SurveySection
    questions: list[QuestionReport]


@dataclass
class SurveyReport:
    """Survey responses organized by section and question."""

    survey: Survey
    sections: list[SectionReport]


class FeedbackService(Service):
    """Domain service for submitting and aggregating survey responses."""

    def __init__(
        self,
        feedback_repository: FeedbackRepository,
        alumnus_repository: AlumnusRepository,
        survey_service: SurveyService,
    ) -> None:
        """Initialize feedback service.

        Args:
            feedback_repository: Feedback repository
            alumnus_repository: Alumni directory
            survey_service: Survey domain service
        """
        self.feedback_repository = feedback_repository
        self.alumnus_repository = alumnus_repository
        self.survey_service = survey_service

    async def submit_response(
        self, survey_id: SurveyId, alumni_id: AlumniId, answers: list[AnswerDraft]
    ) -> FeedbackResponse:
        """Record an alumnus' answers to a survey.

        Args:
            survey_id: Survey being answered
            alumni_id: Respondent
            answers: One answer per question (unanswered questions omitted)

        Returns:
            The stored submission

        Raises:
            NotFoundError: If the survey or the alumnus does not exist
            DuplicateResponseError: If the alumnus already responded
            ValidationError: If a question is not part of the survey, an option
                is not part of its question, or a question is answered twice
        """
        with logfire.span(
            "feedback_service.submit_response",
            survey_id=str(survey_id),
            alumni_id=str(alumni_id),
            answer_count=len(answers),
        ):
            detail = await self.survey_service.get_survey_detail(survey_id)
            if not detail:
                raise NotFoundError("Survey", str(survey_id))

            if not await self.alumnus_repository.find_by_id(alumni_id):
                logfire.warn("Response from unknown alumnus", alumni_id=str(alumni_id))
                raise NotFoundError("Alumnus", str(alumni_id))

            existing = await self.feedback_repository.find_by_survey_and_alumni(
                survey_id, alumni_id
            )
            if existing:
                logfire.warn(
                    "Duplicate survey response",
                    survey_id=str(survey_id),
                    alumni_id=str(alumni_id),
                )
                raise DuplicateResponseError(str(survey_id))

            self._validate_answers(detail.questions, answers)

            response = FeedbackResponse(
                id=FeedbackResponseId(uuid4()),
                survey_id=survey_id,
                alumni_id=alumni_id,
                response_date=datetime.now(),
            )
            question_responses = [
                QuestionResponse(
                    id=QuestionResponseId(uuid4()),
                    response_id=response.id,
                    question_id=answer.question_id,
                    option_id=answer.option_id,
                    response_text=answer.response_text,
                )
                for answer in answers
            ]

            try:
                saved = await self.feedback_repository.save(
                    response, question_responses
                )
            except IntegrityError:
                raise DuplicateResponseError(str(survey_id))

            logfire.info(
                "Survey response submitted",
                survey_id=str(survey_id),
                response_id=str(saved.id),
            )
            return saved

    async def get_survey_report(self, survey_id: SurveyId) -> SurveyReport:
        """Organize every submission by section and question.

        Each question lists one entry per respondent, including respondents
        who skipped it.

        Raises:
            NotFoundError: If the survey does not exist
        """
        with logfire.span(
            "feedback_service.get_survey_report", survey_id=str(survey_id)
        ):
            detail = await self.survey_service.get_survey_detail(survey_id)
            if not detail:
                raise NotFoundError("Survey", str(survey_id))

            responses = await self.feedback_repository.find_by_survey(survey_id)
            answers = await self.feedback_repository.find_answers(
                [r.id for r in responses]
            )
            alumni = await self.alumnus_repository.find_by_ids(
                [r.alumni_id for r in responses]
            )

            alumni_by_id = {a.id: a for a in alumni}
            answer_index: dict[tuple[FeedbackResponseId, QuestionId], QuestionResponse] = {}
            for answer in answers:
                answer_index.setdefault((answer.response_id, answer.question_id), answer)

            sections = []
            for section in detail.sections:
                question_reports = []
                for question in section.questions:
                    options_by_id = {o.id: o for o in question.options}
                    entries = []
                    for response in responses:
                        answer = answer_index.get((response.id, question.question.id))
                        entries.append(
                            RespondentAnswer(
                                alumni_id=response.alumni_id,
                                alumnus=alumni_by_id.get(response.alumni_id),
                                response_text=answer.response_text if answer else None,
                                option=(
                                    options_by_id.get(answer.option_id)
                                    if answer and answer.option_id
                                    else None
                                ),
                            )
                        )
                    question_reports.append(QuestionReport(question.question, entries))
                sections.append(SectionReport(section.section, question_reports))

            logfire.info(
                "Survey report built",
                survey_id=str(survey_id),
                respondents=len(responses),
            )
            return SurveyReport(detail.survey, sections)

    @staticmethod
    def _validate_answers(
        questions: list[QuestionDetail], answers: list[AnswerDraft]
    ) -> None:
        by_id = {q.question.id: q for q in questions}
        seen: set[QuestionId] = set()

        for answer in answers:
            question = by_id.get(answer.question_id)
            if question is None:
                raise ValidationError(
                    "The question does not belong to the specified survey."
                )
            if answer.question_id in seen:
                raise ValidationError(
                    f"Question {answer.question_id} is answered more than once."
                )
            seen.add(answer.question_id)

            if answer.option_id is not None and answer.option_id not in {
                o.id for o in question.options
            }:
                raise ValidationError("The option does not belong to the question.")
