"""Get survey responses (report) use case."""

from uuid import UUID

from pydantic import BaseModel

from alumni.domain.service import FeedbackService, RespondentAnswer
from alumni.domain.value import QuestionType, SurveyId


class RespondentItem(BaseModel):
    """One respondent's answer; answer fields are null when skipped."""

    alumni_id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    response_text: str | None
    option_text: str | None
    option_value: int | None

    @classmethod
    def from_answer(cls, answer: RespondentAnswer) -> "RespondentItem":
        alumnus = answer.alumnus
        option = answer.option
        return cls(
            alumni_id=str(answer.alumni_id),
            email=alumnus.email if alumnus else None,
            first_name=alumnus.first_name if alumnus else None,
            last_name=alumnus.last_name if alumnus else None,
            response_text=answer.response_text,
            option_text=option.option_text if option else None,
            option_value=option.option_value if option else None,
        )


class QuestionResponsesItem(BaseModel):
    """All answers to one question."""

    question_id: str
    question_text: str
    question_type: QuestionType
    responses: list[RespondentItem]


class SectionResponsesItem(BaseModel):
    """Answers grouped by section."""

    section_id: str
    section_title: str
    questions: list[QuestionResponsesItem]


class GetSurveyResponsesRequest(BaseModel):
    """Get survey responses request."""

    survey_id: str


class GetSurveyResponsesResponse(BaseModel):
    """Survey responses organized by section and question."""

    survey_id: str
    title: str
    respondent_count: int
    sections: list[SectionResponsesItem]


class GetSurveyResponsesUseCase:
    """Use case for the per-question survey responses report."""

    def __init__(self, feedback_service: FeedbackService) -> None:
        self.feedback_service = feedback_service

    async def execute(
        self, request: GetSurveyResponsesRequest
    ) -> GetSurveyResponsesResponse:
        """Execute report flow.

        Raises:
            NotFoundError: If the survey does not exist
        """
        report = await self.feedback_service.get_survey_report(
            SurveyId(UUID(request.survey_id))
        )

        sections = [
            SectionResponsesItem(
                section_id=str(s.section.id),
                section_title=s.section.section_title,
                questions=[
                    QuestionResponsesItem(
                        question_id=str(q.question.id),
                        question_text=q.question.question_text,
                        question_type=q.question.question_type,
                        responses=[RespondentItem.from_answer(a) for a in q.answers],
                    )
                    for q in s.questions
                ],
            )
            for s in report.sections
        ]
        respondents = {
            a.alumni_id for s in report.sections for q in s.questions for a in q.answers
        }

        return GetSurveyResponsesResponse(
            survey_id=str(report.survey.id),
            title=report.survey.title,
            respondent_count=len(respondents),
            sections=sections,
        )
