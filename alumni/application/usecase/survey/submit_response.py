"""Submit survey response use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from alumni.domain.service import AnswerDraft, FeedbackService
from alumni.domain.value import AlumniId, OptionId, QuestionId, SurveyId


class AnswerInput(BaseModel):
    """One answer: an option, free text, or both."""

    question_id: UUID
    option_id: UUID | None = None
    response_text: str | None = None


class SubmitResponseRequest(BaseModel):
    """Submit response request."""

    survey_id: str
    alumni_id: str  # Respondent identity
    responses: list[AnswerInput] = Field(min_length=1)


class SubmitResponseResponse(BaseModel):
    """Submit response response."""

    response_id: str
    message: str


class SubmitResponseUseCase:
    """Use case for recording an alumnus' answers to a survey."""

    def __init__(self, feedback_service: FeedbackService) -> None:
        """Initialize submit response use case.

        Args:
            feedback_service: Feedback domain service
        """
        self.feedback_service = feedback_service

    async def execute(self, request: SubmitResponseRequest) -> SubmitResponseResponse:
        """Execute submit flow.

        Raises:
            NotFoundError: If the survey does not exist
            DuplicateResponseError: If the alumnus already responded
            ValidationError: If an answer does not fit the survey
        """
        with logfire.span(
            "submit_response.execute",
            survey_id=request.survey_id,
            answers=len(request.responses),
        ):
            answers = [
                AnswerDraft(
                    question_id=QuestionId(answer.question_id),
                    option_id=(
                        OptionId(answer.option_id) if answer.option_id else None
                    ),
                    response_text=answer.response_text,
                )
                for answer in request.responses
            ]
            response = await self.feedback_service.submit_response(
                SurveyId(UUID(request.survey_id)),
                AlumniId(UUID(request.alumni_id)),
                answers,
            )
            return SubmitResponseResponse(
                response_id=str(response.id),
                message="Survey responses submitted successfully.",
            )
