"""Get survey questions use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from alumni.domain.service import SurveyService
from alumni.domain.value import SurveyId

from .get_survey import QuestionItem


class GetSurveyQuestionsRequest(BaseModel):
    """Get survey questions request."""

    survey_id: str


class GetSurveyQuestionsResponse(BaseModel):
    """Flat question list in authoring order."""

    survey_id: str
    title: str
    questions: list[QuestionItem]


class GetSurveyQuestionsUseCase:
    """Use case for listing a survey's questions with their options."""

    def __init__(self, survey_service: SurveyService) -> None:
        self.survey_service = survey_service

    async def execute(
        self, request: GetSurveyQuestionsRequest
    ) -> Optional[GetSurveyQuestionsResponse]:
        """Execute get questions flow.

        Returns:
            Questions if the survey exists, None otherwise
        """
        detail = await self.survey_service.get_survey_detail(
            SurveyId(UUID(request.survey_id))
        )
        if not detail:
            return None

        return GetSurveyQuestionsResponse(
            survey_id=str(detail.survey.id),
            title=detail.survey.title,
            questions=[QuestionItem.from_detail(q) for q in detail.questions],
        )
