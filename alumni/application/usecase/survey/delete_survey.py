"""Delete survey use case."""

from uuid import UUID

from pydantic import BaseModel

from alumni.domain.service import SurveyService
from alumni.domain.value import SurveyId


class DeleteSurveyRequest(BaseModel):
    """Delete survey request."""

    survey_id: str


class DeleteSurveyResponse(BaseModel):
    """Delete survey response."""

    message: str


class DeleteSurveyUseCase:
    """Use case for deleting a survey with everything that belongs to it."""

    def __init__(self, survey_service: SurveyService) -> None:
        self.survey_service = survey_service

    async def execute(self, request: DeleteSurveyRequest) -> DeleteSurveyResponse:
        """Execute delete survey flow.

        Raises:
            NotFoundError: If the survey does not exist
        """
        await self.survey_service.delete_survey(SurveyId(UUID(request.survey_id)))
        return DeleteSurveyResponse(
            message="Survey and its associated questions and options deleted successfully"
        )
