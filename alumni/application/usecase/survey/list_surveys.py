"""List surveys use case."""

from enum import Enum
from uuid import UUID

import logfire
from pydantic import BaseModel

from alumni.domain.error import ValidationError
from alumni.domain.service import SurveyService
from alumni.domain.value import AlumniId

from .get_survey import SurveySummary


class SurveyFilter(str, Enum):
    """Which surveys to list."""

    ALL = "all"
    ANSWERED = "answered"
    UNANSWERED = "unanswered"


class ListSurveysRequest(BaseModel):
    """List surveys request.

    ``alumni_id`` is required for the answered and unanswered filters.
    """

    filter: SurveyFilter = SurveyFilter.ALL
    alumni_id: str | None = None


class ListSurveysResponse(BaseModel):
    """List surveys response."""

    surveys: list[SurveySummary]


class ListSurveysUseCase:
    """Use case for listing surveys, newest first."""

    def __init__(self, survey_service: SurveyService) -> None:
        """Initialize list surveys use case.

        Args:
            survey_service: Survey domain service
        """
        self.survey_service = survey_service

    async def execute(self, request: ListSurveysRequest) -> ListSurveysResponse:
        """Execute list surveys flow.

        Raises:
            ValidationError: If a per-alumnus filter is used without an alumnus
        """
        with logfire.span("list_surveys.execute", filter=request.filter.value):
            if request.filter is SurveyFilter.ALL:
                surveys = await self.survey_service.list_surveys()
            else:
                if not request.alumni_id:
                    raise ValidationError(
                        f"Listing {request.filter.value} surveys requires an alumnus"
                    )
                alumni_id = AlumniId(UUID(request.alumni_id))
                if request.filter is SurveyFilter.ANSWERED:
                    surveys = await self.survey_service.list_answered(alumni_id)
                else:
                    surveys = await self.survey_service.list_unanswered(alumni_id)

            return ListSurveysResponse(
                surveys=[SurveySummary.from_survey(s) for s in surveys]
            )
