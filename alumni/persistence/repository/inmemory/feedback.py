"""In-memory feedback repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from alumni.domain.model.feedback import FeedbackResponse, QuestionResponse
from alumni.domain.repository.feedback import FeedbackRepository
from alumni.domain.value import AlumniId, FeedbackResponseId, SurveyId


class InMemoryFeedbackRepository(FeedbackRepository):
    """In-memory implementation of FeedbackRepository for testing."""

    def __init__(self) -> None:
        self._responses: list[FeedbackResponse] = []
        self._answers: list[QuestionResponse] = []

    async def find_by_survey_and_alumni(
        self, survey_id: SurveyId, alumni_id: AlumniId
    ) -> Optional[FeedbackResponse]:
        """Find an alumnus' submission for a survey."""
        for response in self._responses:
            if response.survey_id == survey_id and response.alumni_id == alumni_id:
                return response
        return None

    async def find_by_survey(self, survey_id: SurveyId) -> list[FeedbackResponse]:
        """All submissions for a survey, oldest first."""
        responses = [r for r in self._responses if r.survey_id == survey_id]
        return sorted(responses, key=lambda r: r.response_date)

    async def find_answers(
        self, response_ids: Sequence[FeedbackResponseId]
    ) -> list[QuestionResponse]:
        """Per-question answers for the given submissions."""
        wanted = set(response_ids)
        return [a for a in self._answers if a.response_id in wanted]

    async def find_survey_ids_answered_by(self, alumni_id: AlumniId) -> set[SurveyId]:
        """IDs of surveys the alumnus has responded to."""
        return {r.survey_id for r in self._responses if r.alumni_id == alumni_id}

    async def save(
        self, response: FeedbackResponse, answers: Sequence[QuestionResponse]
    ) -> FeedbackResponse:
        """Insert a submission together with its answers.

        Raises:
            IntegrityError: If the alumnus already responded to the survey
        """
        existing = await self.find_by_survey_and_alumni(
            response.survey_id, response.alumni_id
        )
        if existing:
            raise IntegrityError("Duplicate feedback response", None, Exception())

        self._responses.append(response)
        self._answers.extend(answers)
        return response

    def remove_survey(self, survey_id: SurveyId) -> None:
        """Drop every submission for a survey (mirrors the cascading delete)."""
        removed = {r.id for r in self._responses if r.survey_id == survey_id}
        self._responses = [r for r in self._responses if r.id not in removed]
        self._answers = [a for a in self._answers if a.response_id not in removed]
