"""Feedback (survey submission) repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from alumni.domain.model.feedback import FeedbackResponse, QuestionResponse
from alumni.domain.value import AlumniId, FeedbackResponseId, SurveyId


class FeedbackRepository(ABC):
    """Repository for survey submissions and their per-question answers."""

    @abstractmethod
    async def find_by_survey_and_alumni(
        self, survey_id: SurveyId, alumni_id: AlumniId
    ) -> Optional[FeedbackResponse]:
        """Find an alumnus' submission for a survey."""
        pass

    @abstractmethod
    async def find_by_survey(self, survey_id: SurveyId) -> list[FeedbackResponse]:
        """All submissions for a survey, oldest first."""
        pass

    @abstractmethod
    async def find_answers(
        self, response_ids: Sequence[FeedbackResponseId]
    ) -> list[QuestionResponse]:
        """Per-question answers for the given submissions (batch query)."""
        pass

    @abstractmethod
    async def find_survey_ids_answered_by(self, alumni_id: AlumniId) -> set[SurveyId]:
        """IDs of surveys the alumnus has responded to."""
        pass

    @abstractmethod
    async def save(
        self, response: FeedbackResponse, answers: Sequence[QuestionResponse]
    ) -> FeedbackResponse:
        """Insert a submission together with its answers.

        Raises:
            IntegrityError: If the alumnus already responded to the survey
        """
        pass
