"""Survey repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from alumni.domain.model.survey import Survey, SurveyOption, SurveyQuestion, SurveySection
from alumni.domain.value import QuestionId, SurveyId


class SurveyRepository(ABC):
    """Repository for the survey aggregate.

    Sections, questions and options are owned by their survey and are
    loaded and deleted through it.
    """

    @abstractmethod
    async def save(self, survey: Survey) -> Survey:
        """Insert a survey."""
        pass

    @abstractmethod
    async def save_section(self, section: SurveySection) -> SurveySection:
        """Insert a section."""
        pass

    @abstractmethod
    async def save_question(self, question: SurveyQuestion) -> SurveyQuestion:
        """Insert a question."""
        pass

    @abstractmethod
    async def save_options(self, options: Sequence[SurveyOption]) -> list[SurveyOption]:
        """Insert options in one batch."""
        pass

    @abstractmethod
    async def find_by_id(self, survey_id: SurveyId) -> Optional[Survey]:
        """Find a survey by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Survey]:
        """All surveys, newest creation date first."""
        pass

    @abstractmethod
    async def find_sections(self, survey_id: SurveyId) -> list[SurveySection]:
        """Sections of a survey in authoring order."""
        pass

    @abstractmethod
    async def find_questions(self, survey_id: SurveyId) -> list[SurveyQuestion]:
        """Questions of a survey in authoring order."""
        pass

    @abstractmethod
    async def find_options(
        self, question_ids: Sequence[QuestionId]
    ) -> list[SurveyOption]:
        """Options for the given questions (batch query)."""
        pass

    @abstractmethod
    async def delete(self, survey_id: SurveyId) -> bool:
        """Delete a survey with everything that belongs to it.

        Returns:
            True if the survey existed
        """
        pass
