"""In-memory survey repository for testing."""

from typing import Optional, Sequence

from alumni.domain.model.survey import Survey, SurveyOption, SurveyQuestion, SurveySection
from alumni.domain.repository.survey import SurveyRepository
from alumni.domain.value import QuestionId, SurveyId

from .feedback import InMemoryFeedbackRepository


class InMemorySurveyRepository(SurveyRepository):
    """In-memory implementation of SurveyRepository for testing.

    When given the feedback repository, deleting a survey also drops its
    submissions, as the database cascade does.
    """

    def __init__(
        self, feedback_repository: Optional[InMemoryFeedbackRepository] = None
    ) -> None:
        self._surveys: dict[SurveyId, Survey] = {}
        self._sections: list[SurveySection] = []
        self._questions: list[SurveyQuestion] = []
        self._options: list[SurveyOption] = []
        self._feedback_repository = feedback_repository

    async def save(self, survey: Survey) -> Survey:
        """Insert a survey."""
        self._surveys[survey.id] = survey
        return survey

    async def save_section(self, section: SurveySection) -> SurveySection:
        """Insert a section."""
        self._sections.append(section)
        return section

    async def save_question(self, question: SurveyQuestion) -> SurveyQuestion:
        """Insert a question."""
        self._questions.append(question)
        return question

    async def save_options(self, options: Sequence[SurveyOption]) -> list[SurveyOption]:
        """Insert options."""
        self._options.extend(options)
        return list(options)

    async def find_by_id(self, survey_id: SurveyId) -> Optional[Survey]:
        """Find a survey by ID."""
        return self._surveys.get(survey_id)

    async def find_all(self) -> list[Survey]:
        """All surveys, newest creation date first."""
        return sorted(
            self._surveys.values(), key=lambda s: s.creation_date, reverse=True
        )

    async def find_sections(self, survey_id: SurveyId) -> list[SurveySection]:
        """Sections of a survey in authoring order."""
        sections = [s for s in self._sections if s.survey_id == survey_id]
        return sorted(sections, key=lambda s: s.position)

    async def find_questions(self, survey_id: SurveyId) -> list[SurveyQuestion]:
        """Questions of a survey in authoring order."""
        section_positions = {
            s.id: s.position for s in self._sections if s.survey_id == survey_id
        }
        questions = [q for q in self._questions if q.survey_id == survey_id]
        return sorted(
            questions, key=lambda q: (section_positions.get(q.section_id, 0), q.position)
        )

    async def find_options(
        self, question_ids: Sequence[QuestionId]
    ) -> list[SurveyOption]:
        """Options for the given questions."""
        wanted = set(question_ids)
        options = [o for o in self._options if o.question_id in wanted]
        return sorted(options, key=lambda o: o.position)

    async def delete(self, survey_id: SurveyId) -> bool:
        """Delete a survey with everything that belongs to it."""
        if survey_id not in self._surveys:
            return False

        question_ids = {q.id for q in self._questions if q.survey_id == survey_id}
        self._options = [o for o in self._options if o.question_id not in question_ids]
        self._questions = [q for q in self._questions if q.survey_id != survey_id]
        self._sections = [s for s in self._sections if s.survey_id != survey_id]
        del self._surveys[survey_id]

        if self._feedback_repository is not None:
            self._feedback_repository.remove_survey(survey_id)
        return True
