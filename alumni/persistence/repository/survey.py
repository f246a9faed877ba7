"""PostgreSQL implementation of Survey repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model.survey import Survey, SurveyOption, SurveyQuestion, SurveySection
from alumni.domain.repository import SurveyRepository
from alumni.domain.value import QuestionId, SurveyId
from alumni.persistence.mappers import (
    option_to_dict,
    question_to_dict,
    row_to_option,
    row_to_question,
    row_to_section,
    row_to_survey,
    section_to_dict,
    survey_to_dict,
)
from alumni.persistence.tables import (
    feedback_responses_table,
    survey_options_table,
    survey_questions_table,
    survey_sections_table,
    surveys_table,
)


class PostgresSurveyRepository(SurveyRepository):
    """PostgreSQL implementation of SurveyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, survey: Survey) -> Survey:
        """Insert a survey."""
        await self.session.execute(insert(surveys_table).values(**survey_to_dict(survey)))
        await self.session.flush()
        return survey

    async def save_section(self, section: SurveySection) -> SurveySection:
        """Insert a section."""
        await self.session.execute(
            insert(survey_sections_table).values(**section_to_dict(section))
        )
        await self.session.flush()
        return section

    async def save_question(self, question: SurveyQuestion) -> SurveyQuestion:
        """Insert a question."""
        await self.session.execute(
            insert(survey_questions_table).values(**question_to_dict(question))
        )
        await self.session.flush()
        return question

    async def save_options(self, options: Sequence[SurveyOption]) -> list[SurveyOption]:
        """Insert options in one batch."""
        if not options:
            return []

        await self.session.execute(
            insert(survey_options_table), [option_to_dict(o) for o in options]
        )
        await self.session.flush()
        return list(options)

    async def find_by_id(self, survey_id: SurveyId) -> Optional[Survey]:
        """Find a survey by ID."""
        stmt = select(surveys_table).where(surveys_table.c.id == survey_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_survey(row._asdict()) if row else None

    async def find_all(self) -> list[Survey]:
        """All surveys, newest creation date first."""
        stmt = select(surveys_table).order_by(surveys_table.c.creation_date.desc())
        result = await self.session.execute(stmt)
        return [row_to_survey(row._asdict()) for row in result.fetchall()]

    async def find_sections(self, survey_id: SurveyId) -> list[SurveySection]:
        """Sections of a survey in authoring order."""
        stmt = (
            select(survey_sections_table)
            .where(survey_sections_table.c.survey_id == survey_id)
            .order_by(survey_sections_table.c.position)
        )
        result = await self.session.execute(stmt)
        return [row_to_section(row._asdict()) for row in result.fetchall()]

    async def find_questions(self, survey_id: SurveyId) -> list[SurveyQuestion]:
        """Questions of a survey in authoring order."""
        stmt = (
            select(survey_questions_table)
            .join(
                survey_sections_table,
                survey_questions_table.c.section_id == survey_sections_table.c.id,
            )
            .where(survey_questions_table.c.survey_id == survey_id)
            .order_by(
                survey_sections_table.c.position, survey_questions_table.c.position
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def find_options(
        self, question_ids: Sequence[QuestionId]
    ) -> list[SurveyOption]:
        """Options for the given questions (batch query)."""
        if not question_ids:
            return []

        stmt = (
            select(survey_options_table)
            .where(survey_options_table.c.question_id.in_(list(question_ids)))
            .order_by(survey_options_table.c.position)
        )
        result = await self.session.execute(stmt)
        return [row_to_option(row._asdict()) for row in result.fetchall()]

    async def delete(self, survey_id: SurveyId) -> bool:
        """Delete a survey with its responses, sections, questions and options.

        Child rows are removed explicitly so the delete does not depend on the
        foreign keys' ON DELETE behavior.
        """
        with logfire.span("survey_repository.delete", survey_id=str(survey_id)):
            await self.session.execute(
                delete(feedback_responses_table).where(
                    feedback_responses_table.c.survey_id == survey_id
                )
            )
            question_ids = select(survey_questions_table.c.id).where(
                survey_questions_table.c.survey_id == survey_id
            )
            await self.session.execute(
                delete(survey_options_table).where(
                    survey_options_table.c.question_id.in_(question_ids)
                )
            )
            await self.session.execute(
                delete(survey_questions_table).where(
                    survey_questions_table.c.survey_id == survey_id
                )
            )
            await self.session.execute(
                delete(survey_sections_table).where(
                    survey_sections_table.c.survey_id == survey_id
                )
            )
            result = await self.session.execute(
                delete(surveys_table).where(surveys_table.c.id == survey_id)
            )
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]
