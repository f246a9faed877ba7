"""PostgreSQL implementation of Feedback repository."""

from typing import Optional, Sequence

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model.feedback import FeedbackResponse, QuestionResponse
from alumni.domain.repository import FeedbackRepository
from alumni.domain.value import AlumniId, FeedbackResponseId, SurveyId
from alumni.persistence.mappers import (
    feedback_response_to_dict,
    question_response_to_dict,
    row_to_feedback_response,
    row_to_question_response,
)
from alumni.persistence.tables import feedback_responses_table, question_responses_table


class PostgresFeedbackRepository(FeedbackRepository):
    """PostgreSQL implementation of FeedbackRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_survey_and_alumni(
        self, survey_id: SurveyId, alumni_id: AlumniId
    ) -> Optional[FeedbackResponse]:
        """Find an alumnus' submission for a survey."""
        stmt = select(feedback_responses_table).where(
            and_(
                feedback_responses_table.c.survey_id == survey_id,
                feedback_responses_table.c.alumni_id == alumni_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_feedback_response(row._asdict()) if row else None

    async def find_by_survey(self, survey_id: SurveyId) -> list[FeedbackResponse]:
        """All submissions for a survey, oldest first."""
        stmt = (
            select(feedback_responses_table)
            .where(feedback_responses_table.c.survey_id == survey_id)
            .order_by(feedback_responses_table.c.response_date)
        )
        result = await self.session.execute(stmt)
        return [row_to_feedback_response(row._asdict()) for row in result.fetchall()]

    async def find_answers(
        self, response_ids: Sequence[FeedbackResponseId]
    ) -> list[QuestionResponse]:
        """Per-question answers for the given submissions (batch query)."""
        if not response_ids:
            return []

        stmt = select(question_responses_table).where(
            question_responses_table.c.response_id.in_(list(response_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_question_response(row._asdict()) for row in result.fetchall()]

    async def find_survey_ids_answered_by(self, alumni_id: AlumniId) -> set[SurveyId]:
        """IDs of surveys the alumnus has responded to."""
        stmt = select(feedback_responses_table.c.survey_id).where(
            feedback_responses_table.c.alumni_id == alumni_id
        )
        result = await self.session.execute(stmt)
        return {SurveyId(row.survey_id) for row in result.fetchall()}

    async def save(
        self, response: FeedbackResponse, answers: Sequence[QuestionResponse]
    ) -> FeedbackResponse:
        """Insert a submission together with its answers."""
        await self.session.execute(
            insert(feedback_responses_table).values(
                **feedback_response_to_dict(response)
            )
        )
        if answers:
            await self.session.execute(
                insert(question_responses_table),
                [question_response_to_dict(a) for a in answers],
            )
        await self.session.flush()
        return response
