"""Unit tests for the in-memory survey and feedback repositories."""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from alumni.domain.model import (
    FeedbackResponse,
    QuestionResponse,
    Survey,
    SurveyOption,
    SurveyQuestion,
    SurveySection,
)
from alumni.domain.value import (
    AlumniId,
    FeedbackResponseId,
    OptionId,
    QuestionId,
    QuestionResponseId,
    QuestionType,
    SectionId,
    SurveyId,
)
from alumni.persistence.repository.inmemory import (
    InMemoryFeedbackRepository,
    InMemorySurveyRepository,
)
from tests.conftest import SURVEY_DATES


async def seed_survey(repo: InMemorySurveyRepository) -> tuple[Survey, SurveyQuestion]:
    survey = await repo.save(
        Survey(id=SurveyId(uuid4()), title="Library hours", **SURVEY_DATES)
    )
    section = await repo.save_section(
        SurveySection(id=SectionId(uuid4()), survey_id=survey.id, section_title="Hours")
    )
    question = await repo.save_question(
        SurveyQuestion(
            id=QuestionId(uuid4()),
            survey_id=survey.id,
            section_id=section.id,
            question_text="Open on Sundays?",
            question_type=QuestionType.MULTIPLE_CHOICE,
        )
    )
    await repo.save_options(
        [
            SurveyOption(
                id=OptionId(uuid4()),
                question_id=question.id,
                option_text=text,
                position=position,
            )
            for position, text in enumerate(["Yes", "No"])
        ]
    )
    return survey, question


def make_response(survey_id: SurveyId, question_id: QuestionId):
    response = FeedbackResponse(
        id=FeedbackResponseId(uuid4()),
        survey_id=survey_id,
        alumni_id=AlumniId(uuid4()),
        response_date=datetime.now(),
    )
    answer = QuestionResponse(
        id=QuestionResponseId(uuid4()),
        response_id=response.id,
        question_id=question_id,
        response_text="Yes please",
    )
    return response, answer


class TestInMemorySurveyRepository:
    """Tests for InMemorySurveyRepository."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_feedback(self):
        """Deleting a survey removes its tree and its submissions."""
        # Arrange
        feedback_repo = InMemoryFeedbackRepository()
        survey_repo = InMemorySurveyRepository(feedback_repository=feedback_repo)
        survey, question = await seed_survey(survey_repo)
        other, other_question = await seed_survey(survey_repo)

        response, answer = make_response(survey.id, question.id)
        kept, kept_answer = make_response(other.id, other_question.id)
        await feedback_repo.save(response, [answer])
        await feedback_repo.save(kept, [kept_answer])

        # Act
        deleted = await survey_repo.delete(survey.id)

        # Assert
        assert deleted is True
        assert await survey_repo.find_by_id(survey.id) is None
        assert await survey_repo.find_questions(survey.id) == []
        assert await survey_repo.find_options([question.id]) == []
        assert await feedback_repo.find_by_survey(survey.id) == []
        assert await feedback_repo.find_answers([response.id]) == []

        # The other survey is untouched
        assert await feedback_repo.find_by_survey(other.id) == [kept]
        assert len(await survey_repo.find_options([other_question.id])) == 2

    @pytest.mark.asyncio
    async def test_delete_missing(self):
        repo = InMemorySurveyRepository()

        assert await repo.delete(SurveyId(uuid4())) is False


class TestInMemoryFeedbackRepository:
    """Tests for InMemoryFeedbackRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_submission_violates_uniqueness(self):
        repo = InMemoryFeedbackRepository()
        survey_id = SurveyId(uuid4())
        response, answer = make_response(survey_id, QuestionId(uuid4()))
        await repo.save(response, [answer])

        again = response.model_copy(update={"id": FeedbackResponseId(uuid4())})

        with pytest.raises(IntegrityError):
            await repo.save(again, [])

    @pytest.mark.asyncio
    async def test_answered_survey_ids(self):
        repo = InMemoryFeedbackRepository()
        response, answer = make_response(SurveyId(uuid4()), QuestionId(uuid4()))
        await repo.save(response, [answer])

        assert await repo.find_survey_ids_answered_by(response.alumni_id) == {
            response.survey_id
        }
        assert await repo.find_survey_ids_answered_by(AlumniId(uuid4())) == set()
