"""Unit tests for SurveyService."""

from datetime import date, datetime
from uuid import uuid4

import pytest

from alumni.domain.error import NotFoundError
from alumni.domain.model import Survey
from alumni.domain.service import (
    AnswerDraft,
    FeedbackService,
    OptionDraft,
    QuestionDraft,
    SectionDraft,
    SurveyService,
)
from alumni.domain.value import AlumniId, QuestionType, SurveyId
from tests.conftest import SURVEY_DATES, add_alumnus
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def make_survey(title: str = "Alumni engagement 2026", created: datetime | None = None) -> Survey:
    return Survey(
        id=SurveyId(uuid4()),
        title=title,
        description="How can the association serve you better?",
        creation_date=created or datetime.now(),
        **SURVEY_DATES,
    )


def engagement_sections() -> list[SectionDraft]:
    return [
        SectionDraft(
            section_title="About you",
            questions=[
                QuestionDraft(
                    question_text="Which campus did you attend?",
                    question_type=QuestionType.MULTIPLE_CHOICE,
                    options=[OptionDraft("North"), OptionDraft("South")],
                ),
                QuestionDraft(
                    question_text="What do you do now?",
                    question_type=QuestionType.OPEN_ENDED,
                ),
            ],
        ),
        SectionDraft(
            section_title="Events",
            section_description="Reunions and meetups",
            questions=[
                QuestionDraft(
                    question_text="Rate the last reunion",
                    question_type=QuestionType.RATING,
                    options=[OptionDraft(str(n), option_value=n) for n in range(1, 6)],
                ),
            ],
        ),
    ]


class TestCreateSurvey:
    """Tests for create_survey method."""

    @pytest.mark.asyncio
    async def test_creates_full_tree_in_order(self, unit_env):
        """Sections, questions and options keep their authoring order."""
        # Arrange
        survey_service = await unit_env.get(SurveyService)
        survey = make_survey()

        # Act
        created = await survey_service.create_survey(survey, engagement_sections())

        # Assert
        assert [s.section.section_title for s in created.sections] == [
            "About you",
            "Events",
        ]
        assert [s.section.position for s in created.sections] == [0, 1]
        assert [q.question.question_text for q in created.questions] == [
            "Which campus did you attend?",
            "What do you do now?",
            "Rate the last reunion",
        ]
        rating = created.questions[2]
        assert [o.option_value for o in rating.options] == [1, 2, 3, 4, 5]

        # Reading back gives the same tree
        loaded = await survey_service.get_survey_detail(survey.id)
        assert loaded is not None
        assert [q.question.id for q in loaded.questions] == [
            q.question.id for q in created.questions
        ]
        assert [len(q.options) for q in loaded.questions] == [2, 0, 5]

    @pytest.mark.asyncio
    async def test_open_ended_question_drops_options(self, unit_env):
        """Open-ended questions never store options."""
        survey_service = await unit_env.get(SurveyService)
        sections = [
            SectionDraft(
                section_title="Feedback",
                questions=[
                    QuestionDraft(
                        question_text="Anything else?",
                        question_type=QuestionType.OPEN_ENDED,
                        options=[OptionDraft("ignored")],
                    )
                ],
            )
        ]

        created = await survey_service.create_survey(make_survey(), sections)

        assert created.questions[0].options == []

    @pytest.mark.asyncio
    async def test_survey_without_sections(self, unit_env):
        survey_service = await unit_env.get(SurveyService)
        survey = make_survey()

        created = await survey_service.create_survey(survey, [])

        assert created.sections == []
        assert await survey_service.get_survey(survey.id) == survey


class TestListSurveys:
    """Tests for list_surveys, list_answered and list_unanswered."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        survey_service = await unit_env.get(SurveyService)
        older = make_survey("Older", created=datetime(2026, 2, 1))
        newer = make_survey("Newer", created=datetime(2026, 3, 1))
        await survey_service.create_survey(older, [])
        await survey_service.create_survey(newer, [])

        surveys = await survey_service.list_surveys()

        assert [s.title for s in surveys] == ["Newer", "Older"]

    @pytest.mark.asyncio
    async def test_answered_and_unanswered_partition(self, unit_env):
        """Each survey is either answered or unanswered by an alumnus."""
        # Arrange
        survey_service = await unit_env.get(SurveyService)
        feedback_service = await unit_env.get(FeedbackService)

        answered = await survey_service.create_survey(
            make_survey("Answered"), engagement_sections()
        )
        await survey_service.create_survey(make_survey("Pending"), [])
        alumni_id = await add_alumnus(unit_env)

        await feedback_service.submit_response(
            answered.survey.id,
            alumni_id,
            [AnswerDraft(answered.questions[1].question.id, response_text="Engineer")],
        )

        # Act
        answered_list = await survey_service.list_answered(alumni_id)
        unanswered_list = await survey_service.list_unanswered(alumni_id)

        # Assert
        assert [s.title for s in answered_list] == ["Answered"]
        assert [s.title for s in unanswered_list] == ["Pending"]

        # Someone who never answered sees everything as unanswered
        assert await survey_service.list_answered(AlumniId(uuid4())) == []
        assert len(await survey_service.list_unanswered(AlumniId(uuid4()))) == 2


class TestDeleteSurvey:
    """Tests for delete_survey method."""

    @pytest.mark.asyncio
    async def test_delete_removes_tree(self, unit_env):
        survey_service = await unit_env.get(SurveyService)
        created = await survey_service.create_survey(
            make_survey(), engagement_sections()
        )

        await survey_service.delete_survey(created.survey.id)

        assert await survey_service.get_survey_detail(created.survey.id) is None
        assert await survey_service.list_surveys() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_survey(self, unit_env):
        survey_service = await unit_env.get(SurveyService)

        with pytest.raises(NotFoundError):
            await survey_service.delete_survey(SurveyId(uuid4()))


class TestSurveyDates:
    """Survey headers keep their calendar dates."""

    @pytest.mark.asyncio
    async def test_dates_round_trip(self, unit_env):
        survey_service = await unit_env.get(SurveyService)
        survey = make_survey()

        await survey_service.create_survey(survey, [])
        loaded = await survey_service.get_survey(survey.id)

        assert loaded is not None
        assert loaded.start_date == date(2026, 1, 1)
        assert loaded.end_date == date(2026, 12, 31)
