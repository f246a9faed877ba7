"""Unit tests for submitting, listing, reporting and deleting surveys."""

from uuid import uuid4

import pytest

from alumni.application.usecase.survey import (
    AnswerInput,
    CreateSurveyRequest,
    CreateSurveyResponse,
    CreateSurveyUseCase,
    DeleteSurveyRequest,
    DeleteSurveyUseCase,
    GetSurveyResponsesRequest,
    GetSurveyResponsesUseCase,
    ListSurveysRequest,
    ListSurveysUseCase,
    SubmitResponseRequest,
    SubmitResponseUseCase,
    SurveyFilter,
)
from alumni.domain.error import DuplicateResponseError, NotFoundError, ValidationError
from alumni.domain.repository import AlumnusRepository
from tests.conftest import add_alumnus, make_alumnus
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def create_poll(unit_env, title: str = "Homecoming venue") -> CreateSurveyResponse:
    use_case = await unit_env.get(CreateSurveyUseCase)
    return await use_case.execute(
        CreateSurveyRequest(
            title=title,
            start_date="2026-06-01",
            end_date="2026-06-30",
            sections=[
                {
                    "section_title": "Venue",
                    "questions": [
                        {
                            "question_text": "Where should we meet?",
                            "question_type": "Multiple Choice",
                            "options": [
                                {"option_text": "Main hall"},
                                {"option_text": "Boathouse"},
                            ],
                        },
                        {
                            "question_text": "Any suggestions?",
                            "question_type": "Open-ended",
                        },
                    ],
                }
            ],
        )
    )


def answers_for(created: CreateSurveyResponse, choice: int, text: str | None) -> list[AnswerInput]:
    venue, suggestions = created.survey.sections[0].questions
    answers = [
        AnswerInput(
            question_id=venue.question_id, option_id=venue.options[choice].option_id
        )
    ]
    if text is not None:
        answers.append(
            AnswerInput(question_id=suggestions.question_id, response_text=text)
        )
    return answers


class TestSubmitResponseUseCase:
    """Tests for SubmitResponseUseCase."""

    @pytest.mark.asyncio
    async def test_submit(self, unit_env):
        # Arrange
        created = await create_poll(unit_env)
        use_case = await unit_env.get(SubmitResponseUseCase)

        # Act
        response = await use_case.execute(
            SubmitResponseRequest(
                survey_id=created.survey.survey_id,
                alumni_id=str(await add_alumnus(unit_env)),
                responses=answers_for(created, 1, "Live music"),
            )
        )

        # Assert
        assert response.response_id
        assert response.message == "Survey responses submitted successfully."

    @pytest.mark.asyncio
    async def test_duplicate_submission(self, unit_env):
        created = await create_poll(unit_env)
        use_case = await unit_env.get(SubmitResponseUseCase)
        request = SubmitResponseRequest(
            survey_id=created.survey.survey_id,
            alumni_id=str(await add_alumnus(unit_env)),
            responses=answers_for(created, 0, None),
        )
        await use_case.execute(request)

        with pytest.raises(DuplicateResponseError):
            await use_case.execute(request)


class TestListSurveysUseCase:
    """Tests for ListSurveysUseCase."""

    @pytest.mark.asyncio
    async def test_filters(self, unit_env):
        # Arrange
        first = await create_poll(unit_env, "First")
        await create_poll(unit_env, "Second")
        submit = await unit_env.get(SubmitResponseUseCase)
        use_case = await unit_env.get(ListSurveysUseCase)
        alumni_id = str(await add_alumnus(unit_env))
        await submit.execute(
            SubmitResponseRequest(
                survey_id=first.survey.survey_id,
                alumni_id=alumni_id,
                responses=answers_for(first, 0, None),
            )
        )

        # Act
        everything = await use_case.execute(ListSurveysRequest())
        answered = await use_case.execute(
            ListSurveysRequest(filter=SurveyFilter.ANSWERED, alumni_id=alumni_id)
        )
        unanswered = await use_case.execute(
            ListSurveysRequest(filter=SurveyFilter.UNANSWERED, alumni_id=alumni_id)
        )

        # Assert
        assert {s.title for s in everything.surveys} == {"First", "Second"}
        assert [s.title for s in answered.surveys] == ["First"]
        assert [s.title for s in unanswered.surveys] == ["Second"]

    @pytest.mark.asyncio
    async def test_empty_list(self, unit_env):
        use_case = await unit_env.get(ListSurveysUseCase)

        response = await use_case.execute(ListSurveysRequest())

        assert response.surveys == []

    @pytest.mark.asyncio
    async def test_per_alumnus_filter_requires_identity(self, unit_env):
        use_case = await unit_env.get(ListSurveysUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListSurveysRequest(filter=SurveyFilter.ANSWERED))


class TestGetSurveyResponsesUseCase:
    """Tests for GetSurveyResponsesUseCase."""

    @pytest.mark.asyncio
    async def test_report(self, unit_env):
        # Arrange
        created = await create_poll(unit_env)
        submit = await unit_env.get(SubmitResponseUseCase)
        use_case = await unit_env.get(GetSurveyResponsesUseCase)
        alumnus_repo = await unit_env.get(AlumnusRepository)

        katherine = await alumnus_repo.save(make_alumnus("Katherine", "Johnson"))
        dorothy = await alumnus_repo.save(make_alumnus("Dorothy", "Vaughan"))
        await submit.execute(
            SubmitResponseRequest(
                survey_id=created.survey.survey_id,
                alumni_id=str(katherine.id),
                responses=answers_for(created, 1, "Fireworks"),
            )
        )
        await submit.execute(
            SubmitResponseRequest(
                survey_id=created.survey.survey_id,
                alumni_id=str(dorothy.id),
                responses=answers_for(created, 0, None),
            )
        )

        # Act
        report = await use_case.execute(
            GetSurveyResponsesRequest(survey_id=created.survey.survey_id)
        )

        # Assert
        assert report.title == "Homecoming venue"
        assert report.respondent_count == 2
        venue, suggestions = report.sections[0].questions
        assert [(r.first_name, r.option_text) for r in venue.responses] == [
            ("Katherine", "Boathouse"),
            ("Dorothy", "Main hall"),
        ]
        assert [r.response_text for r in suggestions.responses] == ["Fireworks", None]
        assert suggestions.responses[0].email == katherine.email


class TestDeleteSurveyUseCase:
    """Tests for DeleteSurveyUseCase."""

    @pytest.mark.asyncio
    async def test_delete_removes_responses(self, unit_env):
        """Deleting a survey also drops its submissions."""
        # Arrange
        created = await create_poll(unit_env)
        submit = await unit_env.get(SubmitResponseUseCase)
        use_case = await unit_env.get(DeleteSurveyUseCase)
        list_surveys = await unit_env.get(ListSurveysUseCase)
        alumni_id = str(await add_alumnus(unit_env))
        await submit.execute(
            SubmitResponseRequest(
                survey_id=created.survey.survey_id,
                alumni_id=alumni_id,
                responses=answers_for(created, 0, None),
            )
        )

        # Act
        response = await use_case.execute(
            DeleteSurveyRequest(survey_id=created.survey.survey_id)
        )

        # Assert
        assert "deleted successfully" in response.message
        answered = await list_surveys.execute(
            ListSurveysRequest(filter=SurveyFilter.ANSWERED, alumni_id=alumni_id)
        )
        assert answered.surveys == []

    @pytest.mark.asyncio
    async def test_delete_unknown(self, unit_env):
        use_case = await unit_env.get(DeleteSurveyUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteSurveyRequest(survey_id=str(uuid4())))
