"""Survey routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from alumni.application.usecase.survey import (
    AnswerInput,
    CreateSurveyRequest,
    CreateSurveyResponse,
    CreateSurveyUseCase,
    DeleteSurveyRequest,
    DeleteSurveyResponse,
    DeleteSurveyUseCase,
    GetSurveyQuestionsRequest,
    GetSurveyQuestionsResponse,
    GetSurveyQuestionsUseCase,
    GetSurveyRequest,
    GetSurveyResponsesRequest,
    GetSurveyResponsesResponse,
    GetSurveyResponsesUseCase,
    GetSurveyUseCase,
    ListSurveysRequest,
    ListSurveysResponse,
    ListSurveysUseCase,
    SubmitResponseRequest,
    SubmitResponseResponse,
    SubmitResponseUseCase,
    SurveyDetailResponse,
    SurveyFilter,
)
from alumni.domain.error import DomainError
from alumni.interface.api.identity import require_alumni_id
from alumni.interface.error import to_http_exception

router = APIRouter(prefix="/surveys", tags=["surveys"], route_class=DishkaRoute)


class SubmitResponseBody(BaseModel):
    """Answers to a survey; unanswered questions are omitted."""

    responses: list[AnswerInput] = Field(min_length=1)


@router.post(
    "",
    response_model=CreateSurveyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_survey(
    request: CreateSurveyRequest,
    use_case: FromDishka[CreateSurveyUseCase],
) -> CreateSurveyResponse:
    """Create a survey with its sections, questions and options."""
    with logfire.span("api.create_survey", title=request.title):
        try:
            return await use_case.execute(request)
        except DomainError as e:
            raise to_http_exception(e)


@router.get("", response_model=ListSurveysResponse)
async def list_surveys(use_case: FromDishka[ListSurveysUseCase]) -> ListSurveysResponse:
    """List all surveys, newest first."""
    return await use_case.execute(ListSurveysRequest())


@router.get("/answered", response_model=ListSurveysResponse)
async def list_answered_surveys(
    use_case: FromDishka[ListSurveysUseCase],
    alumni_id: str = Depends(require_alumni_id),
) -> ListSurveysResponse:
    """List surveys the caller has responded to."""
    return await use_case.execute(
        ListSurveysRequest(filter=SurveyFilter.ANSWERED, alumni_id=alumni_id)
    )


@router.get("/unanswered", response_model=ListSurveysResponse)
async def list_unanswered_surveys(
    use_case: FromDishka[ListSurveysUseCase],
    alumni_id: str = Depends(require_alumni_id),
) -> ListSurveysResponse:
    """List surveys the caller has not responded to yet."""
    return await use_case.execute(
        ListSurveysRequest(filter=SurveyFilter.UNANSWERED, alumni_id=alumni_id)
    )


@router.get("/{survey_id}", response_model=SurveyDetailResponse)
async def get_survey(
    survey_id: UUID,
    use_case: FromDishka[GetSurveyUseCase],
) -> SurveyDetailResponse:
    """Get a survey with nested sections, questions and options."""
    response = await use_case.execute(GetSurveyRequest(survey_id=str(survey_id)))
    if not response:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Survey not found",
        )
    return response


@router.delete("/{survey_id}", response_model=DeleteSurveyResponse)
async def delete_survey(
    survey_id: UUID,
    use_case: FromDishka[DeleteSurveyUseCase],
) -> DeleteSurveyResponse:
    """Delete a survey together with its questions, options and responses."""
    try:
        return await use_case.execute(DeleteSurveyRequest(survey_id=str(survey_id)))
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{survey_id}/questions", response_model=GetSurveyQuestionsResponse)
async def get_survey_questions(
    survey_id: UUID,
    use_case: FromDishka[GetSurveyQuestionsUseCase],
) -> GetSurveyQuestionsResponse:
    """List a survey's questions with their options."""
    response = await use_case.execute(
        GetSurveyQuestionsRequest(survey_id=str(survey_id))
    )
    if not response:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Survey not found",
        )
    return response


@router.post(
    "/{survey_id}/responses",
    response_model=SubmitResponseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_response(
    survey_id: UUID,
    body: SubmitResponseBody,
    use_case: FromDishka[SubmitResponseUseCase],
    alumni_id: str = Depends(require_alumni_id),
) -> SubmitResponseResponse:
    """Submit the caller's answers to a survey.

    Raises:
        HTTPException: 404 if the survey or the caller is unknown, 409 if
            the caller already responded, 400 if an answer does not fit the survey
    """
    with logfire.span("api.submit_response", survey_id=str(survey_id)):
        try:
            return await use_case.execute(
                SubmitResponseRequest(
                    survey_id=str(survey_id),
                    alumni_id=alumni_id,
                    responses=body.responses,
                )
            )
        except DomainError as e:
            raise to_http_exception(e)


@router.get("/{survey_id}/responses", response_model=GetSurveyResponsesResponse)
async def get_survey_responses(
    survey_id: UUID,
    use_case: FromDishka[GetSurveyResponsesUseCase],
) -> GetSurveyResponsesResponse:
    """Responses organized by section and question."""
    try:
        return await use_case.execute(
            GetSurveyResponsesRequest(survey_id=str(survey_id))
        )
    except DomainError as e:
        raise to_http_exception(e)
