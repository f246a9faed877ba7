"""Survey use cases."""

from .create_survey import (
    CreateSurveyRequest,
    CreateSurveyResponse,
    CreateSurveyUseCase,
    OptionInput,
    QuestionInput,
    SectionInput,
)
from .delete_survey import DeleteSurveyRequest, DeleteSurveyResponse, DeleteSurveyUseCase
from .get_survey import (
    GetSurveyRequest,
    GetSurveyUseCase,
    OptionItem,
    QuestionItem,
    SectionItem,
    SurveyDetailResponse,
    SurveySummary,
)
from .get_survey_questions import (
    GetSurveyQuestionsRequest,
    GetSurveyQuestionsResponse,
    GetSurveyQuestionsUseCase,
)
from .get_survey_responses import (
    GetSurveyResponsesRequest,
    GetSurveyResponsesResponse,
    GetSurveyResponsesUseCase,
)
from .list_surveys import (
    ListSurveysRequest,
    ListSurveysResponse,
    ListSurveysUseCase,
    SurveyFilter,
)
from .submit_response import (
    AnswerInput,
    SubmitResponseRequest,
    SubmitResponseResponse,
    SubmitResponseUseCase,
)

__all__ = [
    "AnswerInput",
    "CreateSurveyRequest",
    "CreateSurveyResponse",
    "CreateSurveyUseCase",
    "DeleteSurveyRequest",
    "DeleteSurveyResponse",
    "DeleteSurveyUseCase",
    "GetSurveyQuestionsRequest",
    "GetSurveyQuestionsResponse",
    "GetSurveyQuestionsUseCase",
    "GetSurveyRequest",
    "GetSurveyResponsesRequest",
    "GetSurveyResponsesResponse",
    "GetSurveyResponsesUseCase",
    "GetSurveyUseCase",
    "ListSurveysRequest",
    "ListSurveysResponse",
    "ListSurveysUseCase",
    "OptionInput",
    "OptionItem",
    "QuestionInput",
    "QuestionItem",
    "SectionInput",
    "SectionItem",
    "SubmitResponseRequest",
    "SubmitResponseResponse",
    "SubmitResponseUseCase",
    "SurveyDetailResponse",
    "SurveyFilter",
    "SurveySummary",
]
