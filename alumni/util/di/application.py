"""Application layer DI providers."""

from dishka import Scope, provide

from alumni.application.usecase.survey import (
    CreateSurveyUseCase,
    DeleteSurveyUseCase,
    GetSurveyQuestionsUseCase,
    GetSurveyResponsesUseCase,
    GetSurveyUseCase,
    ListSurveysUseCase,
    SubmitResponseUseCase,
)
from alumni.application.usecase.tag import ListTagsUseCase
from alumni.application.usecase.thread import GetThreadUseCase
from alumni.application.usecase.vote import CastVoteUseCase, GetVoteTallyUseCase
from alumni.domain.service import (
    FeedbackService,
    SurveyService,
    TagService,
    ThreadService,
    VoteService,
)
from alumni.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Thread and vote use cases
    @provide
    def get_thread_use_case(
        self, thread_service: ThreadService, vote_service: VoteService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service, vote_service=vote_service)

    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_vote_tally_use_case(self, vote_service: VoteService) -> GetVoteTallyUseCase:
        """Provide get vote tally use case."""
        return GetVoteTallyUseCase(vote_service=vote_service)

    # Tag use cases
    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    # Survey use cases
    @provide
    def get_create_survey_use_case(
        self, survey_service: SurveyService
    ) -> CreateSurveyUseCase:
        return CreateSurveyUseCase(survey_service=survey_service)

    @provide
    def get_delete_survey_use_case(
        self, survey_service: SurveyService
    ) -> DeleteSurveyUseCase:
        return DeleteSurveyUseCase(survey_service=survey_service)

    @provide
    def get_survey_use_case(self, survey_service: SurveyService) -> GetSurveyUseCase:
        return GetSurveyUseCase(survey_service=survey_service)

    @provide
    def get_list_surveys_use_case(
        self, survey_service: SurveyService
    ) -> ListSurveysUseCase:
        return ListSurveysUseCase(survey_service=survey_service)

    @provide
    def get_survey_questions_use_case(
        self, survey_service: SurveyService
    ) -> GetSurveyQuestionsUseCase:
        return GetSurveyQuestionsUseCase(survey_service=survey_service)

    @provide
    def get_submit_response_use_case(
        self, feedback_service: FeedbackService
    ) -> SubmitResponseUseCase:
        return SubmitResponseUseCase(feedback_service=feedback_service)

    @provide
    def get_survey_responses_use_case(
        self, feedback_service: FeedbackService
    ) -> GetSurveyResponsesUseCase:
        return GetSurveyResponsesUseCase(feedback_service=feedback_service)
