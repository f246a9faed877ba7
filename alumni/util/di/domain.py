"""Domain layer DI providers."""

from dishka import Scope, provide

from alumni.domain.repository import (
    AlumnusRepository,
    FeedbackRepository,
    SurveyRepository,
    TagRepository,
    ThreadRepository,
    ThreadVoteRepository,
)
from alumni.domain.service import (
    FeedbackService,
    SurveyService,
    TagService,
    ThreadService,
    VoteService,
)
from alumni.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_thread_service(self, thread_repository: ThreadRepository) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(thread_repository=thread_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: ThreadVoteRepository,
        thread_service: ThreadService,
        alumnus_repository: AlumnusRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            thread_service=thread_service,
            alumnus_repository=alumnus_repository,
        )

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_survey_service(
        self,
        survey_repository: SurveyRepository,
        feedback_repository: FeedbackRepository,
    ) -> SurveyService:
        """Provide survey domain service."""
        return SurveyService(
            survey_repository=survey_repository,
            feedback_repository=feedback_repository,
        )

    @provide
    def get_feedback_service(
        self,
        feedback_repository: FeedbackRepository,
        alumnus_repository: AlumnusRepository,
        survey_service: SurveyService,
    ) -> FeedbackService:
        """Provide feedback domain service."""
        return FeedbackService(
            feedback_repository=feedback_repository,
            alumnus_repository=alumnus_repository,
            survey_service=survey_service,
        )
