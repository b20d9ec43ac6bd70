"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.admin import (
    BulkModerateUseCase,
    GetDashboardUseCase,
    GetStatsUseCase,
    ListCommentsUseCase,
    RecountPostUseCase,
    UpdateCommentStatusUseCase,
)
from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ReactToCommentUseCase,
    ReportCommentUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.post import CreatePostUseCase, GetPostUseCase
from blog.domain.service import (
    CommentService,
    ModerationService,
    PostService,
    StatisticsService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, moderation_service: ModerationService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(moderation_service=moderation_service)

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, moderation_service=moderation_service
        )

    @provide
    def get_react_to_comment_use_case(
        self, comment_service: CommentService
    ) -> ReactToCommentUseCase:
        """Provide like/dislike use case."""
        return ReactToCommentUseCase(comment_service=comment_service)

    @provide
    def get_report_comment_use_case(
        self, comment_service: CommentService
    ) -> ReportCommentUseCase:
        """Provide report comment use case."""
        return ReportCommentUseCase(comment_service=comment_service)

    # Admin use cases
    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide admin comment listing use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_status_use_case(
        self, moderation_service: ModerationService
    ) -> UpdateCommentStatusUseCase:
        """Provide single comment moderation use case."""
        return UpdateCommentStatusUseCase(moderation_service=moderation_service)

    @provide
    def get_bulk_moderate_use_case(
        self, moderation_service: ModerationService
    ) -> BulkModerateUseCase:
        """Provide bulk moderation use case."""
        return BulkModerateUseCase(moderation_service=moderation_service)

    @provide
    def get_recount_post_use_case(self, post_service: PostService) -> RecountPostUseCase:
        """Provide comment recount use case."""
        return RecountPostUseCase(post_service=post_service)

    @provide
    def get_get_dashboard_use_case(
        self, statistics_service: StatisticsService
    ) -> GetDashboardUseCase:
        """Provide admin dashboard use case."""
        return GetDashboardUseCase(statistics_service=statistics_service)

    @provide
    def get_get_stats_use_case(
        self, statistics_service: StatisticsService
    ) -> GetStatsUseCase:
        """Provide admin site statistics use case."""
        return GetStatsUseCase(statistics_service=statistics_service)
