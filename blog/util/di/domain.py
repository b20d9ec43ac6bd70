"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, ModerationSettings
from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from blog.domain.service import (
    CommentService,
    JWTService,
    ModerationService,
    PostService,
    SpamService,
    StatisticsService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_spam_service(self, moderation_settings: ModerationSettings) -> SpamService:
        """Provide spam scoring service."""
        return SpamService(moderation_settings=moderation_settings)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, comment_repository: CommentRepository
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        moderation_settings: ModerationSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            moderation_settings=moderation_settings,
        )

    @provide
    def get_moderation_service(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        post_service: PostService,
        spam_service: SpamService,
        moderation_settings: ModerationSettings,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            comment_repository=comment_repository,
            user_repository=user_repository,
            post_service=post_service,
            spam_service=spam_service,
            moderation_settings=moderation_settings,
        )

    @provide
    def get_statistics_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> StatisticsService:
        """Provide dashboard statistics service."""
        return StatisticsService(
            user_repository=user_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )
