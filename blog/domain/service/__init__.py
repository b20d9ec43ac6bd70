"""Domain services."""

from .base import Service
from .comment_service import CommentPage, CommentService, CommentThread
from .jwt_service import JWTService
from .moderation_service import BulkModerationResult, ModerationService
from .post_service import PostService
from .spam_service import SpamService
from .statistics_service import (
    DashboardStatistics,
    GrowthCounts,
    SiteStatistics,
    StatisticsService,
)

__all__ = [
    "BulkModerationResult",
    "CommentPage",
    "CommentService",
    "CommentThread",
    "DashboardStatistics",
    "GrowthCounts",
    "JWTService",
    "ModerationService",
    "PostService",
    "Service",
    "SiteStatistics",
    "SpamService",
    "StatisticsService",
]
