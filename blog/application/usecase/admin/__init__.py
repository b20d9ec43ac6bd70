"""Admin use cases."""

from .bulk_moderate import BulkModerateRequest, BulkModerateResponse, BulkModerateUseCase
from .get_dashboard import GetDashboardRequest, GetDashboardResponse, GetDashboardUseCase
from .get_stats import GetStatsRequest, GetStatsResponse, GetStatsUseCase
from .list_comments import ListCommentsRequest, ListCommentsResponse, ListCommentsUseCase
from .recount_post import RecountPostRequest, RecountPostResponse, RecountPostUseCase
from .update_comment_status import (
    UpdateCommentStatusRequest,
    UpdateCommentStatusUseCase,
)

__all__ = [
    "BulkModerateRequest",
    "BulkModerateResponse",
    "BulkModerateUseCase",
    "GetDashboardRequest",
    "GetDashboardResponse",
    "GetDashboardUseCase",
    "GetStatsRequest",
    "GetStatsResponse",
    "GetStatsUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "RecountPostRequest",
    "RecountPostResponse",
    "RecountPostUseCase",
    "UpdateCommentStatusRequest",
    "UpdateCommentStatusUseCase",
]
