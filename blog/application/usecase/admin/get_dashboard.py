"""Admin dashboard use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.schemas import ModeratedCommentItem
from blog.domain.model import Post
from blog.domain.service import StatisticsService
from blog.domain.value import Actor, PostStatus

from .common import require_admin


class GetDashboardRequest(BaseModel):
    """Dashboard request."""

    actor: Actor


class DashboardStats(BaseModel):
    """Headline counts."""

    total_users: int
    total_posts: int
    total_comments: int
    pending_comments: int
    spam_comments: int
    new_comments_this_week: int


class PostSummaryItem(BaseModel):
    """Post summary for the dashboard lists."""

    post_id: str
    title: str
    status: PostStatus
    comment_count: int
    view_count: int
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostSummaryItem":
        return cls(
            post_id=str(post.id),
            title=post.title,
            status=post.status,
            comment_count=post.comment_count,
            view_count=post.view_count,
            created_at=post.created_at,
        )


class RecentUserItem(BaseModel):
    """Newly registered user."""

    user_id: str
    username: str
    email: str | None
    created_at: datetime


class GetDashboardResponse(BaseModel):
    """Dashboard response."""

    stats: DashboardStats
    recent_users: list[RecentUserItem]
    recent_posts: list[PostSummaryItem]
    recent_comments: list[ModeratedCommentItem]
    top_posts: list[PostSummaryItem]


class GetDashboardUseCase(BaseUseCase):
    """Use case for the admin dashboard."""

    def __init__(self, statistics_service: StatisticsService) -> None:
        self.statistics_service = statistics_service

    async def execute(self, request: GetDashboardRequest) -> GetDashboardResponse:
        """Collect dashboard data.

        Raises:
            AuthorizationError: If the actor is not an admin
        """
        require_admin(request.actor, "view", "dashboard", "admin")

        data = await self.statistics_service.get_dashboard()
        return GetDashboardResponse(
            stats=DashboardStats(
                total_users=data.total_users,
                total_posts=data.total_posts,
                total_comments=data.total_comments,
                pending_comments=data.pending_comments,
                spam_comments=data.spam_comments,
                new_comments_this_week=data.new_comments_this_week,
            ),
            recent_users=[
                RecentUserItem(
                    user_id=str(u.id),
                    username=str(u.username),
                    email=u.email,
                    created_at=u.created_at,
                )
                for u in data.recent_users
            ],
            recent_posts=[PostSummaryItem.from_post(p) for p in data.recent_posts],
            recent_comments=[
                ModeratedCommentItem.from_comment(c) for c in data.recent_comments
            ],
            top_posts=[PostSummaryItem.from_post(p) for p in data.top_posts],
        )
