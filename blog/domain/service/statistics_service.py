"""Admin dashboard statistics."""

from dataclasses import dataclass
from datetime import datetime, timedelta

import logfire

from blog.domain.model import Comment, Post, User
from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from blog.domain.value import CommentStatus

from .base import Service


def previous_month_start(now: datetime) -> datetime:
    """Midnight on the first day of the calendar month before ``now``."""
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 1:
        return start.replace(year=start.year - 1, month=12)
    return start.replace(month=start.month - 1)


@dataclass
class DashboardStatistics:
    """Aggregate counts and recent activity for the admin dashboard."""

    total_users: int
    total_posts: int
    total_comments: int
    pending_comments: int
    spam_comments: int
    new_comments_this_week: int
    recent_users: list[User]
    recent_posts: list[Post]
    recent_comments: list[Comment]
    top_posts: list[Post]


@dataclass
class GrowthCounts:
    """A total plus how many were created in each recent window."""

    total: int
    new_this_month: int
    new_this_week: int


@dataclass
class SiteStatistics:
    """Growth of users, posts and comments plus the moderation backlog."""

    users: GrowthCounts
    posts: GrowthCounts
    comments: GrowthCounts
    pending_comments: int
    spam_comments: int


class StatisticsService(Service):
    """Read-only aggregate queries over users, posts and comments."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def get_dashboard(self, recent_limit: int = 5) -> DashboardStatistics:
        """Collect dashboard statistics.

        The queries are independent reads. They run one after another
        because the repositories of a request share one database session.
        Top posts are ranked by comment count.

        Args:
            recent_limit: Number of recent items and top posts to include
        """
        with logfire.span("statistics_service.get_dashboard"):
            week_ago = datetime.now() - timedelta(days=7)

            stats = DashboardStatistics(
                total_users=await self.user_repository.count(),
                total_posts=await self.post_repository.count(),
                total_comments=await self.comment_repository.count(),
                pending_comments=await self.comment_repository.count(
                    status=CommentStatus.PENDING
                ),
                spam_comments=await self.comment_repository.count(
                    status=CommentStatus.SPAM
                ),
                new_comments_this_week=await self.comment_repository.count(
                    since=week_ago
                ),
                recent_users=await self.user_repository.find_recent(
                    limit=recent_limit
                ),
                recent_posts=await self.post_repository.find_recent(
                    limit=recent_limit
                ),
                recent_comments=await self.comment_repository.find_all(
                    limit=recent_limit
                ),
                top_posts=await self.post_repository.find_top_by_comments(
                    limit=recent_limit
                ),
            )
            logfire.info(
                "Dashboard statistics collected",
                total_comments=stats.total_comments,
                pending_comments=stats.pending_comments,
            )
            return stats

    async def get_site_stats(self, now: datetime | None = None) -> SiteStatistics:
        """Count users, posts and comments in total and per recent window.

        "This month" starts on the first day of the previous calendar month;
        "this week" is the last seven days.

        Args:
            now: Reference time for the windows
        """
        with logfire.span("statistics_service.get_site_stats"):
            current = now or datetime.now()
            month_start = previous_month_start(current)
            week_ago = current - timedelta(days=7)

            stats = SiteStatistics(
                users=GrowthCounts(
                    total=await self.user_repository.count(),
                    new_this_month=await self.user_repository.count(since=month_start),
                    new_this_week=await self.user_repository.count(since=week_ago),
                ),
                posts=GrowthCounts(
                    total=await self.post_repository.count(),
                    new_this_month=await self.post_repository.count(since=month_start),
                    new_this_week=await self.post_repository.count(since=week_ago),
                ),
                comments=GrowthCounts(
                    total=await self.comment_repository.count(),
                    new_this_month=await self.comment_repository.count(
                        since=month_start
                    ),
                    new_this_week=await self.comment_repository.count(since=week_ago),
                ),
                pending_comments=await self.comment_repository.count(
                    status=CommentStatus.PENDING
                ),
                spam_comments=await self.comment_repository.count(
                    status=CommentStatus.SPAM
                ),
            )
            logfire.info(
                "Site statistics collected",
                users=stats.users.total,
                posts=stats.posts.total,
                comments=stats.comments.total,
            )
            return stats
