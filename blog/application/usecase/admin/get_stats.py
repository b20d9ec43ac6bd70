"""Admin site statistics use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import GrowthCounts, StatisticsService
from blog.domain.value import Actor

from .common import require_admin


class GetStatsRequest(BaseModel):
    """Site statistics request."""

    actor: Actor


class GrowthItem(BaseModel):
    """Total and recent creations for one kind of record."""

    total: int
    new_this_month: int
    new_this_week: int

    @classmethod
    def from_counts(cls, counts: GrowthCounts) -> "GrowthItem":
        return cls(
            total=counts.total,
            new_this_month=counts.new_this_month,
            new_this_week=counts.new_this_week,
        )


class CommentGrowthItem(GrowthItem):
    """Comment growth plus the moderation backlog."""

    pending: int
    spam: int


class GetStatsResponse(BaseModel):
    """Site statistics response."""

    users: GrowthItem
    posts: GrowthItem
    comments: CommentGrowthItem


class GetStatsUseCase(BaseUseCase):
    """Use case for site growth statistics."""

    def __init__(self, statistics_service: StatisticsService) -> None:
        self.statistics_service = statistics_service

    async def execute(self, request: GetStatsRequest) -> GetStatsResponse:
        """Collect site statistics.

        Raises:
            AuthorizationError: If the actor is not an admin
        """
        require_admin(request.actor, "view", "stats", "admin")

        stats = await self.statistics_service.get_site_stats()
        return GetStatsResponse(
            users=GrowthItem.from_counts(stats.users),
            posts=GrowthItem.from_counts(stats.posts),
            comments=CommentGrowthItem(
                total=stats.comments.total,
                new_this_month=stats.comments.new_this_month,
                new_this_week=stats.comments.new_this_week,
                pending=stats.pending_comments,
                spam=stats.spam_comments,
            ),
        )
