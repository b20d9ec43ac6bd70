"""Admin bulk moderation use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import ModerationService
from blog.domain.value import Actor, CommentId, ModerationAction

from .common import require_admin


class BulkModerateRequest(BaseModel):
    """Apply one action to many comments."""

    actor: Actor
    comment_ids: list[str]  # UUID strings
    action: ModerationAction


class BulkModerateResponse(BaseModel):
    """Bulk moderation outcome."""

    message: str
    action: ModerationAction
    count: int
    comment_counts: dict[str, int]  # post ID -> recounted comments (delete only)


class BulkModerateUseCase(BaseUseCase):
    """Use case for approving, rejecting, marking spam or deleting in bulk."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: BulkModerateRequest) -> BulkModerateResponse:
        """Apply the action.

        Raises:
            AuthorizationError: If the actor is not an admin
            ValidationError: If no comment IDs are given
            ValueError: If an ID is not a valid UUID
        """
        require_admin(request.actor, request.action.value, "comments", "bulk")

        result = await self.moderation_service.bulk_moderate(
            [CommentId(UUID(cid)) for cid in request.comment_ids], request.action
        )
        return BulkModerateResponse(
            message=f"Bulk {request.action.value} applied to {result.count} comments",
            action=result.action,
            count=result.count,
            comment_counts={
                str(post_id): count
                for post_id, count in result.reconciled_posts.items()
            },
        )
