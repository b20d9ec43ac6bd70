"""Admin single comment status update."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.schemas import ModeratedCommentItem
from blog.domain.service import ModerationService
from blog.domain.value import Actor, CommentId, CommentStatus

from .common import require_admin


class UpdateCommentStatusRequest(BaseModel):
    """Set one comment's moderation status."""

    actor: Actor
    comment_id: str  # UUID string
    status: CommentStatus


class UpdateCommentStatusUseCase(BaseUseCase):
    """Use case for moving a single comment between moderation states."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: UpdateCommentStatusRequest) -> ModeratedCommentItem:
        """Apply the status.

        Raises:
            AuthorizationError: If the actor is not an admin
            NotFoundError: If the comment does not exist
        """
        require_admin(request.actor, "moderate", "comment", request.comment_id)

        comment = await self.moderation_service.set_status(
            CommentId(UUID(request.comment_id)), request.status
        )
        return ModeratedCommentItem.from_comment(comment)
