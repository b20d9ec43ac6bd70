"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.error import AuthorizationError
from blog.domain.service import CommentService, ModerationService
from blog.domain.value import Actor, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    actor: Actor  # Must be the author or an admin


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str
    comment_id: str
    post_id: str


class DeleteCommentUseCase:
    """Use case for deleting a single comment."""

    def __init__(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            moderation_service: Moderation domain service
        """
        self.comment_service = comment_service
        self.moderation_service = moderation_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Deletion is allowed from any status and recounts the post's
        comments afterwards.

        Raises:
            NotFoundError: If the comment does not exist
            AuthorizationError: If the actor is neither author nor admin
        """
        comment_id = CommentId(UUID(request.comment_id))
        actor = request.actor

        comment = await self.comment_service.require_comment(comment_id)
        if not (comment.is_owned_by(actor.user_id) or actor.is_admin):
            raise AuthorizationError(
                "delete", "comment", request.comment_id, str(actor.user_id)
            )

        await self.moderation_service.delete_comment(comment)

        return DeleteCommentResponse(
            message="Comment deleted successfully",
            comment_id=request.comment_id,
            post_id=str(comment.post_id),
        )
