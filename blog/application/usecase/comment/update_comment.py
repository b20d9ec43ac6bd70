"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.error import AuthorizationError
from blog.domain.service import CommentService
from blog.domain.value import Actor, CommentId

from .schemas import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    actor: Actor  # Must be the author or an admin
    content: str


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        The previous content is appended to the comment's edit history.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            AuthorizationError: If the actor is neither author nor admin
            ValidationError: If the new content is blank or too long
        """
        comment_id = CommentId(UUID(request.comment_id))
        actor = request.actor

        comment = await self.comment_service.require_comment(comment_id)
        if not (comment.is_owned_by(actor.user_id) or actor.is_admin):
            raise AuthorizationError(
                "edit", "comment", request.comment_id, str(actor.user_id)
            )

        updated = await self.comment_service.update_content(
            comment_id, request.content
        )
        return CommentItem.from_comment(updated)
