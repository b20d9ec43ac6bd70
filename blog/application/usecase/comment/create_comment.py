"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import ModerationService
from blog.domain.value import CommentId, CommentStatus, PostId, UserId

from .schemas import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_comment_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    message: str
    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize create comment use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Score the content and pick the initial status
        2. Store the comment (post and parent must exist)
        3. Increment the post's comment count

        Args:
            request: Create comment request

        Returns:
            The stored comment; ``pending`` ones await moderation

        Raises:
            ValidationError: If the content is blank or too long
            NotFoundError: If the post or parent comment does not exist
            ValueError: If an ID is not a valid UUID
        """
        parent_id = (
            CommentId(UUID(request.parent_comment_id))
            if request.parent_comment_id
            else None
        )
        comment = await self.moderation_service.submit_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=parent_id,
        )

        if comment.status == CommentStatus.PENDING:
            message = "Comment submitted and awaiting moderation"
        else:
            message = "Comment posted successfully"

        return CreateCommentResponse(
            message=message, comment=CommentItem.from_comment(comment)
        )
