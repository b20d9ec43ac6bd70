"""Like / dislike use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, ReactionType, UserId


class ReactToCommentRequest(BaseModel):
    """Toggle a like or dislike."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    reaction: ReactionType


class ReactToCommentResponse(BaseModel):
    """Reaction state after the toggle."""

    comment_id: str
    liked: bool
    disliked: bool
    likes: int
    dislikes: int


class ReactToCommentUseCase:
    """Use case for liking or disliking a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ReactToCommentRequest) -> ReactToCommentResponse:
        """Toggle the reaction and return the new counts.

        Raises:
            NotFoundError: If the comment does not exist
        """
        user_id = UserId(UUID(request.user_id))
        comment = await self.comment_service.toggle_reaction(
            CommentId(UUID(request.comment_id)), user_id, request.reaction
        )
        return ReactToCommentResponse(
            comment_id=request.comment_id,
            liked=user_id in comment.likes,
            disliked=user_id in comment.dislikes,
            likes=comment.like_count,
            dislikes=comment.dislike_count,
        )
