"""Admin comment listing and moderation queue."""

from pydantic import BaseModel, Field

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.schemas import ModeratedCommentItem, total_pages
from blog.domain.service import CommentService
from blog.domain.value import Actor, CommentStatus

from .common import require_admin


class ListCommentsRequest(BaseModel):
    """List comments across all posts."""

    actor: Actor
    status: CommentStatus | None = None  # None lists every status
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListCommentsResponse(BaseModel):
    """A page of comments with moderation details."""

    comments: list[ModeratedCommentItem]
    total: int
    total_pages: int
    current_page: int


class ListCommentsUseCase(BaseUseCase):
    """Use case backing both the admin comment list and the moderation queue."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """List comments newest first.

        Raises:
            AuthorizationError: If the actor is not an admin
        """
        require_admin(request.actor, "list", "comments", "*")

        comments, total = await self.comment_service.list_comments(
            status=request.status,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        return ListCommentsResponse(
            comments=[ModeratedCommentItem.from_comment(c) for c in comments],
            total=total,
            total_pages=total_pages(total, request.limit),
            current_page=request.page,
        )
