"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.domain.service import CommentService
from blog.domain.value import CommentSort, CommentStatus, PostId

from .schemas import CommentThreadItem, total_pages


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort: CommentSort = CommentSort.NEWEST


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentThreadItem]
    total: int
    total_pages: int
    current_page: int


class GetCommentsUseCase:
    """Use case for the public comment listing of a post.

    Only approved comments and replies are returned.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Post ID plus paging and sort options

        Returns:
            A page of approved top-level comments with reply previews
        """
        page = await self.comment_service.get_threads_for_post(
            post_id=PostId(UUID(request.post_id)),
            status=CommentStatus.APPROVED,
            sort=request.sort,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentThreadItem.from_thread(t) for t in page.threads],
            total=page.total,
            total_pages=total_pages(page.total, request.limit),
            current_page=request.page,
        )
