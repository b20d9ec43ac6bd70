"""Create post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from blog.domain.model import Post
from blog.domain.service import PostService
from blog.domain.value import PostStatus, UserId


class PostItem(BaseModel):
    """Post as returned by the API."""

    post_id: str
    title: str
    content: str
    author_id: str
    status: PostStatus
    comment_count: int
    view_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author_id=str(post.author_id),
            status=post.status,
            comment_count=post.comment_count,
            view_count=post.view_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # UUID string
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(default="", max_length=50000)
    status: PostStatus = PostStatus.PUBLISHED


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        post = await self.post_service.create_post(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            content=request.content,
            status=request.status,
        )
        return PostItem.from_post(post)
