"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.error import NotFoundError
from blog.domain.service import PostService
from blog.domain.value import PostId

from .create_post import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase:
    """Use case for fetching one post with its comment count."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Fetch the post.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(UUID(request.post_id)))
        if post is None:
            raise NotFoundError("Post", request.post_id)
        return PostItem.from_post(post)
