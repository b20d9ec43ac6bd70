"""Admin explicit comment recount for a post."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.error import NotFoundError
from blog.domain.service import PostService
from blog.domain.value import Actor, PostId

from .common import require_admin


class RecountPostRequest(BaseModel):
    """Recompute one post's comment count."""

    actor: Actor
    post_id: str  # UUID string


class RecountPostResponse(BaseModel):
    """Stored count after reconciliation."""

    post_id: str
    previous_count: int
    comment_count: int


class RecountPostUseCase(BaseUseCase):
    """Use case for repairing a drifted ``comment_count``."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: RecountPostRequest) -> RecountPostResponse:
        """Recount from the live comments.

        Raises:
            AuthorizationError: If the actor is not an admin
            NotFoundError: If the post does not exist
        """
        require_admin(request.actor, "recount", "post", request.post_id)

        post_id = PostId(UUID(request.post_id))
        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        count = await self.post_service.recount_comments(post_id)
        return RecountPostResponse(
            post_id=request.post_id,
            previous_count=post.comment_count,
            comment_count=count,
        )
