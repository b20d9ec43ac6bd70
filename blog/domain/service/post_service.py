"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.model.post import Post
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import PostId, PostStatus, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (source of truth for counts)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        status: PostStatus = PostStatus.PUBLISHED,
    ) -> Post:
        """Create a post with an empty comment count.

        Args:
            author_id: Author user ID
            title: Post title
            content: Post body
            status: Publication status

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                status=status,
                comment_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Add one to a post's comment count.

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.increment_comment_count", post_id=str(post_id)):
            await self.post_repository.increment_comment_count(post_id, 1)
            logfire.info("Comment count incremented", post_id=str(post_id))

    async def recount_comments(self, post_id: PostId) -> int:
        """Recompute a post's comment count from the live comments.

        Overwrites rather than adjusts the stored value, so repeating it or
        running it after a partial failure always converges.

        Args:
            post_id: Post ID

        Returns:
            The live count that was stored
        """
        with logfire.span("post_service.recount_comments", post_id=str(post_id)):
            count = await self.comment_repository.count_by_post(post_id)
            await self.post_repository.set_comment_count(post_id, count)
            logfire.info(
                "Comment count reconciled", post_id=str(post_id), comment_count=count
            )
            return count
