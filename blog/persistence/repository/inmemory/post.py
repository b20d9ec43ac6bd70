"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_top_by_comments(self, limit: int = 5) -> list[Post]:
        """Find the most commented posts."""
        posts = sorted(
            self._posts.values(),
            key=lambda p: (p.comment_count, p.created_at),
            reverse=True,
        )
        return posts[:limit]

    async def find_recent(self, limit: int = 5) -> list[Post]:
        """Find the most recently created posts."""
        posts = sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)
        return posts[:limit]

    async def count(self, since: Optional[datetime] = None) -> int:
        """Count posts."""
        return sum(
            1 for p in self._posts.values() if since is None or p.created_at >= since
        )

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def increment_comment_count(self, post_id: PostId, delta: int = 1) -> None:
        """Add ``delta`` to the comment count, never going below zero."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"comment_count": max(post.comment_count + delta, 0)}
            )

    async def set_comment_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the comment count."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(update={"comment_count": count})
