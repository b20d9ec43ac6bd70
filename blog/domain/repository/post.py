"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_by_comments(self, limit: int = 5) -> List[Post]:
        """Find the posts with the highest comment counts."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 5) -> List[Post]:
        """Find the most recently created posts, newest first."""
        pass

    @abstractmethod
    async def count(self, since: Optional[datetime] = None) -> int:
        """Count posts, optionally only those created since ``since``."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId, delta: int = 1) -> None:
        """Atomically add ``delta`` to the post's comment count (floor 0).

        Args:
            post_id: The post ID
            delta: Amount to add (negative to decrement)
        """
        pass

    @abstractmethod
    async def set_comment_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the comment count with a freshly computed value.

        Args:
            post_id: The post ID
            count: Live comment count
        """
        pass
