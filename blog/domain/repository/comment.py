"""Comment repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, CommentSort, CommentStatus, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Iterable[CommentId]) -> List[Comment]:
        """Find every existing comment among ``comment_ids``.

        Unknown IDs are skipped silently.
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        top_level_only: bool = True,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of comments for a post.

        Args:
            post_id: The post ID
            status: Only return comments in this status (None for any)
            top_level_only: Skip replies
            sort: newest / oldest / popular (like count, ties newest first)
            limit: Page size
            offset: Number of comments to skip

        Returns:
            The requested page, possibly empty
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_id: CommentId,
        status: Optional[CommentStatus] = None,
        limit: int = 5,
    ) -> List[Comment]:
        """Find up to ``limit`` direct replies, oldest first.

        Args:
            parent_id: The parent comment ID
            status: Only return replies in this status (None for any)
            limit: Maximum number of replies

        Returns:
            Replies in chronological order
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        status: Optional[CommentStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments across all posts, newest first (admin listings)."""
        pass

    @abstractmethod
    async def count_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        top_level_only: bool = False,
    ) -> int:
        """Count live comments for a post.

        With no filters this is the source of truth for
        ``Post.comment_count``.
        """
        pass

    @abstractmethod
    async def count_replies(
        self, parent_id: CommentId, status: Optional[CommentStatus] = None
    ) -> int:
        """Count direct replies to a comment."""
        pass

    @abstractmethod
    async def count(
        self,
        status: Optional[CommentStatus] = None,
        since: Optional[datetime] = None,
    ) -> int:
        """Count comments across all posts."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_ids: Iterable[CommentId], status: CommentStatus
    ) -> int:
        """Set the status of every listed comment.

        Idempotent: re-applying the same status is harmless.

        Returns:
            Number of comments that exist among ``comment_ids``
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Iterable[CommentId]) -> int:
        """Hard-delete the listed comments.

        Callers must resolve the affected post IDs beforehand; they cannot
        be recovered afterwards.

        Returns:
            Number of comments deleted
        """
        pass
