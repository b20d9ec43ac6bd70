"""In-memory comment repository for testing."""

from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, CommentSort, CommentStatus, PostId


def _sort_comments(comments: list[Comment], sort: CommentSort) -> None:
    """Sort in place the way the SQL repository orders rows."""
    if sort == CommentSort.OLDEST:
        comments.sort(key=lambda c: c.created_at)
    elif sort == CommentSort.POPULAR:
        comments.sort(key=lambda c: (c.like_count, c.created_at), reverse=True)
    else:
        comments.sort(key=lambda c: c.created_at, reverse=True)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Iterable[CommentId]) -> list[Comment]:
        """Find every existing comment among the given IDs."""
        return [self._comments[cid] for cid in comment_ids if cid in self._comments]

    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        top_level_only: bool = True,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find a page of comments for a post."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        if status is not None:
            comments = [c for c in comments if c.status == status]
        if top_level_only:
            comments = [c for c in comments if c.is_top_level]

        _sort_comments(comments, sort)

        # Paginate
        return comments[offset : offset + limit]

    async def find_replies(
        self,
        parent_id: CommentId,
        status: Optional[CommentStatus] = None,
        limit: int = 5,
    ) -> list[Comment]:
        """Find direct replies, oldest first."""
        replies = [c for c in self._comments.values() if c.parent_id == parent_id]
        if status is not None:
            replies = [c for c in replies if c.status == status]
        replies.sort(key=lambda c: c.created_at)
        return replies[:limit]

    async def find_all(
        self,
        status: Optional[CommentStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments across all posts, newest first."""
        comments = list(self._comments.values())
        if status is not None:
            comments = [c for c in comments if c.status == status]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        top_level_only: bool = False,
    ) -> int:
        """Count comments for a post."""
        return sum(
            1
            for c in self._comments.values()
            if c.post_id == post_id
            and (status is None or c.status == status)
            and (not top_level_only or c.is_top_level)
        )

    async def count_replies(
        self, parent_id: CommentId, status: Optional[CommentStatus] = None
    ) -> int:
        """Count direct replies to a comment."""
        return sum(
            1
            for c in self._comments.values()
            if c.parent_id == parent_id and (status is None or c.status == status)
        )

    async def count(
        self,
        status: Optional[CommentStatus] = None,
        since: Optional[datetime] = None,
    ) -> int:
        """Count comments across all posts."""
        return sum(
            1
            for c in self._comments.values()
            if (status is None or c.status == status)
            and (since is None or c.created_at >= since)
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_status(
        self, comment_ids: Iterable[CommentId], status: CommentStatus
    ) -> int:
        """Set the status of every listed comment."""
        count = 0
        for comment_id in set(comment_ids):
            comment = self._comments.get(comment_id)
            if comment:
                self._comments[comment_id] = comment.with_status(status)
                count += 1
        return count

    async def delete_many(self, comment_ids: Iterable[CommentId]) -> int:
        """Delete the listed comments."""
        count = 0
        for comment_id in set(comment_ids):
            if self._comments.pop(comment_id, None) is not None:
                count += 1
        return count
