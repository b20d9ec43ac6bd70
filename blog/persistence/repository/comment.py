"""PostgreSQL implementation of Comment repository."""

from collections.abc import Iterable
from datetime import datetime
from typing import List, Optional

from sqlalchemy import Select, asc, delete, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, CommentSort, CommentStatus, PostId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table


def _order_by(stmt: Select, sort: CommentSort) -> Select:
    """Apply the listing sort order."""
    if sort == CommentSort.OLDEST:
        return stmt.order_by(asc(comments_table.c.created_at))
    if sort == CommentSort.POPULAR:
        return stmt.order_by(
            desc(func.cardinality(comments_table.c.likes)),
            desc(comments_table.c.created_at),
        )
    return stmt.order_by(desc(comments_table.c.created_at))


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_all(self, stmt: Select) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def _scalar_count(self, stmt: Select) -> int:
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Iterable[CommentId]) -> List[Comment]:
        """Find every existing comment among the given IDs."""
        ids = list(comment_ids)
        if not ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(ids))
        return await self._fetch_all(stmt)

    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        top_level_only: bool = True,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of comments for a post."""
        stmt = select(comments_table).where(comments_table.c.post_id == post_id)

        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)
        if top_level_only:
            stmt = stmt.where(comments_table.c.parent_id.is_(None))

        stmt = _order_by(stmt, sort).limit(limit).offset(offset)
        return await self._fetch_all(stmt)

    async def find_replies(
        self,
        parent_id: CommentId,
        status: Optional[CommentStatus] = None,
        limit: int = 5,
    ) -> List[Comment]:
        """Find direct replies, oldest first."""
        stmt = select(comments_table).where(comments_table.c.parent_id == parent_id)
        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)
        stmt = stmt.order_by(asc(comments_table.c.created_at)).limit(limit)
        return await self._fetch_all(stmt)

    async def find_all(
        self,
        status: Optional[CommentStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments across all posts, newest first."""
        stmt = select(comments_table)
        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)
        stmt = (
            stmt.order_by(desc(comments_table.c.created_at)).limit(limit).offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        top_level_only: bool = False,
    ) -> int:
        """Count comments for a post.

        Runs in a savepoint: a failure leaves the request's earlier writes
        intact.
        """
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)
        if top_level_only:
            stmt = stmt.where(comments_table.c.parent_id.is_(None))
        async with self.session.begin_nested():
            return await self._scalar_count(stmt)

    async def count_replies(
        self, parent_id: CommentId, status: Optional[CommentStatus] = None
    ) -> int:
        """Count direct replies to a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id == parent_id)
        )
        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)
        return await self._scalar_count(stmt)

    async def count(
        self,
        status: Optional[CommentStatus] = None,
        since: Optional[datetime] = None,
    ) -> int:
        """Count comments across all posts."""
        stmt = select(func.count()).select_from(comments_table)
        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)
        if since is not None:
            stmt = stmt.where(comments_table.c.created_at >= since)
        return await self._scalar_count(stmt)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        values = comment_to_dict(comment)
        stmt = insert(comments_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "post_id")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_status(
        self, comment_ids: Iterable[CommentId], status: CommentStatus
    ) -> int:
        """Set the status of every listed comment."""
        ids = list(comment_ids)
        if not ids:
            return 0
        stmt = (
            update(comments_table)
            .where(comments_table.c.id.in_(ids))
            .values(status=status.value, updated_at=datetime.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def delete_many(self, comment_ids: Iterable[CommentId]) -> int:
        """Hard-delete the listed comments."""
        ids = list(comment_ids)
        if not ids:
            return 0
        stmt = delete(comments_table).where(comments_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
