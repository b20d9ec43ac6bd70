"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_top_by_comments(self, limit: int = 5) -> List[Post]:
        """Find the most commented posts."""
        stmt = (
            select(posts_table)
            .order_by(
                desc(posts_table.c.comment_count), desc(posts_table.c.created_at)
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_recent(self, limit: int = 5) -> List[Post]:
        """Find the most recently created posts."""
        stmt = (
            select(posts_table).order_by(desc(posts_table.c.created_at)).limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count(self, since: Optional[datetime] = None) -> int:
        """Count posts."""
        stmt = select(func.count()).select_from(posts_table)
        if since is not None:
            stmt = stmt.where(posts_table.c.created_at >= since)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        values = post_to_dict(post)
        stmt = insert(posts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[posts_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def increment_comment_count(self, post_id: PostId, delta: int = 1) -> None:
        """Atomically add ``delta`` to the comment count (floor 0).

        Runs in a savepoint: a failure rolls back only this statement and
        leaves the request transaction usable.
        """
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                comment_count=func.greatest(posts_table.c.comment_count + delta, 0)
            )
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def set_comment_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the comment count inside a savepoint."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(comment_count=count)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
