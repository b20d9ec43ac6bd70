"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def find_recent(self, limit: int = 5) -> List[User]:
        """Find the most recently created users."""
        stmt = (
            select(users_table).order_by(desc(users_table.c.created_at)).limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def count(self, since: Optional[datetime] = None) -> int:
        """Count users."""
        stmt = select(func.count()).select_from(users_table)
        if since is not None:
            stmt = stmt.where(users_table.c.created_at >= since)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
