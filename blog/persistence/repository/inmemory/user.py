"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def find_recent(self, limit: int = 5) -> list[User]:
        """Find the most recently created users."""
        users = sorted(self._users.values(), key=lambda u: u.created_at, reverse=True)
        return users[:limit]

    async def count(self, since: Optional[datetime] = None) -> int:
        """Count users."""
        return sum(
            1 for u in self._users.values() if since is None or u.created_at >= since
        )
