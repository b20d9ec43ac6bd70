"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from blog.domain.model.user import User
from blog.domain.value import UserId


class UserRepository(ABC):
    """Read access to users owned by the authentication collaborator."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 5) -> List[User]:
        """Find the most recently created users, newest first."""
        pass

    @abstractmethod
    async def count(self, since: Optional[datetime] = None) -> int:
        """Count users, optionally only those created since ``since``."""
        pass
