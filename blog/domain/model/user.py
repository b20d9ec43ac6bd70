"""User entity.

Users are managed by the authentication collaborator; the blog only reads
them to resolve roles and account age.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId, UserRole, Username


class User(DomainModel):
    """Registered user."""

    id: UserId
    username: Username
    email: Optional[str] = None
    role: UserRole = UserRole.USER
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
