"""Domain value objects for the blog."""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject, ValueObject
from blog.domain.value.identifiers import UserId


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    Only ``approved`` comments are visible in public listings.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SPAM = "spam"


class ModerationAction(str, Enum):
    """Bulk action an admin can apply to a set of comments."""

    APPROVE = "approve"
    REJECT = "reject"
    SPAM = "spam"
    DELETE = "delete"

    @property
    def target_status(self) -> CommentStatus | None:
        """Status this action moves comments to (None for delete)."""
        return _ACTION_STATUS.get(self)


_ACTION_STATUS = {
    ModerationAction.APPROVE: CommentStatus.APPROVED,
    ModerationAction.REJECT: CommentStatus.REJECTED,
    ModerationAction.SPAM: CommentStatus.SPAM,
}


class ReportReason(str, Enum):
    """Reason given when a user reports a comment."""

    INAPPROPRIATE = "inappropriate"
    SPAM = "spam"
    HARASSMENT = "harassment"
    OTHER = "other"


class ReactionType(str, Enum):
    """Like or dislike."""

    LIKE = "like"
    DISLIKE = "dislike"


class CommentSort(str, Enum):
    """Sort order for comment listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    POPULAR = "popular"  # like count DESC, then created_at DESC


class UserRole(str, Enum):
    """Role of an authenticated actor."""

    USER = "user"
    ADMIN = "admin"


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Username(RootValueObject[str]):
    """Public username.

    3-30 characters: letters, digits, underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits or underscores"
            )
        return v


class Actor(ValueObject):
    """Authenticated caller of an operation: who they are and their role."""

    user_id: UserId
    username: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
