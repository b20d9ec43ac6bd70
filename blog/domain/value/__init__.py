"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CommentId, PostId, UserId
from blog.domain.value.types import (
    Actor,
    CommentSort,
    CommentStatus,
    ModerationAction,
    PostStatus,
    ReactionType,
    ReportReason,
    Username,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Actor",
    "CommentSort",
    "CommentStatus",
    "ModerationAction",
    "PostStatus",
    "ReactionType",
    "ReportReason",
    "Username",
    "UserRole",
]
