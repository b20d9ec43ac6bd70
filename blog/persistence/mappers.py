"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Comment, Post, User
from blog.domain.value import (
    CommentId,
    CommentStatus,
    PostId,
    PostStatus,
    UserId,
    UserRole,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        role=UserRole(row["role"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        status=PostStatus(row["status"]),
        comment_count=row["comment_count"],
        view_count=row["view_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump()
    data["status"] = post.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    ``edit_history`` and ``flags`` come back from JSONB as lists of dicts
    and are validated into their value objects by the model.
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        status=CommentStatus(row["status"]),
        is_edited=row["is_edited"],
        edit_history=row.get("edit_history") or [],
        spam_score=row["spam_score"],
        flags=row.get("flags") or [],
        likes=frozenset(UserId(_uuid(u)) for u in row.get("likes") or []),
        dislikes=frozenset(UserId(_uuid(u)) for u in row.get("dislikes") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "author_id": comment.author_id,
        "content": comment.content,
        "parent_id": comment.parent_id,
        "status": comment.status.value,
        "is_edited": comment.is_edited,
        # JSONB columns need JSON-safe values (ISO timestamps, string IDs)
        "edit_history": [r.model_dump(mode="json") for r in comment.edit_history],
        "spam_score": comment.spam_score,
        "flags": [f.model_dump(mode="json") for f in comment.flags],
        "likes": sorted(comment.likes),
        "dislikes": sorted(comment.dislikes),
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }
