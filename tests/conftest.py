"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from blog.domain.model import Comment, Post, User
from blog.domain.value import (
    CommentId,
    CommentStatus,
    PostId,
    UserId,
    UserRole,
    Username,
)


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep spans local and off the console during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_user(
    username: str = "alice",
    role: UserRole = UserRole.USER,
    age: timedelta = timedelta(days=30),
) -> User:
    """Build a user whose account is ``age`` old."""
    created = datetime.now() - age
    return User(
        id=UserId(uuid4()),
        username=Username(root=username),
        role=role,
        created_at=created,
        updated_at=created,
    )


def make_post(author_id: UserId, title: str = "Test Post", comment_count: int = 0) -> Post:
    """Build a published post."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        content="Post body",
        author_id=author_id,
        comment_count=comment_count,
    )


def make_comment(
    post_id: PostId,
    author_id: UserId,
    content: str = "A perfectly ordinary comment",
    status: CommentStatus = CommentStatus.APPROVED,
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
    spam_score: int = 0,
) -> Comment:
    """Build a comment, approved by default."""
    created = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id,
        content=content,
        parent_id=parent_id,
        status=status,
        spam_score=spam_score,
        created_at=created,
        updated_at=created,
    )
