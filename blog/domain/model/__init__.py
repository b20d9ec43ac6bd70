"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment, EditRecord, Flag
from blog.domain.model.post import Post
from blog.domain.model.user import User

__all__ = [
    "Comment",
    "EditRecord",
    "Flag",
    "Post",
    "User",
]
