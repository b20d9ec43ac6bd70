"""Repository interfaces for the blog domain.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
    "UserRepository",
]
