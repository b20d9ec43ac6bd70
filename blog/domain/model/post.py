"""Post aggregate root.

Only the fields the comment pipeline relies on are modelled here: the
denormalized ``comment_count`` must equal the live number of comments on
the post once all moderation operations have settled.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Blog post."""

    id: PostId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(default="", max_length=50000)
    author_id: UserId
    status: PostStatus = PostStatus.PUBLISHED
    comment_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
