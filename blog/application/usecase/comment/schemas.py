"""Response models shared by the comment use cases."""

from datetime import datetime
from math import ceil

from pydantic import BaseModel

from blog.domain.model import Comment
from blog.domain.service import CommentThread
from blog.domain.value import CommentStatus, ReportReason


class CommentItem(BaseModel):
    """Comment as returned to API clients."""

    comment_id: str
    post_id: str
    author_id: str
    content: str
    parent_comment_id: str | None
    status: CommentStatus
    is_edited: bool
    likes: int
    dislikes: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_comment_id=str(comment.parent_id) if comment.parent_id else None,
            status=comment.status,
            is_edited=comment.is_edited,
            likes=comment.like_count,
            dislikes=comment.dislike_count,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentThreadItem(CommentItem):
    """Top-level comment with its reply preview."""

    replies: list[CommentItem]
    reply_count: int

    @classmethod
    def from_thread(cls, thread: CommentThread) -> "CommentThreadItem":
        base = CommentItem.from_comment(thread.comment)
        return cls(
            **base.model_dump(),
            replies=[CommentItem.from_comment(r) for r in thread.replies],
            reply_count=thread.reply_count,
        )


class FlagItem(BaseModel):
    """A report as seen by moderators."""

    reason: ReportReason
    reported_by: str
    reported_at: datetime


class EditItem(BaseModel):
    """A previous version of a comment."""

    content: str
    edited_at: datetime


class ModeratedCommentItem(CommentItem):
    """Comment with the moderation details only admins see."""

    spam_score: int
    flags: list[FlagItem]
    edit_history: list[EditItem]

    @classmethod
    def from_comment(cls, comment: Comment) -> "ModeratedCommentItem":
        base = CommentItem.from_comment(comment)
        return cls(
            **base.model_dump(),
            spam_score=comment.spam_score,
            flags=[
                FlagItem(
                    reason=f.reason,
                    reported_by=str(f.reported_by),
                    reported_at=f.reported_at,
                )
                for f in comment.flags
            ],
            edit_history=[
                EditItem(content=e.content, edited_at=e.edited_at)
                for e in comment.edit_history
            ],
        )


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items at ``limit`` per page."""
    return ceil(total / limit) if limit else 0
