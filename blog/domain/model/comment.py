"""Comment entity.

Comments belong to a post and may reply to another comment through
``parent_id``. The tree is stored flat; listings materialize a single
level of replies under each top-level comment.

The moderation lifecycle lives on the entity as pure transitions that
return a new instance:

    created --(score > threshold)--> pending
    created --(otherwise)----------> approved
    any     --(Nth distinct report)-> pending, spam_score += penalty
    any     --(admin)--------------> pending | approved | rejected | spam

Deletion is handled by the moderation service since it also touches the
parent post's counter.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from blog.domain.error import DuplicateReportError, ValidationError
from blog.domain.model.common import DomainModel
from blog.domain.value import (
    CommentId,
    CommentStatus,
    PostId,
    ReactionType,
    ReportReason,
    UserId,
)
from blog.domain.value.common import ValueObject

CONTENT_MAX_LENGTH = 1000
MAX_SPAM_SCORE = 100


def clean_content(content: str | None) -> str:
    """Strip surrounding whitespace and enforce the 1-1000 character bound.

    Raises:
        ValidationError: If the content is missing, blank or too long
    """
    text = (content or "").strip()
    if not text:
        raise ValidationError("Comment content is required")
    if len(text) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Comment content must be at most {CONTENT_MAX_LENGTH} characters"
        )
    return text


class EditRecord(ValueObject):
    """Snapshot of a comment's content before an edit."""

    content: str
    edited_at: datetime


class Flag(ValueObject):
    """A user's report against a comment."""

    reason: ReportReason
    reported_by: UserId
    reported_at: datetime


class Comment(DomainModel):
    """Comment on a post, or a reply to another comment."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    status: CommentStatus = CommentStatus.PENDING
    is_edited: bool = False
    edit_history: tuple[EditRecord, ...] = ()
    spam_score: int = Field(default=0, ge=0, le=MAX_SPAM_SCORE)
    flags: tuple[Flag, ...] = ()
    likes: frozenset[UserId] = frozenset()
    dislikes: frozenset[UserId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @staticmethod
    def initial_status(spam_score: int, threshold: int) -> CommentStatus:
        """Status assigned on creation; the threshold itself still passes."""
        if spam_score > threshold:
            return CommentStatus.PENDING
        return CommentStatus.APPROVED

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @property
    def dislike_count(self) -> int:
        return len(self.dislikes)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id

    def has_reported(self, user_id: UserId) -> bool:
        return any(flag.reported_by == user_id for flag in self.flags)

    def with_report(
        self,
        user_id: UserId,
        reason: ReportReason,
        threshold: int,
        penalty: int,
    ) -> "Comment":
        """Record a report and escalate once enough users have reported.

        Escalation applies whatever the current status is, so a rejected
        comment re-enters the moderation queue.

        Raises:
            DuplicateReportError: If ``user_id`` already reported this comment
        """
        if self.has_reported(user_id):
            raise DuplicateReportError(str(self.id), str(user_id))

        flags = (
            *self.flags,
            Flag(reason=reason, reported_by=user_id, reported_at=datetime.now()),
        )
        changes: dict = {"flags": flags}
        if len(flags) >= threshold:
            changes["status"] = CommentStatus.PENDING
            changes["spam_score"] = min(self.spam_score + penalty, MAX_SPAM_SCORE)
        return self._touched(**changes)

    def with_status(self, status: CommentStatus) -> "Comment":
        """Admin transition to any status."""
        return self._touched(status=status)

    def with_content(self, content: str) -> "Comment":
        """Replace the content, keeping the previous version in the history.

        Raises:
            ValidationError: If the new content is blank or too long
        """
        text = clean_content(content)
        now = datetime.now()
        return self._touched(
            content=text,
            is_edited=True,
            edit_history=(
                *self.edit_history,
                EditRecord(content=self.content, edited_at=now),
            ),
        )

    def toggle_reaction(self, user_id: UserId, reaction: ReactionType) -> "Comment":
        """Toggle a like or dislike for ``user_id``.

        Repeating the same reaction removes it; switching moves the user
        from one set to the other in a single update.
        """
        if reaction == ReactionType.LIKE:
            same, other = self.likes, self.dislikes
        else:
            same, other = self.dislikes, self.likes

        if user_id in same:
            same = same - {user_id}
        else:
            same = same | {user_id}
            other = other - {user_id}

        if reaction == ReactionType.LIKE:
            return self._touched(likes=same, dislikes=other)
        return self._touched(likes=other, dislikes=same)
