"""Moderation domain service.

Coordinates operations that touch both comments and their post's
``comment_count``. Counts are kept eventually consistent: creation
increments the counter, while every delete path recomputes it from a live
count. Counter statements run isolated from the comment write (a savepoint
on PostgreSQL), so a counter step that fails is reported as a
``ConsistencyWarning`` and never undoes the comment change.
"""

import warnings
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import logfire

from blog.config import ModerationSettings
from blog.domain.error import ConsistencyWarning, NotFoundError, ValidationError
from blog.domain.model.comment import Comment, clean_content
from blog.domain.repository import CommentRepository, UserRepository
from blog.domain.value import (
    CommentId,
    CommentStatus,
    ModerationAction,
    PostId,
    UserId,
)

from .base import Service
from .post_service import PostService
from .spam_service import SpamService


@dataclass
class BulkModerationResult:
    """Outcome of a bulk moderation action."""

    action: ModerationAction
    count: int
    reconciled_posts: dict[PostId, int] = field(default_factory=dict)


class ModerationService(Service):
    """Domain service for comment submission, status changes and deletion."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        post_service: PostService,
        spam_service: SpamService,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            user_repository: User repository (account age for scoring)
            post_service: Post service (existence checks and counters)
            spam_service: Spam heuristic
            moderation_settings: Moderation policy
        """
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.post_service = post_service
        self.spam_service = spam_service
        self.settings = moderation_settings

    async def submit_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Score, classify and store a new comment, then bump the post counter.

        Args:
            post_id: Post being commented on
            author_id: Submitting user
            content: Comment text
            parent_id: Comment being replied to (None for top-level)

        Returns:
            The stored comment, ``pending`` or ``approved``

        Raises:
            ValidationError: If the content is blank or too long
            NotFoundError: If the post or the parent comment does not exist
        """
        with logfire.span(
            "moderation_service.submit_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = clean_content(content)

            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", str(post_id))

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))

            author = await self.user_repository.find_by_id(author_id)
            spam_score = self.spam_service.score(
                text, author.created_at if author else None
            )
            status = Comment.initial_status(spam_score, self.settings.spam_threshold)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=text,
                parent_id=parent_id,
                status=status,
                spam_score=spam_score,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment submitted",
                comment_id=str(saved.id),
                post_id=str(post_id),
                status=status.value,
                spam_score=spam_score,
            )

            try:
                await self.post_service.increment_comment_count(post_id)
            except Exception as e:
                self._warn_inconsistent(post_id, "increment", e)

            return saved

    async def set_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Comment:
        """Move a single comment to ``status`` (admin only).

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "moderation_service.set_status",
            comment_id=str(comment_id),
            status=status.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))

            saved = await self.comment_repository.save(comment.with_status(status))
            logfire.info(
                "Comment status updated",
                comment_id=str(comment_id),
                previous=comment.status.value,
                status=status.value,
            )
            return saved

    async def delete_comment(self, comment: Comment) -> None:
        """Delete one comment and recount its post.

        Args:
            comment: The comment to delete (already authorized by the caller)
        """
        with logfire.span(
            "moderation_service.delete_comment",
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
        ):
            await self.comment_repository.delete_many([comment.id])
            logfire.info("Comment deleted", comment_id=str(comment.id))
            await self.reconcile_post(comment.post_id)

    async def bulk_moderate(
        self, comment_ids: Iterable[CommentId], action: ModerationAction
    ) -> BulkModerationResult:
        """Apply ``action`` to every listed comment.

        Status actions are a single bulk update and leave counts alone.
        Delete resolves the affected posts first, deletes, then recounts
        each post from its live comments.

        Args:
            comment_ids: Target comment IDs
            action: approve, reject, spam or delete

        Returns:
            Number of comments affected and, for delete, the new post counts

        Raises:
            ValidationError: If no comment IDs are given
        """
        ids = list(dict.fromkeys(comment_ids))
        if not ids:
            raise ValidationError("At least one comment ID is required")

        with logfire.span(
            "moderation_service.bulk_moderate",
            action=action.value,
            requested=len(ids),
        ):
            target_status = action.target_status
            if target_status is not None:
                count = await self.comment_repository.update_status(ids, target_status)
                logfire.info(
                    "Bulk status update applied",
                    action=action.value,
                    count=count,
                )
                return BulkModerationResult(action=action, count=count)

            targets = await self.comment_repository.find_by_ids(ids)
            post_ids = list(dict.fromkeys(c.post_id for c in targets))

            count = await self.comment_repository.delete_many(ids)
            logfire.info(
                "Bulk delete applied", count=count, affected_posts=len(post_ids)
            )

            reconciled = {}
            for post_id in post_ids:
                live = await self.reconcile_post(post_id)
                if live is not None:
                    reconciled[post_id] = live

            return BulkModerationResult(
                action=action, count=count, reconciled_posts=reconciled
            )

    async def reconcile_post(self, post_id: PostId) -> int | None:
        """Recount a post's comments, downgrading failures to a warning.

        Returns:
            The new count, or None if the recount failed
        """
        try:
            return await self.post_service.recount_comments(post_id)
        except Exception as e:
            self._warn_inconsistent(post_id, "recount", e)
            return None

    @staticmethod
    def _warn_inconsistent(post_id: PostId, step: str, error: Exception) -> None:
        logfire.warn(
            "Comment count reconciliation failed",
            post_id=str(post_id),
            step=step,
            error=str(error),
        )
        warnings.warn(
            ConsistencyWarning(
                f"Comment count for post {post_id} may be stale after failed {step}: "
                f"{error}"
            ),
            stacklevel=3,
        )
