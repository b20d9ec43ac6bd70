"""Comment domain service."""

from dataclasses import dataclass, field

import logfire

from blog.config import ModerationSettings
from blog.domain.error import NotFoundError
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import (
    CommentId,
    CommentSort,
    CommentStatus,
    PostId,
    ReactionType,
    ReportReason,
    UserId,
)

from .base import Service


@dataclass
class CommentThread:
    """A top-level comment with a preview of its replies.

    ``reply_count`` counts every matching reply, not just the previewed ones.
    """

    comment: Comment
    replies: list[Comment] = field(default_factory=list)
    reply_count: int = 0


@dataclass
class CommentPage:
    """One page of threads plus the total number of top-level comments."""

    threads: list[CommentThread]
    total: int


class CommentService(Service):
    """Domain service for comment reads and per-comment mutations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            moderation_settings: Report threshold, penalty and preview limits
        """
        self.comment_repository = comment_repository
        self.settings = moderation_settings

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def require_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or raise.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_threads_for_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = CommentStatus.APPROVED,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> CommentPage:
        """Get a page of top-level comments with reply previews.

        Replies are filtered by the same status as their parents and read
        oldest-first so a thread reads top to bottom.

        Args:
            post_id: Post ID
            status: Status filter for comments and replies (None for all)
            sort: Sort order for top-level comments
            limit: Page size
            offset: Number of top-level comments to skip

        Returns:
            Page of threads and the total top-level count
        """
        with logfire.span(
            "comment_service.get_threads_for_post",
            post_id=str(post_id),
            status=status.value if status else None,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_by_post(
                post_id=post_id,
                status=status,
                top_level_only=True,
                sort=sort,
                limit=limit,
                offset=offset,
            )
            total = await self.comment_repository.count_by_post(
                post_id, status=status, top_level_only=True
            )

            threads = []
            for comment in comments:
                replies = await self.comment_repository.find_replies(
                    comment.id,
                    status=status,
                    limit=self.settings.reply_preview_limit,
                )
                reply_count = await self.comment_repository.count_replies(
                    comment.id, status=status
                )
                threads.append(
                    CommentThread(
                        comment=comment, replies=replies, reply_count=reply_count
                    )
                )

            logfire.info(
                "Comment threads retrieved",
                post_id=str(post_id),
                count=len(threads),
                total=total,
            )
            return CommentPage(threads=threads, total=total)

    async def list_comments(
        self,
        status: CommentStatus | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """List comments across all posts, newest first.

        Args:
            status: Optional status filter
            limit: Page size
            offset: Number of comments to skip

        Returns:
            The page and the total number of matching comments
        """
        with logfire.span(
            "comment_service.list_comments",
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_all(
                status=status, limit=limit, offset=offset
            )
            total = await self.comment_repository.count(status=status)
            return comments, total

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace a comment's content, recording the previous version.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If the content is blank or too long
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content or ""),
        ):
            comment = await self.require_comment(comment_id)
            updated = await self.comment_repository.save(comment.with_content(content))
            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                edits=len(updated.edit_history),
            )
            return updated

    async def toggle_reaction(
        self, comment_id: CommentId, user_id: UserId, reaction: ReactionType
    ) -> Comment:
        """Toggle a like or dislike.

        Args:
            comment_id: Comment ID
            user_id: Reacting user
            reaction: Like or dislike

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.toggle_reaction",
            comment_id=str(comment_id),
            user_id=str(user_id),
            reaction=reaction.value,
        ):
            comment = await self.require_comment(comment_id)
            updated = await self.comment_repository.save(
                comment.toggle_reaction(user_id, reaction)
            )
            logfire.info(
                "Comment reaction toggled",
                comment_id=str(comment_id),
                likes=updated.like_count,
                dislikes=updated.dislike_count,
            )
            return updated

    async def report(
        self, comment_id: CommentId, user_id: UserId, reason: ReportReason
    ) -> Comment:
        """Report a comment, escalating it once enough users have reported.

        Args:
            comment_id: Comment ID
            user_id: Reporting user
            reason: Report reason

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            DuplicateReportError: If the user already reported this comment
        """
        with logfire.span(
            "comment_service.report",
            comment_id=str(comment_id),
            user_id=str(user_id),
            reason=reason.value,
        ):
            comment = await self.require_comment(comment_id)
            reported = comment.with_report(
                user_id,
                reason,
                threshold=self.settings.report_threshold,
                penalty=self.settings.report_penalty,
            )
            saved = await self.comment_repository.save(reported)

            if len(saved.flags) >= self.settings.report_threshold:
                logfire.warn(
                    "Comment escalated by reports",
                    comment_id=str(comment_id),
                    flags=len(saved.flags),
                    spam_score=saved.spam_score,
                )
            else:
                logfire.info(
                    "Comment reported",
                    comment_id=str(comment_id),
                    flags=len(saved.flags),
                )
            return saved
