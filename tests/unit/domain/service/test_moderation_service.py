"""Unit tests for ModerationService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from blog.domain.error import ConsistencyWarning, NotFoundError, ValidationError
from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from blog.domain.service import ModerationService
from blog.domain.value import (
    CommentId,
    CommentStatus,
    ModerationAction,
    PostId,
)
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env, comment_count: int = 0):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    user = await user_repo.save(make_user())
    post = await post_repo.save(make_post(user.id, comment_count=comment_count))
    return user, post


class TestSubmitComment:
    """Tests for ModerationService.submit_comment."""

    @pytest.mark.asyncio
    async def test_clean_comment_is_approved_and_counted(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        post_repo = await unit_env.get(PostRepository)
        user, post = await _seed(unit_env)

        # Act
        comment = await service.submit_comment(
            post.id, user.id, "  Great write-up, thanks!  "
        )

        # Assert
        assert comment.status == CommentStatus.APPROVED
        assert comment.content == "Great write-up, thanks!"
        assert comment.spam_score == 0
        stored = await post_repo.find_by_id(post.id)
        assert stored.comment_count == 1

    @pytest.mark.asyncio
    async def test_spammy_comment_is_pending_but_still_counted(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        post_repo = await unit_env.get(PostRepository)
        user, post = await _seed(unit_env)
        content = "BUY CHEAP VIAGRA FREE CASH NOW www.example.com " * 2

        # Act
        comment = await service.submit_comment(post.id, user.id, content)

        # Assert
        assert comment.spam_score > 70
        assert comment.status == CommentStatus.PENDING
        stored = await post_repo.find_by_id(post.id)
        assert stored.comment_count == 1

    @pytest.mark.asyncio
    async def test_new_account_penalty_uses_author_age(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        user_repo = await unit_env.get(UserRepository)
        _, post = await _seed(unit_env)
        newcomer = await user_repo.save(
            make_user("newcomer", age=timedelta(hours=1))
        )

        # Act
        comment = await service.submit_comment(post.id, newcomer.id, "Hello there")

        # Assert
        assert comment.spam_score == 15
        assert comment.status == CommentStatus.APPROVED

    @pytest.mark.asyncio
    async def test_reply_to_existing_parent(self, unit_env):
        service = await unit_env.get(ModerationService)
        user, post = await _seed(unit_env)
        parent = await service.submit_comment(post.id, user.id, "Top level")

        reply = await service.submit_comment(
            post.id, user.id, "A reply", parent_id=parent.id
        )

        assert reply.parent_id == parent.id
        assert not reply.is_top_level

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        service = await unit_env.get(ModerationService)
        user, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await service.submit_comment(PostId(uuid4()), user.id, "Hello")

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        user, post = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.submit_comment(
                post.id, user.id, "Hello", parent_id=CommentId(uuid4())
            )
        assert await comment_repo.count_by_post(post.id) == 0

    @pytest.mark.asyncio
    async def test_blank_content_raises_validation_error(self, unit_env):
        service = await unit_env.get(ModerationService)
        user, post = await _seed(unit_env)

        with pytest.raises(ValidationError):
            await service.submit_comment(post.id, user.id, "    ")

    @pytest.mark.asyncio
    async def test_counter_failure_keeps_comment_and_warns(self, unit_env, monkeypatch):
        # Arrange
        service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        user, post = await _seed(unit_env)

        async def broken_increment(post_id):
            raise RuntimeError("counter store unavailable")

        monkeypatch.setattr(
            service.post_service, "increment_comment_count", broken_increment
        )

        # Act
        with pytest.warns(ConsistencyWarning):
            comment = await service.submit_comment(post.id, user.id, "Still saved")

        # Assert
        assert await comment_repo.find_by_id(comment.id) is not None


class TestBulkModerate:
    """Tests for ModerationService.bulk_moderate."""

    @pytest.mark.asyncio
    async def test_bulk_delete_recounts_each_post(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        user, p1 = await _seed(unit_env)
        p2 = await post_repo.save(make_post(user.id, title="Second"))

        p1_comments = [
            await service.submit_comment(p1.id, user.id, f"First post comment {i}")
            for i in range(3)
        ]
        p2_comments = [
            await service.submit_comment(p2.id, user.id, f"Second post comment {i}")
            for i in range(2)
        ]
        targets = [p1_comments[0].id, p1_comments[1].id, p2_comments[0].id]

        # Act
        result = await service.bulk_moderate(targets, ModerationAction.DELETE)

        # Assert
        assert result.count == 3
        assert result.reconciled_posts == {p1.id: 1, p2.id: 1}
        assert (await post_repo.find_by_id(p1.id)).comment_count == 1
        assert (await post_repo.find_by_id(p2.id)).comment_count == 1
        assert await comment_repo.find_by_ids(targets) == []

    @pytest.mark.asyncio
    async def test_bulk_delete_repairs_drifted_count(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        user, post = await _seed(unit_env, comment_count=42)
        keep = await comment_repo.save(make_comment(post.id, user.id))
        drop = await comment_repo.save(make_comment(post.id, user.id))

        # Act
        await service.bulk_moderate([drop.id], ModerationAction.DELETE)

        # Assert
        assert (await post_repo.find_by_id(post.id)).comment_count == 1
        assert await comment_repo.find_by_id(keep.id) is not None

    @pytest.mark.asyncio
    async def test_bulk_approve_leaves_counts_alone(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        user, post = await _seed(unit_env, comment_count=2)
        pending = [
            await comment_repo.save(
                make_comment(post.id, user.id, status=CommentStatus.PENDING)
            )
            for _ in range(2)
        ]

        # Act
        result = await service.bulk_moderate(
            [c.id for c in pending], ModerationAction.APPROVE
        )

        # Assert
        assert result.count == 2
        assert result.reconciled_posts == {}
        for c in pending:
            stored = await comment_repo.find_by_id(c.id)
            assert stored.status == CommentStatus.APPROVED
        assert (await post_repo.find_by_id(post.id)).comment_count == 2

    @pytest.mark.asyncio
    async def test_unknown_ids_are_skipped(self, unit_env):
        service = await unit_env.get(ModerationService)

        result = await service.bulk_moderate(
            [CommentId(uuid4())], ModerationAction.SPAM
        )

        assert result.count == 0

    @pytest.mark.asyncio
    async def test_empty_id_list_is_rejected(self, unit_env):
        service = await unit_env.get(ModerationService)

        with pytest.raises(ValidationError):
            await service.bulk_moderate([], ModerationAction.APPROVE)

    @pytest.mark.asyncio
    async def test_recount_failure_warns_and_skips_post(self, unit_env, monkeypatch):
        # Arrange
        service = await unit_env.get(ModerationService)
        user, post = await _seed(unit_env)
        comment = await service.submit_comment(post.id, user.id, "Doomed")

        async def broken_recount(post_id):
            raise RuntimeError("recount failed")

        monkeypatch.setattr(service.post_service, "recount_comments", broken_recount)

        # Act
        with pytest.warns(ConsistencyWarning):
            result = await service.bulk_moderate(
                [comment.id], ModerationAction.DELETE
            )

        # Assert
        assert result.count == 1
        assert result.reconciled_posts == {}


class TestSetStatusAndDelete:
    """Single-comment moderation."""

    @pytest.mark.asyncio
    async def test_set_status(self, unit_env):
        service = await unit_env.get(ModerationService)
        user, post = await _seed(unit_env)
        comment = await service.submit_comment(post.id, user.id, "Hello")

        updated = await service.set_status(comment.id, CommentStatus.REJECTED)

        assert updated.status == CommentStatus.REJECTED

    @pytest.mark.asyncio
    async def test_set_status_on_missing_comment(self, unit_env):
        service = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError):
            await service.set_status(CommentId(uuid4()), CommentStatus.APPROVED)

    @pytest.mark.asyncio
    async def test_delete_comment_recounts_post(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        post_repo = await unit_env.get(PostRepository)
        user, post = await _seed(unit_env)
        first = await service.submit_comment(post.id, user.id, "First")
        await service.submit_comment(post.id, user.id, "Second")

        # Act
        await service.delete_comment(first)

        # Assert
        assert (await post_repo.find_by_id(post.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_deleting_parent_orphans_replies(self, unit_env):
        # Arrange
        service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        user, post = await _seed(unit_env)
        parent = await service.submit_comment(post.id, user.id, "Parent")
        reply = await service.submit_comment(
            post.id, user.id, "Reply", parent_id=parent.id
        )

        # Act
        await service.delete_comment(parent)

        # Assert
        assert await comment_repo.find_by_id(reply.id) is not None
        assert (await post_repo.find_by_id(post.id)).comment_count == 1
        top_level = await comment_repo.find_by_post(post.id, top_level_only=True)
        assert top_level == []
