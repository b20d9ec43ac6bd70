"""Unit tests for the admin use cases."""

from uuid import uuid4

import pytest

from blog.application.usecase.admin import (
    BulkModerateRequest,
    BulkModerateUseCase,
    GetDashboardRequest,
    GetDashboardUseCase,
    GetStatsRequest,
    GetStatsUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    RecountPostRequest,
    RecountPostUseCase,
    UpdateCommentStatusRequest,
    UpdateCommentStatusUseCase,
)
from blog.domain.error import AuthorizationError, NotFoundError
from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from blog.domain.value import (
    Actor,
    CommentStatus,
    ModerationAction,
    UserId,
    UserRole,
)
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN = Actor(user_id=UserId(uuid4()), username="admin", role=UserRole.ADMIN)
READER = Actor(user_id=UserId(uuid4()), username="reader", role=UserRole.USER)


async def _seed(unit_env, comment_count: int = 0):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    author = await user_repo.save(make_user("author"))
    post = await post_repo.save(make_post(author.id, comment_count=comment_count))
    return author, post


class TestAdminAuthorization:
    """Every admin use case refuses non-admin actors."""

    @pytest.mark.asyncio
    async def test_list_comments_requires_admin(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(AuthorizationError):
            await use_case.execute(ListCommentsRequest(actor=READER))

    @pytest.mark.asyncio
    async def test_bulk_moderation_requires_admin(self, unit_env):
        # Arrange
        use_case = await unit_env.get(BulkModerateUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed(unit_env)
        comment = await comment_repo.save(make_comment(post.id, author.id))

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await use_case.execute(
                BulkModerateRequest(
                    actor=READER,
                    comment_ids=[str(comment.id)],
                    action=ModerationAction.DELETE,
                )
            )
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_dashboard_requires_admin(self, unit_env):
        use_case = await unit_env.get(GetDashboardUseCase)

        with pytest.raises(AuthorizationError):
            await use_case.execute(GetDashboardRequest(actor=READER))

    @pytest.mark.asyncio
    async def test_stats_requires_admin(self, unit_env):
        use_case = await unit_env.get(GetStatsUseCase)

        with pytest.raises(AuthorizationError):
            await use_case.execute(GetStatsRequest(actor=READER))


class TestModerationQueue:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_pending_queue_shows_moderation_details(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed(unit_env)
        pending = await comment_repo.save(
            make_comment(
                post.id, author.id, status=CommentStatus.PENDING, spam_score=80
            )
        )
        await comment_repo.save(make_comment(post.id, author.id))

        # Act
        response = await use_case.execute(
            ListCommentsRequest(actor=ADMIN, status=CommentStatus.PENDING)
        )

        # Assert
        assert response.total == 1
        assert response.total_pages == 1
        item = response.comments[0]
        assert item.comment_id == str(pending.id)
        assert item.spam_score == 80


class TestUpdateCommentStatus:
    """Tests for UpdateCommentStatusUseCase."""

    @pytest.mark.asyncio
    async def test_approve_pending_comment(self, unit_env):
        use_case = await unit_env.get(UpdateCommentStatusUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed(unit_env)
        comment = await comment_repo.save(
            make_comment(post.id, author.id, status=CommentStatus.PENDING)
        )

        item = await use_case.execute(
            UpdateCommentStatusRequest(
                actor=ADMIN, comment_id=str(comment.id), status=CommentStatus.APPROVED
            )
        )

        assert item.status == CommentStatus.APPROVED


class TestBulkModerate:
    """Tests for BulkModerateUseCase."""

    @pytest.mark.asyncio
    async def test_bulk_delete_reports_post_counts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(BulkModerateUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed(unit_env, comment_count=3)
        comments = [
            await comment_repo.save(make_comment(post.id, author.id)) for _ in range(3)
        ]

        # Act
        response = await use_case.execute(
            BulkModerateRequest(
                actor=ADMIN,
                comment_ids=[str(c.id) for c in comments[:2]],
                action=ModerationAction.DELETE,
            )
        )

        # Assert
        assert response.count == 2
        assert response.comment_counts == {str(post.id): 1}

    @pytest.mark.asyncio
    async def test_bulk_spam(self, unit_env):
        use_case = await unit_env.get(BulkModerateUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed(unit_env)
        comment = await comment_repo.save(make_comment(post.id, author.id))

        response = await use_case.execute(
            BulkModerateRequest(
                actor=ADMIN,
                comment_ids=[str(comment.id)],
                action=ModerationAction.SPAM,
            )
        )

        assert response.count == 1
        assert (await comment_repo.find_by_id(comment.id)).status == CommentStatus.SPAM


class TestRecountPost:
    """Tests for RecountPostUseCase."""

    @pytest.mark.asyncio
    async def test_recount_repairs_drift(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RecountPostUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed(unit_env, comment_count=10)
        await comment_repo.save(make_comment(post.id, author.id))

        # Act
        response = await use_case.execute(
            RecountPostRequest(actor=ADMIN, post_id=str(post.id))
        )

        # Assert
        assert response.previous_count == 10
        assert response.comment_count == 1

    @pytest.mark.asyncio
    async def test_recount_missing_post(self, unit_env):
        use_case = await unit_env.get(RecountPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(RecountPostRequest(actor=ADMIN, post_id=str(uuid4())))


class TestDashboardAndStats:
    """Tests for GetDashboardUseCase and GetStatsUseCase."""

    @pytest.mark.asyncio
    async def test_dashboard_lists_recent_activity(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetDashboardUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed(unit_env, comment_count=1)
        await comment_repo.save(make_comment(post.id, author.id))

        # Act
        response = await use_case.execute(GetDashboardRequest(actor=ADMIN))

        # Assert
        assert response.stats.total_users == 1
        assert response.recent_users[0].username == "author"
        assert response.recent_posts[0].post_id == str(post.id)
        assert response.top_posts[0].comment_count == 1
        assert len(response.recent_comments) == 1

    @pytest.mark.asyncio
    async def test_stats_break_down_comments(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetStatsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed(unit_env)
        await comment_repo.save(make_comment(post.id, author.id))
        await comment_repo.save(
            make_comment(post.id, author.id, status=CommentStatus.PENDING)
        )
        await comment_repo.save(
            make_comment(post.id, author.id, status=CommentStatus.SPAM)
        )

        # Act
        response = await use_case.execute(GetStatsRequest(actor=ADMIN))

        # Assert
        assert response.users.total == 1
        assert response.users.new_this_week == 0  # account is 30 days old
        assert response.posts.new_this_month == 1
        assert response.comments.total == 3
        assert response.comments.new_this_week == 3
        assert response.comments.pending == 1
        assert response.comments.spam == 1
