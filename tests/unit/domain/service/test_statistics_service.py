"""Unit tests for StatisticsService."""

from datetime import datetime, timedelta

import pytest

from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from blog.domain.service import StatisticsService
from blog.domain.service.statistics_service import previous_month_start
from blog.domain.value import CommentStatus
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestStatisticsService:
    """Tests for the admin dashboard aggregates."""

    @pytest.mark.asyncio
    async def test_dashboard_counts(self, unit_env):
        # Arrange
        service = await unit_env.get(StatisticsService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        user = await user_repo.save(make_user())
        await user_repo.save(make_user("bob"))
        quiet = await post_repo.save(make_post(user.id, title="Quiet", comment_count=1))
        busy = await post_repo.save(make_post(user.id, title="Busy", comment_count=3))

        await comment_repo.save(make_comment(busy.id, user.id))
        await comment_repo.save(
            make_comment(busy.id, user.id, status=CommentStatus.PENDING)
        )
        await comment_repo.save(make_comment(busy.id, user.id, status=CommentStatus.SPAM))
        await comment_repo.save(
            make_comment(
                quiet.id, user.id, created_at=datetime.now() - timedelta(days=30)
            )
        )

        # Act
        stats = await service.get_dashboard()

        # Assert
        assert stats.total_users == 2
        assert stats.total_posts == 2
        assert stats.total_comments == 4
        assert stats.pending_comments == 1
        assert stats.spam_comments == 1
        assert stats.new_comments_this_week == 3
        assert len(stats.recent_comments) == 4
        assert [p.id for p in stats.top_posts] == [busy.id, quiet.id]
        assert len(stats.recent_users) == 2
        assert {p.id for p in stats.recent_posts} == {busy.id, quiet.id}

    @pytest.mark.asyncio
    async def test_recent_lists_are_newest_first_and_limited(self, unit_env):
        # Arrange
        service = await unit_env.get(StatisticsService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        users = [
            await user_repo.save(make_user(f"user{i}", age=timedelta(days=i)))
            for i in range(4)
        ]
        author = users[0]
        posts = []
        for i in range(4):
            post = make_post(author.id, title=f"Post {i}")
            post = post.model_copy(
                update={"created_at": datetime.now() - timedelta(days=i)}
            )
            posts.append(await post_repo.save(post))

        # Act
        stats = await service.get_dashboard(recent_limit=2)

        # Assert
        assert [u.id for u in stats.recent_users] == [users[0].id, users[1].id]
        assert [p.id for p in stats.recent_posts] == [posts[0].id, posts[1].id]


class TestSiteStatistics:
    """Tests for the growth windows."""

    NOW = datetime(2026, 3, 15, 12, 0)

    @pytest.mark.asyncio
    async def test_growth_windows(self, unit_env):
        # Arrange
        service = await unit_env.get(StatisticsService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        def created(user_or_post, when):
            return user_or_post.model_copy(update={"created_at": when})

        author = await user_repo.save(
            created(make_user("recent"), datetime(2026, 3, 13))
        )
        await user_repo.save(created(make_user("february"), datetime(2026, 2, 5)))
        await user_repo.save(created(make_user("veteran"), datetime(2025, 12, 20)))

        post = await post_repo.save(
            created(make_post(author.id), datetime(2026, 3, 10))
        )
        await post_repo.save(created(make_post(author.id), datetime(2026, 1, 31)))

        await comment_repo.save(
            make_comment(
                post.id,
                author.id,
                status=CommentStatus.PENDING,
                created_at=datetime(2026, 3, 14),
            )
        )
        await comment_repo.save(
            make_comment(post.id, author.id, created_at=datetime(2026, 2, 1))
        )
        await comment_repo.save(
            make_comment(
                post.id,
                author.id,
                status=CommentStatus.SPAM,
                created_at=datetime(2025, 11, 1),
            )
        )

        # Act
        stats = await service.get_site_stats(now=self.NOW)

        # Assert
        assert (stats.users.total, stats.users.new_this_month) == (3, 2)
        assert stats.users.new_this_week == 1
        assert (stats.posts.total, stats.posts.new_this_month) == (2, 1)
        assert stats.posts.new_this_week == 0
        assert (stats.comments.total, stats.comments.new_this_month) == (3, 2)
        assert stats.comments.new_this_week == 1
        assert stats.pending_comments == 1
        assert stats.spam_comments == 1

    def test_month_window_starts_on_first_of_previous_month(self):
        assert previous_month_start(self.NOW) == datetime(2026, 2, 1)
        assert previous_month_start(datetime(2026, 1, 9, 8, 30)) == datetime(
            2025, 12, 1
        )
