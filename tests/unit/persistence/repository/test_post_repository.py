"""Unit tests for PostgresPostRepository counter writes.

A recording session stands in for AsyncSession so the savepoint handling
can be checked without a database.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from blog.domain.value import PostId
from blog.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
)


class RecordingSavepoint:
    """Async context manager mirroring ``AsyncSession.begin_nested()``."""

    def __init__(self) -> None:
        self.released = False
        self.rolled_back = False

    async def __aenter__(self) -> "RecordingSavepoint":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.released = True
        else:
            self.rolled_back = True
        return False


class ScalarResult:
    def __init__(self, value: int) -> None:
        self.value = value

    def scalar(self) -> int:
        return self.value


class RecordingSession:
    """Records statements and savepoints; optionally fails every statement."""

    def __init__(self, error: Exception | None = None, scalar: int = 0) -> None:
        self.error = error
        self.scalar = scalar
        self.savepoints: list[RecordingSavepoint] = []
        self.statements: list = []

    def begin_nested(self) -> RecordingSavepoint:
        savepoint = RecordingSavepoint()
        self.savepoints.append(savepoint)
        return savepoint

    async def execute(self, stmt):
        if self.error is not None:
            raise self.error
        self.statements.append(stmt)
        return ScalarResult(self.scalar)

    async def flush(self) -> None:
        pass


def _db_error() -> OperationalError:
    return OperationalError("UPDATE posts", {}, Exception("lock timeout"))


class TestCounterSavepoints:
    """Counter statements run inside their own savepoint."""

    @pytest.mark.asyncio
    async def test_increment_runs_in_a_released_savepoint(self):
        session = RecordingSession()
        repo = PostgresPostRepository(session)

        await repo.increment_comment_count(PostId(uuid4()), 1)

        assert len(session.statements) == 1
        assert len(session.savepoints) == 1
        assert session.savepoints[0].released

    @pytest.mark.asyncio
    async def test_failed_increment_rolls_back_only_its_savepoint(self):
        # Arrange
        session = RecordingSession(error=_db_error())
        repo = PostgresPostRepository(session)

        # Act
        with pytest.raises(OperationalError):
            await repo.increment_comment_count(PostId(uuid4()), 1)

        # Assert
        assert len(session.savepoints) == 1
        assert session.savepoints[0].rolled_back

    @pytest.mark.asyncio
    async def test_failed_set_rolls_back_only_its_savepoint(self):
        session = RecordingSession(error=_db_error())
        repo = PostgresPostRepository(session)

        with pytest.raises(OperationalError):
            await repo.set_comment_count(PostId(uuid4()), 4)

        assert session.savepoints[0].rolled_back

    @pytest.mark.asyncio
    async def test_recount_query_runs_in_a_savepoint(self):
        session = RecordingSession(scalar=6)
        repo = PostgresCommentRepository(session)

        count = await repo.count_by_post(PostId(uuid4()))

        assert count == 6
        assert session.savepoints[0].released

    @pytest.mark.asyncio
    async def test_failed_recount_query_rolls_back_its_savepoint(self):
        session = RecordingSession(error=_db_error())
        repo = PostgresCommentRepository(session)

        with pytest.raises(OperationalError):
            await repo.count_by_post(PostId(uuid4()))

        assert session.savepoints[0].rolled_back
