"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from blog.config import AuthSettings
from blog.domain.service import JWTService
from blog.domain.value import UserRole
from blog.util.jwt import JWTError

SECRET = "unit-test-secret-key-with-enough-bytes"


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(AuthSettings(jwt_secret=SECRET))


class TestJWTService:
    """Tests for token round trips and actor resolution."""

    def test_actor_from_valid_token(self, jwt_service):
        # Arrange
        user_id = str(uuid4())
        token = jwt_service.create_token(user_id, "moderator", UserRole.ADMIN)

        # Act
        actor = jwt_service.get_actor_from_token(token)

        # Assert
        assert str(actor.user_id) == user_id
        assert actor.username == "moderator"
        assert actor.is_admin

    def test_missing_token_is_anonymous(self, jwt_service):
        assert jwt_service.get_actor_from_token(None) is None

    def test_garbage_token_is_anonymous(self, jwt_service):
        assert jwt_service.get_actor_from_token("not-a-jwt") is None

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret=SECRET[::-1]))
        token = other.create_token(str(uuid4()), "mallory")

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    def test_expired_token_is_rejected(self):
        service = JWTService(AuthSettings(jwt_secret=SECRET, jwt_expiry_days=-1))
        token = service.create_token(str(uuid4()), "alice")

        assert service.get_actor_from_token(token) is None
