"""Unit tests for request authentication helpers."""

from uuid import uuid4

import pytest
from fastapi import HTTPException

from blog.config import AuthSettings
from blog.domain.service import JWTService
from blog.domain.value import UserRole
from blog.interface.api.auth import extract_token, require_actor, require_admin_actor

SECRET = "interface-test-secret-with-enough-bytes"
jwt_service = JWTService(AuthSettings(jwt_secret=SECRET))


class TestExtractToken:
    """Token lookup order."""

    def test_cookie_wins(self):
        assert extract_token("cookie", "Bearer header") == "cookie"

    def test_bearer_header(self):
        assert extract_token(None, "Bearer abc.def") == "abc.def"

    def test_other_schemes_are_ignored(self):
        assert extract_token(None, "Basic dXNlcjpwYXNz") is None

    def test_nothing_supplied(self):
        assert extract_token(None, None) is None


class TestRequireActor:
    """Actor resolution and role checks."""

    def test_missing_token_is_401(self):
        with pytest.raises(HTTPException) as exc:
            require_actor(jwt_service, None, None)
        assert exc.value.status_code == 401

    def test_valid_token(self):
        token = jwt_service.create_token(str(uuid4()), "alice")
        actor = require_actor(jwt_service, None, f"Bearer {token}")
        assert actor.username == "alice"

    def test_non_admin_is_403(self):
        token = jwt_service.create_token(str(uuid4()), "alice")
        with pytest.raises(HTTPException) as exc:
            require_admin_actor(jwt_service, token, None)
        assert exc.value.status_code == 403

    def test_admin_passes(self):
        token = jwt_service.create_token(str(uuid4()), "root", UserRole.ADMIN)
        assert require_admin_actor(jwt_service, token, None).is_admin
