"""JWT token domain service."""

from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from blog.config import AuthSettings
from blog.domain.value import Actor, UserId, UserRole
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, username: str, role: UserRole = UserRole.USER
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            username: Username
            role: User role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role.value):
            token = create_token(user_id, username, role.value, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, username=username)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_actor_from_token(self, token: str | None) -> Actor | None:
        """Resolve the authenticated actor without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Actor if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Actor(
                user_id=UserId(UUID(payload.user_id)),
                username=payload.username,
                role=UserRole(payload.role),
            )
        except (JWTError, PydanticValidationError, ValueError) as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
