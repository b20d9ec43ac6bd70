"""Request authentication helpers."""

from fastapi import HTTPException, status

from blog.domain.service import JWTService
from blog.domain.value import Actor


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the JWT from the ``auth_token`` cookie or a Bearer header.

    The cookie wins when both are present.
    """
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
    return None


def require_actor(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> Actor:
    """Resolve the authenticated actor or fail with 401.

    Raises:
        HTTPException: If the token is missing, invalid or expired
    """
    actor = jwt_service.get_actor_from_token(extract_token(auth_token, authorization))
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return actor


def require_admin_actor(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> Actor:
    """Resolve the authenticated actor and require the admin role.

    Raises:
        HTTPException: 401 if unauthenticated, 403 if not an admin
    """
    actor = require_actor(jwt_service, auth_token, authorization)
    if not actor.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return actor
