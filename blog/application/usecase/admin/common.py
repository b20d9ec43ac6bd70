"""Helpers shared by admin use cases."""

from blog.domain.error import AuthorizationError
from blog.domain.value import Actor


def require_admin(actor: Actor, action: str, resource: str, resource_id: str) -> None:
    """Raise unless ``actor`` has the admin role.

    Raises:
        AuthorizationError: If the actor is not an admin
    """
    if not actor.is_admin:
        raise AuthorizationError(action, resource, resource_id, str(actor.user_id))
