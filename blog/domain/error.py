"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input: missing content, bad enum value, empty ID set."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced post, comment or user does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Raised when an actor lacks ownership or admin rights."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class DuplicateReportError(DomainError):
    """Raised when a user reports the same comment twice."""

    def __init__(self, comment_id: str, user_id: str):
        self.comment_id = comment_id
        self.user_id = user_id
        super().__init__(f"User {user_id} has already reported comment {comment_id}")


class ConsistencyWarning(UserWarning):
    """A post's comment count could not be brought in line with its comments.

    Emitted with ``warnings.warn``; the triggering operation still succeeds
    and the next recount repairs the drift.
    """

    pass
