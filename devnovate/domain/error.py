"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input, e.g. an empty comment."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the actor lacks the authority for an operation."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class InvalidTransitionError(DomainError):
    """Raised when a status change is not an edge of the moderation graph."""

    def __init__(self, current: str, action: str):
        self.current = current
        self.action = action
        super().__init__(f"Cannot {action} a blog that is {current}")


class ConflictError(DomainError):
    """Store-level contention; the caller may retry."""

    pass
