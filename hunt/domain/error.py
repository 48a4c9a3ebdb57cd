"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed input, duplicate email, ...)."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when a caller's identity is missing or cannot be verified."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConcurrentUpdateError(DomainError):
    """Raised by a repository when a conditional write lost a race.

    The stored document changed since it was read; the caller should reload
    and reapply its change.
    """

    def __init__(self, resource: str, identifier: str, expected_version: int):
        self.resource = resource
        self.identifier = identifier
        self.expected_version = expected_version
        super().__init__(
            f"{resource} {identifier} changed since version {expected_version}"
        )


class ConflictError(DomainError):
    """Raised when a change could not be applied after repeated write races."""

    pass
