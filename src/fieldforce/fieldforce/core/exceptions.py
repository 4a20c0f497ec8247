class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(ValidationError):
    """Raised when a referenced entity does not exist."""


class TaskAlreadyCompletedError(ValidationError):
    """Raised when completing a task that already carries a proof."""


class AuthenticationError(DomainError):
    """Raised when an operation needs a logged-in session and there is none."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class LocationUnavailableError(DomainError):
    """Raised when no usable geolocation fix was delivered."""


class SnapshotError(DomainError):
    """Raised when a persisted snapshot cannot be decoded."""
