class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400


class PolicyError(DomainError):
    """Raised when an action falls outside the permitted work window or geofence."""

    status_code = 400


class ConflictError(DomainError):
    """Raised when the current state of a record forbids the requested transition."""

    status_code = 400


class NotFoundError(DomainError):
    status_code = 404


class AuthenticationError(DomainError):
    """Raised when credentials or bearer tokens are missing or invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403


class InternalError(DomainError):
    """Storage or unexpected failure. Message is never shown to API callers."""

    status_code = 500
    public_message = "Internal server error"


class StorageError(InternalError):
    pass


class DuplicateRecordError(StorageError):
    """A unique index rejected an insert."""


class PoolTimeoutError(InternalError):
    """No pooled connection became available within the acquisition timeout."""

    status_code = 503
    public_message = "Database busy, try again later"
