class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400
    public_message = "Bad request"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400

    @property
    def public_message(self) -> str:
        return str(self) or "Validation failed"


class ForbiddenError(DomainError):
    """Raised when the caller's role lacks permission for an action."""

    status_code = 403
    public_message = "Forbidden"


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    status_code = 404
    public_message = "Employee not found"


class StorageError(DomainError):
    """Raised when the record store fails; details are logged, never returned."""

    status_code = 500
    public_message = "Server error"
