class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when the bearer token is missing or invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a requested record does not exist for the caller."""


class BackendError(Exception):
    """Raised when the hosted backend answers with an error."""

    def __init__(self, message: str, *, status_code: int = 500, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
