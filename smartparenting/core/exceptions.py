"""App-wide exception hierarchy.

Every error a flow can refuse with is an ``AppException`` carrying its own
HTTP status code and a stable ``error_type``. Handlers in
``smartparenting.core.exception_handlers`` turn them into ``{"error": message}``.
"""


class AppException(Exception):
    """Base exception for all application errors.

    All custom exceptions inherit from this class and define their own
    status_code and error_type for consistent API responses.
    """

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


# Validation errors (400)
class ValidationError(AppException):
    """Base class for client-correctable input errors."""

    status_code = 400
    error_type = "validation_error"

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message)


# Conflict errors (400): the identifier is already taken
class ConflictError(AppException):
    """Base class for uniqueness conflicts on registration."""

    status_code = 400
    error_type = "conflict"

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message)


# Authentication errors (401)
class AuthenticationError(AppException):
    """Base class for credential failures."""

    status_code = 401
    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is missing, invalid or expired."""

    error_type = "invalid_token"

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message)


# Authorization errors (403)
class AuthorizationError(AppException):
    """Base class for refusals that depend on account state or role."""

    status_code = 403
    error_type = "authorization_error"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


# Internal errors (500)
class InternalError(AppException):
    """Raised when the store, hasher or signer fails."""

    status_code = 500
    error_type = "internal_error"

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
