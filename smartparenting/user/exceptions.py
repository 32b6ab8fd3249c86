"""User domain exceptions.

Registration refusals, in the order the registration flow checks them.
"""

from smartparenting.core.exceptions import (
    AuthorizationError,
    ConflictError,
    ValidationError,
)


class AdminRegistrationForbiddenError(AuthorizationError):
    """Raised when a registration asks for the admin role."""

    error_type = "admin_registration_forbidden"

    def __init__(self, message: str = "Admin registration is not allowed"):
        super().__init__(message)


class EmailReservedForAdminError(AuthorizationError):
    """Raised when a registration uses an email from the admin roster."""

    error_type = "email_reserved_for_admin"

    def __init__(self, message: str = "This email is reserved for system admin"):
        super().__init__(message)


class MissingRequiredFieldError(ValidationError):
    error_type = "missing_required_field"

    def __init__(self, message: str = "All required fields must be filled"):
        super().__init__(message)


class InvalidRoleError(ValidationError):
    error_type = "invalid_role"

    def __init__(self, message: str = "Role must be either user or expert"):
        super().__init__(message)


class InvalidEmailFormatError(ValidationError):
    error_type = "invalid_email_format"

    def __init__(self, message: str = "Please enter a valid email address"):
        super().__init__(message)


class PasswordTooShortError(ValidationError):
    error_type = "password_too_short"

    def __init__(self, message: str = "Password must be at least 6 characters"):
        super().__init__(message)


class InvalidPhoneFormatError(ValidationError):
    error_type = "invalid_phone_format"

    def __init__(self, message: str = "Please enter a valid phone number"):
        super().__init__(message)


class InvalidFieldValueError(ValidationError):
    """Raised when an optional profile field has the wrong JSON type."""

    error_type = "invalid_field_value"

    def __init__(self, field: str):
        super().__init__(f"Invalid value for {field}")
        self.field = field


class EmailAlreadyExistsError(ConflictError):
    """Raised when attempting to register with an existing email."""

    error_type = "email_already_exists"

    def __init__(self, message: str = "User with this email already exists"):
        super().__init__(message)


class PhoneAlreadyExistsError(ConflictError):
    """Raised when attempting to register with an existing phone number."""

    error_type = "phone_already_exists"

    def __init__(self, message: str = "User with this phone number already exists"):
        super().__init__(message)
