"""Auth domain exceptions.

Login refusals. Messages are returned to the caller verbatim.
"""

from smartparenting.core.exceptions import AuthenticationError, AuthorizationError


# Authentication errors (401)
class InvalidAdminCredentialsError(AuthenticationError):
    """Raised for any failed admin login.

    Unknown email and wrong password share this error so the roster
    cannot be enumerated.
    """

    error_type = "invalid_credentials"

    def __init__(self, message: str = "Invalid admin credentials"):
        super().__init__(message)


class MustUseAdminPortalError(AuthenticationError):
    """Raised when an admin email is used on the regular login endpoint."""

    error_type = "must_use_admin_portal"

    def __init__(self, message: str = "Admin must login through admin portal"):
        super().__init__(message)


class UserNotFoundError(AuthenticationError):
    error_type = "user_not_found"

    def __init__(self, message: str = "User not found. Please register first."):
        super().__init__(message)


class InvalidPasswordError(AuthenticationError):
    error_type = "invalid_password"

    def __init__(self, message: str = "Invalid password"):
        super().__init__(message)


# Authorization errors (403): account state blocks login until changed out of band
class PendingVerificationError(AuthorizationError):
    error_type = "pending_verification"

    def __init__(
        self, message: str = "Your expert account is pending verification by admin."
    ):
        super().__init__(message)


class AccountBlockedError(AuthorizationError):
    error_type = "account_blocked"

    def __init__(self, message: str = "Account is blocked. Please contact admin."):
        super().__init__(message)


class AccountDeactivatedError(AuthorizationError):
    error_type = "account_deactivated"

    def __init__(self, message: str = "Account is deactivated."):
        super().__init__(message)


class AdminRequiredError(AuthorizationError):
    """Raised when admin privileges are required."""

    error_type = "admin_required"

    def __init__(self, message: str = "Admin privileges required"):
        super().__init__(message)
