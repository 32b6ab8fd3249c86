"""Auth domain schemas.

Request and response schemas for login and token introspection.
"""

from datetime import datetime

from smartparenting.user.schemas import AdminPublic, CamelModel, UserPublic


class AdminLoginRequest(CamelModel):
    """Request schema for the admin portal login."""

    email: str | None = None
    password: str | None = None


class LoginRequest(CamelModel):
    """Request schema for regular login by email or phone."""

    email: str | None = None
    phone: str | None = None
    password: str | None = None


class AdminLoginResponse(CamelModel):
    token: str
    user: AdminPublic
    message: str = "Admin login successful"


class LoginResponse(CamelModel):
    token: str
    user: UserPublic
    message: str = "Login successful"


class TokenClaimsRead(CamelModel):
    """Claims of the bearer token presented on the request."""

    id: str
    email: str
    role: str
    name: str | None
    is_fixed_admin: bool
    expires_at: datetime
