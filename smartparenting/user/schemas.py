"""User domain schemas.

Request and response schemas for registration and account views.

Security notes:
- UserPublic and AdminPublic have no password field at all; a record can only
  leave the service through one of them
- JSON field names are camelCase (isVerified, expertInfo, ...)
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from smartparenting.user.models import UserRecord, UserRole

if TYPE_CHECKING:
    from smartparenting.admin.roster import AdminRecord


class CamelModel(BaseModel):
    """Base for API schemas exchanged in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserRegister(CamelModel):
    """Request schema for registration.

    Every field accepts any JSON value: the registration flow checks them in
    a fixed order and reports the first failure itself, so a body asking for
    the admin role is refused whatever the other fields hold.
    """

    name: Any = None
    email: Any = None
    phone: Any = None
    password: Any = None
    role: Any = None
    gender: Any = None
    address: Any = None
    date_of_birth: Any = None
    expert_info: Any = None


def _iso_utc(value: datetime) -> str:
    # SQLite hands back naive datetimes; they were written as UTC.
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    else:
        value = value.replace(tzinfo=UTC)
    return value.replace(microsecond=0).isoformat().replace("+00:00", "Z")


class UserPublic(CamelModel):
    """Outward view of a stored user record."""

    id: str
    name: str
    email: str
    phone: str
    role: UserRole
    gender: str | None = None
    address: str | None = None
    date_of_birth: str | None = None
    expert_info: dict[str, Any] | None = None
    profile_photo: str | None = None
    is_active: bool
    is_verified: bool
    is_blocked: bool
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserPublic":
        return cls.model_validate(record)

    @field_serializer("created_at", "updated_at", "last_login")
    def serialize_datetime(self, value: datetime | None) -> str | None:
        """Format datetimes as ISO 8601 in UTC with a Z suffix."""
        if value is None:
            return None
        return _iso_utc(value)


class AdminPublic(CamelModel):
    """Outward view of a roster administrator."""

    id: str
    name: str
    email: str
    role: Literal["admin"] = "admin"
    is_active: bool = True
    is_verified: bool = True
    is_blocked: bool = False

    @classmethod
    def from_record(cls, admin: "AdminRecord") -> "AdminPublic":
        return cls.model_validate(admin)


class RegisterResponse(CamelModel):
    message: str
    user: UserPublic


class Availability(CamelModel):
    """Result of an email or phone availability check."""

    available: bool
    message: str | None = None
