"""User domain models.

SQLModel table definition for self-registered accounts. Administrators are
never stored here; they come from the fixed roster in
``smartparenting.admin.roster``.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from smartparenting.core.mixins import TimestampMixin


class UserRole(str, Enum):
    """Roles a self-registered account may hold.

    - user: regular account, verified on creation
    - expert: domain expert, unverified until an administrator approves
    """

    user = "user"
    expert = "expert"


class UserRecord(TimestampMixin, SQLModel, table=True):
    """Stored identity of a regular user or expert.

    Note: password_hash is internal-only and must never be exposed in API
    responses; use ``UserPublic`` for anything that leaves the service.
    """

    __tablename__: str = "users"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=255)
    email: str = Field(index=True, unique=True, max_length=255)
    phone: str = Field(index=True, unique=True, max_length=32)
    password_hash: str
    role: UserRole = Field(max_length=20)
    gender: str | None = Field(default=None, max_length=50)
    address: str | None = Field(default=None)
    date_of_birth: str | None = Field(default=None, max_length=50)
    expert_info: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))
    profile_photo: str | None = Field(default=None)
    is_active: bool = Field(default=True)
    is_verified: bool = Field(default=True)
    is_blocked: bool = Field(default=False)
    last_login: datetime | None = Field(default=None)
