"""Reusable model mixins."""

from datetime import UTC, datetime

from sqlalchemy import text
from sqlmodel import Field


def utc_now() -> datetime:
    """Return current UTC time without microseconds."""
    return datetime.now(UTC).replace(microsecond=0)


class TimestampMixin:
    """Adds created_at and updated_at columns.

    updated_at is refreshed by SQLAlchemy on every UPDATE of the row.
    """

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column_kwargs={
            "server_default": text("CURRENT_TIMESTAMP"),
            "onupdate": utc_now,
        },
    )
