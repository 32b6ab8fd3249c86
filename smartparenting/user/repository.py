"""Identity repository for self-registered accounts.

Flows depend on the ``UserRepository`` protocol only. ``SQLUserRepository``
stores records through a SQLModel session and commits on every write.
"""

import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Any, Protocol

from sqlmodel import Session, select

from smartparenting.user.models import UserRecord

# Shared by every repository instance in the process: sessions are per request
# but the uniqueness checks must serialize across requests.
_WRITE_LOCK = threading.Lock()


class UserRepository(Protocol):
    """Storage operations the registration and login flows rely on."""

    def find_by_email(self, email: str) -> UserRecord | None: ...

    def find_by_phone(self, phone: str) -> UserRecord | None: ...

    def append(self, record: UserRecord) -> UserRecord: ...

    def update_in_place(self, record: UserRecord, **changes: Any) -> UserRecord: ...

    def persist(self) -> None: ...

    def write_lock(self) -> AbstractContextManager[None]:
        """Hold exclusive access for a read-then-write sequence."""
        ...


class SQLUserRepository:
    """UserRepository backed by a SQLModel session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_email(self, email: str) -> UserRecord | None:
        return self._session.exec(
            select(UserRecord).where(UserRecord.email == email)
        ).first()

    def find_by_phone(self, phone: str) -> UserRecord | None:
        return self._session.exec(
            select(UserRecord).where(UserRecord.phone == phone)
        ).first()

    def append(self, record: UserRecord) -> UserRecord:
        self._session.add(record)
        self.persist()
        self._session.refresh(record)
        return record

    def update_in_place(self, record: UserRecord, **changes: Any) -> UserRecord:
        for key, value in changes.items():
            if not hasattr(record, key):
                raise AttributeError(f"UserRecord has no field {key!r}")
            setattr(record, key, value)
        self._session.add(record)
        self.persist()
        self._session.refresh(record)
        return record

    def persist(self) -> None:
        """Commit pending changes, rolling back if the commit fails."""
        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        with _WRITE_LOCK:
            yield
