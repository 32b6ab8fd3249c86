"""Fixed administrator roster.

Administrators are configured out of band and never touch the user store.
Every flow consults the roster first so that an email can never belong to
both an administrator and a self-registered account.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from smartparenting.auth.passwords import PasswordHasher
from smartparenting.core.settings import AdminAccountConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminRecord:
    """Administrator identity. Same shape as a user record, fixed state."""

    id: str
    name: str
    email: str
    password_hash: str
    role: str = "admin"
    is_active: bool = True
    is_verified: bool = True
    is_blocked: bool = False


class AdminRoster:
    """Immutable set of administrators keyed by exact (case-sensitive) email."""

    def __init__(self, admins: Iterable[AdminRecord] = ()) -> None:
        records = tuple(admins)
        by_email: dict[str, AdminRecord] = {}
        for admin in records:
            if admin.email in by_email:
                raise ValueError(f"duplicate admin email in roster: {admin.email!r}")
            by_email[admin.email] = admin
        self._admins = records
        self._by_email = MappingProxyType(by_email)

    def is_admin_email(self, email: object) -> bool:
        return isinstance(email, str) and bool(email) and email in self._by_email

    def find_admin(self, email: str | None) -> AdminRecord | None:
        if not email:
            return None
        return self._by_email.get(email)

    def __iter__(self) -> Iterator[AdminRecord]:
        return iter(self._admins)

    def __len__(self) -> int:
        return len(self._admins)


def build_admin_roster(
    accounts: Iterable[AdminAccountConfig], hasher: PasswordHasher
) -> AdminRoster:
    """Build the roster from configuration, hashing plaintext passwords once."""
    admins = []
    for account in accounts:
        password_hash = account.password_hash
        if not password_hash:
            logger.warning(
                "Admin account %s is configured with a plaintext password; "
                "prefer password_hash in production.",
                account.email,
            )
            password_hash = hasher.hash(account.password or "")
        admins.append(
            AdminRecord(
                id=account.id,
                name=account.name,
                email=account.email,
                password_hash=password_hash,
            )
        )
    roster = AdminRoster(admins)
    logger.info("Loaded %d administrator account(s)", len(roster))
    return roster
