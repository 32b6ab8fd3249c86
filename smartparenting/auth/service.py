"""Authentication flows.

Two entry points, kept apart on purpose:

- ``admin_login`` authenticates against the fixed admin roster only and
  never reads the user store.
- ``login`` authenticates self-registered users and experts and refuses
  admin emails outright, even with the correct admin password.

The regular flow checks account state *before* the password, so a blocked or
unverified account cannot be used to probe passwords. The price is that the
refusal reason (unknown, pending, blocked, deactivated, wrong password) is
visible to the caller.
"""

import logging
from dataclasses import dataclass

import jwt
from sqlalchemy.exc import SQLAlchemyError

from smartparenting.admin.roster import AdminRoster
from smartparenting.auth.exceptions import (
    AccountBlockedError,
    AccountDeactivatedError,
    InvalidAdminCredentialsError,
    InvalidPasswordError,
    MustUseAdminPortalError,
    PendingVerificationError,
    UserNotFoundError,
)
from smartparenting.auth.passwords import PasswordHasher
from smartparenting.auth.tokens import TokenIssuer
from smartparenting.core.exceptions import InternalError
from smartparenting.core.mixins import utc_now
from smartparenting.user.models import UserRecord, UserRole
from smartparenting.user.repository import UserRepository
from smartparenting.user.schemas import AdminPublic, UserPublic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Token plus the public view of whoever logged in."""

    token: str
    user: UserPublic | AdminPublic


class AuthService:
    def __init__(
        self,
        repository: UserRepository,
        roster: AdminRoster,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._repository = repository
        self._roster = roster
        self._hasher = hasher
        self._tokens = tokens

    def admin_login(self, email: str | None, password: str | None) -> LoginResult:
        """Authenticate a roster administrator.

        Raises:
            InvalidAdminCredentialsError: unknown admin email or wrong password.
            InternalError: the token could not be signed.
        """
        admin = self._roster.find_admin(email)
        if admin is None:
            raise InvalidAdminCredentialsError()
        if not self._hasher.verify(password or "", admin.password_hash):
            raise InvalidAdminCredentialsError()

        try:
            token = self._tokens.issue(
                user_id=admin.id,
                email=admin.email,
                role=admin.role,
                name=admin.name,
                is_fixed_admin=True,
            )
        except jwt.PyJWTError as exc:
            raise InternalError("Server error during admin login") from exc

        logger.info("Admin %s logged in", admin.id, extra={"user_id": admin.id})
        return LoginResult(token=token, user=AdminPublic.from_record(admin))

    def login(
        self,
        *,
        email: str | None = None,
        phone: str | None = None,
        password: str | None = None,
    ) -> LoginResult:
        """Authenticate a user or expert by email or phone.

        Raises:
            MustUseAdminPortalError: email belongs to the admin roster.
            UserNotFoundError: no record matches, or neither identifier given.
            PendingVerificationError: expert not yet approved.
            AccountBlockedError, AccountDeactivatedError
            InvalidPasswordError: password does not match.
            InternalError: the token could not be signed or last_login not saved.
        """
        if email and self._roster.is_admin_email(email):
            raise MustUseAdminPortalError()

        user = self._find_user(email, phone)
        if user is None:
            raise UserNotFoundError()
        self._check_account_state(user)
        if not self._hasher.verify(password or "", user.password_hash):
            raise InvalidPasswordError()

        try:
            token = self._tokens.issue(
                user_id=user.id,
                email=user.email,
                role=user.role.value,
                name=user.name,
            )
            user = self._repository.update_in_place(user, last_login=utc_now())
        except (jwt.PyJWTError, SQLAlchemyError) as exc:
            raise InternalError("Server error during login") from exc

        logger.info(
            "User %s logged in",
            user.id,
            extra={"user_id": user.id, "role": user.role.value},
        )
        return LoginResult(token=token, user=UserPublic.from_record(user))

    def _find_user(self, email: str | None, phone: str | None) -> UserRecord | None:
        # Email wins when both are supplied; phone is only a fallback.
        user = None
        if email:
            user = self._repository.find_by_email(email)
        if user is None and phone:
            user = self._repository.find_by_phone(phone)
        return user

    @staticmethod
    def _check_account_state(user: UserRecord) -> None:
        if user.role == UserRole.expert and not user.is_verified:
            raise PendingVerificationError()
        if user.is_blocked:
            raise AccountBlockedError()
        if not user.is_active:
            raise AccountDeactivatedError()
