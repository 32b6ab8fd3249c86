"""Registration and availability checks for self-registered accounts."""

import logging
import uuid

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from smartparenting.admin.roster import AdminRoster
from smartparenting.auth.passwords import PasswordHasher
from smartparenting.core.exceptions import InternalError
from smartparenting.user.exceptions import (
    AdminRegistrationForbiddenError,
    EmailAlreadyExistsError,
    EmailReservedForAdminError,
    InvalidEmailFormatError,
    InvalidFieldValueError,
    InvalidPhoneFormatError,
    InvalidRoleError,
    MissingRequiredFieldError,
    PasswordTooShortError,
    PhoneAlreadyExistsError,
)
from smartparenting.user.models import UserRecord, UserRole
from smartparenting.user.repository import UserRepository
from smartparenting.user.schemas import Availability, UserPublic, UserRegister
from smartparenting.user.validation import (
    is_blank,
    is_long_enough,
    is_valid_email,
    is_valid_phone,
)

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def new_user_id() -> str:
    return f"user_{uuid.uuid4().hex}"


def _check_optional_fields(data: UserRegister, is_expert: bool) -> None:
    for field, value in (
        ("gender", data.gender),
        ("address", data.address),
        ("dateOfBirth", data.date_of_birth),
    ):
        if value is not None and not isinstance(value, str):
            raise InvalidFieldValueError(field)
    # Dropped for plain users, so only an expert's value has to be an object.
    if is_expert and data.expert_info is not None and not isinstance(
        data.expert_info, dict
    ):
        raise InvalidFieldValueError("expertInfo")


class UserService:
    """Creates user records and answers availability questions."""

    def __init__(
        self,
        repository: UserRepository,
        roster: AdminRoster,
        hasher: PasswordHasher,
    ) -> None:
        self._repository = repository
        self._roster = roster
        self._hasher = hasher

    def register(self, data: UserRegister) -> UserPublic:
        """Register a new user or expert.

        Checks run in a fixed order and the first failure is raised. Nothing
        is written until every check has passed.

        Raises:
            AdminRegistrationForbiddenError: role is ``admin``.
            EmailReservedForAdminError: email belongs to the admin roster.
            MissingRequiredFieldError: name, email, phone, password or role blank.
            InvalidRoleError: role is neither ``user`` nor ``expert``.
            InvalidEmailFormatError, PasswordTooShortError, InvalidPhoneFormatError
            InvalidFieldValueError: an optional profile field has the wrong type.
            EmailAlreadyExistsError, PhoneAlreadyExistsError
            InternalError: the store failed.
        """
        if data.role == ADMIN_ROLE:
            raise AdminRegistrationForbiddenError()
        if self._roster.is_admin_email(data.email):
            raise EmailReservedForAdminError()
        required = (data.name, data.email, data.phone, data.password, data.role)
        if any(is_blank(value) for value in required):
            raise MissingRequiredFieldError()
        try:
            role = UserRole(data.role)
        except ValueError as exc:
            raise InvalidRoleError() from exc
        if not is_valid_email(data.email):
            raise InvalidEmailFormatError()
        if not is_long_enough(data.password):
            raise PasswordTooShortError()
        if not is_valid_phone(data.phone):
            raise InvalidPhoneFormatError()
        is_expert = role is UserRole.expert
        _check_optional_fields(data, is_expert)
        self._ensure_unique(data.email, data.phone)

        # Hash before taking the lock; bcrypt is the slow part.
        password_hash = self._hasher.hash(data.password)
        record = UserRecord(
            id=new_user_id(),
            name=data.name,
            email=data.email,
            phone=data.phone,
            password_hash=password_hash,
            role=role,
            gender=data.gender,
            address=data.address,
            date_of_birth=data.date_of_birth,
            expert_info=data.expert_info if is_expert else None,
            profile_photo=None,
            is_active=True,
            is_verified=not is_expert,
            is_blocked=False,
            last_login=None,
        )

        with self._repository.write_lock():
            # Another request may have taken the email or phone meanwhile.
            self._ensure_unique(data.email, data.phone)
            try:
                record = self._repository.append(record)
            except IntegrityError as exc:
                logger.info(
                    "Registration %s lost a uniqueness race",
                    record.id,
                    extra={"user_id": record.id},
                )
                self._ensure_unique(data.email, data.phone)
                raise InternalError("Server error during registration") from exc
            except SQLAlchemyError as exc:
                raise InternalError("Server error during registration") from exc

        logger.info(
            "Registered %s account %s",
            role.value,
            record.id,
            extra={"user_id": record.id, "role": role.value},
        )
        return UserPublic.from_record(record)

    def check_email_available(self, email: str) -> Availability:
        if self._roster.is_admin_email(email):
            return Availability(available=False, message="Email reserved for admin")
        return Availability(available=self._repository.find_by_email(email) is None)

    def check_phone_available(self, phone: str) -> Availability:
        return Availability(available=self._repository.find_by_phone(phone) is None)

    def _ensure_unique(self, email: str, phone: str) -> None:
        if self._repository.find_by_email(email) is not None:
            raise EmailAlreadyExistsError()
        if self._repository.find_by_phone(phone) is not None:
            raise PhoneAlreadyExistsError()
