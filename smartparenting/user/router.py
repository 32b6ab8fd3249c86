"""User domain router.

Registration and availability checks.
"""

from fastapi import APIRouter, status

from smartparenting.auth.dependencies import UserServiceDep
from smartparenting.core.constants import CommonResponses, Routes
from smartparenting.user.schemas import Availability, RegisterResponse, UserRegister

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    responses={**CommonResponses.SERVER_ERROR},
)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.BAD_REQUEST, **CommonResponses.FORBIDDEN},
)
def register(register_data: UserRegister, users: UserServiceDep):
    """Register a user or expert.

    Experts start unverified and cannot log in until an administrator
    approves them. No token is issued; the client logs in afterwards.
    """
    user = users.register(register_data)
    return RegisterResponse(message="Registration successful. Please login.", user=user)


@router.get(
    "/check-email/{email}",
    response_model=Availability,
    response_model_exclude_none=True,
)
def check_email(email: str, users: UserServiceDep):
    """Report whether an email can still be registered."""
    return users.check_email_available(email)


@router.get(
    "/check-phone/{phone}",
    response_model=Availability,
    response_model_exclude_none=True,
)
def check_phone(phone: str, users: UserServiceDep):
    """Report whether a phone number can still be registered."""
    return users.check_phone_available(phone)
