"""Auth domain router.

Thin HTTP handlers for the admin portal login, regular login and bearer
token introspection. Business rules live in ``AuthService``.

Handlers are plain ``def`` so bcrypt runs in the threadpool rather than on
the event loop.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from smartparenting.auth.dependencies import (
    AuthServiceDep,
    CurrentClaimsDep,
    require_admin,
)
from smartparenting.auth.schemas import (
    AdminLoginRequest,
    AdminLoginResponse,
    LoginRequest,
    LoginResponse,
    TokenClaimsRead,
)
from smartparenting.auth.tokens import TokenClaims
from smartparenting.core.constants import CommonResponses, Routes

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.SERVER_ERROR},
)


@router.post("/admin/login", response_model=AdminLoginResponse)
def admin_login(payload: AdminLoginRequest, auth: AuthServiceDep):
    """Log in a fixed administrator and return an admin-origin token."""
    result = auth.admin_login(payload.email, payload.password)
    return AdminLoginResponse(token=result.token, user=result.user)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={**CommonResponses.FORBIDDEN},
)
def login(payload: LoginRequest, auth: AuthServiceDep):
    """Log in a user or expert by email or phone.

    Admin emails are refused here; administrators use /api/admin/login.
    """
    result = auth.login(
        email=payload.email,
        phone=payload.phone,
        password=payload.password,
    )
    return LoginResponse(token=result.token, user=result.user)


def _claims_read(claims: TokenClaims) -> TokenClaimsRead:
    return TokenClaimsRead(
        id=claims.id,
        email=claims.email,
        role=claims.role,
        name=claims.name,
        is_fixed_admin=claims.is_fixed_admin,
        expires_at=claims.expires_at,
    )


@router.get("/me", response_model=TokenClaimsRead)
def read_me(claims: CurrentClaimsDep):
    """Return the claims of the presented bearer token."""
    return _claims_read(claims)


@router.get(
    "/admin/me",
    response_model=TokenClaimsRead,
    responses={**CommonResponses.FORBIDDEN},
)
def read_admin_me(claims: Annotated[TokenClaims, Depends(require_admin)]):
    """Return the claims of an admin-portal token; other tokens get 403."""
    return _claims_read(claims)
