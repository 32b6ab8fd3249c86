"""FastAPI dependencies for the identity flows.

Capabilities (hasher, token issuer, admin roster) are cached per process and
built from Settings. Tests swap any of them through
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from smartparenting.admin.roster import AdminRoster, build_admin_roster
from smartparenting.auth.exceptions import AdminRequiredError
from smartparenting.auth.passwords import PasswordHasher
from smartparenting.auth.service import AuthService
from smartparenting.auth.tokens import TokenClaims, TokenIssuer
from smartparenting.core.deps import SessionDep
from smartparenting.core.exceptions import InvalidTokenError
from smartparenting.core.settings import get_settings
from smartparenting.user.repository import SQLUserRepository, UserRepository
from smartparenting.user.service import UserService

security = HTTPBearer(auto_error=False)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=settings.token_expires_in,
    )


@lru_cache
def get_admin_roster() -> AdminRoster:
    return build_admin_roster(get_settings().admin_accounts, get_password_hasher())


PasswordHasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]
TokenIssuerDep = Annotated[TokenIssuer, Depends(get_token_issuer)]
AdminRosterDep = Annotated[AdminRoster, Depends(get_admin_roster)]


def get_user_repository(session: SessionDep) -> UserRepository:
    return SQLUserRepository(session)


UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_user_service(
    repository: UserRepositoryDep,
    roster: AdminRosterDep,
    hasher: PasswordHasherDep,
) -> UserService:
    return UserService(repository, roster, hasher)


def get_auth_service(
    repository: UserRepositoryDep,
    roster: AdminRosterDep,
    hasher: PasswordHasherDep,
    tokens: TokenIssuerDep,
) -> AuthService:
    return AuthService(repository, roster, hasher, tokens)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def get_current_claims(
    tokens: TokenIssuerDep,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(security)
    ] = None,
) -> TokenClaims:
    """Verify the bearer token and return its claims.

    Raises:
        InvalidTokenError: If no token is supplied, or it is invalid or expired.
    """
    if credentials is None:
        raise InvalidTokenError("Not authenticated")
    return tokens.verify(credentials.credentials)


CurrentClaimsDep = Annotated[TokenClaims, Depends(get_current_claims)]


def require_admin(claims: CurrentClaimsDep) -> TokenClaims:
    """Require a token issued through the admin portal."""
    if claims.role != "admin" or not claims.is_fixed_admin:
        raise AdminRequiredError()
    return claims
