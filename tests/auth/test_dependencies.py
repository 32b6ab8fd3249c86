"""Tests for smartparenting/auth/dependencies.py."""

from unittest.mock import MagicMock

import pytest

from smartparenting.auth import dependencies
from smartparenting.auth.dependencies import (
    get_admin_roster,
    get_current_claims,
    get_password_hasher,
    get_token_issuer,
    require_admin,
)
from smartparenting.auth.exceptions import AdminRequiredError
from smartparenting.core.exceptions import InvalidTokenError
from smartparenting.core.settings import AdminAccountConfig, Settings


@pytest.fixture
def fresh_caches(monkeypatch):
    """Point the cached factories at test settings and reset their caches."""
    settings = Settings(
        _env_file=None,
        jwt_secret="dependency-test-secret-with-32-bytes!!",
        bcrypt_rounds=4,
        admin_accounts=[
            AdminAccountConfig(
                id="admin_007", name="Ops", email="ops@sp.com", password="opspass"
            )
        ],
    )
    monkeypatch.setattr(dependencies, "get_settings", lambda: settings)
    for factory in (get_password_hasher, get_token_issuer, get_admin_roster):
        factory.cache_clear()
    yield settings
    for factory in (get_password_hasher, get_token_issuer, get_admin_roster):
        factory.cache_clear()


def test_factories_build_from_settings(fresh_caches):
    roster = get_admin_roster()

    assert roster is get_admin_roster()
    admin = roster.find_admin("ops@sp.com")
    assert admin.id == "admin_007"
    assert get_password_hasher().verify("opspass", admin.password_hash)

    token = get_token_issuer().issue(
        user_id="u", email="u@x.com", role="user", name=None
    )
    assert get_token_issuer().verify(token).id == "u"


def _credentials(token: str):
    credentials = MagicMock()
    credentials.credentials = token
    return credentials


def test_get_current_claims_valid(tokens):
    token = tokens.issue(user_id="user_1", email="a@x.com", role="user", name="A")

    claims = get_current_claims(tokens, _credentials(token))

    assert claims.id == "user_1"


def test_get_current_claims_missing(tokens):
    with pytest.raises(InvalidTokenError) as exc_info:
        get_current_claims(tokens, None)

    assert exc_info.value.message == "Not authenticated"


def test_get_current_claims_invalid(tokens):
    with pytest.raises(InvalidTokenError):
        get_current_claims(tokens, _credentials("garbage"))


def test_require_admin_accepts_admin_portal_token(tokens):
    token = tokens.issue(
        user_id="admin_001",
        email="admin@smartparenting.com",
        role="admin",
        name="Admin",
        is_fixed_admin=True,
    )

    claims = require_admin(tokens.verify(token))

    assert claims.id == "admin_001"


def test_require_admin_refuses_role_without_flag(tokens):
    token = tokens.issue(user_id="x", email="x@x.com", role="admin", name="X")

    with pytest.raises(AdminRequiredError) as exc_info:
        require_admin(tokens.verify(token))

    assert exc_info.value.status_code == 403
