import inspect

import anyio
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from smartparenting.admin.roster import AdminRecord, AdminRoster
from smartparenting.auth.dependencies import (
    get_admin_roster,
    get_password_hasher,
    get_token_issuer,
)
from smartparenting.auth.passwords import PasswordHasher
from smartparenting.auth.service import AuthService
from smartparenting.auth.tokens import TokenIssuer
from smartparenting.db.engine import get_session
from smartparenting.main import app
from smartparenting.user.models import UserRecord, UserRole
from smartparenting.user.repository import SQLUserRepository
from smartparenting.user.service import UserService, new_user_id

ADMIN_EMAIL = "admin@smartparenting.com"
ADMIN_PASSWORD = "admin123"
TEST_SECRET = "test-secret-key-with-at-least-32-bytes!"
USER_PASSWORD = "secret1"


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="session")
def session_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="hasher")
def hasher_fixture() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast.
    return PasswordHasher(rounds=4)


@pytest.fixture(name="tokens")
def tokens_fixture() -> TokenIssuer:
    return TokenIssuer(secret=TEST_SECRET)


@pytest.fixture(name="roster")
def roster_fixture(hasher: PasswordHasher) -> AdminRoster:
    return AdminRoster(
        [
            AdminRecord(
                id="admin_001",
                name="System Administrator",
                email=ADMIN_EMAIL,
                password_hash=hasher.hash(ADMIN_PASSWORD),
            )
        ]
    )


@pytest.fixture(name="repository")
def repository_fixture(session: Session) -> SQLUserRepository:
    return SQLUserRepository(session)


@pytest.fixture(name="user_service")
def user_service_fixture(repository, roster, hasher) -> UserService:
    return UserService(repository, roster, hasher)


@pytest.fixture(name="auth_service")
def auth_service_fixture(repository, roster, hasher, tokens) -> AuthService:
    return AuthService(repository, roster, hasher, tokens)


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session, hasher: PasswordHasher):
    """Factory that stores a user record directly, bypassing registration."""
    counter = iter(range(1, 1000))

    def _make_user(**overrides) -> UserRecord:
        n = next(counter)
        fields = {
            "id": new_user_id(),
            "name": f"User {n}",
            "email": f"user{n}@example.com",
            "phone": f"+1555000{n:04d}",
            "password_hash": hasher.hash(overrides.pop("password", USER_PASSWORD)),
            "role": UserRole.user,
        }
        fields.update(overrides)
        user = UserRecord(**fields)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture(name="client")
def client_fixture(session: Session, hasher, tokens, roster):
    """Create a test client with overridden dependencies."""
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_token_issuer] = lambda: tokens
    app.dependency_overrides[get_admin_roster] = lambda: roster

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
