from collections.abc import Generator

from sqlmodel import Session, SQLModel, create_engine

from smartparenting.core.settings import get_settings

_settings = get_settings()

connect_args: dict[str, object] = {}
if _settings.database_url.startswith("sqlite"):
    # Routes run in the threadpool; SQLite connections cross threads.
    connect_args = {"check_same_thread": False}

engine = create_engine(_settings.database_url, echo=False, connect_args=connect_args)


def init_db() -> None:
    """Create the tables registered on SQLModel.metadata."""
    # Imported for its side effect of registering the users table.
    from smartparenting.user import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
