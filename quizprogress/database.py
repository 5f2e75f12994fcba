"""SQLAlchemy engine and request-scoped sessions."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, make_url
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from quizprogress.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base shared by every ORM model."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def engine_options(database_url: str) -> dict[str, Any]:
    """Pool settings suited to the database behind `database_url`."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True, "pool_recycle": 1800}

    # FastAPI runs endpoints in worker threads
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # An in-memory database lives and dies with its single connection
        options["poolclass"] = StaticPool
    return options


def initialize_database(settings: Settings) -> sessionmaker[Session]:
    """Create the engine and session factory; called from the app lifespan."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))
    _session_factory = sessionmaker(bind=_engine, autoflush=False)
    return _session_factory


def dispose_engine() -> None:
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    return _session_factory or initialize_database(settings)


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """One session per request, closed when the response is done."""
    with session_factory() as session:
        yield session


DatabaseSession = Annotated[Session, Depends(get_db)]
