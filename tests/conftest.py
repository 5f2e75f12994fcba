"""Shared fixtures: a controllable clock and an in-memory database behind the app."""

from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from quizprogress import models  # noqa: F401  (registers tables on Base.metadata)
from quizprogress.core import container
from quizprogress.database import Base, engine_options, get_db
from quizprogress.main import app

TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(TEST_DATABASE_URL, **engine_options(TEST_DATABASE_URL))
TestSessionLocal = sessionmaker(bind=test_engine, autoflush=False)

START_TIME = datetime(2026, 1, 5, 10, 0, tzinfo=UTC)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = START_TIME) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Session on freshly created tables, dropped again afterwards."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session, clock: FixedClock) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and a controllable clock."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with container.clock.override(clock), TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
