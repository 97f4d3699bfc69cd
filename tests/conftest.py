"""
Shared pytest fixtures.

Uses a throwaway SQLite file so no Postgres is required for tests.
Tables are emptied before every test; "today" is pinned via FixedClock.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import habitlog.models  # noqa: F401
from habitlog.core.clock import FixedClock, get_clock
from habitlog.db.base import Base, get_db
from habitlog.main import app

SQLITE_URL = "sqlite:///./test_habitlog.db"

engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TODAY = date(2026, 10, 14)       # a Wednesday
WEEK_START = date(2026, 10, 12)  # its Monday


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def empty_tables(create_tables):
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture()
def db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def clock():
    return FixedClock(TODAY)


@pytest.fixture()
def client(clock):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
